"""Structured, serializable diff report."""
from dataclasses import asdict, dataclass, field
from typing import Literal, Sequence

from filecheck.db import ChangeRecord, ChangeStatus
from filecheck.db.store import to_json_text


@dataclass
class DiffReport:
    """Outcome of comparing a tree against its baseline."""
    status: Literal["differences", "no_differences"]
    summary: dict[str, int] = field(default_factory=dict)
    changes: list[dict[str, str]] = field(default_factory=list)

    @property
    def has_differences(self) -> bool:
        return self.status == "differences"

    def to_dict(self) -> dict:
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        return to_json_text(self.to_dict(), indent=indent)


def format_report(records: Sequence[ChangeRecord]) -> DiffReport:
    """
    Turn change records into a report.

    Args:
        records: Output of diff_inventories, left untouched

    Returns:
        DiffReport whose status says whether anything changed
    """
    if not records:
        return DiffReport(status="no_differences")

    summary = {status.value: 0 for status in ChangeStatus}
    for record in records:
        summary[record.status.value] += 1

    return DiffReport(
        status="differences",
        summary={k: v for k, v in summary.items() if v},
        changes=[record.to_dict() for record in records],
    )
