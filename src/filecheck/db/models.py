"""Inventory and change records as dataclasses."""
from dataclasses import dataclass, asdict
from enum import Enum
from typing import ClassVar, Optional, Union


ERROR_DIGEST = "ERROR"


class ChangeStatus(str, Enum):
    """Change classification, in reporting order."""
    MOVED = "Moved"
    RENAMED = "Renamed"
    MODIFIED = "Modified"
    ADDED = "Added"
    REMOVED = "Removed"


@dataclass(frozen=True)
class FileHash:
    """Digest of one file produced by a hashing run."""
    path: str
    digest: str
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.digest != ERROR_DIGEST

    @classmethod
    def failed(cls, path: str, error: str) -> "FileHash":
        return cls(path=path, digest=ERROR_DIGEST, error=error)


class _Change:
    """Shared behaviour of the change record variants."""
    status: ClassVar[ChangeStatus]

    def to_dict(self) -> dict[str, str]:
        return {"status": self.status.value, **asdict(self)}


@dataclass(frozen=True)
class Moved(_Change):
    """Same filename, different directory, identical content."""
    status: ClassVar[ChangeStatus] = ChangeStatus.MOVED
    old_path: str
    new_path: str
    hash: str


@dataclass(frozen=True)
class Renamed(_Change):
    """Different filename, identical content."""
    status: ClassVar[ChangeStatus] = ChangeStatus.RENAMED
    old_name: str
    new_name: str
    hash: str


@dataclass(frozen=True)
class Modified(_Change):
    """Same path, different content."""
    status: ClassVar[ChangeStatus] = ChangeStatus.MODIFIED
    filename: str
    old_hash: str
    new_hash: str


@dataclass(frozen=True)
class Added(_Change):
    status: ClassVar[ChangeStatus] = ChangeStatus.ADDED
    filename: str
    hash: str


@dataclass(frozen=True)
class Removed(_Change):
    status: ClassVar[ChangeStatus] = ChangeStatus.REMOVED
    filename: str
    hash: str


ChangeRecord = Union[Moved, Renamed, Modified, Added, Removed]
