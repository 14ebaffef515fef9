"""Baseline file persistence."""
import json
import logging
from pathlib import Path
from typing import Mapping

from filecheck.config import get_config
from filecheck.errors import StoreError


logger = logging.getLogger(__name__)


def to_json_text(data, indent: int | None = 2, sort_keys: bool = False) -> str:
    """
    Serialize to JSON that always encodes as UTF-8.

    Undecodable filename bytes reach us as lone surrogates (\\udcff); they can
    only sit inside JSON strings, so they are written as \\uXXXX escapes and
    json.loads gives the same str back.
    """
    text = json.dumps(data, indent=indent, sort_keys=sort_keys, ensure_ascii=False)
    return text.encode("utf-8", "backslashreplace").decode("utf-8")


class ChecksumStore:
    """JSON file holding a path -> digest mapping."""

    def __init__(self, path: Path | None = None, indent: int | None = None):
        if path is None or indent is None:
            config = get_config()
            path = config.get_checksum_path() if path is None else path
            indent = config.store.indent if indent is None else indent
        self.path = Path(path)
        self.indent = indent

    def exists(self) -> bool:
        return self.path.is_file()

    def size_on_disk(self) -> int:
        return self.path.stat().st_size

    def load(self) -> dict[str, object]:
        """
        Read the stored mapping.

        Missing, unreadable or malformed files give an empty mapping;
        the problem is logged, never raised.
        """
        if not self.path.exists():
            logger.info(f"Baseline not found: {self.path}")
            return {}

        try:
            content = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read {self.path}: {e}")
            return {}

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            logger.error(f"JSON parse error in {self.path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.error(f"Expected a JSON object in {self.path}, got {type(data).__name__}")
            return {}

        return data

    def dumps(self, mapping: Mapping[str, str]) -> str:
        """Serialize a mapping exactly as save() writes it."""
        return to_json_text(dict(mapping), indent=self.indent, sort_keys=True)

    def save(self, mapping: Mapping[str, str]) -> int:
        """
        Write the mapping and verify the on-disk size.

        Args:
            mapping: Relative path -> hex digest

        Returns:
            Number of bytes written

        Raises:
            StoreError: if the file cannot be written
        """
        data = self.dumps(mapping).encode("utf-8")

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "wb") as f:
                f.write(data)
            written = self.size_on_disk()
        except OSError as e:
            raise StoreError(self.path, str(e)) from e

        if written != len(data):
            logger.warning(
                f"File size mismatch for {self.path}. "
                f"Expected: {len(data)} bytes, wrote: {written} bytes"
            )
        else:
            logger.info(f"Wrote {written} bytes to {self.path}")
        return written
