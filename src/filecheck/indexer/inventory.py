"""Path -> digest snapshot of a directory tree."""
import logging
from typing import Iterable, Iterator, Mapping, Optional

from filecheck.db import ERROR_DIGEST, ChecksumStore, FileHash


logger = logging.getLogger(__name__)


class Inventory:
    """Mapping of tree-relative path to hex digest."""

    def __init__(self, entries: Optional[Mapping[str, str]] = None):
        self._entries: dict[str, str] = dict(entries or {})

    @classmethod
    def from_hashes(cls, hashes: Iterable[FileHash]) -> "Inventory":
        """Fold hashing results into an inventory. Later duplicates win."""
        inventory = cls()
        for file_hash in hashes:
            inventory._entries[file_hash.path] = file_hash.digest
        return inventory

    @classmethod
    def load(cls, store: ChecksumStore) -> "Inventory":
        """
        Read a baseline inventory.

        Never raises: a missing or malformed baseline gives an empty inventory.
        """
        data = store.load()
        inventory = cls()
        skipped = 0
        for path, digest in data.items():
            if not isinstance(digest, str):
                skipped += 1
                continue
            inventory._entries[path] = digest

        if skipped:
            logger.warning(f"Ignored {skipped} non-string entries in {store.path}")
        logger.debug(f"Loaded {len(inventory)} entries from {store.path}")
        return inventory

    def get(self, path: str) -> Optional[str]:
        return self._entries.get(path)

    def items(self):
        return self._entries.items()

    def paths(self) -> list[str]:
        return list(self._entries)

    def failed_paths(self) -> list[str]:
        """Paths recorded with the error sentinel."""
        return [p for p, d in self._entries.items() if d == ERROR_DIGEST]

    def to_dict(self) -> dict[str, str]:
        return dict(self._entries)

    def __contains__(self, path: object) -> bool:
        return path in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Inventory):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"Inventory({len(self._entries)} files)"
