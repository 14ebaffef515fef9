"""Records and baseline persistence."""
from .models import (
    ERROR_DIGEST, ChangeRecord, ChangeStatus, FileHash,
    Added, Modified, Moved, Removed, Renamed,
)
from .store import ChecksumStore

__all__ = [
    "ERROR_DIGEST", "ChangeRecord", "ChangeStatus", "FileHash",
    "Added", "Modified", "Moved", "Removed", "Renamed",
    "ChecksumStore",
]
