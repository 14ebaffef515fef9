"""Shared state for the hashing workers."""
from collections import deque
from typing import Iterable, Optional
import logging
import threading

from filecheck.db import FileHash


logger = logging.getLogger(__name__)


class PathQueue:
    """Mutex-guarded queue of pending relative paths."""

    def __init__(self, paths: Iterable[str] = ()):
        self._pending: deque[str] = deque(paths)
        self._lock = threading.Lock()
        logger.debug(f"Queued {len(self._pending)} paths")

    def claim(self) -> Optional[str]:
        """
        Take the next pending path.

        Returns:
            Path if available, None once the queue is drained
        """
        with self._lock:
            if not self._pending:
                return None
            return self._pending.popleft()

    def __len__(self) -> int:
        with self._lock:
            return len(self._pending)


class ResultBuffer:
    """Append-only, mutex-guarded collection of finished hashes."""

    def __init__(self):
        self._results: list[FileHash] = []
        self._lock = threading.Lock()

    def append(self, result: FileHash) -> None:
        with self._lock:
            self._results.append(result)

    def snapshot(self) -> list[FileHash]:
        """Copy of the results collected so far."""
        with self._lock:
            return list(self._results)

    def __len__(self) -> int:
        with self._lock:
            return len(self._results)
