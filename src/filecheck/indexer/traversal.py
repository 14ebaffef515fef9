"""Directory traversal producing tree-relative file paths."""
import fnmatch
import logging
import os
from pathlib import Path
from typing import Iterable

from filecheck.errors import TraversalError


logger = logging.getLogger(__name__)


def _ignored(name: str, patterns: Iterable[str]) -> bool:
    return any(fnmatch.fnmatch(name, p) for p in patterns)


def list_files(root: Path, ignore_patterns: Iterable[str] = ()) -> list[str]:
    """
    List every regular file under root.

    Args:
        root: Directory to scan
        ignore_patterns: fnmatch patterns matched against file and directory names

    Returns:
        Sorted paths relative to root, always using "/" as separator

    Raises:
        TraversalError: if root is missing or a directory cannot be read
    """
    root = Path(root)
    patterns = list(ignore_patterns)

    if not root.exists():
        raise TraversalError(root, "directory not found")
    if not root.is_dir():
        raise TraversalError(root, "not a directory")

    def on_error(error: OSError) -> None:
        raise TraversalError(error.filename or root, error.strerror or str(error)) from error

    files = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
        # Prune in place so os.walk does not descend into ignored directories
        dirnames[:] = [d for d in dirnames if not _ignored(d, patterns)]

        for name in filenames:
            if _ignored(name, patterns):
                continue
            full_path = Path(dirpath) / name
            if not full_path.is_file():
                logger.debug(f"Skipping non-regular file: {full_path}")
                continue
            files.append(full_path.relative_to(root).as_posix())

    files.sort()
    logger.debug(f"Found {len(files)} files under {root}")
    return files
