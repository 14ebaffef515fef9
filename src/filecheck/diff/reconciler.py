"""
Reconciliation of two inventories.

Files are matched by content first and by path second, so a relocated file
shows up as a move or rename instead of a removal plus an addition. The four
phases always run in the same order and a path claimed by one phase is skipped
by the later ones.
"""
import logging
import posixpath

from filecheck.db import (
    ERROR_DIGEST,
    Added,
    ChangeRecord,
    Modified,
    Moved,
    Removed,
    Renamed,
)
from filecheck.indexer.inventory import Inventory


logger = logging.getLogger(__name__)


def build_digest_index(inventory: Inventory) -> dict[str, str]:
    """
    Map each digest to one path holding it.

    When several paths share a digest only the last one is kept. Error
    sentinels are not content and never enter the index.
    """
    index: dict[str, str] = {}
    for path, digest in inventory.items():
        if digest == ERROR_DIGEST:
            continue
        index[digest] = path
    return index


def diff_inventories(old: Inventory, new: Inventory) -> list[ChangeRecord]:
    """
    Classify every difference between two inventories.

    Args:
        old: Baseline inventory
        new: Freshly computed inventory

    Returns:
        Moves and renames, then modifications, additions and removals
    """
    changes: list[ChangeRecord] = []
    processed: set[str] = set()

    # 1. Same content at a different path
    old_index = build_digest_index(old)
    new_index = build_digest_index(new)
    for digest, old_path in old_index.items():
        new_path = new_index.get(digest)
        if new_path is None or new_path == old_path:
            continue
        if posixpath.basename(old_path) == posixpath.basename(new_path):
            changes.append(Moved(old_path=old_path, new_path=new_path, hash=digest))
        else:
            changes.append(Renamed(old_name=old_path, new_name=new_path, hash=digest))
        processed.add(old_path)
        processed.add(new_path)

    # 2. Same path, different content
    for path, new_digest in new.items():
        old_digest = old.get(path)
        if old_digest is None or old_digest == new_digest or path in processed:
            continue
        changes.append(Modified(filename=path, old_hash=old_digest, new_hash=new_digest))
        processed.add(path)

    # 3. Only in new
    for path, digest in new.items():
        if path not in old and path not in processed:
            changes.append(Added(filename=path, hash=digest))

    # 4. Only in old
    for path, digest in old.items():
        if path not in new and path not in processed:
            changes.append(Removed(filename=path, hash=digest))

    logger.debug(f"Reconciled {len(old)} old and {len(new)} new entries: {len(changes)} changes")
    return changes
