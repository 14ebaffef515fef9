"""Index manager - coordinates scanning, hashing and baseline comparison."""
from pathlib import Path
from typing import Optional
import logging

from filecheck.config import Config, get_config
from filecheck.db import ChecksumStore
from filecheck.diff import DiffReport, diff_inventories, format_report
from filecheck.queue import WorkerPool
from filecheck.queue.worker import ResultCallback
from .inventory import Inventory
from .traversal import list_files


logger = logging.getLogger(__name__)


class IndexManager:
    """Runs one inventory pass over a directory tree."""

    def __init__(
        self,
        root: Path,
        config: Optional[Config] = None,
        store: Optional[ChecksumStore] = None,
    ):
        self.root = Path(root)
        self.config = config or get_config()
        self.store = store or ChecksumStore(
            self.config.get_checksum_path(), self.config.store.indent
        )
        self.files: list[str] = []

    def scan(self) -> list[str]:
        """
        Enumerate the tree.

        Raises:
            TraversalError: if the root cannot be enumerated
        """
        files = list_files(self.root, self.config.scanner.ignore_patterns)

        # Never inventory our own baseline file
        baseline = self._baseline_relative_path()
        if baseline in files:
            files.remove(baseline)
            logger.debug(f"Skipping baseline file {baseline}")

        self.files = files
        logger.info(f"Found {len(self.files)} files under {self.root}")
        return self.files

    def _baseline_relative_path(self) -> Optional[str]:
        try:
            return self.store.path.resolve().relative_to(self.root.resolve()).as_posix()
        except ValueError:
            return None

    def build_inventory(self, on_result: Optional[ResultCallback] = None) -> Inventory:
        """Hash the files found by the last scan."""
        hasher = self.config.hasher
        pool = WorkerPool(
            self.root,
            num_workers=hasher.workers,
            algorithm=hasher.algorithm,
            chunk_size=hasher.chunk_size,
        )
        hashes = pool.compute_hashes(self.files, on_result=on_result)
        return Inventory.from_hashes(hashes)

    def write_baseline(self, inventory: Inventory) -> int:
        """
        Persist the inventory as the new baseline.

        Returns:
            Number of bytes written

        Raises:
            StoreError: if the baseline cannot be written
        """
        return self.store.save(inventory.to_dict())

    def load_baseline(self) -> Inventory:
        """Read the previous baseline, empty if missing or unreadable."""
        baseline = Inventory.load(self.store)
        if not baseline:
            logger.info(
                f"No usable baseline at {self.store.path}; every file will be reported as Added"
            )
        return baseline

    def compare(self, inventory: Inventory, baseline: Optional[Inventory] = None) -> DiffReport:
        """Diff a fresh inventory against the baseline."""
        if baseline is None:
            baseline = self.load_baseline()
        return format_report(diff_inventories(baseline, inventory))
