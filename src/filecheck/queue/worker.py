"""Worker pool for hashing files concurrently."""
import logging
import os
import threading
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

from filecheck.db import FileHash
from filecheck.indexer.hasher import DEFAULT_CHUNK_SIZE, hash_file
from .job_queue import PathQueue, ResultBuffer


logger = logging.getLogger(__name__)

DEFAULT_WORKERS = 4

Concurrency = Union[int, str]
ResultCallback = Callable[[FileHash], None]


def resolve_concurrency(concurrency: Concurrency = "auto") -> int:
    """
    Turn a worker count setting into a thread count.

    "auto" means the host's CPU count, or DEFAULT_WORKERS when that is unknown.
    """
    if concurrency == "auto":
        return os.cpu_count() or DEFAULT_WORKERS
    if isinstance(concurrency, bool) or not isinstance(concurrency, int):
        raise ValueError(f"Invalid concurrency: {concurrency!r}")
    if concurrency < 1:
        raise ValueError(f"Concurrency must be positive, got {concurrency}")
    return concurrency


class Worker(threading.Thread):
    """Worker thread that hashes files until the queue is drained."""

    def __init__(
        self,
        worker_id: int,
        root: Path,
        queue: PathQueue,
        results: ResultBuffer,
        algorithm: str = "sha256",
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        on_result: Optional[ResultCallback] = None,
    ):
        super().__init__(daemon=True)
        self.worker_id = worker_id
        self.root = root
        self.queue = queue
        self.results = results
        self.algorithm = algorithm
        self.chunk_size = chunk_size
        self.on_result = on_result
        self.name = f"Worker-{worker_id}"
        self.processed = 0

    def run(self) -> None:
        """Main worker loop."""
        logger.debug(f"{self.name} started")

        while True:
            path = self.queue.claim()
            if path is None:
                break

            result = self.hash_one(path)
            self.results.append(result)
            self.processed += 1

            if self.on_result is not None:
                try:
                    self.on_result(result)
                except Exception as e:
                    logger.exception(f"{self.name} result callback failed for {path}: {e}")

        logger.debug(f"{self.name} stopped after {self.processed} files")

    def hash_one(self, path: str) -> FileHash:
        """Hash one file, converting any failure into an error result."""
        try:
            digest = hash_file(self.root / path, self.algorithm, self.chunk_size)
        except OSError as e:
            logger.error(f"Error processing {path}: {e.strerror or e}")
            return FileHash.failed(path, e.strerror or str(e))
        except Exception as e:
            logger.exception(f"Unexpected error processing {path}: {e}")
            return FileHash.failed(path, str(e))
        return FileHash(path=path, digest=digest)


class WorkerPool:
    """Fixed pool of worker threads hashing files under one root."""

    def __init__(
        self,
        root: Path,
        num_workers: Concurrency = "auto",
        algorithm: str = "sha256",
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        self.root = Path(root)
        self.num_workers = resolve_concurrency(num_workers)
        self.algorithm = algorithm
        self.chunk_size = chunk_size

    def compute_hashes(
        self,
        paths: Sequence[str],
        on_result: Optional[ResultCallback] = None,
    ) -> list[FileHash]:
        """
        Hash every path and wait for all workers to finish.

        Args:
            paths: Paths relative to the pool root
            on_result: Called from the worker thread after each file

        Returns:
            One FileHash per input path, in completion order
        """
        queue = PathQueue(paths)
        results = ResultBuffer()
        workers = [
            Worker(i, self.root, queue, results, self.algorithm, self.chunk_size, on_result)
            for i in range(self.num_workers)
        ]

        logger.info(f"Hashing {len(paths)} files with {self.num_workers} workers")
        for worker in workers:
            worker.start()
        for worker in workers:
            worker.join()

        hashes = results.snapshot()
        failed = sum(1 for h in hashes if not h.ok)
        if failed:
            logger.warning(f"{failed} of {len(hashes)} files could not be hashed")
        return hashes


def compute_hashes(
    root: Path,
    paths: Sequence[str],
    concurrency: Concurrency = "auto",
    *,
    algorithm: str = "sha256",
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    on_result: Optional[ResultCallback] = None,
) -> list[FileHash]:
    """Hash paths under root with a fresh pool of `concurrency` workers."""
    pool = WorkerPool(root, concurrency, algorithm, chunk_size)
    return pool.compute_hashes(paths, on_result=on_result)
