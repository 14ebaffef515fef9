"""Hashing worker pool module."""
from .job_queue import PathQueue, ResultBuffer
from .worker import Worker, WorkerPool, compute_hashes, resolve_concurrency

__all__ = [
    "PathQueue", "ResultBuffer",
    "Worker", "WorkerPool", "compute_hashes", "resolve_concurrency",
]
