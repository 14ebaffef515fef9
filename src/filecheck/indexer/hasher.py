"""File hashing utilities for change detection."""
import hashlib
from pathlib import Path
from typing import BinaryIO


DEFAULT_CHUNK_SIZE = 65536


def hash_stream(stream: BinaryIO, algorithm: str = "sha256", chunk_size: int = DEFAULT_CHUNK_SIZE) -> str:
    """
    Compute hash of a binary stream, reading it in fixed-size chunks.

    Args:
        stream: Readable binary file object
        algorithm: Hash algorithm (sha256, md5, etc.)
        chunk_size: Bytes to read at a time

    Returns:
        Lowercase hex digest
    """
    hasher = hashlib.new(algorithm)
    while chunk := stream.read(chunk_size):
        hasher.update(chunk)
    return hasher.hexdigest()


def hash_file(file_path: Path, algorithm: str = "sha256", chunk_size: int = DEFAULT_CHUNK_SIZE) -> str:
    """
    Compute hash of file contents.

    Args:
        file_path: Path to file
        algorithm: Hash algorithm (sha256, md5, etc.)
        chunk_size: Bytes to read at a time

    Returns:
        Hex digest of file hash
    """
    with open(file_path, "rb") as f:
        return hash_stream(f, algorithm, chunk_size)
