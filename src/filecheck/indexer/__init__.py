"""Indexer module."""
from .hasher import hash_file, hash_stream
from .inventory import Inventory
from .traversal import list_files

__all__ = ["hash_file", "hash_stream", "Inventory", "list_files"]
