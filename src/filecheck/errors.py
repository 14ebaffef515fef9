"""Exceptions raised by filecheck."""


class FileCheckError(Exception):
    """Base class for filecheck errors."""


class TraversalError(FileCheckError):
    """The directory tree could not be enumerated."""

    def __init__(self, root, reason: str):
        self.root = root
        self.reason = reason
        super().__init__(f"Cannot scan {root}: {reason}")


class StoreError(FileCheckError):
    """The baseline file could not be written."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write {path}: {reason}")
