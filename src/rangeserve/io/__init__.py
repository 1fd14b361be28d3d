"""I/O layer for rangeserve - resource lookup and seekable content handles."""

# Re-export these for import convenience
from .base import ContentSource, FileSystem
from .local import LocalContentHandle, LocalFileSystem, open_local_filesystem

__all__ = [
    "ContentSource", "FileSystem",
    "LocalContentHandle", "LocalFileSystem", "open_local_filesystem",
]
