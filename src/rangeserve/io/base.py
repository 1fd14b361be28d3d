"""Base protocols for the file-access layer."""

from typing import Iterator, Protocol, runtime_checkable

from ..core.model import ResourceDescriptor


@runtime_checkable
class ContentSource(Protocol):
    """Protocol for seekable byte sources handed to the responder."""

    def seek(self, offset: int, whence: int = 0) -> int:
        """Move to absolute offset `offset`. Raise OSError on failure."""
        ...

    def read(self, size: int = -1) -> bytes:
        """Return up to `size` bytes; b'' at end of data."""
        ...


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for resource lookup below a served root."""

    def stat(self, path: str) -> ResourceDescriptor:
        """Describe the resource at URL path `path` or raise ResourceNotFoundError."""
        ...

    def open(self, path: str) -> ContentSource:
        """Open the file at `path`; the caller must close it."""
        ...

    def list_directory(self, path: str) -> Iterator[ResourceDescriptor]:
        """Yield the entries of the directory at `path`."""
        ...
