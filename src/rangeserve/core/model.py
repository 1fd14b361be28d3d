from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class ByteRange:
    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length - 1

    def content_range(self, size: int) -> str:
        return f"bytes {self.start}-{self.end}/{size}"

    def mime_header(self, content_type: str, size: int) -> dict[str, str]:
        """Per-part headers of a multipart/byteranges body (sorted by name)."""
        return {
            "Content-Range": self.content_range(size),
            "Content-Type": content_type,
        }


@dataclass(slots=True, frozen=True)
class ResourceDescriptor:
    name: str
    mod_time: datetime | None      # None = unknown, disables date validators
    size: int
    etag: str | None = None
    is_directory: bool = False


@dataclass(slots=True, frozen=True)
class ConditionalOutcome:
    range_header: str              # effective Range header, "" when ignored
    satisfied: bool                # True = finalized as 304 Not Modified


class RangeServeError(RuntimeError):
    """Base class for errors raised while serving content."""
    pass


class InvalidRangeError(RangeServeError):
    """Raised when a Range header is malformed or cannot be satisfied."""

    def __init__(self, message: str = "invalid range", *, size: int | None = None):
        super().__init__(message)
        self.size = size


class SeekFailedError(RangeServeError):
    """Raised when the content source cannot be repositioned."""
    pass


class SizeUnavailableError(RangeServeError):
    """Raised when the size of the content cannot be determined."""
    pass


class StreamAbortedError(RangeServeError):
    """Raised inside a response body when the copy cannot complete."""
    pass


class ResourceNotFoundError(RangeServeError):
    """Raised when a path does not resolve to a readable resource."""
    pass
