"""multipart/byteranges encoding for multi-range responses."""

from __future__ import annotations

import logging
import secrets
from typing import Iterator, Sequence

from .model import ByteRange, StreamAbortedError

logger = logging.getLogger(__name__)

COPY_CHUNK = 32 * 1024


def new_boundary() -> str:
    return secrets.token_hex(30)


def copy_exactly(source, length: int, *, chunk_size: int = COPY_CHUNK) -> Iterator[bytes]:
    """Yield exactly `length` bytes read from the current position of `source`.

    A read error or a source that ends early raises StreamAbortedError.
    """
    remaining = length
    while remaining > 0:
        try:
            chunk = source.read(min(chunk_size, remaining))
        except OSError as e:
            raise StreamAbortedError(f"read failed: {e}") from e
        if not chunk:
            raise StreamAbortedError(f"source ended with {remaining} of {length} bytes unsent")
        remaining -= len(chunk)
        yield chunk


class MultipartRangeEncoder:
    """Encode several byte ranges of one source as multipart/byteranges."""

    def __init__(self, ranges: Sequence[ByteRange], content_type: str, size: int,
                 boundary: str | None = None):
        self.ranges = tuple(ranges)
        self.content_type = content_type
        self.size = size
        self.boundary = boundary or new_boundary()

    @property
    def media_type(self) -> str:
        return f"multipart/byteranges; boundary={self.boundary}"

    # ------------------------------------------------------------------ #
    def _part_header(self, index: int, ra: ByteRange) -> bytes:
        lead = "--" if index == 0 else "\r\n--"
        lines = [f"{lead}{self.boundary}\r\n"]
        for name, value in ra.mime_header(self.content_type, self.size).items():
            lines.append(f"{name}: {value}\r\n")
        lines.append("\r\n")
        return "".join(lines).encode("latin-1")

    def _closing(self) -> bytes:
        return f"\r\n--{self.boundary}--\r\n".encode("latin-1")

    @property
    def encoded_size(self) -> int:
        """Exact number of bytes `iter_encoded` will produce."""
        total = len(self._closing())
        for index, ra in enumerate(self.ranges):
            total += len(self._part_header(index, ra)) + ra.length
        return total

    # ------------------------------------------------------------------ #
    def iter_encoded(self, source) -> Iterator[bytes]:
        """Stream the encoded body, seeking `source` once per range.

        The generator only advances when the consumer pulls, so no more than
        one chunk is ever buffered. Closing it early stops all further reads.
        """
        for index, ra in enumerate(self.ranges):
            yield self._part_header(index, ra)
            try:
                source.seek(ra.start)
            except (OSError, ValueError) as e:
                logger.warning("Seek to %d failed mid-stream: %s", ra.start, e)
                raise StreamAbortedError(f"seek to {ra.start} failed: {e}") from e
            yield from copy_exactly(source, ra.length)
        yield self._closing()
