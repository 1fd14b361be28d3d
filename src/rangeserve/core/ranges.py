"""Range header parsing (RFC 2616, section 14.35)."""

from __future__ import annotations

from typing import Iterable

from .model import ByteRange, InvalidRangeError

_PREFIX = "bytes="


def _parse_int(text: str, size: int) -> int:
    # signs, blanks and non-ascii digits are all rejected
    if not text or not text.isascii() or not text.isdigit():
        raise InvalidRangeError(f"invalid range bound {text!r}", size=size)
    return int(text)


def parse_range(header: str | None, size: int) -> list[ByteRange]:
    """Parse a Range header against a resource of `size` bytes.

    Returns an empty list when the header is absent. Ranges are returned in
    request order; overlapping or duplicate ranges are kept as requested.
    Every returned range holds at least one byte.
    Raises InvalidRangeError for anything that is not a valid byte-range set.
    """
    if not header:
        return []
    if not header.startswith(_PREFIX):
        raise InvalidRangeError("invalid range unit", size=size)

    ranges: list[ByteRange] = []
    for spec in header[len(_PREFIX):].split(","):
        spec = spec.strip()
        if not spec:
            continue
        first, sep, last = spec.partition("-")
        if not sep:
            raise InvalidRangeError(f"invalid range {spec!r}", size=size)
        first, last = first.strip(), last.strip()

        if not first:
            # suffix form: the last N bytes of the resource
            suffix = min(_parse_int(last, size), size)
            if suffix == 0:
                raise InvalidRangeError(f"empty suffix range {spec!r}", size=size)
            ranges.append(ByteRange(size - suffix, suffix))
            continue

        start = _parse_int(first, size)
        if start >= size:
            # no byte of the resource lies at or after start
            raise InvalidRangeError(f"range start {start} beyond size {size}", size=size)
        if not last:
            ranges.append(ByteRange(start, size - start))
            continue

        end = _parse_int(last, size)
        if start > end:
            raise InvalidRangeError(f"range start {start} after end {end}", size=size)
        end = min(end, size - 1)
        ranges.append(ByteRange(start, end - start + 1))
    return ranges


def sum_ranges_size(ranges: Iterable[ByteRange]) -> int:
    return sum(ra.length for ra in ranges)
