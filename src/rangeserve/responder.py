"""Conditional and partial content delivery.

`serve_content` turns a seekable byte source into a full (200), partial
or multipart (206), or not-modified (304) response. Every range and
validator decision is taken before the response object exists, so a failure
while the body streams can only cut the connection, never change the status.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Iterator

from werkzeug.datastructures import Headers
from werkzeug.wrappers import Request, Response

from .core.conditional import check_conditional, check_last_modified
from .core.model import InvalidRangeError, SeekFailedError, SizeUnavailableError, StreamAbortedError
from .core.multipart import COPY_CHUNK, MultipartRangeEncoder, copy_exactly
from .core.ranges import parse_range, sum_ranges_size
from .core.registry import SNIFF_LEN, detect_content_type, type_by_extension
from .core.util import format_http_date

logger = logging.getLogger(__name__)


class ContentResponse(Response):
    """Response whose entity headers are set explicitly, never defaulted."""

    default_mimetype = None
    automatically_set_content_length = False


def _not_modified(headers: Headers) -> ContentResponse:
    headers.pop("Content-Type", None)
    headers.pop("Content-Length", None)
    return ContentResponse(status=304, headers=headers)


def _copy_to_eof(source) -> Iterator[bytes]:
    while True:
        try:
            chunk = source.read(COPY_CHUNK)
        except OSError as e:
            raise StreamAbortedError(f"read failed: {e}") from e
        if not chunk:
            return
        yield chunk


def _logged(body: Iterator[bytes], name: str) -> Iterator[bytes]:
    try:
        yield from body
    except StreamAbortedError as e:
        logger.warning("Stream of %s aborted: %s", name, e)
        raise


def _content_type(name: str, content, headers: Headers) -> str:
    if "Content-Type" in headers:
        return headers["Content-Type"]
    ctype = type_by_extension(name)
    if ctype is None:
        # read a chunk to decide between utf-8 text and binary
        sample = content.read(SNIFF_LEN)
        ctype = detect_content_type(sample)
        try:
            content.seek(0)
        except (OSError, ValueError) as e:
            raise SeekFailedError(f"seeker can't seek: {e}") from e
    headers["Content-Type"] = ctype
    return ctype


def serve_content(
    request: Request,
    name: str,
    mod_time: datetime | None,
    size_fn: Callable[[], int],
    content,
    headers: Headers | None = None,
    *,
    lenient_ranges: bool = True,
) -> ContentResponse:
    """Build the response for `content`, honoring Range and cache validators.

    `headers` may carry caller-set Content-Type, Etag or Content-Encoding
    values, which are passed through. `content` must be positioned at its
    first byte and stay open until the response body has been consumed.

    Raises InvalidRangeError (416), SeekFailedError or SizeUnavailableError
    (500) before any header is produced.
    """
    headers = Headers(headers) if headers is not None else Headers()

    if check_last_modified(request.headers, mod_time):
        return _not_modified(headers)
    if mod_time is not None:
        headers["Last-Modified"] = format_http_date(mod_time)

    outcome = check_conditional(request.headers, request.method, headers.get("Etag"), mod_time)
    if outcome.satisfied:
        return _not_modified(headers)

    ctype = _content_type(name, content, headers)

    try:
        size = size_fn()
    except (OSError, ValueError) as e:
        raise SizeUnavailableError(str(e)) from e

    status = 200
    send_size = size
    body: Iterator[bytes] | None = None
    encoder: MultipartRangeEncoder | None = None

    if size >= 0:
        ranges = parse_range(outcome.range_header, size)
        if sum_ranges_size(ranges) > size:
            # more bytes asked for than the file holds: an attack or a broken client
            if not lenient_ranges:
                raise InvalidRangeError("range set larger than resource", size=size)
            logger.info("Ignoring overlong Range %r for %s (%d bytes)", outcome.range_header, name, size)
            ranges = []

        if len(ranges) == 1:
            # a single range is never sent as multipart/byteranges
            ra = ranges[0]
            try:
                content.seek(ra.start)
            except (OSError, ValueError) as e:
                raise SeekFailedError(f"seek to {ra.start} failed: {e}") from e
            send_size = ra.length
            status = 206
            headers["Content-Range"] = ra.content_range(size)
        elif len(ranges) > 1:
            encoder = MultipartRangeEncoder(ranges, ctype, size)
            send_size = encoder.encoded_size
            status = 206
            headers["Content-Type"] = encoder.media_type

        headers["Accept-Ranges"] = "bytes"
        if "Content-Encoding" not in headers:
            headers["Content-Length"] = str(send_size)

    if request.method == "HEAD":
        return ContentResponse(status=status, headers=headers)

    if encoder is not None:
        body = encoder.iter_encoded(content)
    elif send_size >= 0:
        body = copy_exactly(content, send_size)
    else:
        body = _copy_to_eof(content)
    return ContentResponse(_logged(body, name), status=status, headers=headers)
