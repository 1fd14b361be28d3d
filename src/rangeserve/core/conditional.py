"""Cache validator checks: If-Modified-Since, If-Range and If-None-Match."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Mapping

from .model import ConditionalOutcome
from .util import as_utc, parse_http_date, same_second

logger = logging.getLogger(__name__)

_ONE_SECOND = timedelta(seconds=1)


def check_last_modified(request_headers: Mapping[str, str], mod_time: datetime | None) -> bool:
    """Return True when If-Modified-Since says the client copy is current.

    HTTP dates carry no sub-second precision, so the resource counts as
    unmodified while mod_time < since + 1s. An unknown mod_time never matches.
    """
    if mod_time is None:
        return False
    since = parse_http_date(request_headers.get("If-Modified-Since"))
    if since is None:
        return False
    return as_utc(mod_time) < since + _ONE_SECOND


def check_conditional(
    request_headers: Mapping[str, str],
    method: str,
    etag: str | None,
    mod_time: datetime | None,
) -> ConditionalOutcome:
    """Apply If-Range and If-None-Match.

    Returns the Range header that should still be honored and whether the
    request is already answered with 304 Not Modified.
    """
    range_header = request_headers.get("Range") or ""

    if_range = request_headers.get("If-Range")
    if if_range and if_range != etag:
        # If-Range may also carry the Last-Modified date
        when = parse_http_date(if_range)
        if mod_time is None or when is None or not same_second(when, mod_time):
            logger.debug("If-Range %r does not match, ignoring Range", if_range)
            range_header = ""

    if_none_match = request_headers.get("If-None-Match")
    if if_none_match:
        if not etag:
            return ConditionalOutcome(range_header, False)
        if method not in ("GET", "HEAD"):
            return ConditionalOutcome(range_header, False)
        # only a single token is understood, not a list
        if if_none_match == etag or if_none_match == "*":
            return ConditionalOutcome("", True)
    return ConditionalOutcome(range_header, False)
