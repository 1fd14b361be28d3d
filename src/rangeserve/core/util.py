from __future__ import annotations
from datetime import datetime, timezone

from werkzeug.http import http_date, parse_date

_SIZE_UNITS = (" B", " KB", " MB", " GB", " TB")

LISTING_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def as_utc(value: datetime) -> datetime:
    """Return an aware UTC datetime; naive values are taken to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_http_date(value: datetime) -> str:
    return http_date(as_utc(value))


def parse_http_date(value: str | None) -> datetime | None:
    """Parse an HTTP-date header value; None when absent or malformed."""
    if not value:
        return None
    parsed = parse_date(value)
    return as_utc(parsed) if parsed is not None else None


def same_second(a: datetime, b: datetime) -> bool:
    return as_utc(a).replace(microsecond=0) == as_utc(b).replace(microsecond=0)


def format_size(size: int) -> str:
    value = float(size)
    unit = 0
    while value >= 1024 and unit < len(_SIZE_UNITS) - 1:
        value /= 1024
        unit += 1
    return f"{value:.2f}{_SIZE_UNITS[unit]}"
