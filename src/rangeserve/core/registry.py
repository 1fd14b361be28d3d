from __future__ import annotations
import bisect
import mimetypes
from pathlib import PurePosixPath
from typing import List, Type

from .sniffer_base import TypeSniffer

SNIFF_LEN = 512

TEXT_PLAIN = "text/plain; charset=utf-8"
OCTET_STREAM = "application/octet-stream"

# control bytes that never show up in text files
_BINARY_BYTES = frozenset(
    [*range(0x00, 0x09), 0x0B, *range(0x0E, 0x1B), *range(0x1C, 0x20)]
)


def type_by_extension(name: str) -> str | None:
    """Look up the media type for a file name; text types get a utf-8 charset."""
    ext = PurePosixPath(name).suffix.lower()
    if not ext:
        return None
    ctype = mimetypes.guess_type("x" + ext)[0]
    if ctype and ctype.startswith("text/") and "charset" not in ctype:
        ctype += "; charset=utf-8"
    return ctype


class SnifferRegistry:
    def __init__(self) -> None:
        self._sniffers: List[tuple[int, str, Type[TypeSniffer]]] = []   # sorted by priority

    # called from TypeSniffer.__init_subclass__
    def register(self, sniffer_cls: Type[TypeSniffer]) -> None:
        # Use (priority, class_name, sniffer_cls) to ensure stable sorting
        entry = (sniffer_cls.priority, sniffer_cls.__name__, sniffer_cls)
        bisect.insort(self._sniffers, entry)

    # --- detection helpers ---
    def _sniff(self, sample: bytes) -> Type[TypeSniffer] | None:
        for _, _, s in self._sniffers:
            if s.matches(sample):
                return s
        return None

    def detect(self, sample: bytes) -> str:
        """Return a media type for the first bytes of some content.

        Falls back to plain text when the sample has no binary control bytes,
        and to application/octet-stream otherwise.
        """
        sample = sample[:SNIFF_LEN]
        # 1) magic-number sniff
        sniffer = self._sniff(sample)
        if sniffer:
            return sniffer.content_type
        # 2) text or binary
        if any(b in _BINARY_BYTES for b in sample):
            return OCTET_STREAM
        return TEXT_PLAIN


# singleton used project-wide
_REGISTRY = SnifferRegistry()


def detect_content_type(sample: bytes) -> str:
    return _REGISTRY.detect(sample)
