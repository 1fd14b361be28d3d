from __future__ import annotations

from typing import ClassVar, Sequence

from ..core.sniffer_base import Signature, TypeSniffer
from .riff import RIFFSniffer


class WAVSniffer(RIFFSniffer):
    content_type: ClassVar = "audio/wave"
    form_type: ClassVar = b"WAVE"


class AVISniffer(RIFFSniffer):
    content_type: ClassVar = "video/avi"
    form_type: ClassVar = b"AVI "


class OggSniffer(TypeSniffer):
    content_type: ClassVar = "application/ogg"
    signatures: ClassVar[Sequence[Signature]] = ((0, b"OggS\x00"),)
    priority: ClassVar = 50


class MP3Sniffer(TypeSniffer):
    content_type: ClassVar = "audio/mpeg"
    signatures: ClassVar[Sequence[Signature]] = ((0, b"ID3"),)
    priority: ClassVar = 60


class WebMSniffer(TypeSniffer):
    content_type: ClassVar = "video/webm"
    signatures: ClassVar[Sequence[Signature]] = ((0, b"\x1A\x45\xDF\xA3"),)
    priority: ClassVar = 50


class MP4Sniffer(TypeSniffer):
    """ISO base media files: a box size, then an 'ftyp' box with an mp4 brand."""

    content_type: ClassVar = "video/mp4"
    signatures: ClassVar[Sequence[Signature]] = ((4, b"ftyp"),)
    priority: ClassVar = 60

    @classmethod
    def matches(cls, sample: bytes) -> bool:
        if not super().matches(sample) or len(sample) < 12:
            return False
        box_size = int.from_bytes(sample[:4], "big")
        if box_size % 4 != 0 or box_size > len(sample):
            return False
        # major brand followed by the compatible brands
        for offset in range(8, box_size, 4):
            if offset == 12:
                continue                # minor version, not a brand
            if sample[offset:offset + 3] == b"mp4":
                return True
        return False
