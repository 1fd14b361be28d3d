from __future__ import annotations

from typing import ClassVar, Sequence

from ..core.sniffer_base import Signature, TypeSniffer
from .riff import RIFFSniffer

# PNG signature
PNG_SIG = b'\x89PNG\r\n\x1a\n'


class PNGSniffer(TypeSniffer):
    content_type: ClassVar = "image/png"
    signatures: ClassVar[Sequence[Signature]] = ((0, PNG_SIG),)
    priority: ClassVar = 40


class JPEGSniffer(TypeSniffer):
    content_type: ClassVar = "image/jpeg"
    signatures: ClassVar[Sequence[Signature]] = ((0, b"\xFF\xD8\xFF"),)
    priority: ClassVar = 50


class GIFSniffer(TypeSniffer):
    content_type: ClassVar = "image/gif"
    signatures: ClassVar[Sequence[Signature]] = ((0, b"GIF87a"), (0, b"GIF89a"))
    priority: ClassVar = 50


class TIFFSniffer(TypeSniffer):
    content_type: ClassVar = "image/tiff"
    # little- and big-endian byte order marks
    signatures: ClassVar[Sequence[Signature]] = ((0, b"II*\x00"), (0, b"MM\x00*"))
    priority: ClassVar = 60


class ICOSniffer(TypeSniffer):
    content_type: ClassVar = "image/x-icon"
    signatures: ClassVar[Sequence[Signature]] = ((0, b"\x00\x00\x01\x00"), (0, b"\x00\x00\x02\x00"))
    priority: ClassVar = 70


class BMPSniffer(TypeSniffer):
    content_type: ClassVar = "image/bmp"
    signatures: ClassVar[Sequence[Signature]] = ((0, b"BM"),)
    priority: ClassVar = 90            # two bytes only, examined late


class WebPSniffer(RIFFSniffer):
    content_type: ClassVar = "image/webp"
    form_type: ClassVar = b"WEBPVP"
