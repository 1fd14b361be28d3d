from __future__ import annotations

from typing import ClassVar, Sequence

from ..core.sniffer_base import Signature, TypeSniffer


class GzipSniffer(TypeSniffer):
    content_type: ClassVar = "application/x-gzip"
    signatures: ClassVar[Sequence[Signature]] = ((0, b"\x1F\x8B\x08"),)
    priority: ClassVar = 50


class ZipSniffer(TypeSniffer):
    content_type: ClassVar = "application/zip"
    signatures: ClassVar[Sequence[Signature]] = ((0, b"PK\x03\x04"),)
    priority: ClassVar = 50


class RARSniffer(TypeSniffer):
    content_type: ClassVar = "application/x-rar-compressed"
    signatures: ClassVar[Sequence[Signature]] = ((0, b"Rar!\x1A\x07\x00"), (0, b"Rar!\x1A\x07\x01\x00"))
    priority: ClassVar = 50


class SevenZipSniffer(TypeSniffer):
    content_type: ClassVar = "application/x-7z-compressed"
    signatures: ClassVar[Sequence[Signature]] = ((0, b"7z\xBC\xAF\x27\x1C"),)
    priority: ClassVar = 50
