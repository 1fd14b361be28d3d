from __future__ import annotations

from typing import ClassVar, Sequence

from ..core.sniffer_base import Signature, TypeSniffer

_WHITESPACE = b"\t\n\x0c\r "

# tags that mark a document as HTML when they open it
_HTML_TAGS = (
    b"<!DOCTYPE HTML", b"<HTML", b"<HEAD", b"<SCRIPT", b"<IFRAME", b"<H1",
    b"<DIV", b"<FONT", b"<TABLE", b"<A", b"<STYLE", b"<TITLE", b"<B",
    b"<BODY", b"<BR", b"<P", b"<!--",
)


class PDFSniffer(TypeSniffer):
    content_type: ClassVar = "application/pdf"
    signatures: ClassVar[Sequence[Signature]] = ((0, b"%PDF-"),)
    priority: ClassVar = 20


class PostScriptSniffer(TypeSniffer):
    content_type: ClassVar = "application/postscript"
    signatures: ClassVar[Sequence[Signature]] = ((0, b"%!PS-Adobe-"),)
    priority: ClassVar = 20


class UTF16BESniffer(TypeSniffer):
    content_type: ClassVar = "text/plain; charset=utf-16be"
    signatures: ClassVar[Sequence[Signature]] = ((0, b"\xFE\xFF"),)
    priority: ClassVar = 10


class UTF16LESniffer(TypeSniffer):
    content_type: ClassVar = "text/plain; charset=utf-16le"
    signatures: ClassVar[Sequence[Signature]] = ((0, b"\xFF\xFE"),)
    priority: ClassVar = 10


class UTF8BOMSniffer(TypeSniffer):
    content_type: ClassVar = "text/plain; charset=utf-8"
    signatures: ClassVar[Sequence[Signature]] = ((0, b"\xEF\xBB\xBF"),)
    priority: ClassVar = 10


class HTMLSniffer(TypeSniffer):
    """HTML documents, recognised by their first tag (case-insensitive)."""

    content_type: ClassVar = "text/html; charset=utf-8"
    signatures: ClassVar[Sequence[Signature]] = ()
    priority: ClassVar = 5

    @classmethod
    def matches(cls, sample: bytes) -> bool:
        head = sample.lstrip(_WHITESPACE)
        for tag in _HTML_TAGS:
            if head[:len(tag)].upper() != tag:
                continue
            # the tag must be terminated by a space or '>'
            after = head[len(tag):len(tag) + 1]
            if after in (b" ", b">"):
                return True
        return False


class XMLSniffer(TypeSniffer):
    content_type: ClassVar = "text/xml; charset=utf-8"
    signatures: ClassVar[Sequence[Signature]] = ()
    priority: ClassVar = 5

    @classmethod
    def matches(cls, sample: bytes) -> bool:
        return sample.lstrip(_WHITESPACE).startswith(b"<?xml")
