from __future__ import annotations

from typing import ClassVar, Sequence

from ..core.sniffer_base import Signature, TypeSniffer


class RIFFSniffer(TypeSniffer):
    """RIFF containers: 'RIFF', a 4-byte length, then the form type."""

    signatures: ClassVar[Sequence[Signature]] = ((0, b"RIFF"),)
    form_type: ClassVar[bytes]
    priority: ClassVar = 30

    @classmethod
    def matches(cls, sample: bytes) -> bool:
        return super().matches(sample) and sample[8:8 + len(cls.form_type)] == cls.form_type
