from typing import ClassVar, Sequence, Tuple

Signature = Tuple[int, bytes]          # (offset, byte-pattern)


class TypeSniffer:
    # --- required by subclasses ---
    content_type: ClassVar[str]
    signatures: ClassVar[Sequence[Signature]]  # magic bytes patterns
    priority: ClassVar[int] = 100            # lower = examined earlier

    @classmethod
    def matches(cls, sample: bytes) -> bool:
        """Return True when `sample` (the first bytes of a file) is of this type."""
        for offset, pat in cls.signatures:
            if sample[offset : offset + len(pat)] == pat:
                return True
        return False

    # --- registry hook ---
    def __init_subclass__(cls, **kw):
        super().__init_subclass__(**kw)
        if getattr(cls, "content_type", None) is None:
            return                            # abstract intermediate class
        from .registry import _REGISTRY
        _REGISTRY.register(cls)           # noqa: E402
