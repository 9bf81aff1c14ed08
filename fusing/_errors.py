from __future__ import annotations

class CapabilityError(TypeError):
    """Wrapped sequence does not provide an optional capability."""

    capability: str
    kind: type

    def __init__(self, capability: str, kind: type) -> None:
        self.capability = capability
        self.kind = kind
        super().__init__(f"{kind.__qualname__} does not provide the {capability!r} capability")

class UncheckedAccessError(IndexError):
    """get_unchecked() called outside the range certified by size_hint()."""

    index: int
    bound: int

    def __init__(self, index: int, bound: int) -> None:
        self.index = index
        self.bound = bound
        super().__init__(f"Index {index} is outside the certified range [0, {bound})")

__all__ = ("CapabilityError", "UncheckedAccessError")
