"""
Capabilities
============

Declared capabilities of wrapped sequences.

- Fused: tag for types that keep raising StopIteration once exhausted
- DoubleEnded / ExactSize / TrustedRandomAccess: optional operations

The tag is a type-level declaration: subclass ``Fused`` or call
``Fused.register(cls)``. Nothing here checks that a registered type actually
behaves, a wrong registration is the registrant's bug.
"""

from __future__ import annotations

import abc
import types
import typing

from ._types import SizeHint


class Fused(abc.ABC):
    """
    Marker for sequences that stay exhausted after the first StopIteration.

    Builtin iterators with that behaviour are registered below.
    """

    __slots__ = ()


@typing.runtime_checkable
class DoubleEnded[T](typing.Protocol):
    """Sequence that can also be pulled from the back."""

    def __next__(self) -> T: ...

    def next_back(self) -> T: ...


@typing.runtime_checkable
class ExactSize(typing.Protocol):
    """Sequence that knows exactly how many values remain."""

    def __len__(self) -> int: ...


@typing.runtime_checkable
class TrustedRandomAccess[T](typing.Protocol):
    """
    Sequence with O(1) access to the i-th value.

    Callers may only ask for positions below ``size_hint()[0]``.
    """

    def size_hint(self) -> SizeHint: ...

    def get_unchecked(self, index: int, /) -> T: ...


def _builtin_fused_types() -> tuple[type, ...]:
    # CPython drops the underlying container when these hit the end
    return (
        type(iter([])),
        type(reversed([])),
        type(iter(())),
        type(iter(range(0))),
        type(iter(range(1 << 64))),
        type(iter("")),
        type(iter("\u20ac")),
        type(iter(b"")),
        type(iter(bytearray())),
        type(iter(set())),
        type(iter({})),
        type(iter({}.values())),
        type(iter({}.items())),
        type(reversed({})),
        type(reversed({}.values())),
        type(reversed({}.items())),
        type(reversed(())),
        type(iter(int, 0)),
        types.GeneratorType,
    )


for _kind in _builtin_fused_types():
    Fused.register(_kind)
del _kind


def is_fused(seq: object) -> bool:
    """Whether the type of ``seq`` declares the fuse guarantee."""
    return issubclass(type(seq), Fused)


def is_double_ended(seq: object) -> bool:
    return callable(getattr(seq, "next_back", None))


def supports_random_access(seq: object) -> bool:
    return callable(getattr(seq, "get_unchecked", None))


__all__ = (
    "Fused",
    "DoubleEnded",
    "ExactSize",
    "TrustedRandomAccess",
    "is_fused",
    "is_double_ended",
    "supports_random_access",
)
