"""
Fuse adapter
============

Wrap any sequence so that after the first StopIteration it stays exhausted,
from both ends and for every bulk operation.

Two strategies, picked once by fuse():
- CheckedFuse: holds the wrapped sequence until exhaustion is seen, then drops it
- ForwardFuse: the wrapped type is already Fused, every call is a plain forward
"""

from __future__ import annotations

import abc
import typing
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from kungfu import Ok, Result

from .._errors import CapabilityError, UncheckedAccessError
from .._helpers import (
    count_of,
    find_of,
    fold_of,
    get_unchecked_of,
    kind_may_have_side_effect,
    last_of,
    len_of,
    may_have_side_effect_of,
    next_back_of,
    nth_back_of,
    nth_of,
    rfind_of,
    rfold_of,
    size_hint_of,
    try_fold_of,
    try_rfold_of,
)
from .._types import Fold, Predicate, SizeHint, TryFold
from ..capability import Fused, is_fused


@dataclass(frozen=True, slots=True)
class FusePolicy:
    """
    Fuse configuration.

    trust_fused: use ForwardFuse for sequences whose type is Fused
    check_indexing: reject get_unchecked() outside [0, size_hint()[0])
    """

    trust_fused: bool = True
    check_indexing: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.trust_fused, bool):
            raise TypeError("FusePolicy.trust_fused must be a bool")
        if not isinstance(self.check_indexing, bool):
            raise TypeError("FusePolicy.check_indexing must be a bool")

    @classmethod
    def checked(cls, check_indexing: bool = True) -> FusePolicy:
        """Always track exhaustion, even for sequences that declare Fused."""
        return cls(trust_fused=False, check_indexing=check_indexing)

    @classmethod
    def trusting(cls, check_indexing: bool = True) -> FusePolicy:
        """Forward straight to sequences that declare Fused."""
        return cls(trust_fused=True, check_indexing=check_indexing)


DEFAULT_POLICY = FusePolicy()


def _check_index(inner: typing.Any, index: int) -> None:
    bound = size_hint_of(inner)[0]
    if not 0 <= index < bound:
        raise UncheckedAccessError(index, bound)


def _check_n(n: int) -> None:
    if n < 0:
        raise ValueError("n must be >= 0")


def _guard[T](predicate: Predicate[T]) -> Predicate[T]:
    # StopIteration from a predicate is a bug in the predicate, not exhaustion
    def guarded(item: T) -> bool:
        try:
            return predicate(item)
        except StopIteration as exc:
            raise RuntimeError("predicate raised StopIteration") from exc

    return guarded


class Fuse[T](Iterator[T], Fused):
    """
    Sequence that reports exhaustion forever once it has reported it once.

    "No value" is StopIteration for every pull-style method (``__next__``,
    next_back, nth, nth_back, find, rfind, last). Draining methods (count,
    last, fold, rfold, try_fold, try_rfold) hand the wrapped sequence over
    and leave the wrapper exhausted.

    A StopIteration raised by a find / rfind predicate is re-raised as
    RuntimeError, the way PEP 479 treats it inside generators, so it never
    counts as exhaustion. A negative ``n`` for nth / nth_back is a
    ValueError in every state.
    """

    __slots__ = ()

    @property
    @abc.abstractmethod
    def released(self) -> bool:
        """True once the wrapped sequence has been dropped."""

    @abc.abstractmethod
    def next_back(self) -> T: ...

    @abc.abstractmethod
    def nth(self, n: int) -> T: ...

    @abc.abstractmethod
    def nth_back(self, n: int) -> T: ...

    @abc.abstractmethod
    def find(self, predicate: Predicate[T]) -> T: ...

    @abc.abstractmethod
    def rfind(self, predicate: Predicate[T]) -> T: ...

    @abc.abstractmethod
    def count(self) -> int: ...

    @abc.abstractmethod
    def last(self) -> T: ...

    @abc.abstractmethod
    def size_hint(self) -> SizeHint: ...

    @abc.abstractmethod
    def len(self) -> int: ...

    @abc.abstractmethod
    def is_empty(self) -> bool: ...

    @abc.abstractmethod
    def fold[A](self, acc: A, fold: Fold[A, T]) -> A: ...

    @abc.abstractmethod
    def rfold[A](self, acc: A, fold: Fold[A, T]) -> A: ...

    @abc.abstractmethod
    def try_fold[A, B](self, acc: A, fold: TryFold[A, T, B]) -> Result[A, B]: ...

    @abc.abstractmethod
    def try_rfold[A, B](self, acc: A, fold: TryFold[A, T, B]) -> Result[A, B]: ...

    @abc.abstractmethod
    def get_unchecked(self, index: int) -> T: ...

    @abc.abstractmethod
    def may_have_side_effect(self) -> bool: ...

    def __length_hint__(self) -> int:
        return self.size_hint()[0]


class CheckedFuse[T](Fuse[T]):
    """
    Fuse for sequences without the Fused tag.

    Invariant: ``_inner is None`` iff exhaustion has been observed. The
    transition only goes one way.
    """

    __slots__ = ("_inner", "_kind", "_policy")

    def __init__(self, inner: Iterator[T], policy: FusePolicy = DEFAULT_POLICY) -> None:
        self._inner: Iterator[T] | None = inner
        self._kind = type(inner)
        self._policy = policy

    @property
    def released(self) -> bool:
        return self._inner is None

    def _pull[R](self, op: Callable[..., R], *args: typing.Any) -> R:
        inner = self._inner
        if inner is None:
            raise StopIteration
        try:
            return op(inner, *args)
        except StopIteration:
            self._inner = None
            raise

    def _take(self) -> Iterator[T] | None:
        inner, self._inner = self._inner, None
        return inner

    # Pulls

    def __next__(self) -> T:
        return self._pull(next)

    def next_back(self) -> T:
        return self._pull(next_back_of)

    def nth(self, n: int) -> T:
        _check_n(n)
        return self._pull(nth_of, n)

    def nth_back(self, n: int) -> T:
        _check_n(n)
        return self._pull(nth_back_of, n)

    def find(self, predicate: Predicate[T]) -> T:
        return self._pull(find_of, _guard(predicate))

    def rfind(self, predicate: Predicate[T]) -> T:
        return self._pull(rfind_of, _guard(predicate))

    # Draining

    def count(self) -> int:
        inner = self._take()
        if inner is None:
            return 0
        return count_of(inner)

    def last(self) -> T:
        inner = self._take()
        if inner is None:
            raise StopIteration
        return last_of(inner)

    def fold[A](self, acc: A, fold: Fold[A, T]) -> A:
        inner = self._take()
        if inner is None:
            return acc
        return fold_of(inner, acc, fold)

    def rfold[A](self, acc: A, fold: Fold[A, T]) -> A:
        inner = self._take()
        if inner is None:
            return acc
        return rfold_of(inner, acc, fold)

    def try_fold[A, B](self, acc: A, fold: TryFold[A, T, B]) -> Result[A, B]:
        # Released even when the fold stops early: the wrapped sequence was handed over.
        inner = self._take()
        if inner is None:
            return Ok(acc)
        return try_fold_of(inner, acc, fold)

    def try_rfold[A, B](self, acc: A, fold: TryFold[A, T, B]) -> Result[A, B]:
        inner = self._take()
        if inner is None:
            return Ok(acc)
        return try_rfold_of(inner, acc, fold)

    # Size

    def size_hint(self) -> SizeHint:
        inner = self._inner
        if inner is None:
            return (0, 0)
        return size_hint_of(inner)

    def len(self) -> int:
        inner = self._inner
        if inner is None:
            kind = self._kind
            if not (callable(getattr(kind, "len", None)) or callable(getattr(kind, "__len__", None))):
                raise CapabilityError("__len__", kind)
            return 0
        return len_of(inner)

    def is_empty(self) -> bool:
        return self.len() == 0

    # Random access

    def get_unchecked(self, index: int) -> T:
        inner = self._inner
        if inner is None:
            raise UncheckedAccessError(index, 0)
        if self._policy.check_indexing:
            _check_index(inner, index)
        return get_unchecked_of(inner, index)

    def may_have_side_effect(self) -> bool:
        inner = self._inner
        if inner is None:
            return kind_may_have_side_effect(self._kind)
        return may_have_side_effect_of(inner)

    def __repr__(self) -> str:
        if self._inner is None:
            return f"CheckedFuse(<released {self._kind.__qualname__}>)"
        return f"CheckedFuse({self._inner!r})"


class ForwardFuse[T](Fuse[T]):
    """
    Fuse for sequences whose type is Fused.

    ``_inner`` is set once and never cleared, so there is no released state
    and no per-call check. Wrapping a type that is tagged Fused but does not
    behave that way is the tag's fault, not detected here.
    """

    __slots__ = ("_inner", "_policy")

    def __init__(self, inner: Iterator[T], policy: FusePolicy = DEFAULT_POLICY) -> None:
        if not is_fused(inner):
            raise CapabilityError("Fused", type(inner))
        self._inner: Iterator[T] = inner
        self._policy = policy

    @property
    def released(self) -> bool:
        return False

    def __next__(self) -> T:
        return next(self._inner)

    def next_back(self) -> T:
        return next_back_of(self._inner)

    def nth(self, n: int) -> T:
        return nth_of(self._inner, n)

    def nth_back(self, n: int) -> T:
        return nth_back_of(self._inner, n)

    def find(self, predicate: Predicate[T]) -> T:
        return find_of(self._inner, _guard(predicate))

    def rfind(self, predicate: Predicate[T]) -> T:
        return rfind_of(self._inner, _guard(predicate))

    def count(self) -> int:
        return count_of(self._inner)

    def last(self) -> T:
        return last_of(self._inner)

    def fold[A](self, acc: A, fold: Fold[A, T]) -> A:
        return fold_of(self._inner, acc, fold)

    def rfold[A](self, acc: A, fold: Fold[A, T]) -> A:
        return rfold_of(self._inner, acc, fold)

    def try_fold[A, B](self, acc: A, fold: TryFold[A, T, B]) -> Result[A, B]:
        return try_fold_of(self._inner, acc, fold)

    def try_rfold[A, B](self, acc: A, fold: TryFold[A, T, B]) -> Result[A, B]:
        return try_rfold_of(self._inner, acc, fold)

    def size_hint(self) -> SizeHint:
        return size_hint_of(self._inner)

    def len(self) -> int:
        return len_of(self._inner)

    def is_empty(self) -> bool:
        return self.len() == 0

    def get_unchecked(self, index: int) -> T:
        if self._policy.check_indexing:
            _check_index(self._inner, index)
        return get_unchecked_of(self._inner, index)

    def may_have_side_effect(self) -> bool:
        return may_have_side_effect_of(self._inner)

    def __repr__(self) -> str:
        return f"ForwardFuse({self._inner!r})"


def fuse[T](seq: Iterable[T], *, policy: FusePolicy = DEFAULT_POLICY) -> Fuse[T]:
    """
    Wrap ``seq`` with the fuse guarantee.

    Plain iterables are turned into iterators first. The strategy is chosen
    here and never changes for the lifetime of the wrapper.

    Example:
        it = fuse(iter([1, 2, 3]))
        list(it)   # [1, 2, 3]
        next(it)   # StopIteration, forever
    """
    inner: Iterator[T] = seq if callable(getattr(seq, "__next__", None)) else iter(seq)  # type: ignore[assignment]
    if policy.trust_fused and is_fused(inner):
        return ForwardFuse(inner, policy)
    return CheckedFuse(inner, policy)


__all__ = (
    "DEFAULT_POLICY",
    "FusePolicy",
    "Fuse",
    "CheckedFuse",
    "ForwardFuse",
    "fuse",
)
