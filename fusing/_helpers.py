"""Capability dispatch for wrapped sequences.

Each ``*_of`` helper calls the sequence's own method when it has one and
otherwise falls back to a default built from ``__next__`` / ``next_back``.
Defaults stop at the first StopIteration and never pull again in the same
call. These are not part of the public API but can be used by custom
adapters that need the same capability set."""

from __future__ import annotations

import inspect
import operator
import typing
from collections.abc import Callable
from typing import assert_never

from kungfu import Error, Ok, Result

from ._errors import CapabilityError
from ._types import Fold, Predicate, SizeHint, TryFold


def _method(seq: object, name: str) -> Callable[..., typing.Any] | None:
    method = getattr(seq, name, None)
    return method if callable(method) else None


# Single-value pulls (raise StopIteration for "no value")
def next_back_of[T](seq: typing.Any) -> T:
    """Pull one value from the back of ``seq``."""
    method = _method(seq, "next_back")
    if method is None:
        raise CapabilityError("next_back", type(seq))
    return method()


def nth_of[T](seq: typing.Any, n: int) -> T:
    """
    Skip ``n`` values then pull one.

    A StopIteration while skipping ends the call, no further pulls.
    """
    if n < 0:
        raise ValueError("n must be >= 0")
    method = _method(seq, "nth")
    if method is not None:
        return method(n)
    for _ in range(n):
        next(seq)
    return next(seq)


def nth_back_of[T](seq: typing.Any, n: int) -> T:
    """Same as nth_of() but from the back."""
    if n < 0:
        raise ValueError("n must be >= 0")
    method = _method(seq, "nth_back")
    if method is not None:
        return method(n)
    for _ in range(n):
        next_back_of(seq)
    return next_back_of(seq)


def find_of[T](seq: typing.Any, predicate: Predicate[T]) -> T:
    """Pull until ``predicate`` matches, raising StopIteration if nothing does."""
    method = _method(seq, "find")
    if method is not None:
        return method(predicate)
    while True:
        item = next(seq)
        if predicate(item):
            return item


def rfind_of[T](seq: typing.Any, predicate: Predicate[T]) -> T:
    method = _method(seq, "rfind")
    if method is not None:
        return method(predicate)
    while True:
        item = next_back_of(seq)
        if predicate(item):
            return item


# Draining operations
def count_of(seq: typing.Any) -> int:
    method = _method(seq, "count")
    if method is not None:
        return method()
    total = 0
    try:
        while True:
            next(seq)
            total += 1
    except StopIteration:
        return total


def last_of[T](seq: typing.Any) -> T:
    """Drain ``seq`` and return its last value; StopIteration if it was empty."""
    method = _method(seq, "last")
    if method is not None:
        return method()
    found = False
    last: typing.Any = None
    try:
        while True:
            last = next(seq)
            found = True
    except StopIteration:
        pass
    if not found:
        raise StopIteration
    return last


def fold_of[A, T](seq: typing.Any, acc: A, fold: Fold[A, T]) -> A:
    method = _method(seq, "fold")
    if method is not None:
        return method(acc, fold)
    try:
        while True:
            acc = fold(acc, next(seq))
    except StopIteration:
        return acc


def rfold_of[A, T](seq: typing.Any, acc: A, fold: Fold[A, T]) -> A:
    method = _method(seq, "rfold")
    if method is not None:
        return method(acc, fold)
    try:
        while True:
            acc = fold(acc, next_back_of(seq))
    except StopIteration:
        return acc


def try_fold_of[A, T, B](seq: typing.Any, acc: A, fold: TryFold[A, T, B]) -> Result[A, B]:
    """
    Short-circuiting fold.

    ``fold`` returns Ok(new_acc) to continue or Error(x) to stop; the first
    Error is returned as is, otherwise Ok(final_acc).
    """
    method = _method(seq, "try_fold")
    if method is not None:
        return method(acc, fold)
    while True:
        try:
            item = next(seq)
        except StopIteration:
            return Ok(acc)
        match fold(acc, item):
            case Ok(value):
                acc = value
            case Error(_) as stop:
                return stop
            case _ as unreachable:
                assert_never(unreachable)


def try_rfold_of[A, T, B](seq: typing.Any, acc: A, fold: TryFold[A, T, B]) -> Result[A, B]:
    method = _method(seq, "try_rfold")
    if method is not None:
        return method(acc, fold)
    while True:
        try:
            item = next_back_of(seq)
        except StopIteration:
            return Ok(acc)
        match fold(acc, item):
            case Ok(value):
                acc = value
            case Error(_) as stop:
                return stop
            case _ as unreachable:
                assert_never(unreachable)


# Size and random access
def size_hint_of(seq: typing.Any) -> SizeHint:
    """
    Bounds on the number of values left in ``seq``.

    Falls back to len() for sized sequences and to operator.length_hint()
    (lower bound only) for everything else.
    """
    method = _method(seq, "size_hint")
    if method is not None:
        return method()
    if _method(seq, "__len__") is not None:
        n = len(seq)
        return (n, n)
    return (operator.length_hint(seq), None)


def len_of(seq: typing.Any) -> int:
    """Exact remaining length, from the sequence's own len() or from __len__."""
    method = _method(seq, "len")
    if method is not None:
        return method()
    if _method(seq, "__len__") is None:
        raise CapabilityError("__len__", type(seq))
    return len(seq)


def get_unchecked_of[T](seq: typing.Any, index: int) -> T:
    method = _method(seq, "get_unchecked")
    if method is None:
        raise CapabilityError("get_unchecked", type(seq))
    return method(index)


def may_have_side_effect_of(seq: typing.Any) -> bool:
    """Ask the sequence; unknown sequences are assumed to have side effects."""
    method = _method(seq, "may_have_side_effect")
    if method is None:
        return True
    return bool(method())


def kind_may_have_side_effect(kind: type) -> bool:
    """
    Same question asked of a type with no instance at hand.

    Only static and class methods can answer without an instance, anything
    else counts as unknown.
    """
    attr = inspect.getattr_static(kind, "may_have_side_effect", None)
    if not isinstance(attr, (staticmethod, classmethod)):
        return True
    return bool(getattr(kind, "may_have_side_effect")())


__all__ = (
    # Pulls
    "next_back_of",
    "nth_of",
    "nth_back_of",
    "find_of",
    "rfind_of",
    # Draining
    "count_of",
    "last_of",
    "fold_of",
    "rfold_of",
    "try_fold_of",
    "try_rfold_of",
    # Size and random access
    "size_hint_of",
    "len_of",
    "get_unchecked_of",
    "may_have_side_effect_of",
    "kind_may_have_side_effect",
)
