"""
Probe - call-recording sequence wrapper
=======================================

Forwards every capability call to a target sequence and appends a Call
record to its Log. Used to observe exactly which calls reach a sequence,
e.g. to check that a fuse stops forwarding after exhaustion.
"""

from __future__ import annotations

import operator
import typing
from collections.abc import Callable
from dataclasses import dataclass

from ..capability import Fused, is_fused
from .log import Log

type Outcome = typing.Literal["value", "exhausted", "raised"]

_FORWARDED = frozenset(
    {
        "next_back",
        "nth",
        "nth_back",
        "find",
        "rfind",
        "count",
        "last",
        "fold",
        "rfold",
        "try_fold",
        "try_rfold",
        "size_hint",
        "get_unchecked",
    }
)


@dataclass(frozen=True, slots=True)
class Call:
    """One forwarded call and how it ended."""

    op: str
    args: tuple[typing.Any, ...]
    outcome: Outcome
    value: typing.Any = None


class Probe[T]:
    """
    Recording proxy around ``target``.

    Only the capabilities the target actually has are exposed, so capability
    lookups through a probe see the same set as on the target. ``__len__`` is
    not proxied.
    """

    __slots__ = ("_target", "_log")

    def __init__(self, target: typing.Any) -> None:
        self._target = target
        self._log: Log[Call] = Log()

    @property
    def target(self) -> typing.Any:
        return self._target

    @property
    def log(self) -> Log[Call]:
        return self._log

    def _record(self, op: str, args: tuple[typing.Any, ...], call: Callable[[], typing.Any]) -> typing.Any:
        try:
            value = call()
        except StopIteration:
            self._log.append(Call(op, args, "exhausted"))
            raise
        except Exception:
            self._log.append(Call(op, args, "raised"))
            raise
        self._log.append(Call(op, args, "value", value))
        return value

    def __iter__(self) -> Probe[T]:
        return self

    def __next__(self) -> T:
        return self._record("__next__", (), lambda: next(self._target))

    def __length_hint__(self) -> int:
        return operator.length_hint(self._target)

    def __getattr__(self, name: str) -> typing.Any:
        if name not in _FORWARDED:
            raise AttributeError(name)
        method = getattr(self._target, name)

        def forward(*args: typing.Any) -> typing.Any:
            return self._record(name, args, lambda: method(*args))

        return forward

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._target!r}, calls={len(self._log)})"


class FusedProbe[T](Probe[T], Fused):
    """Probe around a Fused target; keeps the tag visible to fuse()."""

    __slots__ = ()


def probe[T](target: typing.Any) -> Probe[T]:
    """Wrap ``target`` in a Probe, preserving its Fused tag."""
    if is_fused(target):
        return FusedProbe(target)
    return Probe(target)


__all__ = (
    "Call",
    "Outcome",
    "Probe",
    "FusedProbe",
    "probe",
)
