"""
Log - monoidal accumulator for call traces
==========================================
"""

from __future__ import annotations

import typing


class Log[A](list[A]):
    """
    Append-only trace of entries.

    A list with monoid operations, so traces from several probes can be
    merged: ``Log()`` is the identity and ``combine`` concatenates.
    """

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        """Create log with items."""
        return Log[T](items)

    def combine(self, other: Log[A], /) -> Log[A]:
        """
        Concatenate two logs into a new one.

        Example:
            Log.of("a", "b").combine(Log.of("c"))  # Log(["a", "b", "c"])
        """
        result: Log[A] = Log(self)
        result.extend(other)
        return result

    def tell(self, item: A, /) -> Log[A]:
        """New log with ``item`` appended; ``self`` is left as is."""
        result: Log[A] = Log(self)
        result.append(item)
        return result

    def ops(self) -> list[str]:
        """Operation names, for entries that carry an ``op`` attribute."""
        return [typing.cast(str, getattr(entry, "op")) for entry in self if hasattr(entry, "op")]

    def calls(self, op: str, /) -> int:
        """Number of entries recorded for operation ``op``."""
        return sum(1 for entry in self if getattr(entry, "op", None) == op)


__all__ = ("Log",)
