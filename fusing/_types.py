"""
Core type definitions for fusing.

Aliases shared by the capability helpers and the adapters.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Result

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Fold = plain accumulating step, always continues
type Fold[A, T] = Callable[[A, T], A]

# TryFold = short-circuiting step: Ok(acc) continues, Error(x) stops the fold
type TryFold[A, T, B] = Callable[[A, T], Result[A, B]]

# SizeHint = (lower bound, upper bound or None when unbounded/unknown)
type SizeHint = tuple[int, int | None]

__all__ = (
    "Predicate",
    "Fold",
    "TryFold",
    "SizeHint",
)
