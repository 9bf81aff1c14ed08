from __future__ import annotations

import typing
from collections import deque
from collections.abc import Iterable

import pytest

from fusing import Fused


class Flaky:
    """
    Forward-only sequence that raises StopIteration once, then resumes
    with ``after``. Counts every pull it receives.
    """

    def __init__(self, values: Iterable[typing.Any], after: Iterable[typing.Any] = (99,)) -> None:
        self._values = deque(values)
        self._after = deque(after)
        self._reported = False
        self.pulls = 0

    def __iter__(self) -> Flaky:
        return self

    def __next__(self) -> typing.Any:
        self.pulls += 1
        if self._values:
            return self._values.popleft()
        if not self._reported:
            self._reported = True
            raise StopIteration
        if self._after:
            return self._after.popleft()
        raise StopIteration


class Deck:
    """Double-ended sequence that is refilled with ``revive`` after its first exhaustion."""

    def __init__(self, values: Iterable[typing.Any], revive: Iterable[typing.Any] = (99,)) -> None:
        self._items = deque(values)
        self._revive = list(revive)
        self._reported = False

    def __iter__(self) -> Deck:
        return self

    def _pop(self, front: bool) -> typing.Any:
        if self._items:
            return self._items.popleft() if front else self._items.pop()
        if not self._reported:
            self._reported = True
            self._items.extend(self._revive)
        raise StopIteration

    def __next__(self) -> typing.Any:
        return self._pop(front=True)

    def next_back(self) -> typing.Any:
        return self._pop(front=False)

    def size_hint(self) -> tuple[int, int | None]:
        n = len(self._items)
        return (n, n)

    def __len__(self) -> int:
        return len(self._items)


class Slice:
    """Double-ended, exact-size sequence over a list with random access."""

    def __init__(self, values: Iterable[typing.Any]) -> None:
        self._values = list(values)
        self._front = 0
        self._back = len(self._values)

    def __iter__(self) -> Slice:
        return self

    def __next__(self) -> typing.Any:
        if self._front >= self._back:
            raise StopIteration
        value = self._values[self._front]
        self._front += 1
        return value

    def next_back(self) -> typing.Any:
        if self._front >= self._back:
            raise StopIteration
        self._back -= 1
        return self._values[self._back]

    def size_hint(self) -> tuple[int, int | None]:
        n = self._back - self._front
        return (n, n)

    def __len__(self) -> int:
        return self._back - self._front

    def get_unchecked(self, index: int) -> typing.Any:
        return self._values[self._front + index]

    @staticmethod
    def may_have_side_effect() -> bool:
        return False


class FusedSlice(Slice, Fused):
    """Slice that declares the fuse guarantee."""


class Boom:
    """Raises ValueError on the first pull, then yields ``values``."""

    def __init__(self, values: Iterable[typing.Any]) -> None:
        self._values = deque(values)
        self._armed = True

    def __iter__(self) -> Boom:
        return self

    def __next__(self) -> typing.Any:
        if self._armed:
            self._armed = False
            raise ValueError("boom")
        if not self._values:
            raise StopIteration
        return self._values.popleft()


@pytest.fixture
def flaky() -> Flaky:
    return Flaky([1, 2, 3], after=[4, 5])


@pytest.fixture
def deck() -> Deck:
    return Deck([1, 2, 3], revive=[7, 8])


@pytest.fixture
def fused_slice() -> FusedSlice:
    return FusedSlice([10, 20, 30, 40])
