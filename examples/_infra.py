from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


class Reconnecting:
    """
    Stream of pages that reports the end once, then "reconnects" and keeps
    producing. A typical hand-written iterator that breaks the protocol.
    """

    def __init__(self, pages: Iterable[str], after_reconnect: Iterable[str]) -> None:
        self._pages = deque(pages)
        self._after = deque(after_reconnect)
        self._ended = False

    def __iter__(self) -> Reconnecting:
        return self

    def __next__(self) -> str:
        if self._pages:
            return self._pages.popleft()
        if not self._ended:
            self._ended = True
            raise StopIteration
        if self._after:
            return self._after.popleft()
        raise StopIteration


class Window:
    """Double-ended view over a list with O(1) random access."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self._front = 0
        self._back = len(self._values)

    def __iter__(self) -> Window:
        return self

    def __next__(self) -> int:
        if self._front >= self._back:
            raise StopIteration
        self._front += 1
        return self._values[self._front - 1]

    def next_back(self) -> int:
        if self._front >= self._back:
            raise StopIteration
        self._back -= 1
        return self._values[self._back]

    def size_hint(self) -> tuple[int, int | None]:
        n = self._back - self._front
        return (n, n)

    def get_unchecked(self, index: int) -> int:
        return self._values[self._front + index]

    @staticmethod
    def may_have_side_effect() -> bool:
        return False


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")
