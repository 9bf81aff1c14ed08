from __future__ import annotations

import pytest

from conftest import Deck, Flaky, FusedSlice, Slice
from fusing import (
    DoubleEnded,
    ExactSize,
    Fused,
    TrustedRandomAccess,
    fuse,
    is_double_ended,
    is_fused,
    supports_random_access,
)


class TestFusedTag:
    @pytest.mark.parametrize(
        "seq",
        [
            iter([1]),
            reversed([1]),
            iter((1,)),
            iter(range(3)),
            iter(range(1 << 70)),
            iter("abc"),
            iter("été"),
            iter(b"ab"),
            iter({1, 2}),
            iter({"a": 1}),
            iter({"a": 1}.values()),
            iter({"a": 1}.items()),
            (x for x in ()),
        ],
    )
    def test_builtins_are_fused(self, seq):
        assert is_fused(seq)

    def test_lazy_builtins_are_not(self):
        assert not is_fused(map(str, [1]))
        assert not is_fused(zip([1], [2]))

    def test_custom_types(self):
        assert not is_fused(Flaky([]))
        assert not is_fused(Slice([]))
        assert is_fused(FusedSlice([]))

    def test_register(self):
        class Once:
            def __next__(self):
                raise StopIteration

        assert not is_fused(Once())
        Fused.register(Once)
        assert is_fused(Once())
        assert fuse(Once()).released is False

    def test_adapters_are_fused(self):
        assert is_fused(fuse(Flaky([])))
        assert isinstance(fuse(Flaky([])), Fused)


class TestProtocols:
    def test_double_ended(self):
        assert is_double_ended(Deck([]))
        assert not is_double_ended(Flaky([]))
        assert isinstance(Deck([]), DoubleEnded)
        assert not isinstance(Flaky([]), DoubleEnded)

    def test_exact_size(self):
        assert isinstance(Deck([1]), ExactSize)
        assert not isinstance(Flaky([1]), ExactSize)

    def test_random_access(self):
        assert supports_random_access(Slice([]))
        assert not supports_random_access(Deck([]))
        assert isinstance(Slice([]), TrustedRandomAccess)
        assert not isinstance(Deck([]), TrustedRandomAccess)
