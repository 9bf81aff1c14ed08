from __future__ import annotations

import dataclasses

import pytest

from fusing import DEFAULT_POLICY, FusePolicy


class TestFusePolicy:
    def test_defaults(self):
        assert DEFAULT_POLICY == FusePolicy(trust_fused=True, check_indexing=True)

    def test_named_constructors(self):
        assert FusePolicy.checked() == FusePolicy(trust_fused=False)
        assert FusePolicy.trusting(check_indexing=False) == FusePolicy(check_indexing=False)

    def test_frozen(self):
        policy = FusePolicy()
        with pytest.raises(dataclasses.FrozenInstanceError):
            policy.trust_fused = False  # type: ignore[misc]

    @pytest.mark.parametrize("field", ["trust_fused", "check_indexing"])
    def test_rejects_non_bool(self, field):
        with pytest.raises(TypeError):
            FusePolicy(**{field: 1})
