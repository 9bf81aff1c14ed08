"""
Fusing sequence adapters.

``fuse(seq)`` wraps any pull-based sequence so that once it reports
exhaustion (StopIteration) it keeps reporting it, from both ends and for
every bulk operation, without calling the wrapped sequence again.

Architecture:
- capability: the Fused tag and optional-capability protocols
- _helpers: capability dispatch with defaults built from ``__next__``
- adapters: CheckedFuse (tracks exhaustion) and ForwardFuse (Fused input)
- writer: Log + Probe for tracing calls that reach a sequence
"""

# Core types
from ._types import Fold, Predicate, SizeHint, TryFold

# Capability dispatch (for custom adapters)
from . import _helpers

# Capabilities
from .capability import (
    DoubleEnded,
    ExactSize,
    Fused,
    TrustedRandomAccess,
    is_double_ended,
    is_fused,
    supports_random_access,
)

# Adapters
from .adapters import DEFAULT_POLICY, CheckedFuse, ForwardFuse, Fuse, FusePolicy, fuse

# Tracing
from . import writer
from .writer import Call, FusedProbe, Log, Probe, probe

# Errors
from ._errors import CapabilityError, UncheckedAccessError

__all__ = (
    # Types
    "Fold",
    "Predicate",
    "SizeHint",
    "TryFold",
    # Capability dispatch
    "_helpers",
    # Capabilities
    "DoubleEnded",
    "ExactSize",
    "Fused",
    "TrustedRandomAccess",
    "is_double_ended",
    "is_fused",
    "supports_random_access",
    # Adapters
    "DEFAULT_POLICY",
    "CheckedFuse",
    "ForwardFuse",
    "Fuse",
    "FusePolicy",
    "fuse",
    # Tracing
    "writer",
    "Call",
    "FusedProbe",
    "Log",
    "Probe",
    "probe",
    # Errors
    "CapabilityError",
    "UncheckedAccessError",
)
