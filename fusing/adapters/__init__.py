from .fuse import DEFAULT_POLICY, CheckedFuse, ForwardFuse, Fuse, FusePolicy, fuse

__all__ = (
    # Policy
    "DEFAULT_POLICY",
    "FusePolicy",
    # Strategies
    "Fuse",
    "CheckedFuse",
    "ForwardFuse",
    # Constructor
    "fuse",
)
