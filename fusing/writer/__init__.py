"""
Writer
======

Call tracing for sequences:
- Log: monoidal accumulator (identity ``Log()``, ``combine`` concatenates)
- Probe: forwards capability calls to a target and records them into a Log
"""

from .log import Log
from .probe import Call, FusedProbe, Outcome, Probe, probe

__all__ = (
    "Log",
    "Call",
    "Outcome",
    "Probe",
    "FusedProbe",
    "probe",
)
