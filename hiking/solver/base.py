"""
Base types for the crossing engines.

Both engines take the full roster and one bridge and return a BridgeCrossing
whose `time` is that bridge's crossing time. Accumulating the total is the
session's job.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from hiking.models import Bridge, BridgeCrossing, ComputeMode, Hiker

from .trace import CrossingTracer


class CrossingEngine(Protocol):
    """Computes the time for a roster to cross one bridge."""

    mode: ComputeMode

    def cross(self, hikers: Sequence[Hiker], bridge: Bridge) -> BridgeCrossing: ...


def create_engine(mode: ComputeMode, tracer: CrossingTracer | None = None) -> CrossingEngine:
    """Build the engine for a compute mode."""
    # Imported here to keep base importable from both engine modules
    from .brute_force import BruteForceEngine
    from .optimized import OptimizedEngine

    if mode == ComputeMode.OPTIMIZED:
        return OptimizedEngine(tracer)
    if mode == ComputeMode.BRUTE_FORCE:
        return BruteForceEngine(tracer)
    raise ValueError(f"Unknown compute mode: {mode}")
