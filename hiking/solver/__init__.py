"""
Hiking Solver - Engines computing how long a group needs to cross a bridge.

This package contains:
- OptimizedEngine: Closed-form ferry/escort reduction for any roster size
- BruteForceEngine: Exhaustive branch-and-bound search for small rosters
- CrossingTracer / TraceOptions: Category-gated diagnostic output
"""

from .base import CrossingEngine, create_engine
from .brute_force import (
    BruteForceEngine,
    Direction,
    Leg,
    SearchContext,
    brute_force_crossing_time,
    brute_force_search,
)
from .optimized import OptimizedEngine, optimized_crossing_time, plan_crossing, sort_by_speed
from .trace import CrossingTracer, TraceOptions

__all__ = [
    "BruteForceEngine",
    "CrossingEngine",
    "CrossingTracer",
    "Direction",
    "Leg",
    "OptimizedEngine",
    "SearchContext",
    "TraceOptions",
    "brute_force_crossing_time",
    "brute_force_search",
    "create_engine",
    "optimized_crossing_time",
    "plan_crossing",
    "sort_by_speed",
]
