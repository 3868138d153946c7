"""
Engine cross-validation.

The brute-force engine is exponential, so it only runs on the small bundled
fixtures. If both engines give the same total on every fixture, the optimized
engine is trusted for the larger hikes.
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from hiking.errors import EngineMismatchError
from hiking.events import load_events
from hiking.models import ComputeMode, HikingEvent
from hiking.session import HikingSession
from hiking.settings import DATA_DIR
from hiking.solver.trace import CrossingTracer, TraceOptions

logger = logging.getLogger(__name__)

VALIDATION_FIXTURES: tuple[Path, ...] = (
    DATA_DIR / "bridge_cross_1.yaml",
    DATA_DIR / "bridge_cross_2.yaml",
)

# Both engines sum the same legs, but in a different order
RELATIVE_TOLERANCE = 1e-9


@dataclass(frozen=True)
class EngineComparison:
    source: str
    optimized_time: float
    brute_force_time: float
    optimized_seconds: float
    brute_force_seconds: float

    @property
    def agree(self) -> bool:
        return math.isclose(self.optimized_time, self.brute_force_time, rel_tol=RELATIVE_TOLERANCE)


def compute_hike_time(
    events: Iterable[HikingEvent],
    mode: ComputeMode,
    trace: TraceOptions | None = None,
) -> float:
    """Total time for a hike, computed by a fresh session."""
    return HikingSession(mode, trace).run(events)


def compare_engines(path: str | Path, trace: TraceOptions | None = None) -> EngineComparison:
    """Run both engines over one event file."""
    events = load_events(path).events
    tracer = CrossingTracer(trace)

    start = time.perf_counter()
    optimized_time = compute_hike_time(events, ComputeMode.OPTIMIZED, trace)
    optimized_seconds = time.perf_counter() - start

    start = time.perf_counter()
    brute_force_time = compute_hike_time(events, ComputeMode.BRUTE_FORCE, trace)
    brute_force_seconds = time.perf_counter() - start

    tracer.log_timing(
        f"total hike time-1: {optimized_time:g}, it took: {optimized_seconds * 1e6:.0f} us to compute"
    )
    tracer.log_timing(
        f"total hike time-2: {brute_force_time:g}, it took: {brute_force_seconds * 1e6:.0f} us to compute"
    )

    return EngineComparison(
        source=str(path),
        optimized_time=optimized_time,
        brute_force_time=brute_force_time,
        optimized_seconds=optimized_seconds,
        brute_force_seconds=brute_force_seconds,
    )


def validate_engines_agree(
    paths: Sequence[str | Path] | None = None,
    trace: TraceOptions | None = None,
) -> list[EngineComparison]:
    """Compare both engines on each fixture.

    Raises:
        EngineMismatchError: On the first fixture where the totals differ
        EventFileError: If a fixture cannot be read
    """
    comparisons = []
    for path in paths if paths is not None else VALIDATION_FIXTURES:
        comparison = compare_engines(path, trace)
        if not comparison.agree:
            raise EngineMismatchError(comparison.source, comparison.optimized_time, comparison.brute_force_time)
        logger.debug(f"Engines agree on {comparison.source}: {comparison.optimized_time}")
        comparisons.append(comparison)
    return comparisons
