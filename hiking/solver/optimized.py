"""
Optimized crossing engine.

Moves the two slowest hikers across per step, using whichever of two
strategies is cheaper, then repeats on the remaining faster hikers:

    ferry:  two fastest cross, fastest returns, two slowest cross,
            second fastest returns            -> t1 + t0 + t(k-1) + t1
    escort: fastest and slowest cross, fastest returns, fastest and
            second slowest cross, fastest returns -> t(k-1) + t0 + t(k-2) + t0

where t(i) is the time of the i-th fastest hiker. Base cases: one hiker
walks alone, two hikers take the slower one's time, three hikers take the sum
of all three times.

Example, hikers A:100, B:50, C:20, D:10 ft/min on a 100 ft bridge
(times 1, 2, 5, 10 minutes):

         Left  :    Bridge      : Right
        A,B,C,D: -------------- :
        C,D    : ---A,B (2)---> :         Total:  2
        C,D    : <--A (1)------ :  B      Total:  3
        A      : ---C,D (10)--> :  B      Total: 13
        A      : <--B (2)------ : C,D     Total: 15
               : ---A,B (2)---> : C,D     Total: 17
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from operator import attrgetter

from hiking.errors import EmptyRosterError
from hiking.models import Bridge, BridgeCrossing, ComputeMode, Hiker, ReductionStep

from .trace import CrossingTracer

logger = logging.getLogger(__name__)


def sort_by_speed(hikers: Sequence[Hiker]) -> list[Hiker]:
    """Fastest first. Hikers with equal speed keep their roster order."""
    return sorted(hikers, key=attrgetter("speed"), reverse=True)


def _reduce(ordered: Sequence[Hiker], count: int, length: float) -> tuple[float, list[ReductionStep]]:
    """Crossing time for the first `count` hikers of a fastest-first roster.

    Each step moves the two slowest of the remaining hikers across, so the
    count shrinks by two until one of the base cases is reached.
    """

    def leg(index: int) -> float:
        return ordered[index].time_to_cross(length)

    total = 0.0
    steps: list[ReductionStep] = []
    while count >= 4:
        ferry = leg(1) + leg(0) + leg(count - 1) + leg(1)
        escort = leg(count - 1) + leg(0) + leg(count - 2) + leg(0)
        steps.append(
            ReductionStep(
                count=count,
                ferry_time=ferry,
                escort_time=escort,
                strategy="ferry" if ferry <= escort else "escort",
            )
        )
        total += min(ferry, escort)
        count -= 2

    if count == 3:
        total += leg(0) + leg(1) + leg(2)
    elif count == 2:
        total += leg(1)
    else:
        total += leg(0)
    return total, steps


def plan_crossing(hikers: Sequence[Hiker], bridge_length: float) -> tuple[float, list[ReductionStep]]:
    """Crossing time for a roster plus the strategy chosen at each reduction step.

    Raises:
        EmptyRosterError: If the roster is empty
    """
    if not hikers:
        raise EmptyRosterError()
    ordered = sort_by_speed(hikers)
    return _reduce(ordered, len(ordered), bridge_length)


def optimized_crossing_time(hikers: Sequence[Hiker], bridge_length: float) -> float:
    """Time for a roster to cross one bridge using the optimized strategy."""
    time, _ = plan_crossing(hikers, bridge_length)
    return time


class OptimizedEngine:
    """O(N) engine (after an O(N log N) sort) for production-size rosters."""

    mode = ComputeMode.OPTIMIZED

    def __init__(self, tracer: CrossingTracer | None = None) -> None:
        self.tracer = tracer or CrossingTracer()

    def cross(self, hikers: Sequence[Hiker], bridge: Bridge) -> BridgeCrossing:
        if not hikers:
            raise EmptyRosterError(bridge.name)

        ordered = sort_by_speed(hikers)
        self.tracer.log_roster(ordered)

        time, steps = _reduce(ordered, len(ordered), bridge.length)

        for step in steps:
            self.tracer.log_step(
                f"Approach-1: {step.count} hikers left, ferry={step.ferry_time:g}, "
                f"escort={step.escort_time:g} -> {step.strategy}"
            )
        logger.debug(f"Optimized crossing of {bridge.name} by {len(ordered)} hikers: {time}")

        return BridgeCrossing(
            bridge=bridge,
            mode=self.mode,
            time=time,
            roster_size=len(ordered),
            steps=steps,
        )
