"""
Hiking session - owns the roster and the running total for one hike.

Events arrive in hike order: hikers join the group, and every bridge is
crossed by everyone who has joined so far.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable

from hiking.models import AddHiker, Bridge, BridgeCrossing, ComputeMode, CrossBridge, Hiker, HikingEvent
from hiking.solver.base import create_engine
from hiking.solver.trace import CrossingTracer, TraceOptions

logger = logging.getLogger(__name__)

_APPROACH_LABELS = {
    ComputeMode.OPTIMIZED: "Approach-1",
    ComputeMode.BRUTE_FORCE: "Approach-2",
}


class HikingSession:
    """Accumulates crossing time over a sequence of bridges.

    The compute mode is fixed for the lifetime of the session.

    Usage:
        session = HikingSession(ComputeMode.OPTIMIZED)
        session.add_hiker(Hiker(name="A", speed=100))
        session.add_hiker(Hiker(name="B", speed=50))
        session.cross_bridge(Bridge(name="1st", length=100))
        session.total_time  # 2.0
    """

    def __init__(self, mode: ComputeMode = ComputeMode.OPTIMIZED, trace: TraceOptions | None = None) -> None:
        self._mode = ComputeMode(mode)
        self.tracer = CrossingTracer(trace)
        self._engine = create_engine(self._mode, self.tracer)
        self._hikers: list[Hiker] = []
        self._crossings: list[BridgeCrossing] = []
        self._total_time = 0.0

    @property
    def mode(self) -> ComputeMode:
        return self._mode

    @property
    def hikers(self) -> tuple[Hiker, ...]:
        return tuple(self._hikers)

    @property
    def crossings(self) -> tuple[BridgeCrossing, ...]:
        return tuple(self._crossings)

    @property
    def total_time(self) -> float:
        """Total crossing time over every bridge crossed so far."""
        return self._total_time

    def add_hiker(self, hiker: Hiker) -> None:
        """Add a hiker to the group. Only later bridges include them."""
        self.tracer.log_hiker_added(hiker)
        self._hikers.append(hiker)

    def cross_bridge(self, bridge: Bridge) -> BridgeCrossing:
        """Cross a bridge with the current roster and add its time to the total.

        Raises:
            EmptyRosterError: If no hiker has been added yet
        """
        self.tracer.log_bridge(bridge.name, bridge.length)

        start = time.perf_counter()
        crossing = self._engine.cross(self._hikers, bridge)
        elapsed = time.perf_counter() - start

        self._total_time += crossing.time
        crossing = crossing.model_copy(update={"total_time": self._total_time})
        self._crossings.append(crossing)

        label = _APPROACH_LABELS[self._mode]
        self.tracer.log_intermediate(f"{label}: Time to cross bridge {bridge.name}: {crossing.time:g}")
        self.tracer.log_intermediate(f"{label}: Total Time to cross: {self._total_time:g}")
        self.tracer.log_timing(f"{label}: bridge {bridge.name} took {elapsed * 1e6:.0f} us to compute")
        logger.debug(f"Crossed {bridge.name}: {crossing.time} (total {self._total_time})")
        return crossing

    def apply(self, event: HikingEvent) -> BridgeCrossing | None:
        """Apply one hike event. Returns the crossing for bridge events."""
        if isinstance(event, AddHiker):
            self.add_hiker(event.hiker)
            return None
        return self.cross_bridge(event.bridge)

    def run(self, events: Iterable[HikingEvent]) -> float:
        """Apply events in order and return the total time."""
        for event in events:
            self.apply(event)
        return self._total_time

    def reset(self) -> None:
        """Forget all hikers, crossings and accumulated time."""
        self._hikers.clear()
        self._crossings.clear()
        self._total_time = 0.0
        self.tracer.clear()
