"""
Crossing Tracer - Diagnostic output for the crossing engines.

Each trace category is switched on independently. Disabled categories are
neither recorded nor logged, and no category changes a computed time.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from hiking.models import Hiker

logger = logging.getLogger(__name__)

ROSTER = "roster"
INTERMEDIATE = "intermediate"
STEPS = "steps"
TIMING = "timing"


@dataclass(frozen=True)
class TraceOptions:
    """Which diagnostic categories are emitted.

    Attributes:
        trace_roster: Roster additions and the roster order used for each bridge
        trace_intermediate: Per-bridge and cumulative crossing times
        trace_steps: Optimized reduction steps, brute-force path counts and tied-best move logs
        trace_timing: Wall-clock duration of each computation
    """

    trace_roster: bool = False
    trace_intermediate: bool = False
    trace_steps: bool = False
    trace_timing: bool = False

    @classmethod
    def all(cls) -> TraceOptions:
        return cls(trace_roster=True, trace_intermediate=True, trace_steps=True, trace_timing=True)

    def is_enabled(self, category: str) -> bool:
        return bool(getattr(self, f"trace_{category}", False))


class CrossingTracer:
    """Records and logs enabled trace categories for one session."""

    def __init__(self, options: TraceOptions | None = None) -> None:
        self.options = options or TraceOptions()
        self.entries: dict[str, list[str]] = defaultdict(list)

    def _emit(self, category: str, message: str) -> None:
        if not self.options.is_enabled(category):
            return
        self.entries[category].append(message)
        logger.info(f"[{category.upper()}] {message}")

    def log_roster(self, hikers: Iterable[Hiker], label: str = "Hikers") -> None:
        """Log the roster as `(name:speed)` pairs."""
        if not self.options.trace_roster:
            return
        listing = " ".join(f"({h.name}:{h.speed:g})" for h in hikers)
        self._emit(ROSTER, f"{label}: {listing}")

    def log_hiker_added(self, hiker: Hiker) -> None:
        self._emit(ROSTER, f"ADD:   Hiker: {hiker.name}, Speed: {hiker.speed:g} feet/minute")

    def log_bridge(self, name: str, length: float) -> None:
        self._emit(ROSTER, f"CROSS: Bridge: {name}, Length: {length:g} feet")

    def log_intermediate(self, message: str) -> None:
        self._emit(INTERMEDIATE, message)

    def log_step(self, message: str) -> None:
        self._emit(STEPS, message)

    def log_timing(self, message: str) -> None:
        self._emit(TIMING, message)

    def get_summary(self) -> dict[str, Any]:
        """Get all recorded trace messages keyed by category."""
        return {
            "options": {
                "trace_roster": self.options.trace_roster,
                "trace_intermediate": self.options.trace_intermediate,
                "trace_steps": self.options.trace_steps,
                "trace_timing": self.options.trace_timing,
            },
            "entries": dict(self.entries),
        }

    def clear(self) -> None:
        self.entries.clear()
