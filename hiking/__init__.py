"""
Hiking - Time for a group of hikers to cross a series of bridges.

Each bridge holds at most two hikers, who walk at the slower hiker's pace,
and the group's single torch has to be carried back for every crossing.

This package contains:
- models: Domain models (Hiker, Bridge, hike events, crossing results)
- solver: Optimized and brute-force crossing engines
- session: HikingSession accumulating time over a hike
- events: Event file reader
- validation: Cross-check of the two engines
"""

from hiking.errors import EmptyRosterError, EngineMismatchError, EventFileError, HikingError
from hiking.events import ParseResult, load_events, parse_events
from hiking.models import AddHiker, Bridge, BridgeCrossing, ComputeMode, CrossBridge, Hiker, HikingEvent
from hiking.session import HikingSession
from hiking.solver.trace import TraceOptions

__all__ = [
    "AddHiker",
    "Bridge",
    "BridgeCrossing",
    "ComputeMode",
    "CrossBridge",
    "EmptyRosterError",
    "EngineMismatchError",
    "EventFileError",
    "Hiker",
    "HikingError",
    "HikingEvent",
    "HikingSession",
    "ParseResult",
    "TraceOptions",
    "load_events",
    "parse_events",
]
