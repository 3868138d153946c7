"""Hiking error classes.

Exceptions raised by the crossing engines, the session and the event loader.
Malformed numbers inside an event file are not exceptions; they are reported
as parse diagnostics (see hiking.events).
"""

from __future__ import annotations


class HikingError(Exception):
    """Base exception for hiking time computation errors."""

    pass


class EmptyRosterError(HikingError):
    """Raised when a bridge crossing is requested with no hikers in the group."""

    def __init__(self, bridge_name: str = "") -> None:
        self.bridge_name = bridge_name
        target = f"bridge '{bridge_name}'" if bridge_name else "a bridge"
        super().__init__(f"Cannot cross {target}: no hikers have been added")


class EventFileError(HikingError):
    """Raised when an event file cannot be found or read."""

    pass


class EngineMismatchError(HikingError):
    """Raised when the optimized and brute-force engines disagree."""

    def __init__(self, source: str, optimized_time: float, brute_force_time: float) -> None:
        self.source = source
        self.optimized_time = optimized_time
        self.brute_force_time = brute_force_time
        super().__init__(
            f"Engines disagree on {source}: optimized={optimized_time}, brute_force={brute_force_time}"
        )
