"""
Domain models for the hiking time calculator.

Hikers and bridges are validated at construction so the crossing engines can
assume positive, finite speeds and lengths.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

PositiveReal = Annotated[float, Field(gt=0, allow_inf_nan=False)]


class ComputeMode(str, Enum):
    """Which engine computes each bridge crossing."""

    OPTIMIZED = "optimized"
    BRUTE_FORCE = "brute_force"


class Hiker(BaseModel):
    """A hiker and their crossing speed in feet per minute."""

    model_config = ConfigDict(frozen=True)

    name: str
    speed: PositiveReal

    def time_to_cross(self, length: float) -> float:
        """Minutes this hiker needs to walk a bridge of the given length alone."""
        return length / self.speed


class Bridge(BaseModel):
    """A bridge and its length in feet."""

    model_config = ConfigDict(frozen=True)

    name: str
    length: PositiveReal


class AddHiker(BaseModel):
    """Event: a hiker joins the group before the next bridge."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["add_hiker"] = "add_hiker"
    hiker: Hiker

    @classmethod
    def of(cls, name: str, speed: float) -> AddHiker:
        return cls(hiker=Hiker(name=name, speed=speed))


class CrossBridge(BaseModel):
    """Event: the whole group reaches a bridge and crosses it."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["cross_bridge"] = "cross_bridge"
    bridge: Bridge

    @classmethod
    def of(cls, name: str, length: float) -> CrossBridge:
        return cls(bridge=Bridge(name=name, length=length))


HikingEvent = Annotated[AddHiker | CrossBridge, Field(discriminator="kind")]


class ReductionStep(BaseModel):
    """One step of the optimized engine moving the two slowest of `count` hikers."""

    model_config = ConfigDict(frozen=True)

    count: int
    ferry_time: float  # two fastest shuttle the torch
    escort_time: float  # fastest escorts each of the two slowest
    strategy: Literal["ferry", "escort"]

    @property
    def time(self) -> float:
        return min(self.ferry_time, self.escort_time)


class BridgeCrossing(BaseModel):
    """Result of crossing one bridge with the roster at that point of the hike."""

    model_config = ConfigDict(frozen=True)

    bridge: Bridge
    mode: ComputeMode
    time: float
    roster_size: int
    total_time: float = 0.0  # cumulative total after this bridge

    # Optimized engine diagnostics
    steps: list[ReductionStep] = Field(default_factory=list)

    # Brute-force engine diagnostics
    iterations: int | None = None  # complete crossing sequences explored
    optimal_moves: list[list[str]] = Field(default_factory=list)  # one move log per tied-best path
