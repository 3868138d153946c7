"""
Brute-force crossing engine.

Enumerates every legal sequence of crossings: any pair walks over with the
torch, any single hiker on the far side walks it back, until nobody is left
behind. Branches whose cost already reaches the best complete sequence are
pruned. The state space grows combinatorially with the roster, so this engine
is only meant as a reference for the optimized engine on small rosters.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from itertools import combinations

from hiking.errors import EmptyRosterError
from hiking.logging_config import TRACE, get_logger
from hiking.models import Bridge, BridgeCrossing, ComputeMode, Hiker

from .trace import CrossingTracer

logger = get_logger(__name__)


class Direction(Enum):
    LEFT_TO_RIGHT = 1
    RIGHT_TO_LEFT = 2


@dataclass(frozen=True)
class Leg:
    """One trip across the bridge, with both sides as they are after the trip."""

    direction: Direction
    movers: tuple[str, ...]
    cost: float
    total: float
    left: tuple[str, ...]
    right: tuple[str, ...]

    def describe(self) -> str:
        movers = ", ".join(self.movers)
        left = " ".join(self.left)
        right = " ".join(self.right)
        if self.direction == Direction.LEFT_TO_RIGHT:
            return f"{left} -- {movers} ({self.cost:g}) --> {right}, currentCost: {self.total:g}"
        return f"{left} <-- {movers} ({self.cost:g}) -- {right}, currentCost: {self.total:g}"


@dataclass
class SearchContext:
    """State shared by every branch of one bridge's search."""

    prune: bool = True
    best_cost: float = math.inf
    best_paths: list[tuple[Leg, ...]] = field(default_factory=list)
    iterations: int = 0  # complete crossing sequences reached
    pruned: int = 0

    def record(self, cost: float, path: tuple[Leg, ...]) -> None:
        """Record a complete crossing sequence."""
        self.iterations += 1
        if cost < self.best_cost:
            self.best_cost = cost
            self.best_paths = []
        if cost == self.best_cost:
            self.best_paths.append(path)

    def should_prune(self, cost: float) -> bool:
        if self.prune and self.best_cost <= cost:
            self.pruned += 1
            return True
        return False


def _names(hikers: Sequence[Hiker]) -> tuple[str, ...]:
    return tuple(h.name for h in hikers)


def _search(
    left: tuple[Hiker, ...],
    right: tuple[Hiker, ...],
    direction: Direction,
    cost: float,
    path: tuple[Leg, ...],
    length: float,
    context: SearchContext,
) -> None:
    if not left:
        context.record(cost, path)
        return

    if context.should_prune(cost):
        return

    if direction == Direction.LEFT_TO_RIGHT:
        if len(left) == 1:
            # Only reachable for a one-hiker roster: the hiker walks alone
            pairs: list[tuple[int, ...]] = [(0,)]
        else:
            pairs = list(combinations(range(len(left)), 2))

        for pair in pairs:
            movers = tuple(left[i] for i in pair)
            leg_cost = max(h.time_to_cross(length) for h in movers)
            new_left = tuple(h for i, h in enumerate(left) if i not in pair)
            new_right = right + movers
            leg = Leg(
                direction=direction,
                movers=_names(movers),
                cost=leg_cost,
                total=cost + leg_cost,
                left=_names(new_left),
                right=_names(new_right),
            )
            _search(new_left, new_right, Direction.RIGHT_TO_LEFT, cost + leg_cost, path + (leg,), length, context)
    else:
        for i, hiker in enumerate(right):
            leg_cost = hiker.time_to_cross(length)
            new_left = left + (hiker,)
            new_right = right[:i] + right[i + 1 :]
            leg = Leg(
                direction=direction,
                movers=(hiker.name,),
                cost=leg_cost,
                total=cost + leg_cost,
                left=_names(new_left),
                right=_names(new_right),
            )
            _search(new_left, new_right, Direction.LEFT_TO_RIGHT, cost + leg_cost, path + (leg,), length, context)


def brute_force_search(hikers: Sequence[Hiker], bridge_length: float, prune: bool = True) -> SearchContext:
    """Explore every crossing sequence for a roster and one bridge.

    Args:
        hikers: Roster, all starting on the near side
        bridge_length: Bridge length in feet
        prune: Abandon branches that cannot beat the best complete sequence

    Returns:
        The finished SearchContext; `best_cost` is the crossing time

    Raises:
        EmptyRosterError: If the roster is empty
    """
    if not hikers:
        raise EmptyRosterError()
    context = SearchContext(prune=prune)
    _search(tuple(hikers), (), Direction.LEFT_TO_RIGHT, 0.0, (), bridge_length, context)
    return context


def brute_force_crossing_time(hikers: Sequence[Hiker], bridge_length: float, prune: bool = True) -> float:
    """Minimum time for a roster to cross one bridge, by exhaustive search."""
    return brute_force_search(hikers, bridge_length, prune=prune).best_cost


class BruteForceEngine:
    """Exhaustive engine used to check the optimized engine on small rosters."""

    mode = ComputeMode.BRUTE_FORCE

    def __init__(self, tracer: CrossingTracer | None = None, prune: bool = True) -> None:
        self.tracer = tracer or CrossingTracer()
        self.prune = prune

    def cross(self, hikers: Sequence[Hiker], bridge: Bridge) -> BridgeCrossing:
        if not hikers:
            raise EmptyRosterError(bridge.name)

        self.tracer.log_roster(hikers)

        context = brute_force_search(hikers, bridge.length, prune=self.prune)
        optimal_moves = [[leg.describe() for leg in path] for path in context.best_paths]

        self.tracer.log_step(f"Approach-2: Total iterations: {context.iterations}")
        for moves in optimal_moves:
            self.tracer.log_step("\n    ".join(["Approach-2: optimal sequence:", *moves]))
        if logger.isEnabledFor(TRACE):
            for path in context.best_paths:
                for leg in path:
                    logger.trace(f"Approach-2 leg: {leg.describe()}")  # type: ignore[attr-defined]
        logger.debug(
            f"Brute-force crossing of {bridge.name} by {len(hikers)} hikers: {context.best_cost} "
            f"({context.iterations} paths, {context.pruned} pruned)"
        )

        return BridgeCrossing(
            bridge=bridge,
            mode=self.mode,
            time=context.best_cost,
            roster_size=len(hikers),
            iterations=context.iterations,
            optimal_moves=optimal_moves,
        )
