"""Tests for hiking domain models."""

from __future__ import annotations

import pytest
from pydantic import TypeAdapter, ValidationError

from hiking.models import AddHiker, Bridge, BridgeCrossing, ComputeMode, CrossBridge, Hiker, HikingEvent


class TestHiker:
    def test_time_to_cross(self):
        assert Hiker(name="A", speed=50).time_to_cross(100) == 2.0

    @pytest.mark.parametrize("speed", [0, -10, float("inf"), float("nan")])
    def test_speed_must_be_positive_and_finite(self, speed):
        with pytest.raises(ValidationError):
            Hiker(name="A", speed=speed)

    def test_immutable(self):
        hiker = Hiker(name="A", speed=50)
        with pytest.raises(ValidationError):
            hiker.speed = 10  # type: ignore[misc]


class TestBridge:
    @pytest.mark.parametrize("length", [0, -1])
    def test_length_must_be_positive(self, length):
        with pytest.raises(ValidationError):
            Bridge(name="1st", length=length)


class TestEvents:
    def test_constructors(self):
        assert AddHiker.of("A", 100).hiker == Hiker(name="A", speed=100)
        assert CrossBridge.of("1st", 250).bridge == Bridge(name="1st", length=250)

    def test_discriminated_union(self):
        adapter = TypeAdapter(list[HikingEvent])
        events = adapter.validate_python(
            [
                {"kind": "add_hiker", "hiker": {"name": "A", "speed": 100}},
                {"kind": "cross_bridge", "bridge": {"name": "1st", "length": 100}},
            ]
        )
        assert isinstance(events[0], AddHiker)
        assert isinstance(events[1], CrossBridge)


class TestBridgeCrossing:
    def test_defaults(self):
        crossing = BridgeCrossing(
            bridge=Bridge(name="1st", length=100),
            mode=ComputeMode.OPTIMIZED,
            time=17.0,
            roster_size=4,
        )
        assert crossing.total_time == 0.0
        assert crossing.steps == []
        assert crossing.iterations is None
        assert crossing.optimal_moves == []
