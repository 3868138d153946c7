"""Tests for the engine cross-validation harness."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from hiking.errors import EngineMismatchError, EventFileError
from hiking.events import load_events
from hiking.models import ComputeMode
from hiking.solver.trace import TraceOptions
from hiking.validation import (
    VALIDATION_FIXTURES,
    EngineComparison,
    compare_engines,
    compute_hike_time,
    validate_engines_agree,
)


class TestComputeHikeTime:
    def test_default_hike(self, data_dir):
        """Bundled hike: 17 + 132.5 + 95.5 minutes."""
        events = load_events(data_dir / "hiking_event_default.yaml").events
        assert compute_hike_time(events, ComputeMode.OPTIMIZED) == 245.0

    @pytest.mark.parametrize(
        "fixture,expected",
        [("bridge_cross_1.yaml", 19.5 + 12.75), ("bridge_cross_2.yaml", 21.0 + 44.0)],
    )
    def test_fixtures_both_modes(self, data_dir, fixture, expected):
        events = load_events(data_dir / fixture).events
        assert compute_hike_time(events, ComputeMode.OPTIMIZED) == expected
        assert compute_hike_time(events, ComputeMode.BRUTE_FORCE) == expected


class TestCompareEngines:
    def test_comparison_agrees(self, data_dir):
        comparison = compare_engines(data_dir / "bridge_cross_1.yaml")
        assert comparison.agree
        assert comparison.optimized_time == comparison.brute_force_time == 32.25
        assert comparison.optimized_seconds >= 0
        assert comparison.brute_force_seconds >= 0

    def test_agree_tolerates_summation_order(self):
        comparison = EngineComparison("x", 0.1 + 0.2, 0.3, 0.0, 0.0)
        assert comparison.agree

    def test_disagreement(self):
        assert not EngineComparison("x", 19.5, 20.0, 0.0, 0.0).agree

    def test_timing_trace(self, data_dir, caplog):
        with caplog.at_level("INFO", logger="hiking.solver.trace"):
            compare_engines(data_dir / "bridge_cross_2.yaml", TraceOptions(trace_timing=True))
        assert "total hike time-1: 65" in caplog.text
        assert "total hike time-2: 65" in caplog.text


class TestValidateEnginesAgree:
    def test_bundled_fixtures_agree(self):
        comparisons = validate_engines_agree()
        assert len(comparisons) == len(VALIDATION_FIXTURES)
        assert all(c.agree for c in comparisons)

    def test_explicit_paths(self, event_file):
        path = event_file("hikers:\n  - name: A\n    speed: 10\n  - name: B\n    speed: 30\nbridge:\n  - length: 60\n")
        comparisons = validate_engines_agree([path])
        assert comparisons[0].optimized_time == 6.0

    def test_mismatch_raises(self, data_dir):
        def fake_time(events, mode, trace=None):
            return 1.0 if mode == ComputeMode.OPTIMIZED else 2.0

        with patch("hiking.validation.compute_hike_time", side_effect=fake_time):
            with pytest.raises(EngineMismatchError) as exc_info:
                validate_engines_agree([data_dir / "bridge_cross_1.yaml"])
        assert exc_info.value.optimized_time == 1.0
        assert exc_info.value.brute_force_time == 2.0

    def test_missing_fixture_raises(self, tmp_path):
        with pytest.raises(EventFileError):
            validate_engines_agree([tmp_path / "missing.yaml"])
