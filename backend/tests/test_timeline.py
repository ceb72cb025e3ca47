"""Tests for the monthly disbursement timeline."""

from __future__ import annotations

import math

import pytest

from canteiro.models.enums import PhaseType
from canteiro.models.schedule import DetailedPhase
from canteiro.schedule import generate_schedule
from canteiro.timeline import build_timeline, s_curve_distribution, smooth_timeline

TOTAL = 1_000_000.0


def _make_phase(**overrides) -> DetailedPhase:
    defaults = {
        "id": "c4",
        "name": "Supraestrutura (Estrutura)",
        "type": PhaseType.CONSTRUCTION,
        "weight": 0.16,
        "start_month": 2,
        "end_month": 4,
        "base_value": 300.0,
        "inflated_value": 300.0,
    }
    defaults.update(overrides)
    return DetailedPhase(**defaults)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class TestSmoothTimeline:
    def test_short_series_unchanged(self) -> None:
        assert smooth_timeline([1.0, 2.0]) == [1.0, 2.0]
        assert smooth_timeline([]) == []

    def test_moving_average_preserves_total(self) -> None:
        # Averages [1.5, 1, 1.5] rescaled by 3 / 4.
        result = smooth_timeline([0.0, 3.0, 0.0])
        assert result == pytest.approx([1.125, 0.75, 1.125])
        assert sum(result) == pytest.approx(3.0)

    def test_all_zero(self) -> None:
        assert smooth_timeline([0.0, 0.0, 0.0]) == [0.0, 0.0, 0.0]


class TestSCurve:
    def test_single_month(self) -> None:
        assert s_curve_distribution(1) == [1.0]

    def test_empty(self) -> None:
        assert s_curve_distribution(0) == []

    def test_normalized_and_bell_shaped(self) -> None:
        weights = s_curve_distribution(12)
        assert sum(weights) == pytest.approx(1.0)
        assert max(weights) == weights[5] or max(weights) == weights[4]
        assert weights[0] < weights[5]
        assert weights[-1] < weights[5]


# ---------------------------------------------------------------------------
# build_timeline
# ---------------------------------------------------------------------------


class TestBuildTimelineEdgeCases:
    def test_zero_total_is_empty(self) -> None:
        assert build_timeline(0, 12) == []

    def test_non_finite_total_is_empty(self) -> None:
        assert build_timeline(float("nan"), 12) == []
        assert build_timeline(-5.0, 12) == []

    def test_invalid_deadline_defaults_to_twelve(self) -> None:
        assert len(build_timeline(TOTAL, float("nan"))) == 12
        assert len(build_timeline(TOTAL, 0)) == 12

    def test_fractional_deadline_floored(self) -> None:
        assert len(build_timeline(TOTAL, 7.9)) == 7


class TestFallbackCurve:
    @pytest.fixture()
    def timeline(self) -> list:
        return build_timeline(TOTAL, 10)

    def test_sums_to_total(self, timeline: list) -> None:
        assert sum(p.monthly_value for p in timeline) == pytest.approx(TOTAL)
        assert timeline[-1].accumulated_pct == pytest.approx(100.0)

    def test_hard_and_soft_split(self, timeline: list) -> None:
        for point in timeline:
            assert point.hard_cost + point.soft_cost == pytest.approx(point.monthly_value)
            assert point.hard_cost == pytest.approx(point.monthly_value * 0.85)

    def test_labels(self, timeline: list) -> None:
        assert [p.label for p in timeline] == [f"M{m}" for m in range(1, 11)]
        assert [p.month for p in timeline] == list(range(1, 11))

    def test_peak_flagged(self, timeline: list) -> None:
        peaks = [p for p in timeline if p.is_peak]
        assert peaks
        assert max(p.monthly_value for p in timeline) == pytest.approx(
            max(p.monthly_value for p in peaks)
        )


class TestScheduledPhases:
    @pytest.fixture()
    def timeline(self) -> list:
        phases = generate_schedule(TOTAL, 12, 700_000.0)
        return build_timeline(TOTAL, 12, phases)

    def test_length_matches_deadline(self, timeline: list) -> None:
        assert len(timeline) == 12

    def test_sums_to_total(self, timeline: list) -> None:
        assert sum(p.monthly_value for p in timeline) == pytest.approx(TOTAL)
        assert timeline[-1].accumulated_value == pytest.approx(TOTAL)
        assert timeline[-1].accumulated_pct == pytest.approx(100.0)

    def test_accumulated_is_monotonic(self, timeline: list) -> None:
        values = [p.accumulated_value for p in timeline]
        assert values == sorted(values)

    def test_first_month_is_soft_cost_only(self, timeline: list) -> None:
        assert timeline[0].soft_cost > 0
        assert timeline[0].hard_cost == 0

    def test_values_finite(self, timeline: list) -> None:
        for point in timeline:
            assert math.isfinite(point.monthly_value)
            assert point.monthly_value >= 0

    def test_phase_past_deadline_folded_into_last_month(self) -> None:
        phase = _make_phase(start_month=13, end_month=13, type=PhaseType.POST)
        timeline = build_timeline(300.0, 12, [phase])
        assert sum(p.monthly_value for p in timeline) == pytest.approx(300.0)
        assert timeline[11].hard_cost > 0

    def test_split_covers_months_filled_by_smoothing(self) -> None:
        phase = _make_phase(start_month=1, end_month=1, inflated_value=100.0)
        timeline = build_timeline(100.0, 4, [phase])
        assert timeline[1].monthly_value == pytest.approx(40.0)
        for point in timeline:
            assert point.hard_cost + point.soft_cost == pytest.approx(point.monthly_value)
        assert timeline[1].hard_cost == pytest.approx(40.0)

    def test_smoothed_month_takes_neighbour_split(self) -> None:
        phases = [
            _make_phase(
                id="p1", type=PhaseType.PRE, start_month=1, end_month=1, inflated_value=100.0
            ),
            _make_phase(start_month=3, end_month=3, inflated_value=100.0),
        ]
        timeline = build_timeline(200.0, 4, phases)
        assert timeline[1].hard_cost == pytest.approx(timeline[1].soft_cost)
        assert timeline[1].hard_cost > 0
        for point in timeline:
            assert point.hard_cost + point.soft_cost == pytest.approx(point.monthly_value)

    def test_non_positive_phase_values_skipped(self) -> None:
        phases = [_make_phase(), _make_phase(id="c5", inflated_value=-10.0)]
        timeline = build_timeline(300.0, 6, phases)
        assert sum(p.monthly_value for p in timeline) == pytest.approx(300.0)
