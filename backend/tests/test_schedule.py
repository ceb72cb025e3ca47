"""Tests for the schedule generator and deadline helpers."""

from __future__ import annotations

import logging
import math

import pytest

from canteiro.data.scenarios import SCENARIOS
from canteiro.models.enums import PhaseType
from canteiro.models.project import AreaBreakdown
from canteiro.models.schedule import PhaseMultipliers, ScheduleOptions
from canteiro.schedule import (
    ADMIN_PHASE_NAME,
    admin_distribution_weights,
    adjusted_deadline_months,
    clamp_deadline,
    generate_schedule,
    recommended_deadline_months,
    round_half_up,
    schedule_options_for,
)

INCC = 0.0085
TOTAL = 1_000_000.0
HARD = 700_000.0


def _by_id(phases: list) -> dict:
    return {p.id: p for p in phases}


# ---------------------------------------------------------------------------
# Phase placement (12 months, no multiplier)
# ---------------------------------------------------------------------------


class TestPlacement:
    """12 months → pre window 5 months, construction phases last 4 months."""

    def test_nineteen_atomic_phases_without_hard_cost(self) -> None:
        phases = generate_schedule(TOTAL, 12)
        assert len(phases) == 19
        assert not any(p.type == PhaseType.ADMIN for p in phases)

    def test_pre_phases_one_month_each(self) -> None:
        phases = _by_id(generate_schedule(TOTAL, 12))
        for n in range(1, 6):
            assert (phases[f"p{n}"].start_month, phases[f"p{n}"].end_month) == (n, n)

    def test_construction_phases(self) -> None:
        phases = _by_id(generate_schedule(TOTAL, 12))
        # step = (12 - 5 - 4) / 12 = 0.25
        assert (phases["c1"].start_month, phases["c1"].end_month) == (6, 9)
        assert (phases["c3"].start_month, phases["c3"].end_month) == (7, 10)
        assert (phases["c13"].start_month, phases["c13"].end_month) == (9, 12)

    def test_construction_phases_within_deadline(self) -> None:
        for phase in generate_schedule(TOTAL, 12):
            if phase.type == PhaseType.CONSTRUCTION:
                assert 6 <= phase.start_month <= phase.end_month <= 12

    def test_post_phase_after_deadline(self) -> None:
        f1 = _by_id(generate_schedule(TOTAL, 12))["f1"]
        assert (f1.start_month, f1.end_month) == (13, 13)

    def test_windows_never_inverted_on_short_deadlines(self) -> None:
        for deadline in range(1, 8):
            for phase in generate_schedule(TOTAL, deadline, HARD):
                assert phase.end_month >= phase.start_month
                assert phase.duration_months >= 1


class TestValues:
    def test_base_values_sum_to_total(self) -> None:
        phases = generate_schedule(TOTAL, 12)
        assert sum(p.base_value for p in phases) == pytest.approx(TOTAL)

    def test_inflation_at_midpoint(self) -> None:
        phases = _by_id(generate_schedule(TOTAL, 12))
        p1 = phases["p1"]
        assert p1.base_value == pytest.approx(TOTAL * 0.01)
        assert p1.inflated_value == pytest.approx(TOTAL * 0.01 * (1 + INCC) ** 1)
        c1 = phases["c1"]
        assert c1.inflated_value == pytest.approx(c1.base_value * (1 + INCC) ** 7.5)

    def test_inflation_override(self) -> None:
        phases = _by_id(generate_schedule(TOTAL, 12, monthly_inflation=0.0))
        assert phases["c4"].inflated_value == pytest.approx(phases["c4"].base_value)


class TestMultipliers:
    def test_schedule_multiplier_stretches_calendar(self) -> None:
        phases = _by_id(generate_schedule(TOTAL, 12, options=ScheduleOptions(schedule_multiplier=1.5)))
        assert phases["f1"].start_month == 19

    def test_zero_schedule_multiplier_treated_as_one(self) -> None:
        phases = _by_id(generate_schedule(TOTAL, 12, options=ScheduleOptions(schedule_multiplier=0)))
        assert phases["f1"].start_month == 13

    def test_foundations_and_structure_multipliers(self) -> None:
        options = ScheduleOptions(
            phase_multipliers=PhaseMultipliers(foundations=1.4, structure=1.2)
        )
        phases = _by_id(generate_schedule(TOTAL, 12, options=options))
        assert phases["c3"].weight == pytest.approx(0.07 * 1.4)
        assert phases["c4"].weight == pytest.approx(0.16 * 1.2)
        assert phases["c5"].weight == pytest.approx(0.04)

    def test_missing_multiplier_is_neutral(self) -> None:
        options = ScheduleOptions(phase_multipliers=PhaseMultipliers(structure=1.2))
        phases = _by_id(generate_schedule(TOTAL, 12, options=options))
        assert phases["c3"].weight == pytest.approx(0.07)


# ---------------------------------------------------------------------------
# Administration phases
# ---------------------------------------------------------------------------


class TestAdministration:
    def test_one_admin_phase_per_month(self) -> None:
        admin = [p for p in generate_schedule(TOTAL, 12, HARD) if p.type == PhaseType.ADMIN]
        assert [p.id for p in admin] == [f"admin-{m}" for m in range(1, 13)]
        assert all(p.name == ADMIN_PHASE_NAME for p in admin)
        assert all(p.start_month == p.end_month for p in admin)

    def test_admin_base_values_sum_to_fee(self) -> None:
        admin = [p for p in generate_schedule(TOTAL, 12, HARD) if p.type == PhaseType.ADMIN]
        assert sum(p.base_value for p in admin) == pytest.approx(HARD * 0.15)

    def test_admin_inflated_by_month(self) -> None:
        admin = [p for p in generate_schedule(TOTAL, 12, HARD) if p.type == PhaseType.ADMIN]
        assert admin[11].inflated_value == pytest.approx(admin[11].base_value * (1 + INCC) ** 12)

    def test_no_admin_without_hard_cost(self) -> None:
        assert len(generate_schedule(TOTAL, 12, 0.0)) == 19

    def test_admin_months_follow_adjusted_deadline(self) -> None:
        options = ScheduleOptions(schedule_multiplier=1.2)
        admin = [
            p
            for p in generate_schedule(TOTAL, 12, HARD, options)
            if p.type == PhaseType.ADMIN
        ]
        assert len(admin) == 15


class TestAdminWeights:
    def test_pre_months_get_half_weight(self) -> None:
        weights = admin_distribution_weights(12, 5)
        assert weights[0] == pytest.approx(1 / 24)
        assert weights[5] == pytest.approx((1 - 5 / 24) / 7)
        assert weights[0] == pytest.approx(weights[4])

    def test_normalized(self) -> None:
        for total, pre in [(12, 5), (6, 3), (30, 11)]:
            assert sum(admin_distribution_weights(total, pre)) == pytest.approx(1.0)

    def test_single_month(self) -> None:
        assert admin_distribution_weights(1, 1) == pytest.approx([1.0])

    def test_empty(self) -> None:
        assert admin_distribution_weights(0, 1) == []


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class TestInvalidDeadline:
    @pytest.mark.parametrize("deadline", [math.nan, math.inf, 0, -3])
    def test_falls_back_to_twelve_months(
        self, deadline: float, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="canteiro.schedule"):
            phases = _by_id(generate_schedule(100_000.0, deadline, 50_000.0))
        assert phases["f1"].start_month == 13
        assert "admin-12" in phases
        assert "Invalid deadline" in caplog.text

    @pytest.mark.parametrize("multiplier", [math.nan, math.inf, -1.0])
    def test_invalid_multiplier_is_neutral(self, multiplier: float) -> None:
        options = ScheduleOptions(schedule_multiplier=multiplier)
        phases = _by_id(generate_schedule(TOTAL, 12, options=options))
        assert phases["f1"].start_month == 13


class TestAdjustedDeadline:
    @pytest.mark.parametrize(
        ("deadline", "multiplier", "expected"),
        [(12, 1.0, 12), (12, 1.2, 15), (10, 1.3, 13), (12, 2.07, 25), (7, 1.52, 11)],
    )
    def test_ceil(self, deadline: int, multiplier: float, expected: int) -> None:
        assert adjusted_deadline_months(deadline, multiplier) == expected


class TestRoundHalfUp:
    def test_halves_round_up(self) -> None:
        assert round_half_up(6.5) == 7
        assert round_half_up(2.5) == 3
        assert round_half_up(2.49) == 2


class TestScheduleOptionsFor:
    def test_flat_no_subfloor(self) -> None:
        options = schedule_options_for(SCENARIOS["flat_no_subfloor"])
        assert options.schedule_multiplier == 1.0
        assert options.phase_multipliers.foundations == 1.0
        assert options.phase_multipliers.structure == 1.0

    def test_slope_with_subfloor(self) -> None:
        options = schedule_options_for(SCENARIOS["slope_down_with_subfloor"])
        assert options.schedule_multiplier == 2.07
        assert options.phase_multipliers.foundations == 1.4
        assert options.phase_multipliers.structure == 1.2

    def test_flat_with_subfloor(self) -> None:
        options = schedule_options_for(SCENARIOS["flat_with_subfloor"])
        assert options.phase_multipliers.foundations == 1.0
        assert options.phase_multipliers.structure == 1.2


class TestRecommendedDeadline:
    def test_minimum_six_months(self) -> None:
        assert recommended_deadline_months(AreaBreakdown(ground=50)) == 6

    def test_area_based(self) -> None:
        # ceil(300 / 25) + 2 = 14
        assert recommended_deadline_months(AreaBreakdown(ground=200, upper=100)) == 14

    def test_outdoor_area_ignored(self) -> None:
        areas = AreaBreakdown(ground=200, upper=100, outdoor=500)
        assert recommended_deadline_months(areas) == 14


class TestClampDeadline:
    def test_within_range(self) -> None:
        assert clamp_deadline(14, 14) == 14

    def test_lower_bound(self) -> None:
        # max(6, floor(0.7 × 20)) = 14
        assert clamp_deadline(8, 20) == 14

    def test_lower_bound_never_below_six(self) -> None:
        assert clamp_deadline(2, 6) == 6

    def test_upper_bound(self) -> None:
        assert clamp_deadline(40, 14) == 26
