"""Physical-financial schedule generation.

Places the atomic phases on a month calendar, applies INCC inflation to each
phase at its midpoint month and spreads the administration fee as one
synthetic phase per month.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from canteiro.data.market import (
    ADMINISTRATION_FEE_RATE,
    PRE_CONSTRUCTION_ADMIN_WEIGHT,
    REGION,
)
from canteiro.data.phase_definitions import PHASE_DEFINITIONS, PHASE_SUBSYSTEMS
from canteiro.models.enums import PhaseType
from canteiro.models.schedule import DetailedPhase, PhaseMultipliers, ScheduleOptions

if TYPE_CHECKING:
    from canteiro.models.estimate import ScenarioInfo
    from canteiro.models.project import AreaBreakdown
    from canteiro.models.schedule import AtomicPhaseDefinition

logger = logging.getLogger(__name__)

PRE_CONSTRUCTION_SHARE = 0.35
CONSTRUCTION_PHASE_SHARE = 0.30

ADMIN_PHASE_NAME = "Administração de Obra"

SLOPE_FOUNDATIONS_MULTIPLIER = 1.4
BASEMENT_STRUCTURE_MULTIPLIER = 1.2

MIN_DEADLINE_MONTHS = 6
DEFAULT_DEADLINE_MONTHS = 12
MONTHS_PER_AREA = 25.0  # m2 of built area per month of work
MOBILIZATION_MONTHS = 2
MIN_DEADLINE_RATIO = 0.70
MAX_EXTRA_MONTHS = 12

# Products like 10 × 1.3 land a hair above the integer.
_CEIL_EPSILON = 1e-9


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def adjusted_deadline_months(deadline_months: float, schedule_multiplier: float) -> int:
    """Scenario-adjusted deadline: ``ceil(deadline × multiplier)``."""
    return math.ceil(deadline_months * schedule_multiplier - _CEIL_EPSILON)


def admin_distribution_weights(total_months: int, pre_months: int) -> list[float]:
    """Monthly weights for the administration fee.

    Pre-construction months get half the uniform weight; the rest is spread
    evenly over the execution months. The result sums to 1.
    """
    if total_months <= 0:
        return []

    uniform = 1.0 / total_months
    pre_weight = uniform * PRE_CONSTRUCTION_ADMIN_WEIGHT
    execution_months = total_months - pre_months
    execution_total = 1.0 - pre_weight * pre_months
    execution_weight = execution_total / execution_months if execution_months > 0 else 0.0

    weights = [pre_weight if i < pre_months else execution_weight for i in range(total_months)]
    total = sum(weights)
    return [w / total for w in weights]


def _weight_multiplier(phase_id: str, multipliers: PhaseMultipliers | None) -> float:
    if multipliers is None:
        return 1.0
    subsystem = PHASE_SUBSYSTEMS.get(phase_id)
    if subsystem is None:
        return 1.0
    return getattr(multipliers, subsystem) or 1.0


def generate_schedule(
    total_cost: float,
    deadline_months: float,
    hard_cost: float | None = None,
    options: ScheduleOptions | None = None,
    *,
    phase_definitions: list[AtomicPhaseDefinition] | None = None,
    monthly_inflation: float | None = None,
) -> list[DetailedPhase]:
    """Place every atomic phase on the calendar and value it.

    Args:
        total_cost: Total project cost the phase weights apply to.
        deadline_months: Owner's target deadline, before the scenario multiplier.
        hard_cost: When positive, the administration fee (15%) is added as one
            ``admin`` phase per adjusted-deadline month.
        options: Scenario schedule multiplier and subsystem weight multipliers.
        phase_definitions: Atomic phases to place; defaults to the standard 19.
        monthly_inflation: Monthly INCC rate; defaults to the regional rate.

    Returns:
        Atomic phases in definition order, followed by the admin phases.
    """
    options = options or ScheduleOptions()
    definitions = phase_definitions if phase_definitions is not None else PHASE_DEFINITIONS
    inflation = REGION.monthly_inflation if monthly_inflation is None else monthly_inflation

    if not math.isfinite(deadline_months) or deadline_months <= 0:
        logger.warning(
            "Invalid deadline %s; scheduling over %d months",
            deadline_months,
            DEFAULT_DEADLINE_MONTHS,
        )
        deadline_months = DEFAULT_DEADLINE_MONTHS
    multiplier = options.schedule_multiplier
    if not math.isfinite(multiplier) or multiplier <= 0:
        multiplier = 1.0

    deadline = adjusted_deadline_months(deadline_months, multiplier)
    phase_duration = max(1, math.ceil(deadline * CONSTRUCTION_PHASE_SHARE))
    pre_months = max(1, math.ceil(deadline * PRE_CONSTRUCTION_SHARE))

    pre_count = sum(1 for d in definitions if d.type == PhaseType.PRE)
    construction_count = sum(1 for d in definitions if d.type == PhaseType.CONSTRUCTION)
    months_per_pre_phase = max(1, math.ceil(pre_months / max(pre_count, 1)))
    construction_start = pre_months + 1
    step = (deadline - pre_months - phase_duration) / ((construction_count - 1) or 1)

    phases: list[DetailedPhase] = []
    pre_index = 0
    construction_index = 0
    for definition in definitions:
        if definition.type == PhaseType.PRE:
            start = max(1, pre_index * months_per_pre_phase + 1)
            end = min(pre_months, start + months_per_pre_phase - 1)
            pre_index += 1
        elif definition.type == PhaseType.POST:
            start = end = deadline + 1
        else:
            start = round_half_up(construction_start + construction_index * step)
            end = min(deadline, start + phase_duration - 1)
            construction_index += 1
        # Short deadlines can run out of pre-construction months.
        end = max(start, end)

        weight = definition.weight * _weight_multiplier(
            definition.id, options.phase_multipliers
        )
        base_value = total_cost * weight
        midpoint = (start + end) / 2
        phases.append(
            DetailedPhase(
                id=definition.id,
                name=definition.name,
                type=definition.type,
                weight=weight,
                start_month=start,
                end_month=end,
                base_value=base_value,
                inflated_value=base_value * (1 + inflation) ** midpoint,
            )
        )

    if hard_cost and hard_cost > 0:
        admin_total = hard_cost * ADMINISTRATION_FEE_RATE
        for month, weight in enumerate(admin_distribution_weights(deadline, pre_months), start=1):
            base_value = admin_total * weight
            phases.append(
                DetailedPhase(
                    id=f"admin-{month}",
                    name=ADMIN_PHASE_NAME,
                    type=PhaseType.ADMIN,
                    weight=weight,
                    start_month=month,
                    end_month=month,
                    base_value=base_value,
                    inflated_value=base_value * (1 + inflation) ** month,
                )
            )

    logger.debug(
        "Generated schedule: %d phases over %d months (pre=%d)",
        len(phases),
        deadline,
        pre_months,
    )
    return phases


def schedule_options_for(scenario: ScenarioInfo) -> ScheduleOptions:
    """Schedule options for a resolved scenario.

    Sloped sites get heavier foundations; sites with a basement get a
    heavier structure.
    """
    return ScheduleOptions(
        schedule_multiplier=scenario.schedule_multiplier,
        phase_multipliers=PhaseMultipliers(
            foundations=SLOPE_FOUNDATIONS_MULTIPLIER if "slope" in scenario.id else 1.0,
            structure=(
                BASEMENT_STRUCTURE_MULTIPLIER
                if scenario.id.endswith("_with_subfloor")
                else 1.0
            ),
        ),
    )


def recommended_deadline_months(areas: AreaBreakdown) -> int:
    """Economical deadline for the built area: ``max(6, ceil(area / 25) + 2)``."""
    return max(
        MIN_DEADLINE_MONTHS,
        math.ceil(areas.total_built_area / MONTHS_PER_AREA) + MOBILIZATION_MONTHS,
    )


def clamp_deadline(months: int, recommended: int) -> int:
    """Keep a chosen deadline within the selectable range around *recommended*."""
    lower = max(MIN_DEADLINE_MONTHS, math.floor(recommended * MIN_DEADLINE_RATIO))
    upper = recommended + MAX_EXTRA_MONTHS
    return min(max(months, lower), upper)
