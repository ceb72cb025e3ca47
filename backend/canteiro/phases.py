"""Macro phase processing: sub-phase filtering, percentages and values.

Sub-phases that do not apply to a project are dropped and the remaining
percentages are rescaled proportionally, so the visible sub-phases always
account for the whole phase value.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from canteiro.conditions import evaluate, extract_context
from canteiro.models.enums import PhaseType
from canteiro.models.phases import Phase, ProcessedPhase, ProcessedSubPhase, SubPhase
from canteiro.models.schedule import MacroPhaseSummary
from canteiro.schedule import round_half_up

if TYPE_CHECKING:
    from canteiro.models.phases import EvaluationContext
    from canteiro.models.project import ProjectData
    from canteiro.models.schedule import DetailedPhase

logger = logging.getLogger(__name__)

PERCENTAGE_TOLERANCE = 0.01

# Macro phases without a duration share last this fraction of their cost share.
_DEFAULT_DURATION_RATIO = 0.8

_PHASE_FIELDS = set(Phase.model_fields)
_SUB_PHASE_FIELDS = set(SubPhase.model_fields)


def get_applicable_sub_phases(phase: Phase, context: EvaluationContext) -> list[SubPhase]:
    """Sub-phases whose condition holds, sorted by declared order."""
    applicable = [sp for sp in phase.sub_phases if evaluate(sp.condition, context)]
    return sorted(applicable, key=lambda sp: sp.order)


def recalculate_percentages(sub_phases: list[SubPhase]) -> list[ProcessedSubPhase]:
    """Rescale percentages so they sum to 100.

    Percentages already within 0.01 of 100 are kept as declared. When they
    sum to zero (or to a non-finite value) every sub-phase gets an equal
    share. Values are left at zero for ``process_phase`` to fill in.
    """
    if not sub_phases:
        return []

    total = sum(sp.estimated_percentage for sp in sub_phases)
    if total <= 0 or not math.isfinite(total):
        logger.warning(
            "Sub-phase percentages sum to %s; splitting %d sub-phases evenly",
            total,
            len(sub_phases),
        )
        percentages = [100 / len(sub_phases)] * len(sub_phases)
    else:
        scale = 1.0 if abs(total - 100) < PERCENTAGE_TOLERANCE else 100 / total
        percentages = [sp.estimated_percentage * scale for sp in sub_phases]

    return [
        ProcessedSubPhase(
            **sp.model_dump(include=_SUB_PHASE_FIELDS),
            adjusted_percentage=percentage,
            calculated_value=0.0,
        )
        for sp, percentage in zip(sub_phases, percentages)
    ]


def process_phase(
    phase: Phase, context: EvaluationContext, phase_value: float
) -> ProcessedPhase:
    """Filter, rescale and value the sub-phases of *phase*.

    The calculated values of the applicable sub-phases sum to
    *phase_value*. A phase with no applicable sub-phase keeps its value but
    carries no breakdown.
    """
    processed = [
        sp.model_copy(update={"calculated_value": phase_value * sp.adjusted_percentage / 100})
        for sp in recalculate_percentages(get_applicable_sub_phases(phase, context))
    ]
    return ProcessedPhase(
        **phase.model_dump(include=_PHASE_FIELDS),
        applicable_sub_phases=processed,
        phase_value=phase_value,
        has_applicable_sub_phases=bool(processed),
    )


def process_all_phases(
    phases: list[Phase],
    project: ProjectData,
    phase_values: dict[str, float],
) -> list[ProcessedPhase]:
    """Process every phase against one project; missing values count as 0."""
    context = extract_context(project)
    return [process_phase(phase, context, phase_values.get(phase.id, 0.0)) for phase in phases]


def has_critical_sub_phases(phase: Phase, context: EvaluationContext) -> bool:
    return any(sp.is_critical for sp in get_applicable_sub_phases(phase, context))


def count_applicable_sub_phases(phase: Phase, context: EvaluationContext) -> int:
    return len(get_applicable_sub_phases(phase, context))


def build_macro_phase_breakdown(
    macro_phases: list[Phase],
    project: ProjectData,
    schedule: list[DetailedPhase],
    hard_cost: float,
    administration_fee: float,
    deadline_months: int,
) -> list[MacroPhaseSummary]:
    """Summarize the schedule as display-level macro phases.

    Each macro phase is valued at the inflated total of the atomic phases it
    groups (or its base percentage of *hard_cost* when none are scheduled)
    and receives a share of *administration_fee* proportional to that value.
    Month windows come from the macro phases' duration percentages, laid
    end to end for construction phases.
    """
    context = extract_context(project)
    scheduled = [p for p in schedule if p.type != PhaseType.ADMIN]
    total_scheduled = sum(p.inflated_value for p in scheduled)

    summaries: list[MacroPhaseSummary] = []
    accumulated_pct = 0.0
    for macro in macro_phases:
        ids = set(macro.original_phase_ids)
        matching = [p for p in scheduled if p.id in ids]
        if matching:
            value = sum(p.inflated_value for p in matching)
        else:
            logger.debug("No scheduled phases for %s; using base percentage", macro.id)
            value = macro.base_percentage / 100 * hard_cost

        duration_pct = macro.duration_percentage or macro.base_percentage * _DEFAULT_DURATION_RATIO
        duration_months = max(1, round_half_up(duration_pct / 100 * deadline_months))

        if macro.phase_type == PhaseType.PRE:
            start, end = 0, duration_months
        elif macro.phase_type == PhaseType.POST:
            start = max(1, deadline_months - duration_months + 1)
            end = deadline_months
        else:
            start = max(1, round_half_up(accumulated_pct / 100 * deadline_months) + 1)
            end = max(start, min(deadline_months, start + duration_months - 1))
        accumulated_pct += duration_pct

        admin_share = (
            value / total_scheduled * administration_fee if total_scheduled > 0 else 0.0
        )
        processed = process_phase(macro, context, value)
        summaries.append(
            MacroPhaseSummary(
                phase_id=macro.id,
                name=macro.name,
                type=macro.phase_type,
                start_month=start,
                end_month=end,
                base_value=value,
                admin_share=admin_share,
                inflated_value=value + admin_share,
                original_phases_count=len(macro.original_phase_ids),
                applicable_sub_phases=processed.applicable_sub_phases,
            )
        )
    return summaries
