"""Estimate pipeline: orchestrates cost calculation, scheduling and cash flow."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from canteiro.exceptions import CanteiroError, EstimationError
from canteiro.phases import build_macro_phase_breakdown
from canteiro.schedule import generate_schedule, schedule_options_for
from canteiro.timeline import build_timeline

if TYPE_CHECKING:
    from canteiro.data.repository import ReferenceDataRepository
    from canteiro.engine import CostEngine
    from canteiro.models.estimate import CostBreakdown
    from canteiro.models.project import ProjectData
    from canteiro.models.schedule import (
        DetailedPhase,
        FinancialTimePoint,
        MacroPhaseSummary,
    )

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EstimateResult:
    """Result of the full estimate pipeline."""

    breakdown: CostBreakdown
    schedule: list[DetailedPhase]
    timeline: list[FinancialTimePoint]
    macro_phases: list[MacroPhaseSummary]
    processing_time_seconds: float


class EstimatePipeline:
    """Orchestrates CostEngine → schedule → timeline → macro phases in one call."""

    def __init__(
        self,
        cost_engine: CostEngine,
        monthly_inflation: float | None = None,
    ) -> None:
        self._cost_engine = cost_engine
        self._monthly_inflation = monthly_inflation

    @property
    def repository(self) -> ReferenceDataRepository:
        return self._cost_engine.repository

    def run(self, project: ProjectData) -> EstimateResult:
        """Produce the complete estimate for a project.

        Steps:
            1. Calculate the cost breakdown
            2. Place the atomic phases and admin months on the calendar
            3. Project the monthly disbursement over the adjusted deadline
            4. Summarize the schedule as macro phases with sub-phases

        Raises
        ------
        EstimationError
            If any step fails unexpectedly.
        """
        start = time.monotonic()
        repository = self.repository

        try:
            # 1. Cost breakdown
            breakdown = self._cost_engine.calculate(project)
            deadline = breakdown.adjusted_deadline_months

            # 2. Schedule
            scenario = repository.get_scenario(breakdown.scenario.id)
            schedule = generate_schedule(
                breakdown.total_cost,
                project.deadline_months,
                breakdown.hard_cost,
                schedule_options_for(scenario),
                phase_definitions=repository.phase_definitions,
                monthly_inflation=self._monthly_inflation,
            )

            # 3. Disbursement timeline
            timeline = build_timeline(breakdown.total_cost, deadline, schedule)

            # 4. Macro phases
            macro_phases = build_macro_phase_breakdown(
                repository.macro_phases,
                project,
                schedule,
                hard_cost=breakdown.hard_cost,
                administration_fee=breakdown.administration_fee,
                deadline_months=deadline,
            )
        except CanteiroError:
            raise
        except Exception as exc:
            msg = f"Estimate failed: {exc}"
            raise EstimationError(msg) from exc

        elapsed = time.monotonic() - start
        logger.info(
            "Estimated %s (%s): total=%.2f over %d months in %.3fs",
            project.city_key,
            breakdown.scenario.id,
            breakdown.total_cost,
            deadline,
            elapsed,
        )
        return EstimateResult(
            breakdown=breakdown,
            schedule=schedule,
            timeline=timeline,
            macro_phases=macro_phases,
            processing_time_seconds=round(elapsed, 2),
        )
