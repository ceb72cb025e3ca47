"""Schedule and disbursement output models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from canteiro.models.enums import PhaseType
from canteiro.models.phases import ProcessedSubPhase


class AtomicPhaseDefinition(BaseModel):
    """One of the fixed-weight line items the scheduler places on the calendar."""

    id: str
    name: str
    type: PhaseType
    weight: float


class PhaseMultipliers(BaseModel):
    """Optional per-subsystem weight multipliers applied by the scheduler."""

    foundations: float | None = None
    structure: float | None = None
    earthwork: float | None = None
    containment: float | None = None
    drainage: float | None = None


class ScheduleOptions(BaseModel):
    schedule_multiplier: float = 1.0
    phase_multipliers: PhaseMultipliers | None = None


class DetailedPhase(BaseModel):
    """An atomic phase (or a synthetic monthly admin phase) placed on the calendar."""

    id: str
    name: str
    type: PhaseType
    weight: float
    start_month: int
    end_month: int
    base_value: float
    inflated_value: float

    @property
    def duration_months(self) -> int:
        return max(1, self.end_month - self.start_month + 1)


class FinancialTimePoint(BaseModel):
    """One month of the disbursement projection."""

    month: int
    label: str
    monthly_value: float = 0.0
    accumulated_value: float = 0.0
    accumulated_pct: float = 0.0
    hard_cost: float = 0.0
    soft_cost: float = 0.0
    is_peak: bool = False


class MacroPhaseSummary(BaseModel):
    """Display row for a macro phase: value, admin share, window and sub-phases."""

    phase_id: str
    name: str
    type: PhaseType
    start_month: int
    end_month: int
    base_value: float
    admin_share: float
    inflated_value: float
    original_phases_count: int
    applicable_sub_phases: list[ProcessedSubPhase] = Field(default_factory=list)
