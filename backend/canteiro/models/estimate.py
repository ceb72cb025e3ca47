"""Cost breakdown output models for the Canteiro estimation engine."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from canteiro.models.enums import PhaseType, RiskLevel


class ScenarioRisk(BaseModel):
    level: RiskLevel
    label: str
    color: str
    contingency_percent: float
    notes: list[str] = Field(default_factory=list)


class SubsystemMultipliers(BaseModel):
    """Relative cost intensity of each subsystem under a scenario."""

    foundations: float
    structure: float
    earthwork: float
    containment: float
    drainage: float


class ScenarioInfo(BaseModel):
    """A fixed catalog entry describing a topography/basement combination."""

    id: str
    label: str
    description: str
    total_cost_multiplier: float
    schedule_multiplier: float
    phase_multipliers: SubsystemMultipliers
    risk: ScenarioRisk


class ResolvedRisk(BaseModel):
    level: RiskLevel
    label: str
    contingency_percent: float
    contingency_value: float
    notes: list[str] = Field(default_factory=list)


class ScenarioResult(BaseModel):
    """The scenario that applied to an estimate, with contingency in currency."""

    id: str
    label: str
    description: str
    cost_multiplier: float
    schedule_multiplier: float
    risk: ResolvedRisk


class CostFactors(BaseModel):
    """Every multiplier that went into the hard cost, for traceability."""

    region: float
    city: float
    topography: float
    method: float
    scenario: float
    subfloor_depth: float


class LineItem(BaseModel):
    """A named monetary item (tax, fee or design discipline) and when it is paid."""

    name: str
    value: float
    phase: PhaseType


class CostComposition(BaseModel):
    labor_cost: float
    materials_cost: float
    equipment_cost: float
    administration_cost: float


class CostBreakdown(BaseModel):
    """Complete cost calculation for one ProjectData snapshot."""

    equivalent_area: float
    base_cost: float
    hard_cost: float
    soft_cost: float
    project_fees: float
    administration_fee: float
    total_cost: float
    contingency_value: float
    adjusted_total_cost: float
    factors: CostFactors
    cub_used: float
    scenario: ScenarioResult
    adjusted_deadline_months: int
    project_details: list[LineItem] = Field(default_factory=list)
    tax_details: list[LineItem] = Field(default_factory=list)
    cost_composition: CostComposition

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict with formatted strings for display."""
        from canteiro.formatting import (
            format_brl,
            format_brl_compact,
            format_factor_delta,
            format_number,
        )

        return {
            "total_cost_formatted": format_brl(self.total_cost),
            "total_cost_compact": format_brl_compact(self.total_cost),
            "adjusted_total_cost_formatted": format_brl(self.adjusted_total_cost),
            "hard_cost_formatted": format_brl(self.hard_cost),
            "soft_cost_formatted": format_brl(self.soft_cost),
            "project_fees_formatted": format_brl(self.project_fees),
            "administration_fee_formatted": format_brl(self.administration_fee),
            "cub_formatted": format_brl(self.cub_used),
            "equivalent_area_formatted": f"{format_number(self.equivalent_area, 2)} m²",
            "scenario_id": self.scenario.id,
            "scenario_label": self.scenario.label,
            "risk_level": self.scenario.risk.level.value,
            "contingency_percent": self.scenario.risk.contingency_percent,
            "scenario_multiplier_formatted": format_factor_delta(
                self.scenario.cost_multiplier
            ),
            "adjusted_deadline_months": self.adjusted_deadline_months,
            "num_tax_items": len(self.tax_details),
        }
