"""Macro phase, sub-phase and condition models.

A macro phase groups several atomic schedule phases for display. Each macro
phase owns an ordered list of sub-phases whose visibility is controlled by a
``PhaseCondition`` evaluated against an ``EvaluationContext``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from canteiro.models.enums import CombineOperator, ConditionType, PhaseType

RuleValue = str | int | float | bool | list[str] | None


class ConditionalRule(BaseModel):
    """A single field comparison.

    ``field`` and ``operator`` are kept as plain strings so that a schema
    written against a newer vocabulary still loads; unknown names evaluate to
    False at runtime. ``combine_with`` joins this rule with the *next* one.
    """

    field: str
    operator: str
    value: RuleValue = None
    combine_with: CombineOperator = CombineOperator.AND


class PhaseCondition(BaseModel):
    type: ConditionType = ConditionType.ALWAYS
    rules: list[ConditionalRule] = Field(default_factory=list)


ALWAYS = PhaseCondition(type=ConditionType.ALWAYS)


class SubPhase(BaseModel):
    id: str
    name: str
    description: str = ""
    condition: PhaseCondition = Field(default_factory=PhaseCondition)
    estimated_percentage: float
    order: int
    is_critical: bool = False
    icon: str | None = None


class Phase(BaseModel):
    """One of the six display-level construction stages."""

    id: str
    name: str
    description: str = ""
    detailed_explanation: str | None = None
    base_percentage: float
    duration_percentage: float | None = None
    phase_type: PhaseType
    sub_phases: list[SubPhase] = Field(default_factory=list)
    icon: str | None = None
    color: str | None = None
    original_phase_ids: list[str] = Field(default_factory=list)


class EvaluationContext(BaseModel):
    """Project facts that sub-phase conditions may refer to."""

    topography: str | None = None
    construction_method: str | None = None
    site_type: str | None = None
    land_status: str | None = None
    maturity: str | None = None
    standard: str | None = None

    subsoil_area: float = 0.0
    upper_floor_area: float = 0.0
    ground_area: float = 0.0

    has_subsoil: bool = False
    has_upper_floor: bool = False


class ProcessedSubPhase(SubPhase):
    adjusted_percentage: float
    calculated_value: float


class ProcessedPhase(Phase):
    applicable_sub_phases: list[ProcessedSubPhase] = Field(default_factory=list)
    phase_value: float = 0.0
    has_applicable_sub_phases: bool = False
