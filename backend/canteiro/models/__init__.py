"""Domain models for the Canteiro estimation engine."""

from canteiro.models.enums import (
    ConstructionMethod,
    CurveProfile,
    FinishStandard,
    LandStatus,
    MaturityLevel,
    PhaseType,
    RiskLevel,
    SiteType,
    SubfloorDepth,
    Topography,
)
from canteiro.models.estimate import (
    CostBreakdown,
    CostComposition,
    CostFactors,
    LineItem,
    ScenarioInfo,
    ScenarioResult,
)
from canteiro.models.phases import (
    ConditionalRule,
    EvaluationContext,
    Phase,
    PhaseCondition,
    ProcessedPhase,
    ProcessedSubPhase,
    SubPhase,
)
from canteiro.models.project import AreaBreakdown, ProjectData
from canteiro.models.schedule import (
    DetailedPhase,
    FinancialTimePoint,
    MacroPhaseSummary,
    PhaseMultipliers,
    ScheduleOptions,
)

__all__ = [
    "AreaBreakdown",
    "ConditionalRule",
    "ConstructionMethod",
    "CostBreakdown",
    "CostComposition",
    "CostFactors",
    "CurveProfile",
    "DetailedPhase",
    "EvaluationContext",
    "FinancialTimePoint",
    "FinishStandard",
    "LandStatus",
    "LineItem",
    "MacroPhaseSummary",
    "MaturityLevel",
    "Phase",
    "PhaseCondition",
    "PhaseMultipliers",
    "PhaseType",
    "ProcessedPhase",
    "ProcessedSubPhase",
    "ProjectData",
    "RiskLevel",
    "ScenarioInfo",
    "ScenarioResult",
    "ScheduleOptions",
    "SiteType",
    "SubPhase",
    "SubfloorDepth",
    "Topography",
]
