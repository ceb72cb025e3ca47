"""Canteiro residential construction cost estimation engine.

Usage::

    from canteiro import AreaBreakdown, ProjectData, create_default_engine

    engine = create_default_engine()
    breakdown = engine.calculate(
        ProjectData(city_key="florianopolis", areas=AreaBreakdown(ground=120))
    )
"""

from canteiro.conditions import evaluate, extract_context
from canteiro.curves import distribute_by_weights, get_phase_profile, get_weights
from canteiro.engine import CostEngine
from canteiro.factory import create_default_engine, create_default_pipeline
from canteiro.models.enums import (
    ConstructionMethod,
    FinishStandard,
    LandStatus,
    PhaseType,
    RiskLevel,
    SubfloorDepth,
    Topography,
)
from canteiro.models.estimate import CostBreakdown, ScenarioInfo
from canteiro.models.project import AreaBreakdown, ProjectData
from canteiro.models.schedule import DetailedPhase, FinancialTimePoint, ScheduleOptions
from canteiro.phases import build_macro_phase_breakdown, process_phase
from canteiro.scenarios import resolve_scenario
from canteiro.schedule import generate_schedule
from canteiro.services.pipeline import EstimatePipeline, EstimateResult
from canteiro.timeline import build_timeline

__all__ = [
    "AreaBreakdown",
    "ConstructionMethod",
    "CostBreakdown",
    "CostEngine",
    "DetailedPhase",
    "EstimatePipeline",
    "EstimateResult",
    "FinancialTimePoint",
    "FinishStandard",
    "LandStatus",
    "PhaseType",
    "ProjectData",
    "RiskLevel",
    "ScenarioInfo",
    "ScheduleOptions",
    "SubfloorDepth",
    "Topography",
    "build_macro_phase_breakdown",
    "build_timeline",
    "create_default_engine",
    "create_default_pipeline",
    "distribute_by_weights",
    "evaluate",
    "extract_context",
    "generate_schedule",
    "get_phase_profile",
    "get_weights",
    "process_phase",
    "resolve_scenario",
]
