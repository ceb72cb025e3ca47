"""Regional market coefficients for residential construction in Santa Catarina.

CUB values are SINDUSCON-SC reference unit costs (R$/m2); method factors are
ratios over a 1200 R$/m2 masonry baseline.
"""

from __future__ import annotations

from dataclasses import dataclass

from canteiro.models.enums import (
    ConstructionMethod,
    ContainmentType,
    FinishStandard,
    SubfloorDepth,
    Topography,
)


@dataclass(frozen=True)
class Region:
    uf: str
    name: str
    regional_factor: float
    cub_values: dict[str, float]
    monthly_inflation: float


REGION = Region(
    uf="SC",
    name="Santa Catarina",
    regional_factor=1.4178,
    cub_values={
        "R1-B": 2450.00,  # estimated low
        "R1-N": 2916.12,  # CUB SINDUSCON-SC Jan/2026
        "R1-A": 3350.00,  # estimated high
    },
    monthly_inflation=0.0085,  # INCC, 0.85% a.m.
)


@dataclass(frozen=True)
class LabeledFactor:
    label: str
    factor: float


CONSTRUCTION_METHODS: dict[str, LabeledFactor] = {
    ConstructionMethod.MASONRY: LabeledFactor("Alvenaria Convencional", 1.00),
    ConstructionMethod.STEEL_FRAME: LabeledFactor("Steel Frame", 1.125),  # 1350/1200
    ConstructionMethod.WOOD_FRAME: LabeledFactor("Wood Frame", 1.083),  # 1300/1200
    ConstructionMethod.EPS: LabeledFactor("EPS / ICF", 1.041),  # 1250/1200
    ConstructionMethod.CONTAINER: LabeledFactor("Contêineres", 0.916),  # 1100/1200
}


@dataclass(frozen=True)
class FinishStandardInfo:
    label: str
    cub_code: str


FINISH_STANDARDS: dict[str, FinishStandardInfo] = {
    FinishStandard.LOW: FinishStandardInfo("Padrão Baixo (R1-B)", "R1-B"),
    FinishStandard.NORMAL: FinishStandardInfo("Padrão Normal (R1-N)", "R1-N"),
    FinishStandard.HIGH: FinishStandardInfo("Padrão Alto (R1-A)", "R1-A"),
}

# Equivalent-area weights per story type.
STORY_FACTORS: dict[str, float] = {
    "ground": 1.00,
    "upper": 0.98,
    "subfloor": 1.25,
    "outdoor": 0.40,
}

# Reported for transparency only; the scenario multiplier already carries
# the topography effect on hard cost.
TOPOGRAPHY_FACTORS: dict[str, float] = {
    Topography.FLAT: 1.00,
    Topography.SLOPE_LIGHT: 1.08,
    Topography.SLOPE_HIGH: 1.25,
}

SUBFLOOR_DEPTHS: dict[str, LabeledFactor] = {
    SubfloorDepth.SHALLOW: LabeledFactor("Raso (até 1,5m)", 1.0),
    SubfloorDepth.STANDARD: LabeledFactor("Padrão (1,5m a 3m)", 1.15),
    SubfloorDepth.DEEP: LabeledFactor("Profundo (3m a 5m)", 1.35),
    SubfloorDepth.VERY_DEEP: LabeledFactor("Muito Profundo (>5m)", 1.60),
}


@dataclass(frozen=True)
class ContainmentInfo:
    label: str
    cost_per_m2: float
    applicable_scenarios: tuple[str, ...]


CONTAINMENT_TYPES: dict[str, ContainmentInfo] = {
    ContainmentType.NONE: ContainmentInfo(
        "Sem contenção", 0, ("flat_no_subfloor",)
    ),
    ContainmentType.GABION: ContainmentInfo(
        "Gabiões", 280, ("slope_up_no_subfloor", "slope_down_no_subfloor")
    ),
    ContainmentType.CONCRETE_WALL: ContainmentInfo(
        "Muro de arrimo",
        450,
        ("slope_up_no_subfloor", "slope_up_with_subfloor", "slope_down_no_subfloor"),
    ),
    ContainmentType.ANCHORED_WALL: ContainmentInfo(
        "Cortina atirantada",
        850,
        ("slope_up_with_subfloor", "slope_down_with_subfloor"),
    ),
    ContainmentType.SECANT_PILES: ContainmentInfo(
        "Estacas secantes",
        1200,
        ("flat_with_subfloor", "slope_down_with_subfloor"),
    ),
}

# Share of hard cost attributed to each input class.
LABOR_SHARE = 0.45
MATERIALS_SHARE = 0.50
EQUIPMENT_SHARE = 0.05

ADMINISTRATION_FEE_RATE = 0.15
# Admin fee weight of a pre-construction month relative to a uniform month.
PRE_CONSTRUCTION_ADMIN_WEIGHT = 0.5
