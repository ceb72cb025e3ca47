"""Enums for the Canteiro domain models.

These enums represent the answers collected by the estimate wizard and the
string keys of the reference tables they select.
"""

from enum import StrEnum


class Topography(StrEnum):
    """Site topography as declared by the owner."""

    FLAT = "flat"
    SLOPE_LIGHT = "slope_light"
    SLOPE_HIGH = "slope_high"


class ConstructionMethod(StrEnum):
    """Construction systems with a cost factor in the method table."""

    MASONRY = "masonry"
    STEEL_FRAME = "steelFrame"
    WOOD_FRAME = "woodFrame"
    EPS = "eps"
    CONTAINER = "container"


class FinishStandard(StrEnum):
    """Finish standard, mapped to a CUB tier (R1-B / R1-N / R1-A)."""

    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"


class MaturityLevel(StrEnum):
    """How far along the owner is: just an idea, land in hand, or a full project."""

    IDEA = "idea"
    LAND = "land"
    PROJECT = "project"


class LandStatus(StrEnum):
    OWNED = "owned"
    NEGOTIATING = "negotiating"
    NO = "no"


class SiteType(StrEnum):
    GATED_COMMUNITY = "gated_community"
    OPEN_COMMUNITY = "open_community"
    SUBDIVISION = "subdivision"
    URBAN_LAND = "urban_land"


class ProjectGoal(StrEnum):
    LIVE = "live"
    INVEST = "invest"
    SELL = "sell"
    EVALUATING = "evaluating"


class BasementIntent(StrEnum):
    YES = "yes"
    NO = "no"
    UNKNOWN = "unknown"


class SubfloorDepth(StrEnum):
    """Basement excavation depth tiers."""

    SHALLOW = "shallow"
    STANDARD = "standard"
    DEEP = "deep"
    VERY_DEEP = "veryDeep"


class ContainmentType(StrEnum):
    """Earth-retaining structure types."""

    NONE = "none"
    GABION = "gabion"
    CONCRETE_WALL = "concrete_wall"
    ANCHORED_WALL = "anchored_wall"
    SECANT_PILES = "secant_piles"


class RiskLevel(StrEnum):
    """Scenario risk levels (Portuguese labels are part of the data contract)."""

    BAIXO = "baixo"
    MEDIO = "medio"
    ALTO = "alto"
    CRITICO = "critico"


class PhaseType(StrEnum):
    """Scheduling group of a phase. ADMIN is only used for synthetic monthly phases."""

    PRE = "pre"
    CONSTRUCTION = "construction"
    POST = "post"
    ADMIN = "admin"


class CurveProfile(StrEnum):
    """Shape of a phase's monthly disbursement."""

    FRONT_LOADED = "FRONT_LOADED"
    MID_PEAK = "MID_PEAK"
    BACK_LOADED = "BACK_LOADED"
    UNIFORM = "UNIFORM"


class ConditionType(StrEnum):
    ALWAYS = "always"
    CONDITIONAL = "conditional"


class CombineOperator(StrEnum):
    AND = "AND"
    OR = "OR"
