"""Project input models for the Canteiro estimation engine."""

from __future__ import annotations

import math
from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from canteiro.models.enums import (
    BasementIntent,
    ConstructionMethod,
    ContainmentType,
    FinishStandard,
    LandStatus,
    MaturityLevel,
    ProjectGoal,
    SiteType,
    SubfloorDepth,
    Topography,
)

# Outdoor area counts half towards the "real" area used by per-m2 fees.
_OUTDOOR_REAL_AREA_FACTOR = 0.5


def coerce_non_negative(value: Any) -> float:
    """Coerce a raw numeric input to a finite, non-negative float.

    ``None``, non-numeric values, NaN, infinities and negatives all become 0.0
    so they can never propagate through the multiplicative cost chain.
    """
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


class AreaBreakdown(BaseModel):
    """Built areas in m2, split by story type."""

    model_config = ConfigDict(frozen=True)

    ground: float = 0.0
    upper: float = 0.0
    subfloor: float = 0.0
    outdoor: float = 0.0

    @field_validator("ground", "upper", "subfloor", "outdoor", mode="before")
    @classmethod
    def clamp_area(cls, v: Any) -> float:
        return coerce_non_negative(v)

    @property
    def total_built_area(self) -> float:
        return self.ground + self.upper + self.subfloor

    @property
    def real_area(self) -> float:
        """Area used as the base for permit, tax and design fees."""
        return (
            self.ground
            + self.upper
            + self.subfloor
            + self.outdoor * _OUTDOOR_REAL_AREA_FACTOR
        )

    @property
    def has_subfloor(self) -> bool:
        return self.subfloor > 0


class ProjectData(BaseModel):
    """Snapshot of everything the owner told us about the project.

    This is the only input to the cost engine. Every derived figure is
    recomputed from scratch from an instance of this model.
    """

    model_config = ConfigDict(frozen=True)

    user_name: str = ""
    city_key: str = "florianopolis"
    neighborhood: str | None = None
    project_goal: ProjectGoal | None = None
    site_type: SiteType | None = None

    has_land: bool | None = None
    has_project: bool | None = None
    maturity: MaturityLevel = MaturityLevel.IDEA

    land_status: LandStatus | None = None
    land_area_m2: float | None = None

    topography: Topography = Topography.FLAT
    construction_method: ConstructionMethod = ConstructionMethod.MASONRY
    standard: FinishStandard = FinishStandard.NORMAL

    areas: AreaBreakdown = Field(default_factory=AreaBreakdown)
    basement_intent: BasementIntent | None = None
    subfloor_depth: SubfloorDepth | None = None
    containment_type: ContainmentType | None = None

    deadline_months: int = 12
    start_date: date | None = None

    @field_validator("deadline_months", mode="before")
    @classmethod
    def deadline_at_least_one_month(cls, v: Any) -> int:
        months = coerce_non_negative(v)
        return max(1, math.ceil(months)) if months > 0 else 1

    @field_validator("land_area_m2", mode="before")
    @classmethod
    def clamp_land_area(cls, v: Any) -> float | None:
        if v is None:
            return None
        return coerce_non_negative(v)

    @model_validator(mode="before")
    @classmethod
    def derive_land_and_maturity(cls, data: Any) -> Any:
        """Fill ``has_land`` and ``maturity`` when they were not given.

        ``has_land`` follows ``land_status``. Maturity is ``project`` with land
        and a design, ``land`` with land only, and ``idea`` otherwise.
        """
        if not isinstance(data, dict):
            return data
        if data.get("has_land") is None and data.get("land_status") is not None:
            status = str(data["land_status"])
            data = {
                **data,
                "has_land": status in (LandStatus.OWNED, LandStatus.NEGOTIATING),
            }
        if data.get("maturity") is None:
            if data.get("has_land") is True:
                maturity = (
                    MaturityLevel.PROJECT
                    if data.get("has_project") is True
                    else MaturityLevel.LAND
                )
            else:
                maturity = MaturityLevel.IDEA
            data = {**data, "maturity": maturity}
        return data

    @property
    def has_subfloor(self) -> bool:
        return self.areas.has_subfloor
