"""Scenario resolution from topography and basement presence.

The catalog only distinguishes flat / slope_up / slope_down sites, while the
owner answers flat / slope_light / slope_high. Light slopes are read as
upward and steep slopes as downward.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from canteiro.data.scenarios import SCENARIOS
from canteiro.models.enums import Topography

if TYPE_CHECKING:
    from canteiro.models.estimate import ScenarioInfo

# TODO: confirm with product whether slope steepness should map to direction;
# the catalog has no "light vs steep" axis.
TOPOGRAPHY_CATEGORIES: dict[str, str] = {
    Topography.FLAT: "flat",
    Topography.SLOPE_LIGHT: "slope_up",
    Topography.SLOPE_HIGH: "slope_down",
}


def resolve_scenario_id(topography: str, has_subfloor: bool) -> str:
    """Build the catalog key, e.g. ``slope_up_with_subfloor``.

    Unknown topographies are treated as flat.
    """
    category = TOPOGRAPHY_CATEGORIES.get(topography, "flat")
    suffix = "with_subfloor" if has_subfloor else "no_subfloor"
    return f"{category}_{suffix}"


def resolve_scenario(
    topography: str,
    has_subfloor: bool,
    catalog: dict[str, ScenarioInfo] | None = None,
) -> ScenarioInfo:
    """Look up the scenario for a topography/basement combination.

    The catalog covers every key ``resolve_scenario_id`` can produce.
    """
    scenarios = catalog if catalog is not None else SCENARIOS
    return scenarios[resolve_scenario_id(topography, has_subfloor)]
