"""Reference data repository for looking up market coefficients."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from canteiro.data.cities import CITIES, DEFAULT_CITY
from canteiro.data.market import (
    CONSTRUCTION_METHODS,
    CONTAINMENT_TYPES,
    FINISH_STANDARDS,
    REGION,
    SUBFLOOR_DEPTHS,
    TOPOGRAPHY_FACTORS,
)
from canteiro.data.phase_definitions import PHASE_DEFINITIONS
from canteiro.data.phases_schema import MACRO_PHASES_SCHEMA
from canteiro.data.scenarios import SCENARIOS

if TYPE_CHECKING:
    from canteiro.data.cities import City
    from canteiro.data.market import ContainmentInfo, LabeledFactor, Region
    from canteiro.models.estimate import ScenarioInfo
    from canteiro.models.phases import Phase
    from canteiro.models.schedule import AtomicPhaseDefinition

logger = logging.getLogger(__name__)

NEUTRAL_FACTOR = 1.0


class ReferenceDataRepository:
    """Read-only access to the static reference tables.

    Wraps in-memory tables and provides lookup methods that never raise:
    an unknown key resolves to a neutral value (factor 1.0 or a default
    record) and is logged.
    """

    def __init__(
        self,
        region: Region = REGION,
        cities: dict[str, City] | None = None,
        methods: dict[str, LabeledFactor] | None = None,
        scenarios: dict[str, ScenarioInfo] | None = None,
        phase_definitions: list[AtomicPhaseDefinition] | None = None,
        macro_phases: list[Phase] | None = None,
    ) -> None:
        self._region = region
        self._cities = dict(cities if cities is not None else CITIES)
        self._methods = dict(methods if methods is not None else CONSTRUCTION_METHODS)
        self._scenarios = dict(scenarios if scenarios is not None else SCENARIOS)
        self._phase_definitions = list(
            phase_definitions if phase_definitions is not None else PHASE_DEFINITIONS
        )
        self._macro_phases = list(
            macro_phases if macro_phases is not None else MACRO_PHASES_SCHEMA
        )

    @property
    def region(self) -> Region:
        return self._region

    @property
    def phase_definitions(self) -> list[AtomicPhaseDefinition]:
        return list(self._phase_definitions)

    @property
    def macro_phases(self) -> list[Phase]:
        return list(self._macro_phases)

    def get_city(self, city_key: str) -> City:
        """Get the city record, or a neutral record (factor 1.0) if unknown."""
        city = self._cities.get(city_key.strip().lower())
        if city is None:
            logger.warning("Unknown city '%s'; using neutral factor", city_key)
            return DEFAULT_CITY
        return city

    def get_method_factor(self, method: str) -> float:
        entry = self._methods.get(method)
        if entry is None:
            logger.warning("Unknown construction method '%s'; using factor 1.0", method)
            return NEUTRAL_FACTOR
        return entry.factor

    def get_cub_value(self, standard: str) -> float:
        """Get the CUB unit price (R$/m2) for a finish standard.

        Unknown standards fall back to the normal tier (R1-N).
        """
        info = FINISH_STANDARDS.get(standard)
        if info is None:
            logger.warning("Unknown finish standard '%s'; using R1-N", standard)
            return self._region.cub_values["R1-N"]
        return self._region.cub_values[info.cub_code]

    def get_topography_factor(self, topography: str) -> float:
        return TOPOGRAPHY_FACTORS.get(topography, NEUTRAL_FACTOR)

    def get_subfloor_depth_multiplier(self, depth: str | None) -> float:
        if depth is None:
            return NEUTRAL_FACTOR
        entry = SUBFLOOR_DEPTHS.get(depth)
        if entry is None:
            logger.warning("Unknown subfloor depth '%s'; using factor 1.0", depth)
            return NEUTRAL_FACTOR
        return entry.factor

    def get_scenario(self, scenario_id: str) -> ScenarioInfo:
        return self._scenarios[scenario_id]

    def list_scenarios(self) -> list[ScenarioInfo]:
        return list(self._scenarios.values())

    def applicable_containment_types(self, scenario_id: str) -> dict[str, ContainmentInfo]:
        """Get the containment options that make sense for a scenario."""
        return {
            key: info
            for key, info in CONTAINMENT_TYPES.items()
            if scenario_id in info.applicable_scenarios
        }
