"""Cost calculator for the Canteiro estimation engine.

The CostEngine implements the CUB-based residential estimation methodology:

1. **Equivalent area**: Weight each story type (ground 1.00, upper 0.98,
   subfloor 1.25, outdoor 0.40) into a single equivalent area.
2. **Hard cost**: Equivalent area × CUB for the finish standard, adjusted by
   the regional, construction-method, city, scenario and basement-depth
   factors. All factors are table lookups.
3. **Soft cost**: Municipal and state fees (permit, ART/RRT, ISS, INSS,
   occupancy certificates, registration, and ITBI + notarial fees), each with
   its own formula.
4. **Project fees**: Design disciplines priced per m2 of real area.
5. **Administration**: 15% of hard cost.
6. **Contingency**: Scenario contingency percent over the total.

Every call recomputes the whole breakdown from the ProjectData snapshot; the
engine holds no state besides its repository.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from canteiro.data.fees import (
    ART_RRT_AREA_THRESHOLD,
    AVERBACAO_BRACKETS,
    ESCRITURA_BRACKETS,
    ESCRITURA_FIXED_FEES,
    ITBI_RATE,
    PROJECT_RATES,
    bracket_fee,
)
from canteiro.data.market import (
    ADMINISTRATION_FEE_RATE,
    EQUIPMENT_SHARE,
    LABOR_SHARE,
    MATERIALS_SHARE,
    STORY_FACTORS,
)
from canteiro.models.enums import PhaseType
from canteiro.models.estimate import (
    CostBreakdown,
    CostComposition,
    CostFactors,
    LineItem,
    ResolvedRisk,
    ScenarioResult,
)
from canteiro.scenarios import resolve_scenario_id
from canteiro.schedule import adjusted_deadline_months

if TYPE_CHECKING:
    from canteiro.data.cities import CityTaxes
    from canteiro.data.repository import ReferenceDataRepository
    from canteiro.models.estimate import ScenarioInfo
    from canteiro.models.project import AreaBreakdown, ProjectData

ENGINE_VERSION = "0.1.0"

# Share of hard cost taken as the labor base for ISS.
_ISS_BASE_PERCENT = 0.50


def equivalent_area(areas: AreaBreakdown) -> float:
    """Weight each story type into a single equivalent area (m2)."""
    return (
        areas.ground * STORY_FACTORS["ground"]
        + areas.upper * STORY_FACTORS["upper"]
        + areas.subfloor * STORY_FACTORS["subfloor"]
        + areas.outdoor * STORY_FACTORS["outdoor"]
    )


class CostEngine:
    """Core calculator that converts a ProjectData into a CostBreakdown.

    Args:
        repository: The reference data repository providing CUB values,
            city tax schedules, method factors and the scenario catalog.

    Example::

        from canteiro.data.repository import ReferenceDataRepository

        engine = CostEngine(ReferenceDataRepository())
        breakdown = engine.calculate(project)
    """

    def __init__(self, repository: ReferenceDataRepository) -> None:
        self._repository = repository

    @property
    def repository(self) -> ReferenceDataRepository:
        return self._repository

    def calculate(self, project: ProjectData) -> CostBreakdown:
        """Compute the full cost breakdown for a project.

        Never raises for domain input: unknown keys resolve to neutral
        factors and zero areas produce a zero hard cost.
        """
        areas = project.areas
        repo = self._repository

        # 1. Scenario (topography + basement presence)
        has_subfloor = areas.has_subfloor
        scenario = repo.get_scenario(
            resolve_scenario_id(project.topography, has_subfloor)
        )

        depth_multiplier = (
            repo.get_subfloor_depth_multiplier(project.subfloor_depth)
            if has_subfloor
            else 1.0
        )

        # 2. Base cost
        eq_area = equivalent_area(areas)
        cub_value = repo.get_cub_value(project.standard)
        base_cost = eq_area * cub_value

        # 3. Hard cost
        city = repo.get_city(project.city_key)
        factors = CostFactors(
            region=repo.region.regional_factor,
            city=city.factor,
            topography=repo.get_topography_factor(project.topography),
            method=repo.get_method_factor(project.construction_method),
            scenario=scenario.total_cost_multiplier,
            subfloor_depth=depth_multiplier,
        )
        hard_cost = (
            base_cost
            * factors.region
            * factors.method
            * factors.city
            * factors.scenario
            * factors.subfloor_depth
        )

        # 4. Soft cost
        real_area = areas.real_area
        tax_details = self._tax_line_items(
            taxes=city.taxes,
            real_area=real_area,
            hard_cost=hard_cost,
            cub_value=cub_value,
            has_land=project.has_land,
        )
        soft_cost = sum(item.value for item in tax_details)

        # 5. Design fees
        project_details = [
            LineItem(name=name, value=real_area * rate, phase=PhaseType.PRE)
            for name, rate in PROJECT_RATES.items()
        ]
        project_fees = sum(item.value for item in project_details)

        # 6. Administration and totals
        administration_fee = hard_cost * ADMINISTRATION_FEE_RATE
        total_cost = hard_cost + soft_cost + project_fees + administration_fee
        contingency_value = total_cost * (scenario.risk.contingency_percent / 100)

        return CostBreakdown(
            equivalent_area=eq_area,
            base_cost=base_cost,
            hard_cost=hard_cost,
            soft_cost=soft_cost,
            project_fees=project_fees,
            administration_fee=administration_fee,
            total_cost=total_cost,
            contingency_value=contingency_value,
            adjusted_total_cost=total_cost + contingency_value,
            factors=factors,
            cub_used=cub_value,
            scenario=self._scenario_result(scenario, contingency_value),
            adjusted_deadline_months=adjusted_deadline_months(
                project.deadline_months, scenario.schedule_multiplier
            ),
            project_details=project_details,
            tax_details=[item for item in tax_details if item.value > 0],
            cost_composition=CostComposition(
                labor_cost=hard_cost * LABOR_SHARE,
                materials_cost=hard_cost * MATERIALS_SHARE,
                equipment_cost=hard_cost * EQUIPMENT_SHARE,
                administration_cost=administration_fee,
            ),
        )

    @staticmethod
    def _tax_line_items(
        taxes: CityTaxes,
        real_area: float,
        hard_cost: float,
        cub_value: float,
        has_land: bool | None,
    ) -> list[LineItem]:
        """Compute every municipal and state fee as a line item.

        The estimated property value for registry fees is the hard cost.
        """
        property_value = hard_cost

        # Construction permit: fixed part + R$/m2
        alvara = taxes.alvara_base + real_area * taxes.alvara_m2

        # Professional registration, tiered by area
        art_rrt = (
            taxes.art_rrt_base
            if real_area <= ART_RRT_AREA_THRESHOLD
            else taxes.art_rrt_medio
        )

        # Services tax over the labor share of hard cost
        iss = hard_cost * _ISS_BASE_PERCENT * taxes.iss

        # Social security levy over area × CUB × labor share
        inss = real_area * cub_value * taxes.inss_base_percent * taxes.inss_aliquota

        # Occupancy certificate: max(area rate + fixed part, minimum)
        habitese = max(
            real_area * taxes.habitese_m2 + (taxes.habitese_fixo or 0.0),
            taxes.habitese_minimo or 0.0,
        )

        habitese_sanitario = (
            real_area * taxes.habitese_sanitario_m2 + taxes.habitese_sanitario_vistoria
        )

        averbacao = bracket_fee(AVERBACAO_BRACKETS, property_value)

        # Land transfer tax only applies when the land still has to be bought
        itbi = property_value * ITBI_RATE if has_land is False else 0.0
        escritura = bracket_fee(ESCRITURA_BRACKETS, property_value) + ESCRITURA_FIXED_FEES

        items = [
            LineItem(name="Alvará de Construção", value=alvara, phase=PhaseType.PRE),
            LineItem(name="ART/RRT (CREA + CAU)", value=art_rrt, phase=PhaseType.PRE),
            LineItem(
                name=f"ISS ({taxes.iss * 100:.0f}%)",
                value=iss,
                phase=PhaseType.CONSTRUCTION,
            ),
            LineItem(
                name=f"INSS da Obra ({taxes.inss_aliquota * 100:.0f}%)",
                value=inss,
                phase=PhaseType.CONSTRUCTION,
            ),
            LineItem(name="Habite-se", value=habitese, phase=PhaseType.POST),
            LineItem(
                name="Habite-se Sanitário", value=habitese_sanitario, phase=PhaseType.POST
            ),
            LineItem(name="Averbação da Construção", value=averbacao, phase=PhaseType.POST),
        ]
        if itbi > 0:
            items.append(
                LineItem(
                    name=f"ITBI ({ITBI_RATE * 100:.0f}%)", value=itbi, phase=PhaseType.PRE
                )
            )
        items.append(
            LineItem(name="Escritura e Registro", value=escritura, phase=PhaseType.POST)
        )
        return items

    @staticmethod
    def _scenario_result(scenario: ScenarioInfo, contingency_value: float) -> ScenarioResult:
        return ScenarioResult(
            id=scenario.id,
            label=scenario.label,
            description=scenario.description,
            cost_multiplier=scenario.total_cost_multiplier,
            schedule_multiplier=scenario.schedule_multiplier,
            risk=ResolvedRisk(
                level=scenario.risk.level,
                label=scenario.risk.label,
                contingency_percent=scenario.risk.contingency_percent,
                contingency_value=contingency_value,
                notes=list(scenario.risk.notes),
            ),
        )
