"""Construction scenario catalog keyed by ``{category}_{with|no}_subfloor``.

Each scenario bundles the total cost multiplier, schedule multiplier,
subsystem intensity multipliers and risk profile for one topography category
and basement combination.
"""

from __future__ import annotations

from canteiro.models.enums import RiskLevel
from canteiro.models.estimate import ScenarioInfo, ScenarioRisk, SubsystemMultipliers

SCENARIOS: dict[str, ScenarioInfo] = {
    "flat_no_subfloor": ScenarioInfo(
        id="flat_no_subfloor",
        label="Plano sem Subsolo",
        description=(
            "Terreno plano, fundação simples, sem movimentação de terra significativa"
        ),
        total_cost_multiplier=1.0,
        schedule_multiplier=1.0,
        phase_multipliers=SubsystemMultipliers(
            foundations=1.0, structure=1.0, earthwork=1.0, containment=0.0, drainage=0.5
        ),
        risk=ScenarioRisk(
            level=RiskLevel.BAIXO,
            label="Baixo Risco",
            color="green",
            contingency_percent=5,
            notes=["Execução convencional", "Menor complexidade técnica"],
        ),
    ),
    "flat_with_subfloor": ScenarioInfo(
        id="flat_with_subfloor",
        label="Plano com Subsolo",
        description=(
            "Terreno plano com escavação para subsolo, requer escoramento e drenagem"
        ),
        total_cost_multiplier=1.25,
        schedule_multiplier=1.20,
        phase_multipliers=SubsystemMultipliers(
            foundations=1.35, structure=1.15, earthwork=2.0, containment=1.0, drainage=1.5
        ),
        risk=ScenarioRisk(
            level=RiskLevel.MEDIO,
            label="Risco Médio",
            color="yellow",
            contingency_percent=10,
            notes=["Escavação profunda requer cuidado", "Verificar lençol freático"],
        ),
    ),
    "slope_up_no_subfloor": ScenarioInfo(
        id="slope_up_no_subfloor",
        label="Aclive sem Subsolo",
        description="Terreno em aclive, requer corte de terreno e possível contenção",
        total_cost_multiplier=1.35,
        schedule_multiplier=1.30,
        phase_multipliers=SubsystemMultipliers(
            foundations=1.40, structure=1.10, earthwork=2.5, containment=0.8, drainage=1.2
        ),
        risk=ScenarioRisk(
            level=RiskLevel.MEDIO,
            label="Risco Médio",
            color="yellow",
            contingency_percent=12,
            notes=[
                "Movimentação de terra significativa",
                "Contenção pode ser necessária",
            ],
        ),
    ),
    "slope_up_with_subfloor": ScenarioInfo(
        id="slope_up_with_subfloor",
        label="Aclive com Subsolo",
        description=(
            "Terreno em aclive com subsolo, alta complexidade de fundação e contenção"
        ),
        total_cost_multiplier=1.55,
        schedule_multiplier=1.52,
        phase_multipliers=SubsystemMultipliers(
            foundations=1.80, structure=1.25, earthwork=3.0, containment=1.5, drainage=2.0
        ),
        risk=ScenarioRisk(
            level=RiskLevel.ALTO,
            label="Risco Alto",
            color="orange",
            contingency_percent=18,
            notes=[
                "Complexidade estrutural elevada",
                "Contenção robusta obrigatória",
                "Drenagem crítica para estabilidade",
            ],
        ),
    ),
    "slope_down_no_subfloor": ScenarioInfo(
        id="slope_down_no_subfloor",
        label="Declive sem Subsolo",
        description="Terreno em declive, fundação em desnível com pilares alongados",
        total_cost_multiplier=1.45,
        schedule_multiplier=1.40,
        phase_multipliers=SubsystemMultipliers(
            foundations=1.60, structure=1.30, earthwork=1.8, containment=0.6, drainage=1.3
        ),
        risk=ScenarioRisk(
            level=RiskLevel.ALTO,
            label="Risco Alto",
            color="orange",
            contingency_percent=15,
            notes=[
                "Pilares alongados aumentam custo estrutural",
                "Acesso de obra pode ser complicado",
            ],
        ),
    ),
    "slope_down_with_subfloor": ScenarioInfo(
        id="slope_down_with_subfloor",
        label="Declive com Subsolo",
        description=(
            "Cenário de maior complexidade: declive + subsolo = "
            "máxima contenção e estrutura"
        ),
        total_cost_multiplier=1.85,
        schedule_multiplier=2.07,
        phase_multipliers=SubsystemMultipliers(
            foundations=2.20, structure=1.50, earthwork=4.0, containment=2.0, drainage=2.5
        ),
        risk=ScenarioRisk(
            level=RiskLevel.CRITICO,
            label="Risco Crítico",
            color="red",
            contingency_percent=25,
            notes=[
                "Projeto estrutural especial obrigatório",
                "Contenção de alto porte",
                "Recomenda-se sondagem de solo",
                "Prazo estendido é inevitável",
            ],
        ),
    ),
}
