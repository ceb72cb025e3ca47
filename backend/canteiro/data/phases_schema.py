"""Six macro phases with conditional sub-phases.

The macro phases group the 19 atomic schedule phases for display:

1. Planejamento e Projetos (pre)
2. Mobilização e Canteiro
3. Infraestrutura e Fundações
4. Estrutura e Envoltória
5. Instalações e Acabamentos
6. Entrega e Finalização (post)

Sub-phase visibility is inferred deterministically from the project:
basement exists iff ``subsoil_area > 0``, upper floor exists iff
``upper_floor_area > 0``, sloped site iff ``topography != "flat"``.
"""

from __future__ import annotations

from canteiro.models.enums import CombineOperator, ConditionType, PhaseType
from canteiro.models.phases import (
    ALWAYS,
    ConditionalRule,
    Phase,
    PhaseCondition,
    SubPhase,
)

PHASES_SCHEMA_VERSION = "1.0.0"


def _when(*rules: ConditionalRule) -> PhaseCondition:
    return PhaseCondition(type=ConditionType.CONDITIONAL, rules=list(rules))


_NOT_FLAT = _when(ConditionalRule(field="topography", operator="notEquals", value="flat"))
_HAS_SUBSOIL = _when(ConditionalRule(field="subsoil_area", operator="greaterThan", value=0))

MACRO_PHASE_PLANNING = Phase(
    id="macro-01",
    name="Planejamento e Projetos",
    description="Desenvolvimento de projetos técnicos, orçamentação e preparação",
    detailed_explanation=(
        "Inclui aprovação de projetos na prefeitura, contratação de arquiteto e "
        "engenheiros, elaboração de cronograma físico-financeiro e definição do "
        "escopo completo. Esta fase ocorre antes do início físico da obra."
    ),
    base_percentage=4,
    duration_percentage=15,
    icon="FileText",
    color="#3B82F6",
    phase_type=PhaseType.PRE,
    original_phase_ids=["p1", "p2", "p3", "p4", "p5"],
    sub_phases=[
        SubPhase(
            id="macro-01-sub-01",
            name="Planejamento e Orçamentação",
            description="Levantamento de custos, cronograma inicial e definição de metas",
            condition=ALWAYS,
            estimated_percentage=25,
            order=1,
            icon="Calculator",
        ),
        SubPhase(
            id="macro-01-sub-02",
            name="Definição de Escopo",
            description="Especificação técnica detalhada e memorial descritivo",
            condition=ALWAYS,
            estimated_percentage=25,
            order=2,
            icon="ClipboardList",
        ),
        SubPhase(
            id="macro-01-sub-03",
            name="Preparação de Obra",
            description="Licenças, alvarás e documentação legal",
            condition=ALWAYS,
            estimated_percentage=25,
            order=3,
            icon="FileCheck",
        ),
        SubPhase(
            id="macro-01-sub-04",
            name="Cronograma e Suprimentos",
            description="Planejamento físico-financeiro e gestão de compras",
            condition=ALWAYS,
            estimated_percentage=25,
            order=4,
            icon="Calendar",
        ),
    ],
)

MACRO_PHASE_MOBILIZATION = Phase(
    id="macro-02",
    name="Mobilização e Canteiro",
    description="Instalação do canteiro de obras e mobilização de equipes",
    detailed_explanation=(
        "Montagem de tapumes, instalação do escritório de obra, vestiários, "
        "sanitários e depósitos de materiais. Contratação da mão de obra inicial "
        "e primeiras compras."
    ),
    base_percentage=5,
    duration_percentage=8,
    icon="HardHat",
    color="#059669",
    phase_type=PhaseType.CONSTRUCTION,
    original_phase_ids=["c1", "c2"],
    sub_phases=[
        SubPhase(
            id="macro-02-sub-01",
            name="Instalação de Canteiro",
            description="Barracões, instalações provisórias, tapumes e acessos",
            condition=ALWAYS,
            estimated_percentage=60,
            order=1,
            icon="Building2",
        ),
        SubPhase(
            id="macro-02-sub-02",
            name="Mobilização de Equipes",
            description="Contratação e alocação de mão de obra inicial",
            condition=ALWAYS,
            estimated_percentage=40,
            order=2,
            icon="Users",
        ),
    ],
)

MACRO_PHASE_FOUNDATIONS = Phase(
    id="macro-03",
    name="Infraestrutura e Fundações",
    description="Preparação do terreno, fundações e estruturas de contenção",
    detailed_explanation=(
        "Fase crítica que define a estabilidade da obra. Inclui limpeza do "
        "terreno, movimentação de terra, execução de estacas ou sapatas, vigas "
        "baldrame e impermeabilização. Terrenos em declive ou com subsolo exigem "
        "cuidado especial com contenções e drenagem."
    ),
    base_percentage=7,
    duration_percentage=15,
    icon="Shovel",
    color="#8B4513",
    phase_type=PhaseType.CONSTRUCTION,
    original_phase_ids=["c3"],
    sub_phases=[
        SubPhase(
            id="macro-03-sub-01",
            name="Limpeza e Demarcação",
            description="Remoção de vegetação, entulhos e marcação topográfica",
            condition=ALWAYS,
            estimated_percentage=10,
            order=1,
            icon="Trash2",
        ),
        SubPhase(
            id="macro-03-sub-02",
            name="Cortes e Aterros",
            description="Movimentação de terra para nivelamento",
            condition=_NOT_FLAT,
            estimated_percentage=20,
            order=2,
            is_critical=True,
            icon="TrendingUp",
        ),
        SubPhase(
            id="macro-03-sub-03",
            name="Contenções e Muros de Arrimo",
            description="Estruturas de contenção para estabilização de taludes",
            condition=_when(
                ConditionalRule(
                    field="topography",
                    operator="includes",
                    value=["slope_light", "slope_high"],
                )
            ),
            estimated_percentage=25,
            order=3,
            is_critical=True,
            icon="Layers",
        ),
        SubPhase(
            id="macro-03-sub-04",
            name="Escavação para Subsolo",
            description="Escavação profunda para pavimento inferior",
            condition=_HAS_SUBSOIL,
            estimated_percentage=30,
            order=4,
            is_critical=True,
            icon="ArrowDownCircle",
        ),
        SubPhase(
            id="macro-03-sub-05",
            name="Fundações Rasas",
            description="Sapatas isoladas, vigas baldrame e radier",
            condition=_when(
                ConditionalRule(
                    field="topography",
                    operator="equals",
                    value="flat",
                    combine_with=CombineOperator.AND,
                ),
                ConditionalRule(field="subsoil_area", operator="equals", value=0),
            ),
            estimated_percentage=35,
            order=5,
            icon="Square",
        ),
        SubPhase(
            id="macro-03-sub-06",
            name="Fundações Profundas",
            description="Estacas e blocos de coroamento",
            condition=_NOT_FLAT,
            estimated_percentage=40,
            order=6,
            is_critical=True,
            icon="ArrowDown",
        ),
        SubPhase(
            id="macro-03-sub-07",
            name="Drenagem e Impermeabilização",
            description="Sistema de drenagem subsuperficial",
            condition=_HAS_SUBSOIL,
            estimated_percentage=15,
            order=7,
            icon="Droplets",
        ),
    ],
)

MACRO_PHASE_STRUCTURE = Phase(
    id="macro-04",
    name="Estrutura e Envoltória",
    description="Superestrutura, vedações, cobertura e esquadrias",
    detailed_explanation=(
        "Maior concentração de custos e tempo. Execução de pilares, vigas e lajes, "
        "fechamento com alvenaria ou drywall, telhado completo e instalação de "
        "portas e janelas. A obra fecha nesta fase."
    ),
    base_percentage=37,
    duration_percentage=30,
    icon="Building",
    color="#6B7280",
    phase_type=PhaseType.CONSTRUCTION,
    original_phase_ids=["c4", "c5", "c6", "c7"],
    sub_phases=[
        SubPhase(
            id="macro-04-sub-01",
            name="Estrutura do Subsolo",
            description="Pilares, vigas e laje do pavimento inferior",
            condition=_HAS_SUBSOIL,
            estimated_percentage=15,
            order=1,
            is_critical=True,
            icon="ArrowDownCircle",
        ),
        SubPhase(
            id="macro-04-sub-02",
            name="Estrutura do Térreo",
            description="Pilares, vigas e laje do pavimento térreo",
            condition=ALWAYS,
            estimated_percentage=20,
            order=2,
            icon="Square",
        ),
        SubPhase(
            id="macro-04-sub-03",
            name="Estrutura do Pavimento Superior",
            description="Pilares, vigas e laje do andar superior",
            condition=_when(
                ConditionalRule(field="upper_floor_area", operator="greaterThan", value=0)
            ),
            estimated_percentage=20,
            order=3,
            icon="ArrowUpCircle",
        ),
        SubPhase(
            id="macro-04-sub-04",
            name="Alvenaria e Vedações",
            description="Paredes em blocos ou drywall",
            condition=ALWAYS,
            estimated_percentage=12,
            order=4,
            icon="LayoutGrid",
        ),
        SubPhase(
            id="macro-04-sub-05",
            name="Cobertura e Telhado",
            description="Estrutura de telhado e telhas",
            condition=ALWAYS,
            estimated_percentage=14,
            order=5,
            icon="Home",
        ),
        SubPhase(
            id="macro-04-sub-06",
            name="Esquadrias (Portas e Janelas)",
            description="Instalação de portas, janelas e vidros",
            condition=ALWAYS,
            estimated_percentage=32,
            order=6,
            icon="DoorOpen",
        ),
    ],
)

MACRO_PHASE_FINISHING = Phase(
    id="macro-05",
    name="Instalações e Acabamentos",
    description="Instalações hidráulicas, elétricas, revestimentos e pintura",
    detailed_explanation=(
        "Fase de maior custo unitário por m². Tubulações de água, esgoto, "
        "elétrica e gás, contrapiso, pisos, azulejos, forros, pintura e "
        "revestimento de fachada."
    ),
    base_percentage=44,
    duration_percentage=27,
    icon="Paintbrush",
    color="#8B5CF6",
    phase_type=PhaseType.CONSTRUCTION,
    original_phase_ids=["c8", "c9", "c10", "c11", "c12", "c13"],
    sub_phases=[
        SubPhase(
            id="macro-05-sub-01",
            name="Instalações Hidrossanitárias",
            description="Tubulações de água, esgoto e águas pluviais",
            condition=ALWAYS,
            estimated_percentage=14,
            order=1,
            icon="Droplets",
        ),
        SubPhase(
            id="macro-05-sub-02",
            name="Instalações Elétricas",
            description="Fiação, quadros e pontos de luz/tomada",
            condition=ALWAYS,
            estimated_percentage=14,
            order=2,
            icon="Zap",
        ),
        SubPhase(
            id="macro-05-sub-03",
            name="Revestimentos Internos",
            description="Pisos, azulejos, forros e acabamentos",
            condition=ALWAYS,
            estimated_percentage=41,
            order=3,
            icon="Layers",
        ),
        SubPhase(
            id="macro-05-sub-04",
            name="Fachada e Revestimentos Externos",
            description="Acabamento externo e impermeabilização",
            condition=ALWAYS,
            estimated_percentage=18,
            order=4,
            icon="Building2",
        ),
        SubPhase(
            id="macro-05-sub-05",
            name="Pintura",
            description="Pintura interna e externa",
            condition=ALWAYS,
            estimated_percentage=11,
            order=5,
            icon="Paintbrush",
        ),
        SubPhase(
            id="macro-05-sub-06",
            name="Serviços Complementares",
            description="Instalações especiais e serviços finais",
            condition=ALWAYS,
            estimated_percentage=2,
            order=6,
            icon="Wrench",
        ),
    ],
)

MACRO_PHASE_DELIVERY = Phase(
    id="macro-06",
    name="Entrega e Finalização",
    description="Paisagismo, limpeza final e entrega da obra",
    detailed_explanation=(
        "Últimos ajustes, paisagismo, limpeza pós-obra, remoção de entulhos e "
        "vistoria final. Inclui obtenção do Habite-se e entrega das chaves."
    ),
    base_percentage=3,
    duration_percentage=5,
    icon="CheckCircle",
    color="#10B981",
    phase_type=PhaseType.POST,
    original_phase_ids=["f1"],
    sub_phases=[
        SubPhase(
            id="macro-06-sub-01",
            name="Paisagismo",
            description="Jardins, gramado e áreas verdes",
            condition=ALWAYS,
            estimated_percentage=40,
            order=1,
            icon="TreeDeciduous",
        ),
        SubPhase(
            id="macro-06-sub-02",
            name="Limpeza Final",
            description="Limpeza pós-obra e remoção de entulhos",
            condition=ALWAYS,
            estimated_percentage=30,
            order=2,
            icon="Sparkles",
        ),
        SubPhase(
            id="macro-06-sub-03",
            name="Vistoria e Entrega",
            description="Verificação final e entrega de chaves",
            condition=ALWAYS,
            estimated_percentage=30,
            order=3,
            icon="Key",
        ),
    ],
)

MACRO_PHASES_SCHEMA: list[Phase] = [
    MACRO_PHASE_PLANNING,
    MACRO_PHASE_MOBILIZATION,
    MACRO_PHASE_FOUNDATIONS,
    MACRO_PHASE_STRUCTURE,
    MACRO_PHASE_FINISHING,
    MACRO_PHASE_DELIVERY,
]

# Atomic phase id -> macro phase id.
PHASE_MAPPING: dict[str, str] = {
    atomic_id: phase.id
    for phase in MACRO_PHASES_SCHEMA
    for atomic_id in phase.original_phase_ids
}


def get_macro_phase_by_id(phase_id: str) -> Phase | None:
    for phase in MACRO_PHASES_SCHEMA:
        if phase.id == phase_id:
            return phase
    return None


def get_macro_phase_by_original_id(original_id: str) -> Phase | None:
    macro_id = PHASE_MAPPING.get(original_id)
    return get_macro_phase_by_id(macro_id) if macro_id else None
