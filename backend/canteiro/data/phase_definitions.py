"""The 19 atomic schedule phases and their share of total cost.

Weights of the pre/construction/post entries sum to 1. Administration is not
listed here; the scheduler synthesizes one admin phase per project month.
"""

from __future__ import annotations

from canteiro.models.enums import PhaseType
from canteiro.models.schedule import AtomicPhaseDefinition

_PRE = PhaseType.PRE
_CONSTRUCTION = PhaseType.CONSTRUCTION
_POST = PhaseType.POST

PHASE_DEFINITIONS: list[AtomicPhaseDefinition] = [
    AtomicPhaseDefinition(id="p1", name="Planejamento e Orçamentação", type=_PRE, weight=0.01),
    AtomicPhaseDefinition(id="p2", name="Definição de Escopo", type=_PRE, weight=0.01),
    AtomicPhaseDefinition(id="p3", name="Preparação de Obra", type=_PRE, weight=0.01),
    AtomicPhaseDefinition(id="p4", name="Cronograma Físico-Financeiro", type=_PRE, weight=0.005),
    AtomicPhaseDefinition(id="p5", name="Gestão de Suprimentos", type=_PRE, weight=0.005),
    AtomicPhaseDefinition(
        id="c1", name="Instalação de Canteiro", type=_CONSTRUCTION, weight=0.03
    ),
    AtomicPhaseDefinition(id="c2", name="Mobilização", type=_CONSTRUCTION, weight=0.02),
    AtomicPhaseDefinition(
        id="c3", name="Infraestrutura e Fundações", type=_CONSTRUCTION, weight=0.07
    ),
    AtomicPhaseDefinition(
        id="c4", name="Supraestrutura (Estrutura)", type=_CONSTRUCTION, weight=0.16
    ),
    AtomicPhaseDefinition(
        id="c5", name="Alvenaria e Vedações", type=_CONSTRUCTION, weight=0.04
    ),
    AtomicPhaseDefinition(
        id="c6", name="Cobertura e Telhado", type=_CONSTRUCTION, weight=0.05
    ),
    AtomicPhaseDefinition(
        id="c7", name="Esquadrias (Portas e Janelas)", type=_CONSTRUCTION, weight=0.12
    ),
    AtomicPhaseDefinition(
        id="c8", name="Instalações Hidrossanitárias", type=_CONSTRUCTION, weight=0.06
    ),
    AtomicPhaseDefinition(
        id="c9", name="Instalações Elétricas", type=_CONSTRUCTION, weight=0.06
    ),
    AtomicPhaseDefinition(
        id="c10", name="Revestimentos Internos", type=_CONSTRUCTION, weight=0.18
    ),
    AtomicPhaseDefinition(
        id="c11", name="Fachada e Rev. Externos", type=_CONSTRUCTION, weight=0.08
    ),
    AtomicPhaseDefinition(id="c12", name="Pintura", type=_CONSTRUCTION, weight=0.05),
    AtomicPhaseDefinition(
        id="c13", name="Serviços Complementares", type=_CONSTRUCTION, weight=0.01
    ),
    AtomicPhaseDefinition(
        id="f1", name="Paisagismo e Limpeza Final", type=_POST, weight=0.03
    ),
]

# Atomic phase id -> scenario subsystem whose multiplier scales its weight.
PHASE_SUBSYSTEMS: dict[str, str] = {
    "c3": "foundations",
    "c4": "structure",
}
