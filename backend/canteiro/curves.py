"""Disbursement curve profiles for schedule phases.

Construction spending is never linear: foundations spend early, structure
peaks mid-phase, finishes spend late. Each profile is a small base shape
that gets resampled to the phase duration in months.
"""

from __future__ import annotations

import logging
import math

from canteiro.models.enums import CurveProfile

logger = logging.getLogger(__name__)

BASE_SHAPES: dict[CurveProfile, tuple[float, ...]] = {
    CurveProfile.FRONT_LOADED: (0.35, 0.28, 0.20, 0.12, 0.05),
    CurveProfile.MID_PEAK: (0.10, 0.20, 0.30, 0.25, 0.10, 0.05),
    CurveProfile.BACK_LOADED: (0.05, 0.10, 0.18, 0.27, 0.40),
    CurveProfile.UNIFORM: (1.0,),
}

_TWO_MONTH_WEIGHTS: dict[CurveProfile, list[float]] = {
    CurveProfile.FRONT_LOADED: [0.65, 0.35],
    CurveProfile.MID_PEAK: [0.45, 0.55],
    CurveProfile.BACK_LOADED: [0.35, 0.65],
    CurveProfile.UNIFORM: [0.5, 0.5],
}

_THREE_MONTH_SHAPES: dict[CurveProfile, list[float]] = {
    CurveProfile.FRONT_LOADED: [0.50, 0.30, 0.20],
    CurveProfile.MID_PEAK: [0.25, 0.50, 0.25],
    CurveProfile.BACK_LOADED: [0.20, 0.30, 0.50],
    CurveProfile.UNIFORM: [1.0, 1.0, 1.0],
}

# Matched in order; the first profile with a hit wins.
PROFILE_KEYWORDS: tuple[tuple[CurveProfile, tuple[str, ...]], ...] = (
    (
        CurveProfile.FRONT_LOADED,
        (
            "fundação", "fundacao", "terraplanagem", "terraplenagem",
            "mobilização", "mobilizacao", "canteiro", "demolição", "demolicao",
            "escavação", "escavacao", "sondagem", "infraestrutura",
        ),
    ),
    (
        CurveProfile.MID_PEAK,
        (
            "estrutura", "supraestrutura", "laje", "concreto",
            "alvenaria", "vedação", "vedacao", "cobertura", "telhado",
        ),
    ),
    (
        CurveProfile.BACK_LOADED,
        (
            "acabamento", "pintura", "esquadria", "louça", "louca",
            "metal", "metais", "piso", "revestimento", "forro",
            "finalização", "finalizacao", "limpeza", "entrega",
            "paisagismo", "jardim", "decoração", "decoracao",
        ),
    ),
    (
        CurveProfile.UNIFORM,
        (
            "instalação", "instalacao", "instalações", "instalacoes",
            "elétrica", "eletrica", "hidráulica", "hidraulica",
            "hidrossanitária", "hidrossanitaria", "gás", "gas",
            "gestão", "gestao", "administração", "administracao",
            "projeto", "aprovação", "aprovacao", "licença", "licenca",
        ),
    ),
)

# Remainders below this are left where they fall.
_REMAINDER_TOLERANCE = 1e-4


def resample_weights(shape: list[float] | tuple[float, ...], target_length: int) -> list[float]:
    """Linearly interpolate *shape* onto *target_length* points.

    A single-point shape expands to a uniform array. Equal lengths return a
    copy of the shape.
    """
    if target_length <= 1:
        return [1.0]
    if len(shape) == 1:
        return [1.0 / target_length] * target_length
    if target_length == len(shape):
        return list(shape)

    last = len(shape) - 1
    ratio = last / (target_length - 1)
    result: list[float] = []
    for i in range(target_length):
        position = i * ratio
        lower = math.floor(position)
        upper = min(lower + 1, last)
        fraction = position - lower
        result.append(shape[lower] * (1 - fraction) + shape[upper] * fraction)
    return result


def normalize_weights(weights: list[float]) -> list[float]:
    """Scale *weights* to sum to 1, or return a uniform array if that is impossible."""
    total = sum(weights)
    if total <= 0 or not math.isfinite(total):
        length = len(weights) or 1
        logger.warning("Degenerate weight array (sum=%s); using uniform weights", total)
        return [1.0 / length] * length
    return [w / total for w in weights]


def get_weights(profile: CurveProfile, duration: float) -> list[float]:
    """Get normalized monthly weights for a phase of *duration* months.

    Non-finite durations count as a single month.
    """
    months = max(1, math.floor(duration)) if math.isfinite(duration) else 1
    if months == 1:
        return [1.0]
    if months == 2:
        return list(_TWO_MONTH_WEIGHTS.get(profile, [0.5, 0.5]))
    if months == 3:
        return normalize_weights(list(_THREE_MONTH_SHAPES.get(profile, [1.0, 1.0, 1.0])))

    shape = BASE_SHAPES.get(profile, BASE_SHAPES[CurveProfile.UNIFORM])
    return normalize_weights(resample_weights(shape, months))


def get_phase_profile(phase_name: str, phase_type: str | None = None) -> CurveProfile:
    """Pick a curve profile from keywords in the phase name and type.

    Unmatched phases are UNIFORM.
    """
    text = f"{phase_name} {phase_type or ''}".lower()
    for profile, keywords in PROFILE_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return profile
    return CurveProfile.UNIFORM


def distribute_by_weights(total_value: float, weights: list[float]) -> list[float]:
    """Split *total_value* by *weights* so the parts sum back to the total.

    Non-finite or non-positive totals distribute to zeros.
    """
    if not math.isfinite(total_value) or total_value <= 0 or not weights:
        return [0.0] * len(weights)

    values = [total_value * w for w in weights]

    # Push the floating-point remainder into the last month.
    delta = total_value - sum(values)
    if abs(delta) > _REMAINDER_TOLERANCE:
        values[-1] += delta
    return values
