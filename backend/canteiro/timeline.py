"""Monthly disbursement timeline (cash-flow S-curve).

Turns scheduled phases into a month-by-month projection of spending, split
into hard (construction) and soft (pre-construction and administration)
costs. The series always sums to the project total.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from canteiro.curves import distribute_by_weights, get_phase_profile, get_weights
from canteiro.models.enums import PhaseType
from canteiro.models.schedule import FinancialTimePoint
from canteiro.schedule import DEFAULT_DEADLINE_MONTHS

if TYPE_CHECKING:
    from canteiro.models.schedule import DetailedPhase

logger = logging.getLogger(__name__)

SMOOTHING_WINDOW = 3
PEAK_TOLERANCE = 0.99

# Fallback S-curve: logistic derivative peaking at 45% of the deadline.
S_CURVE_STEEPNESS = 6.0
S_CURVE_MIDPOINT = 0.45
FALLBACK_HARD_SHARE = 0.85
FALLBACK_SOFT_SHARE = 0.15

_SOFT_TYPES = frozenset({PhaseType.PRE, PhaseType.ADMIN})


def smooth_timeline(values: list[float], window: int = SMOOTHING_WINDOW) -> list[float]:
    """Centered moving average that preserves the series total.

    Series of two months or fewer are returned unchanged.
    """
    if len(values) <= 2:
        return list(values)

    half = window // 2
    smoothed: list[float] = []
    for i in range(len(values)):
        neighbours = values[max(0, i - half) : i + half + 1]
        smoothed.append(sum(neighbours) / len(neighbours))

    original_sum = sum(values)
    smoothed_sum = sum(smoothed)
    if smoothed_sum > 0 and original_sum > 0:
        factor = original_sum / smoothed_sum
        return [v * factor for v in smoothed]
    return smoothed


def s_curve_distribution(months: int) -> list[float]:
    """Bell-shaped monthly weights (logistic derivative) summing to 1."""
    if months <= 0:
        return []
    if months == 1:
        return [1.0]

    weights = []
    for i in range(months):
        t = i / (months - 1)
        sigmoid = 1 / (1 + math.exp(-S_CURVE_STEEPNESS * (t - S_CURVE_MIDPOINT)))
        weights.append(S_CURVE_STEEPNESS * sigmoid * (1 - sigmoid))

    total = sum(weights)
    return [w / total for w in weights]


def _safe_deadline(deadline_months: float) -> int:
    if not math.isfinite(deadline_months) or deadline_months <= 0:
        return DEFAULT_DEADLINE_MONTHS
    return max(1, math.floor(deadline_months))


def build_timeline(
    total_cost: float,
    deadline_months: float,
    phases: list[DetailedPhase] | None = None,
) -> list[FinancialTimePoint]:
    """Project monthly disbursement over the deadline.

    Each phase's inflated value is spread over its months with the curve
    profile its name suggests. Phases ending after the deadline are folded
    into the last month. Without phases, *total_cost* follows a generic
    S-curve split 85/15 between hard and soft cost.

    Every month's hard and soft costs add up to its monthly value.

    Returns an empty list when *total_cost* is not a positive number.
    """
    safe_total = total_cost if math.isfinite(total_cost) and total_cost > 0 else 0.0
    if safe_total == 0:
        return []
    deadline = _safe_deadline(deadline_months)

    monthly = [0.0] * deadline
    hard = [0.0] * deadline
    soft = [0.0] * deadline

    if phases:
        for phase in phases:
            value = phase.inflated_value
            if not math.isfinite(value) or value <= 0:
                continue

            start = max(1, min(phase.start_month, deadline))
            end = max(start, min(phase.end_month, deadline))
            profile = get_phase_profile(phase.name, phase.type)
            values = distribute_by_weights(value, get_weights(profile, end - start + 1))

            bucket = soft if phase.type in _SOFT_TYPES else hard
            for offset, month_value in enumerate(values):
                index = start - 1 + offset
                monthly[index] += month_value
                bucket[index] += month_value
    else:
        logger.debug("No phases supplied; using S-curve fallback over %d months", deadline)
        for i, weight in enumerate(s_curve_distribution(deadline)):
            monthly[i] = safe_total * weight
            hard[i] = monthly[i] * FALLBACK_HARD_SHARE
            soft[i] = monthly[i] * FALLBACK_SOFT_SHARE

    # Smooth the totals and scale each month's hard/soft split to match.
    # Months that only received value from smoothing take the split of the
    # window it came from.
    raw_monthly, raw_hard, raw_soft = list(monthly), list(hard), list(soft)
    half = SMOOTHING_WINDOW // 2
    smoothed = smooth_timeline(monthly)
    for i, value in enumerate(smoothed):
        if raw_monthly[i] > 0:
            ratio = value / raw_monthly[i]
            hard[i] *= ratio
            soft[i] *= ratio
        elif value > 0:
            lo, hi = max(0, i - half), i + half + 1
            window_total = sum(raw_monthly[lo:hi])
            if window_total > 0:
                hard[i] = value * sum(raw_hard[lo:hi]) / window_total
                soft[i] = value * sum(raw_soft[lo:hi]) / window_total
        monthly[i] = value if math.isfinite(value) else 0.0

    running_total = sum(monthly)
    factor = safe_total / running_total if running_total > 0 else 0.0
    peak_threshold = max(monthly) * factor * PEAK_TOLERANCE

    timeline: list[FinancialTimePoint] = []
    accumulated = 0.0
    for i in range(deadline):
        value = monthly[i] * factor
        accumulated += value
        timeline.append(
            FinancialTimePoint(
                month=i + 1,
                label=f"M{i + 1}",
                monthly_value=value,
                accumulated_value=accumulated,
                accumulated_pct=accumulated / safe_total * 100,
                hard_cost=hard[i] * factor,
                soft_cost=soft[i] * factor,
                is_peak=value > 0 and value >= peak_threshold,
            )
        )
    return timeline
