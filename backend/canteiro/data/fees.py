"""State-level registry fees and design-discipline rates (Santa Catarina).

Both registry fees are tiered over the estimated property value: a flat
amount up to each ceiling, and a base plus a percentage of the excess in the
open-ended top tier.

Source: Lei Complementar Estadual 755/2019, Circular 551/2024.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class FeeBracket:
    """One tier of a bracketed fee.

    ``excess_over`` is the value above which ``excess_rate`` applies; the fee
    for a value in this tier is ``base + (value - excess_over) * excess_rate``.
    """

    ceiling: float
    base: float
    excess_over: float = 0.0
    excess_rate: float = 0.0

    def fee_for(self, value: float) -> float:
        if self.excess_rate == 0.0:
            return self.base
        return self.base + (value - self.excess_over) * self.excess_rate


def bracket_fee(brackets: tuple[FeeBracket, ...], value: float) -> float:
    """Return the fee of the first bracket whose ceiling covers ``value``."""
    for bracket in brackets:
        if value <= bracket.ceiling:
            return bracket.fee_for(value)
    return brackets[-1].fee_for(value)


ITBI_RATE = 0.02

# Averbação (construction registration). Bases are emolumentos + taxa
# judiciária; the top tier charges 0.5% + 0.1% of the excess.
AVERBACAO_BRACKETS: tuple[FeeBracket, ...] = (
    FeeBracket(ceiling=19_850.14, base=75.42 + 17.14),
    FeeBracket(ceiling=33_083.58, base=88.65 + 20.15),
    FeeBracket(ceiling=66_167.16, base=119.10 + 27.07),
    FeeBracket(
        ceiling=math.inf,
        base=119.10 + 27.07,
        excess_over=66_167.16,
        excess_rate=0.005 + 0.001,
    ),
)

# Escritura e registro (notarial fees).
ESCRITURA_BRACKETS: tuple[FeeBracket, ...] = (
    FeeBracket(ceiling=265_000.0, base=519.86),
    FeeBracket(
        ceiling=530_000.0,
        base=519.86,
        excess_over=265_000.0,
        excess_rate=0.003,
    ),
    FeeBracket(
        ceiling=math.inf,
        base=1_314.86,
        excess_over=530_000.0,
        excess_rate=0.002,
    ),
)

ESCRITURA_FIXED_FEES = 150.0

# Professional registration (ART/RRT) tier threshold, in m2 of real area.
ART_RRT_AREA_THRESHOLD = 200.0

# Design fees in R$/m2 of real area.
PROJECT_RATES: dict[str, float] = {
    "Topográfico": 6.0,
    "Arquitetônico": 100.0,
    "Estrutural": 25.0,
    "Hidrossanitário": 20.0,
    "Elétrico": 20.0,
    "Paisagismo": 12.0,
}
