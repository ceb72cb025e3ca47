"""Formatting helpers for estimate output.

Amounts are shown the way Brazilian owners and builders read them
(e.g., 'R$ 487.866,12' and 'R$ 1,2 mi' instead of '487866.1234').
"""

from __future__ import annotations

# Swap US separators for pt-BR ones in a single pass.
_PT_BR_SEPARATORS = str.maketrans({",": ".", ".": ","})


def _pt_br_number(amount: float, decimals: int) -> str:
    return f"{amount:,.{decimals}f}".translate(_PT_BR_SEPARATORS)


def format_brl(amount: float) -> str:
    """Format an amount in reais with cents and pt-BR separators.

    - 487866.12 -> 'R$ 487.866,12'
    - -10.5 -> '-R$ 10,50'
    """
    sign = "-" if amount < 0 else ""
    return f"{sign}R$ {_pt_br_number(abs(amount), 2)}"


def format_brl_compact(amount: float) -> str:
    """Format large amounts compactly.

    - Millions (>= R$ 1 mi): 'R$ 1,2 mi'
    - Thousands (>= R$ 10 mil): 'R$ 487 mil'
    - Below: same as format_brl
    """
    if abs(amount) >= 1_000_000:
        return f"R$ {_pt_br_number(amount / 1_000_000, 1)} mi"
    if abs(amount) >= 10_000:
        return f"R$ {_pt_br_number(amount / 1_000, 0)} mil"
    return format_brl(amount)


def format_number(value: float, decimals: int = 0) -> str:
    return _pt_br_number(value, decimals)


def format_factor_delta(factor: float) -> str:
    """Format a multiplier as a signed percentage delta (1.25 -> '+25.0%')."""
    percent = (factor - 1) * 100
    sign = "+" if percent > 0 else ""
    return f"{sign}{percent:.1f}%"
