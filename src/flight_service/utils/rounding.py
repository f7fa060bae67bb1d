"""
Rounding helpers for negotiated prices
"""

from decimal import Decimal, ROUND_HALF_UP


def round_half_away(value: float) -> float:
    """Round to the nearest integer, ties away from zero (2.5 -> 3.0, -2.5 -> -3.0)"""
    # Decimal(float) is exact, so ties are only those the float really holds
    return float(Decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
