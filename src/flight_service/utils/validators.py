"""
Validation utilities
"""

import math
from typing import Optional


def parse_confidence(raw: Optional[str]) -> Optional[float]:
    """
    Parse a bot confidence header value
    Returns None for text that is not a number or is NaN; other values are
    clamped into [0, 1]
    """
    if raw is None:
        return None

    try:
        value = float(raw.strip())
    except (TypeError, ValueError):
        return None

    if math.isnan(value):
        return None

    return min(max(value, 0.0), 1.0)


def parse_agent_type(raw: Optional[str]) -> Optional[str]:
    """
    Parse an agent type header value
    Blank labels count as missing
    """
    if raw is None:
        return None

    label = raw.strip()
    return label or None


def mask_payment(payment: str) -> str:
    """
    Keep only the last four characters of a payment string
    Strings shorter than four characters are returned whole
    """
    return payment[-4:]
