"""
Utility modules for flight service
"""

from .logger import setup_logging
from .rounding import round_half_away
from .validators import parse_confidence, parse_agent_type, mask_payment

__all__ = [
    "setup_logging",
    "round_half_away",
    "parse_confidence",
    "parse_agent_type",
    "mask_payment",
]
