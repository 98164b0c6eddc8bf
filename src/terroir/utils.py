"""
Utility functions for Terroir.

Includes logging setup and numeric rounding helpers.
"""

import logging
import math

from terroir.config import LOG_FORMAT, LOG_LEVEL

# Configure logging
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format=LOG_FORMAT
)
logger = logging.getLogger(__name__)


# =======================
# NUMERIC HELPERS
# =======================

def round_half_away_from_zero(value: float, decimals: int = 1) -> float:
    """
    Round to a fixed number of decimals, ties away from zero.

    Python's built-in round() uses banker's rounding (2.25 -> 2.2), which
    would make 0.05 boundaries flip depending on the digit before them.

    Args:
        value: Number to round
        decimals: Decimal places to keep

    Returns:
        Rounded float
    """
    factor = 10 ** decimals
    rounded = math.floor(abs(value) * factor + 0.5) / factor
    return math.copysign(rounded, value)


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """
    Safely divide two numbers, returning default if denominator is zero.

    Args:
        numerator: Numerator
        denominator: Denominator
        default: Value to return if division by zero

    Returns:
        Result of division or default
    """
    if denominator == 0:
        return default
    return numerator / denominator
