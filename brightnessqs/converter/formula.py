"""
Continuous form of the lightness transform.

The integer conversions in `converter.py` are built from these float helpers.
"""

import math

from .types import Const


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties towards positive infinity"""
    return math.floor(value + 0.5)


def lightness_from_luminance(y_pct: float) -> float:
    """Relative luminance Y (0-100%) to lightness V (0-10)"""
    if y_pct < 0:
        raise ValueError(f"Relative luminance must not be negative, received {y_pct}")
    return math.pow(y_pct, Const.LIGHTNESS_EXPONENT) * Const.LIGHTNESS_COEFFICIENT


def luminance_from_lightness(v: float) -> float:
    """
    Lightness V (0-10) to relative luminance Y (0-100%).

    Inverse of `lightness_from_luminance`. log10(0) is taken as negative
    infinity, so a lightness of zero maps to zero luminance.
    """
    if v < 0:
        raise ValueError(f"Lightness must not be negative, received {v}")
    if v == 0:
        return 0.0
    return math.pow(10, math.log10(v / Const.LIGHTNESS_COEFFICIENT) / Const.LIGHTNESS_EXPONENT)
