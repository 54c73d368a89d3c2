"""
Brightness converter.

This module contains the conversion between the two brightness domains:
- ui_pct_to_sys_brightness, sys_brightness_to_ui_pct (integer operations)
- The continuous lightness formula they are built on
- Domain limits and formula constants
"""

from .converter import (
    ui_pct_to_sys_brightness,
    sys_brightness_to_ui_pct,
    validate_ui_pct,
    validate_sys_brightness,
    conversion_table,
)
from .formula import lightness_from_luminance, luminance_from_lightness, round_half_up
from .types import Const

__all__ = [
    # Integer operations
    "ui_pct_to_sys_brightness",
    "sys_brightness_to_ui_pct",
    "validate_ui_pct",
    "validate_sys_brightness",
    "conversion_table",

    # Continuous formula
    "lightness_from_luminance",
    "luminance_from_lightness",
    "round_half_up",

    # Constants
    "Const",
]
