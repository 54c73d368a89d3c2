"""
brightnessqs Python Library

Converts between a device's system brightness (0-255, linear relative
luminance) and the perceptually linear percentage shown on a brightness
slider (0-100), using the Moon & Spencer (1943) lightness formula.

Example usage:
    import brightnessqs

    sys_brightness = brightnessqs.ui_pct_to_sys_brightness(50)   # 50
    ui_pct = brightnessqs.sys_brightness_to_ui_pct(130)          # 75
"""

import logging

# Brightness conversion
from .converter import (
    ui_pct_to_sys_brightness,
    sys_brightness_to_ui_pct,
    validate_ui_pct,
    validate_sys_brightness,
    conversion_table,
    lightness_from_luminance,
    luminance_from_lightness,
    round_half_up,
    Const,
)

# Exceptions
from .exceptions import BrightnessError, InvalidArgumentError, ConfigurationError

# Configuration and logging
from .config import load_config
from .logs import setup_logging

# Utilities
from .utils import run_with_keyboard_interrupt

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__author__ = "brightnessqs contributors"

# Public API
__all__ = [
    # Conversion
    "ui_pct_to_sys_brightness",
    "sys_brightness_to_ui_pct",
    "validate_ui_pct",
    "validate_sys_brightness",
    "conversion_table",
    "lightness_from_luminance",
    "luminance_from_lightness",
    "round_half_up",
    "Const",

    # Exceptions
    "BrightnessError",
    "InvalidArgumentError",
    "ConfigurationError",

    # Configuration and logging
    "load_config",
    "setup_logging",

    # Utilities
    "run_with_keyboard_interrupt",
]
