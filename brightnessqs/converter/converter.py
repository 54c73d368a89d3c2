"""
Conversion between system brightness and UI slider percentage.

- System brightness is relative luminance (0-100%) expressed as 0-255
- UI percentage is lightness, the perceived brightness of the screen

The relationship between the two is not linear. With the slider half-way (50%)
the system brightness is about 50, not 127 (roughly 19% relative luminance).
"""

import logging
from typing import Any

from ..exceptions import InvalidArgumentError
from .formula import lightness_from_luminance, luminance_from_lightness, round_half_up
from .types import Const

logger = logging.getLogger(__name__)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _reject(operation: str, name: str, value: Any, minimum: int, maximum: int) -> None:
    logger.debug(f"{operation} rejected {name}={value!r}")
    raise InvalidArgumentError(operation, name, value, minimum, maximum)


def validate_ui_pct(ui_pct: Any, operation: str) -> None:
    if not _is_int(ui_pct) or not Const.MIN_UI_PCT <= ui_pct <= Const.MAX_UI_PCT:
        _reject(operation, "ui_pct", ui_pct, Const.MIN_UI_PCT, Const.MAX_UI_PCT)


def validate_sys_brightness(sys_brightness: Any, operation: str) -> None:
    if not _is_int(sys_brightness) or not Const.MIN_SYS_BRIGHTNESS <= sys_brightness <= Const.MAX_SYS_BRIGHTNESS:
        _reject(operation, "sys_brightness", sys_brightness, Const.MIN_SYS_BRIGHTNESS, Const.MAX_SYS_BRIGHTNESS)


def ui_pct_to_sys_brightness(ui_pct: int) -> int:
    """Convert a UI slider percentage (0-100) to system brightness (0-255)"""
    validate_ui_pct(ui_pct, "ui_pct_to_sys_brightness()")

    # percentage (0-100) to V on a 0-10 scale
    lightness_v = ui_pct / Const.V_TO_UI_PCT_RATIO

    rel_luminance_y_pct = luminance_from_lightness(lightness_v)

    return round_half_up(rel_luminance_y_pct * Const.Y_TO_BRIGHTNESS_RATIO)


def sys_brightness_to_ui_pct(sys_brightness: int) -> int:
    """Convert system brightness (0-255) to a UI slider percentage (0-100)"""
    validate_sys_brightness(sys_brightness, "sys_brightness_to_ui_pct()")

    rel_luminance_y_pct = sys_brightness / Const.Y_TO_BRIGHTNESS_RATIO

    lightness_v = lightness_from_luminance(rel_luminance_y_pct)

    # V to 0-100 percentage
    return round_half_up(lightness_v * Const.V_TO_UI_PCT_RATIO)


def conversion_table(step: int = 5, start: int = Const.MIN_UI_PCT, stop: int = Const.MAX_UI_PCT) -> list[tuple[int, int, int]]:
    """
    Tabulate the curve over a range of UI percentages.

    Each row is (ui_pct, sys_brightness, ui_pct converted back from
    sys_brightness). `stop` is inclusive and always included, even when the
    step does not land on it.

    Args:
        step: Distance between rows, 1-100
        start: First UI percentage
        stop: Last UI percentage, not less than `start`
    """
    if not _is_int(step) or not 1 <= step <= Const.MAX_UI_PCT:
        _reject("conversion_table()", "step", step, 1, Const.MAX_UI_PCT)
    validate_ui_pct(start, "conversion_table()")
    validate_ui_pct(stop, "conversion_table()")
    if start > stop:
        _reject("conversion_table()", "start", start, Const.MIN_UI_PCT, stop)

    ui_pcts = list(range(start, stop + 1, step))
    if ui_pcts[-1] != stop:
        ui_pcts.append(stop)

    table = []
    for ui_pct in ui_pcts:
        sys_brightness = ui_pct_to_sys_brightness(ui_pct)
        table.append((ui_pct, sys_brightness, sys_brightness_to_ui_pct(sys_brightness)))
    return table
