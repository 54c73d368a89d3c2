"""
Converter constants.

Domain limits for the two brightness scales and the constants of the
Moon & Spencer (1943) lightness formula `V = 1.4 * Y ^ 0.4269`, where Y is
relative luminance in percent and V is lightness on a 0-10 scale.
"""


class Const:

    # UI slider percentage (perceived lightness)
    MIN_UI_PCT = 0
    MAX_UI_PCT = 100

    # System brightness (relative luminance on the device scale)
    MIN_SYS_BRIGHTNESS = 0
    MAX_SYS_BRIGHTNESS = 255

    # Moon, Parry; Spencer, Domina Eberle (May 1943). "Metric based on the
    # composite color stimulus". JOSA 33 (5): 270-277. doi:10.1364/JOSA.33.000270
    LIGHTNESS_COEFFICIENT = 1.4
    LIGHTNESS_EXPONENT = 0.4269

    # Relative luminance (0-100%) to system brightness (0-255)
    Y_TO_BRIGHTNESS_RATIO = 255 / 100

    # Lightness V (0-10) to UI percentage (0-100)
    V_TO_UI_PCT_RATIO = 10
