import logging
import re

from .errors import ConversionError
from .state import Hsb, Rgb, Xy


log = logging.getLogger(__name__)

_HEX_COLOR_RE = re.compile(r"[0-9a-fA-F]{6}")


def _inverse_gamma(value: float) -> float:
    if value > 0.04045:
        return ((value + 0.055) / 1.055) ** 2.4
    return value / 12.92


def rgb_to_xy(r: int, g: int, b: int) -> Xy:
    """Converts an sRGB color to CIE 1931 xy chromaticity.

    Uses the Wide RGB D65 matrix. Black has no chromaticity and maps to (0, 0).
    """
    red = _inverse_gamma(r / 255)
    green = _inverse_gamma(g / 255)
    blue = _inverse_gamma(b / 255)

    X = red * 0.664511 + green * 0.154324 + blue * 0.162028
    Y = red * 0.283881 + green * 0.668433 + blue * 0.047685
    Z = red * 0.000088 + green * 0.072310 + blue * 0.986039

    total = X + Y + Z
    if total == 0:
        return Xy(x=0, y=0)

    return Xy(x=round(X / total, 4), y=round(Y / total, 4))


def hex_to_xy(hex_color: str) -> Xy:
    return rgb_to_xy(*hex_to_rgb(hex_color))


def hex_to_rgb(hex_color: str) -> Rgb:
    digits = hex_color[1:] if hex_color.startswith("#") else hex_color
    if not _HEX_COLOR_RE.fullmatch(digits):
        log.debug(f"Rejecting hex color {hex_color!r}")
        raise ConversionError(f"Not a 6 digit hex color: {hex_color!r}")

    value = int(digits, 16)
    return Rgb(r=(value >> 16) & 255, g=(value >> 8) & 255, b=value & 255)


def rgb_to_hex_string(r: int, g: int, b: int, prefix: str = "#") -> str:
    for channel in (r, g, b):
        if not 0 <= channel <= 255:
            raise ConversionError(f"RGB channel out of range: {channel}")
    return f"{prefix}{r:02X}{g:02X}{b:02X}"


def hsl_to_hsb(h: float, s: float, l: float) -> Hsb:
    # Saturation and lightness come in as percentages.
    h = h % 360
    s = s / 100
    l = l / 100

    brightness = s * min(l, 1 - l) + l
    saturation = 2 - 2 * l / brightness if brightness != 0 else 0
    return Hsb(h=h, s=saturation, b=brightness)
