"""Hex / HSL color helpers.

Colors travel through the engine as ``#rrggbb`` strings because they are
written straight into SVG attributes. Lightness and saturation use the CSS
0-100 scale and hue is expressed in degrees, matching how the palettes were
authored.
"""

import colorsys
import math
from typing import Tuple

from PIL import ImageColor

from slime_sprite.types import HexColor

HSL = Tuple[float, float, float]


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def _channel(value: float) -> int:
    """Scale a 0..1 channel to 0..255, rounding half up."""
    return int(math.floor(255 * _clamp(value, 0.0, 1.0) + 0.5))


def hex_to_rgb(hex_color: HexColor) -> Tuple[int, int, int]:
    """Parse a color string into an ``(r, g, b)`` tuple.

    Raises:
        ValueError: If Pillow cannot interpret ``hex_color``.
    """
    rgb = ImageColor.getrgb(hex_color)
    return rgb[0], rgb[1], rgb[2]


def rgb_to_hex(r: int, g: int, b: int) -> HexColor:
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_hsl(hex_color: HexColor) -> HSL:
    """Convert ``#rrggbb`` to ``(hue 0..360, saturation 0..100, lightness 0..100)``."""
    r, g, b = hex_to_rgb(hex_color)
    h, l, s = colorsys.rgb_to_hls(r / 255.0, g / 255.0, b / 255.0)
    return h * 360.0, s * 100.0, l * 100.0


def hsl_to_hex(h: float, s: float, l: float) -> HexColor:
    """Convert HSL (degrees, percent, percent) back to a lowercase hex string."""
    r, g, b = colorsys.hls_to_rgb(
        (h % 360.0) / 360.0,
        _clamp(l, 0.0, 100.0) / 100.0,
        _clamp(s, 0.0, 100.0) / 100.0,
    )
    return rgb_to_hex(_channel(r), _channel(g), _channel(b))


def lighten(hex_color: HexColor, percent: float) -> HexColor:
    """Raise lightness by ``percent`` points (capped at 100)."""
    h, s, l = hex_to_hsl(hex_color)
    return hsl_to_hex(h, s, min(100.0, l + percent))


def darken(hex_color: HexColor, percent: float) -> HexColor:
    """Lower lightness by ``percent`` points (floored at 0)."""
    h, s, l = hex_to_hsl(hex_color)
    return hsl_to_hex(h, s, max(0.0, l - percent))


def shift_color(
    hex_color: HexColor,
    hue_shift: float,
    light_shift: float,
    min_lightness: float = 5.0,
    max_lightness: float = 95.0,
) -> HexColor:
    """Rotate hue and offset lightness, keeping saturation.

    Lightness is clamped to ``[min_lightness, max_lightness]`` so derived
    palettes never collapse to pure black or white.
    """
    h, s, l = hex_to_hsl(hex_color)
    return hsl_to_hex(
        (h + hue_shift + 360.0) % 360.0,
        s,
        _clamp(l + light_shift, min_lightness, max_lightness),
    )
