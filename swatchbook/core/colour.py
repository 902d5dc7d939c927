"""Colour-space model: hex sRGB8, normalized sRGB, HSL, Oklab and luminance.

All functions are pure. Only the conversions swatchbook actually needs are
here; this is not a general colour-science module.
"""

import colorsys
import math

from swatchbook.core.errors import ParseError
from swatchbook.core.types import HSL, RGB8, NormalizedRGB, PerceptualCoordinate

_HEX_DIGITS = frozenset('0123456789abcdefABCDEF')


def parse_hex(code: str) -> RGB8:
    """Parse '#RRGGBB' or 'RRGGBB'. Anything after the sixth digit is ignored."""
    digits = code[1:] if code.startswith('#') else code
    if len(digits) < 6:
        raise ParseError(code, 'expected 6 hex digits')
    channels = []
    for start in (0, 2, 4):
        pair = digits[start : start + 2]
        if not set(pair) <= _HEX_DIGITS:
            raise ParseError(code, f'{pair!r} is not a hex byte')
        channels.append(int(pair, 16))
    return channels[0], channels[1], channels[2]


def to_hex(rgb: RGB8) -> str:
    r, g, b = rgb
    return f'#{r:02X}{g:02X}{b:02X}'


def normalize(rgb: RGB8) -> NormalizedRGB:
    r, g, b = rgb
    return r / 255.0, g / 255.0, b / 255.0


def to_rgb8(rgb: NormalizedRGB) -> RGB8:
    """Quantize normalized channels to 8 bits, rounding and clamping."""
    r, g, b = (min(255, max(0, round(c * 255.0))) for c in rgb)
    return r, g, b


def to_hsl(rgb: NormalizedRGB) -> HSL:
    """Normalized sRGB to HSL with hue in degrees, wrapped into [0, 360)."""
    h, l, s = colorsys.rgb_to_hls(*rgb)
    return HSL(wrap_hue(h * 360.0), s, l)


def wrap_hue(hue: float) -> float:
    hue = hue % 360.0
    # -1e-17 % 360 rounds to 360.0
    return 0.0 if hue >= 360.0 else hue


def hsl_to_normalized(hsl: HSL) -> NormalizedRGB:
    return colorsys.hls_to_rgb(wrap_hue(hsl.hue) / 360.0, hsl.lightness, hsl.saturation)


def from_hsl(hsl: HSL) -> RGB8:
    return to_rgb8(hsl_to_normalized(hsl))


def luminance(hsl: HSL) -> float:
    """Weighted brightness estimate (Rec. 601 weights) of an HSL colour."""
    r, g, b = hsl_to_normalized(hsl)
    return 0.299 * r + 0.587 * g + 0.114 * b


def darken(hsl: HSL, amount: float) -> HSL:
    return hsl._replace(lightness=max(hsl.lightness - amount, 0.0))


def _srgb_to_linear(c: float) -> float:
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def to_perceptual(rgb: RGB8) -> PerceptualCoordinate:
    """8-bit sRGB to Oklab (L, a, b)."""
    r, g, b = (_srgb_to_linear(c) for c in normalize(rgb))

    l = 0.4122214708 * r + 0.5363325363 * g + 0.0514459929 * b
    m = 0.2119034982 * r + 0.6806995451 * g + 0.1073969566 * b
    s = 0.0883024619 * r + 0.2817188376 * g + 0.6299787005 * b

    l_, m_, s_ = (math.copysign(abs(v) ** (1 / 3), v) for v in (l, m, s))

    return (
        0.2104542553 * l_ + 0.7936177850 * m_ - 0.0040720468 * s_,
        1.9779984951 * l_ - 2.4285922050 * m_ + 0.4505937099 * s_,
        0.0259040371 * l_ + 0.7827717662 * m_ - 0.8086757660 * s_,
    )


def perceptual_distance(a: PerceptualCoordinate, b: PerceptualCoordinate) -> float:
    return math.dist(a, b)
