"""Label colour selection for legible text on an arbitrary swatch.

The label is a desaturated tint of the background's own hue, either lightened
or darkened. Plain luminance distance picks the wrong side for some saturated
hues (yellows, greens, purples) that read as dark by the luminance formula
but still swallow a darkened label, so those hue bands force the light tint
on visually dark backgrounds.
"""

from collections.abc import Mapping

from swatchbook.core.colour import from_hsl, luminance, to_hsl
from swatchbook.core.config import CONTRAST, LIGHT_HUE_BANDS
from swatchbook.core.types import HSL, RGB8, NormalizedRGB


def label_candidates(background: NormalizedRGB, thresholds: Mapping[str, float] = CONTRAST) -> tuple[HSL, HSL]:
    """Return (lightened, darkened) label tints for a background."""
    bg = to_hsl(background)
    tint = bg._replace(saturation=bg.saturation * thresholds['label_saturation_factor'])
    return (
        tint._replace(lightness=thresholds['light_lightness']),
        tint._replace(lightness=thresholds['dark_lightness']),
    )


def is_visually_dark(hsl: HSL, thresholds: Mapping[str, float] = CONTRAST) -> bool:
    dark = luminance(hsl) < thresholds['dark_bg_luminance']
    return dark and hsl.saturation * hsl.lightness > thresholds['dark_bg_chroma']


def hue_prefers_light(hue: float, bands: tuple[tuple[float, float], ...] = LIGHT_HUE_BANDS) -> bool:
    return any(lo <= hue <= hi for lo, hi in bands)


def pick_label_color(
    background: NormalizedRGB,
    thresholds: Mapping[str, float] = CONTRAST,
    bands: tuple[tuple[float, float], ...] = LIGHT_HUE_BANDS,
) -> RGB8:
    bg = to_hsl(background)
    lightened, darkened = label_candidates(background, thresholds)

    if is_visually_dark(bg, thresholds) and hue_prefers_light(bg.hue, bands):
        return from_hsl(lightened)

    l_bg = luminance(bg)
    if abs(luminance(lightened) - l_bg) > abs(luminance(darkened) - l_bg):
        return from_hsl(lightened)
    return from_hsl(darkened)
