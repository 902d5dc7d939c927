"""Pillow-backed font metrics for the text fitter.

Scales are pixel sizes. Pillow fonts are created once per integer size and
cached, so repeated layout calls during the scale search stay cheap.
"""

import logging
import math
import os
from collections.abc import Callable

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from swatchbook.core.types import PositionedGlyph, VMetrics

logger = logging.getLogger(__name__)

# Searched in order when no font is configured
SYSTEM_FONTS = [
    '/usr/share/fonts/truetype/jetbrains-mono/JetBrainsMono-Regular.ttf',
    '/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf',
    '/usr/share/fonts/TTF/DejaVuSansMono.ttf',
    '/Library/Fonts/Menlo.ttc',
    '/System/Library/Fonts/Menlo.ttc',
    'C:\\Windows\\Fonts\\consola.ttf',
]

FontFactory = Callable[[int], ImageFont.FreeTypeFont]


class PillowFontMetrics:
    """FontMetrics implementation over a Pillow FreeType font."""

    def __init__(self, factory: FontFactory, name: str = ''):
        self._factory = factory
        self._fonts: dict[int, ImageFont.FreeTypeFont] = {}
        self.name = name

    def font(self, scale: float) -> ImageFont.FreeTypeFont:
        size = max(1, round(scale))
        if size not in self._fonts:
            self._fonts[size] = self._factory(size)
        return self._fonts[size]

    def v_metrics(self, scale: float) -> VMetrics:
        ascent, descent = self.font(scale).getmetrics()
        return VMetrics(ascent=float(ascent), descent=-float(descent))

    def layout(self, text: str, scale: float, origin: tuple[float, float]) -> list[PositionedGlyph]:
        font = self.font(scale)
        ox, oy = origin
        glyphs = []
        for i, ch in enumerate(text):
            x = ox + font.getlength(text[:i])
            left, top, right, bottom = (int(v) for v in font.getbbox(ch))
            bbox = None
            coverage = None
            if right > left and bottom > top:
                mask = Image.new('L', (right - left, bottom - top), 0)
                ImageDraw.Draw(mask).text((-left, -top), ch, font=font, fill=255)
                cov = np.asarray(mask, dtype=np.float32) / 255.0
                if cov.any():
                    px, py = math.floor(x), math.floor(oy)
                    bbox = (px + left, py + top, px + right, py + bottom)
                    coverage = cov
            glyphs.append(PositionedGlyph(char=ch, x=x, y=oy, bbox=bbox, coverage=coverage))
        return glyphs


def load_font(path: str | None = None) -> PillowFontMetrics:
    """Resolve a font: explicit path, then SWATCHBOOK_FONT, then system fonts, then Pillow's default.

    An explicit path that does not exist raises FileNotFoundError.

    No font ships with swatchbook. Without --font or SWATCHBOOK_FONT the result
    depends on which SYSTEM_FONTS entry the machine has (or Pillow's bundled
    default), so label glyphs and fitted sizes differ between machines. Pin a
    TTF, e.g. SWATCHBOOK_FONT=/path/to/JetBrainsMono-Regular.ttf, for
    reproducible PNGs.
    """
    candidate = path or os.environ.get('SWATCHBOOK_FONT')
    if candidate:
        if not os.path.isfile(candidate):
            raise FileNotFoundError(f'font not found: {candidate}')
        return _truetype(candidate)

    for system_font in SYSTEM_FONTS:
        if os.path.isfile(system_font):
            return _truetype(system_font)

    logger.warning('No TrueType font found; using the Pillow default font')
    return PillowFontMetrics(lambda size: ImageFont.load_default(size=size), name='(pillow default)')


def _truetype(path: str) -> PillowFontMetrics:
    logger.debug('Using font %s', path)
    return PillowFontMetrics(lambda size: ImageFont.truetype(path, size), name=path)
