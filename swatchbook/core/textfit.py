"""Fit a single line of text into a box, centre it, and composite it.

The scale search is linear: start at box.width / divisor and grow the divisor
by SCALE_STEP until the inked width is under box.width - box.width // 20.
Growing the divisor only ever shrinks the text, so the search terminates;
the MIN_SCALE / MAX_FIT_ATTEMPTS guard turns a box that is too small into a
LayoutError instead of a runaway loop.

Two independent single-line fits, nudged up and down with vertical_offset,
give the stacked name-over-hex look of a swatch.
"""

import math
from typing import Protocol

import numpy as np

from swatchbook.core.config import FIT_MARGIN_DIVISOR, MAX_FIT_ATTEMPTS, MIN_SCALE, SCALE_STEP
from swatchbook.core.errors import LayoutError
from swatchbook.core.types import RGB8, Box, GlyphRun, PositionedGlyph, VMetrics


class FontMetrics(Protocol):
    """Read-only font queries needed by the fitter.

    layout() positions glyphs with `origin` as the top-left of the line box
    (the ascender line), so a glyph's bbox y is origin[1] + its offset below
    the ascent.
    """

    def v_metrics(self, scale: float) -> VMetrics: ...

    def layout(self, text: str, scale: float, origin: tuple[float, float]) -> list[PositionedGlyph]: ...


def measure(glyphs: list[PositionedGlyph]) -> int:
    """Inked width from the first glyph's left edge to the last glyph's right edge."""
    min_x = glyphs[0].bbox[0] if glyphs and glyphs[0].bbox else 0
    max_x = glyphs[-1].bbox[2] if glyphs and glyphs[-1].bbox else 0
    return max(max_x - min_x, 1)


def fits(width: int, box: Box) -> bool:
    return width < box.width - box.width // FIT_MARGIN_DIVISOR


def fit_and_place(
    text: str,
    box: Box,
    font_metrics: FontMetrics,
    initial_scale_divisor: float,
    vertical_offset: int,
) -> GlyphRun:
    """Largest scale whose run fits box.width with a 5% margin, centred in the box."""
    divisor = initial_scale_divisor
    for _ in range(MAX_FIT_ATTEMPTS):
        scale = box.width / divisor
        if scale < MIN_SCALE:
            break
        width = measure(font_metrics.layout(text, scale, (0.0, 0.0)))
        if fits(width, box):
            return _place(text, box, font_metrics, scale, width, vertical_offset)
        divisor += SCALE_STEP
    raise LayoutError(text, box.width, box.height)


def _place(text: str, box: Box, font_metrics: FontMetrics, scale: float, width: int, vertical_offset: int) -> GlyphRun:
    v = font_metrics.v_metrics(scale)
    height = math.ceil(v.ascent - v.descent)
    x = box.x + (box.width - width) // 2
    y = box.y + (box.height - height) // 2 + vertical_offset
    return GlyphRun(
        text=text,
        scale=scale,
        origin=(x, y),
        width=width,
        height=height,
        glyphs=font_metrics.layout(text, scale, (float(x), float(y))),
    )


def draw_run(canvas: np.ndarray, run: GlyphRun, base: RGB8, label: RGB8) -> None:
    """Blend the run's coverage into an RGBA uint8 canvas in place.

    out = (1 - coverage) * base + coverage * label, truncated to uint8.
    Pixels outside the canvas are dropped.
    """
    height, width = canvas.shape[:2]
    base_arr = np.asarray(base, dtype=np.float32)
    label_arr = np.asarray(label, dtype=np.float32)

    for glyph in run.glyphs:
        if glyph.bbox is None or glyph.coverage is None:
            continue
        x0, y0, x1, y1 = glyph.bbox
        cx0, cy0 = max(x0, 0), max(y0, 0)
        cx1, cy1 = min(x1, width), min(y1, height)
        if cx0 >= cx1 or cy0 >= cy1:
            continue
        alpha = glyph.coverage[cy0 - y0 : cy1 - y0, cx0 - x0 : cx1 - x0, np.newaxis]
        blended = (1.0 - alpha) * base_arr + alpha * label_arr
        canvas[cy0:cy1, cx0:cx1, :3] = blended.astype(np.uint8)
        canvas[cy0:cy1, cx0:cx1, 3] = 255
