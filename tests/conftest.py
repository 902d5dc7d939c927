"""Shared fixtures: a synthetic monospace font so fitting tests need no font files."""

import json
import math
from pathlib import Path

import numpy as np
import pytest
from swatchbook.core.types import PositionedGlyph, VMetrics


class MonoMetrics:
    """Every glyph advances 0.6*scale and inks a 0.5*scale x 0.7*scale solid block. Spaces ink nothing."""

    def v_metrics(self, scale: float) -> VMetrics:
        return VMetrics(ascent=0.8 * scale, descent=-0.2 * scale)

    def layout(self, text: str, scale: float, origin: tuple[float, float]) -> list[PositionedGlyph]:
        ox, oy = origin
        glyphs = []
        for i, ch in enumerate(text):
            x = ox + i * 0.6 * scale
            if ch.isspace():
                glyphs.append(PositionedGlyph(char=ch, x=x, y=oy))
                continue
            w = max(1, math.ceil(0.5 * scale))
            h = max(1, math.ceil(0.7 * scale))
            x0, y0 = math.floor(x), math.floor(oy + 0.1 * scale)
            glyphs.append(
                PositionedGlyph(
                    char=ch,
                    x=x,
                    y=oy,
                    bbox=(x0, y0, x0 + w, y0 + h),
                    coverage=np.ones((h, w), dtype=np.float32),
                )
            )
        return glyphs


@pytest.fixture
def mono() -> MonoMetrics:
    return MonoMetrics()


@pytest.fixture
def rgb_entries_file(tmp_path: Path) -> Path:
    path = tmp_path / 'colours.json'
    path.write_text(
        json.dumps(
            [
                {'name': 'Red', 'hex': '#FF0000'},
                {'name': 'Green', 'hex': '#00FF00'},
                {'name': 'Blue', 'hex': '#0000FF'},
            ]
        )
    )
    return path
