"""Shared types for swatchbook: ColorEntry, HSL, Box, glyph runs, Sequencer, RenderReport."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, NamedTuple

import numpy as np

RGB8 = tuple[int, int, int]
NormalizedRGB = tuple[float, float, float]
PerceptualCoordinate = tuple[float, float, float]  # Oklab (L, a, b)
Ordering = list[int]


@dataclass(frozen=True)
class ColorEntry:
    """One named colour from the input list."""

    name: str
    hex: str


class HSL(NamedTuple):
    hue: float  # degrees, [0, 360)
    saturation: float
    lightness: float


@dataclass(frozen=True)
class Box:
    """Target rectangle in canvas pixels."""

    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True)
class VMetrics:
    """Vertical font metrics at one scale. Descent is negative (below baseline)."""

    ascent: float
    descent: float


@dataclass
class PositionedGlyph:
    """One glyph laid out at an absolute position.

    bbox is the inked pixel box (x0, y0, x1, y1), or None for blank glyphs.
    coverage has shape (y1 - y0, x1 - x0) with values in [0, 1].
    """

    char: str
    x: float
    y: float
    bbox: tuple[int, int, int, int] | None = None
    coverage: np.ndarray | None = None


@dataclass
class GlyphRun:
    """A text run fitted to a box and positioned, ready for compositing."""

    text: str
    scale: float
    origin: tuple[int, int]
    width: int  # measured inked width
    height: int  # ceil(ascent - descent)
    glyphs: list[PositionedGlyph] = field(default_factory=list)


class Sequencer:
    """A self-registering ordering strategy.

    Usage in a sequencer module:

        sequencer = Sequencer(name='nearest', help='Greedy nearest-neighbour in Oklab')

        @sequencer.run
        def run(entries):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the ordering function."""
        self._run_fn = fn
        return fn

    def order(self, entries: Sequence[ColorEntry]) -> Ordering:
        """Return the visiting order for entries."""
        if self._run_fn is None:
            raise RuntimeError(f'Sequencer {self.name} has no run function')
        return self._run_fn(entries)


@dataclass
class RenderReport:
    """Accumulates per-swatch results for text/JSON output."""

    input_path: str = ''
    output_path: str | None = None
    sequencer: str = ''
    columns: int = 0
    image_width: int = 0
    image_height: int = 0
    ordering: Ordering = field(default_factory=list)
    swatches: list[dict[str, Any]] = field(default_factory=list)

    def add(self, entry: ColorEntry, index: int, row: int, col: int, data: dict[str, Any]) -> None:
        """Record the rendering result for one swatch."""
        self.swatches.append({'name': entry.name, 'hex': entry.hex, 'index': index, 'row': row, 'col': col, **data})
