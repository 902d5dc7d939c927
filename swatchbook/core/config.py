"""Tuning tables and render settings.

The contrast and neutral thresholds are empirically tuned. They live here as
plain tables so they can be adjusted without touching the decision logic;
changing any of them changes visible output.

Settings load order (first wins):
  1. Explicit CLI flags.
  2. SWATCHBOOK_* environment variables (including those loaded from .env).
  3. Defaults below.
"""

import os
from dataclasses import dataclass

CONTRAST: dict[str, float] = {
    'label_saturation_factor': 0.5,
    'light_lightness': 0.775,
    'dark_lightness': 0.28,
    'dark_bg_luminance': 0.62,  # visually dark: luminance below this ...
    'dark_bg_chroma': 0.1,  # ... and saturation * lightness above this
}

# Hue bands (degrees, inclusive) where a darkened label stays hard to read on a dark background
LIGHT_HUE_BANDS: tuple[tuple[float, float], ...] = (
    (36.0, 80.0),  # yellow, chartreuse
    (90.0, 185.0),  # greens, teal
    (300.0, 340.0),  # purples, magenta
)

NEUTRAL: dict[str, float] = {
    'max_saturation': 0.05,
    'min_lightness': 0.75,
}

# Text fitting
SCALE_STEP = 0.5
FIT_MARGIN_DIVISOR = 20
MIN_SCALE = 1.0
MAX_FIT_ATTEMPTS = 4096

# Grid layout
BLOCK_WIDTH = 400
BLOCK_HEIGHT = 300
COLUMNS = 8
NAME_SCALE_DIVISOR = 3.5
NAME_OFFSET = -10
HEX_SCALE_DIVISOR = 6.5
HEX_BOX_DROP = 3.25  # hex label box starts block_height / 3.25 below the block top
SHADOW_DARKEN = 0.1

DEFAULT_ORDER = 'nearest'
DEFAULT_OUTPUT = 'palette.png'
TWO_OPT_MAX_PASSES = 8


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f'{name} must be an integer, got {raw!r}') from None
    if value <= 0:
        raise ValueError(f'{name} must be positive, got {value}')
    return value


@dataclass
class Settings:
    """Render settings resolved from the environment and CLI."""

    columns: int = COLUMNS
    block_width: int = BLOCK_WIDTH
    block_height: int = BLOCK_HEIGHT
    font: str | None = None
    order: str = DEFAULT_ORDER

    @classmethod
    def from_env(cls) -> 'Settings':
        return cls(
            columns=_env_int('SWATCHBOOK_COLUMNS', COLUMNS),
            block_width=_env_int('SWATCHBOOK_BLOCK_WIDTH', BLOCK_WIDTH),
            block_height=_env_int('SWATCHBOOK_BLOCK_HEIGHT', BLOCK_HEIGHT),
            font=os.environ.get('SWATCHBOOK_FONT') or None,
            order=os.environ.get('SWATCHBOOK_ORDER') or DEFAULT_ORDER,
        )
