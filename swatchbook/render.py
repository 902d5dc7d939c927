"""Grid layout and composition of the swatch image.

Entries are placed row-major in `columns` columns after ordering. Each block:
  - filled with the entry colour
  - a shadow strip (block_height / 20 tall) along the bottom, one step darker
  - the name label fitted to the whole block, nudged up
  - the hex label fitted to a box dropped by block_height / 3.25, nudged up

The canvas starts fully transparent; every block is opaque.
"""

import logging
import math
from collections.abc import Sequence

import numpy as np
from PIL import Image

from swatchbook import registry
from swatchbook.core import config
from swatchbook.core.colour import darken, from_hsl, normalize, parse_hex, to_hex, to_hsl
from swatchbook.core.config import Settings
from swatchbook.core.contrast import pick_label_color
from swatchbook.core.textfit import FontMetrics, draw_run, fit_and_place
from swatchbook.core.types import RGB8, Box, ColorEntry, RenderReport

logger = logging.getLogger(__name__)


def grid_size(count: int, settings: Settings) -> tuple[int, int]:
    """Canvas (width, height) in pixels for count entries."""
    rows = math.ceil(count / settings.columns)
    return settings.columns * settings.block_width, rows * settings.block_height


def _fill(canvas: np.ndarray, box: Box, rgb: RGB8) -> None:
    canvas[box.y : box.y + box.height, box.x : box.x + box.width] = (*rgb, 255)


def draw_swatch(canvas: np.ndarray, entry: ColorEntry, block: Box, font_metrics: FontMetrics) -> dict:
    """Draw one labelled block into the canvas and return its report data."""
    rgb = parse_hex(entry.hex)
    _fill(canvas, block, rgb)

    background = normalize(rgb)
    label = pick_label_color(background)

    shadow_height = block.height // 20
    shadow = from_hsl(darken(to_hsl(background), config.SHADOW_DARKEN))
    _fill(canvas, Box(block.x, block.y + block.height - shadow_height, block.width, shadow_height), shadow)

    hex_box = Box(block.x, block.y + int(block.height / config.HEX_BOX_DROP), block.width, block.height)
    name_run = fit_and_place(entry.name, block, font_metrics, config.NAME_SCALE_DIVISOR, config.NAME_OFFSET)
    hex_run = fit_and_place(entry.hex, hex_box, font_metrics, config.HEX_SCALE_DIVISOR, -(block.height // 20))
    draw_run(canvas, name_run, rgb, label)
    draw_run(canvas, hex_run, rgb, label)

    logger.debug(
        '%s %s: label %s, name scale %.1f, hex scale %.1f',
        entry.name,
        entry.hex,
        to_hex(label),
        name_run.scale,
        hex_run.scale,
    )
    return {
        'label': to_hex(label),
        'shadow': to_hex(shadow),
        'name_scale': round(name_run.scale, 2),
        'hex_scale': round(hex_run.scale, 2),
    }


def render_palette(
    entries: Sequence[ColorEntry],
    font_metrics: FontMetrics,
    settings: Settings | None = None,
    input_path: str = '',
) -> tuple[Image.Image, RenderReport]:
    """Order entries, lay them out on a grid and draw every swatch."""
    settings = settings or Settings()
    seq = registry.get(settings.order)
    ordering = seq.order(entries)

    width, height = grid_size(len(entries), settings)
    canvas = np.zeros((height, width, 4), dtype=np.uint8)

    report = RenderReport(
        input_path=input_path,
        sequencer=seq.name,
        columns=settings.columns,
        image_width=width,
        image_height=height,
        ordering=ordering,
    )

    for position, index in enumerate(ordering):
        row, col = divmod(position, settings.columns)
        block = Box(col * settings.block_width, row * settings.block_height, settings.block_width, settings.block_height)
        data = draw_swatch(canvas, entries[index], block, font_metrics)
        report.add(entries[index], index, row, col, data)

    return Image.fromarray(canvas), report


def save_palette(image: Image.Image, output_path: str, report: RenderReport) -> None:
    image.save(output_path)
    report.output_path = output_path
    logger.info('Saved %d colour blocks to %s', len(report.ordering), output_path)
