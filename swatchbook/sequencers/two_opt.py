"""Nearest-neighbour walk refined by 2-opt segment reversal.

Builds the same greedy path as `nearest`, then repeatedly reverses any
segment whose reversal shortens the total Oklab path length. The first entry
stays first. Each pass is O(n^2) and passes are capped (TWO_OPT_MAX_PASSES),
so the worst case stays bounded and the output is deterministic.

The light-neutral settling pass runs last, exactly as in `nearest`.

Example:
    swatchbook render colours.json --order two-opt
"""

from swatchbook.core.config import TWO_OPT_MAX_PASSES
from swatchbook.core.sequence import nearest_neighbour_path, perceptual_coordinates, settle_light_neutrals, two_opt
from swatchbook.core.types import ColorEntry, Ordering, Sequencer

sequencer = Sequencer(
    name='two-opt',
    help='Nearest-neighbour walk plus bounded 2-opt refinement. Light neutrals last.',
)


@sequencer.run
def run(entries: list[ColorEntry]) -> Ordering:
    coords = perceptual_coordinates(entries)
    path = two_opt(nearest_neighbour_path(coords), coords, TWO_OPT_MAX_PASSES)
    return settle_light_neutrals(path, entries)
