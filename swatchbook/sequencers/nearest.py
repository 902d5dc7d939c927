"""Greedy nearest-neighbour walk through Oklab, light neutrals last.

Starts at the first entry and repeatedly steps to the closest unvisited
colour (Euclidean distance in Oklab; ties go to the lower index). Then
near-grey entries brighter than 75% lightness are moved to the end, sorted
by lightness, without disturbing the order of anything else.

This is a heuristic for the shortest path through all colours, not an exact
solver. It runs in O(n^2) and can make a few long jumps near the end of the
path once the close neighbours are used up. Use `two-opt` to smooth those out.

Example:
    swatchbook render colours.json --order nearest
"""

from swatchbook.core.sequence import sequence
from swatchbook.core.types import ColorEntry, Ordering, Sequencer

sequencer = Sequencer(
    name='nearest',
    help='Greedy nearest-neighbour walk in Oklab (default). Light neutrals last.',
)


@sequencer.run
def run(entries: list[ColorEntry]) -> Ordering:
    return sequence(entries)
