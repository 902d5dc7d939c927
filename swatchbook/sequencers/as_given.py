"""Keep the input order.

Useful when the entry file is already curated. No colour conversion happens,
so the grid mirrors the file exactly.

Example:
    swatchbook render colours.json --order as-given
"""

from swatchbook.core.types import ColorEntry, Ordering, Sequencer

sequencer = Sequencer(
    name='as-given',
    help='Keep the input file order.',
)


@sequencer.run
def run(entries: list[ColorEntry]) -> Ordering:
    return list(range(len(entries)))
