"""swatchbook — render a labelled grid of colour swatches from a named-colour list.

Usage: swatchbook <command> INPUT [options]

Input is a JSON array of {"name": ..., "hex": "#RRGGBB"} objects.
Ordering strategies are auto-discovered from swatchbook/sequencers/.
Each sequencer module's docstring is its documentation.
Run `swatchbook help <sequencer>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, swatchbook looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import logging
import sys

from swatchbook import registry
from swatchbook.core.config import DEFAULT_OUTPUT, Settings
from swatchbook.core.entries import load_entries
from swatchbook.core.env import load_env
from swatchbook.core.errors import SwatchbookError
from swatchbook.core.fonts import load_font
from swatchbook.core.logging_utils import configure_logging
from swatchbook.core.report import format_json, format_text
from swatchbook.core.types import RenderReport
from swatchbook.render import render_palette, save_palette

logger = logging.getLogger('swatchbook.cli')


def _short_doc(name: str) -> str:
    mod = registry.module(name)
    doc = (mod.__doc__ or '').strip()
    return doc.splitlines()[0] if doc else registry.get(name).help


def _build_parser() -> argparse.ArgumentParser:
    sequencers = registry.all_sequencers()

    epilog = (
        'Examples:\n'
        '  swatchbook render colours.json\n'
        '  swatchbook render colours.json -o grid.png --order two-opt --columns 6\n'
        '  swatchbook render colours.json --font JetBrainsMono-Regular.ttf --json\n'
        '  swatchbook order colours.json\n'
        '  swatchbook help nearest\n'
        '\n'
        'Env vars (set in .env or environment):\n'
        '  SWATCHBOOK_COLUMNS, SWATCHBOOK_BLOCK_WIDTH, SWATCHBOOK_BLOCK_HEIGHT\n'
        '  SWATCHBOOK_FONT   path to a TrueType font\n'
        '  SWATCHBOOK_ORDER  default sequencer\n'
        '\n'
        f'Sequencers: {", ".join(sorted(sequencers))}\n'
    )
    parser = argparse.ArgumentParser(
        prog='swatchbook',
        description='Render a labelled grid of colour swatches from a named-colour list.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-v', '--verbose', action='count', default=0, help='Log progress (-vv for per-swatch detail)')
    sub = parser.add_subparsers(dest='command', help='Command to run')

    def add_common(p: argparse.ArgumentParser) -> None:
        p.add_argument('input', help='JSON file with colour entries')
        p.add_argument('--order', default=None, help='Sequencer name (default: nearest or $SWATCHBOOK_ORDER)')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')

    render = sub.add_parser('render', help='Render the swatch grid to an image')
    add_common(render)
    render.add_argument('-o', '--output', default=DEFAULT_OUTPUT, help=f'Output image (default: {DEFAULT_OUTPUT})')
    render.add_argument('-f', '--font', default=None, help='TrueType font for labels (default: $SWATCHBOOK_FONT)')
    render.add_argument('-c', '--columns', type=int, default=None, help='Swatches per row (default: 8)')

    order = sub.add_parser('order', help='Print the swatch ordering without rendering')
    add_common(order)

    # `help` subcommand — prints full module docstring for a sequencer
    help_parser = sub.add_parser('help', help='Print full docs for a sequencer')
    help_parser.add_argument('sequencer', nargs='?', help='Sequencer name')

    return parser


def _print_help(name: str | None) -> None:
    """Print full module docstring for a sequencer."""
    sequencers = registry.all_sequencers()

    if name is None:
        print('Available sequencers:\n')
        for seq_name in sorted(sequencers):
            print(f'  {seq_name:<10} {_short_doc(seq_name)}')
        print('\nRun: swatchbook help <sequencer> for full docs.')
        return

    if name not in sequencers:
        print(f'Unknown sequencer: {name}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(sequencers))}', file=sys.stderr)
        sys.exit(1)

    doc = (registry.module(name).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {name!r})')
        return
    print(doc)


def _settings(args: argparse.Namespace) -> Settings:
    """Environment settings with CLI flags layered on top."""
    settings = Settings.from_env()
    if args.order:
        settings.order = args.order
    if getattr(args, 'font', None):
        settings.font = args.font
    columns = getattr(args, 'columns', None)
    if columns is not None:
        if columns <= 0:
            raise ValueError(f'--columns must be positive, got {columns}')
        settings.columns = columns
    return settings


def _run(args: argparse.Namespace) -> RenderReport:
    settings = _settings(args)
    entries = load_entries(args.input)
    logger.info('Loaded %d colour entries from %s', len(entries), args.input)

    if args.command == 'order':
        seq = registry.get(settings.order)
        return RenderReport(input_path=args.input, sequencer=seq.name, ordering=seq.order(entries))

    font = load_font(settings.font)
    image, report = render_palette(entries, font, settings, input_path=args.input)
    save_palette(image, args.output, report)
    return report


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    configure_logging(logging.WARNING - 10 * min(args.verbose, 2))

    # Load .env before anything else — OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        logger.info('Loaded %s', env_path)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.sequencer)
        return

    try:
        report = _run(args)
    except (SwatchbookError, KeyError, ValueError, OSError) as exc:
        message = exc.args[0] if isinstance(exc, KeyError) else exc
        print(f'swatchbook: error: {message}', file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))


if __name__ == '__main__':
    main()
