"""pixel-codec — Decode learner-typed binary/hex digits into an 8x8 picture.

Usage: pixel-codec <view> <out_dir> <source> [options]

<source> is a text file of learner input, or - for stdin. Text after //
on a line is a comment; whitespace is ignored.

Views are auto-discovered from pixel_codec/views/.
Each view module's docstring is its documentation.
Run `pixel-codec help <view>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, pixel-codec looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import os
import sys

from pixel_codec import registry
from pixel_codec.core.env import load_env, load_settings
from pixel_codec.core.exhibit import build_exhibit
from pixel_codec.core.levels import LEVELS, NUM_LEVELS, SUPPORTED_BPP, custom_level, get_level
from pixel_codec.core.report import format_json, format_text
from pixel_codec.core.types import EditMode, Level, Report


def _load_view_module(name: str) -> object:
    """Load the raw module for a view (for docstring access)."""
    return importlib.import_module(f'pixel_codec.views.{name}')


def _short_doc(name: str, fallback: str) -> str:
    doc = (_load_view_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    views = registry.all_views()

    epilog = (
        'Examples:\n'
        '  pixel-codec all ./out drawing.txt --level 2\n'
        '  pixel-codec pixels ./out drawing.txt --level 3 --json\n'
        '  pixel-codec hexview ./out drawing.txt --level 4\n'
        '  pixel-codec render ./out masterpiece.txt --level 5 --pixel-size 16\n'
        '  pixel-codec render ./out drawing.txt --bpp 6 --edit binary\n'
        '  echo "00FF00 // green" | pixel-codec pixels ./out - --level 5\n'
        '  pixel-codec levels\n'
        '  pixel-codec help census\n'
        '\n'
        'Settings (set in .env or environment):\n'
        '  PIXEL_CODEC_LEVEL       default level number (1-5)\n'
        '  PIXEL_CODEC_PIXEL_SIZE  rendered pixel size in px (default 32)\n'
    )
    parser = argparse.ArgumentParser(
        prog='pixel-codec',
        description='Decode binary/hex digits typed by a learner into an 8x8 picture.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='view', help='View to run')

    for name, view in sorted(views.items()):
        p = sub.add_parser(name, help=_short_doc(name, view.help))
        p.add_argument('out_dir', help='Working directory for artefacts')
        p.add_argument('source', help='Learner text file, or - for stdin')
        p.add_argument('-l', '--level', type=int, default=None, help=f'Level number 1-{NUM_LEVELS}')
        p.add_argument(
            '-b',
            '--bpp',
            type=int,
            choices=SUPPORTED_BPP,
            default=None,
            help='Bits per pixel for a custom level (overrides --level)',
        )
        p.add_argument(
            '-e',
            '--edit',
            choices=[m.value for m in EditMode],
            default=None,
            help='Digit alphabet for a custom level, only with --bpp (default: binary)',
        )
        p.add_argument('-s', '--pixel-size', type=int, default=None, help='Rendered pixel size in px')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')

    help_parser = sub.add_parser('help', help='Print full docs for a view')
    help_parser.add_argument('command', nargs='?', help='View name')

    sub.add_parser('levels', help='List the levels of the exercise')

    return parser


def _print_help(command: str | None) -> None:
    """Print full module docstring for a view."""
    views = registry.all_views()

    if command is None:
        print('Available views:\n')
        for name, view in sorted(views.items()):
            print(f'  {name:<10} {_short_doc(name, view.help)}')
        print('\nRun: pixel-codec help <view> for full docs.')
        return

    if command not in views:
        print(f'Unknown view: {command}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(views))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_view_module(command).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {command!r})')
        return
    print(doc)


def _print_levels() -> None:
    for level in LEVELS:
        print(f'{level.number}: {level.title}  ({level.bpp} bpp, {level.edit.value})')
        for line in level.instructions.splitlines():
            print(f'    {line}')
        print()


def _read_source(source: str) -> str:
    if source == '-':
        return sys.stdin.read()
    # utf-8-sig drops a leading byte-order mark left by Windows editors
    with open(source, encoding='utf-8-sig') as f:
        return f.read()


def _resolve_level(args: argparse.Namespace, default_number: int) -> Level:
    """Custom level from --bpp, else the catalog level from --level or settings."""
    if args.bpp is not None:
        return custom_level(args.bpp, args.edit or EditMode.BINARY)
    if args.edit is not None:
        raise ValueError('--edit only applies to a custom level; give --bpp as well')
    number = args.level if args.level is not None else default_number
    if not 1 <= number <= NUM_LEVELS:
        raise KeyError(f'Unknown level: {number}. Valid: 1-{NUM_LEVELS}')
    return get_level(number - 1)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else; OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path:
        print(f'pixel-codec: loaded {env_path}', file=sys.stderr)

    if not args.view:
        parser.print_help()
        sys.exit(1)

    if args.view == 'help':
        _print_help(getattr(args, 'command', None))
        return

    if args.view == 'levels':
        _print_levels()
        return

    if args.source != '-' and not os.path.isfile(args.source):
        print(f'Error: source not found: {args.source}', file=sys.stderr)
        sys.exit(1)

    settings = load_settings()
    if args.pixel_size is None:
        args.pixel_size = settings.pixel_size

    try:
        level = _resolve_level(args, settings.level)
    except (KeyError, ValueError) as exc:
        print(f'Error: {exc.args[0]}', file=sys.stderr)
        sys.exit(1)

    try:
        text = _read_source(args.source)
    except (OSError, UnicodeDecodeError) as exc:
        print(f'Error: cannot read {args.source}: {exc}', file=sys.stderr)
        sys.exit(1)

    exhibit = build_exhibit(level, text)
    report = Report(source_path='' if args.source == '-' else args.source, level=level)

    view = registry.get(args.view)
    view.execute(exhibit, report, args)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))

    # Render failures are recorded, not raised; exit non-zero after output
    if report.errors:
        for error in report.errors:
            print(f'Error: {error}', file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
