"""hex2ansi — Convert hex colour codes to 256 ANSI colour codes.

Usage: hex2ansi [hexcode] [-r hexcode] [-t] [-h]

The 256-colour palette has 16 system colours (0-15), a 6x6x6 RGB cube
(16-231) and a 24-step grayscale ramp (232-255). A hex colour is mapped to
the nearest cube cell. Modern terminals also accept 24-bit RGB directly;
-r prints those sequences instead.

Exactly one output mode runs per invocation: -t wins over -r, which wins
over a plain hexcode. Without any of them the usage text is printed.
"""

import argparse
import sys

from hex2ansi import registry
from hex2ansi.core.types import MODE_GRID, MODE_PALETTE, MODE_TRUECOLOR, MODE_USAGE, Config, InvalidHexColour


class _UsageParser(argparse.ArgumentParser):
    """Unknown flags print the usage text and exit 0, like `-h`."""

    def error(self, message: str) -> None:
        self.print_help()
        self.exit(0)


def _mode_listing() -> str:
    """One line per output mode, from each mode's help text."""
    lines = ['Modes:']
    for name, mode in sorted(registry.all_modes().items()):
        lines.append(f'  {name:<10} {mode.help}')
    return '\n'.join(lines) + '\n'


def _build_parser() -> argparse.ArgumentParser:
    epilog = _mode_listing() + (
        '\n'
        'Examples:\n'
        "  hex2ansi '#ff5733'\n"
        "  hex2ansi -r '#ff5733'\n"
        "  hex2ansi '#ff5733' --json\n"
        '  hex2ansi -t\n'
        '  hex2ansi -t --output ./tmp/cube.png\n'
    )
    parser = _UsageParser(
        prog='hex2ansi',
        description='Converts hex color codes to 256 ANSI color codes.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument('hexcode', nargs='?', help='Hex colour, e.g. #ff5733')
    parser.add_argument('-r', '--rgb', metavar='HEXCODE', help='Print 24-bit truecolor escape sequences instead')
    parser.add_argument('-t', '--table', action='store_true', help='Print the 216-colour palette cube')
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
    parser.add_argument('-o', '--output', metavar='PATH', help='With -t, also save the cube as a PNG swatch')
    return parser


def parse_config(argv: list[str] | None = None) -> Config:
    """Decide the single output mode from the command line."""
    args = _build_parser().parse_args(argv)
    config = Config(json=args.json, output=args.output)
    if args.table:
        config.mode = MODE_GRID
    elif args.rgb is not None:
        config.mode = MODE_TRUECOLOR
        config.hexcode = args.rgb
    elif args.hexcode is not None:
        config.mode = MODE_PALETTE
        config.hexcode = args.hexcode
    return config


def _warn_unused(config: Config) -> None:
    """Report options the selected mode does not use."""
    if config.output and config.mode != MODE_GRID:
        print('hex2ansi: --output only applies to -t', file=sys.stderr)
    if config.json and config.mode == MODE_GRID:
        print('hex2ansi: --json does not apply to -t', file=sys.stderr)


def main(argv: list[str] | None = None) -> None:
    config = parse_config(argv)

    if config.mode == MODE_USAGE:
        _build_parser().print_help()
        return

    _warn_unused(config)

    try:
        registry.get(config.mode).execute(config)
    except InvalidHexColour as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
