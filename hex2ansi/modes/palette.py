"""Nearest 256-colour palette code for a hex colour.

Each channel is scaled to a cube level (0 below 75, else (c - 35) // 40)
and combined as 16 + 36*r + 6*g + b. Prints the code, the foreground and
background escape sequences, and a coloured sample.

Example:
    hex2ansi '#ff5733'
    hex2ansi '#ff5733' --json
"""

from hex2ansi.core.palette import convert
from hex2ansi.core.report import format_ansi_preview, format_json
from hex2ansi.core.types import MODE_PALETTE, Config, Mode

mode = Mode(
    name=MODE_PALETTE,
    help='Nearest 256-colour palette code and escape sequences for a hex colour.',
)


@mode.run
def run(config: Config) -> None:
    conversion = convert(config.hexcode)
    if config.json:
        print(format_json(conversion))
    else:
        print(format_ansi_preview(conversion))
