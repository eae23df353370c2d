"""24-bit truecolor escape sequences for a hex colour.

Modern terminals accept RGB directly, bypassing the 256-colour palette.

Example:
    hex2ansi -r '#ff5733'
"""

from hex2ansi.core.palette import convert
from hex2ansi.core.report import format_json, format_rgb_preview
from hex2ansi.core.types import MODE_TRUECOLOR, Config, Mode

mode = Mode(
    name=MODE_TRUECOLOR,
    help='Truecolor (38;2 / 48;2) escape sequences for a hex colour.',
)


@mode.run
def run(config: Config) -> None:
    conversion = convert(config.hexcode)
    if config.json:
        print(format_json(conversion, truecolor=True))
    else:
        print(format_rgb_preview(conversion))
