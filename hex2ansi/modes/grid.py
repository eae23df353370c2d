"""Print the 216-colour RGB cube (palette indices 16-231) as coloured blocks.

With --output, also saves the cube as a PNG swatch.

Example:
    hex2ansi -t
    hex2ansi -t --output ./tmp/cube.png
"""

import sys

from hex2ansi.core.report import render_palette_grid
from hex2ansi.core.swatch import save_cube_png
from hex2ansi.core.types import MODE_GRID, Config, Mode

mode = Mode(
    name=MODE_GRID,
    help='Print every colour of the 6x6x6 palette cube.',
)


@mode.run
def run(config: Config) -> None:
    print(render_palette_grid())
    if config.output:
        path = save_cube_png(config.output)
        print(f'hex2ansi: wrote {path}', file=sys.stderr)
