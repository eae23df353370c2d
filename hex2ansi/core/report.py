"""Report builder — text and JSON output for hex2ansi results."""

import json
from typing import Any

from hex2ansi.core.palette import cube_index
from hex2ansi.core.types import Conversion

ESC = '\x1b'
RESET = f'{ESC}[0m'

# Printed in place of ESC so the sequence can be copied into a shell script
ESC_LITERAL = '\\e'

SAMPLE_TEXT = 'Example text'
SAMPLE_BLOCK = ' ' * 12
GRID_BLOCK = ' ' * 4


def fg_256(index: int, esc: str = ESC) -> str:
    return f'{esc}[38;5;{index}m'


def bg_256(index: int, esc: str = ESC) -> str:
    return f'{esc}[48;5;{index}m'


def fg_rgb(r: int, g: int, b: int, esc: str = ESC) -> str:
    return f'{esc}[38;2;{r};{g};{b}m'


def bg_rgb(r: int, g: int, b: int, esc: str = ESC) -> str:
    return f'{esc}[48;2;{r};{g};{b}m'


def _preview(fg: str, bg: str) -> list[str]:
    return [f'{fg}{SAMPLE_TEXT}{RESET}', f'{bg}{SAMPLE_BLOCK}{RESET}']


def format_ansi_preview(conversion: Conversion) -> str:
    """Format the 256-colour escape codes for a conversion, with a sample."""
    index = conversion.index
    lines = [
        f'Hex code: {conversion.hexcode}',
        f'256 ANSI code: {index}',
        f'To set as foreground color: {fg_256(index, ESC_LITERAL)}',
        f'To set as background color: {bg_256(index, ESC_LITERAL)}',
    ]
    lines.extend(_preview(fg_256(index), bg_256(index)))
    return '\n'.join(lines)


def format_rgb_preview(conversion: Conversion) -> str:
    """Format the 24-bit truecolor escape codes for a conversion, with a sample."""
    r, g, b = conversion.rgb
    lines = [
        f'Hex code: {conversion.hexcode}',
        f'RGB code: {r} {g} {b}',
        f'To set as foreground color: {fg_rgb(r, g, b, ESC_LITERAL)}',
        f'To set as background color: {bg_rgb(r, g, b, ESC_LITERAL)}',
    ]
    lines.extend(_preview(fg_rgb(r, g, b), bg_rgb(r, g, b)))
    return '\n'.join(lines)


def render_palette_grid() -> str:
    """One background-coloured block per cube cell, r-major, no separators."""
    blocks = []
    for r in range(6):
        for g in range(6):
            for b in range(6):
                blocks.append(f'{bg_256(cube_index(r, g, b))}{GRID_BLOCK}{RESET}')
    return ''.join(blocks)


def format_json(conversion: Conversion, truecolor: bool = False) -> str:
    """Format a conversion as JSON."""
    if truecolor:
        fg, bg = fg_rgb(*conversion.rgb), bg_rgb(*conversion.rgb)
    else:
        fg, bg = fg_256(conversion.index), bg_256(conversion.index)
    obj: dict[str, Any] = {
        'hex': conversion.hexcode,
        'rgb': list(conversion.rgb),
        'ansi256': conversion.index,
        'palette_rgb': list(conversion.palette_rgb),
        'foreground': fg,
        'background': bg,
    }
    return json.dumps(obj, indent=2)
