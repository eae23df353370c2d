"""Colour conversions between hex codes, RGB and the xterm 256-colour palette.

The 256-colour palette is laid out as:

  - 0-15: standard system colours.
  - 16-231: a 6x6x6 RGB cube, index = 16 + 36*r + 6*g + b with r, g, b in 0-5.
  - 232-255: a grayscale ramp from just above black to just below white.

xterm draws the six cube levels at RGB values [0, 95, 135, 175, 215, 255].
An 8-bit channel maps to a level with 0 below 75, else (channel - 35) // 40.
"""

import re

from hex2ansi.core.types import RGB, Conversion, InvalidHexColour

CUBE_LEVELS = (0, 95, 135, 175, 215, 255)
CUBE_START = 16
GRAY_START = 232

# xterm defaults for the 16 system colours
SYSTEM_COLOURS: tuple[RGB, ...] = (
    (0, 0, 0),
    (205, 0, 0),
    (0, 205, 0),
    (205, 205, 0),
    (0, 0, 238),
    (205, 0, 205),
    (0, 205, 205),
    (229, 229, 229),
    (127, 127, 127),
    (255, 0, 0),
    (0, 255, 0),
    (255, 255, 0),
    (92, 92, 255),
    (255, 0, 255),
    (0, 255, 255),
    (255, 255, 255),
)

_HEX_RE = re.compile(r'#?([0-9a-fA-F]{6}|[0-9a-fA-F]{3})')


def hex_to_rgb(hexcode: str) -> RGB:
    """Convert '#rrggbb' (or 'rrggbb', '#rgb') to an (r, g, b) tuple.

    Raises InvalidHexColour for anything else.
    """
    m = _HEX_RE.fullmatch(hexcode.strip())
    if not m:
        raise InvalidHexColour(hexcode)
    digits = m.group(1)
    if len(digits) == 3:
        digits = ''.join(c * 2 for c in digits)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgb_to_hex(rgb: RGB) -> str:
    r, g, b = rgb
    return f'#{r:02x}{g:02x}{b:02x}'


def quantize(channel: int) -> int:
    """Scale an 8-bit channel (0-255) down to a cube level (0-5)."""
    if not 0 <= channel <= 255:
        raise ValueError(f'channel out of range 0-255: {channel}')
    if channel < 75:
        return 0
    return (channel - 35) // 40


def cube_index(r: int, g: int, b: int) -> int:
    """Palette index of the cube cell at levels (r, g, b), each 0-5."""
    return CUBE_START + 36 * r + 6 * g + b


def rgb_to_palette_index(r: int, g: int, b: int) -> int:
    """Nearest 256-colour palette index for an RGB colour."""
    return cube_index(quantize(r), quantize(g), quantize(b))


def palette_index_to_rgb(index: int) -> RGB:
    """RGB value xterm draws for a palette index 0-255."""
    if not 0 <= index <= 255:
        raise ValueError(f'palette index out of range 0-255: {index}')
    if index < CUBE_START:
        return SYSTEM_COLOURS[index]
    if index < GRAY_START:
        r, rem = divmod(index - CUBE_START, 36)
        g, b = divmod(rem, 6)
        return (CUBE_LEVELS[r], CUBE_LEVELS[g], CUBE_LEVELS[b])
    level = 8 + 10 * (index - GRAY_START)
    return (level, level, level)


def convert(hexcode: str) -> Conversion:
    """Parse a hex colour and locate it in the 256-colour palette."""
    rgb = hex_to_rgb(hexcode)
    index = rgb_to_palette_index(*rgb)
    return Conversion(
        hexcode=rgb_to_hex(rgb),
        rgb=rgb,
        index=index,
        palette_rgb=palette_index_to_rgb(index),
    )
