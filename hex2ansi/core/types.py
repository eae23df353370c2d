"""Shared types for hex2ansi: Conversion, Config, Mode, InvalidHexColour."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

RGB = tuple[int, int, int]

MODE_PALETTE = 'palette'
MODE_TRUECOLOR = 'truecolor'
MODE_GRID = 'grid'
MODE_USAGE = 'usage'


class InvalidHexColour(ValueError):
    """Raised when a string is not a #rrggbb (or #rgb) hex colour."""

    def __init__(self, text: str):
        super().__init__(f'invalid hex colour: {text!r}')
        self.text = text


@dataclass(frozen=True)
class Conversion:
    """A hex colour and its position in the 256-colour palette."""

    hexcode: str  # canonical lower-case #rrggbb
    rgb: RGB
    index: int  # 256-colour palette index
    palette_rgb: RGB  # what the terminal draws for index


@dataclass
class Config:
    """Command-line settings, decided once before any output."""

    mode: str = MODE_USAGE
    hexcode: str | None = None
    json: bool = False
    output: str | None = None  # PNG path for the grid swatch


class Mode:
    """A self-registering output mode.

    Usage in a mode module:

        mode = Mode(name='grid', help='Print the 216-colour cube')

        @mode.run
        def run(config):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, config: Config) -> None:
        """Execute the mode's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Mode {self.name} has no run function')
        self._run_fn(config)
