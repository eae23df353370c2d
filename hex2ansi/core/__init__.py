"""hex2ansi.core — Foundation layer.

Contains the colour conversions, type definitions, text/JSON formatting and
the swatch image renderer. This module has NO dependencies on hex2ansi.modes
or hex2ansi.registry. Only stdlib, numpy, and PIL are allowed here.
"""
