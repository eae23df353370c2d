"""Output modes.

Every .py file in this package that defines a `mode` object is
auto-registered by hex2ansi.registry.discover().
"""
