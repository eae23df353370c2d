"""Output mode auto-discovery and registration.

Scans hex2ansi/modes/ for modules that define a `mode` object of type Mode.
Collects them into a dict keyed by name.
"""

import importlib
import pkgutil

from hex2ansi.core.types import Mode

_registry: dict[str, Mode] = {}


def discover() -> dict[str, Mode]:
    """Import all mode modules and return the registry."""
    if _registry:
        return _registry

    import hex2ansi.modes as pkg

    for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__):
        if modname.startswith('_'):
            continue
        module = importlib.import_module(f'hex2ansi.modes.{modname}')
        mode = getattr(module, 'mode', None)
        if isinstance(mode, Mode):
            _registry[mode.name] = mode

    return _registry


def get(name: str) -> Mode:
    """Get a mode by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown mode: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_modes() -> dict[str, Mode]:
    """Return all registered modes."""
    return discover()
