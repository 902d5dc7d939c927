"""Sequencer lookup by name.

Each module in swatchbook/sequencers/ exposes one `sequencer` object. The
registry maps `sequencer.name` (e.g. 'two-opt') to that object and keeps the
defining module alongside it, because `swatchbook help <name>` prints the
module docstring and names need not match module names.

pkgutil finds nothing inside a frozen build; the explicit imports in
sequencers/__init__.py put the modules in sys.modules, so they are picked up
from there instead.
"""

import importlib
import pkgutil
import sys
from types import ModuleType

from swatchbook.core.types import Sequencer

_PACKAGE = 'swatchbook.sequencers'

_registry: dict[str, Sequencer] = {}
_modules: dict[str, ModuleType] = {}


def _sequencer_module_names() -> list[str]:
    import swatchbook.sequencers as pkg

    names = [name for _finder, name, _ispkg in pkgutil.iter_modules(pkg.__path__) if not name.startswith('_')]
    if names:
        return names
    prefix = f'{_PACKAGE}.'
    return sorted(key[len(prefix) :] for key in sys.modules if key.startswith(prefix))


def discover() -> dict[str, Sequencer]:
    """Import every sequencer module once and return the name -> Sequencer map."""
    if _registry:
        return _registry

    for modname in _sequencer_module_names():
        module = importlib.import_module(f'{_PACKAGE}.{modname}')
        seq = getattr(module, 'sequencer', None)
        if not isinstance(seq, Sequencer):
            continue
        if seq.name in _registry:
            raise RuntimeError(f'Duplicate sequencer name {seq.name!r} in {module.__name__}')
        _registry[seq.name] = seq
        _modules[seq.name] = module

    return _registry


def get(name: str) -> Sequencer:
    """Get a sequencer by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown sequencer: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def module(name: str) -> ModuleType:
    """Module defining the named sequencer (its docstring is the sequencer's documentation)."""
    get(name)
    return _modules[name]


def all_sequencers() -> dict[str, Sequencer]:
    """Return all registered sequencers."""
    return discover()
