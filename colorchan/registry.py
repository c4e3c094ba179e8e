"""Model auto-discovery and registration.

Scans colorchan/models/ for modules that define a `model` object of type
ModelSpec. Collects them into a dict keyed by name; aliases resolve to the
same spec.

Falls back to an explicit module list when pkgutil.iter_modules finds
nothing (zipapps and frozen binaries).
"""

import importlib
import logging
import pkgutil

from colorchan.core.types import ModelSpec

logger = logging.getLogger(__name__)

_registry: dict[str, ModelSpec] = {}
_aliases: dict[str, str] = {}

# Known model module names, used when pkgutil cannot list the package
_MODEL_MODULES = [
    'bt2020',
    'bt601',
    'bt709',
    'smpte240m',
]


def discover() -> dict[str, ModelSpec]:
    """Import all model modules and return the registry."""
    if _registry:
        return _registry

    import colorchan.models as pkg

    found_modules = [
        modname for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__) if not modname.startswith('_')
    ]
    if not found_modules:
        found_modules = _MODEL_MODULES

    for modname in found_modules:
        module = importlib.import_module(f'colorchan.models.{modname}')
        spec = getattr(module, 'model', None)
        if isinstance(spec, ModelSpec):
            _registry[spec.name] = spec
            for alias in spec.aliases:
                _aliases[alias] = spec.name
            logger.debug('Registered model %s from colorchan.models.%s', spec.name, modname)

    return _registry


def get(name: str) -> ModelSpec:
    """Get a model spec by name or alias (case-insensitive)."""
    reg = discover()
    key = name.strip().lower()
    key = _aliases.get(key, key)
    if key not in reg:
        raise KeyError(f'Unknown model: {name}. Available: {", ".join(sorted(reg))}')
    return reg[key]


def all_models() -> dict[str, ModelSpec]:
    """Return all registered model specs."""
    return discover()
