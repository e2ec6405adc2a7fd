from __future__ import annotations
import importlib
import inspect
import logging
import pkgutil
import warnings
from types import ModuleType
from typing import List, Union

from .registry import Command, CommandRegistry

logger = logging.getLogger(__name__)


def _command_classes(module: ModuleType) -> List[type]:
    found = []
    for _, obj in inspect.getmembers(module, inspect.isclass):
        # only classes defined here, not ones imported from elsewhere
        if obj.__module__ != module.__name__:
            continue
        if issubclass(obj, Command) and obj is not Command and obj.name:
            found.append(obj)
    return found


def discover_commands(registry: CommandRegistry, package: Union[str, ModuleType]) -> List[str]:
    """
    Import every module of `package` and register one instance of each
    concrete Command subclass that sets a `name`.

    Classes must be constructible without arguments. A module that fails to
    import is skipped with a warning; a name clash raises DuplicateNameError
    as any other registration would. Returns the registered names in order.
    """
    pkg = importlib.import_module(package) if isinstance(package, str) else package
    if not hasattr(pkg, '__path__'):
        raise ValueError(f"{pkg.__name__} is a module, not a package")

    registered: List[str] = []
    for modinfo in pkgutil.iter_modules(pkg.__path__, pkg.__name__ + '.'):
        try:
            module = importlib.import_module(modinfo.name)
        except Exception as e:
            warnings.warn(f"Skipping command module '{modinfo.name}': {e}")
            continue
        for cls in _command_classes(module):
            spec = registry.register_command(cls())
            logger.debug("discovered %r in %s", spec.name, modinfo.name)
            registered.append(spec.name)
    return registered
