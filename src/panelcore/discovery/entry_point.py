"""Class path derivation and import for discovered component files."""

from __future__ import annotations

import importlib
import inspect

from panelcore.discovery.types import DiscoveredFile
from panelcore.errors import (
    ComponentLoadError,
    InvalidTargetError,
    TargetModuleNotFoundError,
    TargetNotFoundError,
)

__all__ = ["derive_class_path", "import_class", "resolve_target", "snake_to_pascal"]


def snake_to_pascal(name: str) -> str:
    """Convert a snake_case string to PascalCase.

    Already capitalised parts keep their inner casing, so ``EditTeam`` stays
    ``EditTeam``.
    """
    if not name:
        return ""
    return "".join(part[:1].upper() + part[1:] for part in name.split("_") if part)


def derive_class_path(namespace: str, discovered: DiscoveredFile, wildcard: str | None = None) -> str:
    """Build the fully qualified class path for a discovered file.

    Every ``*`` in namespace is replaced by wildcard. When namespace has a
    ``*`` but the directory did not, the first segment of the file's relative
    path fills it and is consumed. The class name is the PascalCase file stem.
    """
    relative = discovered.relative_id
    if "*" in namespace:
        if wildcard is None:
            wildcard, _, relative = relative.partition(".")
        namespace = namespace.replace("*", wildcard)

    module_path = ".".join(part for part in (namespace.strip("."), relative) if part)
    return f"{module_path}.{snake_to_pascal(discovered.stem)}"


def import_class(class_path: str) -> type:
    """Import ``package.module.ClassName`` and return the class.

    Raises:
        ComponentLoadError: If the module cannot be imported or does not
            define a class with that name.
    """
    module_path, _, class_name = class_path.rpartition(".")
    if not module_path or not class_name:
        raise ComponentLoadError(class_path=class_path, reason="Not a dotted class path")

    try:
        mod = importlib.import_module(module_path)
    except ImportError as exc:
        raise ComponentLoadError(class_path=class_path, reason=f"Cannot import module: {exc}") from exc

    cls = getattr(mod, class_name, None)
    if cls is None:
        raise ComponentLoadError(
            class_path=class_path,
            reason=f"Class '{class_name}' not found in {module_path}",
        )
    if not inspect.isclass(cls):
        raise ComponentLoadError(class_path=class_path, reason=f"'{class_name}' is not a class")
    return cls


def resolve_target(target_string: str) -> type:
    """Resolve 'module.path:ClassName' to the class it names."""
    if ":" not in target_string:
        raise InvalidTargetError(target=target_string)

    module_path, class_name = target_string.split(":", 1)

    try:
        mod = importlib.import_module(module_path)
    except ImportError as exc:
        raise TargetModuleNotFoundError(module_path=module_path) from exc

    result: object = mod
    for attr in class_name.split("."):
        try:
            result = getattr(result, attr)
        except AttributeError as exc:
            raise TargetNotFoundError(class_name=class_name, module_path=module_path) from exc

    if not inspect.isclass(result):
        raise TargetNotFoundError(class_name=class_name, module_path=module_path)

    return result
