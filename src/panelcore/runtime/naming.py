"""Deterministic component names for view component classes."""

from __future__ import annotations

import re

__all__ = ["ComponentRegistry", "class_path", "kebab_case"]

_CASE_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def kebab_case(segment: str) -> str:
    """Convert a PascalCase, camelCase or snake_case segment to kebab-case."""
    if not segment:
        return ""
    return _CASE_BOUNDARY.sub("-", segment).replace("_", "-").lower()


def class_path(cls: type) -> str:
    """Return the dotted ``module.QualName`` path of a class."""
    return f"{cls.__module__}.{cls.__qualname__}"


class ComponentRegistry:
    """Generates the runtime name under which a component class is bound.

    An explicit ``component_name`` class attribute always wins. Otherwise the
    name is the class path with ``class_namespace`` stripped from the front
    and every segment kebab-cased::

        registry = ComponentRegistry("app.admin")
        registry.get_name(EditTeam)  # app.admin.pages.EditTeam -> "pages.edit-team"
    """

    def __init__(self, class_namespace: str = "") -> None:
        self._class_namespace = class_namespace.strip(".")

    @property
    def class_namespace(self) -> str:
        return self._class_namespace

    def get_name(self, component: type) -> str:
        explicit = getattr(component, "component_name", None)
        if explicit:
            return explicit
        return self.generate_name_from_class(component)

    def generate_name_from_class(self, component: type) -> str:
        path = class_path(component)
        prefix = self._class_namespace
        if prefix and path.startswith(prefix + "."):
            path = path[len(prefix) + 1 :]
        return ".".join(kebab_case(part) for part in path.split("."))
