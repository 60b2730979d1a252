"""Reactive view component base class."""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from typing import Any, ClassVar

__all__ = ["Component", "is_view_component"]


class Component(ABC):
    """A server-driven, stateful UI component rendered by the view runtime.

    Attributes:
        component_name: Explicit runtime name. When unset, the name is
            generated from the class path by the component registry.
    """

    component_name: ClassVar[str | None] = None

    @abstractmethod
    def render(self) -> Any:
        """Return the view (template name or markup) for this component."""


def is_view_component(obj: Any) -> bool:
    """Return True if obj is a strict subclass of Component."""
    return inspect.isclass(obj) and obj is not Component and issubclass(obj, Component)
