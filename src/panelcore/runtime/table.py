"""Global component table of the view runtime."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator

from panelcore.errors import ComponentNotFoundError, InvalidInputError

logger = logging.getLogger(__name__)

__all__ = ["ComponentTable", "TABLE_EVENTS"]

TABLE_EVENTS = ("register",)


class ComponentTable:
    """Binds component names to classes so the view runtime can instantiate them."""

    def __init__(self) -> None:
        self._components: dict[str, type] = {}
        self._callbacks: dict[str, list[Callable[..., Any]]] = {event: [] for event in TABLE_EVENTS}

    def component(self, name: str, component: type) -> None:
        """Bind name to a component class, replacing any earlier binding.

        Raises:
            InvalidInputError: If name is empty.
        """
        if not name:
            raise InvalidInputError(message="Component name must be a non-empty string")

        previous = self._components.get(name)
        if previous is not None and previous is not component:
            logger.debug("Rebinding component '%s': %r -> %r", name, previous, component)
        self._components[name] = component
        self._trigger_event("register", name, component)

    def get(self, name: str) -> type | None:
        return self._components.get(name)

    def resolve(self, name: str) -> type:
        """Return the class bound to name.

        Raises:
            ComponentNotFoundError: If nothing is bound to name.
        """
        component = self._components.get(name)
        if component is None:
            raise ComponentNotFoundError(name=name)
        return component

    def new(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Instantiate the component bound to name."""
        return self.resolve(name)(*args, **kwargs)

    def has(self, name: str) -> bool:
        return name in self._components

    def iter(self) -> Iterator[tuple[str, type]]:
        """Return an iterator of (name, class) tuples (snapshot-based)."""
        return iter(list(self._components.items()))

    @property
    def names(self) -> list[str]:
        """Sorted list of bound component names."""
        return sorted(self._components)

    @property
    def count(self) -> int:
        return len(self._components)

    # ----- Event System -----

    def on(self, event: str, callback: Callable[..., Any]) -> None:
        """Register an event callback.

        Args:
            event: Event name ('register').
            callback: Callable(name, component) to invoke on the event.

        Raises:
            InvalidInputError: If event name is invalid.
        """
        if event not in self._callbacks:
            raise InvalidInputError(message=f"Invalid event: {event}. Must be one of {', '.join(TABLE_EVENTS)}")
        self._callbacks[event].append(callback)

    def _trigger_event(self, event: str, name: str, component: type) -> None:
        """Trigger all callbacks for an event. Errors are logged and swallowed."""
        for cb in list(self._callbacks.get(event, [])):
            try:
                cb(name, component)
            except Exception as e:
                logger.error(
                    "Callback error for event '%s' on component '%s': %s",
                    event,
                    name,
                    e,
                )
