"""Page, resource and widget registration for a panel."""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Any, Iterable, TypeVar

from panelcore.components.base import is_view_component
from panelcore.components.builtin import (
    DatabaseNotifications,
    EditProfile,
    GlobalSearch,
    Notifications,
)
from panelcore.components.pages import Page
from panelcore.components.resources import (
    RelationGroup,
    Resource,
    normalize_relation_manager_class,
)
from panelcore.components.widgets import Widget, WidgetEntry, normalize_widget_class
from panelcore.discovery.entry_point import derive_class_path, import_class
from panelcore.discovery.scanner import expand_directory, scan_directory
from panelcore.runtime.naming import class_path

if TYPE_CHECKING:
    from panelcore.config import Config
    from panelcore.runtime.naming import ComponentRegistry
    from panelcore.runtime.table import ComponentTable

logger = logging.getLogger(__name__)

__all__ = ["HasComponents"]

_P = TypeVar("_P", bound="HasComponents")


def _widget_sort_key(widget: WidgetEntry) -> tuple[bool, int]:
    sort = normalize_widget_class(widget).get_sort()
    return (sort is not None, sort if sort is not None else 0)


def _is_blank(value: str | None) -> bool:
    return value is None or not str(value).strip()


class HasComponents:
    """Discovers and accumulates the components of a panel.

    The host class provides ``_config`` and ``_component_registry`` and calls
    ``_init_components()`` from its constructor.
    """

    _config: Config
    _component_registry: ComponentRegistry

    def _init_components(self) -> None:
        self._view_components: dict[str, type] = {}
        self._pages: list[type[Page]] = []
        self._page_directory: str | None = None
        self._page_namespace: str | None = None
        self._resources: list[type[Resource]] = []
        self._resource_directory: str | None = None
        self._resource_namespace: str | None = None
        self._widgets: list[WidgetEntry] = []
        self._widget_directory: str | None = None
        self._widget_namespace: str | None = None

    # ----- Accumulation -----

    def pages(self: _P, pages: Iterable[type[Page]]) -> _P:
        pages = list(pages)
        self._pages = [*self._pages, *pages]

        for page in pages:
            self.queue_view_component(page)

        return self

    def resources(self: _P, resources: Iterable[type[Resource]]) -> _P:
        self._resources = [*self._resources, *resources]
        return self

    def widgets(self: _P, widgets: Iterable[WidgetEntry]) -> _P:
        widgets = list(widgets)
        self._widgets = [*self._widgets, *widgets]

        for widget in widgets:
            self.queue_view_component(normalize_widget_class(widget))

        return self

    # ----- Discovery -----

    def discover_pages(self: _P, in_: str, for_: str) -> _P:
        """Register every discoverable Page under directory in_ (namespace for_)."""
        if self._page_directory is None:
            self._page_directory = in_
        if self._page_namespace is None:
            self._page_namespace = for_

        self.discover_components(Page, self._pages, directory=in_, namespace=for_)
        return self

    def get_page_directory(self) -> str | None:
        return self._page_directory

    def get_page_namespace(self) -> str | None:
        return self._page_namespace

    def discover_resources(self: _P, in_: str, for_: str) -> _P:
        """Register every discoverable Resource under directory in_ (namespace for_)."""
        if self._resource_directory is None:
            self._resource_directory = in_
        if self._resource_namespace is None:
            self._resource_namespace = for_

        self.discover_components(Resource, self._resources, directory=in_, namespace=for_)
        return self

    def get_resource_directory(self) -> str | None:
        return self._resource_directory

    def get_resource_namespace(self) -> str | None:
        return self._resource_namespace

    def discover_widgets(self: _P, in_: str, for_: str) -> _P:
        """Register every discoverable Widget under directory in_ (namespace for_)."""
        if self._widget_directory is None:
            self._widget_directory = in_
        if self._widget_namespace is None:
            self._widget_namespace = for_

        self.discover_components(Widget, self._widgets, directory=in_, namespace=for_)
        return self

    def get_widget_directory(self) -> str | None:
        return self._widget_directory

    def get_widget_namespace(self) -> str | None:
        return self._widget_namespace

    def discover_components(
        self,
        base_class: type,
        register: list[Any],
        directory: str | None,
        namespace: str | None,
    ) -> None:
        """Append discovered subclasses of base_class to register in place.

        Blank settings and a missing non-wildcard directory discover nothing.
        Import failures raise ComponentLoadError to the caller.
        """
        if _is_blank(directory) or _is_blank(namespace):
            return

        max_depth = self._config.get("discovery.max_depth", 8)
        follow_symlinks = self._config.get("discovery.follow_symlinks", False)

        found = 0
        for root in expand_directory(directory):
            for discovered in scan_directory(root.path, max_depth=max_depth, follow_symlinks=follow_symlinks):
                path = derive_class_path(namespace, discovered, root.wildcard)
                cls = import_class(path)

                if inspect.isabstract(cls):
                    logger.debug("Skipping abstract class %s", path)
                    continue

                if is_view_component(cls):
                    self.queue_view_component(cls)

                if cls is base_class or not issubclass(cls, base_class):
                    continue

                if not cls.is_discovered():
                    logger.debug("Skipping %s: not discoverable", path)
                    continue

                register.append(cls)
                found += 1

        logger.debug(
            "Discovered %d %s class(es) in %s for %s",
            found,
            base_class.__name__,
            directory,
            namespace,
        )

    # ----- Queries -----

    def get_pages(self) -> list[type[Page]]:
        return list(dict.fromkeys(self._pages))

    def get_resources(self) -> list[type[Resource]]:
        return list(dict.fromkeys(self._resources))

    def get_widgets(self) -> list[WidgetEntry]:
        """Return unique widgets sorted ascending by sort; ties keep insertion order."""
        unique: list[WidgetEntry] = []
        for widget in self._widgets:
            if widget not in unique:
                unique.append(widget)
        return sorted(unique, key=_widget_sort_key)

    def get_model_resource(self, model: Any) -> type[Resource] | None:
        """Return the first registered resource managing model.

        Args:
            model: A model instance, a model class, or its dotted class path.

        Returns:
            The first matching resource in registration order, or None.
        """
        if isinstance(model, str):
            target = model

            def matches(resource_model: type | None) -> bool:
                return resource_model is not None and class_path(resource_model) == target

        else:
            model_class = model if inspect.isclass(model) else type(model)

            def matches(resource_model: type | None) -> bool:
                return resource_model is model_class

        candidates = [resource for resource in self.get_resources() if matches(resource.get_model())]
        if not candidates:
            return None
        if len(candidates) > 1:
            logger.debug(
                "Model %r is managed by %d resources, using %s",
                model,
                len(candidates),
                candidates[0].__name__,
            )
        return candidates[0]

    # ----- View component registration -----

    def queue_view_component(self, component: type) -> None:
        """Queue a view component class for binding at the next flush."""
        name = self._component_registry.get_name(component)
        self._view_components[name] = component

    def get_pending_view_components(self) -> dict[str, type]:
        return dict(self._view_components)

    def register_view_components(self, table: ComponentTable) -> int:
        """Bind every queued view component into table, then empty the queue.

        Returns:
            Number of components bound.
        """
        self.queue_view_component(DatabaseNotifications)
        self.queue_view_component(EditProfile)
        self.queue_view_component(GlobalSearch)
        self.queue_view_component(Notifications)

        self._queue_auth_view_components()

        for resource in self.get_resources():
            for registration in resource.get_pages().values():
                self.queue_view_component(registration.get_page())

            for relation in resource.get_relations():
                if isinstance(relation, RelationGroup):
                    for grouped in relation.get_managers():
                        self.queue_view_component(normalize_relation_manager_class(grouped))
                    continue

                self.queue_view_component(normalize_relation_manager_class(relation))

            for widget in resource.get_widgets():
                self.queue_view_component(normalize_widget_class(widget))

        count = 0
        for name, component in self._view_components.items():
            table.component(name, component)
            count += 1

        self._view_components = {}
        logger.info("Registered %d view component(s)", count)
        return count

    def _queue_auth_view_components(self) -> None:
        """Hook for hosts with auth features; queues nothing by default."""
