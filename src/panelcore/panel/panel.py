"""The Panel: host configuration object for one admin panel."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from panelcore.config import Config
from panelcore.discovery.entry_point import resolve_target
from panelcore.errors import InvalidInputError
from panelcore.panel.concerns.has_auth import HasAuth
from panelcore.panel.concerns.has_components import HasComponents
from panelcore.runtime.naming import ComponentRegistry

if TYPE_CHECKING:
    from panelcore.config import PanelSettings
    from panelcore.runtime.table import ComponentTable

logger = logging.getLogger(__name__)

__all__ = ["Panel"]


class Panel(HasAuth, HasComponents):
    """An admin panel and the components it serves."""

    def __init__(
        self,
        id: str,
        config: Config | None = None,
        component_registry: ComponentRegistry | None = None,
    ) -> None:
        """Initialize the Panel.

        Args:
            id: Unique panel identifier.
            config: Optional Config with ``discovery.max_depth``,
                ``discovery.follow_symlinks`` and ``class_namespace`` keys.
            component_registry: Names view components; defaults to one
                using the configured ``class_namespace``.

        Raises:
            InvalidInputError: If id is empty.
        """
        if not id:
            raise InvalidInputError(message="Panel id must be a non-empty string")

        self._id = id
        self._config = config if config is not None else Config()
        self._component_registry = (
            component_registry
            if component_registry is not None
            else ComponentRegistry(self._config.get("class_namespace", "") or "")
        )
        self._booted = False

        self._init_components()
        self._init_auth()

    @classmethod
    def make(cls, id: str) -> Panel:
        return cls(id)

    @classmethod
    def from_settings(
        cls,
        settings: PanelSettings,
        component_registry: ComponentRegistry | None = None,
    ) -> Panel:
        """Build a panel from validated settings.

        Discovery runs first, then explicit targets are appended, so
        explicit entries come after discovered ones in registration order.

        Raises:
            ComponentLoadError: If a discovered file does not define its class.
            InvalidTargetError, TargetModuleNotFoundError, TargetNotFoundError:
                If an explicit target cannot be resolved.
        """
        panel = cls(
            settings.id,
            config=Config(settings.model_dump()),
            component_registry=component_registry,
        )

        auth = settings.auth
        if auth.login:
            panel.login()
        if auth.registration:
            panel.registration()
        if auth.password_reset:
            panel.password_reset()
        if auth.email_verification:
            panel.email_verification()

        discovery = settings.discovery
        if discovery.resources is not None:
            panel.discover_resources(in_=discovery.resources.directory, for_=discovery.resources.namespace)
        if discovery.pages is not None:
            panel.discover_pages(in_=discovery.pages.directory, for_=discovery.pages.namespace)
        if discovery.widgets is not None:
            panel.discover_widgets(in_=discovery.widgets.directory, for_=discovery.widgets.namespace)

        panel.resources([resolve_target(target) for target in settings.resources])
        panel.pages([resolve_target(target) for target in settings.pages])
        panel.widgets([resolve_target(target) for target in settings.widgets])

        return panel

    @property
    def id(self) -> str:
        return self._id

    def get_id(self) -> str:
        return self._id

    @property
    def config(self) -> Config:
        return self._config

    @property
    def component_registry(self) -> ComponentRegistry:
        return self._component_registry

    def is_booted(self) -> bool:
        return self._booted

    def boot(self, table: ComponentTable) -> int:
        """Register the panel's view components into table.

        Each boot rebuilds the queue from the built-in views, auth actions and
        resources, so booting again re-binds the same names.

        Returns:
            Number of components bound.
        """
        count = self.register_view_components(table)
        self._booted = True
        logger.info("Panel '%s' booted with %d view component(s)", self._id, count)
        return count
