"""Resource and relation manager types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Union

from panelcore.components.base import Component
from panelcore.components.pages import PageRegistration
from panelcore.components.widgets import WidgetEntry

__all__ = [
    "RelationGroup",
    "RelationManager",
    "RelationManagerConfiguration",
    "RelationManagerEntry",
    "Resource",
    "normalize_relation_manager_class",
]


@dataclass(frozen=True)
class RelationManagerConfiguration:
    """A relation manager class together with the properties it is mounted with."""

    relation_manager: type[RelationManager]
    properties: dict[str, Any] = field(default_factory=dict)


class RelationManager(Component):
    """Manages a related data-model collection within a resource."""

    view: ClassVar[str] = "panelcore.resources.relation-manager"
    relationship: ClassVar[str | None] = None

    @classmethod
    def get_relationship_name(cls) -> str | None:
        return cls.relationship

    @classmethod
    def make(cls, **properties: Any) -> RelationManagerConfiguration:
        return RelationManagerConfiguration(relation_manager=cls, properties=properties)

    def render(self) -> str:
        return self.view


RelationManagerEntry = Union[type[RelationManager], RelationManagerConfiguration]


@dataclass
class RelationGroup:
    """A labelled group of relation managers shown together as tabs."""

    label: str
    managers: list[RelationManagerEntry] = field(default_factory=list)

    def get_managers(self) -> list[RelationManagerEntry]:
        return list(self.managers)


def normalize_relation_manager_class(manager: RelationManagerEntry) -> type[RelationManager]:
    """Return the relation manager class of a bare class or a configuration."""
    if isinstance(manager, RelationManagerConfiguration):
        return manager.relation_manager
    return manager


class Resource:
    """CRUD-style management for one data-model type.

    A resource is not rendered itself; its pages, relation managers and
    widgets are the view components.

    Attributes:
        model: The data-model class this resource manages.
        pages: Route name to page registration, e.g. ``{"index": ListUsers.route("/")}``.
        relations: Relation managers and relation groups.
        widgets: Widgets shown on the resource pages.
        discovered: Whether directory discovery may register this resource.
    """

    model: ClassVar[type | None] = None
    pages: ClassVar[dict[str, PageRegistration]] = {}
    relations: ClassVar[list[RelationManagerEntry | RelationGroup]] = []
    widgets: ClassVar[list[WidgetEntry]] = []
    discovered: ClassVar[bool] = True

    @classmethod
    def get_model(cls) -> type | None:
        return cls.model

    @classmethod
    def get_pages(cls) -> dict[str, PageRegistration]:
        return dict(cls.pages)

    @classmethod
    def get_relations(cls) -> list[RelationManagerEntry | RelationGroup]:
        return list(cls.relations)

    @classmethod
    def get_widgets(cls) -> list[WidgetEntry]:
        return list(cls.widgets)

    @classmethod
    def is_discovered(cls) -> bool:
        return cls.discovered
