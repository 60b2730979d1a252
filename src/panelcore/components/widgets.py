"""Widget component and its configuration wrapper."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Union

from panelcore.components.base import Component

__all__ = ["Widget", "WidgetConfiguration", "WidgetEntry", "normalize_widget_class"]


@dataclass(frozen=True)
class WidgetConfiguration:
    """A widget class together with the properties it is mounted with.

    Attributes:
        widget: The widget class.
        properties: Properties passed to the widget on mount.
    """

    widget: type[Widget]
    properties: dict[str, Any] = field(default_factory=dict)


class Widget(Component):
    """A small reusable display unit placed on dashboards and pages.

    Attributes:
        sort: Position among sibling widgets, ascending. ``None`` sorts first.
        column_span: Grid columns the widget occupies.
        discovered: Whether directory discovery may register this widget.
    """

    view: ClassVar[str] = "panelcore.widgets.widget"
    sort: ClassVar[int | None] = None
    column_span: ClassVar[int | str] = 1
    discovered: ClassVar[bool] = True

    @classmethod
    def get_sort(cls) -> int | None:
        return cls.sort

    @classmethod
    def is_discovered(cls) -> bool:
        return cls.discovered

    @classmethod
    def make(cls, **properties: Any) -> WidgetConfiguration:
        """Wrap this widget with mount properties."""
        return WidgetConfiguration(widget=cls, properties=properties)

    def render(self) -> str:
        return self.view


WidgetEntry = Union[type[Widget], WidgetConfiguration]


def normalize_widget_class(widget: WidgetEntry) -> type[Widget]:
    """Return the widget class of a bare widget or a WidgetConfiguration."""
    if isinstance(widget, WidgetConfiguration):
        return widget.widget
    return widget
