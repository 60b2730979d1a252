"""Page component and resource page registrations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from panelcore.components.base import Component

__all__ = ["Page", "PageRegistration"]


@dataclass(frozen=True)
class PageRegistration:
    """A resource page bound to a route path.

    Attributes:
        page: The page class.
        route: Route path relative to the resource, e.g. ``/{record}/edit``.
    """

    page: type[Page]
    route: str

    def get_page(self) -> type[Page]:
        return self.page


class Page(Component):
    """A full-screen panel page."""

    view: ClassVar[str] = "panelcore.pages.page"
    title: ClassVar[str | None] = None
    navigation_sort: ClassVar[int | None] = None
    discovered: ClassVar[bool] = True

    @classmethod
    def is_discovered(cls) -> bool:
        """Whether directory discovery may register this page."""
        return cls.discovered

    @classmethod
    def get_navigation_sort(cls) -> int | None:
        return cls.navigation_sort

    @classmethod
    def route(cls, path: str) -> PageRegistration:
        return PageRegistration(page=cls, route=path)

    def render(self) -> str:
        return self.view
