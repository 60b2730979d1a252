"""Landing page of the shop panel."""

from panelcore import Page


class Dashboard(Page):
    title = "Dashboard"
    view = "shop.pages.dashboard"
    navigation_sort = -2
