"""Page reachable by URL only; discovery leaves it out of the panel."""

from panelcore import Page


class Maintenance(Page):
    title = "Maintenance"
    discovered = False
