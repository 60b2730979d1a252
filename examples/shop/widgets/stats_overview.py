"""Headline numbers shown at the top of the dashboard."""

from panelcore import Widget


class StatsOverview(Widget):
    sort = 1
    column_span = "full"
