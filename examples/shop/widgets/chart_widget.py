"""Base class for chart widgets; concrete charts supply their data."""

from abc import abstractmethod
from typing import Any

from panelcore import Widget


class ChartWidget(Widget):
    view = "shop.widgets.chart"

    @abstractmethod
    def get_data(self) -> dict[str, Any]:
        """Return the chart datasets and labels."""
