from panelcore import Widget


class LatestOrders(Widget):
    sort = 2
