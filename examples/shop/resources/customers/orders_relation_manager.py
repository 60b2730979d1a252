from panelcore import RelationManager


class OrdersRelationManager(RelationManager):
    relationship = "orders"
