"""Customer management: list, edit and the customer's orders."""

from panelcore import RelationGroup, Resource

from shop.models import Customer
from shop.resources.customers.edit_customer import EditCustomer
from shop.resources.customers.list_customers import ListCustomers
from shop.resources.customers.notes_relation_manager import NotesRelationManager
from shop.resources.customers.orders_relation_manager import OrdersRelationManager
from shop.widgets.stats_overview import StatsOverview


class CustomerResource(Resource):
    model = Customer
    pages = {
        "index": ListCustomers.route("/"),
        "edit": EditCustomer.route("/{record}/edit"),
    }
    relations = [
        OrdersRelationManager,
        RelationGroup("Activity", [NotesRelationManager.make(lazy=True)]),
    ]
    widgets = [StatsOverview]
