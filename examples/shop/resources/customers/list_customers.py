from panelcore import Page


class ListCustomers(Page):
    title = "Customers"
