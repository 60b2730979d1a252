from panelcore import Page


class EditCustomer(Page):
    title = "Edit customer"
