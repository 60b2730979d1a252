from panelcore import Page


class Settings(Page):
    title = "Settings"
    navigation_sort = 10
