"""Tests for component base types and configuration wrappers."""

from __future__ import annotations

from abc import abstractmethod

import pytest

from panelcore.components import (
    Component,
    EditProfile,
    GlobalSearch,
    Login,
    Page,
    PageRegistration,
    RelationGroup,
    RelationManager,
    RelationManagerConfiguration,
    Resource,
    Widget,
    WidgetConfiguration,
    is_view_component,
    normalize_relation_manager_class,
    normalize_widget_class,
)


class Invoice:
    pass


class ListInvoices(Page):
    pass


class LinesRelationManager(RelationManager):
    relationship = "lines"


class RevenueWidget(Widget):
    sort = 3


class InvoiceResource(Resource):
    model = Invoice
    pages = {"index": ListInvoices.route("/")}
    relations = [LinesRelationManager]
    widgets = [RevenueWidget.make(period="month")]


class TestIsViewComponent:
    def test_page_subclass(self) -> None:
        assert is_view_component(ListInvoices)

    def test_builtin_views(self) -> None:
        assert is_view_component(GlobalSearch)
        assert is_view_component(Login)

    def test_component_itself_is_not(self) -> None:
        assert not is_view_component(Component)

    def test_resource_is_not(self) -> None:
        assert not is_view_component(InvoiceResource)

    def test_non_classes(self) -> None:
        assert not is_view_component(ListInvoices())
        assert not is_view_component(lambda: None)
        assert not is_view_component(None)


class TestPage:
    def test_route_builds_registration(self) -> None:
        registration = ListInvoices.route("/")
        assert registration == PageRegistration(page=ListInvoices, route="/")
        assert registration.get_page() is ListInvoices

    def test_defaults(self) -> None:
        assert ListInvoices.is_discovered() is True
        assert ListInvoices.get_navigation_sort() is None
        assert ListInvoices().render() == "panelcore.pages.page"

    def test_builtin_auth_pages_not_discovered(self) -> None:
        assert EditProfile.is_discovered() is False
        assert Login.is_discovered() is False

    def test_abstract_page_cannot_instantiate(self) -> None:
        class BaseReport(Page):
            @abstractmethod
            def get_rows(self) -> list: ...

        with pytest.raises(TypeError):
            BaseReport()


class TestWidget:
    def test_make_wraps_configuration(self) -> None:
        config = RevenueWidget.make(period="month")
        assert config == WidgetConfiguration(widget=RevenueWidget, properties={"period": "month"})

    def test_configurations_compare_by_value(self) -> None:
        assert RevenueWidget.make(period="month") == RevenueWidget.make(period="month")
        assert RevenueWidget.make(period="month") != RevenueWidget.make(period="year")

    def test_normalize(self) -> None:
        assert normalize_widget_class(RevenueWidget) is RevenueWidget
        assert normalize_widget_class(RevenueWidget.make()) is RevenueWidget

    def test_sort(self) -> None:
        assert RevenueWidget.get_sort() == 3
        assert Widget.get_sort() is None


class TestRelationManagers:
    def test_make_and_normalize(self) -> None:
        config = LinesRelationManager.make(readonly=True)
        assert isinstance(config, RelationManagerConfiguration)
        assert config.properties == {"readonly": True}
        assert normalize_relation_manager_class(config) is LinesRelationManager
        assert normalize_relation_manager_class(LinesRelationManager) is LinesRelationManager

    def test_group_returns_copy(self) -> None:
        group = RelationGroup("Lines", [LinesRelationManager])
        managers = group.get_managers()
        managers.append(LinesRelationManager.make())
        assert group.get_managers() == [LinesRelationManager]


class TestResource:
    def test_accessors(self) -> None:
        assert InvoiceResource.get_model() is Invoice
        assert InvoiceResource.get_pages()["index"].get_page() is ListInvoices
        assert InvoiceResource.get_relations() == [LinesRelationManager]
        assert InvoiceResource.get_widgets() == [RevenueWidget.make(period="month")]
        assert InvoiceResource.is_discovered() is True

    def test_defaults_are_empty(self) -> None:
        class BareResource(Resource):
            pass

        assert BareResource.get_model() is None
        assert BareResource.get_pages() == {}
        assert BareResource.get_relations() == []
        assert BareResource.get_widgets() == []

    def test_accessors_return_copies(self) -> None:
        InvoiceResource.get_relations().append(LinesRelationManager)
        assert InvoiceResource.get_relations() == [LinesRelationManager]
