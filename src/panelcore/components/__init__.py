"""panelcore component types: pages, resources, widgets and built-in views."""

from __future__ import annotations

from panelcore.components.base import Component, is_view_component
from panelcore.components.builtin import (
    DatabaseNotifications,
    EditProfile,
    EmailVerificationPrompt,
    GlobalSearch,
    Login,
    Notifications,
    Register,
    RequestPasswordReset,
    ResetPassword,
)
from panelcore.components.pages import Page, PageRegistration
from panelcore.components.resources import (
    RelationGroup,
    RelationManager,
    RelationManagerConfiguration,
    Resource,
    normalize_relation_manager_class,
)
from panelcore.components.widgets import Widget, WidgetConfiguration, normalize_widget_class

__all__ = [
    "Component",
    "DatabaseNotifications",
    "EditProfile",
    "EmailVerificationPrompt",
    "GlobalSearch",
    "Login",
    "Notifications",
    "Page",
    "PageRegistration",
    "Register",
    "RelationGroup",
    "RelationManager",
    "RelationManagerConfiguration",
    "RequestPasswordReset",
    "ResetPassword",
    "Resource",
    "Widget",
    "WidgetConfiguration",
    "is_view_component",
    "normalize_relation_manager_class",
    "normalize_widget_class",
]
