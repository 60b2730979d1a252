"""panelcore - Component discovery and registration for admin panels."""

from __future__ import annotations

# Core
from panelcore.panel import Panel
from panelcore.runtime import ComponentRegistry, ComponentTable

# Component types
from panelcore.components import (
    Component,
    DatabaseNotifications,
    EditProfile,
    EmailVerificationPrompt,
    GlobalSearch,
    Login,
    Notifications,
    Page,
    PageRegistration,
    Register,
    RelationGroup,
    RelationManager,
    RelationManagerConfiguration,
    RequestPasswordReset,
    ResetPassword,
    Resource,
    Widget,
    WidgetConfiguration,
)

# Config
from panelcore.config import Config, PanelSettings, load_panel_settings

# Errors
from panelcore.errors import (
    ComponentLoadError,
    ComponentNotFoundError,
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    InvalidInputError,
    InvalidTargetError,
    PanelError,
    TargetModuleNotFoundError,
    TargetNotFoundError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "Panel",
    "ComponentRegistry",
    "ComponentTable",
    # Component types
    "Component",
    "Page",
    "PageRegistration",
    "Resource",
    "RelationManager",
    "RelationManagerConfiguration",
    "RelationGroup",
    "Widget",
    "WidgetConfiguration",
    # Built-in views
    "Notifications",
    "DatabaseNotifications",
    "GlobalSearch",
    "EditProfile",
    "Login",
    "Register",
    "RequestPasswordReset",
    "ResetPassword",
    "EmailVerificationPrompt",
    # Config
    "Config",
    "PanelSettings",
    "load_panel_settings",
    # Errors
    "ErrorCodes",
    "PanelError",
    "ConfigError",
    "ConfigNotFoundError",
    "InvalidInputError",
    "ComponentLoadError",
    "ComponentNotFoundError",
    "InvalidTargetError",
    "TargetModuleNotFoundError",
    "TargetNotFoundError",
]
