"""View components every panel registers."""

from __future__ import annotations

from typing import Any, ClassVar

from panelcore.components.base import Component
from panelcore.components.pages import Page

__all__ = [
    "DatabaseNotifications",
    "EditProfile",
    "EmailVerificationPrompt",
    "GlobalSearch",
    "Login",
    "Notifications",
    "Register",
    "RequestPasswordReset",
    "ResetPassword",
]


class Notifications(Component):
    """Flash notifications shown in the panel corner."""

    component_name = "panelcore.notifications"

    def __init__(self) -> None:
        self.notifications: list[dict[str, Any]] = []

    def render(self) -> str:
        return "panelcore.components.notifications"


class DatabaseNotifications(Component):
    """Persisted notifications listed in a slide-over."""

    component_name = "panelcore.database-notifications"
    polling_interval: ClassVar[str | None] = "30s"

    def render(self) -> str:
        return "panelcore.components.database-notifications"


class GlobalSearch(Component):
    """Search box querying every globally searchable resource."""

    component_name = "panelcore.global-search"

    def __init__(self) -> None:
        self.search = ""

    def render(self) -> str:
        return "panelcore.components.global-search"


class EditProfile(Page):
    component_name = "panelcore.pages.auth.edit-profile"
    view = "panelcore.pages.auth.edit-profile"
    discovered = False


class Login(Page):
    component_name = "panelcore.pages.auth.login"
    view = "panelcore.pages.auth.login"
    discovered = False


class Register(Page):
    component_name = "panelcore.pages.auth.register"
    view = "panelcore.pages.auth.register"
    discovered = False


class RequestPasswordReset(Page):
    component_name = "panelcore.pages.auth.password-reset.request-password-reset"
    view = "panelcore.pages.auth.password-reset.request-password-reset"
    discovered = False


class ResetPassword(Page):
    component_name = "panelcore.pages.auth.password-reset.reset-password"
    view = "panelcore.pages.auth.password-reset.reset-password"
    discovered = False


class EmailVerificationPrompt(Page):
    component_name = "panelcore.pages.auth.email-verification.email-verification-prompt"
    view = "panelcore.pages.auth.email-verification.email-verification-prompt"
    discovered = False
