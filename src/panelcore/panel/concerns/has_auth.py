"""Authentication features of a panel and their route actions."""

from __future__ import annotations

from typing import Any, Callable, TypeVar, Union

from panelcore.components.base import is_view_component
from panelcore.components.builtin import (
    EmailVerificationPrompt,
    Login,
    Register,
    RequestPasswordReset,
    ResetPassword,
)

__all__ = ["HasAuth", "RouteAction"]

# A page class or any other request handler.
RouteAction = Union[type, Callable[..., Any]]

_P = TypeVar("_P", bound="HasAuth")


class HasAuth:
    """Enables login, registration, password reset and email verification.

    Each feature is off until its method is called. Enabling a feature sets
    its route action, which defaults to the built-in auth page. The host
    provides ``queue_view_component`` and calls ``_init_auth()``.
    """

    queue_view_component: Callable[[type], None]

    def _init_auth(self) -> None:
        self._login_route_action: RouteAction | None = None
        self._registration_route_action: RouteAction | None = None
        self._request_password_reset_route_action: RouteAction | None = None
        self._reset_password_route_action: RouteAction | None = None
        self._email_verification_prompt_route_action: RouteAction | None = None

    def login(self: _P, action: RouteAction = Login) -> _P:
        self._login_route_action = action
        return self

    def registration(self: _P, action: RouteAction = Register) -> _P:
        self._registration_route_action = action
        return self

    def password_reset(
        self: _P,
        request_action: RouteAction = RequestPasswordReset,
        reset_action: RouteAction = ResetPassword,
    ) -> _P:
        self._request_password_reset_route_action = request_action
        self._reset_password_route_action = reset_action
        return self

    def email_verification(self: _P, prompt_action: RouteAction = EmailVerificationPrompt) -> _P:
        self._email_verification_prompt_route_action = prompt_action
        return self

    def has_login(self) -> bool:
        return self._login_route_action is not None

    def has_registration(self) -> bool:
        return self._registration_route_action is not None

    def has_password_reset(self) -> bool:
        return self._request_password_reset_route_action is not None

    def has_email_verification(self) -> bool:
        return self._email_verification_prompt_route_action is not None

    def get_login_route_action(self) -> RouteAction | None:
        return self._login_route_action

    def get_registration_route_action(self) -> RouteAction | None:
        return self._registration_route_action

    def get_request_password_reset_route_action(self) -> RouteAction | None:
        return self._request_password_reset_route_action

    def get_reset_password_route_action(self) -> RouteAction | None:
        return self._reset_password_route_action

    def get_email_verification_prompt_route_action(self) -> RouteAction | None:
        return self._email_verification_prompt_route_action

    def _queue_auth_view_components(self) -> None:
        # Only actions that are view components get a runtime name.
        if self.has_email_verification() and is_view_component(
            action := self.get_email_verification_prompt_route_action()
        ):
            self.queue_view_component(action)

        if self.has_login() and is_view_component(action := self.get_login_route_action()):
            self.queue_view_component(action)

        if self.has_password_reset():
            if is_view_component(action := self.get_request_password_reset_route_action()):
                self.queue_view_component(action)

            if is_view_component(action := self.get_reset_password_route_action()):
                self.queue_view_component(action)

        if self.has_registration() and is_view_component(action := self.get_registration_route_action()):
            self.queue_view_component(action)
