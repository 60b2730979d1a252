"""Error hierarchy for the panelcore framework."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "PanelError",
    "ConfigNotFoundError",
    "ConfigError",
    "InvalidInputError",
    "ComponentLoadError",
    "ComponentNotFoundError",
    "InvalidTargetError",
    "TargetModuleNotFoundError",
    "TargetNotFoundError",
    "ErrorCodes",
]


class PanelError(Exception):
    """Base error for all panelcore framework errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(PanelError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(PanelError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class InvalidInputError(PanelError):
    """Raised for invalid input."""

    def __init__(self, message: str = "Invalid input", **kwargs: Any) -> None:
        super().__init__(code="GENERAL_INVALID_INPUT", message=message, **kwargs)


class ComponentLoadError(PanelError):
    """Raised when a discovered component class cannot be imported or resolved."""

    def __init__(self, class_path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="COMPONENT_LOAD_ERROR",
            message=f"Failed to load component '{class_path}': {reason}",
            details={"class_path": class_path, "reason": reason},
            **kwargs,
        )

    @property
    def class_path(self) -> str:
        """The fully qualified class path that failed to load."""
        return self.details["class_path"]


class ComponentNotFoundError(PanelError):
    """Raised when a component name is not bound in the component table."""

    def __init__(self, name: str, **kwargs: Any) -> None:
        super().__init__(
            code="COMPONENT_NOT_FOUND",
            message=f"Component not found: {name}",
            details={"name": name},
            **kwargs,
        )


class InvalidTargetError(PanelError):
    """Raised when a class target string does not contain a ':' separator."""

    def __init__(self, *, target: str, **kwargs: Any) -> None:
        super().__init__(
            code="INVALID_TARGET",
            message=f"Invalid class target '{target}'. Expected format: 'module.path:ClassName'.",
            details={"target": target},
            **kwargs,
        )


class TargetModuleNotFoundError(PanelError):
    """Raised when the module of a class target cannot be imported."""

    def __init__(self, *, module_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="TARGET_MODULE_NOT_FOUND",
            message=f"Cannot import module '{module_path}'.",
            details={"module_path": module_path},
            **kwargs,
        )


class TargetNotFoundError(PanelError):
    """Raised when a class cannot be found in the target module."""

    def __init__(self, *, class_name: str, module_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="TARGET_NOT_FOUND",
            message=f"Cannot find class '{class_name}' in module '{module_path}'.",
            details={"class_name": class_name, "module_path": module_path},
            **kwargs,
        )


class ErrorCodes:
    """All framework error codes as constants.

    Use these instead of hardcoding error code strings.

    Example:
        if error.code == ErrorCodes.COMPONENT_LOAD_ERROR:
            handle_broken_component()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    GENERAL_INVALID_INPUT = "GENERAL_INVALID_INPUT"
    COMPONENT_LOAD_ERROR = "COMPONENT_LOAD_ERROR"
    COMPONENT_NOT_FOUND = "COMPONENT_NOT_FOUND"
    INVALID_TARGET = "INVALID_TARGET"
    TARGET_MODULE_NOT_FOUND = "TARGET_MODULE_NOT_FOUND"
    TARGET_NOT_FOUND = "TARGET_NOT_FOUND"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
