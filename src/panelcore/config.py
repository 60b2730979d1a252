"""Configuration loading and validation."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from panelcore.errors import ConfigError, ConfigNotFoundError

__all__ = [
    "AuthSettings",
    "Config",
    "DiscoverySettings",
    "DiscoveryTarget",
    "PanelSettings",
    "load_panel_settings",
]


class Config:
    """Configuration accessor with dot-path key support."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path key."""
        parts = key.split(".")
        current: Any = self._data
        for part in parts:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current


class DiscoveryTarget(BaseModel):
    """Directory to scan and the namespace its files live in.

    YAML keys are ``in`` and ``for``::

        pages:
          in: app/admin/pages
          for: app.admin.pages
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    directory: str = Field(alias="in")
    namespace: str = Field(alias="for")


class DiscoverySettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    pages: DiscoveryTarget | None = None
    resources: DiscoveryTarget | None = None
    widgets: DiscoveryTarget | None = None
    max_depth: int = Field(default=8, ge=1)
    follow_symlinks: bool = False


class AuthSettings(BaseModel):
    """Authentication features enabled with their default route actions."""

    model_config = ConfigDict(extra="forbid")

    login: bool = False
    registration: bool = False
    password_reset: bool = False
    email_verification: bool = False


class PanelSettings(BaseModel):
    """Validated settings for one panel.

    Explicit ``pages``, ``resources`` and ``widgets`` entries are
    ``module.path:ClassName`` targets.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(min_length=1)
    class_namespace: str = ""
    discovery: DiscoverySettings = Field(default_factory=DiscoverySettings)
    pages: list[str] = Field(default_factory=list)
    resources: list[str] = Field(default_factory=list)
    widgets: list[str] = Field(default_factory=list)
    auth: AuthSettings = Field(default_factory=AuthSettings)


def load_panel_settings(path: str | Path) -> PanelSettings:
    """Load and validate a panel settings YAML file.

    Raises:
        ConfigNotFoundError: If the file does not exist.
        ConfigError: If the YAML is malformed or fails validation.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigNotFoundError(config_path=str(path))

    content = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(message=f"Invalid YAML in panel settings file: {path}") from e

    if not isinstance(parsed, dict):
        raise ConfigError(message=f"Panel settings file must be a YAML mapping: {path}")

    try:
        return PanelSettings.model_validate(parsed)
    except ValidationError as e:
        raise ConfigError(
            message=f"Invalid panel settings in {path}: {e.error_count()} error(s)",
            details={"errors": e.errors(include_url=False)},
            cause=e,
        ) from e
