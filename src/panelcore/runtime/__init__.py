"""View runtime collaborators: component naming and the component table."""

from __future__ import annotations

from panelcore.runtime.naming import ComponentRegistry, class_path, kebab_case
from panelcore.runtime.table import TABLE_EVENTS, ComponentTable

__all__ = [
    "TABLE_EVENTS",
    "ComponentRegistry",
    "ComponentTable",
    "class_path",
    "kebab_case",
]
