"""Mixins composed into Panel."""

from __future__ import annotations

from panelcore.panel.concerns.has_auth import HasAuth
from panelcore.panel.concerns.has_components import HasComponents

__all__ = ["HasAuth", "HasComponents"]
