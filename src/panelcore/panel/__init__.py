"""panelcore panel: the host object that discovers and registers components.

Usage::

    from panelcore.panel import Panel
    from panelcore.runtime import ComponentTable

    panel = (
        Panel("admin")
        .login()
        .discover_resources(in_="app/admin/resources", for_="app.admin.resources")
        .discover_pages(in_="app/admin/pages", for_="app.admin.pages")
    )
    panel.boot(ComponentTable())
"""

from __future__ import annotations

from panelcore.panel.concerns import HasAuth, HasComponents
from panelcore.panel.panel import Panel

__all__ = ["HasAuth", "HasComponents", "Panel"]
