"""panelcore component discovery.

Turns configured directory and namespace pairs into component classes.

Usage::

    from panelcore.discovery import expand_directory, scan_directory

    for root in expand_directory("app/domains/*/pages"):
        files = scan_directory(root.path)
"""

from __future__ import annotations

from panelcore.discovery.entry_point import derive_class_path, import_class, resolve_target, snake_to_pascal
from panelcore.discovery.scanner import expand_directory, scan_directory
from panelcore.discovery.types import DiscoveredFile, DiscoveryRoot

__all__ = [
    "DiscoveredFile",
    "DiscoveryRoot",
    "derive_class_path",
    "expand_directory",
    "import_class",
    "resolve_target",
    "scan_directory",
    "snake_to_pascal",
]
