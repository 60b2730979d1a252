"""Discovery types: DiscoveredFile, DiscoveryRoot."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

__all__ = ["DiscoveredFile", "DiscoveryRoot"]


@dataclass
class DiscoveredFile:
    """A Python source file found under a discovery root.

    Attributes:
        file_path: Absolute path of the file.
        relative_id: Dotted path of the file relative to its root, without
            the ``.py`` suffix (``settings/edit_team.py`` -> ``settings.edit_team``).
    """

    file_path: Path
    relative_id: str

    @property
    def stem(self) -> str:
        return self.file_path.stem


@dataclass
class DiscoveryRoot:
    """A concrete directory to scan and the wildcard segment it matched.

    ``wildcard`` is None when the configured directory had no ``*``.
    """

    path: Path
    wildcard: str | None = None
