"""Shared fixtures: on-disk component packages and a fresh component table."""

from __future__ import annotations

import importlib
import sys
import textwrap
import uuid
from pathlib import Path
from typing import Iterator

import pytest

from panelcore.runtime import ComponentTable


class ComponentTree:
    """An importable package written under tmp_path.

    Each tree gets a unique package name so modules cached in sys.modules
    by one test never leak into another.
    """

    def __init__(self, base: Path) -> None:
        self.name = f"app_{uuid.uuid4().hex[:8]}"
        self.base = base
        self.root = base / self.name
        self.root.mkdir()
        (self.root / "__init__.py").write_text("")

    def write(self, relative_path: str, source: str = "") -> Path:
        """Write a module at relative_path, creating packages along the way."""
        path = self.root / relative_path
        current = self.root
        for part in Path(relative_path).parts[:-1]:
            current = current / part
            current.mkdir(exist_ok=True)
            init = current / "__init__.py"
            if not init.exists():
                init.write_text("")
        path.write_text(textwrap.dedent(source))
        importlib.invalidate_caches()
        return path

    def dir(self, relative: str = "") -> str:
        return str(self.root / relative) if relative else str(self.root)

    def ns(self, relative: str = "") -> str:
        return f"{self.name}.{relative}" if relative else self.name

    def cleanup(self) -> None:
        for module_name in list(sys.modules):
            if module_name == self.name or module_name.startswith(self.name + "."):
                del sys.modules[module_name]


@pytest.fixture
def component_tree(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[ComponentTree]:
    """An empty importable package on sys.path."""
    monkeypatch.syspath_prepend(str(tmp_path))
    tree = ComponentTree(tmp_path)
    yield tree
    tree.cleanup()


@pytest.fixture
def table() -> ComponentTable:
    return ComponentTable()

