"""Tests for the directory scanner: scan_directory() and expand_directory()."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from panelcore.errors import ConfigNotFoundError
from panelcore.discovery.scanner import expand_directory, scan_directory


# === scan_directory() basic scanning ===


class TestScanDirectoryBasic:
    def test_empty_directory(self, tmp_path: Path) -> None:
        """Empty directory returns empty list."""
        assert scan_directory(tmp_path) == []

    def test_single_py_file(self, tmp_path: Path) -> None:
        """Single .py file returns one DiscoveredFile with correct fields."""
        (tmp_path / "dashboard.py").write_text("")
        result = scan_directory(tmp_path)
        assert len(result) == 1
        assert result[0].relative_id == "dashboard"
        assert result[0].file_path == tmp_path.resolve() / "dashboard.py"
        assert result[0].stem == "dashboard"

    def test_nested_directories(self, tmp_path: Path) -> None:
        """Nested directories generate dot-separated relative ids."""
        (tmp_path / "settings").mkdir()
        (tmp_path / "settings" / "edit_team.py").write_text("")
        result = scan_directory(tmp_path)
        assert [m.relative_id for m in result] == ["settings.edit_team"]

    def test_results_are_sorted(self, tmp_path: Path) -> None:
        """Files are returned in sorted path order regardless of creation order."""
        (tmp_path / "zeta.py").write_text("")
        (tmp_path / "alpha.py").write_text("")
        (tmp_path / "mid").mkdir()
        (tmp_path / "mid" / "beta.py").write_text("")
        result = scan_directory(tmp_path)
        assert [m.relative_id for m in result] == ["alpha", "mid.beta", "zeta"]

    def test_non_python_files_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "readme.md").write_text("")
        (tmp_path / "view.html").write_text("")
        assert scan_directory(tmp_path) == []

    def test_scanning_does_not_modify_directory(self, tmp_path: Path) -> None:
        (tmp_path / "a.py").write_text("x = 1")
        before = sorted(p.name for p in tmp_path.rglob("*"))
        scan_directory(tmp_path)
        assert sorted(p.name for p in tmp_path.rglob("*")) == before
        assert (tmp_path / "a.py").read_text() == "x = 1"


# === scan_directory() ignore patterns ===


class TestScanDirectoryIgnore:
    def test_underscore_prefix_skipped(self, tmp_path: Path) -> None:
        """Files starting with _ are skipped."""
        (tmp_path / "_helpers.py").write_text("")
        assert scan_directory(tmp_path) == []

    def test_init_py_skipped(self, tmp_path: Path) -> None:
        """__init__.py files are skipped (starts with _)."""
        (tmp_path / "__init__.py").write_text("")
        assert scan_directory(tmp_path) == []

    def test_dot_prefix_skipped(self, tmp_path: Path) -> None:
        (tmp_path / ".hidden.py").write_text("")
        assert scan_directory(tmp_path) == []

    def test_pycache_skipped(self, tmp_path: Path) -> None:
        (tmp_path / "__pycache__").mkdir()
        (tmp_path / "__pycache__" / "cached.py").write_text("")
        assert scan_directory(tmp_path) == []

    def test_pyc_files_skipped(self, tmp_path: Path) -> None:
        (tmp_path / "compiled.pyc").write_text("")
        assert scan_directory(tmp_path) == []


# === scan_directory() depth, symlinks and errors ===


class TestScanDirectoryDepthAndErrors:
    def test_max_depth_1(self, tmp_path: Path) -> None:
        """max_depth=1 only scans root level."""
        (tmp_path / "root_page.py").write_text("")
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "deep_page.py").write_text("")
        result = scan_directory(tmp_path, max_depth=1)
        assert {m.relative_id for m in result} == {"root_page"}

    def test_nonexistent_root_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigNotFoundError):
            scan_directory(tmp_path / "nonexistent")

    def test_permission_error_continues(self, tmp_path: Path) -> None:
        """PermissionError on subdirectory is caught, scanning continues."""
        (tmp_path / "good.py").write_text("")
        (tmp_path / "forbidden").mkdir()
        (tmp_path / "forbidden" / "secret.py").write_text("")

        original_scandir = os.scandir

        def mock_scandir(path):
            if str(path).endswith("forbidden"):
                raise PermissionError("Access denied")
            return original_scandir(path)

        with patch("os.scandir", side_effect=mock_scandir):
            result = scan_directory(tmp_path)

        ids = {m.relative_id for m in result}
        assert ids == {"good"}

    def test_follow_symlinks_false_skips(self, tmp_path: Path) -> None:
        real_dir = tmp_path / "real"
        real_dir.mkdir()
        (real_dir / "page.py").write_text("")
        (tmp_path / "link").symlink_to(real_dir)
        ids = {m.relative_id for m in scan_directory(tmp_path, follow_symlinks=False)}
        assert ids == {"real.page"}

    def test_follow_symlinks_true_follows(self, tmp_path: Path) -> None:
        real_dir = tmp_path / "real"
        real_dir.mkdir()
        (real_dir / "page.py").write_text("")
        (tmp_path / "link").symlink_to(real_dir)
        ids = {m.relative_id for m in scan_directory(tmp_path, follow_symlinks=True)}
        assert ids == {"real.page", "link.page"}

    def test_symlink_cycle_detected(self, tmp_path: Path) -> None:
        a_dir = tmp_path / "a"
        a_dir.mkdir()
        (a_dir / "page.py").write_text("")
        (a_dir / "loop").symlink_to(a_dir)
        ids = {m.relative_id for m in scan_directory(tmp_path, follow_symlinks=True)}
        assert "a.page" in ids


# === expand_directory() ===


class TestExpandDirectory:
    def test_plain_existing_directory(self, tmp_path: Path) -> None:
        roots = expand_directory(tmp_path)
        assert len(roots) == 1
        assert roots[0].path == tmp_path.resolve()
        assert roots[0].wildcard is None

    def test_plain_missing_directory_is_empty(self, tmp_path: Path) -> None:
        assert expand_directory(tmp_path / "missing") == []

    def test_plain_file_is_empty(self, tmp_path: Path) -> None:
        (tmp_path / "file.py").write_text("")
        assert expand_directory(tmp_path / "file.py") == []

    def test_wildcard_directory_segments(self, tmp_path: Path) -> None:
        """Each matched directory records the segment the wildcard matched."""
        for domain in ("billing", "crm"):
            (tmp_path / "domains" / domain / "pages").mkdir(parents=True)
        (tmp_path / "domains" / "empty").mkdir()

        roots = expand_directory(f"{tmp_path}/domains/*/pages")
        assert [(r.path.name, r.wildcard) for r in roots] == [
            ("pages", "billing"),
            ("pages", "crm"),
        ]

    def test_wildcard_with_prefix_and_suffix(self, tmp_path: Path) -> None:
        (tmp_path / "mod_sales_ui").mkdir()
        roots = expand_directory(f"{tmp_path}/mod_*_ui")
        assert [r.wildcard for r in roots] == ["sales"]

    def test_wildcard_matching_nothing_is_empty(self, tmp_path: Path) -> None:
        assert expand_directory(f"{tmp_path}/nothing/*/pages") == []

    def test_wildcard_skips_files(self, tmp_path: Path) -> None:
        (tmp_path / "domains").mkdir()
        (tmp_path / "domains" / "notes.txt").write_text("")
        (tmp_path / "domains" / "crm").mkdir()
        roots = expand_directory(f"{tmp_path}/domains/*")
        assert [r.wildcard for r in roots] == ["crm"]
