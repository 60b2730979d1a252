"""Directory scanner for discovering component source files."""

from __future__ import annotations

import glob
import logging
import os
from pathlib import Path

from panelcore.errors import ConfigNotFoundError
from panelcore.discovery.types import DiscoveredFile, DiscoveryRoot

logger = logging.getLogger(__name__)

__all__ = ["expand_directory", "scan_directory"]

_SKIP_DIR_NAMES = {"__pycache__", "node_modules"}
_SKIP_FILE_SUFFIXES = {".pyc"}


def _wildcard_segment(pattern_part: str, concrete_part: str) -> str:
    prefix, _, suffix = pattern_part.partition("*")
    end = len(concrete_part) - len(suffix) if suffix else len(concrete_part)
    return concrete_part[len(prefix) : end]


def expand_directory(directory: str | Path) -> list[DiscoveryRoot]:
    """Resolve a configured directory, which may contain ``*``, to concrete roots.

    A plain directory that does not exist expands to nothing. A wildcard
    directory expands to every existing directory it matches, in sorted
    order, each tagged with the text the first ``*`` matched.
    """
    directory = str(directory)
    if "*" not in directory:
        path = Path(directory)
        if not path.is_dir():
            logger.debug("Discovery directory %s does not exist, skipping", path)
            return []
        return [DiscoveryRoot(path=path.resolve())]

    pattern_parts = Path(directory).parts
    wildcard_index = next(i for i, part in enumerate(pattern_parts) if "*" in part)

    roots: list[DiscoveryRoot] = []
    for match in sorted(glob.glob(directory)):
        match_path = Path(match)
        if not match_path.is_dir():
            continue
        match_parts = match_path.parts
        if len(match_parts) != len(pattern_parts):
            continue
        segment = _wildcard_segment(pattern_parts[wildcard_index], match_parts[wildcard_index])
        roots.append(DiscoveryRoot(path=match_path.resolve(), wildcard=segment))

    if not roots:
        logger.debug("Discovery pattern %s matched no directories", directory)
    return roots


def scan_directory(
    root: Path,
    max_depth: int = 8,
    follow_symlinks: bool = False,
) -> list[DiscoveredFile]:
    """Recursively scan a directory for Python component files.

    Entries are visited in sorted name order so repeated scans register
    components in the same order. Duplicate relative ids are kept; callers
    deduplicate when they read.
    """
    root = Path(root).resolve()
    if not root.exists():
        raise ConfigNotFoundError(config_path=str(root))

    visited_real_paths: set[Path] = {root}
    results: list[DiscoveredFile] = []

    def _scan_dir(dir_path: Path, depth: int) -> None:
        if depth > max_depth:
            logger.info("Max depth %d exceeded at %s, skipping", max_depth, dir_path)
            return

        try:
            entries = sorted(os.scandir(dir_path), key=lambda e: e.name)
        except PermissionError as e:
            logger.error("Permission denied scanning %s: %s", dir_path, e)
            return
        except OSError as e:
            logger.error("OS error scanning %s: %s", dir_path, e)
            return

        for entry in entries:
            name = entry.name
            if name.startswith(".") or name.startswith("_"):
                continue
            if name in _SKIP_DIR_NAMES:
                continue

            try:
                is_dir = entry.is_dir(follow_symlinks=follow_symlinks)
                is_file = entry.is_file(follow_symlinks=follow_symlinks)
                is_symlink = entry.is_symlink()
            except OSError as e:
                logger.error("OS error accessing %s: %s", entry.path, e)
                continue

            entry_path = Path(entry.path)

            if is_dir:
                if is_symlink:
                    if not follow_symlinks:
                        continue
                    real = entry_path.resolve()
                    if real in visited_real_paths:
                        logger.warning(
                            "Symlink cycle detected at %s -> %s, skipping",
                            entry_path,
                            real,
                        )
                        continue
                    visited_real_paths.add(real)
                _scan_dir(entry_path, depth + 1)
            elif is_file:
                suffix = Path(name).suffix
                if suffix in _SKIP_FILE_SUFFIXES or suffix != ".py":
                    continue

                rel = entry_path.relative_to(root)
                relative_id = ".".join(rel.with_suffix("").parts)
                results.append(DiscoveredFile(file_path=entry_path, relative_id=relative_id))

    _scan_dir(root, depth=1)
    return results
