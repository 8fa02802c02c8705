"""
L1 Domain — locating extension files in an unpacked artifact.

Two strategies, tried in order, first non-empty result wins:

    1. conventional layout   lib/*.so, extension/*.control, extension/*.sql
    2. recursive search      **/*.so, ... anywhere under the root

Archives with or without the canonical layout both install.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

from pgext_install.core.models.plan import FileCategory
from pgext_install.core.services.ext_install.data.constants import SEARCH_PATTERNS

SearchStrategy = Callable[[Path, str, str], list[Path]]


def conventional_subdir(root: Path, subdir: str, pattern: str) -> list[Path]:
    """Files matching ``pattern`` directly inside ``root/subdir``."""
    directory = root / subdir
    if not directory.is_dir():
        return []
    return sorted(p for p in directory.glob(pattern) if p.is_file())


def recursive_extension(root: Path, subdir: str, pattern: str) -> list[Path]:
    """Files matching ``pattern`` anywhere under ``root``."""
    return sorted(p for p in root.rglob(pattern) if p.is_file())


DEFAULT_STRATEGIES: tuple[SearchStrategy, ...] = (conventional_subdir, recursive_extension)


def find_files(
    root: Path,
    category: FileCategory,
    strategies: Sequence[SearchStrategy] = DEFAULT_STRATEGIES,
) -> list[Path]:
    """Locate files of one category, trying each strategy in turn."""
    subdir, pattern = SEARCH_PATTERNS[category]
    for strategy in strategies:
        found = strategy(root, subdir, pattern)
        if found:
            return found
    return []
