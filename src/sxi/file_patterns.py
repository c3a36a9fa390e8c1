"""Expansion of command-line file patterns into document paths."""

from __future__ import annotations

import fnmatch
import logging
import os
from collections.abc import Iterator
from pathlib import Path

logger = logging.getLogger(__name__)

# Directories never searched by a recursive pattern
IGNORED_DIRS = {".git", "node_modules", "__pycache__"}


def should_skip_directory(dirname: str) -> bool:
    """Return True if a recursive search should not descend into ``dirname``."""
    return dirname.startswith(".") or dirname in IGNORED_DIRS


def iter_files(pattern: str, recursive: bool = False, temp_suffix: str = ".tmp") -> Iterator[Path]:
    """Yield the absolute paths of the files matching a pattern.

    Args:
        pattern: A file name, optionally with a directory part, whose name may
            contain ``*`` and ``?`` wildcards. Without a directory part the
            current directory is searched.
        recursive: Also search every subdirectory of the pattern's directory.
        temp_suffix: Scratch files ending with this suffix are never returned.

    Yields:
        Matching file paths, sorted within each directory.
    """
    pattern_path = Path(pattern)
    folder = pattern_path.parent.absolute()
    name_pattern = pattern_path.name

    if not folder.is_dir():
        logger.warning(f"Directory not found: {folder}")
        return

    for dirpath, dirnames, filenames in os.walk(folder):
        dirnames[:] = sorted(d for d in dirnames if not should_skip_directory(d))
        for filename in sorted(filenames):
            if filename.endswith(temp_suffix):
                continue
            if fnmatch.fnmatch(filename, name_pattern):
                yield Path(dirpath) / filename
        if not recursive:
            break
