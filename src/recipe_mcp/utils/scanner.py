"""
Directory Scanner Module

Discovers markdown files below a catalog directory.

Both scanners are generator functions: every call walks the directory tree
again, so results always reflect the current state of the disk. Entries of a
directory are visited in lexicographic order of their names, depth first,
which makes "first match" resolution deterministic for a given tree.

A missing or unreadable directory contributes nothing; scanning never raises
for I/O errors.

Usage example:
    from recipe_mcp.utils.scanner import discover

    for path in discover(Path("./mains")):
        print(path)
"""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".md"


def _sorted_entries(directory: Path) -> list[os.DirEntry]:
    """List a directory sorted by entry name, or nothing if it can't be read."""
    try:
        with os.scandir(directory) as it:
            entries = list(it)
    except OSError as e:
        logger.debug("Skipping unreadable directory %s: %s", directory, e)
        return []
    return sorted(entries, key=lambda entry: entry.name)


def _is_file(entry: os.DirEntry) -> bool:
    try:
        return entry.is_file(follow_symlinks=False)
    except OSError:
        return False


def _is_dir(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


def discover(root: Path, extension: str = DEFAULT_EXTENSION) -> Iterator[Path]:
    """Recursively yield files under ``root`` whose name ends with ``extension``.

    Subdirectories are always descended into (e.g. grouped multi-part mains).
    Symbolic links are neither yielded nor followed.

    Args:
        root: Directory to scan
        extension: File name suffix to match

    Yields:
        Paths of matching files, depth first in name order
    """
    for entry in _sorted_entries(root):
        path = root / entry.name
        if _is_file(entry):
            if entry.name.endswith(extension):
                yield path
        elif _is_dir(entry):
            yield from discover(path, extension)


def discover_flat(root: Path, extension: str = DEFAULT_EXTENSION) -> Iterator[Path]:
    """Yield files directly inside ``root`` whose name ends with ``extension``."""
    for entry in _sorted_entries(root):
        if entry.name.endswith(extension) and _is_file(entry):
            yield root / entry.name
