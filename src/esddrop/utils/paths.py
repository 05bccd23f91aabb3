# src/esddrop/utils/paths.py
"""
paths – Small, centralized path helpers for esddrop.

Provides:
  • absolute(str)                  – absolute path without resolving links
  • list_files(dir, predicate)     – sorted, non-recursive regular files
  • is_valid_entry_name(str)       – filesystem entry-name check
"""

from __future__ import annotations

import os
from typing import Callable, List

# Portable superset of the characters Windows rejects in file names;
# POSIX only forbids '/' and NUL.
_INVALID_NAME_CHARS = frozenset('<>:"/\\|?*') | frozenset(chr(c) for c in range(32))


def absolute(path: str) -> str:
    """Return *path* made absolute and normalized (symlinks are kept)."""
    return os.path.abspath(path)


def list_files(directory: str, predicate: Callable[[str], bool]) -> List[str]:
    """Return absolute paths of regular files directly inside *directory*.

    Only base names accepted by *predicate* are kept. The result is sorted
    by name so the scan order does not depend on the filesystem.
    """
    out: List[str] = []
    with os.scandir(directory) as it:
        for entry in it:
            if entry.is_file() and predicate(entry.name):
                out.append(os.path.join(directory, entry.name))
    out.sort(key=os.path.basename)
    return out


def is_valid_entry_name(name: str) -> bool:
    """Return True if *name* can be used as a single directory entry."""
    if not name or name in (".", ".."):
        return False
    return not any(ch in _INVALID_NAME_CHARS for ch in name)
