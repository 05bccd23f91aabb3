from __future__ import annotations
"""Suffix utilities for dropped file names.

Matching is performed with `str.endswith(...)` over the base name (not the
full path) and is case-sensitive, so multi-part tails such as
".talkesdbnd.dcx" work as expected:

    has_suffix("m10_00.talkesdbnd.dcx", BUNDLE_SUFFIXES)  -> True
    strip_marker("m10_00.talkesdbnd.dcx", ".talkesdbnd")  -> "m10_00"
"""

from typing import Sequence

from esddrop.constants import (
    ARCHIVE_SUFFIXES,
    BUNDLE_FAMILY_TAILS,
    BUNDLE_SUFFIXES,
    SCRIPT_SUFFIX,
)


def has_suffix(filename: str, suffixes: Sequence[str]) -> bool:
    """Return True if *filename* ends with any item in *suffixes*."""
    return any(filename.endswith(s) for s in suffixes)


def is_script(filename: str) -> bool:
    return filename.endswith(SCRIPT_SUFFIX)


def is_archive(filename: str) -> bool:
    return has_suffix(filename, ARCHIVE_SUFFIXES)


def is_bundle(filename: str) -> bool:
    return has_suffix(filename, BUNDLE_SUFFIXES)


def strip_marker(filename: str, marker: str) -> str:
    """Return the part of *filename* before the last occurrence of *marker*."""
    idx = filename.rfind(marker)
    return filename if idx < 0 else filename[:idx]


def matches_bundle_family(filename: str, prefix: str) -> bool:
    """Return True for names shaped like '<prefix>.*esdbnd' or '<prefix>.*esdbnd.dcx'."""
    head = f"{prefix}."
    if not filename.startswith(head):
        return False
    rest = filename[len(head):]
    return has_suffix(rest, BUNDLE_FAMILY_TAILS)
