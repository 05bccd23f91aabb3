"""
esddrop.utils – Small shared utilities (suffix matching, path helpers).
"""
from .paths import absolute, is_valid_entry_name, list_files
from .suffixes import has_suffix, is_archive, is_bundle, is_script, matches_bundle_family, strip_marker

__all__ = [
    "absolute",
    "is_valid_entry_name",
    "list_files",
    "has_suffix",
    "is_archive",
    "is_bundle",
    "is_script",
    "matches_bundle_family",
    "strip_marker",
]
