"""
Data shapes for setting values.

Values are stored and returned verbatim as JSON-compatible data, so the keys
keep their wire spelling.
"""

from typing import List, TypedDict


class PathFragment(TypedDict):
    """One extension, filename or directory entry of a tracked list."""
    data: str
    caseSensitive: bool
    interchangeableSlashes: bool


class PathFragmentList(TypedDict):
    """
    A whitelist of fragments to track or a blacklist of fragments to ignore.

    A whitelist must name at least one fragment; an empty blacklist tracks
    everything.
    """
    whitelist: bool
    pathFragments: List[PathFragment]


EnableThumbnailCache = bool

PATH_FRAGMENT_LIST_SHAPE = (
    "{ whitelist: boolean; pathFragments: Array<{ data: string; "
    "caseSensitive: boolean; interchangeableSlashes: boolean }> }"
)
BOOLEAN_SHAPE = "boolean"
