"""
Filename and path fragment validation.

Decides whether a single string is a legal filename (or, when subdirectories
are allowed, a relative directory path) under POSIX or Windows-compatible
rules. Windows rules are enabled on win32 or through the
ENFORCE_WINDOWS_FILENAMES environment variable, and can be forced on or off
per call so results do not depend on the host.
"""

import sys
from typing import Any, Optional, Set

from nettag.constants import ENV_ENFORCE_WINDOWS_FILENAMES
from nettag.outils.helpers import parse_env

RESERVED_NAMES = frozenset({"", ".", ".."})

WINDOWS_FORBIDDEN_CHARS = frozenset('<>:"|?*') | frozenset(chr(i) for i in range(1, 32))
WINDOWS_FORBIDDEN_SUFFIXES = frozenset({".", " "})


def windows_rules_enforced() -> bool:
    """True on Windows, or when ENFORCE_WINDOWS_FILENAMES is set to JSON true."""
    return sys.platform == "win32" or parse_env(ENV_ENFORCE_WINDOWS_FILENAMES) is True


def forbidden_characters(
    allow_subdirectory: bool = False,
    interchangeable_slashes: bool = True,
    enforce_windows_rules: bool = False,
) -> Set[str]:
    """Characters that may not appear anywhere in a candidate under the given rules."""
    forbidden = {"\0"}

    if not allow_subdirectory:
        # '/' is a directory separator on all systems
        forbidden.add("/")
        # Block '\' together with '/' when the two are meant to be equivalent
        if enforce_windows_rules or interchangeable_slashes:
            forbidden.add("\\")

    if enforce_windows_rules:
        forbidden |= WINDOWS_FORBIDDEN_CHARS

    return forbidden


def path_separators(interchangeable_slashes: bool = True, enforce_windows_rules: bool = False) -> Set[str]:
    """Characters acting as directory separators under the given rules."""
    separators = {"/"}
    if enforce_windows_rules or interchangeable_slashes:
        separators.add("\\")
    return separators


def is_valid_filename(
    candidate: Any,
    allow_subdirectory: bool = False,
    interchangeable_slashes: bool = True,
    enforce_windows_rules: Optional[bool] = None,
) -> bool:
    """
    Test whether a string is a legal filename.

    Always forbidden: NUL, and the names "", "." and "..". A trailing
    directory separator is rejected even when subdirectories are allowed.

    Without ``allow_subdirectory`` '/' is forbidden, and so is '\\' when
    Windows rules apply or slashes are interchangeable.

    Under Windows rules ``<>:"|?*`` and control codes 1-31 are forbidden,
    and the name may not end in '.' or a space.

    Suffix rules apply to the whole string, not to each path segment.

    Args:
        candidate: String to test; anything else is invalid
        allow_subdirectory: Whether slashes are legal path separators
        interchangeable_slashes: Whether '/' and '\\' denote the same separator
        enforce_windows_rules: Force Windows rules on or off; None resolves
            them from the platform and environment

    Returns:
        True if valid, False otherwise
    """
    if not isinstance(candidate, str) or candidate in RESERVED_NAMES:
        return False

    if enforce_windows_rules is None:
        enforce_windows_rules = windows_rules_enforced()

    forbidden = forbidden_characters(allow_subdirectory, interchangeable_slashes, enforce_windows_rules)
    if any(char in forbidden for char in candidate):
        return False

    last_char = candidate[-1]
    if enforce_windows_rules and last_char in WINDOWS_FORBIDDEN_SUFFIXES:
        return False

    if last_char in path_separators(interchangeable_slashes, enforce_windows_rules):
        return False

    return True


def has_traversal_sequences(candidate: str, check_windows_style: bool = True) -> bool:
    """
    Test whether a string contains './' or '../' (and optionally '.\\' or '..\\').

    No decoding is performed, so percent-encoded sequences such as
    '%2e%2e%2f' are not detected. Decode before calling if that matters.
    """
    # '../' contains './', so the shorter sequence covers both
    if "./" in candidate:
        return True
    return check_windows_style and ".\\" in candidate
