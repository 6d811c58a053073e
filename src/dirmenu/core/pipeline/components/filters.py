from __future__ import annotations

"""
File Filtering Engine.

Implements the regex-based inclusion and exclusion logic applied to file
and directory names during collection, and the extension stripping applied
to labels during rendering. All patterns are compiled case-insensitively.
"""

import re
from typing import Optional

# -----------------------------------------------------------------------------
# PATTERN COMPILATION
# -----------------------------------------------------------------------------

def compile_extension_filter(fragment: str) -> re.Pattern:
    """
    Compile an extension fragment into an end-anchored filename filter.

    The fragment is bracketed and must follow a literal dot, so 'html?'
    becomes \\.(html?)$.

    Args:
        fragment: Raw regex fragment describing accepted extensions.

    Returns:
        re.Pattern: Case-insensitive compiled filter.

    Raises:
        re.error: If the fragment is not a valid regular expression.
    """
    return re.compile(rf"\.({fragment})$", re.IGNORECASE)


def compile_exclusion(pattern: Optional[str]) -> Optional[re.Pattern]:
    """
    Compile an optional exclusion regex.

    Args:
        pattern: Raw regex string, or None/empty to disable exclusion.

    Returns:
        Optional[re.Pattern]: Case-insensitive compiled pattern or None.

    Raises:
        re.error: If the pattern is not a valid regular expression.
    """
    if not pattern:
        return None
    return re.compile(pattern, re.IGNORECASE)

# -----------------------------------------------------------------------------
# MATCHING
# -----------------------------------------------------------------------------

def matches_extension(name: str, extension_rx: re.Pattern) -> bool:
    """
    Verify if a filename ends with one of the accepted extensions.
    """
    return extension_rx.search(name) is not None


def is_excluded(name: str, exclusion_rx: Optional[re.Pattern]) -> bool:
    """
    Verify if a name is rejected by an exclusion pattern.

    Args:
        name: Filename or directory name to evaluate.
        exclusion_rx: Compiled exclusion pattern, or None.

    Returns:
        bool: True if the pattern exists and matches anywhere in the name.
    """
    if exclusion_rx is None:
        return False
    return exclusion_rx.search(name) is not None


def strip_extension(label: str, extension_rx: re.Pattern) -> str:
    """
    Remove a trailing accepted extension from a display label.

    Labels without a matching extension (e.g. extracted titles) are
    returned unchanged.
    """
    return extension_rx.sub("", label, count=1)
