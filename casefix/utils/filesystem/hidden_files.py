"""Module: hidden_files.py

Author: Michael Economou
Date: 2026-01-04

Hidden file detection.

Dot-prefixed names are hidden everywhere. On Windows, entries carrying the
FILE_ATTRIBUTE_HIDDEN attribute are hidden too.
"""

import os
import stat

from casefix.config import HIDDEN_FILE_PREFIX


def has_hidden_attribute(path: str) -> bool:
    """True if the filesystem marks the path hidden (Windows only)."""
    try:
        attributes = os.stat(path, follow_symlinks=False).st_file_attributes
    except (AttributeError, OSError):
        return False
    return bool(attributes & stat.FILE_ATTRIBUTE_HIDDEN)


def is_hidden_file(name: str, path: str | None = None) -> bool:
    """Check whether a file or directory is hidden.

    Args:
        name: Base name of the entry.
        path: Full path, used for the Windows attribute check (optional).

    Returns:
        bool: True if the entry is hidden.
    """
    if name.startswith(HIDDEN_FILE_PREFIX):
        return True
    return path is not None and has_hidden_attribute(path)
