"""Module: rename_logic.py

Author: Michael Economou
Date: 2026-01-04

rename_logic.py
Low-level filesystem rename helpers.
Functions:
- is_case_only_change: Detect renames that only change letter case.
- is_same_file: Check whether two paths point at the same file on disk.
- safe_case_rename: Rename a file, working around case-insensitive filesystems.
"""

import os
import platform
import uuid

from casefix.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def is_case_only_change(old: str, new: str) -> bool:
    """Check if the only difference between old and new names is case."""
    return old.lower() == new.lower() and old != new


def is_same_file(src_path: str, dst_path: str) -> bool:
    """True if both paths exist and resolve to the same file.

    On case-insensitive filesystems "a.txt" and "A.txt" are the same file,
    which must not be reported as a conflict.
    """
    try:
        return os.path.samefile(src_path, dst_path)
    except OSError:
        return False


def safe_case_rename(src_path: str, dst_path: str) -> None:
    """Rename a file, using a two-step rename for case-only changes on Windows.

    NTFS is case-insensitive, so os.rename("file.txt", "FILE.TXT") may be a
    no-op there. The file is moved to a unique temporary name in the same
    directory first.

    Args:
        src_path: Source file path
        dst_path: Destination file path

    Raises:
        OSError: If the rename fails. The original name is restored when the
            failure happens after the temporary step.
    """
    src_dir = os.path.dirname(src_path)
    src_name = os.path.basename(src_path)
    dst_name = os.path.basename(dst_path)

    if not (is_case_only_change(src_name, dst_name) and platform.system() == "Windows"):
        os.rename(src_path, dst_path)
        return

    temp_path = os.path.join(src_dir, f"{src_name}.{uuid.uuid4().hex}.tmpcase")
    os.rename(src_path, temp_path)
    logger.debug("Case rename step 1: %s -> %s", src_name, os.path.basename(temp_path))

    try:
        os.rename(temp_path, dst_path)
    except OSError:
        logger.error("Case rename failed, restoring original name: %s", src_path)
        if os.path.exists(temp_path) and not os.path.exists(src_path):
            os.rename(temp_path, src_path)
        raise

    logger.debug("Case rename step 2: %s -> %s", os.path.basename(temp_path), dst_name)
