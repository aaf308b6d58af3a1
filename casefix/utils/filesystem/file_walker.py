"""Module: file_walker.py

Author: Michael Economou
Date: 2026-01-04

file_walker.py
Collects the files to rename under a path.

Depth is counted from 1: the root directory and the files directly inside it
are at depth 1, a subdirectory of the root and its files at depth 2, and so on.
Hidden directories are pruned with their whole subtree and hidden files are
ignored. A hidden root directory is skipped as a whole; a file named
explicitly is processed even if hidden.
"""

import os
from collections.abc import Iterator

from casefix.utils.filesystem.hidden_files import is_hidden_file
from casefix.utils.logging.logger_factory import get_cached_logger
from casefix.utils.logging.logger_helper import colorize

logger = get_cached_logger(__name__)


def calculate_depth(root: str, directory: str) -> int:
    """Depth of a directory relative to the walk root (root is depth 1).

    Examples:
        >>> calculate_depth("/data/root", "/data/root/sub/deeper")
        3
    """
    relative = os.path.relpath(os.path.normpath(directory), os.path.normpath(root))
    if relative == os.curdir:
        return 1
    return len(relative.split(os.sep)) + 1


def _log_walk_error(error: OSError) -> None:
    logger.error("Cannot read %s: %s", error.filename, error.strerror or error)


def iter_target_files(root: str, max_depth: int) -> Iterator[str]:
    """Yield the files under root that are eligible for renaming.

    Args:
        root: Directory to walk.
        max_depth: Deepest directory level whose files are yielded (>= 1).

    Yields:
        str: Absolute file paths, sorted within each directory.
    """
    root = os.path.abspath(root)

    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        depth = calculate_depth(root, dirpath)

        # Prune in place so os.walk does not descend
        dirnames[:] = sorted(
            name
            for name in dirnames
            if depth + 1 <= max_depth and not is_hidden_file(name, os.path.join(dirpath, name))
        )

        for filename in sorted(filenames):
            file_path = os.path.join(dirpath, filename)
            if is_hidden_file(filename, file_path):
                logger.debug("Ignoring hidden file: %s", file_path, extra={"dev_only": True})
                continue
            yield file_path


def collect_target_files(path: str, max_depth: int) -> list[str]:
    """Resolve a CLI path into the list of files to rename.

    A file path is returned as-is (even if hidden, since it was named
    explicitly). A directory is walked unless it is hidden itself, in which
    case nothing is collected.

    Raises:
        FileNotFoundError: If the path does not exist.
    """
    path = os.path.abspath(path)

    if os.path.isdir(path):
        if is_hidden_file(os.path.basename(path), path):
            logger.warning("Skipping hidden directory: %s", path)
            return []
        logger.info('Reading files in "%s"', colorize(path, "yellow"))
        return list(iter_target_files(path, max_depth))

    if os.path.exists(path):
        return [path]

    raise FileNotFoundError(f"No such file or directory: {path}")
