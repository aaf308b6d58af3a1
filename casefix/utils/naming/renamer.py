"""Module: renamer.py

Author: Michael Economou
Date: 2026-01-04

Batch renaming engine: computes the new name of every file and applies it.

Files are processed one at a time. There is no rollback: if the process is
interrupted, files already renamed stay renamed and the rest are untouched.
"""

import os
from collections import Counter
from collections.abc import Iterable

from casefix.models.case_style import CaseStyle
from casefix.models.rename_result import RenameResult, RenameStatus
from casefix.modules.name_transform_module import NameTransformModule
from casefix.utils.logging.logger_factory import get_cached_logger
from casefix.utils.logging.logger_helper import colorize
from casefix.utils.naming.case_renderer import EmptyNameError
from casefix.utils.naming.rename_logic import (
    is_case_only_change,
    is_same_file,
    safe_case_rename,
)

logger = get_cached_logger(__name__)


def format_rename(directory: str, old_name: str, new_name: str) -> str:
    """Colored '"{dir}old" -> "new"' fragment used in rename reports."""
    return '"{%s}%s" -> "%s"' % (
        colorize(directory, "yellow"),
        colorize(old_name, "red"),
        colorize(new_name, "green"),
    )


class Renamer:
    """Renames files into a case style.

    Attributes:
        case: Target CaseStyle
        keep_upper: Preserve tokens that are entirely upper case
        dry_run: Compute and report renames without touching the filesystem
    """

    def __init__(
        self, case: CaseStyle | str, keep_upper: bool = False, dry_run: bool = False
    ) -> None:
        self.case = CaseStyle.parse(case)
        self.keep_upper = keep_upper
        self.dry_run = dry_run

    @property
    def transform_data(self) -> dict:
        return {"case": self.case, "keep_upper": self.keep_upper}

    def rename_file(self, path: str) -> RenameResult:
        """Rename a single file.

        Never raises for per-file problems; they are reported in the result.

        Args:
            path: Path of the file to rename.

        Returns:
            RenameResult: Outcome of the attempt.
        """
        parent, old_name = os.path.split(path)
        directory = os.path.join(parent, "") if parent else ""

        try:
            new_name = NameTransformModule.build_new_filename(old_name, self.transform_data)
        except EmptyNameError:
            logger.warning("Skipped (no words in name): %s", path)
            return RenameResult(path, "", RenameStatus.SKIPPED, skip_reason="no name tokens")

        new_path = os.path.join(parent, new_name)
        report = format_rename(directory, old_name, new_name)

        if new_name == old_name:
            logger.debug("Unchanged: %s", path)
            return RenameResult(path, new_path, RenameStatus.UNCHANGED)

        # A case-only rename on a case-insensitive filesystem points at itself
        same_file = is_case_only_change(old_name, new_name) and is_same_file(path, new_path)
        if os.path.lexists(new_path) and not same_file:
            logger.warning("Skipped (target exists): %s", report)
            return RenameResult(path, new_path, RenameStatus.SKIPPED, skip_reason="target exists")

        if self.dry_run:
            logger.info("Would rename: %s", report)
            return RenameResult(path, new_path, RenameStatus.WOULD_RENAME)

        try:
            safe_case_rename(path, new_path)
        except OSError as e:
            logger.error("Failed to rename %s: %s", report, e)
            return RenameResult(path, new_path, RenameStatus.FAILED, error=str(e))

        logger.info("Renamed: %s", report)
        return RenameResult(path, new_path, RenameStatus.RENAMED)

    def rename_all(self, paths: Iterable[str]) -> list[RenameResult]:
        """Rename every path in order and collect the results."""
        return [self.rename_file(path) for path in paths]


def summarize(results: Iterable[RenameResult]) -> dict[RenameStatus, int]:
    """Count results per status (every status present, zero if unseen)."""
    counts = Counter(result.status for result in results)
    return {status: counts.get(status, 0) for status in RenameStatus}
