"""Module: rename_result.py

Author: Michael Economou
Date: 2026-01-03

Result dataclasses for single-file rename attempts.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RenameStatus(Enum):
    """Outcome of one rename attempt."""

    RENAMED = "renamed"  # File was renamed on disk
    WOULD_RENAME = "would_rename"  # Dry run: rename computed, not applied
    UNCHANGED = "unchanged"  # New name equals the current name
    SKIPPED = "skipped"  # Not attempted (conflict, empty name)
    FAILED = "failed"  # The OS refused the rename


@dataclass
class RenameResult:
    """Result of a single file rename operation.

    Attributes:
        old_path: Original file path
        new_path: Target file path (empty if no name could be computed)
        status: What happened
        skip_reason: Reason for skipping (if applicable)
        error: Error message (if failed)
    """

    old_path: str
    new_path: str
    status: RenameStatus
    skip_reason: str | None = None
    error: str | None = None

    @property
    def success(self) -> bool:
        """True unless the rename was attempted and failed."""
        return self.status != RenameStatus.FAILED

    @property
    def changed(self) -> bool:
        """True if the file name was (or would be) changed."""
        return self.status in (RenameStatus.RENAMED, RenameStatus.WOULD_RENAME)
