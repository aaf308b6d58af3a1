#!/usr/bin/env python3
"""
Module: cli.py

Author: Michael Economou
Date: 2026-01-05

Command-line entry point for casefix.
It parses flags, validates them before anything is touched, sets up logging,
collects the target files and renames them into the requested case style.

Functions:
    parse_command_line_args: Build the argument parser and parse argv.
    validate_options: Reject bad flags with a ConfigurationError.
    main: Run the tool and return a process exit code.
"""

import argparse
import logging
import os
import sys

from casefix.config import (
    APP_DESCRIPTION,
    APP_NAME,
    APP_VERSION,
    DEFAULT_DEPTH,
    get_default_log_dir,
)
from casefix.models.case_style import CaseStyle
from casefix.models.rename_result import RenameStatus
from casefix.utils.filesystem.file_walker import collect_target_files
from casefix.utils.logging.logger_factory import get_cached_logger
from casefix.utils.logging.logger_setup import ConfigureLogger
from casefix.utils.naming.renamer import Renamer, summarize

logger = get_cached_logger(__name__)

# Exit codes
EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 2
EXIT_PATH_ERROR = 3
EXIT_RENAME_FAILURES = 4

PATH_USAGE = """The path to file or directory which has files need to be renamed. (required)
If path is a directory, every file, even files in sub directories, will also be renamed.
Use "-depth" to limit the depth."""

DEPTH_USAGE = """If path is a directory, all files within the depth will be renamed.
Depth is counted from 1. (default: %(default)s)"""

CASE_USAGE = """The case type which files will be renamed to. (required)
Supported types:
  title: This is an Example
  pascal: ThisIsAnExample
  camel: thisIsAnExample
  snake: this_is_an_example
  kebab: this-is-an-example
  pascal-snake: This_Is_An_Example
  pascal-kebab: This-Is-An-Example"""

DRY_RUN_USAGE = "Show file names after renaming, but do not rename any file."

KEEP_UPPER_USAGE = (
    'Words which are entirely uppercase are preserved, e.g. "GO is fun" -> "GO-is-fun".'
)


class ConfigurationError(Exception):
    """Raised when command-line options are invalid."""


def parse_command_line_args(args: list[str] | None = None) -> argparse.Namespace:
    """Create and configure the command line argument parser."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description=APP_DESCRIPTION,
        formatter_class=argparse.RawTextHelpFormatter,
        epilog="""
Examples:
  %(prog)s -path ./photos -case kebab
  %(prog)s -path "My File.TXT" -case snake -dry-run
  %(prog)s -path ./docs -case title -depth 2 -keep-upper
  %(prog)s -path="-draft notes.txt" -case kebab

A path starting with "-" must be given as -path=<value>.
        """,
    )
    parser.add_argument("-path", "--path", default="", help=PATH_USAGE)
    parser.add_argument("-depth", "--depth", type=int, default=DEFAULT_DEPTH, help=DEPTH_USAGE)
    parser.add_argument("-case", "--case", default="", help=CASE_USAGE)
    parser.add_argument(
        "-dry-run", "--dry-run", action="store_true", dest="dry_run", help=DRY_RUN_USAGE
    )
    parser.add_argument(
        "-keep-upper", "--keep-upper", action="store_true", dest="keep_upper",
        help=KEEP_UPPER_USAGE,
    )
    parser.add_argument(
        "-verbose", "--verbose", "-v", action="store_true", help="Enable debug output"
    )
    parser.add_argument(
        "-log-dir", "--log-dir", dest="log_dir", default=None,
        help="Directory for log files (default: user config directory)",
    )
    parser.add_argument(
        "-no-log-file", "--no-log-file", action="store_true", dest="no_log_file",
        help="Do not write log files",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")

    return parser.parse_args(args)


def validate_options(path: str, case: str, depth: int) -> CaseStyle:
    """Validate command-line options before any file is touched.

    Returns:
        CaseStyle: The parsed case style.

    Raises:
        ConfigurationError: If path is empty, case is unknown, or depth < 1.
    """
    if not path.strip():
        raise ConfigurationError("Invalid path")

    try:
        style = CaseStyle.parse(case)
    except ValueError as e:
        raise ConfigurationError(f"Invalid case type: {e}") from None

    if depth < 1:
        raise ConfigurationError("Depth needs to be positive number")

    return style


def setup_logging(parsed_args: argparse.Namespace) -> None:
    ConfigureLogger(
        log_name=APP_NAME,
        log_dir=parsed_args.log_dir or get_default_log_dir(),
        console_level=logging.DEBUG if parsed_args.verbose else None,
        file_enabled=not parsed_args.no_log_file,
    )


def log_summary(counts: dict[RenameStatus, int], dry_run: bool) -> None:
    changed = counts[RenameStatus.WOULD_RENAME] if dry_run else counts[RenameStatus.RENAMED]
    logger.info(
        "Done. %d file(s) %srenamed, %d unchanged, %d skipped, %d failed.",
        changed,
        "would be " if dry_run else "",
        counts[RenameStatus.UNCHANGED],
        counts[RenameStatus.SKIPPED],
        counts[RenameStatus.FAILED],
    )


def main(args: list[str] | None = None) -> int:
    """Rename files into the requested case style."""
    parsed_args = parse_command_line_args(args)

    try:
        setup_logging(parsed_args)
    except OSError as e:
        logger.critical("Cannot set up logging: %s", e)
        return EXIT_CONFIG_ERROR

    try:
        style = validate_options(parsed_args.path, parsed_args.case, parsed_args.depth)
    except ConfigurationError as e:
        logger.critical("%s", e)
        return EXIT_CONFIG_ERROR

    if parsed_args.dry_run:
        logger.info("Running in dry mode")

    root = os.path.abspath(parsed_args.path.strip())
    try:
        files = collect_target_files(root, parsed_args.depth)
    except OSError as e:
        logger.critical("%s", e)
        return EXIT_PATH_ERROR

    logger.debug("Found %d file(s) under %s", len(files), root)

    renamer = Renamer(style, keep_upper=parsed_args.keep_upper, dry_run=parsed_args.dry_run)
    counts = summarize(renamer.rename_all(files))
    log_summary(counts, parsed_args.dry_run)

    if counts[RenameStatus.FAILED]:
        return EXIT_RENAME_FAILURES
    return EXIT_SUCCESS


def main_entry() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    main_entry()
