"""
Report formatting and display for the CLI interface.

Provides functions to print validation failures and scan summaries in a
human-readable format.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

from ..config import USAGE_TEMPLATE, DEFAULT_PROG_NAME, MODULE_PROG_NAME
from ..models import FromArgsError


def format_usage(prog: Optional[str] = None) -> str:
    """
    Format the usage line.

    Args:
        prog: Program path as found in argv[0], if known

    Returns:
        Usage string naming the program by its base name

    Examples:
        >>> format_usage('/usr/bin/duplicate-file-finder')
        'Usage: duplicate-file-finder <root-directory>'
        >>> format_usage('/site-packages/duplicate_file_finder/__main__.py')
        'Usage: python -m duplicate_file_finder <root-directory>'
    """
    name = os.path.basename(prog) if prog else DEFAULT_PROG_NAME
    if name == "__main__.py":
        # Launched with python -m
        name = MODULE_PROG_NAME
    return USAGE_TEMPLATE.format(prog=name or DEFAULT_PROG_NAME)


def print_validation_error(
    error: FromArgsError,
    prog: Optional[str],
    logger: logging.Logger
) -> None:
    """
    Report a validation failure.

    Logs the error's diagnostic at ERROR level and prints the usage line to
    stderr.

    Args:
        error: The validation error to report
        prog: Program path from argv[0], if any
        logger: Logger instance
    """
    logger.error(error.message)
    print(format_usage(prog), file=sys.stderr)


def print_scan_summary(groups: list[list[str]], logger: logging.Logger) -> None:
    """
    Print groups returned by a scanner.

    Args:
        groups: Groups of paths with identical content
        logger: Logger instance
    """
    logger.info(f"Found {len(groups):,} duplicate groups")

    for i, group in enumerate(groups, 1):
        print(f"\nGroup {i} ({len(group)} files):")
        for path in group:
            print(f"  {path}")


__all__ = ['format_usage', 'print_validation_error', 'print_scan_summary']
