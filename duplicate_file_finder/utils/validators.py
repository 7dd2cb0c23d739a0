"""
Input validation for the Duplicate File Finder.

Provides the individual checks applied to a raw argument list before a
runner is built: argument arity and the root directory itself.
"""

from __future__ import annotations

import os
import stat
from typing import Optional, Sequence

from ..config import EXPECTED_ARG_COUNT
from ..models import FromArgsError


def validate_argument_count(args: Sequence[str]) -> Optional[FromArgsError]:
    """
    Validate that exactly one positional argument follows the program path.

    Args:
        args: Full argument list, program path included

    Returns:
        None if the count is right, otherwise the matching error

    Examples:
        >>> validate_argument_count([])
        <FromArgsError.INSUFFICIENT_ARGUMENTS: 'insufficient_arguments'>
        >>> validate_argument_count(['prog', 'photos']) is None
        True
    """
    count = len(args)
    if count < EXPECTED_ARG_COUNT:
        return FromArgsError.INSUFFICIENT_ARGUMENTS
    if count > EXPECTED_ARG_COUNT:
        return FromArgsError.TOO_MANY_ARGUMENTS
    return None


def validate_root_directory(directory: str) -> Optional[FromArgsError]:
    """
    Validate that a path refers to an existing directory.

    Performs a single stat call, following symlinks. Any failure to read
    metadata (missing path, permission denied on a parent, broken link,
    malformed path) is reported as INVALID_FILE_PATH.

    Args:
        directory: Path to check, relative or absolute

    Returns:
        None if the path is a directory, otherwise the matching error

    Examples:
        >>> validate_root_directory('/nonexistent/directory')
        <FromArgsError.INVALID_FILE_PATH: 'invalid_file_path'>
    """
    try:
        st = os.stat(directory)
    except (OSError, ValueError):
        # ValueError covers embedded NUL bytes
        return FromArgsError.INVALID_FILE_PATH

    if not stat.S_ISDIR(st.st_mode):
        return FromArgsError.NOT_A_DIRECTORY

    return None


__all__ = [
    'validate_argument_count',
    'validate_root_directory',
]
