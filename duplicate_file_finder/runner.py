"""
Runner construction from command-line arguments.

Turns the raw process argument list into a validated Runner, or into the
FromArgsError that explains why it could not.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence, Union

from .config import ROOT_DIR_ARG_INDEX
from .models import FromArgsError, Runner
from .utils.validators import validate_argument_count, validate_root_directory

logger = logging.getLogger(__name__)


def from_args(args: Sequence[str]) -> Union[Runner, FromArgsError]:
    """
    Build a Runner from a full argument list.

    Checks run in a fixed order and the first failure wins:
    too few arguments, too many arguments, unreadable path, not a
    directory.

    Args:
        args: Argument list shaped like sys.argv. Position 0 is the program
            path and is ignored; position 1 is the root directory.

    Returns:
        A Runner holding args[1] verbatim, or the FromArgsError describing
        the first failed check

    Notes:
        - Errors are returned, not raised
        - Exactly one stat call is made on success or path failure
        - The directory check is point-in-time; it may be removed or
          replaced before a scan reads it

    Examples:
        >>> from_args([])
        <FromArgsError.INSUFFICIENT_ARGUMENTS: 'insufficient_arguments'>
        >>> from_args(['prog', '/nonexistent'])
        <FromArgsError.INVALID_FILE_PATH: 'invalid_file_path'>
    """
    error = validate_argument_count(args)
    if error is not None:
        logger.debug(f"Rejected {len(args)} argument(s): {error.name}")
        return error

    root_dir = args[ROOT_DIR_ARG_INDEX]

    error = validate_root_directory(root_dir)
    if error is not None:
        logger.debug(f"Rejected root directory {root_dir!r}: {error.name}")
        return error

    logger.debug(f"Validated root directory: {root_dir}")
    return Runner._from_validated(root_dir)


def is_error(result: Any) -> bool:
    """Return True if a from_args result is a FromArgsError."""
    return isinstance(result, FromArgsError)


def is_runner(result: Any) -> bool:
    """Return True if a from_args result is a Runner."""
    return isinstance(result, Runner)


__all__ = ['from_args', 'is_error', 'is_runner']
