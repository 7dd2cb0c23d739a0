"""
Data models for Duplicate File Finder.

Contains the validated runner configuration and the error kinds that can
be produced while building one from command-line arguments.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Sequence, Union

from .config import (
    EXIT_INSUFFICIENT_ARGUMENTS,
    EXIT_TOO_MANY_ARGUMENTS,
    EXIT_INVALID_FILE_PATH,
    EXIT_NOT_A_DIRECTORY,
    MESSAGE_INSUFFICIENT_ARGUMENTS,
    MESSAGE_TOO_MANY_ARGUMENTS,
    MESSAGE_INVALID_FILE_PATH,
    MESSAGE_NOT_A_DIRECTORY,
)


class FromArgsError(Enum):
    """
    Reason a runner could not be created from command-line arguments.

    Exactly one member is produced per failed validation. Members are
    returned as values, never raised.
    """
    INSUFFICIENT_ARGUMENTS = "insufficient_arguments"
    TOO_MANY_ARGUMENTS = "too_many_arguments"
    INVALID_FILE_PATH = "invalid_file_path"
    NOT_A_DIRECTORY = "not_a_directory"

    @property
    def message(self) -> str:
        """Human-readable diagnostic for this error."""
        return _MESSAGES[self]

    @property
    def exit_code(self) -> int:
        """Process exit code a CLI should use for this error."""
        return _EXIT_CODES[self]


_MESSAGES = {
    FromArgsError.INSUFFICIENT_ARGUMENTS: MESSAGE_INSUFFICIENT_ARGUMENTS,
    FromArgsError.TOO_MANY_ARGUMENTS: MESSAGE_TOO_MANY_ARGUMENTS,
    FromArgsError.INVALID_FILE_PATH: MESSAGE_INVALID_FILE_PATH,
    FromArgsError.NOT_A_DIRECTORY: MESSAGE_NOT_A_DIRECTORY,
}

_EXIT_CODES = {
    FromArgsError.INSUFFICIENT_ARGUMENTS: EXIT_INSUFFICIENT_ARGUMENTS,
    FromArgsError.TOO_MANY_ARGUMENTS: EXIT_TOO_MANY_ARGUMENTS,
    FromArgsError.INVALID_FILE_PATH: EXIT_INVALID_FILE_PATH,
    FromArgsError.NOT_A_DIRECTORY: EXIT_NOT_A_DIRECTORY,
}


# Marks a root_dir that runner.from_args has already stat-ed
_VALIDATED = object()


class InvalidRunnerError(ValueError):
    """Raised when a Runner is constructed directly with a non-directory path."""

    def __init__(self, root_dir: str, error: FromArgsError):
        self.root_dir = root_dir
        self.error = error
        super().__init__(f"{error.message}: {root_dir!r}")


@dataclass(frozen=True)
class Runner:
    """
    Validated configuration for a duplicate scan.

    A Runner can only exist if root_dir referred to an existing directory
    when it was constructed. from_args is the normal way to get one; direct
    construction (including dataclasses.replace) checks the path itself and
    raises InvalidRunnerError on failure.

    Attributes:
        root_dir: Directory to scan, exactly as given on the command line.
            Relative paths are interpreted against the current working
            directory. The directory existed when the runner was built;
            nothing guarantees it still does later.
    """
    root_dir: str
    _validated: object = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        token = self._validated
        # Never stored, so dataclasses.replace cannot carry it over
        object.__setattr__(self, '_validated', None)
        if token is _VALIDATED:
            return

        from .utils.validators import validate_root_directory
        error = validate_root_directory(self.root_dir)
        if error is not None:
            raise InvalidRunnerError(self.root_dir, error)

    @classmethod
    def _from_validated(cls, root_dir: str) -> 'Runner':
        """Build a Runner for a path the caller has just validated."""
        return cls(root_dir, _VALIDATED)

    @property
    def root_path(self) -> Path:
        """Return root_dir as a Path."""
        return Path(self.root_dir)

    @classmethod
    def from_args(cls, args: Sequence[str]) -> Union['Runner', FromArgsError]:
        """Build a runner from a full argument list. See runner.from_args."""
        from .runner import from_args
        return from_args(args)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {'root_dir': self.root_dir}


__all__ = ['FromArgsError', 'InvalidRunnerError', 'Runner']
