"""
Unit tests for the individual argument validators.
"""

from duplicate_file_finder.models import FromArgsError
from duplicate_file_finder.utils.validators import (
    validate_argument_count,
    validate_root_directory,
)


class TestValidateArgumentCount:
    """Test validate_argument_count function."""

    def test_empty(self):
        assert validate_argument_count([]) == FromArgsError.INSUFFICIENT_ARGUMENTS

    def test_program_only(self):
        assert validate_argument_count(["prog"]) == FromArgsError.INSUFFICIENT_ARGUMENTS

    def test_exactly_one_positional(self):
        assert validate_argument_count(["prog", "dir"]) is None

    def test_two_positionals(self):
        assert validate_argument_count(["prog", "a", "b"]) == FromArgsError.TOO_MANY_ARGUMENTS

    def test_does_not_touch_filesystem(self):
        assert validate_argument_count(["prog", "/does/not/exist"]) is None


class TestValidateRootDirectory:
    """Test validate_root_directory function."""

    def test_directory(self, sample_paths):
        assert validate_root_directory(sample_paths['directory']) is None

    def test_file(self, sample_paths):
        assert validate_root_directory(sample_paths['file']) == FromArgsError.NOT_A_DIRECTORY

    def test_missing(self, sample_paths):
        assert validate_root_directory(sample_paths['missing']) == FromArgsError.INVALID_FILE_PATH

    def test_current_directory(self):
        assert validate_root_directory(".") is None
