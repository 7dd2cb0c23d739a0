"""
Configuration constants for Duplicate File Finder.

This module contains all fixed settings including:
- Expected command-line arity
- Process exit codes for each validation outcome
- Diagnostic messages shown to the user
- Logging format for the CLI
"""

# Argument list shape: <program> <root-directory>
# Position 0 is always the executable path and is never user input
EXPECTED_ARG_COUNT = 2
ROOT_DIR_ARG_INDEX = 1

# Exit codes
# Each validation failure maps to its own non-zero code so callers and
# scripts can tell them apart without parsing messages
EXIT_SUCCESS = 0
EXIT_SCAN_FAILED = 1
EXIT_INSUFFICIENT_ARGUMENTS = 2
EXIT_TOO_MANY_ARGUMENTS = 3
EXIT_INVALID_FILE_PATH = 4
EXIT_NOT_A_DIRECTORY = 5

# Human-readable diagnostics, one per validation failure
MESSAGE_INSUFFICIENT_ARGUMENTS = "Missing argument: a root directory to scan is required"
MESSAGE_TOO_MANY_ARGUMENTS = "Too many arguments: exactly one root directory is accepted"
MESSAGE_INVALID_FILE_PATH = "Unknown path: the root directory does not exist or cannot be accessed"
MESSAGE_NOT_A_DIRECTORY = "Not a directory: the root path must refer to a directory"

USAGE_TEMPLATE = "Usage: {prog} <root-directory>"
DEFAULT_PROG_NAME = "duplicate-file-finder"
MODULE_PROG_NAME = "python -m duplicate_file_finder"

# CLI logging
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%H:%M:%S'
