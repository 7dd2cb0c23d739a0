"""
Duplicate File Finder
=====================
Locates duplicate files beneath a root directory.

Features:
- Strict validation of the command line into a Runner configuration
- Distinct error kind and exit code for every rejection reason
- Scanner protocol for plugging in duplicate detection

Author: Zach
"""

__version__ = "0.1.0"
__author__ = "Zedidence"

from .models import FromArgsError, InvalidRunnerError, Runner
from .runner import from_args, is_error, is_runner
from .scanner import DuplicateScanner

__all__ = [
    "FromArgsError",
    "InvalidRunnerError",
    "Runner",
    "from_args",
    "is_error",
    "is_runner",
    "DuplicateScanner",
]
