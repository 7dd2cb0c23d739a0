"""
Utilities package for the Duplicate File Finder.

Provides:
- validators: Argument and root directory checks
"""

from __future__ import annotations

from . import validators

from .validators import validate_argument_count, validate_root_directory

__all__ = [
    # Submodules
    'validators',
    # Validators
    'validate_argument_count',
    'validate_root_directory',
]
