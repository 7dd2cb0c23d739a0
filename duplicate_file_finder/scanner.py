"""
Scanner interface for the Duplicate File Finder.

Only the contract lives here. A scanner receives a validated Runner and
returns groups of paths whose contents are identical. The Runner guarantees
the root directory existed when it was validated, not that it still exists
or stays unchanged for the length of a scan, so implementations must
handle the root disappearing (raise OSError) themselves.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .models import Runner


@runtime_checkable
class DuplicateScanner(Protocol):
    """Finds files with identical content beneath a runner's root_dir."""

    def scan(self, runner: Runner) -> list[list[str]]:
        """
        Scan runner.root_dir for duplicate files.

        Args:
            runner: Validated runner configuration

        Returns:
            List of groups, each a list of two or more paths sharing
            identical content

        Raises:
            OSError: If the root directory can no longer be read
        """
        ...


__all__ = ['DuplicateScanner']
