"""
CLI workflow orchestration for the Duplicate File Finder.

Provides the CLIOrchestrator class that coordinates the CLI workflow from
argument validation through handing the validated runner to a scanner.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from ..config import (
    EXIT_SUCCESS,
    EXIT_SCAN_FAILED,
    LOG_FORMAT,
    LOG_DATE_FORMAT,
)
from ..models import Runner
from ..runner import from_args, is_error
from ..scanner import DuplicateScanner
from .reporting import print_validation_error, print_scan_summary


def setup_logging() -> logging.Logger:
    """
    Configure INFO-level logging for the CLI.

    Returns:
        Configured logger instance
    """
    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT
    )
    return logging.getLogger(__name__)


class CLIOrchestrator:
    """
    Orchestrates the CLI workflow.

    Validates the raw argument list into a Runner, reports validation
    failures with a distinct exit code per kind, and passes a valid Runner
    to the scanner when one is available.
    """

    def __init__(
        self,
        argv: Optional[Sequence[str]] = None,
        scanner: Optional[DuplicateScanner] = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            argv: Full argument list including program path (default: sys.argv)
            scanner: Scanner to run against the validated root, if any
        """
        self.argv = list(sys.argv if argv is None else argv)
        self.scanner = scanner
        self.logger = None
        self.runner: Optional[Runner] = None
        self.groups: list[list[str]] = []

    def run(self) -> int:
        """
        Execute the complete CLI workflow.

        Returns:
            Exit code (0 for success, non-zero for error)

        Workflow phases:
        1. Logging setup
        2. Argument validation
        3. Scan handoff
        """
        # Phase 1: Setup
        self._setup_phase()

        # Phase 2: Validation
        exit_code = self._validate_phase()
        if exit_code != EXIT_SUCCESS:
            return exit_code

        # Phase 3: Scanning
        return self._scan_phase()

    def _setup_phase(self) -> None:
        """Phase 1: Setup logging."""
        self.logger = setup_logging()

    def _validate_phase(self) -> int:
        """
        Phase 2: Validate arguments into a Runner.

        Returns:
            0 for success, the error's exit code otherwise
        """
        result = from_args(self.argv)

        if is_error(result):
            print_validation_error(result, self._prog_name(), self.logger)
            return result.exit_code

        self.runner = result
        self.logger.info(f"Root directory: {self.runner.root_dir}")
        return EXIT_SUCCESS

    def _scan_phase(self) -> int:
        """
        Phase 3: Hand the validated Runner to the scanner.

        Returns:
            0 for success, 1 if the scan could not read the root directory
        """
        if self.scanner is None:
            self.logger.info("No scanner available; validation only.")
            return EXIT_SUCCESS

        self.logger.info(f"Scanning {self.runner.root_dir} for duplicates...")
        try:
            self.groups = self.scanner.scan(self.runner)
        except OSError as e:
            # Root may have changed since validation
            self.logger.error(f"Scan failed: {e}")
            return EXIT_SCAN_FAILED

        print_scan_summary(self.groups, self.logger)
        return EXIT_SUCCESS

    def _prog_name(self) -> Optional[str]:
        return self.argv[0] if self.argv else None


__all__ = ['CLIOrchestrator', 'setup_logging']
