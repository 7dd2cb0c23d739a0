"""
CLI package for the Duplicate File Finder.

Provides the command-line interface that validates the root directory
argument and hands it to a scanner.

Public API:
- main: Entry point for CLI execution
- CLIOrchestrator: CLI workflow orchestration class
- print_validation_error: Function to report a rejected argument list
"""

from __future__ import annotations

from typing import Optional, Sequence

from ..scanner import DuplicateScanner
from .orchestrator import CLIOrchestrator, setup_logging
from .reporting import format_usage, print_validation_error, print_scan_summary


def main(
    argv: Optional[Sequence[str]] = None,
    scanner: Optional[DuplicateScanner] = None,
) -> int:
    """
    Main entry point for the CLI.

    Delegates to CLIOrchestrator to execute the complete workflow.

    Args:
        argv: Full argument list including program path (default: sys.argv)
        scanner: Scanner to run once the root directory is validated

    Returns:
        Exit code (0 for success, non-zero for error)

    Examples:
        >>> # Called from __main__.py
        >>> exit_code = main()
        >>> sys.exit(exit_code)
    """
    orchestrator = CLIOrchestrator(argv=argv, scanner=scanner)
    return orchestrator.run()


__all__ = [
    # Main entry point
    'main',
    # Core classes
    'CLIOrchestrator',
    # Utilities
    'setup_logging',
    'format_usage',
    'print_validation_error',
    'print_scan_summary',
]
