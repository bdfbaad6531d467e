"""
CLI package for pixelprint.

Provides the command-line interface for hashing images, comparing two
images and ranking a collection against a query image.

Public API:
- main: Entry point for CLI execution
- CLIOrchestrator: CLI workflow orchestration class
- print_hash_report: Function to display hash results
"""

from __future__ import annotations

from .orchestrator import CLIOrchestrator, setup_logging
from .arg_parser import create_parser, parse_arguments
from .reporting import print_hash_report, print_comparison, print_ranking


def main(argv=None) -> int:
    """
    Main entry point for the CLI.

    Delegates to CLIOrchestrator to execute the complete workflow.

    Args:
        argv: Argument list (default: sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    orchestrator = CLIOrchestrator(argv)
    return orchestrator.run()


__all__ = [
    # Main entry point
    'main',
    # Core classes
    'CLIOrchestrator',
    # Utilities
    'setup_logging',
    'create_parser',
    'parse_arguments',
    'print_hash_report',
    'print_comparison',
    'print_ranking',
]
