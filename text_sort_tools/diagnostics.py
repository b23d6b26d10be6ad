"""
Diagnostic output helpers shared by every text-sort-tools component.

All messages go to stderr so that sorted output and diagnostics never mix.
Each helper looks up ``sys.stderr`` at call time, which keeps the output
capturable from tests and safe to call from ingestion worker threads.
"""

import sys

# ANSI color codes for terminal output
BLUE = "\033[0;34m"
GREEN = "\033[0;32m"
YELLOW = "\033[1;33m"
RED = "\033[0;31m"
NC = "\033[0m"  # No Color


def log_info(message: str) -> None:
    """Print info message in blue."""
    print(f"{BLUE}[INFO]{NC} {message}", file=sys.stderr)


def log_success(message: str) -> None:
    """Print success message in green."""
    print(f"{GREEN}[SUCCESS]{NC} {message}", file=sys.stderr)


def log_warning(message: str) -> None:
    """Print warning message in yellow."""
    print(f"{YELLOW}[WARNING]{NC} {message}", file=sys.stderr)


def log_error(message: str) -> None:
    """Print error message in red."""
    print(f"{RED}[ERROR]{NC} {message}", file=sys.stderr)


def log_progress(message: str, verbose: bool = False) -> None:
    """
    Log progress message to stderr if verbose is enabled.

    Args:
        message: Message to log
        verbose: Whether to output the message
    """
    if verbose:
        print(message, file=sys.stderr)
