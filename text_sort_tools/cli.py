#!/usr/bin/env python3
"""
sort-text-lines - Validate, sort and write the lines of a folder of text files

Reads every file directly inside the input folder, keeps the purely
alphabetic lines and writes them sorted under three orderings, first with
sequential ingestion and then with concurrent ingestion (one thread per
file). Each run writes <Label>.txt to the output folder and prints its
CPU time in clock ticks.

COMMAND-LINE USAGE
==================

    # Default folders (../InputText -> ../OutputText), waits for Enter at the end
    sort-text-lines

    # Custom folders, no final wait (for scripts)
    sort-text-lines -i data/in -o data/out --no-wait

    # Only the three sequential runs
    sort-text-lines --no-concurrent --no-wait

    # Only the last-letter ordering, both strategies
    sort-text-lines --policy last-letter-asc --no-wait

    # Give up on concurrent reads that take longer than 30 seconds
    sort-text-lines --timeout 30 --no-wait

    # Skip backup files, show discovery and per-file statistics
    sort-text-lines --exclude '*.bak' -v

OUTPUT FILES
============

    AlphabeticalAscendingTextOutput.txt     MultiAscTextOutput.txt
    AlphabeticalDescendingTextOutput.txt    MultiDescTextOutput.txt
    LastLetterAscendingTextOutput.txt       MultiLastLetterTextOutput.txt

Exit codes: 0 on completion (rejected lines and unreadable files do not
change it), 1 on a missing input folder or a concurrent read timeout,
130 when interrupted.
"""

import argparse
import sys

from .diagnostics import log_error, log_info, log_success, log_warning
from .discovery import list_input_files
from .ingest.strategies import IngestionTimeoutError
from .runner import run_all
from .sort.ordering import parse_policy

DEFAULT_INPUT_DIR = "../InputText"
DEFAULT_OUTPUT_DIR = "../OutputText"


def wait_for_keypress() -> None:
    """Block until the user presses Enter (or stdin is closed)."""
    try:
        input()
    except EOFError:
        pass


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Validate, sort and write the lines of every file in a folder.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s
  %(prog)s -i data/in -o data/out --no-wait
  %(prog)s --no-concurrent --no-wait
  %(prog)s --timeout 30 --exclude '*.bak' -v
        """,
    )
    parser.add_argument(
        "-i",
        "--input-dir",
        default=DEFAULT_INPUT_DIR,
        help=f"Folder with the input text files (default: {DEFAULT_INPUT_DIR})",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        default=DEFAULT_OUTPUT_DIR,
        help=f"Folder receiving the sorted output files (default: {DEFAULT_OUTPUT_DIR})",
    )

    behavior_group = parser.add_argument_group("Behavior options")
    behavior_group.add_argument(
        "--no-concurrent",
        dest="concurrent",
        action="store_false",
        help="Skip the three concurrent ingestion runs",
    )
    behavior_group.add_argument(
        "--policy",
        action="append",
        dest="policies",
        type=parse_policy,
        metavar="POLICY",
        help="Only run this ordering policy: alph-asc, alph-desc or last-letter-asc "
        "(can be used multiple times; default: all three)",
    )
    behavior_group.add_argument(
        "--timeout",
        type=float,
        default=None,
        metavar="SECONDS",
        help="Abort when concurrent reads take longer than this (default: wait forever)",
    )
    behavior_group.add_argument(
        "--exclude",
        action="append",
        dest="exclude_patterns",
        metavar="PATTERN",
        help="Exclude input files matching glob pattern (can be used multiple times)",
    )
    behavior_group.add_argument(
        "--no-wait",
        dest="wait",
        action="store_false",
        help="Exit immediately instead of waiting for Enter",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Print discovery and per-file statistics"
    )

    return parser.parse_args(argv)


def main(argv=None):
    """
    Command-line interface.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    args = parse_args(argv)

    try:
        files = list_input_files(args.input_dir, args.exclude_patterns, verbose=args.verbose)
        if not files:
            log_warning(f"No input files found in {args.input_dir}")
        elif args.verbose:
            log_info(f"Found {len(files)} input files in {args.input_dir}")

        reports = run_all(
            files,
            args.output_dir,
            concurrent_enabled=args.concurrent,
            policies=args.policies,
            timeout=args.timeout,
            verbose=args.verbose,
        )
        if args.verbose:
            log_success(f"{len(reports)} runs written to {args.output_dir}")

        print("\nDone...")
        if args.wait:
            wait_for_keypress()

    except FileNotFoundError as e:
        log_error(str(e))
        return 1
    except IngestionTimeoutError as e:
        log_error(f"Concurrent ingestion timed out: {e}")
        return 1
    except KeyboardInterrupt:
        print("", file=sys.stderr)
        log_warning("Interrupted by user")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
