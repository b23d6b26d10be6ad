"""
Line source - read the accepted lines of one input file.

Reads a text file line by line, drops empty lines silently and drops lines
that fail validation with a diagnostic naming the line and the file. A file
that cannot be opened or decoded is reported and contributes no lines; this
function never raises for unreadable input so a run always continues with
the remaining files.

PYTHON API
==========

    from text_sort_tools.source.line_source import read_lines

    lines = read_lines('InputText/words.txt')
    print(f"Accepted {len(lines)} lines")
"""

from typing import List

from ..diagnostics import log_error, log_progress
from ..validate.line_validator import is_acceptable


def read_lines(file_id: str, encoding: str = "utf-8", verbose: bool = False) -> List[str]:
    """
    Read the accepted lines of a file, in file order.

    Args:
        file_id: Path of the input file
        encoding: Text encoding of the file (default: utf-8)
        verbose: Print a per-file summary to stderr

    Returns:
        List of accepted lines without line terminators. Empty when the file
        cannot be opened or decoded.

    Example:
        >>> lines = read_lines('words.txt')
        >>> all(line.isalpha() for line in lines)
        True
    """
    accepted: List[str] = []
    rejected_count = 0

    try:
        # Only "\n" ends a line; a "\r" elsewhere stays part of the line
        with open(file_id, "r", encoding=encoding, newline="\n") as fh:
            for raw_line in fh:
                line = raw_line[:-1] if raw_line.endswith("\n") else raw_line
                if line.endswith("\r"):
                    line = line[:-1]

                # Skip empty lines
                if not line:
                    continue

                if not is_acceptable(line):
                    rejected_count += 1
                    log_error(f"special characters or numbers: {line} in file: {file_id}")
                    log_error(f"{line} has been removed")
                    continue

                accepted.append(line)
    except UnicodeDecodeError as e:
        log_error(f"Unable to decode file as {encoding}: {file_id}")
        log_progress(f"  Reason: {e}", verbose)
        return []
    except OSError as e:
        log_error(f"Unable to open file, please close input files: {file_id}")
        log_progress(f"  Reason: {e}", verbose)
        return []

    log_progress(
        f"# Read {file_id}: {len(accepted)} accepted, {rejected_count} rejected",
        verbose,
    )
    return accepted
