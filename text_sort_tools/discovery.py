"""
Input discovery - enumerate the files to be sorted.

Every non-directory entry directly inside the input directory is an input
file. Subdirectories are not descended into. Paths are returned sorted so
that discovery order, and therefore the concatenation order used by both
ingestion strategies, is the same on every platform.
"""

import fnmatch
import os
from typing import List, Optional, Sequence, Tuple

from .diagnostics import log_progress


def should_exclude(filename: str, exclude_patterns: Optional[Sequence[str]]) -> Tuple[bool, Optional[str]]:
    """
    Check if a filename matches any exclusion pattern.

    Args:
        filename: Name of the file to check (only the basename is matched)
        exclude_patterns: Glob-style patterns to match against

    Returns:
        tuple: (should_exclude, matched_pattern). matched_pattern is None when
               the file is not excluded.
    """
    if not exclude_patterns:
        return False, None

    basename = os.path.basename(filename)
    for pattern in exclude_patterns:
        if fnmatch.fnmatch(basename, pattern):
            return True, pattern
    return False, None


def list_input_files(
    input_dir: str,
    exclude_patterns: Optional[Sequence[str]] = None,
    verbose: bool = False,
) -> List[str]:
    """
    List the input files of a directory.

    Args:
        input_dir: Directory holding the input text files
        exclude_patterns: Glob-style basename patterns to skip (optional)
        verbose: Print discovery details to stderr

    Returns:
        Sorted list of file paths (input_dir joined with each entry name)

    Raises:
        FileNotFoundError: If input_dir does not exist or is not a directory
    """
    if not os.path.isdir(input_dir):
        raise FileNotFoundError(f"Input directory not found: {input_dir}")

    log_progress(f"[DISCOVER] Scanning directory: {input_dir}", verbose)
    files = []
    excluded_count = 0

    with os.scandir(input_dir) as entries:
        for entry in entries:
            if entry.is_dir():
                continue

            excluded, pattern = should_exclude(entry.name, exclude_patterns)
            if excluded:
                excluded_count += 1
                log_progress(f"[EXCLUDE] {entry.name} (matches: {pattern})", verbose)
                continue

            log_progress(f"[INCLUDE] {entry.name}", verbose)
            files.append(os.path.join(input_dir, entry.name))

    files.sort()
    log_progress(
        f"[DISCOVER] Directory {input_dir}: {len(files)} included, {excluded_count} excluded",
        verbose,
    )
    return files
