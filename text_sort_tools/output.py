"""
Output writer - persist one run's sorted lines and report its timing.

Each run is written to ``<output_dir>/<output_name>.txt``, one line per
record, truncating any earlier file of the same name.
"""

import os
import sys
from typing import Sequence


def write_and_report(
    lines: Sequence[str],
    output_name: str,
    clock_ticks: int,
    output_dir: str,
    buffer_size: int = 1024 * 1024,
) -> str:
    """
    Print the run timing to stderr and write the sorted lines.

    Args:
        lines: Sorted lines to write
        output_name: Run label, used as the output file name
        clock_ticks: CPU time taken by the run, in clock ticks
        output_dir: Directory for the output file (created if missing)
        buffer_size: Buffer size in bytes for the output file (default: 1MB)

    Returns:
        Path of the written file
    """
    print(f"\n{output_name}\t- Time Taken (clocks): {clock_ticks}", file=sys.stderr)

    os.makedirs(output_dir, exist_ok=True)
    file_path = os.path.join(output_dir, f"{output_name}.txt")

    with open(file_path, "w", encoding="utf-8", buffering=buffer_size) as out:
        for line in lines:
            out.write(line)
            out.write("\n")

    return file_path
