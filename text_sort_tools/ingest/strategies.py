"""
Ingestion strategies - combine the accepted lines of many input files.

Two strategies produce the same combined collection:

    sequential   Read each file in discovery order, one after another.
    concurrent   Start one daemon read thread per file, block until
                 every task has completed, then join the per-file results in
                 original file order (never in completion order).

Each concurrent task owns its result list until the join; tasks share no
mutable buffers. The join waits without a limit by default, so a read that
never finishes blocks the whole run. Passing ``timeout`` turns that into an
IngestionTimeoutError naming the files still pending.

PYTHON API
==========

    from text_sort_tools.ingest import Strategy, ingest

    lines = ingest(['a.txt', 'b.txt'], Strategy.CONCURRENT)
"""

import threading
import time
from enum import Enum
from typing import List, Optional, Sequence

from ..diagnostics import log_progress
from ..source.line_source import read_lines


class Strategy(Enum):
    """How the lines of multiple files are gathered before sorting."""

    SEQUENTIAL = "sequential"
    CONCURRENT = "concurrent"


class IngestionTimeoutError(TimeoutError):
    """Raised when concurrent reads do not finish within the configured timeout."""

    def __init__(self, pending_files: Sequence[str], timeout: float):
        self.pending_files = list(pending_files)
        self.timeout = timeout
        super().__init__(
            f"{len(self.pending_files)} file read(s) still pending after {timeout}s: "
            + ", ".join(self.pending_files)
        )


def ingest_sequential(file_ids: Sequence[str], verbose: bool = False) -> List[str]:
    """
    Read files one after another and concatenate their accepted lines.

    Args:
        file_ids: Input file paths in discovery order
        verbose: Print per-file progress to stderr

    Returns:
        Combined accepted lines, file by file in the given order
    """
    combined: List[str] = []
    for file_id in file_ids:
        combined.extend(read_lines(file_id, verbose=verbose))
    return combined


def _read_into_slot(file_id: str, index: int, results: list, errors: list, verbose: bool) -> None:
    # Each worker writes only its own slot
    try:
        results[index] = read_lines(file_id, verbose=verbose)
    except BaseException as e:  # re-raised on the calling thread
        errors[index] = e


def ingest_concurrent(
    file_ids: Sequence[str],
    timeout: Optional[float] = None,
    verbose: bool = False,
) -> List[str]:
    """
    Read every file in its own task and join the results in file order.

    Workers are daemon threads, so a read still stuck after a timeout does
    not keep the interpreter alive at exit.

    Args:
        file_ids: Input file paths in discovery order
        timeout: Seconds to wait for all reads (default: wait forever)
        verbose: Print per-file progress to stderr

    Returns:
        Combined accepted lines, identical to ingest_sequential for the
        same input

    Raises:
        IngestionTimeoutError: If a timeout is given and some reads are
            still running when it expires
    """
    if not file_ids:
        return []

    results: List[Optional[List[str]]] = [None] * len(file_ids)
    errors: List[Optional[BaseException]] = [None] * len(file_ids)

    # One worker per input file
    workers = [
        threading.Thread(
            target=_read_into_slot,
            args=(file_id, index, results, errors, verbose),
            name=f"ingest-{index}",
            daemon=True,
        )
        for index, file_id in enumerate(file_ids)
    ]
    for worker in workers:
        worker.start()
    log_progress(f"[INGEST] Started {len(workers)} read tasks", verbose)

    # Block until every task has finished or the shared deadline passes
    deadline = None if timeout is None else time.monotonic() + timeout
    for worker in workers:
        if deadline is None:
            worker.join()
        else:
            worker.join(max(0.0, deadline - time.monotonic()))

    pending = [file_id for file_id, worker in zip(file_ids, workers) if worker.is_alive()]
    if pending:
        raise IngestionTimeoutError(pending, timeout)

    for error in errors:
        if error is not None:
            raise error

    # Join in original index order, not completion order
    combined: List[str] = []
    for lines in results:
        combined.extend(lines)
    return combined


def ingest(
    file_ids: Sequence[str],
    strategy: Strategy,
    timeout: Optional[float] = None,
    verbose: bool = False,
) -> List[str]:
    """
    Combine the accepted lines of all files using the selected strategy.

    Args:
        file_ids: Input file paths in discovery order
        strategy: Strategy.SEQUENTIAL or Strategy.CONCURRENT
        timeout: Join timeout for the concurrent strategy (ignored otherwise)
        verbose: Print progress to stderr
    """
    if strategy is Strategy.CONCURRENT:
        return ingest_concurrent(file_ids, timeout=timeout, verbose=verbose)
    return ingest_sequential(file_ids, verbose=verbose)
