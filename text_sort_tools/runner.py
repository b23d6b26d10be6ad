"""
Run orchestration - ingest, sort and write, once per (strategy, policy) pair.

A run records CPU and wall clocks, gathers the combined lines with the
selected ingestion strategy, sorts them with the selected ordering policy,
stops the clocks and hands the result to the output writer. Writing the
file is not part of the measured time.

run_all() performs the standard six runs:

    Strategy     Policy                   Output label
    ----------   ----------------------   ---------------------------------
    sequential   alphabetical ascending   AlphabeticalAscendingTextOutput
    sequential   alphabetical descending  AlphabeticalDescendingTextOutput
    sequential   last letter ascending    LastLetterAscendingTextOutput
    concurrent   alphabetical ascending   MultiAscTextOutput
    concurrent   alphabetical descending  MultiDescTextOutput
    concurrent   last letter ascending    MultiLastLetterTextOutput

The three concurrent runs are skipped when concurrency is disabled.
"""

import time
from typing import List, NamedTuple, Optional, Sequence

from .diagnostics import log_progress
from .ingest.strategies import Strategy, ingest
from .output import write_and_report
from .sort.merge_sort import merge_sort
from .sort.ordering import OrderingPolicy

# Ticks per second of the reported CPU time (POSIX clock() resolution)
CLOCKS_PER_SEC = 1_000_000


class RunReport(NamedTuple):
    """Outcome of a single ingest, sort and write cycle."""

    output_name: str
    policy: OrderingPolicy
    strategy: Strategy
    files_read: int
    lines_written: int
    output_path: str
    clock_ticks: int
    wall_seconds: float


RUN_PLAN = [
    (Strategy.SEQUENTIAL, OrderingPolicy.ALPHABETICAL_ASCENDING, "AlphabeticalAscendingTextOutput"),
    (Strategy.SEQUENTIAL, OrderingPolicy.ALPHABETICAL_DESCENDING, "AlphabeticalDescendingTextOutput"),
    (Strategy.SEQUENTIAL, OrderingPolicy.LAST_LETTER_ASCENDING, "LastLetterAscendingTextOutput"),
    (Strategy.CONCURRENT, OrderingPolicy.ALPHABETICAL_ASCENDING, "MultiAscTextOutput"),
    (Strategy.CONCURRENT, OrderingPolicy.ALPHABETICAL_DESCENDING, "MultiDescTextOutput"),
    (Strategy.CONCURRENT, OrderingPolicy.LAST_LETTER_ASCENDING, "MultiLastLetterTextOutput"),
]


def run_sort(
    file_ids: Sequence[str],
    policy: OrderingPolicy,
    output_name: str,
    strategy: Strategy,
    output_dir: str,
    timeout: Optional[float] = None,
    verbose: bool = False,
) -> RunReport:
    """
    Perform one run and write its output file.

    Args:
        file_ids: Input file paths in discovery order
        policy: Ordering policy for the sort
        output_name: Run label, also the output file name without extension
        strategy: Ingestion strategy
        output_dir: Directory receiving <output_name>.txt
        timeout: Join timeout for concurrent ingestion (default: none)
        verbose: Print progress to stderr

    Returns:
        RunReport describing the run

    Raises:
        IngestionTimeoutError: Only when a timeout is given and expires
    """
    log_progress(f"[RUN] {output_name}: {strategy.value} ingestion, {policy.value} order", verbose)

    cpu_start = time.process_time()
    wall_start = time.perf_counter()

    combined = ingest(file_ids, strategy, timeout=timeout, verbose=verbose)
    sorted_lines = merge_sort(combined, policy)

    wall_seconds = time.perf_counter() - wall_start
    clock_ticks = int((time.process_time() - cpu_start) * CLOCKS_PER_SEC)

    output_path = write_and_report(sorted_lines, output_name, clock_ticks, output_dir)
    log_progress(f"[RUN] {output_name}: {len(sorted_lines)} lines written to {output_path}", verbose)

    return RunReport(
        output_name=output_name,
        policy=policy,
        strategy=strategy,
        files_read=len(file_ids),
        lines_written=len(sorted_lines),
        output_path=output_path,
        clock_ticks=clock_ticks,
        wall_seconds=wall_seconds,
    )


def run_all(
    file_ids: Sequence[str],
    output_dir: str,
    concurrent_enabled: bool = True,
    policies: Optional[Sequence[OrderingPolicy]] = None,
    timeout: Optional[float] = None,
    verbose: bool = False,
) -> List[RunReport]:
    """
    Perform the standard runs over the same input files.

    Args:
        file_ids: Input file paths in discovery order
        output_dir: Directory receiving one output file per run
        concurrent_enabled: Also perform the three concurrent runs
        policies: Restrict the runs to these policies (default: all three)
        timeout: Join timeout for concurrent ingestion (default: none)
        verbose: Print progress to stderr

    Returns:
        One RunReport per performed run, in execution order
    """
    reports = []
    for strategy, policy, output_name in RUN_PLAN:
        if strategy is Strategy.CONCURRENT and not concurrent_enabled:
            continue
        if policies is not None and policy not in policies:
            continue
        reports.append(
            run_sort(
                file_ids,
                policy,
                output_name,
                strategy,
                output_dir,
                timeout=timeout,
                verbose=verbose,
            )
        )
    return reports
