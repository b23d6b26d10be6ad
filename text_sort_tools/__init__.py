"""
Text Sort Tools

A Python package for sorting the lines of a folder of text files.
Validates lines, gathers them sequentially or with one thread per file,
merge sorts them under a selectable ordering policy and writes one output
file per run with its processing time.

Modules:
    validate: Line acceptance rules (alphabetic lines only)
    source: Reading accepted lines from a single file
    sort: Ordering policies and the merge sort engine
    ingest: Sequential and concurrent ingestion strategies
    runner: Timed ingest, sort and write runs
    cli: The sort-text-lines command
"""

__version__ = "1.0.0"

from .ingest.strategies import IngestionTimeoutError, Strategy, ingest
from .runner import RunReport, run_all, run_sort
from .sort.merge_sort import merge_sort
from .sort.ordering import OrderingPolicy
from .source.line_source import read_lines
from .validate.line_validator import is_acceptable

__all__ = [
    "is_acceptable",
    "read_lines",
    "merge_sort",
    "OrderingPolicy",
    "Strategy",
    "ingest",
    "IngestionTimeoutError",
    "run_sort",
    "run_all",
    "RunReport",
    "__version__",
]
