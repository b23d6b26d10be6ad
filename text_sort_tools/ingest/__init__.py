"""Ingest module - Sequential and concurrent reading of input files."""

from .strategies import (
    IngestionTimeoutError,
    Strategy,
    ingest,
    ingest_concurrent,
    ingest_sequential,
)

__all__ = [
    "IngestionTimeoutError",
    "Strategy",
    "ingest",
    "ingest_concurrent",
    "ingest_sequential",
]
