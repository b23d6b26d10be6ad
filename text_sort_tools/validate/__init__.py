"""Validate module - Decide which input lines are eligible for sorting."""

from .line_validator import is_acceptable

__all__ = ["is_acceptable"]
