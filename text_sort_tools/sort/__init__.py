"""Sort module - Merge sort with selectable ordering policies."""

from .merge_sort import merge_sort
from .ordering import OrderingPolicy, comparator_for, parse_policy

__all__ = ["merge_sort", "OrderingPolicy", "comparator_for", "parse_policy"]
