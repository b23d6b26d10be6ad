"""
Merge sort over in-memory lines with a pluggable ordering policy.

The sequence is split recursively at ``mid = lower + (upper - lower) // 2``
until a range holds at most one element. Sorted halves are merged by
repeatedly taking the front of the lower half when the policy places it
first, otherwise the front of the upper half; once either half is exhausted
the remainder of the other one is appended unchanged.

Time Complexity: O(N log N) comparisons
Space Complexity: O(N) for the temporary halves
"""

from typing import List, Sequence

from .ordering import Comparator, OrderingPolicy, comparator_for


def _merge(lines: List[str], lower: int, mid: int, upper: int, is_first_before: Comparator):
    """Merge the sorted ranges [lower, mid] and [mid + 1, upper] in place."""
    lower_half = lines[lower : mid + 1]
    upper_half = lines[mid + 1 : upper + 1]

    i = j = 0
    k = lower
    while i < len(lower_half) and j < len(upper_half):
        if is_first_before(lower_half[i], upper_half[j]):
            lines[k] = lower_half[i]
            i += 1
        else:
            lines[k] = upper_half[j]
            j += 1
        k += 1

    # Only one of the halves still has elements
    for line in lower_half[i:]:
        lines[k] = line
        k += 1
    for line in upper_half[j:]:
        lines[k] = line
        k += 1


def _merge_sort(lines: List[str], lower: int, upper: int, is_first_before: Comparator):
    # A range of zero or one element is already sorted
    if lower < upper:
        mid = lower + (upper - lower) // 2
        _merge_sort(lines, lower, mid, is_first_before)
        _merge_sort(lines, mid + 1, upper, is_first_before)
        _merge(lines, lower, mid, upper, is_first_before)


def merge_sort(lines: Sequence[str], policy: OrderingPolicy) -> List[str]:
    """
    Sort lines according to an ordering policy.

    Args:
        lines: Lines to sort (left untouched)
        policy: Ordering policy; an unknown value falls back to
                alphabetical ascending with a warning

    Returns:
        New list with the same lines ordered by the policy

    Example:
        >>> merge_sort(["cat", "bat", "dog"], OrderingPolicy.LAST_LETTER_ASCENDING)
        ['dog', 'cat', 'bat']
    """
    is_first_before = comparator_for(policy)
    result = list(lines)
    _merge_sort(result, 0, len(result) - 1, is_first_before)
    return result
