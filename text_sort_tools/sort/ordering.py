"""
Ordering policies used by the merge sort.

Each policy is a predicate ``is_first_before(first, second)`` that answers
whether ``first`` should be placed before ``second`` in the sorted output.
Comparison is by raw code point, so uppercase letters sort before lowercase
letters ("Apple" < "Banana" < "apple").

Policies:
    alph-asc          Alphabetical ascending. On a common prefix the shorter
                      string comes first.
    alph-desc         Alphabetical descending. On a common prefix the longer
                      string comes first.
    last-letter-asc   Ascending by last character, then the one before it, and
                      so on. A string whose characters run out first comes
                      first ("at" before "cat").
"""

from enum import Enum
from typing import Callable, Dict, Union

from ..diagnostics import log_warning

Comparator = Callable[[str, str], bool]


class OrderingPolicy(Enum):
    """Closed set of ordering policies understood by the sort engine."""

    ALPHABETICAL_ASCENDING = "alph-asc"
    ALPHABETICAL_DESCENDING = "alph-desc"
    LAST_LETTER_ASCENDING = "last-letter-asc"


def alphabetical_ascending(first: str, second: str) -> bool:
    """Smaller code point at the first difference wins; a strict prefix wins."""
    return first < second


def alphabetical_descending(first: str, second: str) -> bool:
    """Larger code point at the first difference wins; the longer string wins."""
    return first > second


def last_letter_ascending(first: str, second: str) -> bool:
    """
    Compare from the end of both strings towards the start.

    The first differing character decides, smaller code point first. When one
    string is exhausted before a difference is found it goes first, which
    includes the case of two identical strings.
    """
    for ch_first, ch_second in zip(reversed(first), reversed(second)):
        if ch_first != ch_second:
            return ch_first < ch_second
    return len(first) <= len(second)


COMPARATORS: Dict[OrderingPolicy, Comparator] = {
    OrderingPolicy.ALPHABETICAL_ASCENDING: alphabetical_ascending,
    OrderingPolicy.ALPHABETICAL_DESCENDING: alphabetical_descending,
    OrderingPolicy.LAST_LETTER_ASCENDING: last_letter_ascending,
}

DEFAULT_POLICY = OrderingPolicy.ALPHABETICAL_ASCENDING


def comparator_for(policy: OrderingPolicy) -> Comparator:
    """
    Return the comparator of a policy.

    An unknown policy value is reported as a warning and resolved to
    alphabetical ascending instead of aborting the run.

    Args:
        policy: Ordering policy selected for the run

    Returns:
        Predicate answering whether its first argument sorts first
    """
    comparator = COMPARATORS.get(policy) if isinstance(policy, OrderingPolicy) else None
    if comparator is None:
        log_warning(f"Unknown sort type {policy!r}, defaulting to alphabetical ascending")
        return COMPARATORS[DEFAULT_POLICY]
    return comparator


def parse_policy(name: Union[str, OrderingPolicy]) -> OrderingPolicy:
    """
    Resolve a policy from its value ("alph-asc") or member name
    ("ALPHABETICAL_ASCENDING"), ignoring case.

    Raises:
        ValueError: If the name matches no policy
    """
    if isinstance(name, OrderingPolicy):
        return name

    normalized = name.strip().lower()
    for policy in OrderingPolicy:
        if normalized in (policy.value, policy.name.lower()):
            return policy

    valid = ", ".join(p.value for p in OrderingPolicy)
    raise ValueError(f"Unknown ordering policy: {name} (expected one of: {valid})")
