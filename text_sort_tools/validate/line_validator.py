"""
Line validation for the text sorter.

Only purely alphabetic lines take part in sorting. Digits, whitespace inside
the line, punctuation and any other symbol make a line unacceptable.

Classification is ASCII based: ``a``-``z`` and ``A``-``Z`` are the only accepted
characters, so accented or other non-ASCII letters are rejected as well.
"""

import string

ALLOWED_CHARACTERS = frozenset(string.ascii_letters)


def is_acceptable(line: str) -> bool:
    """
    Check whether a single line may be sorted.

    Args:
        line: Line content without its line terminator

    Returns:
        True if the line is non-empty and made only of alphabetic characters

    Examples:
        >>> is_acceptable("abcDEF")
        True
        >>> is_acceptable("abc123")
        False
        >>> is_acceptable("hello world")
        False
        >>> is_acceptable("")
        False
    """
    if not line:
        return False
    return all(ch in ALLOWED_CHARACTERS for ch in line)
