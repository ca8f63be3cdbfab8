"""Permissive parsing of keystroke input into digit strings and counts."""

import re

_NON_DIGITS = re.compile(r"[^0-9]")


def only_digits(value) -> str:
    """Strip every non-digit character. None becomes an empty string."""
    if value is None:
        return ""
    return _NON_DIGITS.sub("", str(value))


def parse_count(value, minimum: int = 0) -> int:
    """Parse a digit string into an int; empty or invalid input counts as 0.

    The result is floored at ``minimum``.
    """
    digits = only_digits(value)
    count = int(digits) if digits else 0
    return max(count, minimum)
