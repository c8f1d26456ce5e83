"""Small string helpers."""

from __future__ import annotations

from collections.abc import Iterable


def longest_common_prefix(strings: Iterable[str]) -> str:
    """Return the longest prefix shared by every string in ``strings``."""
    ordered = sorted(strings)
    if not ordered:
        return ""

    first, last = ordered[0], ordered[-1]
    prefix = []
    for a, b in zip(first, last):
        if a != b:
            break
        prefix.append(a)
    return "".join(prefix)


def reverse_string(s: str) -> str:
    """Return ``s`` with its characters in reverse order."""
    return s[::-1]