"""Longest common prefix of a collection of strings."""

from __future__ import annotations

from typing import Iterable

__all__ = ["common_prefix"]


def common_prefix(strings: Iterable[str]) -> str:
    """Return the longest prefix shared by every string.

    Raises ValueError when ``strings`` is empty.
    """
    items = list(strings)
    if not items:
        raise ValueError("common_prefix() needs at least one string")
    shortest = min(items, key=len)
    for index, char in enumerate(shortest):
        if any(item[index] != char for item in items):
            return shortest[:index]
    return shortest