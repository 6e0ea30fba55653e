"""Splitting a run of work items into balanced contiguous pieces."""

from __future__ import annotations


def split_range(total: int, parts: int) -> list[range]:
    """Split ``range(total)`` into ``parts`` contiguous ranges.

    Sizes differ by at most one; the first ``total % parts`` ranges get the
    extra item.
    """
    if parts <= 0:
        raise ValueError("parts must be positive")
    if total < 0:
        raise ValueError("total must not be negative")

    base, remainder = divmod(total, parts)
    pieces = []
    for index in range(parts):
        start = index * base + min(index, remainder)
        size = base + (1 if index < remainder else 0)
        pieces.append(range(start, start + size))
    return pieces