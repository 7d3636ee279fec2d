"""
ordering.py

Sorts a word list and rejects duplicates.

This runs once, after ingestion and before any lookup. A duplicate word
means the source file is corrupt, so it is reported rather than collapsed.

Merge sort halves the list on every call, so recursion depth is bounded by
ceil(log2(WORD_LIMIT)) = 17 for the largest allowed store.
"""

import logging

from wordgame.errors import InvalidWordFile


logger = logging.getLogger(__name__)


def _merge(left, right):
    """Merge two sorted lists. Ties take the left head first."""
    merged = []
    i = j = 0

    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1

    # One side is exhausted; the other is already in order
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(words: list[str]) -> list[str]:
    """
    Return a new list with `words` in ascending lexicographic order.

    The list is split at mid = n // 2 (the left half gets `mid` words),
    each half is sorted recursively, and the halves are merged.
    """
    n = len(words)
    if n <= 1:
        return list(words)

    mid = n // 2
    return _merge(merge_sort(words[:mid]), merge_sort(words[mid:]))


def sort_and_dedupe(words: list[str]) -> list[str]:
    """
    Sort `words` and check that no word appears twice.

    Raises:
        InvalidWordFile: if two neighbours in sorted order are equal.
    """
    ordered = merge_sort(words)

    for prev, cur in zip(ordered, ordered[1:]):
        if prev == cur:
            raise InvalidWordFile(f"duplicate word in list: {cur}")

    logger.debug("Sorted %d words, no duplicates", len(ordered))
    return ordered
