"""
lookup.py

Membership test over a sorted word list.
"""


def contains(words, word: str) -> bool:
    """
    Binary search for `word` in `words`, which must be sorted ascending.

    O(log n) comparisons, constant extra space.
    """
    low = 0
    high = len(words) - 1

    while low <= high:
        mid = (low + high) // 2
        middle = words[mid]

        if middle == word:
            return True
        if middle > word:
            high = mid - 1
        else:
            low = mid + 1

    return False
