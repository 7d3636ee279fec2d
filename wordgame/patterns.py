"""
patterns.py

Scores a guess against the target word.

Each position gets one tile:

    0 = absent     (gray)
    1 = elsewhere  (yellow)
    2 = exact      (green)

Duplicate letters follow the standard rule: every letter in the target can
back at most one tile in the guess. A guess with three e's against a target
with one e shows at most one non-absent e.
"""

from enum import IntEnum


class Tile(IntEnum):
    ABSENT = 0
    ELSEWHERE = 1
    EXACT = 2


def evaluate(guess: str, target: str) -> tuple[Tile, ...]:
    """
    Classify every letter of `guess` against `target`.

    1. Mark exact matches. Each one consumes its target position.

    2. For every other guess letter, scan the target left to right for the
       first unconsumed position holding the same letter. If one is found it
       is consumed and the guess letter is marked elsewhere, otherwise absent.

    Example:
        >>> [t.name for t in evaluate("speed", "sheep")]
        ['EXACT', 'ELSEWHERE', 'EXACT', 'EXACT', 'ABSENT']
    """
    if len(guess) != len(target):
        raise ValueError(
            f"guess and target differ in length: {len(guess)} != {len(target)}"
        )

    n = len(target)
    result = [Tile.ABSENT] * n
    consumed = [False] * n

    # First pass: exact matches
    for i in range(n):
        if guess[i] == target[i]:
            result[i] = Tile.EXACT
            consumed[i] = True

    # Second pass: tie the remaining letters to unused target letters
    for i in range(n):
        if result[i] == Tile.EXACT:
            continue
        for j in range(n):
            if not consumed[j] and target[j] == guess[i]:
                consumed[j] = True
                result[i] = Tile.ELSEWHERE
                break

    return tuple(result)


def encode_pattern(guess: str, target: str) -> int:
    """
    Encode the classification of (guess, target) as a base-3 integer.

    The first position is the most significant digit, so a five-letter
    all-exact pattern is 3**5 - 1 = 242.
    """
    code = 0
    for tile in evaluate(guess, target):
        code = code * 3 + int(tile)

    return code
