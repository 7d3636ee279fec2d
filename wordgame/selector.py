"""
selector.py

Deterministic target selection from a numeric seed.

    index = (seed mod n) * MULTIPLIER mod n

Plain `seed mod n` would make consecutive seeds pick neighbouring words, so
the reduced seed is scattered with a large odd multiplier. How evenly it
scatters for a given n is measured by wordgame.entropy.
"""

import time


MULTIPLIER = 4611686018453

# Seeds must fit a signed 64-bit integer
MAX_SEED = 2**63 - 1


def selection_index(seed: int, n: int) -> int:
    """Index in [0, n) picked by `seed` for a list of length n."""
    if n <= 0:
        raise ValueError("cannot choose from an empty word list")
    return (seed % n) * MULTIPLIER % n


def choose_word(words, seed: int) -> str:
    """Pick the word at the seed's selection index."""
    return words[selection_index(seed, len(words))]


def parse_seed(text: str) -> int:
    """
    Parse a seed given on the command line.

    Only decimal digits are accepted, so signs, spaces and empty strings
    are rejected, as are values above MAX_SEED.
    """
    if not text or not all("0" <= ch <= "9" for ch in text):
        raise ValueError(f"seed must be a non-negative integer: {text!r}")

    seed = int(text)
    if seed > MAX_SEED:
        raise ValueError(f"seed is too large: {text}")

    return seed


def default_seed() -> int:
    """Seed used when none is supplied: the current Unix time."""
    return int(time.time())
