"""
validation.py

Shape checks for words: exact length, lowercase a-z only.
List membership is the lookup engine's job, not this module's.
"""

from string import ascii_lowercase


WORD_LEN = 5
ALPHABET = frozenset(ascii_lowercase)


def is_valid_word(text: str, length: int = WORD_LEN) -> bool:
    """True if text is exactly `length` characters from a-z."""
    return len(text) == length and all(ch in ALPHABET for ch in text)
