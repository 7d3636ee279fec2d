"""
errors.py

Error kinds raised by the word engine and the game session.
"""


class WordGameError(Exception):
    """Base class for all word game errors."""


class InvalidWordFile(WordGameError):
    """The word source is malformed, holds a duplicate, or is too large."""


class InvalidGuess(WordGameError):
    """A submitted guess is malformed or not on the word list."""
