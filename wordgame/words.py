"""
words.py

Handles loading and holding the word list.

A word file holds one word per line, each exactly WORD_LEN lowercase
letters followed by a line feed (the last line may omit it). Anything else
makes the whole file invalid.
"""

import logging
from pathlib import Path

from wordgame.errors import InvalidWordFile
from wordgame.lookup import contains
from wordgame.ordering import sort_and_dedupe
from wordgame.selector import choose_word
from wordgame.validation import WORD_LEN, is_valid_word


logger = logging.getLogger(__name__)

# Maximum number of words in one list
WORD_LIMIT = 100000

INITIAL_CAPACITY = 10


def read_words(text: str, length: int = WORD_LEN):
    """
    Yield the words of a word file's contents, checking every line.

    Raises:
        InvalidWordFile: for an empty file, a blank line, or any line that
            is not exactly `length` letters a-z.
    """
    lines = text.split("\n")

    # A terminator on the last line does not start another word
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()

    for lineno, line in enumerate(lines, start=1):
        if not is_valid_word(line, length):
            raise InvalidWordFile(f"line {lineno}: not a {length}-letter word: {line!r}")
        yield line


class WordStore:
    """
    The list of candidate words for one game.

    Words keep insertion order until sort() is called. After that the list
    is ascending and duplicate-free, and membership tests are allowed.
    """

    def __init__(self, limit: int = WORD_LIMIT, length: int = WORD_LEN):
        self.limit = limit
        self.length = length
        self.capacity = min(INITIAL_CAPACITY, limit)
        self.sorted = False
        self._words: list[str] = []

    def _grow(self):
        # Double, or go straight to the limit past the halfway mark
        if self.capacity > self.limit // 2:
            self.capacity = self.limit
        else:
            self.capacity *= 2

    def ingest(self, source):
        """
        Append every word from `source`, an iterable of strings.

        Raises:
            InvalidWordFile: if a word has the wrong shape or the store
                would hold more than `limit` words.
        """
        for word in source:
            if not is_valid_word(word, self.length):
                raise InvalidWordFile(f"not a {self.length}-letter word: {word!r}")

            if len(self._words) == self.limit:
                raise InvalidWordFile(f"word list holds more than {self.limit} words")

            if len(self._words) == self.capacity:
                self._grow()

            self._words.append(word)
            self.sorted = False

    def size(self) -> int:
        return len(self._words)

    def get(self, index: int) -> str:
        if not 0 <= index < len(self._words):
            raise IndexError(f"word index out of range: {index}")
        return self._words[index]

    def sort(self):
        """Sort the words and reject duplicates (InvalidWordFile)."""
        self._words = sort_and_dedupe(self._words)
        self.sorted = True

    def contains(self, word: str) -> bool:
        """Binary search for `word`; the store must be sorted first."""
        if not self.sorted:
            raise RuntimeError("word store must be sorted before lookups")
        return contains(self._words, word)

    def choose(self, seed: int) -> str:
        """Pick a word deterministically from `seed`, in the current order."""
        return choose_word(self._words, seed)

    def words(self) -> tuple[str, ...]:
        return tuple(self._words)

    def __len__(self):
        return self.size()

    def __getitem__(self, index):
        return self.get(index)

    def __contains__(self, word):
        return self.contains(word)


def load_words(path, limit: int = WORD_LIMIT, length: int = WORD_LEN) -> WordStore:
    """
    Read a word file into a new, unsorted WordStore.

    OSError from opening the file is left to the caller.
    """
    path = Path(path)
    text = path.read_text(encoding="ascii", errors="replace")

    store = WordStore(limit=limit, length=length)
    store.ingest(read_words(text, length))

    logger.info("Loaded %s words from %s", store.size(), path)
    return store
