"""
game.py

One game of word guessing: a sorted word store, a target, and the count of
valid guesses so far. Reading input and printing output belong to the
caller; this module only decides what a submitted line means.
"""

import logging
from dataclasses import dataclass

from wordgame.errors import InvalidGuess
from wordgame.patterns import Tile, encode_pattern, evaluate
from wordgame.validation import is_valid_word


logger = logging.getLogger(__name__)

QUIT_TOKEN = "quit"


def _strip_line(raw: str) -> str:
    return raw.rstrip("\r\n")


def is_quit(raw: str) -> bool:
    """True if the line asks to end the game."""
    return _strip_line(raw) == QUIT_TOKEN


@dataclass(frozen=True)
class Guess:
    word: str
    tiles: tuple[Tile, ...]
    solved: bool


class GameSession:
    """
    State of a single game.

    The store must be sorted before the session is created, since every
    guess is checked against it with a binary search.
    """

    def __init__(self, store, target: str):
        if not store.sorted:
            raise RuntimeError("word store must be sorted before a game starts")

        self.store = store
        self.target = target
        self.guess_count = 0
        self.solved = False

    def submit(self, raw: str) -> Guess:
        """
        Score one line of player input.

        Raises:
            InvalidGuess: the line is not a word of the right shape, or is
                not on the word list. The guess is not counted.
        """
        if self.solved:
            raise RuntimeError("game is already solved")

        word = _strip_line(raw)
        if not is_valid_word(word, self.store.length):
            raise InvalidGuess(f"not a {self.store.length}-letter word: {word!r}")
        if not self.store.contains(word):
            raise InvalidGuess(f"not in the word list: {word}")

        self.guess_count += 1
        tiles = evaluate(word, self.target)
        self.solved = word == self.target

        logger.debug(
            "Guess %d: %s -> pattern %d", self.guess_count, word, encode_pattern(word, self.target)
        )
        return Guess(word=word, tiles=tiles, solved=self.solved)


def new_game(store, seed: int) -> GameSession:
    """
    Start a game on `store`.

    The target is chosen in the store's current order (ingestion order for
    a freshly loaded store), then the store is sorted for lookups if it is
    not already.
    """
    target = store.choose(seed)
    if not store.sorted:
        store.sort()

    logger.debug("New game with seed %d over %d words", seed, store.size())
    return GameSession(store, target)
