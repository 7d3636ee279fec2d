import pytest

from wordgame.errors import InvalidGuess
from wordgame.game import GameSession, is_quit, new_game
from wordgame.patterns import Tile
from wordgame.words import WordStore


WORDS = ["slate", "crane", "adieu", "speed", "sheep"]


@pytest.fixture
def store():
    s = WordStore()
    s.ingest(WORDS)
    return s


def test_new_game_chooses_before_sorting(store):
    session = new_game(store, 1)
    assert session.target == "speed"
    assert store.sorted


def test_new_game_on_sorted_store(store):
    store.sort()
    assert new_game(store, 1).target == "slate"


def test_session_requires_sorted_store(store):
    with pytest.raises(RuntimeError):
        GameSession(store, "speed")


def test_wrong_guess_is_counted(store):
    session = new_game(store, 1)
    guess = session.submit("sheep\n")
    assert guess.word == "sheep"
    assert guess.tiles == (Tile.EXACT, Tile.ABSENT, Tile.EXACT, Tile.EXACT, Tile.ELSEWHERE)
    assert not guess.solved
    assert session.guess_count == 1


@pytest.mark.parametrize("raw", ["abc\n", "zzzzz\n", "CRANE\n", "cr4ne\n", "\n", "crane \n"])
def test_invalid_guess_is_not_counted(store, raw):
    session = new_game(store, 1)
    with pytest.raises(InvalidGuess):
        session.submit(raw)
    assert session.guess_count == 0


def test_solving(store):
    session = new_game(store, 1)
    session.submit("crane\n")
    guess = session.submit("speed\r\n")
    assert guess.solved
    assert guess.tiles == (Tile.EXACT,) * 5
    assert session.solved
    assert session.guess_count == 2

    with pytest.raises(RuntimeError):
        session.submit("speed\n")


def test_is_quit():
    assert is_quit("quit\n")
    assert is_quit("quit\r\n")
    assert is_quit("quit")
    assert not is_quit("quits\n")
    assert not is_quit("QUIT\n")
