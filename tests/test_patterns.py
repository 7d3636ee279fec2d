from collections import Counter
from itertools import product

import pytest

from wordgame.patterns import Tile, encode_pattern, evaluate


A = Tile.ABSENT
Y = Tile.ELSEWHERE
G = Tile.EXACT


@pytest.mark.parametrize("word", ["crane", "sheep", "eerie", "aaaaa"])
def test_target_against_itself_is_all_exact(word):
    assert evaluate(word, word) == (G,) * 5


def test_sheep_speed():
    assert evaluate("speed", "sheep") == (G, Y, G, G, A)


def test_leftmost_unconsumed_letter_is_tied():
    # the e at position 2 claims target position 0
    assert evaluate("geese", "eerie") == (A, G, Y, A, G)


def test_repeated_guess_letter_with_single_target_letter():
    assert evaluate("eeeee", "abcde") == (A, A, A, A, G)
    assert evaluate("eeexx", "abcde") == (Y, A, A, A, A)


def test_exact_matches_consume_before_elsewhere():
    # both l's in the target are taken by exact matches
    assert evaluate("lolly", "hello") == (A, Y, G, G, A)


def test_no_common_letters():
    assert evaluate("crane", "ghost") == (A,) * 5


def test_non_absent_count_is_bounded_by_target():
    for guess, target in product(map("".join, product("abc", repeat=3)), repeat=2):
        tiles = evaluate(guess, target)
        marked = Counter(g for g, t in zip(guess, tiles) if t != A)
        target_counts = Counter(target)
        for letter, count in marked.items():
            assert count <= target_counts[letter], (guess, target, tiles)
        for i, t in enumerate(tiles):
            assert (t == G) == (guess[i] == target[i])


def test_length_mismatch():
    with pytest.raises(ValueError):
        evaluate("cat", "crane")


def test_encode_pattern():
    assert encode_pattern("crane", "crane") == 242
    assert encode_pattern("crane", "ghost") == 0
    assert encode_pattern("speed", "sheep") == 213
