import pytest

from wordgame.selector import (
    MAX_SEED,
    MULTIPLIER,
    choose_word,
    default_seed,
    parse_seed,
    selection_index,
)


def test_multiplier_is_odd():
    assert MULTIPLIER % 2 == 1


def test_known_indices():
    # MULTIPLIER ends in 3 and 53
    assert selection_index(1, 10) == 3
    assert selection_index(4, 10) == 2
    assert selection_index(11, 10) == 3
    assert selection_index(1, 100) == 53
    assert selection_index(12345, 1) == 0


def test_choose_is_deterministic():
    words = ["crane", "slate", "adieu", "sheep", "speed", "zesty"]
    for seed in (0, 1, 7, 123456789, MAX_SEED):
        assert choose_word(words, seed) == choose_word(words, seed)
        assert choose_word(words, seed) in words


@pytest.mark.parametrize("n", range(2, 11))
def test_consecutive_seeds_spread(n):
    words = [f"w{i}" for i in range(n)]
    chosen = {choose_word(words, seed) for seed in range(n)}
    assert len(chosen) > 1


def test_empty_list_is_an_error():
    with pytest.raises(ValueError):
        choose_word([], 3)


def test_parse_seed():
    assert parse_seed("0") == 0
    assert parse_seed("0042") == 42
    assert parse_seed(str(MAX_SEED)) == MAX_SEED


@pytest.mark.parametrize("text", ["", "-1", "+5", "12x", " 7", "1.5", str(MAX_SEED + 1)])
def test_parse_seed_rejects(text):
    with pytest.raises(ValueError):
        parse_seed(text)


def test_default_seed_is_non_negative():
    assert 0 <= default_seed() <= MAX_SEED
