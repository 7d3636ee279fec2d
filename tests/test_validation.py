import pytest

from wordgame.validation import WORD_LEN, is_valid_word


@pytest.mark.parametrize("text", ["crane", "zzzzz", "aaaaa", "qxjvk"])
def test_accepts_exact_length_lowercase(text):
    # membership is not checked here, so nonsense words pass
    assert is_valid_word(text)


@pytest.mark.parametrize(
    "text",
    ["cat", "", "cranes", "cat3!", "Crane", "cr ne", "crane\n", "crané"],
)
def test_rejects_bad_shape(text):
    assert not is_valid_word(text)


def test_custom_length():
    assert is_valid_word("cat", length=3)
    assert not is_valid_word("crane", length=3)
    assert WORD_LEN == 5
