"""
display.py

Colours a scored guess for the terminal with ANSI escape sequences.
"""

from wordgame.patterns import Tile


GREEN = "\033[32m"
YELLOW = "\033[33m"
DEFAULT = "\033[0m"

TILE_COLORS = {
    Tile.EXACT: GREEN,
    Tile.ELSEWHERE: YELLOW,
    Tile.ABSENT: DEFAULT,
}


def render_guess(guess: str, tiles) -> str:
    """
    Return `guess` with each letter coloured by its tile.

    Output starts in the default colour and an escape sequence is only
    written when the colour changes, so "abcde" scored all-absent comes back
    unchanged. The result always ends in the default colour.
    """
    parts = []
    current = DEFAULT

    for letter, tile in zip(guess, tiles):
        color = TILE_COLORS[tile]
        if color != current:
            parts.append(color)
            current = color
        parts.append(letter)

    if current != DEFAULT:
        parts.append(DEFAULT)

    return "".join(parts)
