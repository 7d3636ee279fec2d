"""
wordle.py

Command-line word guessing game.

usage: wordle <word-list-file> [seed-number]

word-list-file: one lowercase 5-letter word per line.
seed-number: picks the target word; defaults to the current time.

Optional:
-log-level LEVEL: diagnostics on stderr (default: WARNING).
-scores PATH: score history file (default: scores.txt).

Type a guess per line. "quit" or end of input reveals the word. Solved games
are added to the score history, which is printed at the end.
"""

import argparse
import logging
import sys

from wordgame.display import render_guess
from wordgame.errors import InvalidGuess, InvalidWordFile
from wordgame.game import is_quit, new_game
from wordgame.history import SCORES_PATH, update_scores
from wordgame.logging_setup import setup_logging
from wordgame.selector import default_seed, parse_seed
from wordgame.words import load_words


logger = logging.getLogger("wordle")

USAGE = "usage: wordle <word-list-file> [seed-number]"


class _UsageParser(argparse.ArgumentParser):
    def error(self, message):
        self.exit(1, USAGE + "\n")


def parse_args(argv=None):
    parser = _UsageParser(
        description="Guess the 5-letter word.",
        usage=USAGE[len("usage: "):],
    )
    parser.add_argument("word_file", help="Word list, one word per line.")
    parser.add_argument(
        "seed",
        nargs="?",
        default=None,
        help="Non-negative integer that picks the target (default: current time).",
    )
    parser.add_argument(
        "-log-level",
        default="WARNING",
        help="Logging level for diagnostics on stderr (default: WARNING).",
    )
    parser.add_argument(
        "-scores",
        default=str(SCORES_PATH),
        help="Score history file (default: scores.txt).",
    )
    return parser.parse_args(argv)


def run_game(session, lines, scores_path=SCORES_PATH):
    """Read guesses from `lines` until the target is found or input ends."""
    while True:
        raw = lines.readline()

        # A line without a terminator is the end of input
        if not raw.endswith("\n") or is_quit(raw):
            print(f'The word was "{session.target}"')
            return None

        try:
            guess = session.submit(raw)
        except InvalidGuess as exc:
            logger.debug("Rejected guess: %s", exc)
            print("Invalid guess")
            continue

        if guess.solved:
            break

        print(render_guess(guess.word, guess.tiles))

    count = session.guess_count
    print(f"Solved in {count} guess" if count == 1 else f"Solved in {count} guesses")

    history = update_scores(count, scores_path)
    print(history.format_table())
    return history


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_level)

    if args.seed is None:
        seed = default_seed()
    else:
        try:
            seed = parse_seed(args.seed)
        except ValueError as exc:
            logger.debug("Bad seed: %s", exc)
            raise SystemExit(USAGE) from exc

    try:
        store = load_words(args.word_file)
        session = new_game(store, seed)
    except OSError as exc:
        raise SystemExit(f"Can't open the word list: {args.word_file}") from exc
    except InvalidWordFile as exc:
        logger.debug("Rejected word file: %s", exc)
        raise SystemExit("Invalid word file") from exc

    run_game(session, sys.stdin, args.scores)


if __name__ == "__main__":
    main()
