"""
history.py

Keeps a histogram of how many guesses each solved game took.

The scores file is a single line of MAX_NUM_GUESSES space-separated counts.
Bucket k (1..9) counts games solved in k guesses; the last bucket counts
games that took MAX_NUM_GUESSES or more.
"""

import logging
from pathlib import Path


logger = logging.getLogger(__name__)

MAX_NUM_GUESSES = 10
SCORES_PATH = Path("scores.txt")


class ScoreHistory:

    def __init__(self, counts=None):
        counts = list(counts) if counts is not None else []
        if len(counts) > MAX_NUM_GUESSES:
            raise ValueError(f"expected at most {MAX_NUM_GUESSES} counts, got {len(counts)}")
        self.counts = counts + [0] * (MAX_NUM_GUESSES - len(counts))

    @classmethod
    def load(cls, path=SCORES_PATH) -> "ScoreHistory":
        """
        Read a scores file. A missing file is an empty history.

        Reading stops at the first token that is not a count, and buckets
        that were never read stay at zero.
        """
        path = Path(path)
        if not path.exists():
            logger.info("No scores file at %s, starting fresh", path)
            return cls()

        counts = []
        for token in path.read_text(encoding="ascii", errors="replace").split():
            if len(counts) == MAX_NUM_GUESSES:
                break
            if not token.isdigit():
                logger.warning("Unreadable count %r in %s, ignoring the rest", token, path)
                break
            counts.append(int(token))

        return cls(counts)

    def record(self, guess_count: int):
        """Count one game solved in `guess_count` guesses."""
        if guess_count < 1:
            raise ValueError(f"guess count must be positive: {guess_count}")

        bucket = min(guess_count, MAX_NUM_GUESSES) - 1
        self.counts[bucket] += 1

    def format_table(self) -> str:
        rows = [f"{i + 1:2d}  : {count:4d}" for i, count in enumerate(self.counts[:-1])]
        rows.append(f"{MAX_NUM_GUESSES:2d}+ : {self.counts[-1]:4d}")
        return "\n".join(rows)

    def save(self, path=SCORES_PATH):
        path = Path(path)
        path.write_text(" ".join(str(c) for c in self.counts) + "\n", encoding="ascii")


def update_scores(guess_count: int, path=SCORES_PATH) -> ScoreHistory:
    """Load the history at `path`, record one solved game, and save it back."""
    history = ScoreHistory.load(path)
    history.record(guess_count)
    history.save(path)
    return history
