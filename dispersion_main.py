"""
dispersion_main.py

Checks how evenly the selector's multiplier spreads seeds over word lists.

Modes:
-words FILE: report on the size of one word list.
-max-size N (default 2000): sweep every list size 1..N and list the sizes
  where some index can never be chosen.
"""

import argparse

from tqdm import tqdm

from wordgame.entropy import dispersion_report
from wordgame.errors import InvalidWordFile
from wordgame.logging_setup import setup_logging
from wordgame.selector import MULTIPLIER
from wordgame.words import WORD_LIMIT, load_words


DEFAULT_MAX_SIZE = 2000
TOP_WORST = 20


def print_report(report):
    print(f"n = {report.n:,} words, {report.seeds:,} seeds")
    print(f"Distinct indices: {report.distinct:,} ({report.coverage:.2%} coverage)")
    print(f"Entropy: {report.entropy:.4f} bits (uniformity {report.uniformity:.4f})")
    print(f"Mean gap between consecutive seeds: {report.mean_gap:.1f}")


def run_word_file(path):
    store = load_words(path)
    print(f"Multiplier: {MULTIPLIER}")
    print_report(dispersion_report(store.size()))


def run_sweep(max_size):
    print(f"Multiplier: {MULTIPLIER}")
    print(f"Sweeping list sizes 1..{max_size:,}...")

    reports = [dispersion_report(n) for n in tqdm(range(1, max_size + 1), desc="List size")]
    short = [r for r in reports if r.distinct < r.n]

    if not short:
        print("\nEvery size reaches every index.")
    else:
        print(f"\n{len(short):,} size(s) leave indices unreachable:")
        short.sort(key=lambda r: r.coverage)
        for r in short[:TOP_WORST]:
            print(f"n = {r.n:>6,}: {r.distinct:,} distinct ({r.coverage:.2%})")

    worst = min(reports, key=lambda r: r.uniformity)
    print(f"\nWorst uniformity: {worst.uniformity:.4f} at n = {worst.n:,}")


def parse_args():
    parser = argparse.ArgumentParser(
        description="Selector dispersion analysis for the word game."
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "-words",
        type=str,
        default=None,
        help="Word list file to analyse at its own size.",
    )
    group.add_argument(
        "-max-size",
        type=int,
        default=DEFAULT_MAX_SIZE,
        help=f"Largest list size to sweep (default: {DEFAULT_MAX_SIZE}).",
    )
    parser.add_argument(
        "-log-level",
        default="WARNING",
        help="Logging level for diagnostics on stderr (default: WARNING).",
    )
    return parser.parse_args()


def main():
    args = parse_args()
    setup_logging(args.log_level)

    if args.words is not None:
        try:
            run_word_file(args.words)
        except (OSError, InvalidWordFile) as exc:
            raise SystemExit(str(exc)) from exc
        return

    if not 1 <= args.max_size <= WORD_LIMIT:
        raise SystemExit(f"-max-size must be between 1 and {WORD_LIMIT}")

    run_sweep(args.max_size)


if __name__ == "__main__":
    main()
