"""
entropy.py

Measures how evenly the selector spreads seeds across a word list.

For a list of n words, the seeds 0..n-1 are mapped to selection indices and
the resulting histogram is summarised:

    coverage    = distinct indices / n
    uniformity  = Shannon entropy of the histogram / log2(n)
    mean gap    = mean |index(s + 1) - index(s)| over consecutive seeds

A multiplier coprime to n turns the seeds 0..n-1 into a permutation of the
indices, which gives coverage and uniformity of exactly 1.0.
"""

from dataclasses import dataclass

import numpy as np

from wordgame.selector import MULTIPLIER


@dataclass(frozen=True)
class DispersionReport:
    n: int
    seeds: int
    distinct: int
    coverage: float
    entropy: float
    uniformity: float
    mean_gap: float


def selection_indices(seeds, n: int) -> np.ndarray:
    """
    Vectorised selector.selection_index over an array of seeds.

    int64 is wide enough: the reduced seed is below n, and n * MULTIPLIER
    stays under 2**63 for every n up to WORD_LIMIT.
    """
    if n <= 0:
        raise ValueError("cannot choose from an empty word list")

    seeds = np.asarray(seeds, dtype=np.int64)
    return (seeds % n) * MULTIPLIER % n


def entropy_from_counts(counts) -> float:
    """Compute Shannon entropy (bits) from bucket counts."""
    counts = np.asarray(counts)
    total = counts.sum()
    if total == 0:
        return 0.0
    probs = counts[counts > 0] / total
    return float(-np.sum(probs * np.log2(probs)))


def selection_counts(n: int, seeds=None) -> np.ndarray:
    """Histogram of chosen indices; seeds default to 0..n-1."""
    if seeds is None:
        seeds = np.arange(n, dtype=np.int64)
    return np.bincount(selection_indices(seeds, n), minlength=n)


def dispersion_report(n: int, seeds=None) -> DispersionReport:
    if seeds is None:
        seeds = np.arange(n, dtype=np.int64)
    seeds = np.asarray(seeds, dtype=np.int64)

    indices = selection_indices(seeds, n)
    counts = np.bincount(indices, minlength=n)

    distinct = int(np.count_nonzero(counts))
    entropy = entropy_from_counts(counts)
    uniformity = 1.0 if n == 1 else entropy / float(np.log2(n))
    mean_gap = float(np.abs(np.diff(indices)).mean()) if indices.size > 1 else 0.0

    return DispersionReport(
        n=n,
        seeds=int(seeds.size),
        distinct=distinct,
        coverage=distinct / n,
        entropy=entropy,
        uniformity=uniformity,
        mean_gap=mean_gap,
    )
