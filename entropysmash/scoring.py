import logging
from typing import NamedTuple

import numpy as np
from scipy.special import expit
from scipy.stats import entropy as _entropy

logger = logging.getLogger(__name__)

MIN_WORD_WEIGHT = 0.0001
# Tuned for an allowed word list of roughly 13k words ranked by frequency.
# Both need re-tuning when the word list or frequency data changes.
N_COMMON = 2700.0
WIDTH = 5.7


class ScoredCandidate(NamedTuple):
    word: str
    score: float
    expected_info: float
    weight: float

    @classmethod
    def new(cls, word, expected_info, weight):
        return cls(word, combine_score(expected_info, weight), expected_info, weight)


def combine_score(expected_info, weight):
    """
    Blends information and plausibility by plain addition, which favors
    guesses that are informative and also likely answers themselves. This is
    a heuristic, not a Bayesian combination.
    """
    return expected_info + weight


def compute_word_weights(ordered_words, n_common=N_COMMON, width=WIDTH,
                         min_weight=MIN_WORD_WEIGHT):
    """
    Weights (not probabilities) for words listed most frequent first.

    Each word gets x = ((n_common - rank) / N) * width, a position along a
    sigmoid: the most common word sits at width, the word ranked n_common at
    0 and rarer words continue linearly into the negatives. The weight is
    sigmoid(x), floored at min_weight.
    """
    n_words = len(ordered_words)
    if not n_words:
        return {}
    ranks = np.arange(n_words, dtype=np.float64)
    weights = np.maximum(expit(((n_common - ranks) / n_words) * width), min_weight)
    return dict(zip(ordered_words, weights.tolist()))


def compute_word_probabilities(weights):
    "Normalizes an array of weights so it sums to 1.0"
    weights = np.asarray(weights, dtype=np.float64)
    total = weights.sum()
    if not weights.size or total <= 0:
        return np.zeros_like(weights)
    return weights / total


def entropy(probabilities):
    "Entropy in bits of a probability array, 0.0 when it is empty"
    probabilities = np.asarray(probabilities, dtype=np.float64)
    if not probabilities.size or not probabilities.any():
        return 0.0
    # scipy renormalizes its input, which is a no-op for a true distribution
    return float(_entropy(probabilities, base=2))


def clue_distribution(codes, probabilities, num_states):
    """
    Probability of seeing each coloring, one bucket per coloring code. The
    chance of a coloring is the sum of the chances of every answer that
    produces it.
    """
    buckets = np.bincount(codes, weights=probabilities, minlength=num_states)
    assert abs(buckets.sum() - 1.0) < 1e-4, "coloring probabilities must add up to 1.0"
    return buckets


def expected_information(codes, probabilities, num_states):
    """
    Expected information, in bits, of a guess whose coloring against each
    remaining answer is given by codes.

    A coloring that few answers produce is unlikely but eliminates most of
    the search space when it does show up; -log2(p) measures that. Weighting
    by p and summing over the colorings gives the average information gained.
    Empty buckets are skipped since log2(0) is undefined.
    """
    if not len(codes):
        return 0.0
    buckets = clue_distribution(codes, probabilities, num_states)
    nonzero = buckets[buckets > 0]
    return float(np.sum(nonzero * -np.log2(nonzero)))
