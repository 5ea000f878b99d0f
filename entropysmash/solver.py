import logging
import time
from dataclasses import replace
from enum import Enum

import numpy as np

from .config import GameConfig
from .data import SolverData
from .guess_filter import Guess, allowed_by_guesses
from .scoring import (ScoredCandidate, compute_word_probabilities,
                      compute_word_weights, entropy, expected_information)
from .top_k import TopK
from .utils import is_wordle_word, normalize_word, words_to_matrix
from .wordle_game import Color, clue_codes

logger = logging.getLogger(__name__)


class SolverState(Enum):
    FRESH = "fresh"
    IN_PROGRESS = "in progress"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"
    STUCK = "stuck"

    def is_terminal(self):
        return self in (SolverState.SOLVED, SolverState.EXHAUSTED, SolverState.STUCK)


class SolverError(Exception):
    "A guess was refused. The solver state is left untouched."


class NoCandidates(SolverError):
    def __init__(self):
        super().__init__("no possible words remain")


class TurnsExhausted(SolverError):
    def __init__(self):
        super().__init__("no turns remaining")


class AlreadySolved(SolverError):
    def __init__(self):
        super().__init__("the puzzle is already solved")


class InvalidGuess(SolverError):
    def __init__(self, word):
        super().__init__(f"provided guess {word!r} is not valid")
        self.word = word


class Solver:
    """
    Recommends guesses by expected information, and tracks what the guesses
    played so far leave possible.

    The allowed words are held once, both as strings and as a letter matrix;
    the remaining possibilities are indexes into them, kept in rank order.
    Recommendations are scored over the remaining possibilities only. That
    costs O(remaining ** 2), so the very first query is by far the most
    expensive, which is what the cached default state table is for.
    """

    def __init__(self, data: SolverData, config: GameConfig = None):
        if config is None:
            config = GameConfig(word_length=data.word_length)
        elif config.word_length != data.word_length:
            raise ValueError(f"config word length {config.word_length} does not "
                             f"match data word length {data.word_length}")
        self.config = config

        # unchanging set of all words which are allowed to be guessed
        self.possible_words = data.allowed_words
        self._word_index = {w: i for i, w in enumerate(self.possible_words)}
        self._matrix = words_to_matrix(self.possible_words, config.word_length)

        # relative frequency of each word; these do not sum to 1.0
        self.word_weights = compute_word_weights(self.possible_words,
                                                 n_common=config.n_common,
                                                 width=config.width,
                                                 min_weight=config.min_word_weight)
        self._weights = np.fromiter((self.word_weights[w] for w in self.possible_words),
                                    dtype=np.float64, count=len(self.possible_words))

        self.default_state_guesses = data.default_state
        self.reset()

    @classmethod
    def from_files(cls, words_path, default_state_path=None, config=None):
        length = config.word_length if config is not None else GameConfig().word_length
        data = SolverData.from_files(words_path, default_state_path, length)
        return cls(data, config)

    def reset(self):
        """
        Clears all guesses and restores every allowed word as a possibility.
        Word weights are kept as they are.
        """
        self.guesses = []
        self._remaining = np.arange(len(self.possible_words), dtype=np.intp)
        self._recompute_word_probabilities()
        self._top_k_cache = {}
        logger.debug(f"Solver.reset: {len(self._remaining)} possibilities")

    @property
    def state(self):
        if self.is_solved():
            return SolverState.SOLVED
        if not self.has_possible_guesses():
            return SolverState.STUCK
        if self.num_guesses() >= self.config.max_turns:
            return SolverState.EXHAUSTED
        if self.guesses:
            return SolverState.IN_PROGRESS
        return SolverState.FRESH

    def make_guess(self, word, coloring):
        """
        Records a guess and the coloring it got, then narrows the remaining
        possibilities. Raises a SolverError, without changing anything, when
        the puzzle is solved, nothing remains, turns are used up or the guess
        is malformed.
        """
        if self.is_solved():
            raise AlreadySolved()
        if not self.has_possible_guesses():
            raise NoCandidates()
        if self.num_guesses() >= self.config.max_turns:
            raise TurnsExhausted()

        word = self._checked_word(word)
        try:
            coloring = Color.coerce(coloring, self.config.word_length)
        except (TypeError, ValueError) as e:
            raise InvalidGuess(word) from e
        if len(coloring) != self.config.word_length:
            raise InvalidGuess(word)

        start_entropy = self.remaining_entropy()
        guess = Guess(word, coloring, expected_info=self.expected_guess_info(word))
        self.guesses.append(guess)

        self._recompute_after_guess()

        self.guesses[-1] = replace(guess, entropy_delta=start_entropy - self.remaining_entropy())
        logger.debug(f"Solver.make_guess: {word} {Color.seq_to_num_str(coloring)} -> "
                     f"{len(self._remaining)} remain, delta {self.guesses[-1].entropy_delta:.3f} bits")

    def _recompute_after_guess(self):
        self._recompute_possibilities()
        self._recompute_word_probabilities()
        self._top_k_cache = {}

    def _recompute_possibilities(self):
        keep = [i for i in self._remaining
                if allowed_by_guesses(self.guesses, self.possible_words[i])]
        self._remaining = np.array(keep, dtype=np.intp)

    def _recompute_word_probabilities(self):
        self._probabilities = compute_word_probabilities(self._weights[self._remaining])
        assert (not self._probabilities.size or
                abs(self._probabilities.sum() - 1.0) < 1e-6), "probabilities must add up to 1.0"

    def can_guess(self):
        return (self.num_guesses() < self.config.max_turns and not self.is_solved()
                and self.has_possible_guesses())

    def is_guess_legal(self, word):
        """True if the word is in the allowed list. This says nothing about
        whether the guesses made so far still allow it."""
        return isinstance(word, str) and normalize_word(word) in self._word_index

    def is_solved(self):
        return bool(self.guesses) and self.guesses[-1].is_correct()

    def num_guesses(self):
        return len(self.guesses)

    def has_possible_guesses(self):
        return len(self._remaining) > 0

    def num_remaining_possibilities(self):
        return len(self._remaining)

    def num_total_possibilities(self):
        return len(self.possible_words)

    def remaining_possibilities(self):
        return tuple(self.possible_words[i] for i in self._remaining)

    def word_probabilities(self):
        "Normalized probability of each remaining word"
        return dict(zip(self.remaining_possibilities(), self._probabilities.tolist()))

    def history(self):
        return tuple(self.guesses)

    def remaining_entropy(self):
        "Uncertainty left in the puzzle, in bits"
        return entropy(self._probabilities)

    def is_default_state(self):
        return not self.guesses

    def _checked_word(self, word):
        "Normalizes a guess, raising InvalidGuess if it is not a word of the right length"
        if not isinstance(word, str):
            raise InvalidGuess(repr(word))
        word = normalize_word(word)
        if not is_wordle_word(word, self.config.word_length):
            raise InvalidGuess(word)
        return word

    def _guess_row(self, word):
        idx = self._word_index.get(word)
        if idx is not None:
            return self._matrix[idx]
        return words_to_matrix([word], self.config.word_length)[0]

    def expected_guess_info(self, word, answer_rows=None):
        word = self._checked_word(word)
        if answer_rows is None:
            answer_rows = self._matrix[self._remaining]
        codes = clue_codes(self._guess_row(word), answer_rows)
        return expected_information(codes, self._probabilities, self.config.num_clue_states)

    def word_weight(self, word):
        return self.word_weights.get(normalize_word(word), self.config.min_word_weight)

    def score_guess(self, word, answer_rows=None):
        word = self._checked_word(word)
        return ScoredCandidate.new(word, self.expected_guess_info(word, answer_rows),
                                   self.word_weight(word))

    def top_k_guesses(self, k=None):
        """
        The k best guesses, highest score first. Fewer are returned when
        fewer possibilities remain. With no guesses made, the cached default
        state table is used if it holds at least k entries.
        """
        k = self.config.n_recommendations if k is None else k
        if k <= 0:
            raise ValueError(f"k must be positive, got {k}")

        if k not in self._top_k_cache:
            dsd = self.default_state_guesses
            if self.is_default_state() and dsd is not None and len(dsd) >= k:
                logger.debug(f"Solver.top_k_guesses: using cached default state for k={k}")
                self._top_k_cache[k] = list(dsd[:k])
            else:
                self._top_k_cache[k] = self.compute_top_k_guesses(k)

        return list(self._top_k_cache[k])

    def compute_top_k_guesses(self, k=None):
        "Same as top_k_guesses, but always computed from scratch"
        k = self.config.n_recommendations if k is None else k
        start = time.perf_counter()
        selector = TopK(k)
        answer_rows = self._matrix[self._remaining]
        for i in self._remaining:
            candidate = self.score_guess(self.possible_words[i], answer_rows)
            selector.push(candidate, candidate.score)
        logger.debug(f"Solver.compute_top_k_guesses: scored {len(self._remaining)} words "
                     f"in {time.perf_counter() - start:.2f} seconds")
        return list(selector)
