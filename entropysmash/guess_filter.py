from dataclasses import dataclass
from typing import Tuple

from .utils import ALPHABET_SIZE, letter_idx
from .wordle_game import Color


@dataclass(frozen=True)
class Guess:
    """
    A guess that was played, the coloring it received, the information it
    was expected to yield before it was played, and the entropy actually
    removed once the remaining possibilities were recomputed.
    """
    word: str
    coloring: Tuple[Color, ...]
    expected_info: float = 0.0
    entropy_delta: float = 0.0

    def is_correct(self):
        return all(c == Color.CORRECT for c in self.coloring)

    def is_guess_same(self, other):
        return self.word == other

    def excluded_letters(self):
        """
        Flags for each letter of the alphabet that was colored EXCLUDED at
        least once. A flagged letter can still be in the answer when another
        instance of it was colored MISPLACED or CORRECT.
        """
        out = [False] * ALPHABET_SIZE
        for c, color in zip(self.word, self.coloring):
            if color == Color.EXCLUDED:
                out[letter_idx(c)] = True
        return out

    def allows(self, other):
        """
        Tests whether other could still be the answer given this guess and
        its coloring.

        Every MISPLACED or CORRECT square adds one unit to its letter's
        budget. Walking the squares, a CORRECT square needs the same letter in
        other and a MISPLACED square needs a different one. Any letter of
        other is first paid for from the budget, and only when none is left
        is it checked against the EXCLUDED letters. Paying first matters for
        repeats: 'abbey' colored C C X X X excludes 'b', yet 'abhor' is still
        allowed because the first 'b' is covered by the budget. Finally the
        budget has to be spent entirely, so other holds at least as many of
        each letter as the coloring revealed.
        """
        if self.is_guess_same(other):
            return False

        budget = [0] * ALPHABET_SIZE
        for c, color in zip(self.word, self.coloring):
            if color != Color.EXCLUDED:
                budget[letter_idx(c)] += 1

        excluded = self.excluded_letters()

        for self_c, other_c, color in zip(self.word, other, self.coloring):
            matches = self_c == other_c
            if color == Color.CORRECT and not matches:
                return False
            if color == Color.MISPLACED and matches:
                return False

            idx = letter_idx(other_c)
            if budget[idx] > 0:
                budget[idx] -= 1
            elif excluded[idx]:
                return False

        return not any(budget)


def allowed_by_guesses(guesses, word):
    "A word remains a possible answer only if every guess so far allows it"
    return all(g.allows(word) for g in guesses)
