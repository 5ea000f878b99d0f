import logging
import unittest
from itertools import product

from ..guess_filter import Guess, allowed_by_guesses
from ..wordle_game import Color, get_clue_for_secret

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

E, M, C = Color.EXCLUDED, Color.MISPLACED, Color.CORRECT

WORDS = ("apron", "drain", "roman", "tares", "scare", "spare", "share", "tales",
         "legal", "leary", "lemma", "lanes", "ledge", "elite", "arles", "abbey",
         "abhor", "geese", "those", "eerie", "sissy", "mamma", "llama", "zizel")


class TestGuessFilter(unittest.TestCase):

    def test_repeat_guess_never_allowed(self):
        for coloring in ((E,) * 5, (C,) * 5, (M, M, E, M, C)):
            guess = Guess("roman", coloring)
            self.assertFalse(guess.allows("roman"))

    def test_all_correct_allows_no_other_word(self):
        guess = Guess("scare", (C,) * 5)
        self.assertTrue(guess.is_correct())
        self.assertFalse(any(guess.allows(w) for w in WORDS))

    def test_true_answer_always_allowed(self):
        for guess_word, answer in product(WORDS, repeat=2):
            if guess_word == answer:
                continue
            guess = Guess(guess_word, get_clue_for_secret(guess_word, answer))
            self.assertTrue(guess.allows(answer), msg=f"{guess_word = } {answer = }")

    def test_budget_checked_before_exclusion(self):
        guess = Guess("abbey", (C, C, E, E, E))
        self.assertTrue(guess.excluded_letters()[1])
        self.assertTrue(guess.allows("abhor"))
        self.assertFalse(guess.allows("abbot"))

    def test_correct_square_must_match(self):
        guess = Guess("drain", (E, M, M, E, C))
        self.assertTrue(guess.allows("apron"))
        self.assertFalse(guess.allows("apros"))

    def test_misplaced_square_must_move(self):
        guess = Guess("tares", (E, M, M, M, M))
        self.assertTrue(guess.allows("scare"))
        # 'a' colored misplaced in position 1, so no answer has 'a' there
        self.assertFalse(guess.allows("carse"))

    def test_revealed_letters_must_all_appear(self):
        guess = Guess("roman", (M, M, E, M, C))
        self.assertTrue(guess.allows("apron"))
        # every letter fits its square, but the misplaced 'o' is missing
        self.assertFalse(guess.allows("drain"))

    def test_excluded_letter_rejected(self):
        guess = Guess("tales", (E, M, E, E, E))
        self.assertFalse(guess.allows("satin"))
        self.assertTrue(guess.allows("apron"))

    def test_allowed_by_all_guesses(self):
        guesses = [Guess("tales", get_clue_for_secret("tales", "apron")),
                   Guess("drain", get_clue_for_secret("drain", "apron"))]
        remaining = [w for w in WORDS if allowed_by_guesses(guesses, w)]
        self.assertEqual(remaining, ["apron", "roman"])
        self.assertTrue(allowed_by_guesses([], "roman"))


if __name__ == '__main__':
    unittest.main()
