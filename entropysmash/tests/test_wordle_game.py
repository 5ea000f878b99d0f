import logging
import random
import unittest
from itertools import product

import numpy as np

from ..utils import words_to_matrix
from ..wordle_game import (Color, WordleGame, clue_codes, get_clue_for_secret,
                           num_clue_states)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

E, M, C = Color.EXCLUDED, Color.MISPLACED, Color.CORRECT

WORDS = ("zitis", "zizel", "tares", "scare", "spare", "share", "tales", "apron",
         "drain", "roman", "lanes", "legal", "leary", "lemma", "arles", "ledge",
         "elite", "abbey", "abhor", "sissy", "geese", "eerie", "mamma", "llama")


class TestColoring(unittest.TestCase):

    cases = [
        ("zitis", "zizel", (C, C, E, E, E)),
        ("tares", "scare", (E, M, M, M, M)),
        ("spare", "scare", (C, E, C, C, C)),
        ("share", "scare", (C, E, C, C, C)),
        ("scare", "scare", (C, C, C, C, C)),
        ("tales", "apron", (E, M, E, E, E)),
        ("drain", "apron", (E, M, M, E, C)),
        ("roman", "apron", (M, M, E, M, C)),
        ("apron", "apron", (C, C, C, C, C)),
        ("lanes", "legal", (C, M, E, M, E)),
        ("leary", "legal", (C, C, M, E, E)),
        ("lemma", "legal", (C, C, E, E, M)),
        ("legal", "legal", (C, C, C, C, C)),
        ("arles", "ledge", (E, E, M, M, E)),
        ("elite", "ledge", (M, M, E, E, C)),
        ("ledge", "ledge", (C, C, C, C, C)),
    ]

    def test_known_colorings(self):
        for guess, answer, expected in self.cases:
            with self.subTest(guess=guess, answer=answer):
                self.assertEqual(get_clue_for_secret(guess, answer), expected)

    def test_repeated_letter_only_colored_once(self):
        # more e's guessed than the answer holds
        self.assertEqual(get_clue_for_secret("geese", "those"), (E, E, E, C, C))
        self.assertEqual(get_clue_for_secret("eerie", "ledge"), (E, C, E, E, C))

    def test_numpy_codes_match_reference(self):
        guesses = words_to_matrix(WORDS)
        for g, guess in enumerate(WORDS):
            codes = clue_codes(guesses[g], guesses)
            for a, answer in enumerate(WORDS):
                expected = Color.ordinal(get_clue_for_secret(guess, answer))
                self.assertEqual(int(codes[a]), expected, msg=f"{guess = } {answer = }")

    def test_numpy_codes_match_reference_random(self):
        rng = random.Random(1234)
        letters = "aabeers"
        words = ["".join(rng.choice(letters) for _ in range(5)) for _ in range(200)]
        matrix = words_to_matrix(words)
        for g in range(0, 200, 7):
            codes = clue_codes(matrix[g], matrix)
            for a in range(200):
                expected = Color.ordinal(get_clue_for_secret(words[g], words[a]))
                self.assertEqual(int(codes[a]), expected)

    def test_codes_for_no_answers(self):
        codes = clue_codes(words_to_matrix(["apron"])[0], words_to_matrix([]))
        self.assertEqual(codes.shape, (0,))


class TestColoringCode(unittest.TestCase):

    def test_round_trip_and_unique(self):
        seen = set()
        for seq in product(Color, repeat=5):
            code = Color.ordinal(seq)
            self.assertTrue(0 <= code < num_clue_states())
            self.assertNotIn(code, seen)
            seen.add(code)
            self.assertEqual(Color.from_ordinal(code), seq)
        self.assertEqual(len(seen), 3 ** 5)

    def test_position_zero_least_significant(self):
        self.assertEqual(Color.ordinal((M, E, E, E, E)), 1)
        self.assertEqual(Color.ordinal((E, C, E, E, E)), 6)
        self.assertEqual(Color.ordinal("00001"), 81)
        self.assertEqual(Color.all_correct(), 242)

    def test_other_lengths(self):
        for length in (1, 3, 7):
            for code in (0, 3 ** length - 1):
                self.assertEqual(Color.ordinal(Color.from_ordinal(code, length)), code)

    def test_out_of_range(self):
        with self.assertRaises(ValueError):
            Color.from_ordinal(243)
        with self.assertRaises(ValueError):
            Color.from_ordinal(-1)

    def test_parse(self):
        self.assertEqual(Color.parse("BYGBB"), (E, M, C, E, E))
        self.assertEqual(Color.parse("xmcex"), (E, M, C, E, E))
        self.assertEqual(Color.parse("01200"), (E, M, C, E, E))
        self.assertEqual(Color.parse(Color.to_emoji((E, M, C))), (E, M, C))
        with self.assertRaises(ValueError):
            Color.parse("BYQ")

    def test_coerce(self):
        self.assertEqual(Color.coerce([0, 1, 2, 0, 0]), (E, M, C, E, E))
        self.assertEqual(Color.coerce(Color.all_correct()), (C,) * 5)
        self.assertEqual(Color.coerce(np.int64(1)), (M, E, E, E, E))
        with self.assertRaises(ValueError):
            Color.coerce([0, 3, 0, 0, 0])


class TestWordleGame(unittest.TestCase):

    def test_guess_against_secret(self):
        game = WordleGame(["apron", "drain", "roman"], secret="apron")
        self.assertEqual(game.guess("roman"), (False, (M, M, E, M, C)))
        self.assertEqual(game.guess("APRON"), (True, (C,) * 5))
        self.assertTrue(game.is_over())
        self.assertEqual(game.get_status()["secret_word"], "apron")

    def test_rejects_bad_guesses(self):
        game = WordleGame(["apron", "drain", "roman"], secret="drain")
        with self.assertRaises(ValueError):
            game.guess("apro")
        with self.assertRaises(ValueError):
            game.guess("zzzzz")

    def test_attempts_run_out(self):
        game = WordleGame(["apron", "drain", "roman"], max_attempts=2, secret="drain")
        game.guess("apron")
        game.guess("roman")
        self.assertTrue(game.is_over())
        with self.assertRaises(ValueError):
            game.guess("drain")

    def test_unknown_secret(self):
        with self.assertRaises(ValueError):
            WordleGame(["apron"], secret="drain")

    def test_random_secret_from_list(self):
        game = WordleGame(["apron", "drain", "roman"])
        self.assertIn(game.secret_word, game.word_set)
        self.assertIsNone(game.get_status()["secret_word"])


if __name__ == '__main__':
    unittest.main()
