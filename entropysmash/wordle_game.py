import random
import logging
from enum import EnumMeta, IntEnum
from functools import lru_cache

import numpy as np

from .utils import count_letters, letter_idx, normalize_word, WORD_SIZE, NUM_TURNS

logger = logging.getLogger(__name__)


class ColorMeta(EnumMeta):
    def __init__(cls, name, bases, classdict):
        super().__init__(name, bases, classdict)
        # Characters a user may type for each color: the first letter of the
        # member name, the digit of its value and the usual tile names
        cls._map = {name[0]: member for name, member in cls.__members__.items()}
        cls._map.update({str(member.value): member for member in cls.__members__.values()})
        cls._map.update({'B': cls.EXCLUDED, 'X': cls.EXCLUDED, '-': cls.EXCLUDED,
                         'Y': cls.MISPLACED, 'G': cls.CORRECT})
        cls._emoji = {cls.EXCLUDED: '⬛', cls.MISPLACED: '\U0001f7e8',
                      cls.CORRECT: '\U0001f7e9'}
        cls._map.update({v: k for k, v in cls._emoji.items()})
        cls._val_map = {member.value: member for member in cls.__members__.values()}


class Color(IntEnum, metaclass=ColorMeta):
    """
    Verdict shown for one square of a guess.

    EXCLUDED means the letter is not in the answer, or that no further
    instances of it are when another square with the same letter is colored
    MISPLACED or CORRECT.
    """
    EXCLUDED = 0
    MISPLACED = 1
    CORRECT = 2

    @staticmethod
    def map(c):
        try:
            return Color._map[c.upper()]
        except KeyError:
            raise ValueError(f"{c!r} does not name a color") from None

    @staticmethod
    def from_value(value):
        try:
            return Color._val_map[value]
        except KeyError:
            raise ValueError(f"{value!r} is not a color value") from None

    @staticmethod
    def parse(text):
        "Reads feedback such as 'BYGBB', 'XMCXX', '01200' or the emoji squares"
        return tuple(Color.map(c) for c in text.strip())

    @staticmethod
    def coerce(colors, length=WORD_SIZE):
        """Converts any accepted feedback form (text, a code, or a sequence of
        colors or ints) into a tuple of Color"""
        if isinstance(colors, str):
            return Color.parse(colors)
        if isinstance(colors, (int, np.integer)):
            return Color.from_ordinal(int(colors), length)
        return tuple(Color.from_value(int(c)) for c in colors)

    @staticmethod
    @lru_cache
    def _ordinal(seq):
        return sum(int(d) * (3 ** p) for p, d in enumerate(seq))

    @staticmethod
    def ordinal(seq):
        """
        Encodes a coloring as a base-3 number, the leftmost square being the
        least significant digit. Codes range over [0, 3 ** len(seq)).
        """
        if isinstance(seq, str):
            seq = tuple(Color(int(c)) for c in seq)
        return Color._ordinal(tuple(seq))

    @staticmethod
    def from_ordinal(n, length=WORD_SIZE):
        if not 0 <= n < 3 ** length:
            raise ValueError(f"code {n} out of range for {length} squares")
        seq = []
        for _ in range(length):
            n, digit = divmod(n, 3)
            seq.append(Color._val_map[digit])
        return tuple(seq)

    @staticmethod
    def seq_to_num_str(seq):
        return ''.join(str(c.value) for c in seq)

    @staticmethod
    def to_emoji(seq):
        return ''.join(Color._emoji[c] for c in seq)

    @staticmethod
    @lru_cache
    def all_correct(length=WORD_SIZE):
        return Color.ordinal((Color.CORRECT,) * length)


def num_clue_states(length=WORD_SIZE):
    return 3 ** length


def get_clue_for_secret(pick, secret):
    """
    Colors a guess against a hypothetical answer.

    The exact pass marks matching squares CORRECT and spends one unit of that
    letter's budget (its count in the secret). The misplaced pass then marks
    the remaining squares MISPLACED while budget for their letter is left,
    otherwise EXCLUDED. Doing the exact pass first is what keeps repeated
    letters honest, e.g. 'spare' against 'scare' gives C X C C C.
    """
    feedback = [Color.EXCLUDED] * len(secret)
    budget = count_letters(secret)

    rest = []
    for i, (g, s) in enumerate(zip(pick, secret)):
        if g == s:
            feedback[i] = Color.CORRECT
            budget[letter_idx(g)] -= 1
        else:
            rest.append((i, g))

    for i, g in rest:
        if budget[letter_idx(g)] > 0:
            budget[letter_idx(g)] -= 1
            feedback[i] = Color.MISPLACED

    return tuple(feedback)


def clue_codes(guess_row, answer_rows):
    """
    Same coloring as get_clue_for_secret, computed for one guess against many
    answers at once and returned as an int64 array of codes.

    guess_row is a (length,) array of letter indexes, answer_rows an
    (n, length) array. Square i of the guess is MISPLACED exactly when the
    secret holds more unmatched copies of that letter than there are
    unmatched copies earlier in the guess.
    """
    length = guess_row.shape[0]
    green = answer_rows == guess_row
    codes = np.zeros(answer_rows.shape[0], dtype=np.int64)
    place = 1
    for i in range(length):
        c = guess_row[i]
        budget = np.sum((answer_rows == c) & ~green, axis=1)
        used = np.sum(~green[:, :i] & (guess_row[:i] == c), axis=1)
        yellow = ~green[:, i] & (budget > used)
        codes += place * (int(Color.CORRECT) * green[:, i] + int(Color.MISPLACED) * yellow)
        place *= 3
    return codes


class WordleGame:
    """Plays the puzzle against a hidden answer, for simulations and demos"""

    def __init__(self, word_list, max_attempts=NUM_TURNS, secret=None):
        self.words = tuple(normalize_word(word) for word in word_list)
        self.word_set = set(self.words)
        self.max_attempts = max_attempts
        self.reset_game(secret)

    def guess(self, word):
        word = normalize_word(word)
        if len(word) != len(self.secret_word):
            raise ValueError("Guess must be the same length as the secret word.")
        if word not in self.word_set:
            raise ValueError("Guess must be a valid word.")
        if self.is_over():
            raise ValueError("The game is already over.")

        self.attempts += 1
        self.guesses.append(word)
        feedback = get_clue_for_secret(word, self.secret_word)
        self.feedback.append(feedback)
        logger.debug(f"WordleGame.guess: {word} -> {Color.seq_to_num_str(feedback)}")

        return word == self.secret_word, feedback

    def is_over(self):
        return (self.attempts >= self.max_attempts or
                bool(self.guesses) and self.guesses[-1] == self.secret_word)

    def get_status(self):
        return {
            "attempts": self.attempts,
            "max_attempts": self.max_attempts,
            "guesses": list(self.guesses),
            "feedback": list(self.feedback),
            "secret_word": self.secret_word if self.is_over() else None
        }

    def reset_game(self, secret=None):
        if secret is not None:
            secret = normalize_word(secret)
            if secret not in self.word_set:
                raise ValueError(f"Secret {secret!r} is not in the word list.")
            self.secret_word = secret
        else:
            self.secret_word = random.choice(self.words)
        self.attempts = 0
        self.guesses = []
        self.feedback = []
