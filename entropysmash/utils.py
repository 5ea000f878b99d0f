import logging
from pathlib import Path
from string import ascii_lowercase

import numpy as np

logger = logging.getLogger(__name__)

WORD_SIZE = 5
NUM_TURNS = 6
ALPHABET_SIZE = len(ascii_lowercase)


def normalize_word(word):
    """Cleans up a word that may already be valid: strips spacing and lowers
    case. It does not trim length or remove characters, so the result still
    has to be checked with is_wordle_word()."""
    return word.strip().lower()


def is_wordle_word(word, length=WORD_SIZE):
    return (isinstance(word, str) and len(word) == length and
            all(c in ascii_lowercase for c in word))


def letter_idx(c):
    return ord(c) - ord('a')


def count_letters(word):
    "Counts of each letter in word, indexed by position in the alphabet"
    counts = [0] * ALPHABET_SIZE
    for c in word:
        counts[letter_idx(c)] += 1
    return counts


def words_to_matrix(words, length=WORD_SIZE):
    """Packs words into an (n, length) uint8 array of alphabet indexes so the
    clue codec can run over many words at once."""
    if not words:
        return np.zeros((0, length), dtype=np.uint8)
    raw = np.frombuffer(''.join(words).encode('ascii'), dtype=np.uint8)
    return (raw - ord('a')).reshape(len(words), length)


def load_word_list(filename, length=WORD_SIZE):
    """Reads one word per line, keeping file order. Lines that are not valid
    words of the given length after normalization are skipped."""
    path = Path(filename)
    with path.open('r', encoding='utf-8') as f:
        words = [w for w in map(normalize_word, f) if is_wordle_word(w, length)]
    logger.debug(f"Loaded {len(words)} words from {path}")
    return words
