"""
Static data the solver is built from: the allowed word list, ranked from most
to least common, and an optional cached table of the best guesses when no
guess has been made yet.

Both are read from plain text files:

* allowed words: one word per line, most frequent first
* default state: one ``word score expected_info weight`` line per entry,
  space separated and already sorted from highest to lowest score
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from .scoring import ScoredCandidate
from .utils import WORD_SIZE, is_wordle_word, load_word_list, normalize_word

logger = logging.getLogger(__name__)


class DataLoadError(ValueError):
    "Static data is missing or malformed"


@dataclass(frozen=True)
class SolverData:
    allowed_words: Tuple[str, ...]
    default_state: Optional[Tuple[ScoredCandidate, ...]] = None
    word_length: int = WORD_SIZE

    def __post_init__(self):
        words = tuple(self.allowed_words)
        object.__setattr__(self, 'allowed_words', words)

        if not words:
            raise DataLoadError("no allowed words")
        for word in words:
            if not is_wordle_word(word, self.word_length):
                raise DataLoadError(f"the word {word!r} is not a valid {self.word_length} letter word")
        if len(set(words)) != len(words):
            raise DataLoadError("allowed words contain duplicates")

        if self.default_state is not None:
            entries = tuple(ScoredCandidate(*entry) for entry in self.default_state)
            object.__setattr__(self, 'default_state', entries)
            universe = set(words)
            for entry in entries:
                if entry.word not in universe:
                    raise DataLoadError(f"default state word {entry.word!r} is not an allowed word")
            for prev, entry in zip(entries, entries[1:]):
                if entry.score > prev.score:
                    raise DataLoadError(f"default state is not sorted by score at {entry.word!r}")

        logger.debug(f"SolverData: {len(words)} allowed words, "
                     f"{len(self.default_state or ())} default state entries")

    @classmethod
    def from_files(cls, words_path, default_state_path=None, word_length=WORD_SIZE):
        try:
            words = load_word_list(words_path, word_length)
        except FileNotFoundError as e:
            raise DataLoadError(f"missing allowed words file {words_path}") from e
        except UnicodeDecodeError as e:
            raise DataLoadError(f"allowed words file {words_path} is not valid UTF-8") from e
        except OSError as e:
            raise DataLoadError(f"could not read allowed words file {words_path}: {e}") from e

        default_state = None
        if default_state_path is not None:
            default_state = read_default_state_data(default_state_path, word_length)

        return cls(tuple(words), default_state, word_length)


def parse_default_state_line(line, word_length=WORD_SIZE):
    parts = line.split(' ', 3)
    word = normalize_word(parts[0])
    if not is_wordle_word(word, word_length):
        raise DataLoadError(f"the word {word!r} is not a valid {word_length} letter word")
    if len(parts) != 4:
        raise DataLoadError(f"malformed default data line {line!r}")

    values = []
    for raw in parts[1:]:
        try:
            values.append(float(raw.strip()))
        except ValueError as e:
            raise DataLoadError(f"malformed floating point text {raw!r}") from e

    score, expected_info, weight = values
    return ScoredCandidate(word, score, expected_info, weight)


def read_default_state_data(filename, word_length=WORD_SIZE):
    """
    Reads the cached default state table. Returns None when the file does not
    exist, since the table is only an optimization.
    """
    path = Path(filename)
    if not path.exists():
        logger.debug(f"No default state data at {path}")
        return None

    entries = []
    try:
        with path.open('r', encoding='utf-8') as f:
            for line in f:
                line = line.strip()
                if not line:
                    continue
                entries.append(parse_default_state_line(line, word_length))
    except UnicodeDecodeError as e:
        raise DataLoadError(f"default state file {path} is not valid UTF-8") from e
    except OSError as e:
        raise DataLoadError(f"could not read default state file {path}: {e}") from e

    logger.debug(f"Loaded {len(entries)} default state entries from {path}")
    return tuple(entries)
