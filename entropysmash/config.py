from dataclasses import dataclass, fields
import logging

from .scoring import MIN_WORD_WEIGHT, N_COMMON, WIDTH
from .utils import WORD_SIZE, NUM_TURNS

logger = logging.getLogger(__name__)

# How many recommendations to keep. Also the size of the cached default
# state table.
N_RECOMMENDATIONS = 32


@dataclass(frozen=True)
class GameConfig:
    word_length: int = WORD_SIZE
    max_turns: int = NUM_TURNS
    n_recommendations: int = N_RECOMMENDATIONS
    min_word_weight: float = MIN_WORD_WEIGHT
    n_common: float = N_COMMON
    width: float = WIDTH

    def __post_init__(self):
        for name in ('word_length', 'max_turns', 'n_recommendations'):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.min_word_weight <= 0:
            raise ValueError(f"min_word_weight must be positive, got {self.min_word_weight}")

    @property
    def num_clue_states(self):
        return 3 ** self.word_length

    @classmethod
    def from_settings(cls, settings, group="solver"):
        """Reads a config from the given group of a QSettings, using defaults
        for missing keys"""
        values = {}
        settings.beginGroup(group)
        for f in fields(cls):
            if settings.contains(f.name):
                values[f.name] = f.type(settings.value(f.name))
        settings.endGroup()
        logger.debug(f"GameConfig.from_settings: {values}")
        return cls(**values)

    def to_settings(self, settings, group="solver"):
        settings.beginGroup(group)
        for f in fields(self):
            settings.setValue(f.name, getattr(self, f.name))
        settings.endGroup()
        settings.sync()
