# entropysmash/__init__.py
"""
EntropySmash: recommends Wordle guesses by expected information, blended
with a word frequency prior.
"""

__version__ = "0.1.0"

from .config import GameConfig
from .data import SolverData, DataLoadError
from .guess_filter import Guess
from .scoring import ScoredCandidate
from .solver import (Solver, SolverState, SolverError, NoCandidates,
                     TurnsExhausted, AlreadySolved, InvalidGuess)
from .top_k import TopK, top_k
from .wordle_game import Color, WordleGame, get_clue_for_secret

__all__ = [
    "GameConfig",
    "SolverData",
    "DataLoadError",
    "Guess",
    "ScoredCandidate",
    "Solver",
    "SolverState",
    "SolverError",
    "NoCandidates",
    "TurnsExhausted",
    "AlreadySolved",
    "InvalidGuess",
    "TopK",
    "top_k",
    "Color",
    "WordleGame",
    "get_clue_for_secret",
]
