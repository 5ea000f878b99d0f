from PyQt6.QtCore import pyqtSlot, pyqtSignal, QThread, QObject
import logging

from .solver import SolverError

logger = logging.getLogger(__name__)


def candidate_to_dict(candidate):
    return candidate._asdict()


def game_state_of(solver):
    "Snapshot of the solver that is safe to hand to another thread"
    return {
        "guesses": [(g.word, tuple(int(c) for c in g.coloring), g.expected_info, g.entropy_delta)
                    for g in solver.history()],
        "uncertainty": solver.remaining_entropy(),
        "remaining": solver.num_remaining_possibilities(),
        "total": solver.num_total_possibilities(),
        "state": solver.state.value,
        "solved": solver.is_solved(),
        "can_guess": solver.can_guess(),
    }


class SolverAgent(QObject):
    """
    Owns a Solver and talks to the rest of the application only through
    signals and slots, so it can be moved to its own QThread and keep the
    expensive scoring off the GUI thread.

    Recommendations and the game state snapshot are cached and invalidated
    whenever a guess is accepted or the solver is reset.
    """
    recommendations_ready = pyqtSignal(list)
    computing_recommendations = pyqtSignal()
    game_state_changed = pyqtSignal(dict)
    guess_failed = pyqtSignal(str)

    def __init__(self, solver, parent=None):
        super().__init__(parent)
        self.solver = solver
        self._recommendations = None
        self._game_state = None

    @pyqtSlot()
    def init(self):
        self.reset()
        self.make_recommendations()

    @pyqtSlot()
    def reset(self):
        self.solver.reset()
        self.invalidate()
        self.game_state_changed.emit(self.game_state())
        self.recommendations_ready.emit([])

    @pyqtSlot(str, str)
    def make_guess(self, word, colors):
        try:
            self.solver.make_guess(word, colors)
        except SolverError as e:
            logger.info(f"SolverAgent.make_guess: {word} {colors} refused: {e}")
            self.guess_failed.emit(str(e))
        else:
            self.invalidate()
            self.game_state_changed.emit(self.game_state())

    @pyqtSlot()
    def make_recommendations(self):
        self.recommendations_ready.emit(list(self.recommendations()))

    def recommendations(self):
        if self._recommendations is None:
            self.computing_recommendations.emit()
            self._recommendations = [candidate_to_dict(c) for c in self.solver.top_k_guesses()]
        return self._recommendations

    def game_state(self):
        if self._game_state is None:
            self._game_state = game_state_of(self.solver)
        return self._game_state

    def invalidate(self):
        self._recommendations = None
        self._game_state = None


class SuggestionGetter(QThread):
    ready = pyqtSignal(list)

    def __init__(self, solver, k=None, parent=None):
        super().__init__(parent)
        self.solver = solver
        self.k = k
        self.suggestions = []

    def run(self):
        self.suggestions = self.solver.top_k_guesses(self.k)
        self.ready.emit(self.suggestions)
