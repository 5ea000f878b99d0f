import sys
import logging
from argparse import ArgumentParser

from PyQt6.QtCore import QSettings

from .config import GameConfig
from .data import DataLoadError
from .lazy_handler import setup_logger
from .solver import Solver, SolverError
from .wordle_game import Color, WordleGame

logger = logging.getLogger(__name__)


def parse_arguments(argv=None):
    parser = ArgumentParser(prog="entropysmash",
                            description="Recommend guesses by expected information")
    parser.add_argument("words", help="Allowed words file, one per line, most frequent first")
    parser.add_argument("-d", "--default-state", default=None,
                        help="Cached recommendations for the first guess (optional)")
    parser.add_argument("-n", "--top", type=int, default=None,
                        help="Number of recommendations to show")
    parser.add_argument("-s", "--secret", default=None,
                        help="Play against this answer instead of entering colors")
    parser.add_argument("--settings", default=None,
                        help="INI file with a [solver] section overriding the defaults")
    return parser.parse_args(argv)


def print_recommendations(solver, k, out):
    print(f"{solver.num_remaining_possibilities()} of {solver.num_total_possibilities()} "
          f"words remain, {solver.remaining_entropy():.2f} bits of uncertainty", file=out)
    for rank, c in enumerate(solver.top_k_guesses(k), 1):
        print(f"{rank:3d}. {c.word}  score {c.score:.3f}  "
              f"info {c.expected_info:.3f}  weight {c.weight:.3f}", file=out)


def play(solver, game, out):
    "Lets the solver play its own top pick until the game ends"
    while solver.can_guess():
        pick = solver.top_k_guesses(1)[0].word
        _, colors = game.guess(pick)
        solver.make_guess(pick, colors)
        print(f"{pick} {Color.to_emoji(colors)}", file=out)
    print(f"{solver.state.value} after {solver.num_guesses()} guesses", file=out)


def prompt(solver, k, stdin, out):
    print("Enter '<word> <colors>' (colors as B/Y/G), 'r' to reset, 'q' to quit", file=out)
    for line in stdin:
        line = line.strip()
        if line.lower() == 'q':
            break
        if line.lower() == 'r':
            solver.reset()
        else:
            try:
                word, colors = line.split()
                solver.make_guess(word, colors)
            except ValueError:
                print("Invalid input. Expected a word and its colors.", file=out)
                continue
            except SolverError as e:
                print(f"Guess refused: {e}", file=out)
                continue
        if not solver.can_guess():
            print(f"Game over: {solver.state.value}", file=out)
            break
        print_recommendations(solver, k, out)


def main(argv=None, stdin=None, out=None):
    """Entry point for the console front end."""
    stdin = stdin if stdin is not None else sys.stdin
    out = out if out is not None else sys.stdout
    args = parse_arguments(argv)

    config = GameConfig()
    if args.settings:
        config = GameConfig.from_settings(QSettings(args.settings, QSettings.Format.IniFormat))

    try:
        solver = Solver.from_files(args.words, args.default_state, config)
    except DataLoadError as e:
        logger.error(f"Could not load word data: {e}")
        return 1

    if args.secret:
        try:
            game = WordleGame(solver.possible_words, config.max_turns, secret=args.secret)
        except ValueError as e:
            logger.error(str(e))
            return 1
        play(solver, game, out)
    else:
        print_recommendations(solver, args.top, out)
        prompt(solver, args.top, stdin, out)
    return 0


def run():
    "Console script entry point: sets up the log file, then runs main()"
    setup_logger('entropysmash.', 'entropysmash')
    return main()


if __name__ == '__main__':
    sys.exit(run())
