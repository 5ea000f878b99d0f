import logging
import tempfile
import unittest
from pathlib import Path

from ..data import (DataLoadError, SolverData, parse_default_state_line,
                    read_default_state_data)
from ..scoring import ScoredCandidate
from ..solver import Solver
from ..utils import load_word_list

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class TestDataFiles(unittest.TestCase):

    def setUp(self):
        self._tmpdir = tempfile.TemporaryDirectory()
        self.dir = Path(self._tmpdir.name)

    def tearDown(self):
        self._tmpdir.cleanup()

    def write(self, name, text):
        path = self.dir / name
        path.write_text(text, encoding="utf-8")
        return path

    def test_word_list_keeps_order_and_skips_junk(self):
        path = self.write("words.txt", "Apron\n  drain \n\nro man\nab\nroman\nsp4re\n")
        self.assertEqual(load_word_list(path), ["apron", "drain", "roman"])

    def test_default_state(self):
        path = self.write("default.txt", "tares 6.2 5.9 0.3\nCRANE 6.0 5.5 0.5\n\n")
        entries = read_default_state_data(path)
        self.assertEqual(entries, (ScoredCandidate("tares", 6.2, 5.9, 0.3),
                                   ScoredCandidate("crane", 6.0, 5.5, 0.5)))

    def test_missing_default_state(self):
        self.assertIsNone(read_default_state_data(self.dir / "nope.txt"))

    def test_malformed_default_state(self):
        for line in ("tares 6.2 5.9", "tares 6.2 abc 0.3", "tar3s 6.2 5.9 0.3"):
            with self.subTest(line=line):
                with self.assertRaises(DataLoadError):
                    parse_default_state_line(line)

    def test_solver_from_files(self):
        words = self.write("words.txt", "tares\ncrane\napron\n")
        default = self.write("default.txt", "crane 6.0 5.5 0.5\n")
        solver = Solver.from_files(words, default)
        self.assertEqual(solver.num_total_possibilities(), 3)
        self.assertEqual(solver.top_k_guesses(1), [ScoredCandidate("crane", 6.0, 5.5, 0.5)])

    def test_default_state_outside_universe(self):
        words = self.write("words.txt", "tares\ncrane\n")
        default = self.write("default.txt", "apron 6.0 5.5 0.5\n")
        with self.assertRaises(DataLoadError):
            SolverData.from_files(words, default)

    def test_missing_word_file(self):
        with self.assertRaises(DataLoadError):
            SolverData.from_files(self.dir / "missing.txt")

    def test_word_file_not_utf8(self):
        path = self.dir / "words.txt"
        path.write_bytes(b"apron\n\xff\xfe\ndrain\n")
        with self.assertRaises(DataLoadError):
            SolverData.from_files(path)

    def test_default_state_not_utf8(self):
        words = self.write("words.txt", "tares\ncrane\n")
        default = self.dir / "default.txt"
        default.write_bytes(b"tares 6.2 5.9 0.3\n\xff 1.0 1.0 1.0\n")
        with self.assertRaises(DataLoadError):
            SolverData.from_files(words, default)

    def test_default_state_directory(self):
        words = self.write("words.txt", "tares\ncrane\n")
        with self.assertRaises(DataLoadError):
            SolverData.from_files(words, self.dir)

    def test_default_state_out_of_order(self):
        words = self.write("words.txt", "tares\ncrane\n")
        default = self.write("default.txt", "crane 5.0 4.5 0.5\ntares 6.2 5.9 0.3\n")
        with self.assertRaises(DataLoadError):
            SolverData.from_files(words, default)


if __name__ == '__main__':
    unittest.main()
