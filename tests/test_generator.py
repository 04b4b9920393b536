import io
import unittest

from maze_generation import Maze, MazeGenerator
from maze_generation.generator import main


class MazeGeneratorTests(unittest.TestCase):
    def test_seeded_generators_agree(self) -> None:
        first = MazeGenerator(rows=5, cols=9, seed=123).generate_batch(3)
        second = MazeGenerator(rows=5, cols=9, seed=123).generate_batch(3)
        self.assertEqual([str(maze) for maze in first], [str(maze) for maze in second])
        self.assertTrue(all(isinstance(maze, Maze) for maze in first))

    def test_batch_draws_from_one_stream(self) -> None:
        generator = MazeGenerator(rows=10, cols=10, seed=5)
        mazes = generator.generate_batch(4)
        self.assertEqual(len(mazes), 4)
        self.assertGreater(len({str(maze) for maze in mazes}), 1)

    def test_negative_dimensions_rejected(self) -> None:
        with self.assertRaises(ValueError):
            MazeGenerator(rows=-2, cols=3)

    def test_degenerate_dimensions_raise_on_create(self) -> None:
        generator = MazeGenerator(rows=0, cols=3, seed=1)
        with self.assertRaises(RuntimeError):
            generator.create_maze()


class CommandLineTests(unittest.TestCase):
    def test_prints_ascii_dump(self) -> None:
        stdout, stderr = io.StringIO(), io.StringIO()
        code = main(["--rows", "3", "--cols", "4", "--seed", "1", "--ascii"], stdout=stdout, stderr=stderr)
        self.assertEqual(code, 0)
        lines = stdout.getvalue().split("\n")
        self.assertEqual(lines[7:], ["", ""])
        self.assertTrue(all(len(line) == 9 for line in lines[:7]))
        self.assertEqual(lines[0].count("#") + lines[0].count("E"), 9)
        self.assertEqual(stderr.getvalue(), "")

    def test_count_prints_several_mazes(self) -> None:
        stdout = io.StringIO()
        code = main(["--rows", "2", "--cols", "2", "--seed", "3", "--count", "3"], stdout=stdout)
        self.assertEqual(code, 0)
        blocks = [block for block in stdout.getvalue().split("\n\n") if block]
        self.assertEqual(len(blocks), 3)

    def test_failure_reports_on_stderr(self) -> None:
        stdout, stderr = io.StringIO(), io.StringIO()
        code = main(["--rows", "0"], stdout=stdout, stderr=stderr)
        self.assertEqual(code, 1)
        self.assertEqual(stdout.getvalue(), "")
        self.assertEqual(stderr.getvalue(), "Failed to generate maze.\n")


if __name__ == "__main__":
    unittest.main()
