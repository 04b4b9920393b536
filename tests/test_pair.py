import unittest

from maze_generation import Direction, Pair


class PairTests(unittest.TestCase):
    def test_add(self) -> None:
        self.assertEqual(Pair(1, -1) + Pair(4, -3), Pair(5, -4))

    def test_sub(self) -> None:
        self.assertEqual(Pair(1, -1) - Pair(4, -3), Pair(-3, 2))

    def test_mul_from_either_side(self) -> None:
        self.assertEqual(2 * Pair(4, -4), Pair(8, -8))
        self.assertEqual(Pair(-1, 1) * 3, Pair(-3, 3))

    def test_direction_offsets(self) -> None:
        self.assertEqual(Pair.from_direction(Direction.UP), Pair(-1, 0))
        self.assertEqual(Pair.from_direction(Direction.RIGHT), Pair(0, 1))
        self.assertEqual(Pair.from_direction(Direction.DOWN), Pair(1, 0))
        self.assertEqual(Pair.from_direction(Direction.LEFT), Pair(0, -1))

    def test_opposite_directions_cancel(self) -> None:
        for direction in Direction:
            total = Pair.from_direction(direction) + Pair.from_direction(direction.opposite)
            self.assertEqual(total, Pair(0, 0))

    def test_direction_order_and_default(self) -> None:
        self.assertEqual(list(Direction), [Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT])
        self.assertIs(Direction.default(), Direction.UP)

    def test_pairs_are_hashable_values(self) -> None:
        self.assertEqual(len({Pair(1, 2), Pair.from_row_and_col(1, 2)}), 1)


if __name__ == "__main__":
    unittest.main()
