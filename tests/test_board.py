import unittest

from blocktris.models.board import Board
from tests.helpers import fill_row

RED = (239, 68, 68)
BLUE = (0, 0, 255)


class BoardTests(unittest.TestCase):
    def test_new_board_is_empty(self):
        board = Board(10, 20)
        self.assertEqual(len(board.grid), 20)
        self.assertTrue(all(len(row) == 10 for row in board.grid))
        self.assertFalse(any(board.is_occupied(x, y) for y in range(20) for x in range(10)))

    def test_lock_drops_cells_outside_the_grid(self):
        board = Board(4, 4)
        board.lock([(0, -1, RED), (1, 0, RED), (4, 2, RED), (2, 4, RED), (-1, 1, RED)])
        self.assertEqual(board.grid[0][1], RED)
        occupied = [(x, y) for y in range(4) for x in range(4) if board.is_occupied(x, y)]
        self.assertEqual(occupied, [(1, 0)])

    def test_clear_single_full_row_shifts_rows_down(self):
        board = Board(4, 4)
        board.grid[2][0] = BLUE
        fill_row(board, 3, RED)
        self.assertEqual(board.clear_full_rows(), 1)
        self.assertEqual(board.grid[3], [BLUE, None, None, None])
        self.assertEqual(board.grid[0], [None] * 4)

    def test_clear_adjacent_full_rows_rechecks_same_index(self):
        board = Board(3, 5)
        board.grid[1][2] = BLUE
        fill_row(board, 2, RED)
        fill_row(board, 3, RED)
        fill_row(board, 4, RED, skip=(1,))
        cleared = board.clear_full_rows()
        self.assertEqual(cleared, 2)
        self.assertEqual(board.grid[4], [RED, None, RED])
        self.assertEqual(board.grid[3], [None, None, BLUE])
        self.assertEqual(board.grid[0], [None] * 3)
        self.assertEqual(board.grid[1], [None] * 3)

    def test_clear_keeps_order_and_dimensions(self):
        board = Board(3, 6)
        marks = {0: (1, 0, 0), 2: (2, 0, 0), 4: (3, 0, 0)}
        for row, color in marks.items():
            board.grid[row][0] = color
        fill_row(board, 1)
        fill_row(board, 3)
        fill_row(board, 5)

        self.assertEqual(board.clear_full_rows(), 3)
        self.assertEqual(len(board.grid), 6)
        self.assertTrue(all(len(r) == 3 for r in board.grid))
        remaining = [row[0] for row in board.grid if row[0] is not None]
        self.assertEqual(remaining, [(1, 0, 0), (2, 0, 0), (3, 0, 0)])
        self.assertEqual([row[0] for row in board.grid[3:]], remaining)

    def test_no_full_rows_is_a_noop(self):
        board = Board(3, 3)
        fill_row(board, 2, skip=(0,))
        before = board.rows()
        self.assertEqual(board.clear_full_rows(), 0)
        self.assertEqual(board.rows(), before)

    def test_clear_all(self):
        board = Board(3, 3)
        fill_row(board, 1)
        board.clear_all()
        self.assertEqual(board.rows(), ((None,) * 3,) * 3)


if __name__ == "__main__":
    unittest.main()
