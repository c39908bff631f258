import unittest

from reversi.errors import UnrecognizedSymbolError
from reversi.game.othello_board import EMPTY, Move, OthelloBoard


class TestOthelloBoard(unittest.TestCase):
    def setUp(self):
        """Set up a fresh 4x4 board in the starting position."""
        self.board = OthelloBoard(4, "X", "O")
        self.board.initialize()

    def test_initial_board_setup(self):
        """Test if the game board is initialized correctly."""
        print(f"\n{self.board}\n")
        self.assertEqual(self.board.dimension, 4)
        self.assertEqual(self.board.get_num_rows(), 4)
        self.assertEqual(self.board.get_num_cols(), 4)

        self.assertEqual(self.board.get_cell(1, 1), "O")
        self.assertEqual(self.board.get_cell(2, 2), "O")
        self.assertEqual(self.board.get_cell(1, 2), "X")
        self.assertEqual(self.board.get_cell(2, 1), "X")

        empty_count = sum(self.board.is_cell_empty(r, c) for r in range(4) for c in range(4))
        self.assertEqual(empty_count, 12)
        self.assertIsNone(self.board.origin_move)

    def test_player_symbols(self):
        self.assertEqual(self.board.get_p1_symbol(), "X")
        self.assertEqual(self.board.get_p2_symbol(), "O")
        self.assertEqual(self.board.opponent_of("X"), "O")
        self.assertEqual(self.board.opponent_of("O"), "X")
        with self.assertRaises(UnrecognizedSymbolError):
            self.board.opponent_of("Z")

    def test_unregistered_symbol_in_rules(self):
        """Rule queries for an unknown symbol raise, whatever the target cell."""
        with self.assertRaises(UnrecognizedSymbolError):
            self.board.is_legal_move(0, 1, "Z")
        with self.assertRaises(UnrecognizedSymbolError):
            self.board.is_legal_move(1, 1, "Z")
        with self.assertRaises(UnrecognizedSymbolError):
            self.board.has_legal_moves_remaining("Z")

    def test_symbols_must_be_single_characters(self):
        with self.assertRaises(ValueError):
            OthelloBoard(4, "XX", "OO")
        with self.assertRaises(ValueError):
            OthelloBoard(4, "X", ".")
        with self.assertRaises(ValueError):
            OthelloBoard(4, "X", "X")
        board = OthelloBoard(4, "B", "W")
        board.initialize()
        self.assertEqual(board.count_score("B"), 2)
        self.assertEqual(board.count_score("W"), 2)

    def test_legal_opening_moves(self):
        """Test legal move detection in the starting position."""
        expected = [Move(0, 1), Move(1, 0), Move(2, 3), Move(3, 2)]
        self.assertEqual(self.board.get_legal_moves("X"), expected)
        self.assertEqual(self.board.get_legal_moves("O"),
                         [Move(0, 2), Move(1, 3), Move(2, 0), Move(3, 1)])
        self.assertTrue(self.board.has_legal_moves_remaining("X"))

        # Occupied, unflanking and out of bounds cells
        self.assertFalse(self.board.is_legal_move(1, 1, "X"))
        self.assertFalse(self.board.is_legal_move(0, 0, "X"))
        self.assertFalse(self.board.is_legal_move(-1, 0, "X"))
        self.assertFalse(self.board.is_legal_move(0, 4, "X"))

    def test_piece_flipping(self):
        """Test if pieces are correctly flipped after a move."""
        self.assertTrue(self.board.play_move(0, 1, "X"))
        self.assertEqual(self.board.get_cell(0, 1), "X")
        self.assertEqual(self.board.get_cell(1, 1), "X")
        self.assertEqual(self.board.count_score("X"), 4)
        self.assertEqual(self.board.count_score("O"), 1)

    def test_multi_direction_flip(self):
        board = OthelloBoard.from_rows([
            "XXXX",
            "OOOO",
            "OOOO",
            "OO..",
        ])
        self.assertTrue(board.play_move(3, 3, "X"))
        self.assertEqual(board.get_board_state()['board'], ["XXXX", "OXOX", "OOXX", "OO.X"])
        self.assertEqual(board.count_score("X"), 9)
        self.assertEqual(board.count_score("O"), 6)

    def test_illegal_move_leaves_board_untouched(self):
        before = self.board.grid.copy()
        self.assertFalse(self.board.play_move(0, 0, "X"))
        self.assertFalse(self.board.play_move(3, 3, "O"))
        self.assertTrue((self.board.grid == before).all())

    def test_clone_is_independent(self):
        self.board.set_origin(2, 3)
        copy = self.board.clone()
        self.assertEqual(copy.origin_move, Move(2, 3))
        self.assertEqual(copy.get_row(), 2)
        self.assertEqual(copy.get_col(), 3)

        copy.play_move(0, 1, "X")
        self.assertEqual(self.board.get_cell(0, 1), EMPTY)
        self.assertEqual(self.board.get_cell(1, 1), "O")
        self.assertEqual(copy.dimension, self.board.dimension)

    def test_full_board(self):
        board = OthelloBoard.from_rows(["XXOO", "XXOO", "OOXX", "OOXX"])
        self.assertTrue(board.is_full())
        self.assertFalse(board.has_legal_moves_remaining("X"))
        self.assertFalse(board.has_legal_moves_remaining("O"))
        self.assertEqual(board.get_legal_moves("X"), [])

    def test_coordinate_conversion(self):
        """Test algebraic to numeric coordinate conversion and vice versa."""
        self.assertEqual(self.board.algebraic_to_numeric("a1"), (0, 0))
        self.assertEqual(self.board.algebraic_to_numeric("D4"), (3, 3))
        self.assertEqual(self.board.algebraic_to_numeric("b3"), (2, 1))
        self.assertIsNone(self.board.algebraic_to_numeric("e1"))
        self.assertIsNone(self.board.algebraic_to_numeric(""))
        self.assertIsNone(self.board.algebraic_to_numeric("a"))
        self.assertIsNone(self.board.algebraic_to_numeric("ax"))

        self.assertEqual(self.board.numeric_to_algebraic(0, 1), "b1")
        self.assertEqual(self.board.numeric_to_algebraic(3, 3), "d4")

    def test_board_state_snapshot(self):
        state = self.board.get_board_state()
        self.assertEqual(state['board'], ["....", ".OX.", ".XO.", "...."])
        self.assertEqual(state['disc_positions']['X'], ["c2", "b3"])
        self.assertEqual(state['disc_positions']['O'], ["b2", "c3"])

    def test_set_cell(self):
        self.board.set_cell(0, 0, "X")
        self.assertEqual(self.board.get_cell(0, 0), "X")
        self.assertEqual(self.board.count_score("X"), 3)

    def test_from_rows_validation(self):
        with self.assertRaises(ValueError):
            OthelloBoard.from_rows(["XX", "X"])
        with self.assertRaises(ValueError):
            OthelloBoard.from_rows(["X?", ".."])

    def test_str_lists_rows_and_columns(self):
        text = str(self.board)
        self.assertIn("2 . O X .", text)
        self.assertTrue(text.endswith("a b c d"))


if __name__ == '__main__':
    unittest.main(verbosity=2)
