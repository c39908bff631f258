"""
Othello board model.

The board is a square numpy grid of one-character cells holding either the
empty marker or one of the two registered player symbols. Besides the game
rules it carries an optional origin move, the coordinates of the move that
produced this board when it was generated as a search successor.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from reversi.errors import UnrecognizedSymbolError

EMPTY = "."

DIRECTIONS = [(0, 1), (1, 0), (0, -1), (-1, 0), (1, 1), (-1, -1), (1, -1), (-1, 1)]


@dataclass(frozen=True)
class Move:
    """Dataclass to represent a move."""
    row: int
    col: int

    def as_tuple(self) -> Tuple[int, int]:
        return self.row, self.col


class OthelloBoard:
    """
    Othello game board implementing the placement and flipping rules.

    Attributes:
        grid (np.ndarray): dimension x dimension array of cell symbols
        origin_move (Move): Move that produced this board, if any
    """
    def __init__(self, dimension: int = 4, p1_symbol: str = "X", p2_symbol: str = "O"):
        """Create an empty board; call initialize() for the starting position."""
        for symbol in (p1_symbol, p2_symbol):
            if not isinstance(symbol, str) or len(symbol) != 1 or symbol == EMPTY:
                raise ValueError(f"Player symbols must be single characters other than {EMPTY!r}, got {symbol!r}")
        if p1_symbol == p2_symbol:
            raise ValueError("Player symbols must differ")
        self._dimension = dimension
        self._p1_symbol = p1_symbol
        self._p2_symbol = p2_symbol
        self.grid = np.full((dimension, dimension), EMPTY, dtype="<U1")
        self.origin_move: Optional[Move] = None

    @classmethod
    def from_rows(cls, rows: Iterable[str], p1_symbol: str = "X", p2_symbol: str = "O") -> "OthelloBoard":
        """
        Build a board from row strings such as ``"X.O."``.

        Args:
            rows (iterable): One string per row, all of the board's dimension

        Returns:
            OthelloBoard: Board holding the given cells
        """
        rows = [row.replace(" ", "") for row in rows]
        dimension = len(rows)
        if any(len(row) != dimension for row in rows):
            raise ValueError("Board rows must form a square grid")

        board = cls(dimension, p1_symbol, p2_symbol)
        allowed = {EMPTY, p1_symbol, p2_symbol}
        for r, row in enumerate(rows):
            for c, cell in enumerate(row):
                if cell not in allowed:
                    raise ValueError(f"Unknown cell value {cell!r} at ({r}, {c})")
                board.set_cell(r, c, cell)
        return board

    def initialize(self):
        """Place the four starting discs in the centre of the board."""
        self.grid[:, :] = EMPTY
        mid = self._dimension // 2
        self.grid[mid - 1, mid - 1] = self._p2_symbol
        self.grid[mid, mid] = self._p2_symbol
        self.grid[mid - 1, mid] = self._p1_symbol
        self.grid[mid, mid - 1] = self._p1_symbol
        self.origin_move = None

    @property
    def dimension(self) -> int:
        return self._dimension

    def get_num_rows(self) -> int:
        return self._dimension

    def get_num_cols(self) -> int:
        return self._dimension

    def get_p1_symbol(self) -> str:
        return self._p1_symbol

    def get_p2_symbol(self) -> str:
        return self._p2_symbol

    def opponent_of(self, symbol: str) -> str:
        """Return the other registered symbol."""
        if symbol == self._p1_symbol:
            return self._p2_symbol
        if symbol == self._p2_symbol:
            return self._p1_symbol
        raise UnrecognizedSymbolError(
            f"Symbol {symbol!r} is not registered on this board",
            context={'p1': self._p1_symbol, 'p2': self._p2_symbol}
        )

    def is_in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._dimension and 0 <= col < self._dimension

    def get_cell(self, row: int, col: int) -> str:
        return str(self.grid[row, col])

    def set_cell(self, row: int, col: int, symbol: str):
        self.grid[row, col] = symbol

    def is_cell_empty(self, row: int, col: int) -> bool:
        return self.grid[row, col] == EMPTY

    def is_full(self) -> bool:
        return not bool((self.grid == EMPTY).any())

    # Origin move of a successor state
    def set_origin(self, row: int, col: int):
        self.origin_move = Move(row, col)

    def get_row(self) -> Optional[int]:
        return self.origin_move.row if self.origin_move else None

    def get_col(self) -> Optional[int]:
        return self.origin_move.col if self.origin_move else None

    def _flips_in_direction(self, cells: List[List[str]], row: int, col: int,
                            dr: int, dc: int, symbol: str, opponent: str) -> List[Tuple[int, int]]:
        """
        Collect the opponent discs bracketed by placing symbol at (row, col).

        Works on a plain-list view of the grid. Returns an empty list when
        the line is not closed by one of the player's own discs.
        """
        n = self._dimension
        path = []
        r, c = row + dr, col + dc
        while 0 <= r < n and 0 <= c < n and cells[r][c] == opponent:
            path.append((r, c))
            r, c = r + dr, c + dc
        if path and 0 <= r < n and 0 <= c < n and cells[r][c] == symbol:
            return path
        return []

    def is_legal_move(self, row: int, col: int, symbol: str) -> bool:
        """
        Check if a move is legal according to Othello rules.

        A legal move must:
        1. Be on an empty cell inside the board
        2. Flank at least one line of opponent discs

        Args:
            row (int): Target row
            col (int): Target column
            symbol (str): Player making the move

        Returns:
            bool: True if move is legal, False otherwise

        Raises:
            UnrecognizedSymbolError: symbol is not registered on this board
        """
        opponent = self.opponent_of(symbol)
        if not self.is_in_bounds(row, col) or not self.is_cell_empty(row, col):
            return False
        cells = self.grid.tolist()
        return any(self._flips_in_direction(cells, row, col, dr, dc, symbol, opponent)
                   for dr, dc in DIRECTIONS)

    def get_legal_moves(self, symbol: str) -> List[Move]:
        """Return all legal moves for symbol in row-major order."""
        return [Move(r, c)
                for r in range(self._dimension)
                for c in range(self._dimension)
                if self.is_legal_move(r, c, symbol)]

    def has_legal_moves_remaining(self, symbol: str) -> bool:
        return any(self.is_legal_move(r, c, symbol)
                   for r in range(self._dimension)
                   for c in range(self._dimension))

    def play_move(self, row: int, col: int, symbol: str) -> bool:
        """
        Apply a move to the board, flipping bracketed discs.

        Args:
            row (int): Target row
            col (int): Target column
            symbol (str): Player making the move

        Returns:
            bool: True if the move was applied, False if it was illegal
        """
        if not self.is_legal_move(row, col, symbol):
            return False

        opponent = self.opponent_of(symbol)
        cells = self.grid.tolist()
        flipped = []
        for dr, dc in DIRECTIONS:
            flipped.extend(self._flips_in_direction(cells, row, col, dr, dc, symbol, opponent))

        self.grid[row, col] = symbol
        for r, c in flipped:
            self.grid[r, c] = symbol
        return True

    def count_score(self, symbol: str) -> int:
        return int(np.count_nonzero(self.grid == symbol))

    def clone(self) -> "OthelloBoard":
        """Return an independent copy of this board, origin move included."""
        board = OthelloBoard(self._dimension, self._p1_symbol, self._p2_symbol)
        board.grid = self.grid.copy()
        board.origin_move = self.origin_move
        return board

    def numeric_to_algebraic(self, row: int, col: int) -> str:
        """
        Convert board coordinates to algebraic notation.

        Returns:
            str: Move in algebraic notation (e.g., 'b3')
        """
        return f"{chr(col + ord('a'))}{row + 1}"

    def algebraic_to_numeric(self, move: str) -> Optional[Tuple[int, int]]:
        """
        Convert algebraic notation (e.g., 'b3') to board coordinates.

        Returns:
            tuple: (row, col) coordinates or None if invalid
        """
        try:
            col = ord(move[0].lower()) - ord('a')
            row = int(move[1:]) - 1
        except (IndexError, ValueError):
            return None
        if self.is_in_bounds(row, col):
            return row, col
        return None

    def get_board_state(self) -> Dict:
        """
        Capture current board state including piece positions.

        Returns:
            dict: Rows of the board and disc positions in algebraic notation
        """
        state = {
            'board': ["".join(row) for row in self.grid.tolist()],
            'disc_positions': {self._p1_symbol: [], self._p2_symbol: []}
        }
        for symbol in (self._p1_symbol, self._p2_symbol):
            for r, c in zip(*np.nonzero(self.grid == symbol)):
                state['disc_positions'][symbol].append(self.numeric_to_algebraic(int(r), int(c)))
        return state

    def __str__(self) -> str:
        letters = " ".join(chr(ord('a') + c) for c in range(self._dimension))
        lines = [f"{i + 1} {' '.join(row)}" for i, row in enumerate(self.grid.tolist())]
        lines.append(f"  {letters}")
        return "\n".join(lines)

    def display(self):
        """Print current board state to output."""
        print()
        print(self)
