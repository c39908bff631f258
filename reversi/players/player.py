from abc import ABC, abstractmethod
from typing import Callable, Optional

from reversi.game.othello_board import Move, OthelloBoard


class Player(ABC):
    """
    Base class for anything that can choose a move on an OthelloBoard.

    Attributes:
        symbol (str): Piece symbol this player places
    """
    def __init__(self, symbol: str):
        self.symbol = symbol

    @abstractmethod
    def get_move(self, board: OthelloBoard) -> Optional[Move]:
        """Return the chosen move, or None when the player has no legal move."""

    @abstractmethod
    def clone(self) -> "Player":
        """Return a copy of this player carrying the same symbol."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.symbol!r})"


class HumanPlayer(Player):
    """Console player reading moves in algebraic notation (e.g. 'b1')."""

    def __init__(self, symbol: str, input_fn: Callable[[str], str] = input):
        super().__init__(symbol)
        self.input_fn = input_fn

    def get_move(self, board: OthelloBoard) -> Optional[Move]:
        moves = board.get_legal_moves(self.symbol)
        if not moves:
            return None

        print(f"\n{self.symbol}'s turn:")
        print("Available moves:", [board.numeric_to_algebraic(m.row, m.col) for m in moves])
        while True:
            text = self.input_fn("Enter your move (e.g., 'b1'): ").strip().lower()
            coords = board.algebraic_to_numeric(text)
            if coords and Move(*coords) in moves:
                return Move(*coords)
            print("Invalid move. Please try again.")

    def clone(self) -> "HumanPlayer":
        return HumanPlayer(self.symbol, self.input_fn)
