"""Minimax AI player for small-board Othello (Reversi)."""

from .errors import IllegalMoveError, ReversiError, SearchDepthExceededError, UnrecognizedSymbolError
from .game.othello_board import Move, OthelloBoard
from .players.minimax_player import MinimaxPlayer, SearchResult
from .players.player import HumanPlayer, Player

__version__ = "0.1.0"
