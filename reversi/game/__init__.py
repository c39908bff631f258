from .othello_board import Move, OthelloBoard
