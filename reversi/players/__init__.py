from .player import HumanPlayer, Player
from .minimax_player import MinimaxPlayer, SearchResult
