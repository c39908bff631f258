"""
Minimax AI player for small-board Othello.

The search has no pruning and no depth limit by default: every line is
played out until the symbol to move has no legal move, and that position
is scored by disc count.

Two recursion shapes are supported (see SearchConfig.mode):

- "alternating": textbook minimax. The maximizing ply enumerates the root
  player's moves and the minimizing ply the opponent's. Leaf values are
  oriented so that a larger number is always better for the root player.
- "legacy": move-for-move compatible with the first version of this
  player. Every ply enumerates the root player's own moves, the maximizing
  routine scores its children with the minimizing routine and the
  minimizing routine recurses into itself. Leaf values are the raw
  p1-minus-p2 utility. The minimizing routine starts from LEGACY_MIN and
  keeps a child only if it scores strictly higher, which no child can, so
  every non-terminal node scores LEGACY_MIN and the root picks the first
  child that is not terminal.
"""

import time
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional, Tuple

from reversi.config import SearchConfig, config
from reversi.errors import SearchDepthExceededError, UnrecognizedSymbolError
from reversi.game.othello_board import Move, OthelloBoard
from reversi.players.player import Player

logger = logging.getLogger(__name__)

# Initial bounds of the legacy routines
LEGACY_MIN = 32767
LEGACY_MAX = -32767


@dataclass
class SearchResult:
    """Outcome of one root search."""
    move: Optional[Move]
    value: int
    nodes_evaluated: int
    elapsed: float


class MinimaxPlayer(Player):
    """
    AI player choosing moves with a full-tree minimax search.

    Attributes:
        symbol (str): AI's piece symbol
        search_config (SearchConfig): Recursion mode, guards and parallelism
        nodes_evaluated (int): Number of nodes visited by the last search
        start_time (float): Start time of the last search
    """
    def __init__(self, symbol: str, search_config: Optional[SearchConfig] = None):
        super().__init__(symbol)
        self.search_config = search_config or config.search
        self.nodes_evaluated = 0
        self.start_time = 0.0

    def get_utility(self, board: OthelloBoard) -> int:
        """Disc count of p1 minus disc count of p2, whoever is to move."""
        return board.count_score(board.get_p1_symbol()) - board.count_score(board.get_p2_symbol())

    def get_successors(self, player_symbol: str, board: OthelloBoard) -> List[OthelloBoard]:
        """
        Generate every board reachable by one legal move of player_symbol.

        Cells are visited in row-major order. Each successor is a clone of
        the input tagged with the move that produced it; the input board is
        never modified.

        Args:
            player_symbol (str): Symbol whose moves are enumerated
            board (OthelloBoard): Parent state

        Returns:
            list: Successor boards, empty when player_symbol cannot move
        """
        successors = []
        for row in range(board.dimension):
            for col in range(board.dimension):
                if board.is_legal_move(row, col, player_symbol):
                    successor = board.clone()
                    successor.play_move(row, col, player_symbol)
                    successor.set_origin(row, col)
                    successors.append(successor)
        return successors

    def _leaf_value(self, board: OthelloBoard, root_symbol: str) -> int:
        utility = self.get_utility(board)
        if self.search_config.mode == "alternating" and root_symbol == board.get_p2_symbol():
            return -utility
        return utility

    def _enter_node(self, board: OthelloBoard, depth: int):
        self.nodes_evaluated += 1
        limit = self.search_config.max_recursion_depth or board.dimension * board.dimension
        if depth > limit:
            raise SearchDepthExceededError(
                "Minimax search exceeded the recursion guard",
                context={'depth': depth, 'limit': limit}
            )

    def _at_cutoff(self, depth: int) -> bool:
        cutoff = self.search_config.cutoff_depth
        return cutoff is not None and depth >= cutoff

    def _score_max_child(self, player_symbol: str, successor: OthelloBoard, depth: int) -> int:
        # Value of a child of a maximizing node
        if self.search_config.mode == "legacy":
            return self.minimum_value(player_symbol, successor, depth)[1]
        return self.minimum_value(successor.opponent_of(player_symbol), successor, depth)[1]

    def _score_min_child(self, player_symbol: str, successor: OthelloBoard, depth: int) -> int:
        # Value of a child of a minimizing node
        if self.search_config.mode == "legacy":
            return self.minimum_value(player_symbol, successor, depth)[1]
        return self.maximum_value(successor.opponent_of(player_symbol), successor, depth)[1]

    def minimum_value(self, player_symbol: str, board: OthelloBoard, depth: int = 0) -> Tuple[Optional[Move], int]:
        """
        Minimizing routine.

        Args:
            player_symbol (str): Symbol to move at this node
            board (OthelloBoard): Current game state
            depth (int): Plies below the root

        Returns:
            tuple: (move, value) of the lowest-valued successor, or
            (None, static value) when player_symbol has no legal move
        """
        self._enter_node(board, depth)
        if self.search_config.mode == "legacy":
            root_symbol = player_symbol
        else:
            root_symbol = board.opponent_of(player_symbol)

        if self._at_cutoff(depth):
            return None, self._leaf_value(board, root_symbol)

        successors = self.get_successors(player_symbol, board)
        if not successors:
            return None, self._leaf_value(board, root_symbol)

        best_move = None
        if self.search_config.mode == "legacy":
            min_eval = LEGACY_MIN
            for successor in successors:
                value = self._score_min_child(player_symbol, successor, depth + 1)
                if value > min_eval:
                    min_eval = value
                    best_move = successor.origin_move
            return best_move, min_eval

        min_eval = float("inf")
        for successor in successors:
            value = self._score_min_child(player_symbol, successor, depth + 1)
            if value < min_eval:
                min_eval = value
                best_move = successor.origin_move
        return best_move, min_eval

    def maximum_value(self, player_symbol: str, board: OthelloBoard, depth: int = 0) -> Tuple[Optional[Move], int]:
        """
        Maximizing routine.

        Args:
            player_symbol (str): Symbol to move at this node
            board (OthelloBoard): Current game state
            depth (int): Plies below the root

        Returns:
            tuple: (move, value) of the highest-valued successor, or
            (None, static value) when player_symbol has no legal move
        """
        self._enter_node(board, depth)
        if self._at_cutoff(depth):
            return None, self._leaf_value(board, player_symbol)

        successors = self.get_successors(player_symbol, board)
        if not successors:
            return None, self._leaf_value(board, player_symbol)

        values = [self._score_max_child(player_symbol, successor, depth + 1) for successor in successors]
        return self._select_max(successors, values)

    def _select_max(self, successors: List[OthelloBoard], values: List[int]) -> Tuple[Optional[Move], int]:
        # First successor wins ties
        best_move = None
        max_eval = LEGACY_MAX if self.search_config.mode == "legacy" else float("-inf")
        for successor, value in zip(successors, values):
            if value > max_eval:
                max_eval = value
                best_move = successor.origin_move
        return best_move, max_eval

    def _parallel_maximum_value(self, player_symbol: str, board: OthelloBoard) -> Tuple[Optional[Move], int]:
        """Root maximizing node with each subtree searched by its own clone."""
        self._enter_node(board, 0)
        successors = self.get_successors(player_symbol, board)
        if not successors:
            return None, self._leaf_value(board, player_symbol)

        searchers = [self.clone() for _ in successors]
        with ThreadPoolExecutor(max_workers=self.search_config.workers) as executor:
            values = list(executor.map(
                lambda searcher, successor: searcher._score_max_child(player_symbol, successor, 1),
                searchers, successors
            ))
        self.nodes_evaluated += sum(searcher.nodes_evaluated for searcher in searchers)
        return self._select_max(successors, values)

    def _root_symbol(self, board: OthelloBoard) -> str:
        if self.symbol == board.get_p1_symbol():
            return board.get_p1_symbol()
        if self.symbol == board.get_p2_symbol():
            return board.get_p2_symbol()
        raise UnrecognizedSymbolError(
            f"Player symbol {self.symbol!r} is not registered on the board",
            context={'p1': board.get_p1_symbol(), 'p2': board.get_p2_symbol()}
        )

    def search(self, board: OthelloBoard) -> SearchResult:
        """
        Run the maximizing routine from the root for this player's symbol.

        Raises:
            UnrecognizedSymbolError: symbol matches neither board slot
            SearchDepthExceededError: recursion guard or interpreter limit hit
        """
        root_symbol = self._root_symbol(board)
        self.nodes_evaluated = 0
        self.start_time = time.time()

        try:
            if self.search_config.workers > 1:
                move, value = self._parallel_maximum_value(root_symbol, board)
            else:
                move, value = self.maximum_value(root_symbol, board)
        except RecursionError as e:
            raise SearchDepthExceededError(
                "Interpreter recursion limit reached during minimax search",
                context={'nodes_evaluated': self.nodes_evaluated}
            ) from e

        elapsed = time.time() - self.start_time
        nps = self.nodes_evaluated / elapsed if elapsed > 0 else 0
        logger.info(f"Search | Player: {self.symbol} | Mode: {self.search_config.mode} | "
                    f"Value: {value:+d} | Nodes: {self.nodes_evaluated} | "
                    f"Time: {elapsed:.4f}s | NPS: {nps:.0f}")
        return SearchResult(move, int(value), self.nodes_evaluated, elapsed)

    def get_move(self, board: OthelloBoard) -> Optional[Move]:
        """
        Choose a move for this player.

        Returns:
            Move: Best move found, or None if the position is terminal for
            this player (no legal move)
        """
        result = self.search(board)
        if result.move is None:
            logger.debug(f"No legal move for {self.symbol}; terminal position with value {result.value:+d}")
        return result.move

    def clone(self) -> "MinimaxPlayer":
        return MinimaxPlayer(self.symbol, self.search_config)
