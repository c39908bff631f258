"""
Game loop for two Reversi players.

Usage:
    python -m reversi <p1> <p2>     where each player is 'human' or 'minimax'
"""

import os
import sys
import json
import logging
from datetime import datetime
from typing import List, Optional

from reversi.config import Config, config, configure_logging
from reversi.errors import IllegalMoveError
from reversi.game.othello_board import OthelloBoard
from reversi.players.minimax_player import MinimaxPlayer
from reversi.players.player import HumanPlayer, Player

logger = logging.getLogger(__name__)

PLAYER_TYPES = ("human", "minimax")


class GameDriver:
    """
    Runs a game between two players on an OthelloBoard.

    Attributes:
        board (OthelloBoard): Shared game board
        players (list): [p1, p2], p1 moves first
        game_log (dict): Game metadata and per-move details
    """
    def __init__(self, p1: Player, p2: Player, board: Optional[OthelloBoard] = None):
        if board is None:
            board = OthelloBoard(config.board.dimension, config.board.p1_symbol, config.board.p2_symbol)
            board.initialize()
        self.board = board
        self.players = [p1, p2]
        self.game_log = {
            'game_id': datetime.now().strftime('%Y%m%d_%H%M%S'),
            'start_time': datetime.now().isoformat(),
            'players': {p.symbol: type(p).__name__ for p in self.players},
            'moves': [],
            'initial_state': self.board.get_board_state()
        }

    def print_game_status(self):
        """Display the current score."""
        p1, p2 = self.board.get_p1_symbol(), self.board.get_p2_symbol()
        print(f"\nCurrent score - {p1}: {self.board.count_score(p1)}, {p2}: {self.board.count_score(p2)}")

    def _process_move(self, player: Player) -> bool:
        """
        Ask player for a move and apply it.

        Returns:
            bool: False if the player had to pass
        """
        if not self.board.has_legal_moves_remaining(player.symbol):
            print(f"\n{player.symbol} has no valid moves. Passing...")
            logger.debug(f"{player.symbol} passes")
            return False

        move = player.get_move(self.board)
        if move is None or not self.board.play_move(move.row, move.col, player.symbol):
            raise IllegalMoveError(
                f"{player!r} proposed an illegal move",
                context={'move': move}
            )

        position = self.board.numeric_to_algebraic(move.row, move.col)
        print(f"{player.symbol} plays: {position}")
        self.game_log['moves'].append({
            'move_number': len(self.game_log['moves']) + 1,
            'timestamp': datetime.now().isoformat(),
            'player': player.symbol,
            'move_position': position,
            'board_state': self.board.get_board_state(),
            'score': {p.symbol: self.board.count_score(p.symbol) for p in self.players}
        })
        return True

    def winner(self) -> Optional[str]:
        """Symbol with more discs, or None on a tie."""
        p1, p2 = self.board.get_p1_symbol(), self.board.get_p2_symbol()
        p1_count, p2_count = self.board.count_score(p1), self.board.count_score(p2)
        if p1_count > p2_count:
            return p1
        if p2_count > p1_count:
            return p2
        return None

    def run(self) -> Optional[str]:
        """
        Play until neither player can move.

        Returns:
            str: Winning symbol, or None for a tie
        """
        current = 0
        self.board.display()
        while (self.board.has_legal_moves_remaining(self.players[0].symbol)
               or self.board.has_legal_moves_remaining(self.players[1].symbol)):
            if self._process_move(self.players[current]):
                self.board.display()
                self.print_game_status()
            current = 1 - current

        winner = self.winner()
        self.game_log['end_time'] = datetime.now().isoformat()
        self.game_log['final_score'] = {p.symbol: self.board.count_score(p.symbol) for p in self.players}
        self.game_log['winner'] = winner if winner is not None else 'Tie'

        print("\nGame Over!")
        self.print_game_status()
        print(f"{winner} wins!" if winner else "It's a tie!")
        logger.info(f"Game {self.game_log['game_id']} finished | Winner: {self.game_log['winner']} | "
                    f"Moves: {len(self.game_log['moves'])}")
        return winner

    def save_game_log(self, filename: Optional[str] = None) -> str:
        """
        Save complete game log to a JSON file.

        Args:
            filename (str, optional): Custom filename for log

        Returns:
            str: Path written
        """
        if filename is None:
            filename = f"reversi_game_{self.game_log['game_id']}.json"
        with open(filename, 'w') as f:
            json.dump(self.game_log, f, indent=2)
        logger.info(f"Game log saved to {filename}")
        return filename


def make_player(kind: str, symbol: str, cfg: Config) -> Player:
    if kind == "human":
        return HumanPlayer(symbol)
    if kind == "minimax":
        return MinimaxPlayer(symbol, cfg.search)
    raise ValueError(f"Unknown player type {kind!r}")


def main(argv: Optional[List[str]] = None) -> int:
    """Program entry point; returns the process exit code."""
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) != 2 or any(kind not in PLAYER_TYPES for kind in argv):
        print("Usage: reversi <player1> <player2>")
        print("  where each player is one of: " + ", ".join(PLAYER_TYPES))
        return 1

    configure_logging(config)
    board = OthelloBoard(config.board.dimension, config.board.p1_symbol, config.board.p2_symbol)
    board.initialize()
    p1 = make_player(argv[0], config.board.p1_symbol, config)
    p2 = make_player(argv[1], config.board.p2_symbol, config)

    driver = GameDriver(p1, p2, board)
    driver.run()
    if config.game_log_dir:
        os.makedirs(config.game_log_dir, exist_ok=True)
        driver.save_game_log(os.path.join(config.game_log_dir, f"reversi_game_{driver.game_log['game_id']}.json"))
    return 0
