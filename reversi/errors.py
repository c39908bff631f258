"""
Exception hierarchy for the Reversi engine.

No-legal-move is not an error: the search signals it with an empty
successor list and the move selector with a ``None`` move.
"""

from typing import Any, Dict, Optional


class ReversiError(Exception):
    """
    Base exception for all Reversi errors.

    Attributes:
        message (str): Human-readable error description
        context (dict): Additional context for debugging
    """
    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({ctx})"
        return self.message


class UnrecognizedSymbolError(ReversiError):
    """The player's symbol matches neither of the board's registered symbols."""


class SearchDepthExceededError(ReversiError):
    """The minimax recursion went deeper than the configured guard allows."""


class IllegalMoveError(ReversiError):
    """A player proposed a move that is not legal on the current board."""
