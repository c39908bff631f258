import os
import logging
from dataclasses import dataclass, field
from typing import Optional

SEARCH_MODES = ("alternating", "legacy")

@dataclass
class BoardConfig:
    # Game
    dimension: int = 4
    p1_symbol: str = "X"  # Black, moves first
    p2_symbol: str = "O"  # White

    def __post_init__(self):
        if self.dimension < 2 or self.dimension % 2:
            raise ValueError(f"Board dimension must be an even number >= 2, got {self.dimension}")
        for symbol in (self.p1_symbol, self.p2_symbol):
            if len(symbol) != 1 or symbol == ".":
                raise ValueError(f"Player symbols must be single characters other than '.', got {symbol!r}")
        if self.p1_symbol == self.p2_symbol:
            raise ValueError("Player symbols must differ")

@dataclass
class SearchConfig:
    # Recursion shape: "alternating" min/max or the "legacy" single-symbol recursion
    mode: str = "alternating"

    # Guard against runaway recursion; None means one ply per board cell
    max_recursion_depth: Optional[int] = None

    # Opt-in heuristic cutoff; None searches to terminal states
    cutoff_depth: Optional[int] = None

    # Root successors evaluated in parallel when > 1
    workers: int = 1

    def __post_init__(self):
        if self.mode not in SEARCH_MODES:
            raise ValueError(f"Unknown search mode {self.mode!r}, expected one of {SEARCH_MODES}")
        if self.max_recursion_depth is not None and self.max_recursion_depth < 1:
            raise ValueError("max_recursion_depth must be positive")
        if self.cutoff_depth is not None and self.cutoff_depth < 1:
            raise ValueError("cutoff_depth must be positive")
        if self.workers < 1:
            raise ValueError("workers must be at least 1")

@dataclass
class Config:
    board: BoardConfig = field(default_factory=BoardConfig)
    search: SearchConfig = field(default_factory=SearchConfig)

    # Logging
    log_level: str = "INFO"
    log_format: str = '%(asctime)s - %(levelname)s - %(message)s'

    # Paths; game logs are only written when set
    game_log_dir: Optional[str] = None

    @staticmethod
    def from_env() -> "Config":
        cfg = Config()
        cfg.log_level = os.environ.get("REVERSI_LOG_LEVEL", cfg.log_level).upper()
        mode = os.environ.get("REVERSI_SEARCH_MODE")
        if mode:
            cfg.search = SearchConfig(mode=mode)
        dimension = os.environ.get("REVERSI_BOARD_DIMENSION")
        if dimension:
            cfg.board = BoardConfig(dimension=int(dimension))
        cfg.game_log_dir = os.environ.get("REVERSI_GAME_LOG_DIR")
        return cfg


def configure_logging(cfg: Optional[Config] = None):
    """Configure root logging with the project's format and level."""
    cfg = cfg or config
    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.INFO),
        format=cfg.log_format
    )


config = Config.from_env()
