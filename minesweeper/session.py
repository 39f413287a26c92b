from __future__ import annotations
import logging
import random
from enum import Enum
from typing import Optional

from .board import Board, CellState, Outcome, generate
from .config import GameConfig
from . import engine

logger = logging.getLogger(__name__)


class Phase(Enum):
    CONFIGURING = 'configuring'
    PLAYING = 'playing'
    GAME_OVER = 'game_over'


class GameSession:
    """Configure -> play -> game over -> configure loop around one board at a time."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        self.phase = Phase.CONFIGURING
        self.config: Optional[GameConfig] = None
        self.board: Optional[Board] = None
        self.won = False

    @property
    def outcome(self) -> Outcome:
        return self.board.outcome if self.board is not None else Outcome.IN_PROGRESS

    def start(self, config: GameConfig) -> Board:
        config.validate()
        self.config = config
        self.board = generate(config.width, config.height, config.num_mines, rng=self.rng)
        self.phase = Phase.PLAYING
        self.won = False
        logger.debug('session started: %s', config)
        return self.board

    def reveal(self, x: int, y: int) -> Outcome:
        if self.phase is not Phase.PLAYING:
            return self.outcome
        outcome = engine.reveal(self.board, self.board.to_index(x, y))
        if outcome.is_terminal:
            self.phase = Phase.GAME_OVER
            self.won = outcome is Outcome.WON
        return outcome

    def toggle_flag(self, x: int, y: int) -> Optional[CellState]:
        if self.phase is not Phase.PLAYING:
            return None
        return engine.toggle_flag(self.board, self.board.to_index(x, y))

    def restart(self) -> None:
        self.board = None
        self.won = False
        self.phase = Phase.CONFIGURING
