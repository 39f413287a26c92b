from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .board import validate_dimensions

DEFAULT_WIDTH = 10
DEFAULT_HEIGHT = 10
DEFAULT_MINES = 10

# (upper bound on mine ratio, label)
DIFFICULTY_LEVELS = (
    (0.05, 'trivial'),
    (0.12, 'easy'),
    (0.16, 'medium'),
    (0.20, 'hard'),
)
DEADLY = 'deadly'
DANGER_RATIO = 0.20


@dataclass
class GameConfig:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    num_mines: int = DEFAULT_MINES

    @classmethod
    def clamp(cls, width: int, height: int, num_mines: int) -> 'GameConfig':
        """Pull raw form values into range: dimensions >= 1, mines in [1, max].

        A 1x1 board has no room for a mine and a safe cell, so it comes back
        with one mine and stays invalid.
        """
        width = max(1, int(width))
        height = max(1, int(height))
        max_mines = max(1, width * height - 1)
        return cls(width, height, min(max_mines, max(1, int(num_mines))))

    @property
    def max_mines(self) -> int:
        return self.width * self.height - 1

    @property
    def mine_ratio(self) -> float:
        cells = self.width * self.height
        return self.num_mines / cells if cells > 0 else 0.0

    @property
    def is_valid(self) -> bool:
        return self.validation_message() is None

    @property
    def is_dangerous(self) -> bool:
        return self.mine_ratio > DANGER_RATIO

    def validation_message(self) -> Optional[str]:
        if self.width < 1 or self.height < 1:
            return 'Width and height must be at least 1'
        if not 1 <= self.num_mines <= self.max_mines:
            return f'Number of mines must be between 1 and {self.max_mines}'
        return None

    def validate(self) -> None:
        validate_dimensions(self.width, self.height, self.num_mines)

    def difficulty_label(self) -> str:
        ratio = self.mine_ratio
        for bound, label in DIFFICULTY_LEVELS:
            if ratio <= bound:
                return label
        return DEADLY
