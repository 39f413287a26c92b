from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

import numpy as np

logger = logging.getLogger(__name__)

Coordinate = Tuple[int, int]

# 3x3 neighbourhood minus the centre, as (dx, dy)
OFFSETS: Tuple[Coordinate, ...] = tuple(
    (dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)
)


class ConfigurationError(ValueError):
    """Board dimensions or mine count outside the playable range."""


class CellIndexError(IndexError):
    """A cell index outside ``[0, width * height)``."""


class CellKind(Enum):
    MINE = 'mine'
    NUMBER = 'number'
    EMPTY = 'empty'


class Outcome(Enum):
    IN_PROGRESS = 'in_progress'
    WON = 'won'
    LOST = 'lost'

    @property
    def is_terminal(self) -> bool:
        return self is not Outcome.IN_PROGRESS


@dataclass(frozen=True)
class Tile:
    index: int
    kind: CellKind
    adjacent_mines: int = 0

    @property
    def is_mine(self) -> bool:
        return self.kind is CellKind.MINE


@dataclass
class CellState:
    revealed: bool = False
    flagged: bool = False


def validate_dimensions(width: int, height: int, num_mines: int) -> None:
    if width < 1 or height < 1:
        raise ConfigurationError(f'Board must be at least 1x1, got {width}x{height}')
    max_mines = width * height - 1
    if not 1 <= num_mines <= max_mines:
        raise ConfigurationError(f'Number of mines must be between 1 and {max_mines}, got {num_mines}')


def count_adjacent(mines: np.ndarray) -> np.ndarray:
    """Per-cell count of mines among the 8 neighbours.

    ``mines`` is a boolean ``(height, width)`` mask. The mask is zero-padded by
    one cell so the shifted windows never wrap around an edge.
    """
    height, width = mines.shape
    padded = np.pad(mines.astype(np.int8), 1)
    counts = np.zeros((height, width), dtype=np.int8)
    for dx, dy in OFFSETS:
        counts += padded[1 + dy:1 + dy + height, 1 + dx:1 + dx + width]
    return counts


class Board:
    """Immutable layout plus the mutable per-cell state of one game.

    Cells are addressed by linear index ``row * width + col``; ``x`` is the
    column and ``y`` the row.
    """

    def __init__(self, width: int, height: int, tiles: Iterable[Tile]):
        self.tiles: Tuple[Tile, ...] = tuple(tiles)
        num_mines = sum(1 for t in self.tiles if t.is_mine)
        validate_dimensions(width, height, num_mines)
        if len(self.tiles) != width * height:
            raise ConfigurationError(f'Expected {width * height} tiles, got {len(self.tiles)}')
        self.width = width
        self.height = height
        self.num_mines = num_mines
        self.states: List[CellState] = [CellState() for _ in range(width * height)]
        self.outcome = Outcome.IN_PROGRESS

    @classmethod
    def from_mines(cls, width: int, height: int, mines: Iterable[int]) -> 'Board':
        mine_set = set(mines)
        size = width * height
        for m in mine_set:
            if not 0 <= m < size:
                raise ConfigurationError(f'Mine index {m} outside a {width}x{height} board')
        mask = np.zeros(size, dtype=bool)
        mask[list(mine_set)] = True
        counts = count_adjacent(mask.reshape(height, width)).ravel()
        tiles = []
        for i in range(size):
            if mask[i]:
                tiles.append(Tile(i, CellKind.MINE))
            elif counts[i] > 0:
                tiles.append(Tile(i, CellKind.NUMBER, int(counts[i])))
            else:
                tiles.append(Tile(i, CellKind.EMPTY))
        return cls(width, height, tiles)

    @property
    def size(self) -> int:
        return self.width * self.height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def check_index(self, index: int) -> None:
        if not 0 <= index < self.size:
            raise CellIndexError(f'Cell index {index} outside [0, {self.size})')

    def to_xy(self, index: int) -> Coordinate:
        self.check_index(index)
        y, x = divmod(index, self.width)
        return x, y

    def to_index(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise CellIndexError(f'Cell ({x}, {y}) outside a {self.width}x{self.height} board')
        return y * self.width + x

    def neighbors(self, index: int) -> List[int]:
        x, y = self.to_xy(index)
        out = []
        for dx, dy in OFFSETS:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                out.append(ny * self.width + nx)
        return out

    def tile(self, index: int) -> Tile:
        self.check_index(index)
        return self.tiles[index]

    def state(self, index: int) -> CellState:
        self.check_index(index)
        return self.states[index]

    def mine_indices(self) -> List[int]:
        return [t.index for t in self.tiles if t.is_mine]

    def revealed_indices(self) -> List[int]:
        return [i for i, s in enumerate(self.states) if s.revealed]

    def unrevealed_safe_count(self) -> int:
        return sum(1 for t, s in zip(self.tiles, self.states) if not t.is_mine and not s.revealed)


def place_mines(size: int, num_mines: int, rng: random.Random) -> List[int]:
    # Rejection sampling; num_mines <= size - 1 keeps the expected draw count bounded
    mines = set()
    draws = 0
    while len(mines) < num_mines:
        draws += 1
        mines.add(rng.randrange(size))
    logger.debug('placed %d mines in %d draws', num_mines, draws)
    return sorted(mines)


def generate(width: int, height: int, num_mines: int,
             rng: Optional[random.Random] = None, seed: Optional[int] = None) -> Board:
    validate_dimensions(width, height, num_mines)
    if rng is not None and seed is not None:
        raise ValueError('Pass either rng or seed, not both')
    if rng is None:
        rng = random.Random(int(seed)) if seed is not None else random.Random()
    mines = place_mines(width * height, num_mines, rng)
    board = Board.from_mines(width, height, mines)
    logger.debug('generated %dx%d board with %d mines', width, height, num_mines)
    return board
