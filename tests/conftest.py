"""
Shared fixtures: hand-built boards with known mine positions.
"""
import pytest

from minesweeper.board import Board, CellKind, Tile


@pytest.fixture
def two_by_one() -> Board:
    """2x1 board, mine on the right."""
    return Board.from_mines(2, 1, [1])


@pytest.fixture
def corner_mine_3x3() -> Board:
    """
    3x3 layout with the mine at index 8 and a 1 on every other cell.

    A real mine at index 8 only touches cells 4, 5 and 7, so the tiles are
    laid out by hand to keep every reveal from cascading.
    """
    tiles = [Tile(i, CellKind.NUMBER, 1) for i in range(8)] + [Tile(8, CellKind.MINE)]
    return Board(3, 3, tiles)


@pytest.fixture
def centre_mine_3x3() -> Board:
    """3x3 board, mine in the middle; all eight other cells border it."""
    return Board.from_mines(3, 3, [4])


@pytest.fixture
def strip_5x1() -> Board:
    """5x1 strip with the mine at the far end: . . . 1 *"""
    return Board.from_mines(5, 1, [4])


@pytest.fixture
def region_board() -> Board:
    """
    5x5 board with mines down the right column.

        . . . 2 *
        . . . 3 *
        . . . 3 *
        . . . 3 *
        . . . 2 *
    """
    return Board.from_mines(5, 5, [4, 9, 14, 19, 24])


@pytest.fixture
def split_board() -> Board:
    """
    6x3 board with a wall of mines splitting two zero regions.

        . 2 * * 2 .
        . 3 * * 3 .
        . 2 * * 2 .
    """
    return Board.from_mines(6, 3, [2, 3, 8, 9, 14, 15])
