from __future__ import annotations
import logging
from typing import List

from .board import Board, CellKind, CellState, Outcome

logger = logging.getLogger(__name__)


def reveal(board: Board, index: int) -> Outcome:
    """Uncover a cell and return the resulting outcome.

    Mutates ``board.states`` and ``board.outcome`` in place. Revealing a
    mine discloses every mine and loses; anything else floods outwards from
    ``index`` and then checks for a win. Already revealed cells and finished
    games are left untouched.
    """
    tile = board.tile(index)
    if board.outcome.is_terminal:
        return board.outcome
    if board.states[index].revealed:
        return board.outcome
    if tile.is_mine:
        for i in board.mine_indices():
            board.states[i].revealed = True
        board.outcome = Outcome.LOST
        logger.info('mine revealed at %d, game lost', index)
        return board.outcome
    opened = cascade(board, index)
    logger.debug('reveal %d opened %d cells', index, len(opened))
    return check_win(board)


def cascade(board: Board, start: int) -> List[int]:
    # Flags never gate the traversal
    board.check_index(start)
    opened = []
    stack = [start]
    while stack:
        i = stack.pop()
        tile = board.tiles[i]
        state = board.states[i]
        if state.revealed or tile.is_mine:
            continue
        state.revealed = True
        opened.append(i)
        if tile.kind is CellKind.EMPTY:
            stack.extend(reversed(board.neighbors(i)))
    return opened


def check_win(board: Board) -> Outcome:
    if board.unrevealed_safe_count() == 0:
        for i in board.mine_indices():
            board.states[i].flagged = True
        board.outcome = Outcome.WON
        logger.info('all safe cells revealed, game won')
    return board.outcome


def toggle_flag(board: Board, index: int) -> CellState:
    state = board.state(index)
    if board.outcome.is_terminal:
        return state
    state.flagged = not state.flagged
    return state
