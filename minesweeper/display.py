from __future__ import annotations
from dataclasses import dataclass

from .board import Board, CellKind, CellState, Outcome, Tile


@dataclass(frozen=True)
class SymbolSet:
    flag: str = 'F'
    hidden: str = '#'
    mine: str = '*'
    empty: str = '.'


ASCII = SymbolSet()
EMOJI = SymbolSet(flag='⛳️', hidden='', mine='💣', empty='')


def cell_symbol(tile: Tile, state: CellState, symbols: SymbolSet = ASCII) -> str:
    if not state.revealed:
        return symbols.flag if state.flagged else symbols.hidden
    if tile.kind is CellKind.MINE:
        return symbols.mine
    if tile.kind is CellKind.NUMBER:
        return str(tile.adjacent_mines)
    return symbols.empty


def render_ascii(board: Board, reveal_all: bool = False, headers: bool = False) -> str:
    rows = []
    if headers:
        rows.append('   ' + ' '.join(str(x % 10) for x in range(board.width)))
    for y in range(board.height):
        row = []
        for x in range(board.width):
            i = y * board.width + x
            state = board.states[i]
            if reveal_all:
                state = CellState(revealed=True, flagged=state.flagged)
            row.append(cell_symbol(board.tiles[i], state))
        line = ' '.join(row)
        rows.append(f'{y:>2} {line}' if headers else line)
    return '\n'.join(rows)


def outcome_banner(outcome: Outcome) -> str:
    if outcome is Outcome.WON:
        return 'You won!'
    if outcome is Outcome.LOST:
        return 'You lost.'
    return ''
