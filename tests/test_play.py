import random

import pytest

from minesweeper.board import Outcome
from minesweeper.config import GameConfig
from minesweeper.session import GameSession, Phase
from play import parse_command, play_game


@pytest.mark.parametrize('line,expected', [
    ('r 1 2', ('reveal', (1, 2))),
    ('F 0 3', ('flag', (0, 3))),
    ('q', ('quit', None)),
    ('', None),
    ('r 1', None),
    ('r a b', None),
    ('x 1 2', None),
])
def test_parse_command(line, expected):
    assert parse_command(line) == expected


def test_play_game_until_win(monkeypatch, capsys):
    session = GameSession(rng=random.Random(0))
    # 2x1 board: the only safe cell wins; compute it once the board exists
    commands = iter(['bogus', 'f 5 5'])

    def fake_input(prompt=''):
        try:
            return next(commands)
        except StopIteration:
            board = session.board
            safe = next(t.index for t in board.tiles if not t.is_mine)
            x, y = board.to_xy(safe)
            return f'r {x} {y}'

    monkeypatch.setattr('builtins.input', fake_input)
    assert play_game(session, GameConfig(2, 1, 1)) is True
    assert session.outcome is Outcome.WON
    out = capsys.readouterr().out
    assert 'off the board' in out
    assert 'You won!' in out


def test_play_game_quit(monkeypatch):
    session = GameSession(rng=random.Random(0))
    monkeypatch.setattr('builtins.input', lambda prompt='': 'q')
    assert play_game(session, GameConfig(4, 4, 2)) is False
    assert session.phase is Phase.PLAYING
