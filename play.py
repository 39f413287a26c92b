from __future__ import annotations
import argparse
import logging
import random

from minesweeper.config import GameConfig, DEFAULT_WIDTH, DEFAULT_HEIGHT, DEFAULT_MINES
from minesweeper.display import render_ascii, outcome_banner
from minesweeper.session import GameSession, Phase

HELP = 'Commands: r X Y (reveal), f X Y (flag), q (quit)'


def parse_command(line: str):
    parts = line.split()
    if not parts:
        return None
    kind = parts[0].lower()
    if kind in ('q', 'quit'):
        return ('quit', None)
    if kind in ('r', 'f') and len(parts) == 3:
        try:
            return ('reveal' if kind == 'r' else 'flag', (int(parts[1]), int(parts[2])))
        except ValueError:
            return None
    return None


def play_game(session: GameSession, config: GameConfig) -> bool:
    """Run one game to completion. Returns False if the player quit."""
    board = session.start(config)
    print(f"[play] {board.width}x{board.height}, {board.num_mines} mines, difficulty: {config.difficulty_label()}")
    print(HELP)
    print(render_ascii(board, headers=True))
    while session.phase is Phase.PLAYING:
        try:
            line = input('> ')
        except EOFError:
            return False
        cmd = parse_command(line)
        if cmd is None:
            print(HELP)
            continue
        kind, xy = cmd
        if kind == 'quit':
            return False
        x, y = xy
        if not board.in_bounds(x, y):
            print(f'[play] ({x}, {y}) is off the board')
            continue
        if kind == 'flag':
            session.toggle_flag(x, y)
        else:
            session.reveal(x, y)
        print(render_ascii(board, headers=True))
    print(outcome_banner(session.outcome))
    return True


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('--width', type=int, default=DEFAULT_WIDTH)
    parser.add_argument('--height', type=int, default=DEFAULT_HEIGHT)
    parser.add_argument('--mines', type=int, default=DEFAULT_MINES)
    parser.add_argument('--seed', type=int, default=-1, help='RNG seed; <0 uses OS entropy (random every run)')
    parser.add_argument('--verbose', action='store_true')
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s %(levelname)s %(message)s')

    config = GameConfig(args.width, args.height, args.mines)
    message = config.validation_message()
    if message is not None:
        parser.error(message)

    rng = random.Random(args.seed) if args.seed >= 0 else random.Random()
    session = GameSession(rng=rng)
    try:
        while play_game(session, config):
            answer = input('Restart? [y/N] ').strip().lower()
            if answer != 'y':
                break
            session.restart()
    except (EOFError, KeyboardInterrupt):
        print()


if __name__ == '__main__':
    main()
