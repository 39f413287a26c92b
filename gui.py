from __future__ import annotations
import argparse
import logging
import random
import tkinter as tk
from tkinter import ttk

from minesweeper.board import Outcome
from minesweeper.config import GameConfig
from minesweeper.display import EMOJI, cell_symbol, outcome_banner
from minesweeper.session import GameSession, Phase


CELL_SIZE = 28
PADDING = 10
COLOR_MAP = {
    1: '#1976d2',
    2: '#388e3c',
    3: '#d32f2f',
    4: '#7b1fa2',
    5: '#5d4037',
    6: '#0097a7',
    7: '#455a64',
    8: '#9e9e9e',
}


class MinesweeperGUI:
    def __init__(self, root: tk.Tk, session: GameSession):
        self.root = root
        self.root.title('Mineswept')
        self.session = session

        # Config controls
        control_frame = ttk.Frame(root)
        control_frame.pack(side=tk.TOP, fill=tk.X, padx=8, pady=6)

        defaults = GameConfig()
        ttk.Label(control_frame, text='Width').grid(row=0, column=0, sticky='w')
        self.width_var = tk.StringVar(value=str(defaults.width))
        width_entry = ttk.Entry(control_frame, textvariable=self.width_var, width=4)
        width_entry.grid(row=0, column=1)

        ttk.Label(control_frame, text='Height').grid(row=0, column=2, sticky='w')
        self.height_var = tk.StringVar(value=str(defaults.height))
        height_entry = ttk.Entry(control_frame, textvariable=self.height_var, width=4)
        height_entry.grid(row=0, column=3)

        ttk.Label(control_frame, text='Mines').grid(row=0, column=4, sticky='w')
        self.mines_var = tk.StringVar(value=str(defaults.num_mines))
        mines_entry = ttk.Entry(control_frame, textvariable=self.mines_var, width=5)
        mines_entry.grid(row=0, column=5)

        self.label_difficulty = ttk.Label(control_frame, text='', width=18)
        self.label_difficulty.grid(row=0, column=6, padx=8)

        self.btn_start = ttk.Button(control_frame, text='Start Game', command=self.start)
        self.btn_start.grid(row=0, column=7, padx=4)

        self.label_error = tk.Label(root, text='', fg='red')
        self.label_error.pack(side=tk.TOP)

        for var in (self.width_var, self.height_var, self.mines_var):
            var.trace_add('write', lambda *_: self._on_config_change())
        # Out-of-range values snap back into range once the field is left
        for entry in (width_entry, height_entry, mines_entry):
            entry.bind('<FocusOut>', lambda _e: self._clamp_fields())
            entry.bind('<Return>', lambda _e: self._clamp_fields())

        # Game over banner
        banner_frame = ttk.Frame(root)
        banner_frame.pack(side=tk.TOP, fill=tk.X, padx=8, pady=2)
        self.label_banner = ttk.Label(banner_frame, text='')
        self.label_banner.pack(side=tk.LEFT)
        self.btn_restart = ttk.Button(banner_frame, text='Restart', command=self.restart, state='disabled')
        self.btn_restart.pack(side=tk.LEFT, padx=8)

        self.canvas = tk.Canvas(root, bg='#dddddd', width=0, height=0)
        self.canvas.pack(side=tk.TOP, padx=PADDING, pady=PADDING)
        self.canvas.bind('<Button-1>', self.on_left_click)
        self.canvas.bind('<Button-3>', self.on_right_click)
        # macOS reports the secondary button as Button-2
        self.canvas.bind('<Button-2>', self.on_right_click)

        self._on_config_change()

    def _read_config(self) -> GameConfig | None:
        try:
            return GameConfig(int(self.width_var.get()), int(self.height_var.get()), int(self.mines_var.get()))
        except ValueError:
            return None

    def _clamp_fields(self):
        config = self._read_config()
        if config is None:
            return
        clamped = GameConfig.clamp(config.width, config.height, config.num_mines)
        for var, value in ((self.width_var, clamped.width), (self.height_var, clamped.height),
                           (self.mines_var, clamped.num_mines)):
            if var.get() != str(value):
                var.set(str(value))

    def _on_config_change(self):
        config = self._read_config()
        if config is None:
            self.label_difficulty.config(text='')
            self.label_error.config(text='Width, height and mines must be whole numbers')
            self.btn_start.config(state='disabled')
            return
        message = config.validation_message()
        self.label_error.config(text=message or '')
        if message is None:
            label = f'difficulty: {config.difficulty_label()}'
            self.label_difficulty.config(text=label, foreground='red' if config.is_dangerous else '')
        else:
            self.label_difficulty.config(text='')
        can_start = message is None and self.session.phase is Phase.CONFIGURING
        self.btn_start.config(state='normal' if can_start else 'disabled')

    def start(self):
        config = self._read_config()
        if config is None or not config.is_valid:
            return
        self.session.start(config)
        print(f'[gui] New game {config.width}x{config.height}, {config.num_mines} mines')
        self.btn_start.config(state='disabled')
        self.label_banner.config(text='')
        self.btn_restart.config(state='disabled')
        self._resize_canvas()
        self._render()

    def restart(self):
        self.session.restart()
        self.canvas.delete('all')
        self.canvas.config(width=0, height=0)
        self.label_banner.config(text='')
        self.btn_restart.config(state='disabled')
        self._on_config_change()

    def _resize_canvas(self):
        board = self.session.board
        w = board.width * CELL_SIZE + PADDING * 2
        h = board.height * CELL_SIZE + PADDING * 2
        self.canvas.config(width=w, height=h)

    def _cell_at(self, event):
        board = self.session.board
        if board is None:
            return None
        x = (event.x - PADDING) // CELL_SIZE
        y = (event.y - PADDING) // CELL_SIZE
        if not board.in_bounds(x, y):
            return None
        return x, y

    def on_left_click(self, event):
        xy = self._cell_at(event)
        if xy is None or self.session.phase is not Phase.PLAYING:
            return
        outcome = self.session.reveal(*xy)
        self._render()
        if outcome.is_terminal:
            self._game_over(outcome)

    def on_right_click(self, event):
        xy = self._cell_at(event)
        if xy is None or self.session.phase is not Phase.PLAYING:
            return
        self.session.toggle_flag(*xy)
        self._render()

    def _game_over(self, outcome: Outcome):
        print(f'[gui] {outcome_banner(outcome)}')
        self.label_banner.config(text=outcome_banner(outcome))
        self.btn_restart.config(state='normal')

    def _render(self):
        board = self.session.board
        assert board is not None
        self.canvas.delete('all')
        for i, (tile, state) in enumerate(zip(board.tiles, board.states)):
            x, y = board.to_xy(i)
            px = PADDING + x * CELL_SIZE
            py = PADDING + y * CELL_SIZE
            text = cell_symbol(tile, state, EMOJI)
            if not state.revealed:
                self.canvas.create_rectangle(px, py, px+CELL_SIZE, py+CELL_SIZE, fill='#eeeeee', outline='grey')
            elif tile.is_mine:
                self.canvas.create_rectangle(px, py, px+CELL_SIZE, py+CELL_SIZE, fill='#ef5350', outline='#999')
            else:
                self.canvas.create_rectangle(px, py, px+CELL_SIZE, py+CELL_SIZE, fill='#dddddd', outline='#ccc')
            if text:
                color = COLOR_MAP.get(tile.adjacent_mines, '#212121') if state.revealed else '#212121'
                self.canvas.create_text(px+CELL_SIZE/2, py+CELL_SIZE/2, text=text, fill=color, font=('Helvetica', 12, 'bold'))


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('--seed', type=int, default=-1, help='RNG seed; <0 uses OS entropy (random every run)')
    parser.add_argument('--verbose', action='store_true')
    args = parser.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s %(levelname)s %(message)s')
    rng = random.Random(args.seed) if args.seed >= 0 else random.Random()
    root = tk.Tk()
    MinesweeperGUI(root, GameSession(rng=rng))
    root.mainloop()


if __name__ == '__main__':
    main()
