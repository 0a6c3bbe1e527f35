"""curses front-end: character-cell board, side panel and key polling"""
import curses
import os

from tetris_board import ROWS, COLS
from tetris_config import CONFIG
from tetris_engine import GameInfo
from tetris_fsm import Action, Phase
from tetris_input import KeyboardController
from tetris_piece import BrickColor

CELL = "██"
EMPTY = " ."
BORDER_V, BORDER_H = "│", "─"
BORDER_TL, BORDER_TR, BORDER_BL, BORDER_BR = "┌", "┐", "└", "┘"

PANEL_W = 16

KEYMAP = {
    curses.KEY_LEFT: Action.LEFT,
    curses.KEY_RIGHT: Action.RIGHT,
    curses.KEY_UP: Action.UP,
    curses.KEY_DOWN: Action.DOWN,
    ord(" "): Action.ACTION,
    ord("\n"): Action.START,
    curses.KEY_ENTER: Action.START,
    27: Action.PAUSE,
    ord("p"): Action.PAUSE,
    ord("P"): Action.PAUSE,
    ord("q"): Action.TERMINATE,
    ord("Q"): Action.TERMINATE,
}

PIECE_COLOR = {
    BrickColor.LIGHT_BLUE: curses.COLOR_CYAN,
    BrickColor.DARK_BLUE: curses.COLOR_BLUE,
    BrickColor.ORANGE: curses.COLOR_WHITE,
    BrickColor.YELLOW: curses.COLOR_YELLOW,
    BrickColor.GREEN: curses.COLOR_GREEN,
    BrickColor.RED: curses.COLOR_RED,
    BrickColor.MAGENTA: curses.COLOR_MAGENTA,
}

BANNERS = {
    Phase.READY: "Enter to start",
    Phase.PAUSED: "PAUSED",
    Phase.GAMEOVER: "GAME OVER - Enter",
    Phase.TERMINATED: "bye",
}

HELP = ("←/→ move", "↓ drop", "↓↓ hard drop", "Space rotate", "Esc pause", "Q quit")


def safe_addstr(win, y, x, s, attr=0):
    try:
        win.addstr(y, x, s, attr)
    except curses.error:
        pass


def init_colors():
    curses.start_color()
    curses.use_default_colors()
    for tag, fg in PIECE_COLOR.items():
        curses.init_pair(int(tag), fg, -1)
    ui_pair = len(PIECE_COLOR) + 1
    curses.init_pair(ui_pair, curses.COLOR_CYAN, -1)
    return ui_pair


def draw_border(win, x, y, w, h, attr=0):
    safe_addstr(win, y, x, BORDER_TL + BORDER_H * (w - 2) + BORDER_TR, attr)
    for r in range(1, h - 1):
        safe_addstr(win, y + r, x, BORDER_V, attr)
        safe_addstr(win, y + r, x + w - 1, BORDER_V, attr)
    safe_addstr(win, y + h - 1, x, BORDER_BL + BORDER_H * (w - 2) + BORDER_BR, attr)


class TerminalView:
    def __init__(self, stdscr):
        self.stdscr = stdscr
        curses.curs_set(0)
        stdscr.keypad(True)
        stdscr.timeout(CONFIG["POLL_MS"])
        self.ui_pair = init_colors() if curses.has_colors() else 0
        self.keyboard = KeyboardController(KEYMAP)

    def poll(self):
        ch = self.stdscr.getch()
        return self.keyboard.feed(None if ch == -1 else ch)

    def _cell_attr(self, tag, colorless):
        if colorless or not curses.has_colors():
            return curses.A_DIM if colorless else 0
        return curses.color_pair(tag)

    def draw(self, info: GameInfo, phase: Phase):
        win = self.stdscr
        win.erase()
        H, W = win.getmaxyx()
        play_w, play_h = COLS * 2 + 2, ROWS + 2
        min_w, min_h = play_w + PANEL_W + 4, play_h + 2
        if W < min_w or H < min_h:
            msg = f" Resize terminal to at least {min_w}x{min_h} "
            safe_addstr(win, H // 2, max(0, (W - len(msg)) // 2), msg, curses.A_BOLD)
            win.refresh()
            return

        ui = curses.color_pair(self.ui_pair) if self.ui_pair else 0
        x0 = max(0, (W - min_w) // 2)
        y0 = 1
        colorless = info.pause == 1

        title = BANNERS.get(phase, "TETRIS")
        safe_addstr(win, 0, x0 + max(0, (play_w - len(title)) // 2), title, curses.A_BOLD | ui)

        draw_border(win, x0, y0, play_w, play_h, ui)
        for r, row in enumerate(info.field):
            for c, tag in enumerate(row):
                if tag:
                    safe_addstr(win, y0 + 1 + r, x0 + 1 + c * 2, CELL, self._cell_attr(tag, colorless))
                else:
                    safe_addstr(win, y0 + 1 + r, x0 + 1 + c * 2, EMPTY, curses.A_DIM)

        px = x0 + play_w + 2
        stats = (("score", info.score), ("high score", info.high_score),
                 ("level", info.level), ("speed", info.speed))
        y = y0
        for label, value in stats:
            safe_addstr(win, y, px, label, ui)
            safe_addstr(win, y + 1, px, f"{value:>{PANEL_W - 2}}", curses.A_BOLD)
            y += 3

        safe_addstr(win, y, px, "next", ui)
        for r, row in enumerate(info.next):
            for c, tag in enumerate(row):
                if tag:
                    safe_addstr(win, y + 1 + r, px + c * 2, CELL, self._cell_attr(tag, colorless))
        y += len(info.next) + 2

        for line in HELP:
            safe_addstr(win, y, px, line, curses.A_DIM)
            y += 1
        win.refresh()


def run_terminal(engine, loop):
    """Run ``loop(engine, view)`` inside curses.wrapper."""
    # short Esc delay so Pause answers immediately
    os.environ.setdefault("ESCDELAY", "25")
    return curses.wrapper(lambda stdscr: loop(engine, TerminalView(stdscr)))
