# ~/Apps/hexl/orchestrator.py
import curses
import time

from config_paths import STATUS_SECONDS_DEFAULT
from hex_editor import HexEditor, QUIT
from hex_pane import HexPane
from logging_config import get_logger
from screen_layout import ScreenLayout
from status_bar import render_status

logger = get_logger("orchestrator")

KEY_CTRL_C = 3


class Orchestrator:
    def __init__(self, stdscr, app_state):
        self.stdscr = stdscr
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        curses.raw()
        self.stdscr.keypad(True)
        # block until the next key; nothing happens between events
        self.stdscr.nodelay(False)
        self.stdscr.timeout(-1)

        self.state = app_state
        self.layout = ScreenLayout(stdscr)
        self.pane = HexPane()

        # ---- status ----
        self.status_msg = None
        self.status_msg_until = 0

        self.editor = HexEditor(self.state, self._set_status)

    # ---------------- helpers ----------------

    def _set_status(self, msg, seconds=STATUS_SECONDS_DEFAULT):
        self.status_msg = msg
        self.status_msg_until = time.time() + seconds

    def _status_context(self):
        return {
            "status_msg": self.status_msg,
            "status_until": self.status_msg_until,
            "mode": self.state.mode_state.label,
            "slot": self.state.cursor.slot_kind.name,
            "file_path": self.state.file_path,
            "index": self.state.cursor.index,
            "last_index": self.state.last_index,
            "size": len(self.state.buffer),
        }

    def _handle_resize(self):
        curses.update_lines_cols()
        self.stdscr.clear()
        self.stdscr.refresh()
        self.layout = ScreenLayout(self.stdscr)
        logger.debug("resized to %dx%d", self.layout.W, self.layout.H)

    # ---------------- UI ----------------

    def redraw(self):
        self.pane.draw(self.layout.hex_win, self.state.buffer, self.state.cursor)

        sw = self.layout.status_win
        sw.erase()
        _, w = sw.getmaxyx()
        text = render_status(self._status_context(), w)
        try:
            sw.addnstr(0, 0, text, w, curses.A_REVERSE)
        except curses.error:
            pass
        sw.noutrefresh()
        curses.doupdate()

    # ---------------- main loop ----------------

    def run(self):
        self.stdscr.clear()
        self.stdscr.refresh()
        self.redraw()

        while True:
            ch = self.stdscr.getch()

            if ch == KEY_CTRL_C:
                break

            if ch == curses.KEY_RESIZE:
                self._handle_resize()

            if self.editor.handle_key(ch) == QUIT:
                break

            self.redraw()

        logger.info("session ended with %d bytes in buffer", len(self.state.buffer))
