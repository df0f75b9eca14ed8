# ~/Apps/hexl/hex_pane.py
import curses
from itertools import islice

from line_renderer import ROW_WIDTH, Style, render_line


def visible_rows(height: int, buffer) -> int:
    return max(0, min(height, buffer.row_count()))


class HexPane:
    PAIR_ADDRESS = 1
    PAIR_PRIMARY = 2
    PAIR_SECONDARY = 3

    def __init__(self):
        self.attrs = {
            Style.PLAIN: curses.A_NORMAL,
            Style.ADDRESS: curses.A_NORMAL,
            Style.PRIMARY: curses.A_REVERSE,
            Style.SECONDARY: curses.A_BOLD,
        }
        try:
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(self.PAIR_ADDRESS, curses.COLOR_GREEN, -1)
            curses.init_pair(self.PAIR_PRIMARY, curses.COLOR_BLACK, curses.COLOR_WHITE)
            curses.init_pair(self.PAIR_SECONDARY, curses.COLOR_MAGENTA, -1)
            self.attrs[Style.ADDRESS] = curses.color_pair(self.PAIR_ADDRESS)
            self.attrs[Style.PRIMARY] = (
                curses.color_pair(self.PAIR_PRIMARY) | curses.A_BOLD
            )
            self.attrs[Style.SECONDARY] = (
                curses.color_pair(self.PAIR_SECONDARY) | curses.A_BOLD
            )
        except curses.error:
            pass

    # ---------- rendering ----------
    def draw(self, win, buffer, cursor):
        """Draw as many rows as fit, starting at offset 0.

        There is no viewport: rows below the window are not drawn even when
        the cursor sits on them.
        """
        win.erase()
        h, w = win.getmaxyx()
        x0 = max(0, (w - ROW_WIDTH) // 2)

        rows = islice(buffer.rows(), visible_rows(h, buffer))
        for y, (offset, chunk) in enumerate(rows):
            self._draw_line(win, y, x0, w, render_line(chunk, offset, cursor))

        win.noutrefresh()

    def _draw_line(self, win, y, x0, w, spans):
        x = x0
        for span in spans:
            if x >= w:
                break
            try:
                win.addnstr(y, x, span.text, w - x, self.attrs[span.style])
            except curses.error:
                # writing the bottom-right cell raises after the write succeeds
                pass
            x += len(span.text)
