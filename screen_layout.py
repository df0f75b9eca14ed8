import curses


class ScreenLayout:
    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.H, self.W = stdscr.getmaxyx()

        # layout: hex dump (main), status bar (1 line)
        self.status_h = 1

        self.hex_h = max(1, self.H - self.status_h)

        self.hex_win = curses.newwin(self.hex_h, self.W, 0, 0)
        self.hex_win.leaveok(True)

        self.status_win = curses.newwin(self.status_h, self.W, self.hex_h, 0)
        self.status_win.leaveok(True)
