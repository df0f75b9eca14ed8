import sys
import os
import curses

from config_paths import DEBUG_LOG_LEVEL, LOG_LEVEL_DEFAULT, LOG_PATH, ensure_state_dir
from file_loader import FileLoader, LoadError
from logging_config import setup_logging

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")
from orchestrator import Orchestrator
from app_state import AppState

try:
    from _version import __version__
except Exception:
    __version__ = "0.0.0"


USAGE = "Usage: hexl [-d] <path>"
HELP = (
    "hexl - terminal-native hex editor\n\nUsage:\n  hexl [-d] <path>\n  hexl -v\n"
    "\nKeys:\n  h j k l  move      H / L  switch hex/ascii pane\n"
    "  i        insert    Esc    back to normal\n"
    "  x        delete    q      quit\n"
)


def _parse_args(args):
    """Split argv into (path, debug). path is None when missing or ambiguous."""
    debug = False
    positional = []
    for arg in args:
        if arg in ("-d", "--debug"):
            debug = True
        else:
            positional.append(arg)
    path = positional[0] if len(positional) == 1 else None
    return path, debug


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)

    if "-v" in args or "-V" in args:
        print(__version__)
        return 0

    if "-h" in args or "--help" in args:
        print(HELP)
        return 0

    path, debug = _parse_args(args)
    if path is None:
        print(USAGE, file=sys.stderr)
        sys.exit(1)

    if debug and ensure_state_dir():
        setup_logging(DEBUG_LOG_LEVEL, LOG_PATH)
    else:
        setup_logging(LOG_LEVEL_DEFAULT)

    try:
        data = FileLoader(path).load()
    except LoadError as e:
        print(f"Load failed: {e}", file=sys.stderr)
        sys.exit(1)

    def curses_main(stdscr):
        state = AppState(data, path)
        Orchestrator(stdscr, state).run()

    curses.wrapper(curses_main)
    return 0


if __name__ == "__main__":
    main()
