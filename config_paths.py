import os

HOME = os.path.expanduser("~")
XDG_STATE_HOME = os.environ.get("XDG_STATE_HOME")
STATE_HOME = XDG_STATE_HOME if XDG_STATE_HOME else os.path.join(HOME, ".local", "state")
STATE_DIR = os.path.join(STATE_HOME, "hexl")
LOG_PATH = os.path.join(STATE_DIR, "hexl.log")

# default settings
LOG_LEVEL_DEFAULT = "NONE"
DEBUG_LOG_LEVEL = "DEBUG"
STATUS_SECONDS_DEFAULT = 3


def ensure_state_dir():
    try:
        os.makedirs(STATE_DIR, exist_ok=True)
    except OSError:
        return False
    return True
