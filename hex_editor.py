# ~/Apps/hexl/hex_editor.py
import curses

from byte_buffer import BYTES_PER_ROW
from cursor import SlotKind
from editor_mode import EditorMode, ModeState, NibblePhase
from logging_config import get_logger

logger = get_logger("hex_editor")

KEY_ESC = 27
BACKSPACE_KEYS = (curses.KEY_BACKSPACE, 127, 8)
ENTER_KEYS = (10, 13, curses.KEY_ENTER)
HEX_DIGITS = "0123456789abcdef"
QUIT = "quit"


class HexEditor:
    """Handles buffer editing state and key interactions.

    Keys are curses key codes. `handle_key` returns "quit" when the session
    should end and None otherwise.
    """

    def __init__(self, state, set_status_cb=None):
        self.state = state
        self._set_status = set_status_cb or (lambda *_: None)

    # ---------- helpers ----------
    @property
    def buffer(self):
        return self.state.buffer

    @property
    def cursor(self):
        return self.state.cursor

    def _set_mode(self, mode_state: ModeState):
        if mode_state.mode is not self.state.mode_state.mode:
            logger.debug("mode %s -> %s", self.state.mode_state.label, mode_state.label)
        self.state.mode_state = mode_state

    def _advance(self):
        self.cursor.move_by(1, self.buffer.last_index)

    @staticmethod
    def _is_printable(ch: int) -> bool:
        return 0x20 <= ch <= 0x7E

    # ---------- public entrypoint ----------
    def handle_key(self, ch: int):
        if ch == KEY_ESC:
            self._set_mode(ModeState.normal())
            return None

        mode = self.state.mode_state.mode
        if mode is EditorMode.INSERT:
            self._handle_insert(ch)
            return None
        if mode is EditorMode.NORMAL:
            return self._handle_normal(ch)
        return None

    # ---------- insert mode ----------
    def _handle_insert(self, ch: int) -> None:
        if self.cursor.slot_kind is SlotKind.HEX:
            self._handle_hex_insert(ch)
        else:
            self._handle_ascii_insert(ch)

    def _handle_hex_insert(self, ch: int) -> None:
        if not (0 <= ch < 0x80) or chr(ch) not in HEX_DIGITS:
            self._ignore(ch)
            return
        value = HEX_DIGITS.index(chr(ch))
        idx = self.cursor.index

        if self.state.mode_state.phase is NibblePhase.HIGH:
            self.buffer.insert(idx, value << 4)
            self._set_mode(ModeState.insert(NibblePhase.LOW))
            return

        self.buffer.or_at(idx, value)
        self._set_mode(ModeState.insert(NibblePhase.HIGH))
        self._advance()

    def _handle_ascii_insert(self, ch: int) -> None:
        if ch in BACKSPACE_KEYS:
            idx = self.cursor.index
            if idx == 0:
                return
            self.buffer.remove(idx - 1)
            self.cursor.index = idx - 1
            self.state.clamp_cursor()
            return

        if ch in ENTER_KEYS:
            self.buffer.insert(self.cursor.index, 0x0A)
            self._advance()
            return

        if self._is_printable(ch):
            self.buffer.insert(self.cursor.index, ch)
            self._advance()
            return

        self._ignore(ch)

    # ---------- normal mode ----------
    def _handle_normal(self, ch: int):
        if ch == ord("i"):
            self._set_mode(ModeState.insert())
            return None

        if ch == ord("q"):
            return QUIT

        if self.state.mode_state.allow_motion():
            if ch == ord("l"):
                self.move_right()
                return None
            if ch == ord("h"):
                self.move_left()
                return None
            if ch == ord("j"):
                self.move_down()
                return None
            if ch == ord("k"):
                self.move_up()
                return None

        if ch == ord("x"):
            self.delete_at_cursor()
            return None

        if ch in (ord("H"), ord("L")) and self.state.mode_state.allow_motion():
            self.cursor.switch()
            return None

        self._ignore(ch)
        return None

    # ---------- navigation ----------
    def move_right(self):
        self.cursor.move_by(1, self.buffer.last_index)

    def move_left(self):
        self.cursor.move_by(-1, self.buffer.last_index)

    def move_down(self):
        # only when a byte exists directly below
        if self.cursor.index < len(self.buffer) - BYTES_PER_ROW:
            self.cursor.move_by(BYTES_PER_ROW, self.buffer.last_index)

    def move_up(self):
        if self.cursor.index >= BYTES_PER_ROW:
            self.cursor.move_by(-BYTES_PER_ROW, self.buffer.last_index)

    # ---------- edits ----------
    def delete_at_cursor(self):
        if len(self.buffer) == 1:
            self._refuse_last_byte()
            return
        self.buffer.remove(self.cursor.index)
        self.state.clamp_cursor()

    def _refuse_last_byte(self):
        logger.info("refused to delete the only remaining byte")
        self._set_status("Cannot delete the last byte", 3)

    def _ignore(self, ch: int) -> None:
        if ch in (curses.KEY_RESIZE, curses.KEY_MOUSE) or ch < 0:
            logger.debug("ignored terminal event %r", ch)
        else:
            logger.debug("ignored key %r in %s mode", ch, self.state.mode_state.label)
