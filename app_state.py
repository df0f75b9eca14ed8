from byte_buffer import ByteBuffer
from cursor import Cursor, SlotKind
from editor_mode import ModeState


class AppState:
    def __init__(self, data, file_path=None):
        self.file_path = file_path

        self.buffer = data if isinstance(data, ByteBuffer) else ByteBuffer(data)
        self.cursor = Cursor(SlotKind.HEX, 0)
        self.mode_state = ModeState.normal()

    @property
    def mode(self):
        return self.mode_state.mode

    @property
    def last_index(self) -> int:
        return self.buffer.last_index

    def clamp_cursor(self):
        self.cursor.clamp_to(self.buffer.last_index)
