from enum import Enum


class SlotKind(Enum):
    HEX = "hex"
    ASCII = "ascii"


class Cursor:
    """A byte index tagged with the pane (hex or ascii) it is shown in."""

    def __init__(self, slot_kind: SlotKind = SlotKind.HEX, index: int = 0):
        self.slot_kind = slot_kind
        self.index = max(0, index)

    def __eq__(self, other):
        if not isinstance(other, Cursor):
            return NotImplemented
        return self.slot_kind == other.slot_kind and self.index == other.index

    def __repr__(self):
        return f"Cursor({self.slot_kind.name}, {self.index})"

    def copy(self) -> "Cursor":
        return Cursor(self.slot_kind, self.index)

    @property
    def is_hex(self) -> bool:
        return self.slot_kind is SlotKind.HEX

    # ---------- motion ----------
    def move_by(self, delta: int, max_index: int) -> None:
        self.index = min(max(self.index + delta, 0), max(0, max_index))

    def switch(self) -> None:
        if self.slot_kind is SlotKind.HEX:
            self.slot_kind = SlotKind.ASCII
        else:
            self.slot_kind = SlotKind.HEX

    def clamp_to(self, max_index: int) -> None:
        self.index = min(self.index, max(0, max_index))
