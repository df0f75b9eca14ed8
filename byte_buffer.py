from typing import Iterator, Tuple

BYTES_PER_ROW = 16


class ByteBuffer:
    """The in-memory bytes under edit."""

    def __init__(self, data: bytes = b""):
        self._data = bytearray(data)

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, key):
        if isinstance(key, slice):
            return bytes(self._data[key])
        return self._data[key]

    def __eq__(self, other):
        if isinstance(other, ByteBuffer):
            return self._data == other._data
        if isinstance(other, (bytes, bytearray, list)):
            return bytes(self._data) == bytes(other)
        return NotImplemented

    def __repr__(self):
        return f"ByteBuffer({bytes(self._data)!r})"

    @property
    def last_index(self) -> int:
        return len(self._data) - 1

    def to_bytes(self) -> bytes:
        return bytes(self._data)

    # ---------- mutation ----------
    @staticmethod
    def _check_value(value: int) -> int:
        if not 0 <= value <= 0xFF:
            raise ValueError(f"byte value out of range: {value}")
        return value

    def insert(self, index: int, value: int) -> None:
        if index < 0 or index > len(self._data):
            raise IndexError(f"insert index {index} outside buffer of {len(self._data)}")
        self._data.insert(index, self._check_value(value))

    def remove(self, index: int) -> int:
        if index < 0 or index >= len(self._data):
            raise IndexError(f"remove index {index} outside buffer of {len(self._data)}")
        return self._data.pop(index)

    def or_at(self, index: int, value: int) -> None:
        if index < 0 or index >= len(self._data):
            raise IndexError(f"index {index} outside buffer of {len(self._data)}")
        self._data[index] |= self._check_value(value)

    # ---------- rows ----------
    def row_count(self, width: int = BYTES_PER_ROW) -> int:
        return (len(self._data) + width - 1) // width

    def rows(self, width: int = BYTES_PER_ROW) -> Iterator[Tuple[int, bytes]]:
        for offset in range(0, len(self._data), width):
            yield offset, bytes(self._data[offset : offset + width])
