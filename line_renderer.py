"""
Hex dump line rendering.

    00000000  48 65 6c 6c 6f 2c 20 77  6f 72 6c 64 0a 00 00 00  |Hello, world....|

A row is split into two halves of eight hex pairs followed by the ASCII
column. Short rows are padded so every hex field has the same width.
"""

from enum import Enum
from typing import List, NamedTuple

from byte_buffer import BYTES_PER_ROW
from cursor import Cursor

HALF_ROW = BYTES_PER_ROW // 2
ADDRESS_WIDTH = 8
# address + gap + two halves + gap + |ascii|
ROW_WIDTH = ADDRESS_WIDTH + 2 + 3 * HALF_ROW + 1 + 3 * HALF_ROW + 1 + BYTES_PER_ROW + 2


class Style(Enum):
    PLAIN = "plain"
    ADDRESS = "address"
    PRIMARY = "primary"
    SECONDARY = "secondary"


class Span(NamedTuple):
    text: str
    style: Style = Style.PLAIN


def printable(byte: int) -> str:
    return chr(byte) if 0x20 <= byte <= 0x7E else "."


def _highlight_styles(cursor: Cursor):
    if cursor.is_hex:
        return Style.PRIMARY, Style.SECONDARY
    return Style.SECONDARY, Style.PRIMARY


def _half(chunk: bytes, offset: int, hl_index, style: Style) -> List[Span]:
    spans: List[Span] = []
    for i, byte in enumerate(chunk):
        pair_style = style if offset + i == hl_index else Style.PLAIN
        spans.append(Span(f"{byte:02x}", pair_style))
        spans.append(Span(" "))
    for _ in range(HALF_ROW - len(chunk)):
        spans.append(Span("   "))
    return spans


def _text(chunk: bytes, offset: int, hl_index, style: Style) -> List[Span]:
    spans = [Span("|")]
    for i, byte in enumerate(chunk):
        char_style = style if offset + i == hl_index else Style.PLAIN
        spans.append(Span(printable(byte), char_style))
    spans.append(Span("|"))
    return spans


def render_line(chunk: bytes, offset: int, cursor: Cursor) -> List[Span]:
    """Render one row of up to 16 bytes starting at absolute `offset`."""
    chunk = bytes(chunk[:BYTES_PER_ROW])
    hex_style, ascii_style = _highlight_styles(cursor)
    hl_index = cursor.index if offset <= cursor.index < offset + len(chunk) else None

    line = [Span(f"{offset:08x}", Style.ADDRESS), Span("  ")]
    line.extend(_half(chunk[:HALF_ROW], offset, hl_index, hex_style))
    line.append(Span(" "))
    line.extend(_half(chunk[HALF_ROW:], offset + HALF_ROW, hl_index, hex_style))
    line.append(Span(" "))
    line.extend(_text(chunk, offset, hl_index, ascii_style))
    return line


def line_text(spans: List[Span]) -> str:
    return "".join(span.text for span in spans)
