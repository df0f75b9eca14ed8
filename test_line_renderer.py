import pytest

from cursor import Cursor, SlotKind
from line_renderer import ROW_WIDTH, Style, line_text, printable, render_line

FULL_ROW = (
    "00000010  48 65 6c 6c 6f 2c 20 77  6f 72 6c 64 0a 00 7e 7f  |Hello, world..~.|"
)


def _styled(spans, style):
    return [span.text for span in spans if span.style is style]


def test_full_row_matches_canonical_layout():
    chunk = b"Hello, world\n\x00~\x7f"
    spans = render_line(chunk, 0x10, Cursor(SlotKind.HEX, 0))
    assert line_text(spans) == FULL_ROW
    assert len(line_text(spans)) == ROW_WIDTH == 78
    assert _styled(spans, Style.ADDRESS) == ["00000010"]


@pytest.mark.parametrize("length", [1, 7, 8, 9, 15])
def test_short_rows_keep_hex_field_width(length):
    full = line_text(render_line(bytes(16), 0, Cursor(SlotKind.HEX, 99)))
    short = line_text(render_line(bytes(length), 0, Cursor(SlotKind.HEX, 99)))
    assert short.index("|") == full.index("|") == 60
    assert len(short) == ROW_WIDTH - (16 - length)


def test_row_of_eight_leaves_right_half_blank():
    text = line_text(render_line(b"ABCDEFGH", 0x20, Cursor(SlotKind.HEX, 0)))
    assert text == "00000020  41 42 43 44 45 46 47 48  " + " " * 24 + " |ABCDEFGH|"


@pytest.mark.parametrize(
    "byte, expected",
    [(0x1F, "."), (0x20, " "), (0x22, '"'), (0x41, "A"), (0x7E, "~"), (0x7F, "."), (0xFF, ".")],
)
def test_printable_range(byte, expected):
    assert printable(byte) == expected


def test_hex_cursor_highlights_pair_primary_and_char_secondary():
    spans = render_line(b"0123456789abcdef", 32, Cursor(SlotKind.HEX, 42))
    assert _styled(spans, Style.PRIMARY) == ["61"]
    assert _styled(spans, Style.SECONDARY) == ["a"]


def test_ascii_cursor_swaps_emphasis():
    spans = render_line(b"0123456789abcdef", 32, Cursor(SlotKind.ASCII, 33))
    assert _styled(spans, Style.PRIMARY) == ["1"]
    assert _styled(spans, Style.SECONDARY) == ["31"]


def test_rows_without_cursor_have_no_highlight():
    spans = render_line(bytes(16), 16, Cursor(SlotKind.HEX, 3))
    assert not _styled(spans, Style.PRIMARY)
    assert not _styled(spans, Style.SECONDARY)


def test_cursor_past_short_row_is_not_highlighted():
    spans = render_line(b"abc", 16, Cursor(SlotKind.HEX, 20))
    assert not _styled(spans, Style.PRIMARY)


def test_separator_after_highlighted_pair_stays_plain():
    spans = render_line(b"ab", 0, Cursor(SlotKind.HEX, 0))
    idx = spans.index(("61", Style.PRIMARY))
    assert spans[idx + 1] == (" ", Style.PLAIN)


@pytest.mark.parametrize("index", [0, 7, 8, 15, 16, 31, 36])
@pytest.mark.parametrize("kind", list(SlotKind))
def test_highlight_exclusive_across_frame(index, kind):
    data = bytes(range(37))
    cursor = Cursor(kind, index)
    primary = []
    secondary = []
    for offset in range(0, len(data), 16):
        spans = render_line(data[offset : offset + 16], offset, cursor)
        primary += _styled(spans, Style.PRIMARY)
        secondary += _styled(spans, Style.SECONDARY)
    assert len(primary) == 1
    assert len(secondary) == 1
    pair, char = (primary[0], secondary[0]) if kind is SlotKind.HEX else (secondary[0], primary[0])
    assert pair == f"{index:02x}"
    assert char == printable(index)
