"""Geometry of the memory debug panel and its bitmap text."""

from __future__ import annotations

from typing import Iterator

READ_LINE_HEIGHT = 14
READ_LINES = 8
BREAKPOINT_MENU_TOP_Y = 104
BREAKPOINT_ROW_HEIGHT = 12
BREAKPOINT_ROW_Y_WATCH = BREAKPOINT_MENU_TOP_Y + 14
BREAKPOINT_ROW_Y_PC = BREAKPOINT_MENU_TOP_Y + 26
BREAKPOINT_ROW_Y_ADDR = BREAKPOINT_MENU_TOP_Y + 38
BREAKPOINT_LIST_START_Y = BREAKPOINT_MENU_TOP_Y + 50
BREAKPOINT_LIST_LINE_HEIGHT = 12
BREAKPOINT_LIST_MAX_VISIBLE = 4
SEARCH_OVERLAY_TOP = 140
SEARCH_OVERLAY_BOTTOM_PAD = 18
SEARCH_LIST_Y_OFFSET = 74
SEARCH_LIST_LINE_HEIGHT = 12
READ_START_Y_WITHOUT_BREAKPOINT_MENU = 118
READ_START_Y_WITH_BREAKPOINT_MENU = 214
SELECTED_SECTION_TOP_GAP = 6
SELECTED_SECTION_HEIGHT = 96
SECTION_GAP = 6
SPRITE_HEADER_OFFSET = 6
SPRITE_SECTION_TOP_PAD = 18
SPRITE_LINE_HEIGHT = 12

GLYPH_WIDTH = 5
GLYPH_HEIGHT = 7
GLYPH_ADVANCE = 6

_HEADER_BOTTOM = 122
_BREAKPOINT_MENU_SPACE = 86

_BLANK = (0x00,) * GLYPH_HEIGHT

_GLYPHS: dict[str, tuple[int, ...]] = {
    "0": (0x0E, 0x11, 0x13, 0x15, 0x19, 0x11, 0x0E),
    "1": (0x04, 0x0C, 0x04, 0x04, 0x04, 0x04, 0x0E),
    "2": (0x0E, 0x11, 0x01, 0x02, 0x04, 0x08, 0x1F),
    "3": (0x1E, 0x01, 0x01, 0x0E, 0x01, 0x01, 0x1E),
    "4": (0x02, 0x06, 0x0A, 0x12, 0x1F, 0x02, 0x02),
    "5": (0x1F, 0x10, 0x10, 0x1E, 0x01, 0x01, 0x1E),
    "6": (0x0E, 0x10, 0x10, 0x1E, 0x11, 0x11, 0x0E),
    "7": (0x1F, 0x01, 0x02, 0x04, 0x04, 0x04, 0x04),
    "8": (0x0E, 0x11, 0x11, 0x0E, 0x11, 0x11, 0x0E),
    "9": (0x0E, 0x11, 0x11, 0x0F, 0x01, 0x01, 0x0E),
    "A": (0x0E, 0x11, 0x11, 0x1F, 0x11, 0x11, 0x11),
    "B": (0x1E, 0x11, 0x11, 0x1E, 0x11, 0x11, 0x1E),
    "C": (0x0E, 0x11, 0x10, 0x10, 0x10, 0x11, 0x0E),
    "D": (0x1C, 0x12, 0x11, 0x11, 0x11, 0x12, 0x1C),
    "E": (0x1F, 0x10, 0x10, 0x1E, 0x10, 0x10, 0x1F),
    "F": (0x1F, 0x10, 0x10, 0x1E, 0x10, 0x10, 0x10),
    "G": (0x0E, 0x11, 0x10, 0x17, 0x11, 0x11, 0x0E),
    "H": (0x11, 0x11, 0x11, 0x1F, 0x11, 0x11, 0x11),
    "I": (0x1F, 0x04, 0x04, 0x04, 0x04, 0x04, 0x1F),
    "J": (0x01, 0x01, 0x01, 0x01, 0x11, 0x11, 0x0E),
    "K": (0x11, 0x12, 0x14, 0x18, 0x14, 0x12, 0x11),
    "L": (0x10, 0x10, 0x10, 0x10, 0x10, 0x10, 0x1F),
    "M": (0x11, 0x1B, 0x15, 0x15, 0x11, 0x11, 0x11),
    "N": (0x11, 0x19, 0x15, 0x13, 0x11, 0x11, 0x11),
    "O": (0x0E, 0x11, 0x11, 0x11, 0x11, 0x11, 0x0E),
    "P": (0x1E, 0x11, 0x11, 0x1E, 0x10, 0x10, 0x10),
    "Q": (0x0E, 0x11, 0x11, 0x11, 0x15, 0x12, 0x0D),
    "R": (0x1E, 0x11, 0x11, 0x1E, 0x14, 0x12, 0x11),
    "S": (0x0F, 0x10, 0x10, 0x0E, 0x01, 0x01, 0x1E),
    "T": (0x1F, 0x04, 0x04, 0x04, 0x04, 0x04, 0x04),
    "U": (0x11, 0x11, 0x11, 0x11, 0x11, 0x11, 0x0E),
    "V": (0x11, 0x11, 0x11, 0x11, 0x11, 0x0A, 0x04),
    "W": (0x11, 0x11, 0x11, 0x15, 0x15, 0x1B, 0x11),
    "X": (0x11, 0x11, 0x0A, 0x04, 0x0A, 0x11, 0x11),
    "Y": (0x11, 0x11, 0x0A, 0x04, 0x04, 0x04, 0x04),
    "Z": (0x1F, 0x01, 0x02, 0x04, 0x08, 0x10, 0x1F),
    ":": (0x00, 0x04, 0x04, 0x00, 0x04, 0x04, 0x00),
    ".": (0x00, 0x00, 0x00, 0x00, 0x00, 0x06, 0x06),
    "-": (0x00, 0x00, 0x00, 0x1F, 0x00, 0x00, 0x00),
    "_": (0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x1F),
    "/": (0x01, 0x02, 0x04, 0x08, 0x10, 0x00, 0x00),
    " ": _BLANK,
}


def selected_section_height(panel_height: int) -> int:
    """Height of the selected-sprite section for a panel of this height."""
    if panel_height < 320:
        return 52
    if panel_height < 440:
        return 68
    if panel_height < 560:
        return 82
    return SELECTED_SECTION_HEIGHT


def read_start_y(panel_height: int, show_breakpoint_menu: bool) -> int:
    """Y coordinate where the recent-reads list begins."""
    menu_space = _BREAKPOINT_MENU_SPACE if show_breakpoint_menu else 0
    preferred = (
        READ_START_Y_WITH_BREAKPOINT_MENU
        if show_breakpoint_menu
        else READ_START_Y_WITHOUT_BREAKPOINT_MENU
    )
    min_start = _HEADER_BOTTOM + menu_space + 6
    max_start = max(min_start, panel_height - 220)
    return min(max(preferred, min_start), max_start)


def selected_section_y(panel_height: int, read_start: int) -> int:
    """Y coordinate of the selected-sprite section below the reads list."""
    return read_start + READ_LINES * READ_LINE_HEIGHT + SELECTED_SECTION_TOP_GAP


def sprite_header_y(panel_height: int, read_start: int) -> int:
    """Y coordinate of the sprite (OAM) list header."""
    return (
        selected_section_y(panel_height, read_start)
        + selected_section_height(panel_height)
        + SECTION_GAP
    )


def read_visible_lines(panel_height: int, show_breakpoint_menu: bool) -> int:
    """Number of recent-read lines that fit above the selected-sprite section."""
    start = read_start_y(panel_height, show_breakpoint_menu)
    detail = selected_section_y(panel_height, start)
    available = max(0, detail - start - 2)
    return max(1, min(READ_LINES, available // READ_LINE_HEIGHT))


def sprite_list_y(panel_height: int, show_breakpoint_menu: bool) -> int:
    """Y coordinate of the first sprite list row."""
    start = read_start_y(panel_height, show_breakpoint_menu)
    return sprite_header_y(panel_height, start) + SPRITE_SECTION_TOP_PAD


def sprite_visible_lines(panel_height: int, show_breakpoint_menu: bool) -> int:
    """Number of sprite rows that fit in the panel (at least one)."""
    free = panel_height - sprite_list_y(panel_height, show_breakpoint_menu) - 8
    return max(1, free // SPRITE_LINE_HEIGHT)


def search_visible_lines(panel_height: int) -> int:
    """Number of match rows shown by the memory search overlay (at least one)."""
    free = (
        panel_height
        - (SEARCH_OVERLAY_TOP + SEARCH_LIST_Y_OFFSET)
        - SEARCH_OVERLAY_BOTTOM_PAD
    )
    return max(1, free // SEARCH_LIST_LINE_HEIGHT)


def glyph(char: str) -> tuple[int, ...]:
    """Seven 5-bit rows of the bitmap for a character; unknown ones are blank."""
    return _GLYPHS.get(char, _BLANK)


def clipped_text(text: str, max_pixels: int, scale: int) -> str:
    """Shorten text to fit a pixel width, marking a cut with a trailing '~'."""
    if scale <= 0 or max_pixels <= 0:
        return ""
    max_chars = max(0, max_pixels // (GLYPH_ADVANCE * scale))
    if max_chars <= 0 or len(text) <= max_chars:
        return text
    if max_chars <= 2:
        return text[:max_chars]
    return text[: max_chars - 1] + "~"


def text_pixels(text: str, x: int, y: int, scale: int) -> Iterator[tuple[int, int]]:
    """Yield the top-left corner of each lit scale-by-scale square of the text."""
    cursor = x
    for char in text:
        for row, bits in enumerate(glyph(char)):
            for col in range(GLYPH_WIDTH):
                if bits & (1 << (GLYPH_WIDTH - 1 - col)):
                    yield cursor + col * scale, y + row * scale
        cursor += GLYPH_ADVANCE * scale