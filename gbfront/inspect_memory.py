"""Memory inspection helpers for the debug panel: watches, sprites, hex input."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Protocol

Color = tuple[int, int, int, int]

SCREEN_WIDTH = 160
SCREEN_HEIGHT = 144
OAM_BASE = 0xFE00
OAM_SPRITES = 40
TILE_DATA_BASE = 0x8000
LCDC = 0xFF40
OBP0 = 0xFF48
OBP1 = 0xFF49
WATCH_HISTORY = 96

_HEX_DIGITS = "0123456789ABCDEF"


class Memory(Protocol):
    """Anything that returns the byte at a 16-bit address when indexed."""

    def __getitem__(self, address: int) -> int: ...


class MemorySearchMode(Enum):
    """How the memory search compares candidate bytes."""

    EXACT = 0
    GREATER = 1
    LESS = 2
    CHANGED = 3
    UNCHANGED = 4


def _sprite_height(memory: Memory) -> int:
    return 16 if memory[LCDC] & 0x04 else 8


@dataclass(frozen=True)
class SpriteDebugRow:
    """One object attribute entry as seen in OAM."""

    addr: int = 0
    y: int = 0
    x: int = 0
    tile: int = 0
    attr: int = 0

    @property
    def behind_background(self) -> bool:
        return bool(self.attr & 0x80)

    @property
    def y_flip(self) -> bool:
        return bool(self.attr & 0x40)

    @property
    def x_flip(self) -> bool:
        return bool(self.attr & 0x20)

    @property
    def uses_palette1(self) -> bool:
        return bool(self.attr & 0x10)

    def role_text(self, memory: Memory) -> str:
        """Short summary: visibility, priority, flips and palette."""
        height = _sprite_height(memory)
        sx = self.x - 8
        sy = self.y - 16
        visible = -8 < sx < SCREEN_WIDTH and -height < sy < SCREEN_HEIGHT
        return "{} {} {}{} P{}".format(
            "ON" if visible else "OFF",
            "BG" if self.behind_background else "TOP",
            "Y" if self.y_flip else "",
            "X" if self.x_flip else "",
            1 if self.uses_palette1 else 0,
        )


@dataclass
class MemoryWatch:
    """A watched address with a rolling history of sampled values."""

    address: int = 0xC000
    history: deque[int] = field(default_factory=lambda: deque(maxlen=WATCH_HISTORY))
    freeze: bool = False
    freeze_value: int = 0

    def reset(self, memory: Memory) -> None:
        """Restart the history with the current value, which also becomes the freeze value."""
        value = memory[self.address]
        self.history.clear()
        self.history.append(value)
        self.freeze_value = value

    def sample(self, memory: Memory) -> None:
        """Record the current value, discarding the oldest when full."""
        self.history.append(memory[self.address])

    def recent(self) -> list[int]:
        """Sampled values from oldest to newest."""
        return list(self.history)


def _parse_hex(text: str, max_digits: int) -> int | None:
    if not text or len(text) > max_digits:
        return None
    value = 0
    for ch in text:
        digit = _HEX_DIGITS.find(ch)
        if digit < 0:
            return None
        value = (value << 4) | digit
    return value


def parse_hex16(text: str) -> int | None:
    """Parse 1-4 upper-case hex digits, or return None."""
    return _parse_hex(text, 4)


def parse_hex8(text: str) -> int | None:
    """Parse 1-2 upper-case hex digits, or return None."""
    return _parse_hex(text, 2)


def likely_writable_address(address: int) -> bool:
    """Whether a write to this address can plausibly stick (not ROM or unusable)."""
    if address <= 0x7FFF:
        return False
    if 0xA000 <= address <= 0xBFFF:
        return True
    if 0xC000 <= address <= 0xFDFF:
        return True
    if 0xFE00 <= address <= 0xFE9F:
        return True
    if 0xFF00 <= address <= 0xFFFE:
        return True
    return address == 0xFFFF


_REGION_COLORS: tuple[tuple[int, Color], ...] = (
    (0x3FFF, (96, 155, 255, 255)),
    (0x7FFF, (60, 120, 220, 255)),
    (0x9FFF, (150, 200, 120, 255)),
    (0xBFFF, (180, 150, 90, 255)),
    (0xDFFF, (230, 200, 120, 255)),
    (0xFDFF, (220, 160, 120, 255)),
    (0xFE9F, (255, 130, 130, 255)),
    (0xFF7F, (180, 140, 255, 255)),
    (0xFFFE, (160, 220, 255, 255)),
)


def memory_region_color(address: int) -> Color:
    """RGBA marker colour for the memory region holding an address."""
    for limit, color in _REGION_COLORS:
        if address <= limit:
            return color
    return (255, 255, 255, 255)


_SHADES: tuple[Color, ...] = (
    (255, 255, 255, 255),
    (192, 192, 192, 255),
    (96, 96, 96, 255),
    (16, 16, 16, 255),
)


def shade_to_color(shade: int) -> Color:
    """RGBA colour of a two-bit monochrome shade."""
    return _SHADES[shade & 0x03]


def snapshot_sprites(memory: Memory) -> list[SpriteDebugRow]:
    """Read all 40 OAM entries."""
    rows = []
    for index in range(OAM_SPRITES):
        base = OAM_BASE + index * 4
        rows.append(
            SpriteDebugRow(
                addr=base,
                y=memory[base],
                x=memory[base + 1],
                tile=memory[base + 2],
                attr=memory[base + 3],
            )
        )
    return rows


def find_selected_sprite(
    sprites: Iterable[SpriteDebugRow], selected_address: int | None
) -> SpriteDebugRow | None:
    """The sprite whose OAM address matches the selection, if any."""
    if selected_address is None:
        return None
    return next((sp for sp in sprites if sp.addr == selected_address), None)


def sprite_shades(memory: Memory, sprite: SpriteDebugRow) -> list[list[int]]:
    """Palette-mapped shades of the sprite, one list of 8 per pixel row."""
    height = _sprite_height(memory)
    tall = height == 16
    palette = memory[OBP1] if sprite.uses_palette1 else memory[OBP0]
    rows = []
    for py in range(height):
        src_y = height - 1 - py if sprite.y_flip else py
        tile = sprite.tile
        if tall:
            tile &= 0xFE
            if src_y >= 8:
                tile = (tile + 1) & 0xFF
                src_y -= 8
        tile_addr = (TILE_DATA_BASE + tile * 16 + src_y * 2) & 0xFFFF
        lo = memory[tile_addr]
        hi = memory[(tile_addr + 1) & 0xFFFF]
        row = []
        for px in range(8):
            bit = px if sprite.x_flip else 7 - px
            color_id = (((hi >> bit) & 1) << 1) | ((lo >> bit) & 1)
            row.append((palette >> (color_id * 2)) & 0x03)
        rows.append(row)
    return rows