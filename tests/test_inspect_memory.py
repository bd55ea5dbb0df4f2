import pytest

from gbfront.inspect_memory import (
    MemoryWatch,
    SpriteDebugRow,
    find_selected_sprite,
    likely_writable_address,
    memory_region_color,
    parse_hex8,
    parse_hex16,
    shade_to_color,
    snapshot_sprites,
    sprite_shades,
)


@pytest.fixture
def memory():
    return bytearray(0x10000)


def test_parse_hex16_valid():
    assert parse_hex16("C000") == 0xC000
    assert parse_hex16("F") == 0xF
    assert parse_hex16("FFFF") == 0xFFFF


@pytest.mark.parametrize("text", ["", "12345", "c000", "G1", "12 3"])
def test_parse_hex16_rejects(text):
    assert parse_hex16(text) is None


def test_parse_hex8():
    assert parse_hex8("FF") == 0xFF
    assert parse_hex8("0A") == 0x0A
    assert parse_hex8("100") is None
    assert parse_hex8("") is None
    assert parse_hex8("ff") is None


@pytest.mark.parametrize(
    "address, expected",
    [
        (0x0000, False),
        (0x7FFF, False),
        (0x8000, False),
        (0xA000, True),
        (0xC000, True),
        (0xFDFF, True),
        (0xFE9F, True),
        (0xFEA0, False),
        (0xFF00, True),
        (0xFFFF, True),
    ],
)
def test_likely_writable_address(address, expected):
    assert likely_writable_address(address) is expected


def test_memory_region_color_bounds():
    assert memory_region_color(0xFFFF) == (255, 255, 255, 255)
    assert memory_region_color(0x0000) == memory_region_color(0x3FFF)
    assert memory_region_color(0x3FFF) != memory_region_color(0x4000)
    assert memory_region_color(0xFF80) != memory_region_color(0xFF7F)


def test_shade_to_color_masks():
    assert shade_to_color(0) == (255, 255, 255, 255)
    assert shade_to_color(4) == shade_to_color(0)
    assert shade_to_color(7) == shade_to_color(3)


def test_snapshot_sprites_reads_oam(memory):
    for i in range(40):
        base = 0xFE00 + i * 4
        memory[base : base + 4] = bytes([i, i + 1, i + 2, i + 3])
    sprites = snapshot_sprites(memory)
    assert len(sprites) == 40
    for i, sp in enumerate(sprites):
        assert sp.addr == 0xFE00 + i * 4
        assert (sp.y, sp.x, sp.tile, sp.attr) == (i, i + 1, i + 2, i + 3)


def test_find_selected_sprite(memory):
    sprites = snapshot_sprites(memory)
    assert find_selected_sprite(sprites, None) is None
    assert find_selected_sprite(sprites, 0xFE08) == sprites[2]
    assert find_selected_sprite(sprites, 0xFE01) is None


def test_role_text_visibility(memory):
    sprite = SpriteDebugRow(addr=0xFE00, y=16, x=8)
    assert sprite.role_text(memory).startswith("ON ")
    hidden = SpriteDebugRow(addr=0xFE00, y=0, x=8)
    assert hidden.role_text(memory).startswith("OFF ")


def test_role_text_tall_sprites_extend_visibility(memory):
    sprite = SpriteDebugRow(y=1, x=8)
    assert sprite.role_text(memory).startswith("OFF")
    memory[0xFF40] = 0x04
    assert sprite.role_text(memory).startswith("ON")


def test_role_text_flags(memory):
    sprite = SpriteDebugRow(y=16, x=8, attr=0xF0)
    text = sprite.role_text(memory)
    parts = text.split()
    assert parts[1] == "BG"
    assert parts[2] == "YX"
    assert parts[3] == "P1"
    plain = SpriteDebugRow(y=16, x=8).role_text(memory).split()
    assert plain[1] == "TOP"
    assert plain[-1] == "P0"


def test_memory_watch_reset_and_sample(memory):
    watch = MemoryWatch(address=0xC010)
    memory[0xC010] = 5
    watch.reset(memory)
    assert watch.recent() == [5]
    assert watch.freeze_value == 5
    memory[0xC010] = 9
    watch.sample(memory)
    assert watch.recent() == [5, 9]


def test_memory_watch_history_is_bounded(memory):
    watch = MemoryWatch()
    watch.reset(memory)
    for value in range(200):
        memory[watch.address] = value
        watch.sample(memory)
    recent = watch.recent()
    assert len(recent) == 96
    assert recent[-1] == 199
    assert recent == list(range(104, 200))


def _setup_tile(memory, tile, rows):
    for row, (lo, hi) in enumerate(rows):
        addr = 0x8000 + tile * 16 + row * 2
        memory[addr] = lo
        memory[addr + 1] = hi


def test_sprite_shades_applies_palette(memory):
    memory[0xFF48] = 0xE4
    rows = [(0xFF, 0x00), (0x00, 0xFF), (0xFF, 0xFF)] + [(0, 0)] * 5
    _setup_tile(memory, 1, rows)
    shades = sprite_shades(memory, SpriteDebugRow(tile=1))
    assert len(shades) == 8
    assert shades[0] == [1] * 8
    assert shades[1] == [2] * 8
    assert shades[2] == [3] * 8
    assert shades[3] == [0] * 8


def test_sprite_shades_uses_palette1(memory):
    memory[0xFF48] = 0x00
    memory[0xFF49] = 0xFF
    _setup_tile(memory, 0, [(0xFF, 0x00)] * 8)
    assert sprite_shades(memory, SpriteDebugRow(attr=0x00))[0] == [0] * 8
    assert sprite_shades(memory, SpriteDebugRow(attr=0x10))[0] == [3] * 8


def test_sprite_shades_flips(memory):
    memory[0xFF48] = 0xE4
    rows = [(0x80 >> r, 0x00) for r in range(8)]
    _setup_tile(memory, 2, rows)
    normal = sprite_shades(memory, SpriteDebugRow(tile=2))
    yflip = sprite_shades(memory, SpriteDebugRow(tile=2, attr=0x40))
    xflip = sprite_shades(memory, SpriteDebugRow(tile=2, attr=0x20))
    assert yflip == normal[::-1]
    assert xflip == [row[::-1] for row in normal]
    assert normal[0][0] == 1
    assert normal[0][1:] == [0] * 7


def test_sprite_shades_tall_uses_tile_pair(memory):
    memory[0xFF40] = 0x04
    memory[0xFF48] = 0xE4
    _setup_tile(memory, 4, [(0xFF, 0x00)] * 8)
    _setup_tile(memory, 5, [(0x00, 0xFF)] * 8)
    shades = sprite_shades(memory, SpriteDebugRow(tile=5))
    assert len(shades) == 16
    assert all(row == [1] * 8 for row in shades[:8])
    assert all(row == [2] * 8 for row in shades[8:])