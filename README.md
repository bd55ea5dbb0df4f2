# gbfront

Building blocks for the front end of a handheld game console emulator. The
package depends only on the standard library. It does no drawing itself. It
provides the logic that a window, terminal or test harness builds on.

## What is inside

### `gbfront.options`

Turns a command line into settings. `parse_app_options(args)` takes the
arguments without the program name and returns an `AppOptions` dataclass.

It raises `OptionsError`, a `ValueError`, in these cases:

- an unknown option;
- a missing or non-numeric value;
- a port outside 1–65535 for `--link-host` or `--netplay-host`;
- a `--hardware` value other than `auto`, `dmg` or `cgb`.

The `--hardware` value is case-insensitive, and the accepted values are listed
in `HardwareModePreference`. The error messages are in Portuguese.

Out-of-range values are clamped rather than rejected:

- `--scale` is at least 1;
- `--audio-buffer` is kept within 256–8192;
- `--netplay-delay` is kept within 0–10;
- frame counts are at least 1.

Other parsing rules:

- The first bare argument becomes the ROM path.
- A later bare integer sets the frame count and turns on headless mode.
- `--headless` may be followed by an optional frame count.
- `--rom-suite` also turns on headless mode.

### `gbfront.timing`

Frame pacing.

- `emulation_frame_budget(fast_forward)` returns a `timedelta`. This is the
  wall-clock budget for one emulated frame: 16742 µs normally. Fast-forward
  divides it by `FAST_FORWARD_MULTIPLIER`, which is 3.
- `emulation_frames_per_tick(fast_forward)` is always 1.

### `gbfront.dropping_queue`

`DroppingQueue(max_depth)` is a thread-safe bounded FIFO. When it is full, a
push discards the oldest item, and `dropped_count()` counts those discards.

- `wait_pop()` blocks until an item is available.
- `try_pop_latest()` returns the newest item and throws the rest away, or
  returns `None` when the queue is empty.
- After `close()`, `push` raises `QueueClosed`. `wait_pop()` keeps returning
  the remaining items, then raises `QueueClosed`.
- `len()` gives the current depth.

### `gbfront.layout`

Geometry of the memory debug panel.

- `read_start_y`, `selected_section_y`, `selected_section_height`,
  `sprite_header_y` and `sprite_list_y` give where each section sits for a
  given panel height.
- `read_visible_lines`, `sprite_visible_lines` and `search_visible_lines` give
  how many rows fit in each section.

A built-in 5×7 bitmap font:

- `glyph(char)` returns seven 5-bit rows. Unknown characters are blank.
- `clipped_text(text, max_pixels, scale)` shortens text to a width and marks
  the cut with `~`.
- `text_pixels(text, x, y, scale)` yields the top-left corner of every lit
  square.

### `gbfront.inspect_memory`

Memory inspection.

Hex input and address classification:

- `parse_hex16` and `parse_hex8` read 1–4 and 1–2 upper-case hex digits, or
  return `None`.
- `likely_writable_address` tells whether a write to an address can stick.
- `memory_region_color` gives an RGBA marker colour for an address's region.
- `shade_to_color` maps a 2-bit shade to RGBA.

OAM sprites:

- `snapshot_sprites(memory)` reads the 40 OAM entries as `SpriteDebugRow`
  values.
- `find_selected_sprite` picks one of them by address.
- `SpriteDebugRow.role_text(memory)` summarises visibility, priority, flips
  and palette.
- `sprite_shades(memory, sprite)` decodes the sprite's tile rows into palette
  shades. It honours 8×16 mode and the flip bits.

Watches and search:

- `MemoryWatch` keeps a rolling history of up to 96 values of one address,
  through `reset`, `sample` and `recent`.
- `MemorySearchMode` lists the memory search comparisons: exact, greater,
  less, changed and unchanged.

Functions that read memory take any object that returns the byte at a 16-bit
address when indexed (`memory[address]`). A `bytearray(0x10000)` works.

## Example

```python
from gbfront.dropping_queue import DroppingQueue
from gbfront.inspect_memory import parse_hex16, snapshot_sprites
from gbfront.layout import clipped_text, read_visible_lines
from gbfront.options import OptionsError, parse_app_options

try:
    options = parse_app_options(["game.gb", "--scale", "3", "--hardware", "cgb"])
except OptionsError as err:
    print(f"error: {err}")

frames = DroppingQueue(3)
frames.push("frame-1")
latest = frames.try_pop_latest()          # "frame-1"

lines = read_visible_lines(480, True)
label = clipped_text("BREAKPOINTS AND WATCHES", 60, 1)   # "BREAKPOIN~"

address = parse_hex16("C0A0")             # 0xC0A0

memory = bytearray(0x10000)
sprites = snapshot_sprites(memory)        # 40 rows
```

## What this package does not do

The package contains no emulator core: no CPU, bus, cartridge, video or sound
hardware. It also has no window, renderer, audio output, network link and no
command-line program.

`parse_app_options` produces settings but does not act on them. The layout
and font functions compute positions and pixels but never draw them.

## Tests

The test suite uses pytest, which is listed under the `test` extra.