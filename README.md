# arborlib

A collection of small building blocks for tools and games that depend only on
the standard library.

## What is inside

- `arborlib.strings`: `format_string`, a compact printf-style formatter
  (`%d`, `%u`, `%ld`, `%lu`, `%x`, `%p`, `%c`, `%s`, `%S`, `%f`, `%b`, with
  widths and precisions given as digits or `*`). It raises `FormatError` on a
  bad conversion or when arguments run out. Also `to_capital_case`,
  `to_lower_case`, `strip_prefix`, `concat`, `memory_size`,
  `format_thousands`, `number_to_string`, `vector_to_string` and `to_float`.
- `arborlib.mathutil`: saturating and clamping helpers (`saturating_add`,
  `saturating_sub`, `desaturate`, `clamp_between`, `clamp01`, ...),
  `safe_divide0`, `floori`, `ceili`, `pow2` and the `Sign` enum with
  `get_sign` and `bilateral`.
- `arborlib.console`: `Logger` with levels (`LogLevel`) and colour prefixes
  (`TerminalColors`). `Logger.setup(argv)` reads `-c0`, `--colors-off` and
  `--log-level <name>`; names come from `valid_log_level_options()`.
  Colours are switched off when the output stream is not a terminal.
- `arborlib.flags`: `set_bitfield`, `unset_bitfield`, `toggle_bitfield`, and
  the 3-D index iterators `dim_iterator`, `min_dim_iterator` and
  `min_max_iterator` (x varies fastest).
- `arborlib.bitmap`: reads and writes 32-bit bitfield-compressed BMP files
  (`Bitmap`, `read_bitmap`, `write_bitmap`, raising `BitmapError`), and
  `pack_rgba`, `unpack_rgba` and `uv_for_char_code`.
- `arborlib.heap`: `HeapAllocator`, a first-fit block allocator over a
  fixed-size range of offsets, with `allocate`, `deallocate` and `blocks()`.
- `arborlib.files`: directory creation and removal, `file_exists`, `remove`,
  a `rename` that moves an existing target aside and restores it on failure,
  random temporary file names under `tmp/`, and `write_u32`, `write_u64` and
  `read_exact`.
- `arborlib.input` and `arborlib.interactable`: per-frame `Input` and
  `Hotkeys` state, `bind_hotkeys_to_input`, `reset_input_for_frame_start`,
  `orthographic_inputs`, and `hover`, `clicked` and `pressed` tests for
  `Interactable` rectangles against a `UiState`.
- `arborlib.containers` and `arborlib.chained`: fixed-capacity `FixedStack`
  and `Cursor`, `index_of`, `ChainedHashtable` and an append-only `Stream`.

## Installation

```
pip install arborlib
```

## Example

```python
from arborlib.strings import format_string, memory_size
from arborlib.console import Logger, LogLevel

print(format_string("%5d|%s|%.3f", 42, "hi", 1.5))
print(memory_size(3 * 1024 * 1024))   # "3.0M"

log = Logger(level=LogLevel.INFO)
log.info("loaded %u items", 12)
```

## What it does not do

arborlib is a library only: it installs no command-line program. It does no
rendering or window handling; `arborlib.input` and `arborlib.interactable`
only hold and evaluate state that the caller fills in. `HeapAllocator` tracks
offsets and block sizes and does not hand out real memory.

## Running the tests

```
pip install "arborlib[test]"
pytest
```