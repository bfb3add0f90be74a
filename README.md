# obvtools

Building blocks for a viewer of printed circuit board layouts, using only
the Python standard library. The package covers the non-graphical parts of
such a viewer.

## Modules

- `obvtools.confparse` — `Confparse` reads and edits `key = value`
  configuration files. A key is found only at the start of a line, followed
  by any mix of `=`, spaces and tabs. `load(filepath, save_default)` creates
  a missing file, filled with `DEFAULT_CONF` when `save_default` is true and
  empty otherwise. `parse`, `parse_str`, `parse_int`, `parse_hex`,
  `parse_double` and `parse_bool` return the default you pass when the key is
  absent; `parse_bool` is true only for the exact value `true`.
  `write_str`, `write_bool`, `write_int`, `write_hex` (`0x` and eight hex
  digits) and `write_float` (six decimals) change the file and reload it.
  Replacing an existing value, or adding a key not present anywhere in the
  text, first keeps the old file with a `~` suffix. Writing with nothing
  loaded raises `RuntimeError`; an empty key raises `ValueError`.
- `obvtools.utils` — `file_as_buffer` (raises `OSError` for a non-regular
  file), `check_fileext`, `find_str_in_buf`, `compare_string_insensitive`,
  `lookup_file_insensitive` (raises `FileNotFoundError` when nothing
  matches) and `split_string`.
- `obvtools.history` — `FileHistory(fname)`, up to 20 recently opened files,
  most recent first. `load()` returns the number of entries read (a missing
  file gives none, no file name raises `ValueError`); `prepend_save(newfile)`
  puts a file first, drops its duplicates and reloads. `trim_filename(path,
  stops)` keeps the last `stops` path components.
- `obvtools.userdirs` — `UserDir.CONFIG` / `UserDir.DATA`,
  `get_user_dir(userdir, app_name)` (from `XDG_CONFIG_HOME` /
  `XDG_DATA_HOME`, else `~/.config` / `~/.local/share`, created when
  missing, `./` when that fails) and `create_dirs`.
- `obvtools.spellcorrector` — `SpellCorrector(dictionary, threshold=3)`
  whose `suggest(word)` returns dictionary words within the threshold,
  ignoring case, best first; `levenshtein_distance(first, second, limit)`
  compares against only the first `limit` characters of `second`.
- `obvtools.searcher` — `Searcher(mode, search_details)` with
  `set_parts`, `set_nets`, `parts(search, limit=-1)` and
  `nets(search, limit=-1)`; `SearchMode.SUB`, `PREFIX` or `WHOLE`; and a
  case-insensitive `strcasestr` returning the match index or `None`. Items
  need a `name`; with `search_details` on, their
  `searchable_string_details()` strings are tried too.
- `obvtools.vectorhulls` — `Vec2`, `rotate_point`, `rotate_vector`,
  `angle_to_x`, `convex_hull_orientation`, `convex_hull` (gift wrapping,
  empty below three points), `tighten_hull`, `minimum_bounding_box` and
  `get_intersection` (`None` when the segments do not cross).
- `obvtools.annotations` — `Annotations(filename=...)` keeps notes in an
  SQLite file named after the board file, its last `.` turned into `_`, plus
  `.sqlite3`. `load`, `close`, `generate_list`, `add`, `remove` (hides the
  note) and `update`; it also works as a context manager. Each note is an
  `Annotation`.
- `obvtools.obdata` — `OBData.load(filepath)` reads a board measurement file
  of component and net sections into `ComponentDatum` and `NetworkDatum`
  lists. `part_value`, `part_tooltip`, `pins_for_net` (filtered by
  `current_condition`) and `condition_rows` (one row per condition:
  condition, diode, voltage, resistance, note) give what a viewer would show.
  `url_decode` and `url_encode` handle the escaped fields.
- `obvtools.pdffile` — `PDFFile` holds the schematic PDF of a board:
  `load_from_config(filepath)` reads the `PDFFilePath` entry (defaulting to
  the board path with a `.pdf` extension) and `write_to_config` stores it
  relative to the config file. `PDFBridge` is the viewer interface; this base
  class only records the open document and the last `SearchRequest`, and
  never reports a selection.
- `obvtools.options` — `parse_parameters(argv)` reads the viewer's flags
  (`-h`, `-V`, `-l`, `-c`, `-i`, `-x`, `-y`, `-z`, `-p`, `-r`, `-d`,
  `--reversesearch`) into `Options`, raising `UsageError` for a missing value
  or an unknown flag; a single lone argument is taken as the board file.
  `resolve_options(options, config)` fills unset values from a `Confparse`
  and scales the font size by the dpi. `Renderer` and `renderer_from_int`
  name the rendering back ends; `HELP` is the usage text.

## Examples

```python
from obvtools.confparse import Confparse

config = Confparse()
config.load("obv.conf", True)          # creates the file with defaults if missing
width = config.parse_int("windowX", 1100)
config.write_bool("showFPS", True)
```

```python
from obvtools.utils import compare_string_insensitive, split_string

compare_string_insensitive("U1000", "u1000")   # True
split_string("Ctrl~O|Slash", "|")             # ["Ctrl~O", "Slash"]
```

```python
from obvtools.spellcorrector import levenshtein_distance

levenshtein_distance("kitten", "sitting", 10)  # 3
```

```python
from obvtools.confparse import Confparse
from obvtools.options import parse_parameters, resolve_options

options = parse_parameters(["-i", "board.brd", "-x", "1280"])
config = Confparse()
config.load("obv.conf", True)
options = resolve_options(options, config)
```

## What it does not do

There is no viewer here: no window, no rendering, no board file readers and
no command to run. `parse_parameters` only reports `show_help` and
`show_version`; printing and exiting is left to the caller. `PDFBridge` does
not talk to any PDF program. `OBData.load` downloads a missing file with a
fixed request for a single board rather than the board asked for.

## Tests

The test suite uses pytest and is installed with the `test` extra.