# topmeter

`topmeter` holds pieces of an interactive process viewer that work without a
terminal: colour schemes, key codes and terminal quirks, the function-key bar,
incremental search and filter, the entries of the setup pages, and reading and
setting the CPU affinity of a process. A front end draws what these pieces
compute.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## What is inside

- `topmeter.colors`: `ColorScheme` (seven schemes) and `ColorElement` (every
  screen element with its own colour). `color_index` and `color_pair` give the
  pair number and attribute for a foreground/background pair.
  `scheme_colors(scheme)` maps each element to its attribute under a scheme
  and raises `ValueError` for an unknown one. `pair_definitions(scheme,
  num_colors)` gives the `(foreground, background)` of every colour pair,
  with `-1` standing for the terminal's default background.
- `topmeter.crt`: key codes (`key_f`, `key_alt`, `ERR`), tree-drawing strings
  (`tree_strings(utf8)`, indexed by `TreeStr`), and per-terminal settings:
  `horizontal_scroll_amount(term)`, `extra_key_sequences(term)` (escape
  sequences to bind on xterm-like and vt220 terminals) and
  `effective_delay(delay)`.
- `topmeter.hashtable`: `Hashtable`, a map from unsigned 32-bit integers with
  a fixed number of chained buckets. It has `put`, `get` (returns `None` when
  the key is absent), `remove`, `items`, `len()` and `in`. An owning table
  returns nothing from `remove`.
- `topmeter.function_bar`: `FunctionBar` holds the bottom-line key names and
  labels. `set_label` relabels an event, `synthesize_event(pos)` maps a mouse
  column to the event under it (or `ERR`), and `text()` gives the bar as it
  reads on screen. `enter_esc_bar(enter, esc)` builds an Enter/Esc bar.
- `topmeter.list_items`: `ListItem` (text plus an integer key, ordered by
  text) and `CheckItem` (a check box whose state lives in the item or in an
  attribute of another object). Both return coloured segments from
  `display()`.
- `topmeter.options`: the "Display options" and "Colors" setup pages.
  `display_option_items(settings)` binds one check box to each option
  attribute of a settings object, and `toggle_option` flips one and sets
  `settings.changed`. `color_scheme_items(selected)` and
  `select_color_scheme(items, settings, index)` handle the scheme list.
- `topmeter.inc_set`: `IncSet`, the incremental search and filter state.
  `activate(IncType.SEARCH | IncType.FILTER)` enters a mode,
  `handle_key(ch, values, selected)` returns a `KeyResult` with the new
  selection and whether the filter changed, `filtered(lines)` keeps the lines
  that match the filter, and `filter` gives the filter text.
- `topmeter.affinity`: `Affinity` (a list of CPUs), `get_affinity(pid,
  cpu_count)` and `set_affinity(pid, affinity)` over the operating system's
  scheduler calls, and `affinity_items` / `affinity_from_items` for the CPU
  picker. `get_affinity` returns `None` and `set_affinity` returns `False`
  when the call fails or the platform lacks it.

## Examples

```python
from topmeter.function_bar import enter_esc_bar

bar = enter_esc_bar("Sort   ", "Cancel ")
bar.text()                  # "EnterSort   EscCancel "
bar.synthesize_event(0)     # 13, the Enter event
bar.synthesize_event(12)    # 27, the Esc event
bar.synthesize_event(30)    # -1 (ERR): no entry there
```

Filtering lines as the user types:

```python
from topmeter.function_bar import FunctionBar
from topmeter.inc_set import IncSet, IncType
from topmeter.list_items import ListItem

lines = [ListItem("bash"), ListItem("init"), ListItem("babel")]
inc = IncSet(FunctionBar())
inc.activate(IncType.FILTER)
for ch in b"ba":
    result = inc.handle_key(ch, [line.value for line in lines], 0)
inc.filter                                      # "ba"
[line.value for line in inc.filtered(lines)]    # ["bash", "babel"]
```

## What it does not do

The package draws nothing and has no command to run: there is no screen, no
process list and no main loop. It has no header meters (CPU, memory, load,
clock and the like) and no header layout; the colour and key tables here are
what such parts would be built on.