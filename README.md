# topview

Building blocks for an interactive process viewer, in plain Python with no
third-party dependencies.

## Modules

- `topview.stringutils`: text helpers. `trim` strips spaces, tabs and
  newlines; `split` splits on a separator, dropping a trailing empty field;
  `get_token` returns the n-th space-separated word (1-based);
  `contains_i` is a case-insensitive substring test; `starts_with`;
  `read_line` reads one line without its newline, `None` at end of input.
- `topview.richstring`: `RichString`, a string whose characters each carry
  an attribute, usually a `Color`. It supports `append`, `write`,
  `set_attr`, `set_attrn`, `find_char`, `prune` and `attr_at`; iterating
  yields `(char, attr)` pairs, and non-printable characters are stored as
  `?`.
- `topview.vector`: `Vector`, an ordered container with positional
  `insert`, `take`, `remove`, `set`, `move_up`, `move_down`, `index_of`,
  and sorting with its comparison function (`quick_sort`,
  `insertion_sort`). The module-level `quick_sort` and `insertion_sort`
  sort plain lists in place with a comparison function.
- `topview.numformat`: fixed-width column text appended to a `RichString`:
  `human_number` (memory in KiB scaled to M, G or T), `color_number`
  (counts coloured by digit group), `print_time` (CPU time in hundredths of
  a second), `output_rate` (bytes per second), and `pid_format` /
  `pid_column_titles` for pid columns sized to the largest pid.
- `topview.panel`: `Panel`, a scrollable, selectable list with an optional
  header. `render(focus)` returns the visible rows as `RichString`s of the
  panel's width; `on_key` handles navigation `Key` codes; `select_by_typing`
  jumps to the item whose text starts with the letters typed and returns a
  `HandlerResult`.
- `topview.uptime`: `format_uptime` and `UptimeMeter`.
- `topview.signals`: `SignalItem`, `realtime_signal_labels`, `signal_items`
  and `default_signal_position`, which picks SIGTERM's entry.
- `topview.userstable`: `UsersTable`, a cached uid-to-user-name lookup
  backed by the system password database, or by a lookup function you pass.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from topview.uptime import format_uptime
from topview.richstring import RichString
from topview.numformat import human_number
from topview.panel import Panel, Key

print(format_uptime(93784))       # 1 day, 02:03:04

out = RichString()
human_number(out, 2048, True)     # memory in KiB
print(str(out))                   # " 2048 "

panel = Panel(w=20, h=5)
for name in ("bash", "python", "sshd"):
    panel.add(name)
panel.on_key(Key.DOWN)
print(panel.selected_item())      # python
```

## What it does not do

The package has no process table: it does not read processes from the
system, sort them into a tree, or send them signals. It does not read or
write a configuration file, has no task-counter meter, no open-files view,
and no command or full-screen terminal program. It provides the pieces such
a viewer is drawn from, and `Panel.render` returns rows as data rather than
drawing them on a terminal.