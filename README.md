# unfuzzy

Building blocks for designing fuzzy logic systems: membership functions,
linguistic variables, label and training-pattern helpers, the pixel
geometry used to plot variables and input–output curves, and the choice
lists used when configuring an inference engine.

## Installation

```
pip install .
```

No third-party libraries are needed. To run the tests:

```
pip install ".[test]"
pytest
```

## Fuzzy sets (`unfuzzy.sets`)

The shapes are `LSet`, `TriangleSet`, `PiSet`, `GammaSet`, `ZSet`,
`BellSet`, `PiBellSet`, `SSet` and `SingletonSet`, all subclasses of
`FuzzySet`. Every set has a `name`, a `minimum` and a `maximum`; most also
have a `first_cut`, and `PiSet` and `PiBellSet` a `second_cut`.
`SingletonSet` also exposes `peak` and `delta`.

- `membership(x)` gives the degree of membership; values below `0.0001`
  are returned as 0.
- `key_points()` lists the editable points in order.
- `set_key_point(index, x)` moves one of them; unknown indices are ignored.
- `check_key_point(index, x)` clamps `x` between the neighbouring key
  points and raises `IndexError` for an unknown index.
- `c_code()` returns C statements computing `ux` from `x`;
  `cpp_code()` returns a C++ statement constructing the set.

`SetKind` numbers the shapes and `set_type_name(kind)` gives a display
name (`""` for an unknown kind).

## Variables (`unfuzzy.variable`)

`Variable` is a dataclass holding `name`, `range_min`, `range_max`,
`intervals` and a list of `sets`. `len(variable)` is the number of sets,
and `interval` is the width of one evaluation interval.

- `add_set`, `insert_set`, `remove_set`, `clear_sets` manage the sets.
- `membership(which, x)` takes a set index or a set.
- `set_intervals(count)` raises `ValueError` unless `count` is positive.
- `apply_edit(name, minimum, maximum, intervals)` updates everything at
  once; if `minimum` is not below `maximum` the old range is kept, and the
  interval count is held between `MIN_INTERVALS` (5) and `MAX_INTERVALS`
  (200).

## Helpers

- `unfuzzy.labels`
  - `split_labels(line)` splits on `-`, `,`, `;`, `%`, `$`, `#`, `/` or
    tab and strips each label.
  - `label_options(lines, count)` skips the first (header) line, keeps the
    lines with exactly `count` labels joined by `" - "`, and ends with a
    generic `"Set 1 - Set 2 - ..."` option.
  - `apply_labels(variable, labels, reverse=False)` renames the sets in
    order; more labels than sets raises `IndexError`.
- `unfuzzy.patterns`
  - `parse_pattern_line(line, columns)` reads a row of numbers separated
    by spaces or `;%$#/` and tab; non-numbers read as 0, short rows are
    padded with 0, long rows are cut, an empty line gives `None`.
  - `load_patterns(lines, columns)` reads every non-empty line.
  - `default_pattern(ranges)` gives the middle of each range.
  - `clamp_patterns(patterns, ranges)` returns the clamped rows and the
    number of values moved.
- `unfuzzy.plot`
  - `Rect` (inclusive pixel rectangle) and `Tick` (position, value, label).
  - `PlotFrame(frame)` lays out axes and canvas inside a frame and offers
    `x_ticks`, `y_ticks`, `to_pixel`, `set_curve`, `drag_points`,
    `function_curve` and `pixel_to_value`.
- `unfuzzy.editing`
  - `convert_set(fuzzy_set, kind, range_min, range_max)` rebuilds a set
    as another shape over the same support.
  - `new_default_set(name, range_min, range_max)` makes a triangle on the
    middle quarter of the range.
  - `move_key_point(variable, set_index, point_index, x)` moves a point,
    held inside the range and between its neighbours.
  - `drag_to_value(pixel_x, pixel_min, pixel_max, range_min, range_max)`
    turns a pixel column into a value within the range.
- `unfuzzy.engine_options`
  - `clamp_parameter(value, minimum, maximum)`.
  - `t_norm_selection`, `s_norm_selection`, `aggregation_selection` map a
    norm identifier to its position in a choice list (`ValueError` if
    unknown).
  - `aggregation_choice(index)` returns `("s", n)`, `("t", n)` or `None`
    for the separator.
  - `implication_choices()` lists implication names.
- `unfuzzy.implication` provides `ImplicationKind` and
  `implication_name(kind)`.

## Example

```python
from unfuzzy.sets import TriangleSet
from unfuzzy.variable import Variable
from unfuzzy.patterns import parse_pattern_line

speed = Variable("speed", 0.0, 10.0)
speed.add_set(TriangleSet("medium", 0.0, 5.0, 10.0))
print(speed.membership(0, 2.5))        # 0.5

print(parse_pattern_line("1;2", 3))    # [1.0, 2.0, 0.0]
```

## What this package does not do

It has no inference engine, rule base, norm or implication operators,
fuzzifiers or defuzzifiers, so it cannot compute the output of a fuzzy
system or train one. `unfuzzy.implication` and `unfuzzy.engine_options`
only name and index those operators. There is no graphical interface, no
drawing (only pixel coordinates), no saving or loading of systems, and no
command-line program.