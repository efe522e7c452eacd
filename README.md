# freedraw

Smooth, pressure-sensitive outlines for freehand strokes.

Given the points a pen, mouse or finger left behind, `freedraw` computes a
polygon that surrounds them: wide where the pressure was high, thin where it
was low, optionally tapered at either end and capped with round ends. The
polygon can be turned straight into SVG path data.

The package has no dependencies outside the standard library and supports
Python 3.10 and later.

## Installing

```
pip install freedraw
```

## Drawing a stroke

```python
from freedraw.stroke import get_stroke
from freedraw.svg import get_svg_path_from_stroke
from freedraw.types import StrokeOptions, TaperOptions

points = [(100, 100, 0.5), (200, 150, 0.7), (300, 100, 0.5)]

options = StrokeOptions(
    size=16.0,
    thinning=0.5,
    smoothing=0.5,
    streamline=0.5,
    simulate_pressure=False,
    start=TaperOptions(taper=True),
    end=TaperOptions(taper=True),
)

outline = get_stroke(points, options)        # list of (x, y) outline points
path_data = get_svg_path_from_stroke(outline, True)
print(f'<path d="{path_data}" />')
```

Input points may be given as `(x, y)` or `(x, y, pressure)` sequences, as
mappings with `x`, `y` and an optional `pressure`, or as
`freedraw.types.InputPoint` values; `freedraw.types.coerce_point` does the
conversion and raises `ValueError` or `TypeError` for anything else. A point
without pressure is treated as pressing at 0.5.

An empty list of points gives an empty outline. A single point or two points
still give a full outline: extra points are added internally.

### Options

`StrokeOptions` is a dataclass; every field has a default, and passing
`options=None` uses them all:

| field               | default  | meaning                                               |
|---------------------|----------|-------------------------------------------------------|
| `size`              | 16.0     | base diameter of the stroke; 0 or less gives no outline |
| `thinning`          | 0.5      | how much pressure changes the width (may be negative) |
| `smoothing`         | 0.5      | how much to soften the edges                          |
| `streamline`        | 0.5      | how strongly the input points are smoothed            |
| `easing`            | `None`   | function applied to each point's pressure (identity when unset) |
| `simulate_pressure` | `True`   | derive pressure from drawing speed                    |
| `start`, `end`      | `None`   | `TaperOptions` for each end of the line               |
| `last`              | `False`  | treat the points as a finished stroke                 |
| `closed`            | `False`  | append the first outline point again at the end       |

`TaperOptions` has `cap` (default `True`, draws a round cap), `taper` and
`easing`. `taper` is `True` for a taper over the whole stroke, `False` or
`None` for none, or a number giving the taper length. Without an `easing`,
the start taper eases out quadratically and the end taper cubically.

### SVG path data

`freedraw.svg.get_svg_path_from_stroke(points, closed=True)` builds path data
from `M`, `Q` and `T` commands with coordinates at two decimal places, ending
with `Z` when `closed` is true. It returns an empty string for fewer than
four points.

## Lower-level pieces

- `freedraw.points.get_stroke_points(points, options)` smooths the input and
  returns `StrokePoint` values carrying `point`, `pressure`, `distance`,
  `vector` and `running_length`.
- `freedraw.outline.get_stroke_outline_points(points, options)` turns those
  stroke points into the outline polygon.
- `freedraw.radius.get_stroke_radius(size, thinning, pressure, easing=None)`
  gives the radius used for a single pressure value.
- `freedraw.vec` holds the small 2-D vector helpers everything is built on
  (`add`, `sub`, `mul`, `div`, `neg`, `per`, `dpr`, `length`, `len2`, `dist`,
  `dist2`, `uni`, `med`, `lrp`, `prj`, `rot_around`, `is_equal`).

## Generating example SVGs

The `freedraw-generate` command reads point data from JSON files and writes
SVG images of each drawing, plain and tapered, filled and outlined:

```
freedraw-generate --data-dir path/to/data --out-dir examples/svg
```

`--data-dir` defaults to `../tests` and `--out-dir` to `examples/svg`. The
data directory must hold all four of these files; a missing one stops the run
with an error:

- `inputs.json`: an object whose keys `manyPoints`, `numberPairs`,
  `objectPairs`, `withDuplicates`, `onePoint`, `twoPoints` and
  `twoEqualPoints` each hold a list of points; absent keys are skipped.
- `sample.json` and `flash.json`: a list of `[x, y]` or `[x, y, pressure]`
  points.
- `corners.json`: an object with a `corners` list of points.

Each SVG's viewBox is fitted to the input points with a fifth of their
extent as padding. The same can be done from Python with
`freedraw.generate.generate_examples(data_dir, out_dir)`, which returns the
paths of the files it wrote; `generate_svg_file`,
`generate_svg_file_with_stroke`, `process_raw_points` and
`calculate_viewbox` are available on their own as well.

## What it does not do

`freedraw` computes geometry and writes SVG text. It does not capture input,
draw on screen, or rasterise images, and it ships no point data: the JSON
files the generator reads must be supplied.

## Running the tests

```
pip install -e ".[test]"
pytest
```