"""Render example strokes from JSON point data into SVG files."""

from __future__ import annotations

import argparse
import json
import math
from decimal import Decimal
from pathlib import Path
from typing import Any, Optional, Sequence, Union

from .stroke import get_stroke
from .svg import get_svg_path_from_stroke
from .types import InputPoint, StrokeOptions, TaperOptions, coerce_point

PathLike = Union[str, Path]

DEFAULT_DATA_DIR = Path("../tests")
DEFAULT_OUT_DIR = Path("examples/svg")

# name suffix, thinning, size, smoothing, streamline, simulate_pressure
_RAW_VARIATIONS = (
    ("_default", 0.5, 16.0, 0.5, 0.5, False),
    ("_thin", 0.75, 10.0, 0.5, 0.5, False),
    ("_thick", 0.25, 20.0, 0.5, 0.5, False),
    ("_simulated", 0.5, 16.0, 0.5, 0.5, True),
)

# name, key in the data, colour, thinning, size, smoothing, streamline, simulate_pressure
_INPUT_EXAMPLES = (
    ("manyPoints", "manyPoints", "#3498db", 0.5, 20.0, 0.5, 0.5, False),
    ("numberPairs", "numberPairs", "#e74c3c", 0.5, 15.0, 0.5, 0.5, False),
    ("objectPairs", "objectPairs", "#2ecc71", 0.2, 15.0, 0.8, 0.6, True),
    ("withDuplicates", "withDuplicates", "#9b59b6", -0.3, 25.0, 0.6, 0.4, True),
    ("onePoint", "onePoint", "#f39c12", 0.5, 10.0, 0.5, 0.5, True),
    ("twoPoints", "twoPoints", "#16a085", 0.5, 15.0, 0.5, 0.5, True),
    ("twoEqualPoints", "twoEqualPoints", "#d35400", 0.5, 10.0, 0.5, 0.5, True),
)

_SVG_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" viewBox="{viewbox}" preserveAspectRatio="xMidYMid meet">
  <path d="{path}" 
        fill="{fill}" 
        stroke="{stroke}" 
        stroke-width="{width}"
        stroke-linejoin="round" 
        stroke-linecap="round" />
</svg>"""


def _display(value: float) -> str:
    """Shortest plain decimal form of a number, without a trailing ``.0``."""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def load_test_data(data_dir: PathLike, filename: str) -> Any:
    """Load and parse a JSON file from ``data_dir``."""
    with open(Path(data_dir) / filename, encoding="utf-8") as handle:
        return json.load(handle)


def calculate_viewbox(points: Sequence[InputPoint]) -> str:
    """SVG viewBox around the points, padded by a fifth of their extent."""
    if not points:
        return "0 0 100 100"

    xs = [p.x for p in points]
    ys = [p.y for p in points]
    min_x, max_x = min(xs), max(xs)
    min_y, max_y = min(ys), max(ys)

    width = max_x - min_x
    height = max_y - min_y
    padding_x = width * 0.2
    padding_y = height * 0.2

    width = max(width, 10.0) + padding_x * 2.0
    height = max(height, 10.0) + padding_y * 2.0

    return " ".join(
        _display(v) for v in (min_x - padding_x, min_y - padding_y, width, height)
    )


def convert_json_to_input_points(values: Sequence[Any]) -> list[InputPoint]:
    """Convert JSON arrays ``[x, y(, pressure)]`` or objects into input points."""
    return [coerce_point(value) for value in values]


def _write_svg(
    out_dir: PathLike,
    filename: str,
    input_points: Sequence[InputPoint],
    path_data: str,
    fill: str,
    stroke: str,
    stroke_width: str,
) -> Path:
    directory = Path(out_dir)
    directory.mkdir(parents=True, exist_ok=True)
    file_path = directory / filename
    content = _SVG_TEMPLATE.format(
        viewbox=calculate_viewbox(input_points),
        path=path_data,
        fill=fill,
        stroke=stroke,
        width=stroke_width,
    )
    file_path.write_text(content, encoding="utf-8")
    print(f"Generated SVG file: {file_path}")
    return file_path


def generate_svg_file(
    path_data: str,
    filename: str,
    color: str,
    input_points: Sequence[InputPoint],
    out_dir: PathLike = DEFAULT_OUT_DIR,
) -> Path:
    """Write a filled, unstroked SVG of the path and return its location."""
    return _write_svg(out_dir, filename, input_points, path_data, color, "none", "0")


def generate_svg_file_with_stroke(
    path_data: str,
    filename: str,
    fill_color: str,
    stroke_color: str,
    stroke_width: float,
    input_points: Sequence[InputPoint],
    out_dir: PathLike = DEFAULT_OUT_DIR,
) -> Path:
    """Write an SVG of the path with fill and stroke and return its location."""
    return _write_svg(
        out_dir,
        filename,
        input_points,
        path_data,
        fill_color,
        stroke_color,
        _display(stroke_width),
    )


def _tapered(options: StrokeOptions) -> StrokeOptions:
    return StrokeOptions(
        size=options.size,
        thinning=options.thinning,
        smoothing=options.smoothing,
        streamline=options.streamline,
        simulate_pressure=options.simulate_pressure,
        start=TaperOptions(taper=True),
        end=TaperOptions(taper=True),
    )


def _write_pair(
    input_points: Sequence[InputPoint],
    options: StrokeOptions,
    color: str,
    fill_name: str,
    stroke_name: str,
    out_dir: PathLike,
) -> list[Path]:
    path_data = get_svg_path_from_stroke(get_stroke(input_points, options), True)
    return [
        generate_svg_file(path_data, fill_name, color, input_points, out_dir),
        generate_svg_file_with_stroke(
            path_data, stroke_name, "transparent", color, 2.0, input_points, out_dir
        ),
    ]


def process_raw_points(
    name: str,
    points: Sequence[Any],
    color: str,
    out_dir: PathLike = DEFAULT_OUT_DIR,
) -> list[Path]:
    """Render raw point arrays with several option sets, plain and tapered."""
    input_points = convert_json_to_input_points(points)
    written: list[Path] = []
    for suffix, thinning, size, smoothing, streamline, simulate in _RAW_VARIATIONS:
        options = StrokeOptions(
            size=size,
            thinning=thinning,
            smoothing=smoothing,
            streamline=streamline,
            simulate_pressure=simulate,
        )
        base = f"{name}{suffix}"
        written += _write_pair(
            input_points, options, color, f"{base}.svg", f"{base}_stroke.svg", out_dir
        )
        tapered = f"{base}_tapered"
        written += _write_pair(
            input_points,
            _tapered(options),
            color,
            f"{tapered}.svg",
            f"{tapered}_stroke.svg",
            out_dir,
        )
    return written


def _generate_variants(
    name: str,
    points: Sequence[Any],
    color: str,
    thinning: float,
    size: float,
    smoothing: float,
    streamline: float,
    simulate_pressure: bool,
    out_dir: PathLike,
) -> list[Path]:
    input_points = convert_json_to_input_points(points)
    options = StrokeOptions(
        size=size,
        thinning=thinning,
        smoothing=smoothing,
        streamline=streamline,
        simulate_pressure=simulate_pressure,
    )
    written = _write_pair(
        input_points, options, color, f"{name}.svg", f"{name}_with_stroke.svg", out_dir
    )
    if len(input_points) > 1:
        written += _write_pair(
            input_points,
            _tapered(options),
            color,
            f"{name}_tapered.svg",
            f"{name}_tapered_with_stroke.svg",
            out_dir,
        )
    return written


def generate_examples(
    data_dir: PathLike = DEFAULT_DATA_DIR,
    out_dir: PathLike = DEFAULT_OUT_DIR,
) -> list[Path]:
    """Render every example data set in ``data_dir`` into ``out_dir``."""
    Path(out_dir).mkdir(parents=True, exist_ok=True)
    print("Generating SVG examples from test data...")
    written: list[Path] = []

    inputs = load_test_data(data_dir, "inputs.json")
    for name, key, color, *settings in _INPUT_EXAMPLES:
        points = inputs.get(key) if isinstance(inputs, dict) else None
        if isinstance(points, list):
            written += _generate_variants(name, points, color, *settings, out_dir)

    print("\nProcessing sample.json...")
    sample = load_test_data(data_dir, "sample.json")
    if isinstance(sample, list):
        written += process_raw_points("sample", sample, "#1abc9c", out_dir)

    print("\nProcessing flash.json...")
    flash = load_test_data(data_dir, "flash.json")
    if isinstance(flash, list):
        written += process_raw_points("flash", flash, "#8e44ad", out_dir)

    print("\nProcessing corners.json...")
    corners_data = load_test_data(data_dir, "corners.json")
    corners = corners_data.get("corners") if isinstance(corners_data, dict) else None
    if isinstance(corners, list):
        written += process_raw_points("corners", corners, "#e67e22", out_dir)

    print(f"\nAll SVG files generated in the {out_dir} directory.")
    return written


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point: render the example SVG files."""
    parser = argparse.ArgumentParser(
        description="Render example strokes from JSON point data into SVG files."
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=DEFAULT_DATA_DIR,
        help="directory holding inputs.json, sample.json, flash.json and corners.json",
    )
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=DEFAULT_OUT_DIR,
        help="directory to write the SVG files into",
    )
    args = parser.parse_args(argv)
    generate_examples(args.data_dir, args.out_dir)
    print("SVG generation complete.")
    return 0