import math

import pytest

from freedraw.stroke import get_stroke
from freedraw.svg import get_svg_path_from_stroke
from freedraw.types import StrokeOptions

MANY_POINTS = [[10 + i * 2.0, 50 + math.sin(i / 6.0) * 30.0] for i in range(120)]
NUMBER_PAIRS = [[10 + i * 4.0, 40 + math.sin(i / 4.0) * 20.0] for i in range(50)]


def test_svg_path_conversion():
    options = StrokeOptions(size=20.0, thinning=0.5, smoothing=0.5, streamline=0.5)
    path = get_svg_path_from_stroke(get_stroke(MANY_POINTS, options), True)
    assert path
    assert path.startswith("M")
    assert "Q" in path
    assert "T" in path
    assert path.endswith("Z")


def test_svg_path_for_number_pairs():
    options = StrokeOptions(size=20.0, thinning=0.5, smoothing=0.5, streamline=0.5)
    path = get_svg_path_from_stroke(get_stroke(NUMBER_PAIRS, options), True)
    assert path.startswith("M")
    assert path.endswith("Z")


@pytest.mark.parametrize("count", [0, 1, 2, 3])
def test_too_few_points_give_empty_path(count):
    points = [(float(i), float(i)) for i in range(count)]
    assert get_svg_path_from_stroke(points, True) == ""


def test_worked_example_open():
    points = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
    assert get_svg_path_from_stroke(points, False) == "M0.00,0.00 Q1.00,0.00 1.00,0.50 T0.50,1.00 "


def test_worked_example_closed():
    points = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
    assert get_svg_path_from_stroke(points, True) == "M0.00,0.00 Q1.00,0.00 1.00,0.50 T0.50,1.00 Z"


def test_closed_is_default():
    points = [(0.0, 0.0), (2.0, 0.0), (2.0, 2.0), (0.0, 2.0), (0.0, 0.0)]
    assert get_svg_path_from_stroke(points) == get_svg_path_from_stroke(points, True)


def test_segment_count_matches_points():
    points = [(float(i), float(i * i)) for i in range(10)]
    path = get_svg_path_from_stroke(points, False)
    tail = path.split("T", 1)[1]
    assert len(tail.split()) == len(points) - 3


def test_two_decimal_formatting():
    points = [(1.234, 5.678), (2.0, 3.0), (4.0, 5.0), (6.0, 7.0)]
    assert get_svg_path_from_stroke(points, False).startswith("M1.23,5.68 Q2.00,3.00 3.00,4.00 T")