import math

from freedraw.points import get_stroke_points
from freedraw.types import InputPoint, StrokeOptions


def test_empty_input():
    assert get_stroke_points([], StrokeOptions()) == []


def test_one_point():
    result = get_stroke_points([InputPoint(100.0, 100.0, 0.5)], StrokeOptions())
    assert len(result) >= 1
    assert result[0].point == (100.0, 100.0)
    assert result[0].pressure == 0.5
    assert result[0].running_length == 0.0


def test_multiple_points():
    points = [
        InputPoint(100.0, 100.0, 0.5),
        InputPoint(200.0, 150.0, 0.7),
        InputPoint(300.0, 100.0, 0.5),
    ]
    result = get_stroke_points(points, StrokeOptions())
    assert len(result) >= 3
    assert result[0].point == (100.0, 100.0)
    assert result[0].pressure == 0.5
    assert result[0].running_length == 0.0
    assert result[-1].running_length > 0.0


def test_object_input():
    points = [
        {"x": 100.0, "y": 100.0, "pressure": 0.5},
        {"x": 200.0, "y": 150.0, "pressure": 0.7},
        {"x": 300.0, "y": 100.0, "pressure": 0.5},
    ]
    result = get_stroke_points(points, StrokeOptions())
    assert len(result) >= 3
    assert result[0].point == (100.0, 100.0)
    assert result[0].pressure == 0.5
    assert result[0].running_length == 0.0


def test_simulated_pressure_keeps_pressures_in_range():
    points = [[100.0, 100.0], [200.0, 150.0], [300.0, 100.0]]
    result = get_stroke_points(points, StrokeOptions(simulate_pressure=True))
    assert len(result) >= 3
    assert all(0.0 <= p.pressure <= 1.0 for p in result)


def test_options_default_when_omitted():
    points = [[100.0, 100.0], [200.0, 150.0], [300.0, 100.0]]
    assert get_stroke_points(points) == get_stroke_points(points, StrokeOptions())


def test_last_keeps_final_input_point():
    points = [[0.0, 0.0], [100.0, 0.0], [200.0, 0.0]]
    result = get_stroke_points(points, StrokeOptions(last=True))
    assert result[-1].point == (200.0, 0.0)


def test_vectors_are_unit_and_point_backwards():
    points = [[0.0, 0.0], [100.0, 0.0], [200.0, 0.0]]
    result = get_stroke_points(points, StrokeOptions())
    for sp in result[1:]:
        assert math.isclose(math.hypot(*sp.vector), 1.0)
        assert sp.vector == (-1.0, 0.0)


def test_first_vector_copied_from_second():
    points = [[0.0, 0.0], [50.0, 30.0], [120.0, 10.0]]
    result = get_stroke_points(points, StrokeOptions())
    assert result[0].vector == result[1].vector


def test_running_length_accumulates_distances():
    points = [[0.0, 0.0], [40.0, 30.0], [80.0, 0.0], [120.0, 40.0], [160.0, 0.0]]
    result = get_stroke_points(points, StrokeOptions())
    lengths = [p.running_length for p in result]
    assert lengths == sorted(lengths)
    for prev, cur in zip(result, result[1:]):
        assert cur.running_length >= prev.running_length + cur.distance - 1e-9


def test_duplicate_points_are_skipped():
    points = [[10.0, 10.0]] * 5
    result = get_stroke_points(points, StrokeOptions(last=True))
    assert len(result) == 1
    assert result[0].point == (10.0, 10.0)


def test_negative_pressures_replaced():
    result = get_stroke_points([[0.0, 0.0, -1.0]], StrokeOptions())
    assert result[0].pressure == 0.25
    assert result[1].pressure == 0.5


def test_two_points_are_interpolated():
    points = [[0.0, 0.0, 0.3], [100.0, 0.0, 0.9]]
    result = get_stroke_points(points, StrokeOptions(size=1.0, last=True))
    assert len(result) > 2
    assert result[-1].point == (100.0, 0.0)
    assert all(p.pressure == 0.9 for p in result[1:])