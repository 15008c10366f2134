import math

import numpy as np

from dropzone.planning.descent.geometry import (
    ORIGIN,
    Point,
    add,
    distance,
    heading,
    normalize,
    point_on_segment,
    scale,
    subtract,
)


def test_vector_arithmetic() -> None:
    p = Point(3.0, 4.0)
    q = Point(1.0, -2.0)
    assert add(p, q) == Point(4.0, 2.0)
    assert subtract(p, q) == Point(2.0, 6.0)
    assert scale(p, 0.5) == Point(1.5, 2.0)
    assert distance(ORIGIN, p) == 5.0


def test_normalize_returns_zero_vector_for_tiny_input() -> None:
    assert normalize(Point(1e-12, -1e-12)) == ORIGIN
    unit = normalize(Point(0.0, -7.0))
    assert unit == Point(0.0, -1.0)
    assert math.isclose(math.hypot(*normalize(Point(2.0, 5.0)).as_tuple()), 1.0)


def test_heading_of_degenerate_segment_is_zero() -> None:
    a = Point(10.0, 10.0)
    assert heading(a, a) == ORIGIN
    assert heading(a, Point(20.0, 10.0)) == Point(1.0, 0.0)


def test_point_on_segment_endpoints_and_midpoint() -> None:
    a = Point(-2.0, 4.0)
    b = Point(6.0, 0.0)
    assert point_on_segment(a, b, 0.0) == a
    assert point_on_segment(a, b, 1.0) == b
    assert point_on_segment(a, b, 0.5) == Point(2.0, 2.0)


def test_point_as_array() -> None:
    arr = Point(1.5, -3.0).as_array()
    assert arr.dtype == float
    np.testing.assert_allclose(arr, [1.5, -3.0])
