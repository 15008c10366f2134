"""Planar vector helpers shared by the descent policies and the line search."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

_NORM_EPS = 1e-9


@dataclass(frozen=True)
class Point:
    """A point (or displacement) in the map's pixel coordinate system."""

    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)


ORIGIN = Point(0.0, 0.0)


def subtract(p: Point, q: Point) -> Point:
    return Point(p.x - q.x, p.y - q.y)


def add(p: Point, q: Point) -> Point:
    return Point(p.x + q.x, p.y + q.y)


def scale(v: Point, s: float) -> Point:
    return Point(v.x * s, v.y * s)


def distance(p: Point, q: Point) -> float:
    """Euclidean distance in planar units."""
    return math.hypot(q.x - p.x, q.y - p.y)


def normalize(v: Point) -> Point:
    """Unit vector along ``v``; the zero vector when ``v`` is (nearly) zero."""
    length = math.hypot(v.x, v.y)
    if length < _NORM_EPS:
        return ORIGIN
    return Point(v.x / length, v.y / length)


def heading(start: Point, end: Point) -> Point:
    """Unit direction from ``start`` towards ``end``."""
    return normalize(subtract(end, start))


def point_on_segment(a: Point, b: Point, t: float) -> Point:
    """Linear interpolation ``a + t * (b - a)``."""
    return add(a, scale(subtract(b, a), t))


__all__ = [
    "ORIGIN",
    "Point",
    "add",
    "distance",
    "heading",
    "normalize",
    "point_on_segment",
    "scale",
    "subtract",
]
