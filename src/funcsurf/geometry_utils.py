"""Small vector helpers shared by the mesher and the transform code."""

from __future__ import annotations

from math import sqrt
from typing import Sequence, Tuple

Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]

## lengths at or below this are treated as zero
epsilon = 1e-12


def add3(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def sub3(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def cross3(a: Vec3, b: Vec3) -> Vec3:
    return (a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0])


def dot3(a: Sequence[float], b: Sequence[float]) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def mag3(a: Sequence[float]) -> float:
    return sqrt(dot3(a, a))


def normalize3(a: Vec3) -> Vec3 | None:
    """Return ``a`` scaled to unit length, or ``None`` if it has no length."""

    length = mag3(a)
    if length <= epsilon:
        return None
    return (a[0] / length, a[1] / length, a[2] / length)


def triangle_cross(v0: Vec3, v1: Vec3, v2: Vec3) -> Vec3:
    """Return ``(v1 - v0) x (v2 - v0)``; its length is twice the triangle area."""

    return cross3(sub3(v1, v0), sub3(v2, v0))


__all__ = [
    "Vec2",
    "Vec3",
    "epsilon",
    "add3",
    "sub3",
    "cross3",
    "dot3",
    "mag3",
    "normalize3",
    "triangle_cross",
]
