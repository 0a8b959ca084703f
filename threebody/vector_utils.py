#!/usr/bin/env python3
"""
Vector helper functions for 2D operations.

Vectors are plain (x, y) float tuples. These are small, fast functions used by the
physics, collision and rendering code.
"""
import math
from typing import Tuple

Vec2 = Tuple[float, float]


def vec_add(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] + b[0], a[1] + b[1])


def vec_sub(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] - b[0], a[1] - b[1])


def vec_scale(a: Vec2, s: float) -> Vec2:
    return (a[0] * s, a[1] * s)


def vec_len(a: Vec2) -> float:
    return math.hypot(a[0], a[1])


def vec_norm(a: Vec2) -> Vec2:
    """
    Unit vector pointing along a.

    A zero vector has no direction; the division raises ZeroDivisionError.
    """
    l = vec_len(a)
    return (a[0] / l, a[1] / l)


def vec_dist(a: Vec2, b: Vec2) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])
