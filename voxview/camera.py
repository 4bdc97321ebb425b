"""Vector helpers for an orbiting camera that looks at the origin."""

from __future__ import annotations

import math

from voxview.model import Model

Vector = tuple[float, float, float]

UP: Vector = (0.0, 1.0, 0.0)
YAW_SPEED = 0.005
PITCH_SPEED = 0.01


def cross(a: Vector, b: Vector) -> Vector:
    """Cross product of two vectors."""
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def rotate_by_axis_angle(vector: Vector, axis: Vector, angle: float) -> Vector:
    """Rotate ``vector`` around ``axis`` by ``angle`` radians (right-handed)."""
    length = math.sqrt(sum(c * c for c in axis)) or 1.0
    axis = tuple(c / length for c in axis)

    half = angle / 2.0
    s = math.sin(half)
    w = (axis[0] * s, axis[1] * s, axis[2] * s)
    a = math.cos(half)

    wv = cross(w, vector)
    wwv = cross(w, wv)
    return tuple(
        v + 2.0 * a * p + 2.0 * q for v, p, q in zip(vector, wv, wwv)
    )


def initial_position(model: Model) -> Vector:
    """Starting camera position: diagonally above the model, far enough to see it."""
    bounds = model.frames[0].bounds
    dist = max(bounds.x, bounds.y) * 2.0
    tilted = rotate_by_axis_angle((dist, 0.0, 0.0), (0.0, 0.0, 1.0), math.pi / 4.0)
    return rotate_by_axis_angle(tilted, UP, math.pi / 4.0)


def orbit(position: Vector, dx: float, dy: float) -> Vector:
    """Move the camera around the origin for a mouse drag of (dx, dy) pixels."""
    position = rotate_by_axis_angle(position, UP, -dx * YAW_SPEED)
    toward_origin = tuple(-c for c in position)
    return rotate_by_axis_angle(position, cross(toward_origin, UP), -dy * PITCH_SPEED)