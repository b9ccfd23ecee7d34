"""A free-flying first-person camera and the matrices it needs."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Sequence

import numpy as np

SPEED = 150.0
"""Movement speed in units per second."""

MOUSE_SPEED = 0.0005
"""Radians turned per pixel of mouse movement."""


class Movement(enum.Enum):
    """Movement keys the camera reacts to."""

    FORWARD = "w"
    BACKWARD = "s"
    LEFT = "a"
    RIGHT = "d"


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Perspective projection matrix; ``fovy`` is the vertical field of view in degrees."""
    if aspect == 0:
        raise ValueError("aspect must not be zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    f = 1.0 / math.tan(math.radians(fovy) / 2.0)
    depth = far - near
    return np.array(
        [
            [f / aspect, 0.0, 0.0, 0.0],
            [0.0, f, 0.0, 0.0],
            [0.0, 0.0, -(far + near) / depth, -2.0 * far * near / depth],
            [0.0, 0.0, -1.0, 0.0],
        ]
    )


def _normalize(v: np.ndarray) -> np.ndarray:
    length = np.linalg.norm(v)
    if length == 0:
        raise ValueError("cannot normalize a zero vector")
    return v / length


def look_at(eye: Sequence[float], center: Sequence[float], up: Sequence[float]) -> np.ndarray:
    """View matrix placing the eye at the origin, looking down -Z toward ``center``."""
    eye_v = np.asarray(eye, dtype=float)
    f = _normalize(np.asarray(center, dtype=float) - eye_v)
    s = _normalize(np.cross(f, np.asarray(up, dtype=float)))
    u = np.cross(s, f)
    return np.array(
        [
            [*s, -float(np.dot(s, eye_v))],
            [*u, -float(np.dot(u, eye_v))],
            [*(-f), float(np.dot(f, eye_v))],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


class Camera:
    """A camera steered by mouse movement and the W, A, S, D keys."""

    def __init__(
        self,
        projection: np.ndarray,
        position: Sequence[float] = (0.0, 0.0, 0.0),
        horizontal_angle: float = 0.0,
        vertical_angle: float = 0.0,
    ) -> None:
        self.projection = np.asarray(projection, dtype=float)
        self.position = np.array(position, dtype=float)
        self.horizontal_angle = horizontal_angle
        self.vertical_angle = vertical_angle

    def view_matrix(
        self,
        delta_time_ms: float,
        mouse_dx: float,
        mouse_dy: float,
        pressed: Iterable[Movement] = (),
    ) -> np.ndarray:
        """Turn and move the camera for one frame and return the new view matrix."""
        seconds = delta_time_ms / 1000.0
        self.horizontal_angle += MOUSE_SPEED * mouse_dx
        self.vertical_angle += MOUSE_SPEED * mouse_dy

        h, v = self.horizontal_angle, self.vertical_angle
        direction = np.array([math.cos(v) * math.sin(h), math.sin(v), math.cos(v) * math.cos(h)])
        right = np.array([math.sin(h - 3.14 / 2.0), 0.0, math.cos(h - 3.14 / 2.0)])
        up = np.cross(right, direction)

        keys = set(pressed)
        step = seconds * SPEED
        if Movement.FORWARD in keys:
            self.position = self.position + direction * step
        if Movement.BACKWARD in keys:
            self.position = self.position - direction * step
        if Movement.LEFT in keys:
            self.position = self.position - right * step
        if Movement.RIGHT in keys:
            self.position = self.position + right * step

        return look_at(self.position, self.position + direction, up)