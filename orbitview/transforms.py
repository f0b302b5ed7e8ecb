"""4x4 matrix helpers for the right-handed, column-vector convention used by OpenGL.

Matrices are numpy arrays in mathematical layout: a point ``p`` is transformed
as ``matrix @ p``. Angles are in radians.
"""

from __future__ import annotations

import math

import numpy as np


def _vec3(value) -> np.ndarray:
    vector = np.asarray(value, dtype=np.float64)
    if vector.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {vector.shape}")
    return vector


def identity() -> np.ndarray:
    """Return the 4x4 identity matrix."""
    return np.identity(4, dtype=np.float64)


def normalize(vector) -> np.ndarray:
    """Return ``vector`` scaled to unit length."""
    v = np.asarray(vector, dtype=np.float64)
    length = np.linalg.norm(v)
    if length == 0:
        raise ValueError("cannot normalize a zero-length vector")
    return v / length


def translate(matrix, offset) -> np.ndarray:
    """Return ``matrix`` followed by a translation by ``offset``."""
    translation = identity()
    translation[:3, 3] = _vec3(offset)
    return np.asarray(matrix, dtype=np.float64) @ translation


def rotate(matrix, angle: float, axis) -> np.ndarray:
    """Return ``matrix`` followed by a rotation of ``angle`` radians about ``axis``."""
    x, y, z = normalize(_vec3(axis))
    c, s = math.cos(angle), math.sin(angle)
    t = 1.0 - c
    rotation = identity()
    rotation[:3, :3] = [
        [c + x * x * t, x * y * t - z * s, x * z * t + y * s],
        [y * x * t + z * s, c + y * y * t, y * z * t - x * s],
        [z * x * t - y * s, z * y * t + x * s, c + z * z * t],
    ]
    return np.asarray(matrix, dtype=np.float64) @ rotation


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Return a perspective projection mapping depth to [-1, 1]."""
    if aspect == 0:
        raise ValueError("aspect ratio must be non-zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    focal = 1.0 / math.tan(fovy / 2.0)
    matrix = np.zeros((4, 4), dtype=np.float64)
    matrix[0, 0] = focal / aspect
    matrix[1, 1] = focal
    matrix[2, 2] = (far + near) / (near - far)
    matrix[2, 3] = 2.0 * far * near / (near - far)
    matrix[3, 2] = -1.0
    return matrix


def look_at(eye, center, up) -> np.ndarray:
    """Return a view matrix looking from ``eye`` towards ``center``."""
    eye, center, up = _vec3(eye), _vec3(center), _vec3(up)
    forward = normalize(center - eye)
    side = normalize(np.cross(forward, up))
    true_up = np.cross(side, forward)
    matrix = identity()
    matrix[0, :3] = side
    matrix[1, :3] = true_up
    matrix[2, :3] = -forward
    matrix[0, 3] = -side @ eye
    matrix[1, 3] = -true_up @ eye
    matrix[2, 3] = forward @ eye
    return matrix