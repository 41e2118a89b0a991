"""Small vector and 4x4 matrix helpers for a right-handed OpenGL-style scene.

Vectors are 3-element float arrays. Matrices are 4x4 arrays indexed
``[row, column]`` and act on column vectors (``m @ v``).
"""

from __future__ import annotations

import math
from typing import Union

import numpy as np

Vector = np.ndarray
Matrix = np.ndarray
ScaleLike = Union[float, int, np.ndarray, "list[float]", "tuple[float, float, float]"]


def vec3(x: float, y: float, z: float) -> Vector:
    """Build a 3-component float vector."""
    return np.array([x, y, z], dtype=np.float64)


def _as_vec3(v) -> Vector:
    arr = np.asarray(v, dtype=np.float64)
    if arr.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {arr.shape}")
    return arr


def length(v) -> float:
    """Return the Euclidean length of a vector."""
    x, y, z = _as_vec3(v)
    return math.sqrt(x * x + y * y + z * z)


def normalize(v) -> Vector:
    """Return the unit vector in the direction of ``v``; the zero vector stays zero."""
    arr = _as_vec3(v)
    size = length(arr)
    if size == 0.0:
        return np.zeros(3, dtype=np.float64)
    return arr / size


def dot(a, b) -> float:
    """Return the dot product of two vectors."""
    ax, ay, az = _as_vec3(a)
    bx, by, bz = _as_vec3(b)
    return ax * bx + ay * by + az * bz


def cross(a, b) -> Vector:
    """Return the cross product ``a x b``."""
    ax, ay, az = _as_vec3(a)
    bx, by, bz = _as_vec3(b)
    return vec3(ay * bz - az * by, az * bx - ax * bz, ax * by - ay * bx)


def look_at(position, target, world_up) -> Matrix:
    """Build a view matrix for an eye at ``position`` looking towards ``target``."""
    position = _as_vec3(position)
    z_axis = normalize(position - _as_vec3(target))
    x_axis = normalize(cross(normalize(world_up), z_axis))
    y_axis = cross(z_axis, x_axis)

    rotation = np.identity(4)
    rotation[0, :3] = x_axis
    rotation[1, :3] = y_axis
    rotation[2, :3] = z_axis

    translation = np.identity(4)
    translation[:3, 3] = -position

    return rotation @ translation


def translate(matrix, offset) -> Matrix:
    """Return ``matrix`` followed (on the right) by a translation by ``offset``."""
    t = np.identity(4)
    t[:3, 3] = _as_vec3(offset)
    return np.asarray(matrix, dtype=np.float64) @ t


def scale(matrix, factors: ScaleLike) -> Matrix:
    """Return ``matrix`` multiplied on the right by a scale; ``factors`` may be a scalar."""
    f = np.broadcast_to(np.asarray(factors, dtype=np.float64), (3,))
    s = np.diag([f[0], f[1], f[2], 1.0])
    return np.asarray(matrix, dtype=np.float64) @ s


def rotate(matrix, angle: float, axis) -> Matrix:
    """Return ``matrix`` multiplied on the right by a rotation of ``angle`` radians about ``axis``."""
    x, y, z = normalize(axis)
    c = math.cos(angle)
    s = math.sin(angle)
    t = 1.0 - c
    r = np.identity(4)
    r[:3, :3] = [
        [t * x * x + c, t * x * y - s * z, t * x * z + s * y],
        [t * x * y + s * z, t * y * y + c, t * y * z - s * x],
        [t * x * z - s * y, t * y * z + s * x, t * z * z + c],
    ]
    return np.asarray(matrix, dtype=np.float64) @ r


def perspective(fovy: float, aspect: float, near: float, far: float) -> Matrix:
    """Right-handed perspective projection mapping depth to the [-1, 1] clip range."""
    if aspect == 0:
        raise ValueError("aspect ratio must not be zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    f = 1.0 / math.tan(fovy / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = f / aspect
    m[1, 1] = f
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -(2.0 * far * near) / (far - near)
    m[3, 2] = -1.0
    return m