"""A fly-through camera driven by Euler angles."""

from __future__ import annotations

import math
from enum import Enum, auto

import numpy as np

from planetview import vecmath

YAW = -90.0
PITCH = 0.0
SPEED = 2.5
SENSITIVITY = 0.1
ZOOM = 45.0

PITCH_LIMIT = 89.0
MIN_ZOOM = 1.0
MAX_ZOOM = 60.0


class Movement(Enum):
    """Directions the camera can be moved in, independent of any input device."""

    FORWARD = auto()
    BACKWARD = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()


class Camera:
    """Camera holding a position and orientation, with helpers for keyboard and mouse input."""

    def __init__(self, position=None, world_up=None, yaw: float = YAW, pitch: float = PITCH):
        self.position = (
            vecmath.vec3(0.0, 0.0, 0.0) if position is None else np.array(position, dtype=np.float64)
        )
        self.world_up = (
            vecmath.vec3(0.0, 1.0, 0.0) if world_up is None else np.array(world_up, dtype=np.float64)
        )
        self.yaw = float(yaw)
        self.pitch = float(pitch)
        self.movement_speed = SPEED
        self.mouse_sensitivity = SENSITIVITY
        self.zoom = ZOOM
        self.front = vecmath.vec3(0.0, 0.0, -1.0)
        self.right = vecmath.vec3(1.0, 0.0, 0.0)
        self.up = vecmath.vec3(0.0, 1.0, 0.0)
        self._update_vectors()

    @classmethod
    def from_scalars(cls, pos_x, pos_y, pos_z, up_x, up_y, up_z, yaw, pitch) -> "Camera":
        """Build a camera from separate position and up-vector components."""
        return cls(
            vecmath.vec3(pos_x, pos_y, pos_z),
            vecmath.vec3(up_x, up_y, up_z),
            yaw,
            pitch,
        )

    def view_matrix(self) -> np.ndarray:
        """Return the view matrix for the current position and orientation."""
        return vecmath.look_at(self.position, self.position + self.front, self.up)

    def process_keyboard(self, direction: Movement, delta_time: float) -> None:
        """Move the camera in ``direction`` for ``delta_time`` seconds."""
        velocity = self.movement_speed * delta_time
        steps = {
            Movement.FORWARD: self.front,
            Movement.BACKWARD: -self.front,
            Movement.LEFT: -self.right,
            Movement.RIGHT: self.right,
            Movement.UP: self.world_up,
            Movement.DOWN: -self.world_up,
        }
        self.position = self.position + steps[Movement(direction)] * velocity

    def process_mouse_movement(self, xoffset: float, yoffset: float, constrain_pitch: bool = True) -> None:
        """Turn the camera by a mouse offset, optionally keeping pitch within ±89 degrees."""
        self.yaw += xoffset * self.mouse_sensitivity
        self.pitch += yoffset * self.mouse_sensitivity
        if constrain_pitch:
            self.pitch = min(max(self.pitch, -PITCH_LIMIT), PITCH_LIMIT)
        self._update_vectors()

    def process_mouse_scroll(self, yoffset: float) -> None:
        """Change the field of view by a scroll offset, keeping it within [1, 60] degrees."""
        self.zoom = min(max(self.zoom - float(yoffset), MIN_ZOOM), MAX_ZOOM)

    def _update_vectors(self) -> None:
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        front = vecmath.vec3(
            math.cos(yaw) * math.cos(pitch),
            math.sin(pitch),
            math.sin(yaw) * math.cos(pitch),
        )
        self.front = vecmath.normalize(front)
        self.right = vecmath.normalize(vecmath.cross(self.front, self.world_up))
        self.up = vecmath.normalize(vecmath.cross(self.right, self.front))