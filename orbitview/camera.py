"""Free-flying camera driven by Euler angles."""

from __future__ import annotations

import math
from enum import Enum, auto

import numpy as np

from .transforms import look_at, normalize

YAW = -90.0
PITCH = 0.0
SPEED = 2.5
SENSITIVITY = 0.1
ZOOM = 45.0
MIN_ZOOM = 1.0
MAX_PITCH = 89.0


class Movement(Enum):
    """Directions the camera can move in."""

    FORWARD = auto()
    BACKWARD = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()


class Camera:
    """A camera that turns with the mouse, zooms with the wheel and moves with keys."""

    def __init__(self, position=(0.0, 0.0, 0.0), world_up=(0.0, 1.0, 0.0), yaw=YAW, pitch=PITCH):
        self.position = np.array(position, dtype=np.float64)
        self.world_up = np.array(world_up, dtype=np.float64)
        self.yaw = float(yaw)
        self.pitch = float(pitch)
        self.front = np.array([0.0, 0.0, -1.0])
        self.movement_speed = SPEED
        self.mouse_sensitivity = SENSITIVITY
        self.zoom = ZOOM
        self._update_vectors()

    def _update_vectors(self) -> None:
        yaw, pitch = math.radians(self.yaw), math.radians(self.pitch)
        self.front = normalize(
            [math.cos(yaw) * math.cos(pitch), math.sin(pitch), math.sin(yaw) * math.cos(pitch)]
        )
        self.right = normalize(np.cross(self.front, self.world_up))
        self.up = normalize(np.cross(self.right, self.front))

    def view_matrix(self) -> np.ndarray:
        """Return the view matrix for the current position and orientation."""
        return look_at(self.position, self.position + self.front, self.up)

    def process_keyboard(self, direction: Movement, delta_time: float) -> None:
        """Move the camera in ``direction`` for ``delta_time`` seconds."""
        steps = {
            Movement.FORWARD: self.front,
            Movement.BACKWARD: -self.front,
            Movement.LEFT: -self.right,
            Movement.RIGHT: self.right,
            Movement.UP: self.up,
            Movement.DOWN: -self.up,
        }
        velocity = self.movement_speed * delta_time
        self.position = self.position + steps[Movement(direction)] * velocity

    def process_mouse_movement(
        self, xoffset: float, yoffset: float, constrain_pitch: bool = True
    ) -> None:
        """Turn the camera by a mouse offset, optionally keeping pitch within bounds."""
        self.yaw += xoffset * self.mouse_sensitivity
        self.pitch += yoffset * self.mouse_sensitivity
        if constrain_pitch:
            self.pitch = min(max(self.pitch, -MAX_PITCH), MAX_PITCH)
        self._update_vectors()

    def process_mouse_scroll(self, yoffset: float) -> None:
        """Change the field of view by a scroll offset, clamped to its range."""
        if MIN_ZOOM <= self.zoom <= ZOOM:
            self.zoom -= yoffset
        self.zoom = min(max(self.zoom, MIN_ZOOM), ZOOM)