"""Layout and motion of the bodies in the planet scene."""

from __future__ import annotations

import math

import numpy as np

from .transforms import identity, rotate, translate

EARTH_RADIUS = 30.0
ATMOSPHERE_RADIUS = EARTH_RADIUS * 1.10
MAX_HEIGHT = EARTH_RADIUS * 0.3
ORBIT = (60.0, 0.0, 0.0)
SUN_ROTATION_RATE = 20.0  # degrees per second
SUN_AXIS = (0.0, -1.0, 0.0)
EARTH_TILT = -90.0  # degrees about the x axis, so the mesh's poles point along y
EARTH_POSITION = np.array([0.0, 0.0, 0.0, 1.0])

# Unit cube drawn as twelve triangles, used for the sky box.
SKY_VERTICES = np.array(
    [
        [-1.0, 1.0, -1.0], [-1.0, -1.0, -1.0], [1.0, -1.0, -1.0],
        [1.0, -1.0, -1.0], [1.0, 1.0, -1.0], [-1.0, 1.0, -1.0],

        [-1.0, -1.0, 1.0], [-1.0, -1.0, -1.0], [-1.0, 1.0, -1.0],
        [-1.0, 1.0, -1.0], [-1.0, 1.0, 1.0], [-1.0, -1.0, 1.0],

        [1.0, -1.0, -1.0], [1.0, -1.0, 1.0], [1.0, 1.0, 1.0],
        [1.0, 1.0, 1.0], [1.0, 1.0, -1.0], [1.0, -1.0, -1.0],

        [-1.0, -1.0, 1.0], [-1.0, 1.0, 1.0], [1.0, 1.0, 1.0],
        [1.0, 1.0, 1.0], [1.0, -1.0, 1.0], [-1.0, -1.0, 1.0],

        [-1.0, 1.0, -1.0], [1.0, 1.0, -1.0], [1.0, 1.0, 1.0],
        [1.0, 1.0, 1.0], [-1.0, 1.0, 1.0], [-1.0, 1.0, -1.0],

        [-1.0, -1.0, -1.0], [-1.0, -1.0, 1.0], [1.0, -1.0, -1.0],
        [1.0, -1.0, -1.0], [-1.0, -1.0, 1.0], [1.0, -1.0, 1.0],
    ],
    dtype=np.float32,
)


class SunOrbit:
    """The sun circling the earth, which sits at the origin."""

    def __init__(self, orbit=ORBIT, rate: float = SUN_ROTATION_RATE):
        orbit = np.array(orbit, dtype=np.float64)
        if orbit.shape != (3,):
            raise ValueError(f"expected a 3-component orbit offset, got shape {orbit.shape}")
        self.orbit = orbit
        self.rate = float(rate)
        self.angle = 0.0
        self.position = EARTH_POSITION.copy()

    def model_matrix(self, rotating: bool = True) -> np.ndarray:
        """Return the sun's model matrix.

        While rotating, the matrix follows the orbit at the current angle and the
        sun's position is updated; otherwise the sun stays where it last was.
        """
        if rotating:
            model = translate(rotate(identity(), math.radians(self.angle), SUN_AXIS), self.orbit)
            self.position = model @ EARTH_POSITION
            return model
        return translate(identity(), self.position[:3])

    def advance(self, delta_time: float, rotating: bool = True) -> np.ndarray:
        """Return this frame's model matrix, then move the orbit angle on by ``delta_time``."""
        model = self.model_matrix(rotating)
        self.angle = math.fmod(self.angle + self.rate * delta_time, 360.0)
        return model


def earth_model(position=EARTH_POSITION) -> np.ndarray:
    """Return the earth's model matrix: placed at ``position`` and tilted upright."""
    offset = np.asarray(position, dtype=np.float64)[:3]
    return rotate(translate(identity(), offset), math.radians(EARTH_TILT), (1.0, 0.0, 0.0))


def sky_view(view) -> np.ndarray:
    """Return ``view`` with its translation removed, so the sky stays centred on the eye."""
    matrix = identity()
    matrix[:3, :3] = np.asarray(view, dtype=np.float64)[:3, :3]
    return matrix