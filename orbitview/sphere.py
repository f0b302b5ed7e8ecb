"""UV sphere mesh generation with interleaved vertex data."""

from __future__ import annotations

import math
from collections.abc import Iterator

import numpy as np

MIN_SECTOR_COUNT = 3
MIN_STACK_COUNT = 2
STRIDE = 32  # bytes per interleaved vertex: position(3) + normal(3) + uv(2)


def _triangles(sectors: int, stacks: int) -> Iterator[tuple[int, int, int]]:
    """Yield the triangle indices of a sphere grid, skipping degenerate pole faces."""
    for i in range(stacks):
        k1 = i * (sectors + 1)
        k2 = k1 + sectors + 1
        for j in range(sectors):
            a, b = k1 + j, k2 + j
            if i != 0:
                yield a, b, a + 1
            if i != stacks - 1:
                yield a + 1, b, b + 1


class Sphere:
    """A sphere tessellated into sectors (longitude) and stacks (latitude)."""

    stride = STRIDE

    def __init__(self, radius: float = 1.0, sector_count: int = 36, stack_count: int = 18):
        if radius == 0:
            raise ValueError("sphere radius must be non-zero")
        if stack_count < 1:
            raise ValueError("stack count must be at least 1")

        sectors = max(sector_count, MIN_SECTOR_COUNT)
        # Counts below the stack minimum fall back to it, as the mesh has always done.
        if sector_count < MIN_STACK_COUNT:
            sectors = MIN_STACK_COUNT

        self.radius = float(radius)
        self.sector_count = int(sectors)
        self.stack_count = int(stack_count)
        self._generate()

    def _generate(self) -> None:
        sectors, stacks, radius = self.sector_count, self.stack_count, self.radius

        stack_angles = math.pi / 2 - np.arange(stacks + 1) * (math.pi / stacks)
        sector_angles = np.arange(sectors + 1) * (2 * math.pi / sectors)

        xy = radius * np.cos(stack_angles)[:, None]
        z = np.broadcast_to(radius * np.sin(stack_angles)[:, None], (stacks + 1, sectors + 1))
        x = xy * np.cos(sector_angles)[None, :]
        y = xy * np.sin(sector_angles)[None, :]

        positions = np.stack([x, y, z], axis=-1).reshape(-1, 3)
        s, t = np.meshgrid(np.arange(sectors + 1) / sectors, np.arange(stacks + 1) / stacks)

        self.vertices = positions.astype(np.float32)
        self.normals = (positions / radius).astype(np.float32)
        self.tex_coords = np.stack([s, t], axis=-1).reshape(-1, 2).astype(np.float32)
        self.indices = np.array(
            [index for triangle in _triangles(sectors, stacks) for index in triangle],
            dtype=np.uint32,
        )
        self.interleaved = np.hstack([self.vertices, self.normals, self.tex_coords]).astype(
            np.float32
        )

    @property
    def vertex_count(self) -> int:
        """Number of distinct vertices in the mesh."""
        return len(self.vertices)

    def index_count(self) -> int:
        """Number of indices in the element buffer."""
        return int(self.indices.size)

    def index_bytes(self) -> int:
        """Size of the element buffer in bytes."""
        return int(self.indices.nbytes)

    def interleaved_bytes(self) -> int:
        """Size of the interleaved vertex buffer in bytes."""
        return int(self.interleaved.nbytes)

    def __repr__(self) -> str:
        return (
            f"Sphere(radius={self.radius}, sector_count={self.sector_count}, "
            f"stack_count={self.stack_count})"
        )