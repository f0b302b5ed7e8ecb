"""GLSL shader programs and their uniforms."""

from __future__ import annotations

from collections.abc import Sequence
from os import PathLike
from pathlib import Path

import numpy as np

StrPath = str | PathLike


class ShaderError(Exception):
    """Raised when shader sources cannot be read, compiled or linked."""


def _read(path: StrPath) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as err:
        raise ShaderError(f"shader file not successfully read: {path}") from err


def read_shader_sources(
    vertex_path: StrPath, fragment_path: StrPath, geometry_path: StrPath | None = None
) -> tuple[str, str, str | None]:
    """Read the vertex, fragment and optional geometry shader sources."""
    vertex = _read(vertex_path)
    fragment = _read(fragment_path)
    geometry = _read(geometry_path) if geometry_path is not None else None
    return vertex, fragment, geometry


def _vector_value(size: int, args: Sequence) -> tuple[float, ...]:
    """Accept either one vector or ``size`` scalars and return them as floats."""
    if len(args) == 1:
        values = np.asarray(args[0], dtype=np.float64).ravel()
    else:
        values = np.asarray(args, dtype=np.float64)
    if values.size != size:
        raise ValueError(f"expected {size} components, got {values.size}")
    return tuple(float(v) for v in values)


def _matrix_value(size: int, matrix) -> tuple[float, ...]:
    """Return a square matrix flattened in column-major order."""
    m = np.asarray(matrix, dtype=np.float64)
    if m.shape != (size, size):
        raise ValueError(f"expected a {size}x{size} matrix, got shape {m.shape}")
    return tuple(float(v) for v in m.ravel(order="F"))


class Shader:
    """A linked shader program built from source files."""

    def __init__(
        self,
        vertex_path: StrPath,
        fragment_path: StrPath,
        geometry_path: StrPath | None = None,
    ):
        vertex, fragment, geometry = read_shader_sources(vertex_path, fragment_path, geometry_path)

        from pyglet.graphics import shader as glshader

        stages = [(vertex, "vertex"), (fragment, "fragment")]
        if geometry is not None:
            stages.append((geometry, "geometry"))
        try:
            compiled = [glshader.Shader(source, kind) for source, kind in stages]
            self.program = glshader.ShaderProgram(*compiled)
        except glshader.ShaderException as err:
            raise ShaderError(str(err)) from err

    @property
    def id(self) -> int:
        return self.program.id

    def use(self) -> None:
        """Make this program the active one."""
        self.program.use()

    def _set(self, name: str, value) -> None:
        from pyglet.graphics.shader import ShaderException

        try:
            self.program[name] = value
        except (KeyError, ShaderException):
            # Uniforms that are absent or optimised away are silently ignored, as in GL.
            pass

    def set_bool(self, name: str, value: bool) -> None:
        self._set(name, int(bool(value)))

    def set_int(self, name: str, value: int) -> None:
        self._set(name, int(value))

    def set_float(self, name: str, value: float) -> None:
        self._set(name, float(value))

    def set_vec2(self, name: str, *args) -> None:
        self._set(name, _vector_value(2, args))

    def set_vec3(self, name: str, *args) -> None:
        self._set(name, _vector_value(3, args))

    def set_vec4(self, name: str, *args) -> None:
        self._set(name, _vector_value(4, args))

    def set_mat2(self, name: str, matrix) -> None:
        self._set(name, _matrix_value(2, matrix))

    def set_mat3(self, name: str, matrix) -> None:
        self._set(name, _matrix_value(3, matrix))

    def set_mat4(self, name: str, matrix) -> None:
        self._set(name, _matrix_value(4, matrix))