"""Interactive window showing the earth, its atmosphere and an orbiting sun."""

from __future__ import annotations

import argparse
import math
import sys
import time
from dataclasses import dataclass
from pathlib import Path

import numpy as np

from .camera import Camera
from .controls import CLOSE_KEY, MOVEMENT_KEYS, Controls, FrameCounter, MouseTracker
from .scene import (
    ATMOSPHERE_RADIUS,
    EARTH_POSITION,
    EARTH_RADIUS,
    MAX_HEIGHT,
    SKY_VERTICES,
    SunOrbit,
    earth_model,
    sky_view,
)
from .shader import Shader, ShaderError
from .sphere import Sphere
from .textures import TextureError, load_cubemap, load_texture
from .transforms import identity, perspective, translate

SCR_WIDTH = 1280
SCR_HEIGHT = 720
TITLE = "Lights"
NEAR = 0.1
FAR = 100.0
CAMERA_START = (0.0, 0.0, 50.0)
SHININESS = 50.0
WHITE = (1.0, 1.0, 1.0, 1.0)
BLACK = (0.0, 0.0, 0.0, 0.0)

SHADER_DIR = Path("Shader")
TEXTURE_DIR = Path("Texture")
EARTH_TEXTURES = (
    ("diffuseSampler", TEXTURE_DIR / "Albedo.jpg"),
    ("nightSampler", TEXTURE_DIR / "earth_nightmap.jpg"),
    ("bumpSampler", TEXTURE_DIR / "heightmap.jpg"),
    ("normalSampler", TEXTURE_DIR / "earth_normalmap.png"),
    ("specularSampler", TEXTURE_DIR / "EarthSpec.png"),
)
SKYBOX_FACES = tuple(
    TEXTURE_DIR / "skybox" / f"{face}.png"
    for face in ("right", "left", "top", "bottom", "front", "back")
)


@dataclass(frozen=True)
class _Mesh:
    vao: int
    count: int


def _shader(name: str) -> Shader:
    return Shader(SHADER_DIR / f"{name}_vs.glsl", SHADER_DIR / f"{name}_fs.glsl")


def _buffer(gl, target: int, array: np.ndarray) -> int:
    buffer_id = gl.GLuint()
    gl.glGenBuffers(1, buffer_id)
    gl.glBindBuffer(target, buffer_id)
    gl.glBufferData(target, array.nbytes, array.ctypes.data, gl.GL_STATIC_DRAW)
    return buffer_id.value


def _vertex_array(gl, vertices, attributes, indices=None) -> int:
    """Upload interleaved float vertices; ``attributes`` are (location, size, float offset)."""
    vao = gl.GLuint()
    gl.glGenVertexArrays(1, vao)
    gl.glBindVertexArray(vao)
    data = np.ascontiguousarray(vertices, dtype=np.float32)
    _buffer(gl, gl.GL_ARRAY_BUFFER, data)
    stride = data.shape[1] * data.itemsize
    for location, size, offset in attributes:
        gl.glEnableVertexAttribArray(location)
        gl.glVertexAttribPointer(
            location, size, gl.GL_FLOAT, gl.GL_FALSE, stride, offset * data.itemsize
        )
    if indices is not None:
        _buffer(gl, gl.GL_ELEMENT_ARRAY_BUFFER, np.ascontiguousarray(indices, dtype=np.uint32))
    return vao.value


def _sphere_mesh(gl, sphere: Sphere, attributes) -> _Mesh:
    vao = _vertex_array(gl, sphere.interleaved, attributes, sphere.indices)
    return _Mesh(vao, sphere.index_count())


class PlanetWindow:
    """Owns the viewer window, its GL resources and the per-frame drawing."""

    def __init__(self, width: int = SCR_WIDTH, height: int = SCR_HEIGHT):
        import pyglet
        from pyglet import gl
        from pyglet.window import key

        self.width = int(width)
        self.height = int(height)
        config = gl.Config(
            major_version=3, minor_version=2, forward_compatible=True,
            double_buffer=True, depth_size=24,
        )
        self.window = pyglet.window.Window(
            self.width, self.height, caption=TITLE, config=config, resizable=True
        )
        try:
            self._setup_gl(gl)
        except Exception:
            self.window.close()
            raise

        self.camera = Camera(position=CAMERA_START)
        self.controls = Controls(self.camera)
        self.mouse = MouseTracker(self.width / 2.0, self.height / 2.0)
        self.sun = SunOrbit()
        self._cursor = [self.width / 2.0, self.height / 2.0]
        start = time.perf_counter()
        self.frames = FrameCounter(start)
        self._last_frame = start

        self._keys = key.KeyStateHandler()
        names = (*MOVEMENT_KEYS, *self.controls.toggles, CLOSE_KEY)
        self._key_symbols = {name: getattr(key, name.upper()) for name in names}
        self.window.set_exclusive_mouse(True)
        self.window.push_handlers(self._keys)
        self.window.push_handlers(self)

    def _setup_gl(self, gl) -> None:
        gl.glClearColor(0.0, 0.0, 0.0, 1.0)
        gl.glClearDepth(1.0)
        gl.glDepthFunc(gl.GL_LESS)
        gl.glEnable(gl.GL_DEPTH_TEST)

        self.earth_shader = _shader("earth")
        self.sun_shader = _shader("sun")
        self.atmosphere_shader = _shader("atmos")
        self.sky_shader = _shader("sky")

        self.earth_textures = [load_texture(path) for _, path in EARTH_TEXTURES]
        self.cubemap = load_cubemap(SKYBOX_FACES)

        self.earth_shader.use()
        for unit, (sampler, _) in enumerate(EARTH_TEXTURES):
            self.earth_shader.set_int(sampler, unit)

        self.sky_vao = _vertex_array(gl, SKY_VERTICES, [(0, 3, 0)])
        self.sun_mesh = _sphere_mesh(gl, Sphere(1.0, 36, 18), [(0, 3, 0)])
        self.earth_mesh = _sphere_mesh(
            gl, Sphere(EARTH_RADIUS, 36, 18), [(0, 3, 0), (1, 3, 3), (2, 2, 6)]
        )
        self.atmosphere_mesh = _sphere_mesh(gl, Sphere(ATMOSPHERE_RADIUS, 36, 18), [(0, 3, 0)])

    def _pressed_keys(self) -> set[str]:
        return {name for name, symbol in self._key_symbols.items() if self._keys[symbol]}

    @staticmethod
    def _draw(gl, mesh: _Mesh) -> None:
        gl.glBindVertexArray(mesh.vao)
        gl.glDrawElements(gl.GL_TRIANGLES, mesh.count, gl.GL_UNSIGNED_INT, None)

    def on_draw(self) -> None:
        """Advance the scene by one frame and draw it."""
        import pyglet
        from pyglet import gl

        now = time.perf_counter()
        delta_time = now - self._last_frame
        self._last_frame = now
        fps = self.frames.tick(now)
        if fps is not None:
            print(f"FPS {fps}")

        if self.controls.apply(self._pressed_keys(), delta_time):
            pyglet.app.exit()
            return

        gl.glClearColor(0.1, 0.1, 0.1, 1.0)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT | gl.GL_STENCIL_BUFFER_BIT)

        projection = perspective(
            math.radians(self.camera.zoom), self.width / self.height, NEAR, FAR
        )
        view = self.camera.view_matrix()

        self.sun_shader.use()
        sun_model = self.sun.advance(delta_time, self.controls.sun_rotate)
        self.sun_shader.set_mat4("model", sun_model)
        self.sun_shader.set_mat4("projection", projection)
        self.sun_shader.set_mat4("view", view)
        self._draw(gl, self.sun_mesh)

        eye = (*self.camera.position, 1.0)
        self.earth_shader.use()
        self.earth_shader.set_mat4("model", earth_model(EARTH_POSITION))
        self.earth_shader.set_mat4("projection", projection)
        self.earth_shader.set_mat4("view", view)
        self.earth_shader.set_vec4("EyePosW", eye)
        self.earth_shader.set_vec4("LightPosW", self.sun.position)
        self.earth_shader.set_vec4("LightColor", WHITE)
        self.earth_shader.set_vec4("MaterialEmissive", BLACK)
        self.earth_shader.set_vec4("MaterialDiffuse", WHITE)
        self.earth_shader.set_float("MaterialShininess", SHININESS)
        self.earth_shader.set_float("maxHeight", MAX_HEIGHT)
        for unit, texture in enumerate(self.earth_textures):
            gl.glActiveTexture(gl.GL_TEXTURE0 + unit)
            gl.glBindTexture(gl.GL_TEXTURE_2D, texture)
        self._draw(gl, self.earth_mesh)

        gl.glEnable(gl.GL_BLEND)
        gl.glBlendFunc(gl.GL_SRC_ALPHA, gl.GL_ONE_MINUS_SRC_ALPHA)
        self.atmosphere_shader.use()
        self.atmosphere_shader.set_mat4("model", translate(identity(), EARTH_POSITION[:3]))
        self.atmosphere_shader.set_mat4("projection", projection)
        self.atmosphere_shader.set_mat4("view", view)
        self.atmosphere_shader.set_vec4("EyePosW", eye)
        self.atmosphere_shader.set_vec4("LightPosW", self.sun.position)
        self.atmosphere_shader.set_float("inner_radius", EARTH_RADIUS)
        self.atmosphere_shader.set_float("outer_radius", ATMOSPHERE_RADIUS)
        self._draw(gl, self.atmosphere_mesh)
        gl.glDisable(gl.GL_BLEND)

        gl.glDepthFunc(gl.GL_LEQUAL)
        self.sky_shader.use()
        self.sky_shader.set_mat4("view", sky_view(view))
        self.sky_shader.set_mat4("projection", projection)
        gl.glBindVertexArray(self.sky_vao)
        gl.glActiveTexture(gl.GL_TEXTURE0)
        gl.glBindTexture(gl.GL_TEXTURE_CUBE_MAP, self.cubemap)
        gl.glDrawArrays(gl.GL_TRIANGLES, 0, len(SKY_VERTICES))
        gl.glBindVertexArray(0)
        gl.glDepthFunc(gl.GL_LESS)

    def on_mouse_motion(self, x, y, dx, dy) -> None:
        """Turn the camera by the relative motion of the captured mouse."""
        # Track a virtual cursor with y growing downwards, as screen coordinates do.
        self._cursor[0] += dx
        self._cursor[1] -= dy
        xoffset, yoffset = self.mouse.move(*self._cursor)
        self.camera.process_mouse_movement(xoffset, yoffset)

    def on_mouse_scroll(self, x, y, scroll_x, scroll_y) -> None:
        """Zoom the camera with the vertical scroll wheel."""
        self.camera.process_mouse_scroll(scroll_y)

    def on_resize(self, width, height):
        """Fit the viewport to the window's framebuffer."""
        import pyglet
        from pyglet import gl

        framebuffer_width, framebuffer_height = self.window.get_framebuffer_size()
        gl.glViewport(0, 0, framebuffer_width, framebuffer_height)
        return pyglet.event.EVENT_HANDLED


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return value


def parse_args(argv=None) -> argparse.Namespace:
    """Parse the viewer's command-line options."""
    parser = argparse.ArgumentParser(
        prog="orbitview",
        description="Show the earth with its atmosphere, lit by an orbiting sun.",
    )
    parser.add_argument("--width", type=_positive_int, default=SCR_WIDTH, help="window width")
    parser.add_argument("--height", type=_positive_int, default=SCR_HEIGHT, help="window height")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Open the viewer and run it until the window is closed."""
    args = parse_args(argv)

    import pyglet

    try:
        viewer = PlanetWindow(args.width, args.height)
    except (ShaderError, TextureError, pyglet.window.NoSuchConfigException) as err:
        print(err, file=sys.stderr)
        return 1
    pyglet.app.run()
    viewer.window.close()
    return 0