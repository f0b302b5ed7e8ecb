"""Image loading and upload of 2D and cube-map textures."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from os import PathLike

from PIL import Image as PILImage

StrPath = str | PathLike

CUBE_FACES = 6
_CHANNELS = {"L": 1, "LA": 2, "RGB": 3, "RGBA": 4}


class TextureError(Exception):
    """Raised when an image file cannot be loaded."""


@dataclass(frozen=True)
class Image:
    """Decoded pixel data, rows from the top of the image down."""

    width: int
    height: int
    channels: int
    pixels: bytes

    def rgb(self) -> bytes:
        """Return the pixels as tightly packed 8-bit RGB."""
        if self.channels == 3:
            return self.pixels
        mode = next(m for m, n in _CHANNELS.items() if n == self.channels)
        image = PILImage.frombytes(mode, (self.width, self.height), self.pixels)
        return image.convert("RGB").tobytes()


def load_image(path: StrPath) -> Image:
    """Decode an image file, keeping its own number of channels."""
    try:
        with PILImage.open(path) as source:
            source.load()
            image = source
            if image.mode not in _CHANNELS:
                has_alpha = "A" in image.getbands() or "transparency" in image.info
                image = image.convert("RGBA" if has_alpha else "RGB")
            return Image(image.width, image.height, _CHANNELS[image.mode], image.tobytes())
    except OSError as err:
        raise TextureError(f"failed to load texture: {path}") from err


def _generate_texture(gl, target: int) -> int:
    texture_id = gl.GLuint()
    gl.glGenTextures(1, texture_id)
    gl.glBindTexture(target, texture_id)
    gl.glPixelStorei(gl.GL_UNPACK_ALIGNMENT, 1)
    return texture_id.value


def _upload(gl, target: int, image: Image) -> None:
    gl.glTexImage2D(
        target, 0, gl.GL_RGB, image.width, image.height, 0,
        gl.GL_RGB, gl.GL_UNSIGNED_BYTE, image.rgb(),
    )


def load_texture(path: StrPath) -> int:
    """Load an image into a repeating, linearly filtered, mipmapped 2D texture."""
    image = load_image(path)

    from pyglet import gl

    texture_id = _generate_texture(gl, gl.GL_TEXTURE_2D)
    gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_S, gl.GL_REPEAT)
    gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_T, gl.GL_REPEAT)
    gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MIN_FILTER, gl.GL_LINEAR)
    gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MAG_FILTER, gl.GL_LINEAR)
    _upload(gl, gl.GL_TEXTURE_2D, image)
    gl.glGenerateMipmap(gl.GL_TEXTURE_2D)
    return texture_id


def load_cubemap(faces: Sequence[StrPath]) -> int:
    """Load six images (+X, -X, +Y, -Y, +Z, -Z) into a cube-map texture."""
    if len(faces) != CUBE_FACES:
        raise ValueError(f"a cube map needs {CUBE_FACES} faces, got {len(faces)}")
    images = [load_image(face) for face in faces]

    from pyglet import gl

    texture_id = _generate_texture(gl, gl.GL_TEXTURE_CUBE_MAP)
    for offset, image in enumerate(images):
        _upload(gl, gl.GL_TEXTURE_CUBE_MAP_POSITIVE_X + offset, image)
    target = gl.GL_TEXTURE_CUBE_MAP
    gl.glTexParameteri(target, gl.GL_TEXTURE_MIN_FILTER, gl.GL_LINEAR)
    gl.glTexParameteri(target, gl.GL_TEXTURE_MAG_FILTER, gl.GL_LINEAR)
    gl.glTexParameteri(target, gl.GL_TEXTURE_WRAP_S, gl.GL_CLAMP_TO_EDGE)
    gl.glTexParameteri(target, gl.GL_TEXTURE_WRAP_T, gl.GL_CLAMP_TO_EDGE)
    gl.glTexParameteri(target, gl.GL_TEXTURE_WRAP_R, gl.GL_CLAMP_TO_EDGE)
    return texture_id