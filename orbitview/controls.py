"""Keyboard, mouse and frame-rate state for the interactive viewer."""

from __future__ import annotations

from collections.abc import Collection

from .camera import Camera, Movement

MOVE_SCALE = 10.0
"""Keyboard movement runs this many times faster than the camera's base speed."""

MOVEMENT_KEYS = {
    "w": Movement.FORWARD,
    "s": Movement.BACKWARD,
    "a": Movement.LEFT,
    "d": Movement.RIGHT,
    "q": Movement.DOWN,
    "e": Movement.UP,
}

CLOSE_KEY = "escape"


class FrameCounter:
    """Counts frames and reports the count once per elapsed second."""

    def __init__(self, start: float = 0.0):
        self.last_time = float(start)
        self.frames = 0

    def tick(self, now: float) -> int | None:
        """Record a frame drawn at ``now``; return the frame count when a second has passed."""
        self.frames += 1
        if now - self.last_time < 1.0:
            return None
        count = self.frames
        self.frames = 0
        self.last_time += 1.0
        return count


class Toggle:
    """A flag that flips once per key press, however long the key is held."""

    def __init__(self, value: bool = False):
        self.value = bool(value)
        self.held = False

    def update(self, pressed: bool) -> bool:
        """Feed the current key state and return the flag's value."""
        if pressed and not self.held:
            self.value = not self.value
            self.held = True
        if not pressed:
            self.held = False
        return self.value

    def __bool__(self) -> bool:
        return self.value


class MouseTracker:
    """Turns absolute cursor positions into offsets since the previous position."""

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self.last_x = float(x)
        self.last_y = float(y)
        self.first = True

    def move(self, xpos: float, ypos: float) -> tuple[float, float]:
        """Return the (x, y) offset of the cursor; y grows as the cursor moves up the screen."""
        if self.first:
            self.last_x, self.last_y = xpos, ypos
            self.first = False
        xoffset = xpos - self.last_x
        yoffset = self.last_y - ypos
        self.last_x, self.last_y = xpos, ypos
        return xoffset, yoffset


class Controls:
    """Applies the state of the keyboard to a camera and the viewer's switches."""

    def __init__(self, camera: Camera):
        self.camera = camera
        self.toggles = {
            "b": Toggle(False),  # Blinn-Phong lighting
            "i": Toggle(True),  # sun rotation
            "o": Toggle(True),  # directional light
            "p": Toggle(False),  # point light
            "n": Toggle(False),  # normal mapping
        }

    @property
    def blinn(self) -> bool:
        return self.toggles["b"].value

    @property
    def sun_rotate(self) -> bool:
        return self.toggles["i"].value

    @property
    def dir_light(self) -> bool:
        return self.toggles["o"].value

    @property
    def point_light(self) -> bool:
        return self.toggles["p"].value

    @property
    def normal_mapping(self) -> bool:
        return self.toggles["n"].value

    def apply(self, pressed_keys: Collection[str], delta_time: float) -> bool:
        """Process the keys held down this frame; return True if the viewer should close."""
        keys = {key.lower() for key in pressed_keys}
        for key, direction in MOVEMENT_KEYS.items():
            if key in keys:
                self.camera.process_keyboard(direction, delta_time * MOVE_SCALE)
        for key, toggle in self.toggles.items():
            toggle.update(key in keys)
        return CLOSE_KEY in keys