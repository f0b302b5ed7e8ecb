"""Interactive OpenGL view of the Earth, its atmosphere and an orbiting sun, with the sphere, camera and matrix code it is built on."""

__version__ = "0.1.0"