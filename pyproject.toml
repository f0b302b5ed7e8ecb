[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orbitview"
version = "0.1.0"
description = "Interactive OpenGL view of a textured Earth with an atmosphere, an orbiting sun and a skybox"
requires-python = ">=3.10"
keywords = ["opengl", "planet", "earth", "rendering", "skybox", "camera", "sphere"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "numpy",
    "pyglet",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
orbitview = "orbitview.app:main"

[tool.hatch.build.targets.wheel]
packages = ["orbitview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
