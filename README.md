# orbitview

An interactive OpenGL scene that shows a textured Earth inside a
translucent atmosphere. A sun circles the Earth and lights it, and a
skybox sits behind everything. You fly the camera with the keyboard and
the mouse.

## Installation

```
pip install .
```

You need OpenGL 3.2 core profile or newer.

## Running

Run the command from a directory that holds the shader and texture assets:

```
orbitview
orbitview --width 1920 --height 1080
```

`--width` and `--height` set the window size. Both must be positive
integers. The defaults are 1280 and 720.

The command looks for these files, relative to the current directory:

```
Shader/earth_vs.glsl   Shader/earth_fs.glsl
Shader/sun_vs.glsl     Shader/sun_fs.glsl
Shader/atmos_vs.glsl   Shader/atmos_fs.glsl
Shader/sky_vs.glsl     Shader/sky_fs.glsl
Texture/Albedo.jpg
Texture/earth_nightmap.jpg
Texture/heightmap.jpg
Texture/earth_normalmap.png
Texture/EarthSpec.png
Texture/skybox/right.png  left.png  top.png  bottom.png  front.png  back.png
```

If a shader cannot be read, compiled or linked, or if an image cannot be
loaded, the command prints the error to standard error and exits with
status 1. While the scene runs, the frame rate is printed to standard
output once a second (`FPS <n>`).

## Controls

| Input        | Action                                        |
|--------------|-----------------------------------------------|
| W / S        | move forward / backward                       |
| A / D        | strafe left / right                           |
| E / Q        | move up / down                                |
| mouse        | look around (the pointer is captured)         |
| scroll wheel | zoom (field of view from 1 to 45 degrees)     |
| I            | stop or resume the sun's orbit                |
| B, O, P, N   | flip the Blinn, directional-light, point-light and normal-mapping switches |
| Esc          | quit                                          |

While the orbit is stopped, the sun stays where it was. The orbit angle
keeps advancing in the meantime, so when you resume, the sun jumps to
where the orbit has reached.

## What it does not do

- The package ships no shaders and no textures. You supply them in the
  layout shown above.
- The B, O, P and N switches are tracked in `Controls`
  (`blinn`, `dir_light`, `point_light`, `normal_mapping`). They are never
  sent to the shaders, so flipping them changes nothing on screen.

## As a library

The geometry, camera, input and matrix code runs without a window:

```python
from orbitview.sphere import Sphere
from orbitview.camera import Camera, Movement
from orbitview.controls import Controls

earth = Sphere(30.0, 36, 18)
print(earth.index_count(), earth.index_bytes(), earth.interleaved_bytes())

camera = Camera((0.0, 0.0, 50.0), (0.0, 1.0, 0.0), -90.0, 0.0)
camera.process_keyboard(Movement.FORWARD, 0.5)
camera.process_mouse_movement(10.0, -5.0, True)
camera.process_mouse_scroll(5.0)
view = camera.view_matrix()

controls = Controls(camera)
should_close = controls.apply({"w", "i"}, 0.016)
```

The other modules:

- `orbitview.sphere`: `Sphere` builds a UV sphere. It holds the vertex,
  normal, texture-coordinate and index arrays, plus `interleaved`, which
  packs position, normal and UV into 32 bytes per vertex.
- `orbitview.transforms`: 4x4 matrix helpers in OpenGL's column-vector
  convention, with angles in radians: `identity`, `translate`, `rotate`,
  `perspective`, `look_at` and `normalize`.
- `orbitview.controls`:
  - `FrameCounter` reports the frame count once per second.
  - `Toggle` is a flag that flips once per key press.
  - `MouseTracker` turns cursor positions into offsets.
  - `Controls` applies held keys to a camera and to the switches.
- `orbitview.scene`:
  - `SunOrbit` gives the sun's model matrix and position.
  - `earth_model` and `sky_view` give the Earth and sky matrices.
  - The module also holds the scene's radii and the skybox cube vertices.
- `orbitview.shader`: `read_shader_sources` reads GLSL files. `Shader`
  compiles them into a program and sets uniforms. It raises
  `ShaderError` when reading, compiling or linking fails.
- `orbitview.textures`: `load_image` decodes an image file. It raises
  `TextureError` when decoding fails. `load_texture` and `load_cubemap`
  upload images to the current GL context.
- `orbitview.app`: `PlanetWindow` and `main` run the viewer.

## Tests

```
pip install .[test]
pytest
```