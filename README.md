# planetview

planetview is the non-drawing half of a small 3D viewer that shows two
rotating planets. It provides:

- vector maths
- a fly-through camera
- a Wavefront OBJ reader
- texture loading
- the scene description a renderer needs each frame

Requires Python 3.10 or later, with `numpy` and `pillow`.

## What it does not do

Nothing in the package opens a window, reads a real keyboard or mouse,
compiles shaders or talks to a GPU. It has no command to run. You feed
it input and hand its matrices, meshes and pixel data to whatever
renderer you use.

## Vector maths

`planetview.vecmath` works on numpy float arrays.

- `vec3(x, y, z)` builds a 3-vector.
- `length`, `normalize`, `dot` and `cross` do what their names say.
- Normalising a zero vector gives back a zero vector and does not raise.

Matrices are 4x4 arrays indexed `[row, column]`. They act on column
vectors.

- `look_at(position, target, world_up)` builds a view matrix.
- `translate`, `scale` and `rotate` multiply a given matrix on the right.
  `scale` also accepts a single number. `rotate` takes radians.
- `perspective(fovy, aspect, near, far)` builds a right-handed projection
  with depth mapped to [-1, 1]. It raises `ValueError` for a zero aspect
  ratio or for equal near and far planes.

```python
import numpy as np
from planetview.vecmath import vec3, look_at, translate, scale, rotate, perspective

eye = vec3(0.0, 1.0, 15.0)
view = look_at(eye, vec3(0.0, 1.0, 14.0), vec3(0.0, 1.0, 0.0))

model = translate(np.identity(4), vec3(-3.0, 0.0, 0.0))
model = scale(model, 1.5)
model = rotate(model, 0.5, vec3(0.0, 1.0, 0.0))

proj = perspective(np.radians(45.0), 1024 / 768, 0.1, 200.0)
clip_from_model = proj @ view @ model
```

## Camera

`planetview.camera.Camera` is a yaw/pitch fly-through camera.

Its defaults:

| Setting | Default |
| --- | --- |
| position | the origin |
| world up | +Y |
| yaw | -90° |
| pitch | 0° |
| movement speed | 2.5 units per second |
| mouse sensitivity | 0.1 |
| zoom (field of view) | 45° |

With those defaults it looks down the negative Z axis.

```python
from planetview.camera import Camera, Movement
from planetview.vecmath import vec3

camera = Camera(vec3(0.0, 1.0, 15.0), vec3(0.0, 1.0, 0.0), -90.0, 0.0)
camera.process_keyboard(Movement.FORWARD, 0.016)
camera.process_mouse_movement(12.0, -4.0, True)  # pitch is held within ±89°
camera.process_mouse_scroll(2.0)                 # zoom is held within 1°–60°
view = camera.view_matrix()
```

`Movement` has the members `FORWARD`, `BACKWARD`, `LEFT`, `RIGHT`, `UP`
and `DOWN`. `UP` and `DOWN` move along the world up vector.
`Camera.from_scalars` builds the same camera from eight plain numbers.

## OBJ meshes

`planetview.objfile.parse_obj(text)` reads the text of a triangulated
Wavefront OBJ file.

- It uses `v`, `vt`, `vn` and `f` lines and ignores every other line.
- Each face must start with three corners of the form `v/t/n`. Anything
  after the third corner is ignored.
- It returns a `Mesh` of float32 arrays: `vertices`, `uvs` and `normals`.
  These hold one row per face corner, ready for a non-indexed draw.
- `len(mesh)` gives the number of corners. `mesh.triangle_count` gives
  the number of triangles.

`ObjFormatError` (a `ValueError`) is raised in these cases:

- a face whose corners are not in that form
- a record with too few or malformed numbers
- an index that is out of range

`load_obj(path)` does the same for a file on disk.

```python
from planetview.objfile import load_obj, ObjFormatError

try:
    mesh = load_obj("assets/moon.obj")
except ObjFormatError as exc:
    print(f"export with triangulated faces, UVs and normals: {exc}")
```

## Textures

`planetview.texture.load_texture(path, flip_vertically=True)` reads an
image with Pillow. It returns a frozen `TextureImage` with these fields:

- `width` and `height`
- `format`, a `PixelFormat` of `RED`, `RGB` or `RGBA`
- `pixels`, tightly packed 8-bit data

`as_array()` gives the pixels as a `(height, width, channels)` uint8
array. By default the bottom row comes first.

Images are converted as follows:

- Palette images become RGB, or RGBA when they have transparency.
- 1-bit, 16-bit and float greyscale become 8-bit red-only.

`TextureError` is raised in these cases:

- a file that cannot be opened or decoded
- any other channel count, such as grey plus alpha

## The scene

`planetview.scene` describes what the viewer shows: two textured
planets, one global light and two coloured point lights.

```python
from planetview.scene import build_scene, apply_keys, MouseTracker

scene = build_scene("assets")
scene.update(2.5)                         # spin the planets to t = 2.5 s
uniforms = scene.frame_uniforms(1024, 768)

tracker = MouseTracker(scene.camera)
tracker.move(530.0, 380.0)
tracker.scroll(1.0)
closing = apply_keys(scene.camera, {"w", "space"}, 0.016)
```

### Loading

`build_scene(asset_dir)` loads `moon.obj` twice from `asset_dir`:

- once with `moon_diffuse.png` and `moon_specular.png`, placed at x = -3
- once with `mars_diffuse.png` and `mars_specular.png`, placed at x = 3

The camera starts at `(0, 1, 15)`.

If a mesh cannot be loaded or is empty, that planet is left out and a
warning is logged. If a texture fails, a warning is logged and the
planet is kept without it.

### Per-frame values

`Scene.update(time)` spins each planet at its own speed:

- the first at 0.2 radians per second about +Y
- the second at -0.3 radians per second about `(0, 1, 0.1)`

`Scene.projection(width, height)` builds the projection from the
camera's zoom, with near and far planes at 0.1 and 200.

`Scene.frame_uniforms(width, height)` returns a dict with these keys:

- `view`
- `projection`
- `viewPos`
- `globalLightPos`
- `globalLightColor`
- `pointLightPositions`
- `pointLightColors`
- `objects`, a list with one dict per object. Each holds `model`, `ka`,
  `kd`, `ks`, `Ns`, `samplers` and `vertex_count`. `samplers` maps names
  such as `diffuseMap` to texture units.

### Input

`MouseTracker` turns absolute cursor positions and scroll offsets into
camera movement. The first position it receives only sets the starting
point.

`apply_keys(camera, keys, delta_time)` moves a camera for the keys held
during a frame. It returns `True` if `escape` is among them. The key
bindings are:

| Key | Movement |
| --- | --- |
| `w` | forward |
| `s` | backward |
| `a` | left |
| `d` | right |
| `space` | up |
| `left_shift` | down |

`movements_for_keys(keys)` lists the movements those keys stand for.

### Building blocks

`Scene` uses these, and you can also call them on their own:

- `planet_transform`
- `aspect_ratio`, which returns 1 for a zero height
- `default_lighting`
- `Material`
- `TextureSlot`
- `Model`, whose `add_texture(path, kind)` method attaches an image
- `SceneObject`
- `PointLight`
- `Lighting`