# fractalterrain

Procedural terrain from the diamond-square algorithm. The package does these jobs:

- it generates and smooths square height maps;
- it turns a height map into a triangle mesh;
- it colours the triangles by soil band and works out their normals;
- it builds flat vertex, colour and normal buffers;
- it provides the matrices for a free-flying camera;
- it loads a sky texture and describes the cube it goes on;
- it keeps a scene object that holds all of these together.

## Installation

```
pip install fractalterrain
```

The package depends on numpy and Pillow.

## Height maps (`fractalterrain.heightmap`)

```python
import random
from fractalterrain.heightmap import DiamondSquare, SmoothLevel, smooth

rng = random.Random(42)
generator = DiamondSquare(257, 600.0, 2.0, SmoothLevel.HARD, rng)
heights = generator.heightmap(0.0)   # 257 x 257 list of lists
```

- The size must be `2**n + 1`. Any other size, or a `divisor` of zero, raises `ValueError`.
- Each corner starts at a random fraction of `seed`.
- `spread` sets the random range added to each midpoint. It is divided by `divisor` after every pass.
- `rng` can be any object whose `random()` method returns floats in `[0, 1)`. If you leave it out, a fresh `random.Random()` is used.

`smooth(heightmap, level)` returns a smoothed copy of a height map:

- The border stays as it is.
- Interior points are replaced in row order, so later points see values that have already been smoothed.
- `SmoothLevel.MEDIUM` averages the four edge neighbours.
- `SmoothLevel.HARD` averages eight values: the four edge neighbours, plus the `(-1, -1)` and `(+1, +1)` diagonals counted twice each.
- `SmoothLevel.OFF` returns an unchanged copy.

## Triangles (`fractalterrain.triangle`)

`Triangle(a, b, c)` holds three 3D points as numpy arrays and an RGB `color`.

- `normal()` returns the unit normal of `(b - a) x (c - a)`. For a degenerate triangle the result is NaN.
- `recalc_color()` shades the triangle grey by how much it faces upward.
- `set_water`, `set_beach`, `set_forest`, `set_mountain` and `set_glacier` each set a base colour. Each channel gets a random tint of up to 0.1. Each of these methods takes an optional `rng`.

## Terrain meshes (`fractalterrain.terrain`)

```python
from fractalterrain.terrain import SoilType, Terrain, build_triangles, height_levels

levels = height_levels(heights, 0.3)   # lowest 30% of the height range is water
terrain = Terrain(heights, 5.0, rng)   # 5 units between grid points
terrain.setup_colors(levels)

print(levels[SoilType.WATER])
print(len(terrain.triangles))          # 2 per grid cell
print(terrain.vertex_buffer.shape)     # (3 * triangles, 3)
```

`height_levels(heightmap, water_percent)` returns the upper height of each `SoilType`:

- `WATER` is the lowest point plus `water_percent` of the height range.
- `STEPPE` adds a further 10% of the range.
- `FOREST` adds a further 30%.
- `MOUNTAIN` adds a further 20%.
- `GLACIER` is the highest point.

It raises `ValueError` when `water_percent` is outside `[0, 1]` or the map is empty.

`build_triangles(heightmap, length)` makes two triangles for every grid cell and shades each one by its slope. Grid point (row `j`, column `i`) sits at `x = i * length`, `z = j * length`.

`Terrain` has three buffers: `vertex_buffer`, `color_buffer` and `normal_buffer`.

- `setup_colors(levels)` colours each triangle by the band its first corner falls in, then rebuilds the buffers.
- `reset_buffers()` rebuilds the buffers after you change triangles yourself.

## Camera (`fractalterrain.camera`)

```python
from fractalterrain.camera import Camera, Movement, look_at, perspective

camera = Camera(perspective(80.0, 4 / 3, 0.3, 1700.0), (0.0, 0.0, 0.0), 0.0, 0.0)
view = camera.view_matrix(16.0, 0.0, 0.0, {Movement.FORWARD})
```

- `perspective(fovy, aspect, near, far)` builds a 4x4 projection matrix. `fovy` is in degrees.
- `look_at(eye, center, up)` builds a view matrix.
- Each call to `Camera.view_matrix(delta_time_ms, mouse_dx, mouse_dy, pressed)` turns the camera by 0.0005 radians per unit of mouse movement.
- It then moves the camera at 150 units per second for each `Movement` in `pressed`: `FORWARD`, `BACKWARD`, `LEFT` or `RIGHT`.
- Finally it returns the new view matrix.

## Skybox (`fractalterrain.skybox`)

`Skybox(path)` loads an image as RGB pixels with Pillow. The pixels are in `data`, and the size is in `width` and `height`. A file that cannot be read raises `SkyboxLoadError`.

`skybox_faces()` returns the six `SkyboxFace` quads of the unit cube. `Skybox.faces()` returns the same list. The quads are mapped onto a horizontal-cross texture. `SkyboxFace.corners()` pairs each texture coordinate with its vertex.

## Scene (`fractalterrain.scene`)

```python
import random
from fractalterrain.scene import Scene, TerrainParams

scene = Scene(TerrainParams(size_n=6, spread=300.0), random.Random(1))
scene.params.length = 2.0
scene.regenerate()
water = scene.water_triangles()
model = scene.model_matrix()
```

`TerrainParams` holds the generation settings, with these defaults:

| Setting | Default |
| --- | --- |
| `size_n` | 8 |
| `spread` | 600 |
| `divisor` | 2 |
| `smooth_level` | `HARD` |
| `seed` | 0 |
| `water_percent` | 0.3 |
| `length` | 5 |

It derives `grid_size` (`2**size_n + 1`) and `extent` (`grid_size * length`).

`Scene` generates a terrain when you create it, and again on every call to `regenerate()`. It also holds the display settings: wireframe, lighting, light colours and position, water colour, scale and water level.

- `water_triangles()` gives two triangles covering the landscape, drawn 10 units above the water level. The module function `water_triangles(extent, level)` does the same for any extent.
- `model_matrix()` is the 4x4 scaling matrix built from `scale`.

## What the package does not do

The package opens no window and draws nothing. It has no on-screen menu and no command-line program. It reads no keyboard or mouse input of its own. Its buffers, matrices and face lists are meant to be handed to a renderer of your choice.