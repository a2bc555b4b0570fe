# cgengine

The mathematics behind a small scene-graph 3D engine. It needs no window and
no graphics context. It covers:

- `cgengine.bounding`: bounding spheres. `BoundingSphere.from_vertices` builds
  a sphere around a set of points. `BoundingSphere.transformed` applies a 4x4
  matrix and grows the radius by the largest axis scale. `enclose_spheres`
  builds one sphere, centred on the mean of the centres, that contains every
  sphere it is given.
- `cgengine.camera`: perspective cameras with view-frustum culling
  (`Camera.is_in_frustum`). There are fixed, orbital, free and third-person
  cameras (`Camera`, `OrbitalCamera`, `FreeCamera`, `ThirdPersonCamera`).
  `plane_equation` computes a plane from three points. `create_camera` builds a
  camera from the type names `"orbital"`, `"free"` or `"thirdperson"`, with the
  field of view given in degrees.
- `cgengine.transforms`: static translations, rotations and scales
  (`Translation`, `Rotation`, `Scale`). Animated rotations
  (`AnimatedRotation`) make one full turn per period. Animated translations
  (`AnimatedTranslation`) follow a closed Catmull-Rom curve, can turn along
  it, and `path()` returns sample points of it. `TRSTransform` combines up to
  three transforms of distinct kinds. `rotation_matrix` builds an axis-angle
  rotation matrix.
- `cgengine.lights`: point, directional and spot lights (`PointLight`,
  `DirectionalLight`, `Spotlight`). `create_light` builds one by type name,
  with the spot cutoff given in degrees.
- `cgengine.material`: Phong material colours and shininess (`Material`).
- `cgengine.controller`: keyboard-driven camera motion. `CameraController` is
  driven by `Key` and `KeyAction` values, and it applies motion in proportion
  to how long each key is held. `FPSCounter` is a frames-per-second counter.
- `cgengine.shading`: GLSL source for the shaded and solid-colour programs.
  `fragment_shader_source` builds the shaded fragment shader for given light
  counts. `light_uniforms` packs lights into a `LightUniforms` record and
  raises `ValueError` when the counts do not match.
- `cgengine.picking`: `id_to_color` encodes an entity id as a colour for mouse
  picking, and `color_to_id` decodes an RGB pixel back into the id.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from cgengine.bounding import BoundingSphere
from cgengine.camera import create_camera

camera = create_camera("orbital", (0, 0, 10), (0, 0, 0), (0, 1, 0), 60.0, 1.0, 1000.0)
camera.set_window_size(640, 480)

sphere = BoundingSphere.from_vertices([(1, 0, 0, 1), (-1, 0, 0, 1)])
print(camera.is_in_frustum(sphere))  # True
```

Entity ids round-trip through picking colours:

```python
from cgengine.picking import id_to_color, color_to_id

rgba = id_to_color(42)
pixel = tuple(round(c * 255) for c in rgba[:3])
assert color_to_id(pixel) == 42
```

## What it does not do

This is a library of computations only.

- It opens no window.
- It makes no OpenGL calls. It does not compile the shader sources it
  generates and does not upload data to the GPU.
- It does not read scene description files.
- It does not load mesh or texture files.
- It provides no command-line program.

The caller must supply all of these, passing in positions, matrices, key
events and times.