# tankwars

Building blocks for a two-player artillery game, kept apart from any
rendering backend. The package covers procedural hilly terrain that
projectiles blow craters into and that slowly slides back into shape. It
also provides the tank body and gun geometry, a smoke particle burst, an
orbiting sun, and the meshes that make up the scene.

Everything that would be drawn is produced as plain data. Meshes are lists
of `Vertex` records with indices and a draw mode, and placement is given by
3×3 homogeneous model matrices built with numpy.

## Modules

- `tankwars.utility` contains:
  - math helpers: `clamp`, `clamp_min`, `clamp_max`, `clamp01`, `lerp` (for scalars or vectors), `sign` and `random_double`;
  - 2D transforms: `translate`, `scale`, `rotate` and `translation_of`;
  - game constants such as tank dimensions, colours and `GRAVITY`;
  - the `Key` codes and the `TankControls` bindings `CONTROLS_LEFT` and `CONTROLS_RIGHT`;
  - the `Projectile`, `Healthbar` and `RenderData` records;
  - `Window`, which holds a resolution and the set of held keys, with `press`, `release` and `key_hold`.
- `tankwars.mesh` contains:
  - `Mesh`, `Vertex` and `DrawMode`;
  - `create_square` and `circle_fan_mesh`.

  `Mesh.init_from_data` raises `ValueError` when an index does not refer to a vertex.
- `tankwars.tank_mesh` contains:
  - `build_tank_mesh`, which builds the body, tracks and round turret;
  - `build_gun_mesh`;
  - `tank_origin` and `gun_origin`.
- `tankwars.terrain` contains `TerrainManager`, together with the `Wave` and `Stats` records. `TerrainManager` builds a height map from randomised sine "bumps" and "hills". It offers:
  - interpolated height and slope lookup through `calculate_height` and `calculate_height_and_angle`;
  - craters through `explode`, and through `collides_with_projectile`, which carves a crater when a shell is below ground;
  - landslides through `level_terrain_region`;
  - live tuning through the `translate_*` methods;
  - a settings snapshot through `stats`.
- `tankwars.effects` contains:
  - `Smoke`, a particle burst. `generate` adds a burst, `update` returns `RenderData` for the living particles, and `clear` removes them.
  - `Sun`, whose `update` returns the sun and three rotating outlines.
- `tankwars.meshes` contains builders for the sky (`background_mesh`), the terrain strip (`terrain_mesh`), shells (`projectile_mesh`), trajectory dots (`trajectory_point_mesh`), health bars (`healthbar_mesh`) and a black full-screen quad (`black_screen_mesh`).

## Example

```python
import numpy as np

from tankwars.terrain import TerrainManager
from tankwars.meshes import terrain_mesh
from tankwars.utility import Projectile, rotate, translate, translation_of

terrain = TerrainManager(640)
terrain.generate_random_height_map()

height, angle = terrain.calculate_height_and_angle(200.0, 1280)

shell = Projectile(position=np.array([200.0, height - 5.0]))
terrain.collides_with_projectile(shell, 1280)   # True, and a crater is carved

mesh = terrain_mesh("terrain", terrain, (1280, 720))

m = translate(100.0, 50.0) @ rotate(0.5) @ translate(10.0, 0.0)
translation_of(m)   # where the local point (10, 0) ends up
```

## Default key bindings

`CONTROLS_LEFT` and `CONTROLS_RIGHT` hold these bindings:

| Action          | Left tank  | Right tank   |
|-----------------|------------|--------------|
| Move left/right | A / D      | Left / Right |
| Gun up/down     | W / S      | Down / Up    |
| Faster          | Left Shift | Right Shift  |
| Fire            | Space      | Enter        |

## What this package does not do

The package has no playable game. It does not include:

- a tank object that moves, aims, fires or takes damage;
- a game scene that runs the update loop, switches between play and terrain editing, or restarts rounds;
- a window, renderer or command to start anything.

What it offers is the terrain, effects, geometry and helpers that such a game would be built from.