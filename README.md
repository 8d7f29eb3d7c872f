# atomregion

Geometric volumes and simulation-region bookkeeping for atom simulations.

`atomregion` provides three shapes (`Sphere`, `Cuboid`, `Cylinder`). Each can
test whether a point lies inside it and draw random points on its surface.
Alongside them is a `SimulationRegion`, which works out which atoms have left
the simulation bounds and should be removed.

## Installation

```
pip install atomregion
```

## Shapes

The module `atomregion.shapes` defines two abstract bases:

- `Volume` declares `contains(volume_position, entity_position)`.
- `Surface` declares `random_surface_point(surface_position, rng=None)`.

`Sphere`, `Cuboid` and `Cylinder` implement both.

Positions are length-3 sequences or NumPy arrays. Anything of another shape
raises `ValueError`. `rng` is a `numpy.random.Generator`; if it is omitted, a
fresh default generator is used.

```python
import numpy as np
from atomregion.shapes import Sphere, Cuboid, Cylinder

sphere = Sphere(radius=1.0)
sphere.contains(np.zeros(3), np.array([0.5, 0.0, 0.0]))   # True

box = Cuboid(half_width=np.array([0.2, 0.3, 0.1]))
box.contains(np.zeros(3), np.array([0.0, 0.5, 0.0]))      # False

tube = Cylinder(radius=0.5, length=2.0, direction=np.array([0.0, 0.0, 1.0]))
point, normal = tube.random_surface_point(np.zeros(3), np.random.default_rng())
```

- **`Sphere(radius)`** contains points whose distance from the centre is
  strictly less than `radius`.
- **`Cuboid(half_width)`** is axis-aligned. `half_width` runs from the centre to
  the (1, 1, 1) vertex. A point is inside when every coordinate offset is
  strictly below the matching half-width.
- **`Cylinder(radius, length, direction)`** normalises `direction`; a zero
  direction raises `ValueError`. A point is inside when both of these hold:
  - its axial offset is at most `length / 2`;
  - its distance from the axis is strictly less than `radius`.

  The cylinder also exposes two vectors perpendicular to its axis, `perp_x` and
  `perp_y`.

`random_surface_point` returns a pair `(point, normal)`. The normal points out
of the shape:

- **`Sphere`** draws the polar angle and the azimuth uniformly.
- **`Cuboid`** picks one of its six faces at random.
- **`Cylinder`** chooses between the end caps and the sleeve. It picks the end
  caps with probability `radius / (length + radius)`.

## Simulation regions

The module `atomregion.sim_region` builds on these shapes. A `SimulationVolume`
pairs a shape with a position and a `VolumeType`:

- `VolumeType.INCLUSIVE` (the default): atoms inside the volume are accepted.
- `VolumeType.EXCLUSIVE`: atoms inside the volume are rejected.

Each tracked atom has a `RegionTest` whose `result` is a `RegionResult`:

| Result | Meaning |
| --- | --- |
| `UNTESTED` | The atom has not been tested yet. |
| `FAILED` | The atom lay outside an inclusive volume and no inclusive volume accepted it. |
| `ACCEPT` | An inclusive volume contains the atom. |
| `REJECT` | An exclusive volume contains the atom. This result is final. |

Atoms whose result is `FAILED` or `REJECT` are removed. An atom is kept in
these cases:

- it is inside at least one inclusive volume and inside no exclusive volume;
- there are no inclusive volumes and it is inside no exclusive volume;
- it has no entry in the positions passed in, so it stays untested.

```python
import numpy as np
from atomregion.shapes import Sphere
from atomregion.sim_region import SimulationRegion, SimulationVolume, VolumeType

region = SimulationRegion([
    SimulationVolume(Sphere(radius=1.0), np.array([1.0, 1.0, 1.0]), VolumeType.INCLUSIVE),
])

positions = {
    "a": np.array([1.0, 1.0, 1.0]),
    "b": np.array([5.0, 5.0, 5.0]),
}
for atom in positions:
    region.attach(atom)

removed = region.step(positions)   # ["b"]
```

`SimulationRegion` methods:

- **`add_volume(volume)`** adds another bound.
- **`attach(entity)`** starts tracking any hashable key and returns its
  `RegionTest`.
- **`clear()`** resets every result to `UNTESTED`.
- **`run_tests(positions)`** applies every volume to every tracked atom that
  has a position.
- **`rejected()`** lists the atoms due for removal.
- **`step(positions)`** does all three in turn: it clears, tests, and returns
  the atoms that failed. It also stops tracking those atoms.

## What this package does not do

`atomregion` does not move atoms, integrate equations of motion or store
simulation state. It only keeps the region-test results for the keys you
attach. Deleting the removed atoms from your own data structures is left to the
caller.

## Running the tests

```
pip install atomregion[test]
pytest
```