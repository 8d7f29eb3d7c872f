import numpy as np
import pytest

from atomregion.shapes import Cuboid, Cylinder, Sphere
from atomregion.sim_region import (
    RegionResult,
    RegionTest,
    SimulationRegion,
    SimulationVolume,
    VolumeType,
)


def test_clear_region_tests_system():
    region = SimulationRegion()
    test = region.attach("tester")
    test.result = RegionResult.ACCEPT
    region.clear()
    assert region.tests["tester"].result is RegionResult.UNTESTED


def test_region_test_clear():
    test = RegionTest(RegionResult.REJECT)
    test.clear()
    assert test.result is RegionResult.UNTESTED


def _random_entities(rng, count=99):
    return {i: rng.uniform(-2.0, 2.0, size=3) for i in range(count)}


def test_sphere_contains():
    rng = np.random.default_rng(7)
    sphere_pos = np.array([1.0, 1.0, 1.0])
    sphere_radius = 1.0
    region = SimulationRegion(
        [SimulationVolume(Sphere(sphere_radius), sphere_pos, VolumeType.INCLUSIVE)]
    )
    positions = _random_entities(rng)
    for entity in positions:
        region.attach(entity)
    region.run_tests(positions)
    for entity, pos in positions.items():
        delta = pos - sphere_pos
        expected = delta @ delta < sphere_radius * sphere_radius
        result = region.tests[entity].result
        assert result in (RegionResult.FAILED, RegionResult.ACCEPT)
        assert (result is RegionResult.ACCEPT) == expected


def test_cuboid_contains():
    rng = np.random.default_rng(11)
    cuboid_pos = np.array([1.0, 1.0, 1.0])
    half_width = np.array([0.2, 0.3, 0.1])
    region = SimulationRegion(
        [SimulationVolume(Cuboid(half_width), cuboid_pos, VolumeType.INCLUSIVE)]
    )
    positions = _random_entities(rng)
    positions[1000] = np.array([1.1, 1.1, 1.05])
    for entity in positions:
        region.attach(entity)
    region.run_tests(positions)
    for entity, pos in positions.items():
        delta = pos - cuboid_pos
        expected = all(abs(delta[i]) < half_width[i] for i in range(3))
        result = region.tests[entity].result
        assert result in (RegionResult.FAILED, RegionResult.ACCEPT)
        assert (result is RegionResult.ACCEPT) == expected
    assert region.tests[1000].result is RegionResult.ACCEPT


def test_region_tests_are_added():
    region = SimulationRegion()
    region.attach("sampler")
    assert "sampler" in region.tests
    assert region.tests["sampler"].result is RegionResult.UNTESTED


def test_exclusive_volume_rejects_contained_entity():
    region = SimulationRegion(
        [
            SimulationVolume(Sphere(10.0), [0.0, 0.0, 0.0], VolumeType.INCLUSIVE),
            SimulationVolume(Sphere(1.0), [0.0, 0.0, 0.0], VolumeType.EXCLUSIVE),
        ]
    )
    region.attach("inner")
    region.attach("shell")
    region.run_tests({"inner": [0.1, 0.0, 0.0], "shell": [5.0, 0.0, 0.0]})
    assert region.tests["inner"].result is RegionResult.REJECT
    assert region.tests["shell"].result is RegionResult.ACCEPT


def test_reject_is_sticky():
    test = RegionTest()
    exclusive = SimulationVolume(Sphere(1.0), [0.0, 0.0, 0.0], VolumeType.EXCLUSIVE)
    inclusive = SimulationVolume(Sphere(1.0), [0.0, 0.0, 0.0], VolumeType.INCLUSIVE)
    test.apply(exclusive, [0.0, 0.0, 0.0])
    test.apply(inclusive, [0.0, 0.0, 0.0])
    assert test.result is RegionResult.REJECT


def test_failed_then_accepted_by_another_volume():
    test = RegionTest()
    far = SimulationVolume(Sphere(1.0), [10.0, 0.0, 0.0], VolumeType.INCLUSIVE)
    near = SimulationVolume(Sphere(1.0), [0.0, 0.0, 0.0], VolumeType.INCLUSIVE)
    test.apply(far, [0.0, 0.0, 0.0])
    assert test.result is RegionResult.FAILED
    test.apply(near, [0.0, 0.0, 0.0])
    assert test.result is RegionResult.ACCEPT
    test.apply(far, [0.0, 0.0, 0.0])
    assert test.result is RegionResult.ACCEPT


def test_step_removes_failed_and_rejected():
    region = SimulationRegion()
    region.add_volume(
        SimulationVolume(Cylinder(1.0, 4.0, [0.0, 0.0, 1.0]), [0.0, 0.0, 0.0])
    )
    region.add_volume(
        SimulationVolume(Cuboid([0.5, 0.5, 0.5]), [0.0, 0.0, 1.5], VolumeType.EXCLUSIVE)
    )
    for name in ("inside", "outside", "excluded", "unplaced"):
        region.attach(name)
    positions = {
        "inside": [0.0, 0.0, 0.0],
        "outside": [3.0, 0.0, 0.0],
        "excluded": [0.0, 0.0, 1.5],
    }
    removed = region.step(positions)
    assert sorted(removed) == ["excluded", "outside"]
    assert sorted(region.tests) == ["inside", "unplaced"]
    assert region.tests["unplaced"].result is RegionResult.UNTESTED
    assert region.rejected() == []


def test_step_without_volumes_keeps_everything():
    region = SimulationRegion()
    region.attach(1)
    assert region.step({1: [100.0, 0.0, 0.0]}) == []
    assert 1 in region.tests