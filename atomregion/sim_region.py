"""Simulation regions: deciding which entities stay inside the simulated space."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum, auto

import numpy as np

from atomregion.shapes import Volume


class VolumeType(Enum):
    """Whether a volume keeps what is inside it or what is outside it."""

    INCLUSIVE = auto()
    EXCLUSIVE = auto()


class RegionResult(Enum):
    """Outcome of testing an entity against the region volumes."""

    UNTESTED = auto()
    FAILED = auto()
    ACCEPT = auto()
    REJECT = auto()


@dataclass
class SimulationVolume:
    """A shape placed at a position, acting as an inclusive or exclusive bound."""

    shape: Volume
    position: np.ndarray
    volume_type: VolumeType = VolumeType.INCLUSIVE

    def __post_init__(self):
        self.position = np.asarray(self.position, dtype=float)

    def contains(self, position) -> bool:
        return self.shape.contains(self.position, position)


@dataclass
class RegionTest:
    """Running result of testing one entity against the simulation volumes."""

    result: RegionResult = RegionResult.UNTESTED

    def clear(self) -> None:
        self.result = RegionResult.UNTESTED

    def apply(self, volume: SimulationVolume, position) -> None:
        """Update the result with one volume's verdict on ``position``."""
        if self.result is RegionResult.REJECT:
            return
        contained = volume.contains(position)
        if volume.volume_type is VolumeType.INCLUSIVE:
            if contained:
                self.result = RegionResult.ACCEPT
            elif self.result is RegionResult.UNTESTED:
                self.result = RegionResult.FAILED
        elif contained:
            self.result = RegionResult.REJECT

    @property
    def removable(self) -> bool:
        return self.result in (RegionResult.REJECT, RegionResult.FAILED)


@dataclass
class SimulationRegion:
    """Tracks region tests for entities and removes those leaving the region."""

    volumes: list[SimulationVolume] = field(default_factory=list)
    tests: dict[Hashable, RegionTest] = field(default_factory=dict)

    def __init__(self, volumes: Iterable[SimulationVolume] = ()):
        self.volumes = list(volumes)
        self.tests = {}

    def add_volume(self, volume: SimulationVolume) -> None:
        self.volumes.append(volume)

    def attach(self, entity: Hashable) -> RegionTest:
        """Start region testing ``entity``; returns its test record."""
        test = RegionTest()
        self.tests[entity] = test
        return test

    def clear(self) -> None:
        for test in self.tests.values():
            test.clear()

    def run_tests(self, positions: Mapping[Hashable, object]) -> None:
        """Test every tracked entity that has a position against every volume."""
        for volume in self.volumes:
            for entity, test in self.tests.items():
                position = positions.get(entity)
                if position is not None:
                    test.apply(volume, position)

    def rejected(self) -> list[Hashable]:
        """Entities whose test failed or was rejected."""
        return [entity for entity, test in self.tests.items() if test.removable]

    def step(self, positions: Mapping[Hashable, object]) -> list[Hashable]:
        """Clear, test and drop failing entities; returns the dropped entities."""
        self.clear()
        self.run_tests(positions)
        removed = self.rejected()
        for entity in removed:
            del self.tests[entity]
        return removed