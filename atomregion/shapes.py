"""Geometric shapes used to bound regions of a simulation."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

import numpy as np

_REFERENCE_AXIS = np.array([0.23, 1.2, 0.4563])


def _vector(value) -> np.ndarray:
    array = np.asarray(value, dtype=float)
    if array.shape != (3,):
        raise ValueError(f"expected a 3-vector, got shape {array.shape}")
    return array


def _generator(rng) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


class Volume(ABC):
    """A shape that can say whether it encloses a point."""

    @abstractmethod
    def contains(self, volume_position, entity_position) -> bool:
        """Return True if the shape placed at ``volume_position`` encloses ``entity_position``."""


class Surface(ABC):
    """A shape from whose surface random points can be drawn."""

    @abstractmethod
    def random_surface_point(self, surface_position, rng=None) -> tuple[np.ndarray, np.ndarray]:
        """Return ``(point, normal)`` drawn on the surface; the normal points outwards."""


class Cylinder(Volume, Surface):
    """A cylinder of given radius and length, aligned to ``direction``."""

    def __init__(self, radius, length, direction):
        self.radius = float(radius)
        self.length = float(length)
        axis = _vector(direction)
        norm = np.linalg.norm(axis)
        if norm == 0.0:
            raise ValueError("cylinder direction must be non-zero")
        self.direction = axis / norm
        reference = _REFERENCE_AXIS / np.linalg.norm(_REFERENCE_AXIS)
        self.perp_x = np.cross(self.direction, reference)
        self.perp_y = np.cross(self.direction, self.perp_x)

    def __repr__(self) -> str:
        return (
            f"Cylinder(radius={self.radius!r}, length={self.length!r}, "
            f"direction={self.direction.tolist()!r})"
        )

    def contains(self, volume_position, entity_position) -> bool:
        delta = _vector(volume_position) - _vector(entity_position)
        projection = float(delta @ self.direction)
        if abs(projection) > self.length / 2.0:
            return False
        orthogonal = delta - projection * self.direction
        return float(orthogonal @ orthogonal) < self.radius**2

    def random_surface_point(self, surface_position, rng=None):
        rng = _generator(rng)
        origin = _vector(surface_position)
        on_ends = rng.random() < self.radius / (self.length + self.radius)
        if on_ends:
            sign = 1.0 if rng.random() < 0.5 else -1.0
            angle = rng.uniform(0.0, 2.0 * math.pi)
            radius = self.radius * math.sqrt(rng.random())
            normal = sign * self.direction
            point = (
                origin
                + self.perp_x * radius * math.cos(angle)
                + self.perp_y * radius * math.sin(angle)
                + normal * self.length / 2.0
            )
            return point, normal
        angle = rng.uniform(0.0, 2.0 * math.pi)
        axial = rng.uniform(-self.length, self.length) / 2.0
        normal = self.perp_x * math.cos(angle) + self.perp_y * math.sin(angle)
        point = origin + normal * self.radius + self.direction * axial
        return point, normal


@dataclass
class Sphere(Volume, Surface):
    """A sphere of given radius."""

    radius: float

    def contains(self, volume_position, entity_position) -> bool:
        delta = _vector(entity_position) - _vector(volume_position)
        return float(delta @ delta) < self.radius**2

    def random_surface_point(self, surface_position, rng=None):
        rng = _generator(rng)
        theta = rng.uniform(0.0, math.pi)
        phi = rng.uniform(0.0, 2.0 * math.pi)
        normal = np.array(
            [
                math.sin(theta) * math.cos(phi),
                math.sin(theta) * math.sin(phi),
                math.cos(theta),
            ]
        )
        return _vector(surface_position) + self.radius * normal, normal


@dataclass
class Cuboid(Volume, Surface):
    """An axis-aligned box; ``half_width`` runs from the centre to the (1,1,1) vertex."""

    half_width: np.ndarray = field()

    def __post_init__(self):
        self.half_width = _vector(self.half_width)

    def contains(self, volume_position, entity_position) -> bool:
        delta = np.abs(_vector(entity_position) - _vector(volume_position))
        return bool(np.all(delta < self.half_width))

    def random_surface_point(self, surface_position, rng=None):
        rng = _generator(rng)
        point = rng.uniform(-self.half_width, self.half_width)
        face = int(rng.integers(0, 6))
        axis, sign = divmod(face, 2)
        direction = 1.0 if sign else -1.0
        point[axis] = direction * self.half_width[axis]
        normal = np.zeros(3)
        normal[axis] = direction
        return _vector(surface_position) + point, normal