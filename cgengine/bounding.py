"""Bounding spheres used for view-frustum culling."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

import numpy as np

Vector4 = tuple[float, float, float, float]


def _homogeneous(point: Sequence[float]) -> np.ndarray:
    """Return *point* as a 4-component array, adding w = 1 to 3D points."""
    array = np.asarray(point, dtype=float).reshape(-1)
    if array.shape == (3,):
        return np.append(array, 1.0)
    if array.shape == (4,):
        return array
    raise ValueError(f"expected a 3 or 4 component point, got {array.shape[0]}")


@dataclass(frozen=True)
class BoundingSphere:
    """A sphere given by a homogeneous centre and a radius."""

    center: Vector4 = field(default=(0.0, 0.0, 0.0, 1.0))
    radius: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "center", tuple(float(c) for c in _homogeneous(self.center)))
        object.__setattr__(self, "radius", float(self.radius))

    @classmethod
    def from_vertices(cls, vertices: Iterable[Sequence[float]]) -> BoundingSphere:
        """Sphere centred on the mean of *vertices*, reaching the farthest one."""
        points = [_homogeneous(vertex) for vertex in vertices]
        if not points:
            raise ValueError("cannot bound an empty set of vertices")
        stacked = np.stack(points)
        center = stacked.mean(axis=0)
        radius = float(np.linalg.norm(stacked - center, axis=1).max())
        return cls(tuple(center), radius)

    def transformed(self, matrix: Sequence[Sequence[float]]) -> BoundingSphere:
        """Apply a 4x4 transform; the radius grows by the largest axis scale."""
        m = np.asarray(matrix, dtype=float)
        if m.shape != (4, 4):
            raise ValueError(f"expected a 4x4 matrix, got shape {m.shape}")
        scale = float(np.linalg.norm(m[:, :3], axis=0).max())
        center = m @ np.asarray(self.center)
        return BoundingSphere(tuple(center), self.radius * scale)


def enclose_spheres(spheres: Iterable[BoundingSphere]) -> BoundingSphere:
    """Sphere around the mean of the centres that contains every given sphere."""
    items = list(spheres)
    if not items:
        raise ValueError("cannot enclose an empty set of spheres")
    centers = np.array([sphere.center for sphere in items])
    center = centers.mean(axis=0)
    radius = max(
        (
            float(np.linalg.norm(np.asarray(sphere.center) - center)) + sphere.radius
            for sphere in items
        ),
        default=0.0,
    )
    return BoundingSphere(tuple(center), max(radius, 0.0))