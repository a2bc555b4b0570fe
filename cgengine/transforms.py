"""Static and animated transformations of scene groups."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

import numpy as np

_CATMULL_ROM = np.array(
    [
        [-0.5, 1.5, -1.5, 0.5],
        [1.0, -2.5, 2.0, -0.5],
        [-0.5, 0.0, 0.5, 0.0],
        [0.0, 1.0, 0.0, 0.0],
    ]
)

_POINTS_PER_SEGMENT = 32


def _vec3(value: Sequence[float], name: str) -> np.ndarray:
    array = np.asarray(value, dtype=float).reshape(-1)
    if array.shape != (3,):
        raise ValueError(f"{name} must have 3 components, got {array.shape[0]}")
    return array


def _normalize(v: np.ndarray, name: str) -> np.ndarray:
    length = float(np.linalg.norm(v))
    if length == 0.0:
        raise ValueError(f"{name} must not be the zero vector")
    return v / length


def _translation_matrix(offset: np.ndarray) -> np.ndarray:
    matrix = np.identity(4)
    matrix[:3, 3] = offset
    return matrix


def _scale_matrix(factors: np.ndarray) -> np.ndarray:
    return np.diag([*factors, 1.0])


def rotation_matrix(angle: float, axis: Sequence[float]) -> np.ndarray:
    """4x4 matrix rotating by *angle* radians around *axis*."""
    a = _normalize(_vec3(axis, "axis"), "axis")
    c, s = math.cos(angle), math.sin(angle)
    cross = np.array([[0.0, -a[2], a[1]], [a[2], 0.0, -a[0]], [-a[1], a[0], 0.0]])
    matrix = np.identity(4)
    matrix[:3, :3] = c * np.identity(3) + (1.0 - c) * np.outer(a, a) + s * cross
    return matrix


class Transform:
    """A transformation with a 4x4 matrix; the base one is the identity."""

    def __init__(self, matrix: Sequence[Sequence[float]] | None = None) -> None:
        self.matrix = np.identity(4) if matrix is None else np.asarray(matrix, dtype=float)
        if self.matrix.shape != (4, 4):
            raise ValueError(f"expected a 4x4 matrix, got shape {self.matrix.shape}")

    def update(self, time: float) -> None:
        """Advance the transformation to *time*; static ones do nothing."""


class Translation(Transform):
    """A fixed translation."""

    def __init__(self, x: float, y: float, z: float) -> None:
        super().__init__(_translation_matrix(_vec3((x, y, z), "translation")))


class Scale(Transform):
    """A fixed scale along each axis."""

    def __init__(self, x: float, y: float, z: float) -> None:
        super().__init__(_scale_matrix(_vec3((x, y, z), "scale")))


class Rotation(Transform):
    """A fixed rotation; *angle* is given in degrees."""

    def __init__(self, angle: float, axis: Sequence[float]) -> None:
        angle = float(angle)
        if math.isnan(angle):
            raise ValueError("rotation is missing its angle")
        super().__init__(rotation_matrix(math.radians(angle), axis))


class AnimatedRotation(Transform):
    """A rotation making a full turn every *period* seconds."""

    def __init__(
        self,
        period: float,
        axis: Sequence[float],
        clockwise: bool = False,
        time: float = 0.0,
    ) -> None:
        period = float(period)
        if math.isnan(period):
            raise ValueError("animated rotation is missing its time")
        if period == 0.0:
            raise ValueError("animated rotation time must not be zero")
        super().__init__()
        self.period = period
        self.axis = _normalize(_vec3(axis, "axis"), "axis")
        self.direction = -1.0 if clockwise else 1.0
        self.angle = 0.0
        self.update(time)

    def update(self, time: float) -> None:
        """Set the angle reached at *time*."""
        self.angle = self.direction * time * 2.0 * math.pi / self.period
        self.matrix = rotation_matrix(self.angle, self.axis)


class AnimatedTranslation(Transform):
    """Motion along a closed Catmull-Rom curve, one lap every *period* seconds."""

    def __init__(
        self,
        period: float,
        points: Iterable[Sequence[float]],
        align: bool = False,
        time: float = 0.0,
    ) -> None:
        period = float(period)
        if math.isnan(period):
            raise ValueError("animated translation is missing its time")
        if period == 0.0:
            raise ValueError("animated translation time must not be zero")
        control = [_vec3(p, "point") for p in points]
        if len(control) < 4:
            raise ValueError("too few points in animated translation")
        super().__init__()
        self.period = period
        self.points = control
        self.align = align
        self.last_up = np.array([0.0, 1.0, 0.0])
        self.update(time)

    def interpolate(self, time: float) -> tuple[np.ndarray, np.ndarray]:
        """Position on the curve at *time* and its derivative."""
        count = len(self.points)
        normalized = time / self.period * count
        segment = math.floor(normalized)
        local_t = normalized - segment

        controls = np.stack(
            [self.points[(segment + offset) % count] for offset in (-1, 0, 1, 2)]
        )
        coefficients = _CATMULL_ROM @ controls
        t = np.array([local_t**3, local_t**2, local_t, 1.0])
        dt = np.array([3.0 * local_t**2, 2.0 * local_t, 1.0, 0.0])
        return t @ coefficients, dt @ coefficients

    def update(self, time: float) -> None:
        """Move to the curve position at *time*, turning along it if aligned."""
        position, derivative = self.interpolate(time)
        translation = _translation_matrix(position)
        if not self.align:
            self.matrix = translation
            return
        mx = _normalize(derivative, "curve derivative")
        mz = _normalize(np.cross(mx, self.last_up), "curve side")
        my = _normalize(np.cross(mz, mx), "curve up")
        rotation = np.identity(4)
        rotation[:3, 0] = mx
        rotation[:3, 1] = my
        rotation[:3, 2] = mz
        self.matrix = translation @ rotation
        self.last_up = my

    def path(self) -> list[np.ndarray]:
        """Sampled points of the curve, as drawn for the animation line."""
        total = (len(self.points) - 3) * _POINTS_PER_SEGMENT
        step = self.period / total
        return [self.interpolate(i * step)[0] for i in range(total)]


def _kind(transform: Transform) -> str:
    if isinstance(transform, (Translation, AnimatedTranslation)):
        return "translate"
    if isinstance(transform, (Rotation, AnimatedRotation)):
        return "rotate"
    if isinstance(transform, Scale):
        return "scale"
    raise ValueError(f"invalid transformation: {type(transform).__name__}")


class TRSTransform(Transform):
    """Up to three transformations of distinct kinds, applied in the given order."""

    def __init__(self, transforms: Iterable[Transform] = (), time: float = 0.0) -> None:
        super().__init__()
        parts = list(transforms)
        if len(parts) > 3:
            raise ValueError("more than 3 transformations in a transform")
        seen: set[str] = set()
        for part in parts:
            kind = _kind(part)
            if kind in seen:
                raise ValueError(f"multiple occurrences of {kind} in a transform")
            seen.add(kind)
        self.transforms = parts + [Transform() for _ in range(3 - len(parts))]
        self.update(time)

    def update(self, time: float) -> None:
        """Update every part and combine their matrices."""
        for transform in self.transforms:
            transform.update(time)
        first, second, third = (t.matrix for t in self.transforms)
        self.matrix = first @ second @ third