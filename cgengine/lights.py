"""Light sources of a scene."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

Vector3 = tuple[float, float, float]


def _vec3(value: Sequence[float], name: str) -> Vector3:
    if len(value) != 3:
        raise ValueError(f"{name} must have 3 components, got {len(value)}")
    return tuple(float(c) for c in value)  # type: ignore[return-value]


def _normalized(value: Sequence[float], name: str) -> Vector3:
    x, y, z = _vec3(value, name)
    length = math.sqrt(x * x + y * y + z * z)
    if length == 0.0:
        raise ValueError(f"{name} must not be the zero vector")
    return (x / length, y / length, z / length)


class Light:
    """Base of every kind of light."""


@dataclass(frozen=True)
class PointLight(Light):
    """A light that shines in every direction from a position."""

    position: Vector3

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", _vec3(self.position, "position"))


@dataclass(frozen=True)
class DirectionalLight(Light):
    """A light infinitely far away; the direction is stored normalised."""

    direction: Vector3

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", _normalized(self.direction, "direction"))


@dataclass(frozen=True)
class Spotlight(Light):
    """A cone of light; *cutoff* is the half-angle of the cone in radians."""

    position: Vector3
    direction: Vector3
    cutoff: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", _vec3(self.position, "position"))
        object.__setattr__(self, "direction", _normalized(self.direction, "direction"))
        object.__setattr__(self, "cutoff", float(self.cutoff))


def create_light(
    kind: str = "directional",
    position: Sequence[float] | None = None,
    direction: Sequence[float] | None = None,
    cutoff: float = 10.0,
) -> Light:
    """Build a light by type name; *cutoff* is given in degrees."""

    def require(value: Sequence[float] | None, name: str) -> Sequence[float]:
        if value is None:
            raise ValueError(f"{kind} light requires a {name}")
        return value

    if kind == "directional":
        return DirectionalLight(require(direction, "direction"))
    if kind == "point":
        return PointLight(require(position, "position"))
    if kind == "spotlight":
        return Spotlight(
            require(position, "position"),
            require(direction, "direction"),
            math.radians(cutoff),
        )
    raise ValueError(f"Invalid light type: {kind!r}")