"""Surface material used by the shaded renderer."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

RGB = tuple[float, float, float]


def _rgb(value: Sequence[float], name: str) -> RGB:
    if len(value) != 3:
        raise ValueError(f"{name} must have 3 components, got {len(value)}")
    return tuple(float(c) for c in value)  # type: ignore[return-value]


@dataclass(frozen=True)
class Material:
    """Diffuse, ambient, specular and emissive colours plus a shininess."""

    diffuse: RGB = field(default=(1.0, 1.0, 1.0))
    ambient: RGB = field(default=(0.2, 0.2, 0.2))
    specular: RGB = field(default=(0.0, 0.0, 0.0))
    emissive: RGB = field(default=(0.0, 0.0, 0.0))
    shininess: float = 0.0

    def __post_init__(self) -> None:
        for name in ("diffuse", "ambient", "specular", "emissive"):
            object.__setattr__(self, name, _rgb(getattr(self, name), name))
        object.__setattr__(self, "shininess", float(self.shininess))