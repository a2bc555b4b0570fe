"""Encoding of entity identifiers as colours for mouse picking."""

from __future__ import annotations

from collections.abc import Sequence


def id_to_color(entity_id: int) -> tuple[float, float, float, float]:
    """Colour whose red, green and blue bytes hold the low 24 bits of *entity_id*."""
    red = entity_id & 0x0000FF
    green = (entity_id & 0x00FF00) >> 8
    blue = (entity_id & 0xFF0000) >> 16
    return (red / 255.0, green / 255.0, blue / 255.0, 1.0)


def color_to_id(pixel: Sequence[int]) -> int:
    """Identifier encoded in an RGB pixel of three bytes."""
    if len(pixel) != 3:
        raise ValueError(f"expected an RGB pixel of 3 bytes, got {len(pixel)} values")
    if any(not 0 <= channel <= 255 for channel in pixel):
        raise ValueError(f"pixel channels must lie in 0..255: {tuple(pixel)}")
    red, green, blue = (int(channel) for channel in pixel)
    return red + (green << 8) + (blue << 16)