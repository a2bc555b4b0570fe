"""Scene-graph mathematics for a small 3D engine: bounding spheres, cameras, transforms, lights, materials, camera control, shader setup and picking."""

__version__ = "0.1.0"
__all__ = [
    "bounding",
    "camera",
    "controller",
    "lights",
    "material",
    "picking",
    "shading",
    "transforms",
]