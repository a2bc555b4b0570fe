[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cgengine"
version = "0.1.0"
description = "Scene-graph mathematics for a small 3D engine: cameras, frustum culling, transforms, lights and shader setup"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["3d", "rendering", "scene graph", "camera", "frustum culling", "catmull-rom", "glsl"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cgengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
