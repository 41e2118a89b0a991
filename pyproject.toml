[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "planetview"
version = "0.1.0"
description = "Camera, mesh, texture and scene logic for a small two-planet 3D viewer"
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "pillow",
]
keywords = ["3d", "camera", "obj", "wavefront", "look-at", "texture", "scene", "rendering"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["planetview"]

[tool.hatch.build.targets.sdist]
include = [
    "planetview",
    "tests",
]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
