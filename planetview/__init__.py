"""Vector maths, camera, OBJ meshes, textures and scene data for a two-planet 3D viewer."""

__version__ = "0.1.0"