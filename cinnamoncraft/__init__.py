"""A small block-world sandbox: chunk meshing, OBJ/PPM loading and a first-person viewer."""

__version__ = "0.1.0"