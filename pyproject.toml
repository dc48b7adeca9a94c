[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cinnamoncraft"
version = "0.1.0"
description = "A small block-world sandbox: chunk meshing, OBJ/PPM loading and a first-person OpenGL viewer"
requires-python = ">=3.10"
dependencies = [
    "pyglet",
]
keywords = ["voxel", "blocks", "opengl", "game", "chunk", "mesh", "obj", "ppm"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cinnamoncraft = "cinnamoncraft.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cinnamoncraft"]

[tool.hatch.build.targets.sdist]
include = ["cinnamoncraft", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
