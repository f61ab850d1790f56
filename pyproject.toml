[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fdfwave"
version = "0.1.0"
description = "Height-map grids, a 2D wave simulation, XPM image decoding and X11 colour names in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["fdf", "height map", "wave equation", "xpm", "x11 colors", "pixels"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fdfwave"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
