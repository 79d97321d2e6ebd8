[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpgeom"
version = "0.1.0"
description = "2D geometry toolkit: vectors, affine transforms, convex hulls, polylines, marching squares and a spatial hash."
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "2d", "convex-hull", "marching-squares", "spatial-hash", "polyline", "broad-phase"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cpgeom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
