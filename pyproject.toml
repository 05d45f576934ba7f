[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "p4gpu"
version = "0.1.0"
description = "Directional stencils, neighbour cells, cell/node connectivities and geometric environment building for Cartesian grids"
requires-python = ">=3.10"
dependencies = []
keywords = ["cartesian", "mesh", "stencil", "connectivity", "structured grid", "environments"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["p4gpu"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
