[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wayfind"
version = "0.1.0"
description = "Graph and grid algorithms: matrices, grids, spanning trees, components, topological sorting, assignment and k-shortest paths"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "grid",
    "matrix",
    "flood-fill",
    "kruskal",
    "minimum-spanning-tree",
    "hungarian",
    "kuhn-munkres",
    "topological-sort",
    "yen",
    "k-shortest-paths",
    "connected-components",
]
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
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wayfind"]

[tool.pytest.ini_options]
addopts = "-ra"
