"""Graph, grid and matrix algorithms: matrices, grids, spanning trees,
connected components, topological sorting, assignment and k shortest paths."""

__version__ = "0.1.0"