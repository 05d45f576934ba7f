"""Cartesian grid stencils, neighbour cells, connectivities, shapes and environment building."""

__version__ = "0.1.0"