"""Continuous-domain helpers - vector and line algebra."""

from lattice2d.continuous import line, vector

__all__ = ["line", "vector"]
