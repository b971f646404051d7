"""Procedural Gabor noise in 2D and on surfaces, its spectrum, PPM export and mesh utilities."""

__version__ = "0.1.0"