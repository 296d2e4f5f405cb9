"""Empirical partial atomic charges: molecules, parameters, statistics and methods."""

__version__ = "0.1.0"