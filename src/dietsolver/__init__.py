"""Seasonal daily diet planning by stochastic local search."""

__version__ = "0.1.0"
