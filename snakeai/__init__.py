"""Evolve neural networks that play Snake with a genetic algorithm."""

__version__ = "0.1.0"