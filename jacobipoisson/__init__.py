"""Shared-memory Jacobi solver for the 2D Poisson equation."""

__version__ = '0.1.0'
