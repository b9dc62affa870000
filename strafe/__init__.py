"""Core pieces of a small real-time 3D engine: shader type tables, input state, layers, render graphs, a block memory pool, resources and transforms."""

__version__ = "0.1.0"