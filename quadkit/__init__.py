"""Immediate-mode UI building blocks: geometry, layout cursor, input state, styles, draw commands and mesh batching."""

__version__ = "0.1.0"