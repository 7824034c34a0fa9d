"""A small OpenGL rendering engine that draws a shaded triangle in a window."""

__version__ = "0.1.0"