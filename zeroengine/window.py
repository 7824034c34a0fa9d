"""The application window with an OpenGL context."""

from __future__ import annotations

from types import TracebackType
from typing import Any, Optional, Type

import pyglet

GL_MAJOR_VERSION = 3
GL_MINOR_VERSION = 3


class WindowError(RuntimeError):
    """Raised when the window cannot be created."""


class Window:
    """A resizable window backed by an OpenGL 3.3 core context."""

    def __init__(self, title: str, width: int, height: int) -> None:
        self.title = title
        self.width = width
        self.height = height
        try:
            config = pyglet.gl.Config(
                major_version=GL_MAJOR_VERSION,
                minor_version=GL_MINOR_VERSION,
                forward_compatible=True,
                double_buffer=True,
            )
            self.native: Optional[Any] = pyglet.window.Window(
                width=width,
                height=height,
                caption=title,
                resizable=True,
                config=config,
            )
        except Exception as exc:
            raise WindowError(str(exc)) from exc

    def close(self) -> None:
        """Destroy the native window; further calls do nothing."""
        if self.native is not None:
            self.native.close()
            self.native = None

    def __enter__(self) -> "Window":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Window(title={self.title!r}, width={self.width}, height={self.height})"