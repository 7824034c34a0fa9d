"""The application: window, renderer and main loop."""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Optional

from pyglet.event import EVENT_HANDLED

from zeroengine.gl import gl_function
from zeroengine.params import AppParams
from zeroengine.renderer import Renderer
from zeroengine.triangle import Triangle
from zeroengine.window import Window

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_logger = logging.getLogger("zeroengine.app")


class LogPriority(IntEnum):
    """Priority of an application log message."""

    INVALID = 0
    TRACE = 1
    VERBOSE = 2
    DEBUG = 3
    INFO = 4
    WARN = 5
    ERROR = 6
    CRITICAL = 7


_LEVELS = {
    LogPriority.CRITICAL: logging.CRITICAL,
    LogPriority.INFO: logging.INFO,
    LogPriority.WARN: logging.WARNING,
    LogPriority.DEBUG: logging.DEBUG,
    LogPriority.ERROR: logging.ERROR,
}


class App:
    """Creates the window and renderer and runs the frame loop."""

    def __init__(self) -> None:
        self.params = AppParams()
        self.window: Optional[Window] = None
        self.renderer: Optional[Renderer] = None

    def init(self, params: AppParams) -> None:
        """Open the window and set up rendering."""
        self.params = params
        self.window = Window(params.app_title, params.window_width, params.window_height)
        self.renderer = Renderer(self.window, params.window_width, params.window_height)
        App.log(LogPriority.INFO, f'Application "{params.app_title}" started...')

    def run(self) -> None:
        """Draw frames until the window is closed."""
        if self.window is None or self.renderer is None or self.window.native is None:
            raise RuntimeError("the application has not been initialised")

        native = self.window.native
        renderer = self.renderer
        triangle = Triangle.from_assets()
        native.push_handlers(on_resize=self._on_resize)
        try:
            while not native.has_exit:
                native.dispatch_events()
                renderer.clear_screen()
                triangle.render()
                renderer.clear_used_shader_program()
                renderer.swap_buffers()
        finally:
            native.remove_handlers(on_resize=self._on_resize)
            triangle.shader_program.delete()

    def quit(self) -> None:
        """Release the renderer and the window."""
        if self.renderer is not None:
            self.renderer.close()
            self.renderer = None
        if self.window is not None:
            self.window.close()
            self.window = None

    def _on_resize(self, width: int, height: int) -> bool:
        App.log(LogPriority.INFO, f"Window resized: ({width}x{height})")
        gl_function("glViewport")(0, 0, width, height)
        return EVENT_HANDLED

    @staticmethod
    def log(priority: int, message: str) -> None:
        """Write a message to the application log at the matching level."""
        level = _LEVELS.get(priority, TRACE)
        _logger.log(level, message)

    def __repr__(self) -> str:
        return f"App(params={self.params!r})"