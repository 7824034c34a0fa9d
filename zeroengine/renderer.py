"""OpenGL renderer bound to an application window."""

from __future__ import annotations

import logging
import os
from types import TracebackType
from typing import Any, Dict, Optional, Type

from zeroengine.gl import (
    GL_COLOR_BUFFER_BIT,
    GL_DEBUG_OUTPUT,
    GL_DEBUG_OUTPUT_SYNCHRONOUS,
    GL_DEBUG_SEVERITY_HIGH,
    GL_DEBUG_SEVERITY_LOW,
    GL_DEBUG_SEVERITY_MEDIUM,
    GL_DEBUG_SEVERITY_NOTIFICATION,
    GL_DEBUG_SOURCE_API,
    GL_DEBUG_SOURCE_APPLICATION,
    GL_DEBUG_SOURCE_OTHER,
    GL_DEBUG_SOURCE_SHADER_COMPILER,
    GL_DEBUG_SOURCE_THIRD_PARTY,
    GL_DEBUG_SOURCE_WINDOW_SYSTEM,
    GL_DEBUG_TYPE_DEPRECATED_BEHAVIOR,
    GL_DEBUG_TYPE_ERROR,
    GL_DEBUG_TYPE_MARKER,
    GL_DEBUG_TYPE_OTHER,
    GL_DEBUG_TYPE_PERFORMANCE,
    GL_DEBUG_TYPE_POP_GROUP,
    GL_DEBUG_TYPE_PORTABILITY,
    GL_DEBUG_TYPE_PUSH_GROUP,
    GL_DEBUG_TYPE_UNDEFINED_BEHAVIOR,
    GL_DONT_CARE,
    GL_SHADING_LANGUAGE_VERSION,
    GL_TRUE,
    GL_VENDOR,
    GL_VERSION,
    Provider,
    gl_function,
    load_gl_functions,
    unload_gl_functions,
)

CLEAR_COLOR = (0.2, 0.3, 0.3, 1.0)
DEBUG_ENV_VAR = "ZEROENGINE_DEBUG"

SOURCE_NAMES: Dict[int, str] = {
    GL_DEBUG_SOURCE_API: "Source: API",
    GL_DEBUG_SOURCE_WINDOW_SYSTEM: "Source: Window System",
    GL_DEBUG_SOURCE_SHADER_COMPILER: "Source: Shader Compiler",
    GL_DEBUG_SOURCE_THIRD_PARTY: "Source: Third Party",
    GL_DEBUG_SOURCE_APPLICATION: "Source: Application",
    GL_DEBUG_SOURCE_OTHER: "Source: Other",
}

TYPE_NAMES: Dict[int, str] = {
    GL_DEBUG_TYPE_ERROR: "Type: Error",
    GL_DEBUG_TYPE_DEPRECATED_BEHAVIOR: "Type: Deprecated Behaviour",
    GL_DEBUG_TYPE_UNDEFINED_BEHAVIOR: "Type: Undefined Behaviour",
    GL_DEBUG_TYPE_PORTABILITY: "Type: Portability",
    GL_DEBUG_TYPE_PERFORMANCE: "Type: Performance",
    GL_DEBUG_TYPE_MARKER: "Type: Marker",
    GL_DEBUG_TYPE_PUSH_GROUP: "Type: Push Group",
    GL_DEBUG_TYPE_POP_GROUP: "Type: Pop Group",
    GL_DEBUG_TYPE_OTHER: "Type: Other",
}

SEVERITY_NAMES: Dict[int, str] = {
    GL_DEBUG_SEVERITY_HIGH: "high",
    GL_DEBUG_SEVERITY_MEDIUM: "medium",
    GL_DEBUG_SEVERITY_LOW: "low",
    GL_DEBUG_SEVERITY_NOTIFICATION: "notification",
}

_logger = logging.getLogger("zeroengine.renderer")
_logger.setLevel(logging.DEBUG)


class RendererError(RuntimeError):
    """Raised when the renderer cannot be set up."""


def format_debug_message(
    source: int, message_type: int, message_id: int, severity: int, message: str
) -> Optional[str]:
    """Format an OpenGL debug message, or return None for an unknown severity."""
    label = SEVERITY_NAMES.get(severity)
    if label is None:
        return None
    source_text = SOURCE_NAMES.get(source, "")
    type_text = TYPE_NAMES.get(message_type, "")
    return f"[{label}] {message_id}|{message}|{source_text}|{type_text}"


def _debug_from_env() -> bool:
    return os.environ.get(DEBUG_ENV_VAR, "") not in ("", "0")


class Renderer:
    """Owns the OpenGL state of a window and draws frames into it."""

    #: Resolver for OpenGL functions; None means the window's own context.
    gl_provider: Optional[Provider] = None
    #: Route OpenGL debug output to the log.
    debug_output: bool = _debug_from_env()

    def __init__(self, window: Any, width: int, height: int) -> None:
        native = getattr(window, "native", None) if window is not None else None
        if native is None:
            raise RendererError("Unable to create renderer from a null window.")

        self.window = window
        self._native = native
        self.context: Optional[Any] = getattr(native, "context", None)
        if self.context is None:
            raise RendererError("Unable to create OpenGL context: the window has no context")

        native.switch_to()
        load_gl_functions(type(self).gl_provider)

        gl_function("glViewport")(0, 0, width, height)

        try:
            native.set_vsync(True)
        except Exception as exc:
            raise RendererError(f"Unable to set VSync: {exc}") from exc

        if type(self).debug_output:
            enable = gl_function("glEnable")
            enable(GL_DEBUG_OUTPUT)
            enable(GL_DEBUG_OUTPUT_SYNCHRONOUS)
            gl_function("glDebugMessageCallback")(Renderer.log)
            gl_function("glDebugMessageControl")(GL_DONT_CARE, GL_DONT_CARE, GL_DONT_CARE, GL_TRUE)

        get_string = gl_function("glGetString")
        self.gl_vendor: str = get_string(GL_VENDOR)
        self.gl_version: str = get_string(GL_VERSION)
        self.glsl_version: str = get_string(GL_SHADING_LANGUAGE_VERSION)

    def clear_screen(self) -> None:
        """Fill the frame with the background colour."""
        gl_function("glClearColor")(*CLEAR_COLOR)
        gl_function("glClear")(GL_COLOR_BUFFER_BIT)

    def swap_buffers(self) -> None:
        """Present the frame that was drawn."""
        self._native.flip()

    def clear_used_shader_program(self) -> None:
        """Unset the current shader program, typically at the end of a frame."""
        gl_function("glUseProgram")(0)

    def close(self) -> None:
        """Release the context and forget the OpenGL functions; further calls do nothing."""
        if self.context is not None:
            self.context = None
            unload_gl_functions()

    def __enter__(self) -> "Renderer":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

    @staticmethod
    def log(source: int, message_type: int, message_id: int, severity: int, message: str) -> None:
        """Write an OpenGL debug message to the renderer log."""
        text = format_debug_message(source, message_type, message_id, severity, message)
        if text is not None:
            _logger.debug(text)

    def __repr__(self) -> str:
        return f"Renderer(vendor={getattr(self, 'gl_vendor', '')!r})"