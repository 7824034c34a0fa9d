"""Compiled OpenGL shader objects."""

from __future__ import annotations

from types import TracebackType
from typing import Optional, Type

from zeroengine.gl import GL_COMPILE_STATUS, gl_function

INFO_LOG_LENGTH = 512


class ShaderCompileError(RuntimeError):
    """Raised when a shader fails to compile; carries the info log."""

    def __init__(self, log: str) -> None:
        super().__init__(log)
        self.log = log


class Shader:
    """A shader compiled from source on creation."""

    def __init__(self, shader_type: int, source_code: str) -> None:
        self.shader_type = shader_type
        self.source_code = source_code
        self.id: int = gl_function("glCreateShader")(shader_type)

        gl_function("glShaderSource")(self.id, source_code)
        gl_function("glCompileShader")(self.id)

        if not gl_function("glGetShaderiv")(self.id, GL_COMPILE_STATUS):
            log = gl_function("glGetShaderInfoLog")(self.id, INFO_LOG_LENGTH)
            raise ShaderCompileError(log)

    def delete(self) -> None:
        """Release the shader object; further calls do nothing."""
        if self.id != 0:
            gl_function("glDeleteShader")(self.id)
            self.id = 0

    def __enter__(self) -> "Shader":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.delete()

    def __repr__(self) -> str:
        return f"Shader(id={self.id}, shader_type={self.shader_type:#x})"