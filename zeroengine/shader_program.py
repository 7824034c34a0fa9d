"""Linked OpenGL shader programs and a builder that assembles them from files."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from types import TracebackType
from typing import Any, List, Optional, Tuple, Type, Union

from zeroengine.fs import read_file
from zeroengine.gl import GL_LINK_STATUS, gl_function
from zeroengine.shader import INFO_LOG_LENGTH, Shader

PathType = Union[str, "PathLike[str]"]


class ShaderLinkError(RuntimeError):
    """Raised when a shader program fails to link; carries the info log."""

    def __init__(self, log: str) -> None:
        super().__init__(log)
        self.log = log


@dataclass(frozen=True)
class ShaderProps:
    """A shader stage and the asset file holding its source."""

    shader_type: int
    shader_file: str


class ShaderProgram:
    """An OpenGL program object with helpers for setting uniforms."""

    def __init__(self) -> None:
        self.id: int = gl_function("glCreateProgram")()
        self.shaders: List[Shader] = []

    def use(self) -> None:
        """Make this program the current one."""
        gl_function("glUseProgram")(self.id)

    def attach_shader(self, shader: Shader) -> None:
        """Queue a shader to be attached when the program is linked."""
        self.shaders.append(shader)

    def link(self) -> None:
        """Attach the queued shaders and link the program."""
        attach = gl_function("glAttachShader")
        for shader in self.shaders:
            attach(self.id, shader.id)
        gl_function("glLinkProgram")(self.id)

        if not gl_function("glGetProgramiv")(self.id, GL_LINK_STATUS):
            log = gl_function("glGetProgramInfoLog")(self.id, INFO_LOG_LENGTH)
            raise ShaderLinkError(log)

        self.shaders.clear()

    def delete(self) -> None:
        """Release the program object; further calls do nothing."""
        if self.id != 0:
            gl_function("glDeleteProgram")(self.id)
            self.id = 0

    def __enter__(self) -> "ShaderProgram":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.delete()

    def _set_uniform(self, function_name: str, uniform_name: str, *values: Any) -> None:
        setter = gl_function(function_name)
        location = gl_function("glGetUniformLocation")(self.id, uniform_name)
        setter(location, *values)

    def set_bool(self, uniform_name: str, value: bool) -> None:
        self._set_uniform("glUniform1i", uniform_name, int(bool(value)))

    def set_int(self, uniform_name: str, value: int) -> None:
        self._set_uniform("glUniform1i", uniform_name, value)

    def set_uint(self, uniform_name: str, value: int) -> None:
        self._set_uniform("glUniform1ui", uniform_name, value)

    def set_float(self, uniform_name: str, value: float) -> None:
        self._set_uniform("glUniform1f", uniform_name, value)

    def set_vec2i(self, uniform_name: str, x: int, y: int) -> None:
        self._set_uniform("glUniform2i", uniform_name, x, y)

    def set_vec3i(self, uniform_name: str, x: int, y: int, z: int) -> None:
        self._set_uniform("glUniform3i", uniform_name, x, y, z)

    def set_vec4i(self, uniform_name: str, x: int, y: int, z: int, w: int) -> None:
        self._set_uniform("glUniform4i", uniform_name, x, y, z, w)

    def set_vec2ui(self, uniform_name: str, x: int, y: int) -> None:
        self._set_uniform("glUniform2ui", uniform_name, x, y)

    def set_vec3ui(self, uniform_name: str, x: int, y: int, z: int) -> None:
        self._set_uniform("glUniform3ui", uniform_name, x, y, z)

    def set_vec4ui(self, uniform_name: str, x: int, y: int, z: int, w: int) -> None:
        self._set_uniform("glUniform4ui", uniform_name, x, y, z, w)

    def set_vec2f(self, uniform_name: str, x: float, y: float) -> None:
        self._set_uniform("glUniform2f", uniform_name, x, y)

    def set_vec3f(self, uniform_name: str, x: float, y: float, z: float) -> None:
        self._set_uniform("glUniform3f", uniform_name, x, y, z)

    def set_vec4f(self, uniform_name: str, x: float, y: float, z: float, w: float) -> None:
        self._set_uniform("glUniform4f", uniform_name, x, y, z, w)

    def __repr__(self) -> str:
        return f"ShaderProgram(id={self.id})"


class ShaderProgramBuilder:
    """Collects shader files and builds a linked :class:`ShaderProgram`."""

    def __init__(self, base_dir: Optional[PathType] = None) -> None:
        self.base_dir = base_dir
        self._shader_props: List[ShaderProps] = []

    @property
    def shader_props(self) -> Tuple[ShaderProps, ...]:
        return tuple(self._shader_props)

    def add_shader(self, props: ShaderProps) -> "ShaderProgramBuilder":
        """Add a shader stage; returns the builder for chaining."""
        self._shader_props.append(props)
        return self

    def build(self) -> ShaderProgram:
        """Read, compile and link every added shader into a new program.

        The compiled shader objects are released once linking is done.
        """
        program = ShaderProgram()
        shaders: List[Shader] = []
        try:
            for props in self._shader_props:
                source = read_file(props.shader_file, self.base_dir)
                shader = Shader(props.shader_type, source)
                shaders.append(shader)
                program.attach_shader(shader)
            program.link()
        except BaseException:
            program.delete()
            raise
        finally:
            for shader in shaders:
                shader.delete()
        return program