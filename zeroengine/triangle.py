"""A single triangle drawn with its own shader program."""

from __future__ import annotations

import struct
from os import PathLike
from typing import Optional, Tuple, Union

from zeroengine.gl import (
    GL_ARRAY_BUFFER,
    GL_FALSE,
    GL_FLOAT,
    GL_FRAGMENT_SHADER,
    GL_STATIC_DRAW,
    GL_TRIANGLES,
    GL_VERTEX_SHADER,
    gl_function,
)
from zeroengine.shader_program import ShaderProgram, ShaderProgramBuilder, ShaderProps

VERTICES: Tuple[float, ...] = (-0.5, -0.5, 0.0, 0.5, -0.5, 0.0, 0.0, 0.5, 0.0)
VERTEX_SHADER_FILE = "shaders/triangle.vert.glsl"
FRAGMENT_SHADER_FILE = "shaders/triangle.frag.glsl"
COMPONENTS_PER_VERTEX = 3
VERTEX_COUNT = 3
FLOAT_SIZE = struct.calcsize("f")


class Triangle:
    """Vertex data uploaded to a vertex array and drawn with a shader program."""

    def __init__(self, shader_program: ShaderProgram) -> None:
        self.vertices: Tuple[float, ...] = VERTICES
        self.shader_program = shader_program
        self.vao = 0
        self.vbo = 0
        self._gen_buffer_info()

    @classmethod
    def from_assets(cls, base_dir: Optional[Union[str, "PathLike[str]"]] = None) -> "Triangle":
        """Create a triangle using the shaders shipped in the assets directory."""
        program = (
            ShaderProgramBuilder(base_dir)
            .add_shader(ShaderProps(GL_VERTEX_SHADER, VERTEX_SHADER_FILE))
            .add_shader(ShaderProps(GL_FRAGMENT_SHADER, FRAGMENT_SHADER_FILE))
            .build()
        )
        return cls(program)

    def render(self) -> None:
        """Draw the triangle with its shader program."""
        self.shader_program.use()
        gl_function("glBindVertexArray")(self.vao)
        gl_function("glDrawArrays")(GL_TRIANGLES, 0, VERTEX_COUNT)

    def _gen_buffer_info(self) -> None:
        (self.vao,) = gl_function("glGenVertexArrays")(1)
        (self.vbo,) = gl_function("glGenBuffers")(1)

        bind_vertex_array = gl_function("glBindVertexArray")
        bind_buffer = gl_function("glBindBuffer")

        bind_vertex_array(self.vao)
        bind_buffer(GL_ARRAY_BUFFER, self.vbo)
        gl_function("glBufferData")(GL_ARRAY_BUFFER, self.vertices, GL_STATIC_DRAW)

        gl_function("glVertexAttribPointer")(
            0, COMPONENTS_PER_VERTEX, GL_FLOAT, GL_FALSE, COMPONENTS_PER_VERTEX * FLOAT_SIZE, 0
        )
        gl_function("glEnableVertexAttribArray")(0)

        bind_buffer(GL_ARRAY_BUFFER, 0)
        bind_vertex_array(0)

    def __repr__(self) -> str:
        return f"Triangle(vao={self.vao}, vbo={self.vbo})"