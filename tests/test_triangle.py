from pathlib import Path

import pytest

from zeroengine.gl import (
    GL_ARRAY_BUFFER,
    GL_FALSE,
    GL_FLOAT,
    GL_FRAGMENT_SHADER,
    GL_STATIC_DRAW,
    GL_TRIANGLES,
    GL_VERTEX_SHADER,
    load_gl_functions,
    unload_gl_functions,
)
from zeroengine.shader_program import ShaderProgram
from zeroengine.triangle import Triangle


class FakeGL:
    def __init__(self):
        self.calls = []
        self._next_id = 1
        self._handlers = {
            "glCreateShader": lambda *a: self._new_id(),
            "glCreateProgram": lambda *a: self._new_id(),
            "glGetShaderiv": lambda *a: 1,
            "glGetProgramiv": lambda *a: 1,
            "glGetShaderInfoLog": lambda *a: "",
            "glGetProgramInfoLog": lambda *a: "",
            "glGenBuffers": lambda count: [self._new_id() for _ in range(count)],
            "glGenVertexArrays": lambda count: [self._new_id() for _ in range(count)],
        }

    def _new_id(self):
        value = self._next_id
        self._next_id += 1
        return value

    def provider(self, name):
        def record(*args):
            self.calls.append((name, args))
            handler = self._handlers.get(name)
            return handler(*args) if handler else None

        return record

    def calls_to(self, name):
        return [args for called, args in self.calls if called == name]


@pytest.fixture
def fake_gl():
    fake = FakeGL()
    load_gl_functions(fake.provider)
    yield fake
    unload_gl_functions()


def test_vertices_match_source(fake_gl):
    triangle = Triangle(ShaderProgram())
    assert triangle.vertices == (-0.5, -0.5, 0.0, 0.5, -0.5, 0.0, 0.0, 0.5, 0.0)


def test_buffers_are_generated_and_uploaded(fake_gl):
    program = ShaderProgram()
    fake_gl.calls.clear()
    triangle = Triangle(program)

    names = [name for name, _ in fake_gl.calls]
    assert names == [
        "glGenVertexArrays",
        "glGenBuffers",
        "glBindVertexArray",
        "glBindBuffer",
        "glBufferData",
        "glVertexAttribPointer",
        "glEnableVertexAttribArray",
        "glBindBuffer",
        "glBindVertexArray",
    ]
    assert fake_gl.calls_to("glGenVertexArrays") == [(1,)]
    assert fake_gl.calls_to("glBindVertexArray") == [(triangle.vao,), (0,)]
    assert fake_gl.calls_to("glBindBuffer") == [(GL_ARRAY_BUFFER, triangle.vbo), (GL_ARRAY_BUFFER, 0)]
    assert fake_gl.calls_to("glBufferData") == [(GL_ARRAY_BUFFER, triangle.vertices, GL_STATIC_DRAW)]
    assert fake_gl.calls_to("glEnableVertexAttribArray") == [(0,)]


def test_vertex_attribute_layout(fake_gl):
    Triangle(ShaderProgram())
    assert fake_gl.calls_to("glVertexAttribPointer") == [(0, 3, GL_FLOAT, GL_FALSE, 12, 0)]


def test_vao_and_vbo_are_distinct(fake_gl):
    program = ShaderProgram()
    triangle = Triangle(program)
    assert len({program.id, triangle.vao, triangle.vbo}) == 3


def test_render_uses_program_and_draws(fake_gl):
    program = ShaderProgram()
    triangle = Triangle(program)
    fake_gl.calls.clear()
    triangle.render()
    assert fake_gl.calls == [
        ("glUseProgram", (program.id,)),
        ("glBindVertexArray", (triangle.vao,)),
        ("glDrawArrays", (GL_TRIANGLES, 0, 3)),
    ]


def write_asset(base: Path, relative: str, text: str) -> None:
    path = base / "assets" / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)


def test_from_assets_builds_program_from_shader_files(fake_gl, tmp_path):
    write_asset(tmp_path, "shaders/triangle.vert.glsl", "vert text")
    write_asset(tmp_path, "shaders/triangle.frag.glsl", "frag text")
    triangle = Triangle.from_assets(tmp_path)

    assert fake_gl.calls_to("glCreateShader") == [(GL_VERTEX_SHADER,), (GL_FRAGMENT_SHADER,)]
    assert [args[1] for args in fake_gl.calls_to("glShaderSource")] == ["vert text", "frag text"]
    assert fake_gl.calls_to("glLinkProgram") == [(triangle.shader_program.id,)]


def test_from_assets_missing_shader_raises(fake_gl, tmp_path):
    write_asset(tmp_path, "shaders/triangle.vert.glsl", "vert text")
    with pytest.raises(FileNotFoundError):
        Triangle.from_assets(tmp_path)
    assert fake_gl.calls_to("glGenVertexArrays") == []