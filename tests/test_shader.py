import pytest

from zeroengine.gl import (
    GL_COMPILE_STATUS,
    GL_FRAGMENT_SHADER,
    GL_VERTEX_SHADER,
    GLFunctionsNotLoaded,
    load_gl_functions,
    unload_gl_functions,
)
from zeroengine.shader import Shader, ShaderCompileError

SOURCE = "#version 330 core\nvoid main() {}\n"


class FakeGL:
    def __init__(self, compiles=True, log="syntax error", next_id=7):
        self.compiles = compiles
        self.log = log
        self.next_id = next_id
        self.created = []
        self.sources = {}
        self.compiled = []
        self.queried = []
        self.log_lengths = []
        self.deleted = []

    def glCreateShader(self, shader_type):
        self.created.append(shader_type)
        return self.next_id

    def glShaderSource(self, shader, source):
        self.sources[shader] = source

    def glCompileShader(self, shader):
        self.compiled.append(shader)

    def glGetShaderiv(self, shader, pname):
        self.queried.append(pname)
        return 1 if self.compiles else 0

    def glGetShaderInfoLog(self, shader, max_length):
        self.log_lengths.append(max_length)
        return self.log

    def glDeleteShader(self, shader):
        self.deleted.append(shader)


@pytest.fixture
def fake_gl():
    fake = FakeGL()
    load_gl_functions(lambda name: getattr(fake, name, None))
    yield fake
    unload_gl_functions()


def test_shader_compiles(fake_gl):
    shader = Shader(GL_VERTEX_SHADER, SOURCE)
    assert shader.id == fake_gl.next_id
    assert shader.shader_type == GL_VERTEX_SHADER
    assert shader.source_code == SOURCE
    assert fake_gl.created == [GL_VERTEX_SHADER]
    assert fake_gl.sources == {fake_gl.next_id: SOURCE}
    assert fake_gl.compiled == [fake_gl.next_id]
    assert fake_gl.queried == [GL_COMPILE_STATUS]


def test_compile_failure_raises_with_log(fake_gl):
    fake_gl.compiles = False
    with pytest.raises(ShaderCompileError) as info:
        Shader(GL_FRAGMENT_SHADER, SOURCE)
    assert info.value.log == fake_gl.log
    assert str(info.value) == fake_gl.log
    assert fake_gl.log_lengths == [512]


def test_delete_releases_once(fake_gl):
    shader = Shader(GL_VERTEX_SHADER, SOURCE)
    shader.delete()
    shader.delete()
    assert fake_gl.deleted == [fake_gl.next_id]
    assert shader.id == 0


def test_context_manager_deletes(fake_gl):
    with Shader(GL_FRAGMENT_SHADER, SOURCE) as shader:
        assert shader.id == fake_gl.next_id
    assert fake_gl.deleted == [fake_gl.next_id]


def test_zero_id_is_not_deleted(fake_gl):
    fake_gl.next_id = 0
    shader = Shader(GL_VERTEX_SHADER, SOURCE)
    assert shader.id == 0
    shader.delete()
    assert shader.id == 0
    assert fake_gl.deleted == []


def test_shader_needs_loaded_functions():
    unload_gl_functions()
    with pytest.raises(GLFunctionsNotLoaded):
        Shader(GL_VERTEX_SHADER, SOURCE)