"""Table of the OpenGL entry points the engine uses.

Functions are resolved by name through a provider and then looked up with
:func:`gl_function`. Loaded functions take and return plain Python values:

* ``glShaderSource(shader, source)`` takes the source text;
* ``glGetShaderiv``/``glGetProgramiv(obj, pname)`` return the integer;
* ``glGetShaderInfoLog``/``glGetProgramInfoLog(obj, max_length)`` return text;
* ``glGenBuffers``/``glGenVertexArrays(count)`` return a list of names;
* ``glBufferData(target, floats, usage)`` takes a sequence of floats;
* ``glGetUniformLocation(program, name)`` takes the name as text;
* ``glGetString(name)`` returns text;
* ``glDebugMessageCallback(callback)`` takes
  ``callback(source, type, id, severity, message)``;
* ``glDebugMessageControl(source, type, severity, enabled)``.

All other functions take the same scalar arguments as in OpenGL.
"""

from __future__ import annotations

import itertools
from typing import Any, Callable, Dict, List, Optional

GLFunction = Callable[..., Any]
Provider = Callable[[str], Optional[GLFunction]]

GL_FALSE = 0
GL_TRUE = 1
GL_DONT_CARE = 0x1100
GL_TRIANGLES = 0x0004
GL_FLOAT = 0x1406
GL_COLOR_BUFFER_BIT = 0x4000
GL_VENDOR = 0x1F00
GL_VERSION = 0x1F02
GL_SHADING_LANGUAGE_VERSION = 0x8B8C
GL_ARRAY_BUFFER = 0x8892
GL_STATIC_DRAW = 0x88E4
GL_FRAGMENT_SHADER = 0x8B30
GL_VERTEX_SHADER = 0x8B31
GL_COMPILE_STATUS = 0x8B81
GL_LINK_STATUS = 0x8B82

GL_DEBUG_OUTPUT = 0x92E0
GL_DEBUG_OUTPUT_SYNCHRONOUS = 0x8242
GL_DEBUG_SOURCE_API = 0x8246
GL_DEBUG_SOURCE_WINDOW_SYSTEM = 0x8247
GL_DEBUG_SOURCE_SHADER_COMPILER = 0x8248
GL_DEBUG_SOURCE_THIRD_PARTY = 0x8249
GL_DEBUG_SOURCE_APPLICATION = 0x824A
GL_DEBUG_SOURCE_OTHER = 0x824B
GL_DEBUG_TYPE_ERROR = 0x824C
GL_DEBUG_TYPE_DEPRECATED_BEHAVIOR = 0x824D
GL_DEBUG_TYPE_UNDEFINED_BEHAVIOR = 0x824E
GL_DEBUG_TYPE_PORTABILITY = 0x824F
GL_DEBUG_TYPE_PERFORMANCE = 0x8250
GL_DEBUG_TYPE_OTHER = 0x8251
GL_DEBUG_TYPE_MARKER = 0x8268
GL_DEBUG_TYPE_PUSH_GROUP = 0x8269
GL_DEBUG_TYPE_POP_GROUP = 0x826A
GL_DEBUG_SEVERITY_NOTIFICATION = 0x826B
GL_DEBUG_SEVERITY_HIGH = 0x9146
GL_DEBUG_SEVERITY_MEDIUM = 0x9147
GL_DEBUG_SEVERITY_LOW = 0x9148

EXTENSION_FUNCTION_NAMES = (
    "glDebugMessageCallback",
    "glDebugMessageControl",
    "glGenBuffers",
    "glBindBuffer",
    "glBufferData",
    "glCreateShader",
    "glDeleteShader",
    "glCompileShader",
    "glShaderSource",
    "glGetShaderiv",
    "glGetShaderInfoLog",
    "glDeleteProgram",
    "glCreateProgram",
    "glGetProgramiv",
    "glGetProgramInfoLog",
    "glLinkProgram",
    "glAttachShader",
    "glDetachShader",
    "glUseProgram",
    "glVertexAttribPointer",
    "glEnableVertexAttribArray",
    "glGenVertexArrays",
    "glBindVertexArray",
    "glGetUniformLocation",
    "glUniform1f",
    "glUniform2f",
    "glUniform3f",
    "glUniform4f",
    "glUniform1i",
    "glUniform2i",
    "glUniform3i",
    "glUniform4i",
    "glUniform1d",
    "glUniform2d",
    "glUniform3d",
    "glUniform4d",
    "glUniform1ui",
    "glUniform2ui",
    "glUniform3ui",
    "glUniform4ui",
)

CORE_FUNCTION_NAMES = (
    "glViewport",
    "glClearColor",
    "glClear",
    "glDrawArrays",
    "glEnable",
    "glGetString",
)

FUNCTION_NAMES = EXTENSION_FUNCTION_NAMES + CORE_FUNCTION_NAMES


class GLFunctionsNotLoaded(RuntimeError):
    """Raised when an OpenGL function is used before it has been loaded."""

    def __init__(self, name: str) -> None:
        super().__init__(f"OpenGL function {name} is not loaded")
        self.name = name


_loaded: Dict[str, GLFunction] = {}


def load_gl_functions(provider: Optional[Provider] = None) -> None:
    """Resolve every known function through ``provider``.

    Without a provider the functions of the current pyglet context are used.
    Names the provider cannot resolve (it returns ``None``) stay unloaded.
    """
    resolve = provider if provider is not None else _pyglet_provider
    resolved = {name: resolve(name) for name in FUNCTION_NAMES}
    _loaded.clear()
    _loaded.update({name: fn for name, fn in resolved.items() if fn is not None})


def unload_gl_functions() -> None:
    """Forget every loaded function."""
    _loaded.clear()


def gl_function(name: str) -> GLFunction:
    """Return the loaded function called ``name``."""
    if name not in FUNCTION_NAMES:
        raise KeyError(f"unknown OpenGL function: {name}")
    try:
        return _loaded[name]
    except KeyError:
        raise GLFunctionsNotLoaded(name) from None


def loaded_function_names() -> List[str]:
    """Names of the functions currently loaded, in load order."""
    return [name for name in FUNCTION_NAMES if name in _loaded]


def _pyglet_provider(name: str) -> Optional[GLFunction]:
    from pyglet import gl as pgl

    raw = getattr(pgl, name, None)
    if raw is None:
        return None
    adapter = _PYGLET_ADAPTERS.get(name)
    return adapter(pgl, raw) if adapter is not None else raw


def _char_array(pgl: Any, text: str) -> Any:
    data = text.encode("utf-8")
    array = (pgl.GLchar * (len(data) + 1))()
    array.value = data
    return array


def _adapt_get_iv(pgl: Any, raw: GLFunction) -> GLFunction:
    def get_iv(obj: int, pname: int) -> int:
        value = pgl.GLint(0)
        raw(obj, pname, value)
        return value.value

    return get_iv


def _adapt_info_log(pgl: Any, raw: GLFunction) -> GLFunction:
    def info_log(obj: int, max_length: int) -> str:
        buffer = (pgl.GLchar * max_length)()
        raw(obj, max_length, None, buffer)
        return buffer.value.decode("utf-8", errors="replace")

    return info_log


def _adapt_shader_source(pgl: Any, raw: GLFunction) -> GLFunction:
    pointer_type = raw.argtypes[2]._type_

    def shader_source(shader: int, source: str) -> None:
        text = _char_array(pgl, source)
        pointers = (pointer_type * 1)(pointer_type(pgl.GLchar.from_buffer(text)))
        raw(shader, 1, pointers, None)

    return shader_source


def _adapt_gen(pgl: Any, raw: GLFunction) -> GLFunction:
    def gen(count: int) -> List[int]:
        names = (pgl.GLuint * count)()
        raw(count, names)
        return list(names)

    return gen


def _adapt_buffer_data(pgl: Any, raw: GLFunction) -> GLFunction:
    def buffer_data(target: int, data: Any, usage: int) -> None:
        values = (pgl.GLfloat * len(data))(*data)
        raw(target, memoryview(values).nbytes, values, usage)

    return buffer_data


def _adapt_uniform_location(pgl: Any, raw: GLFunction) -> GLFunction:
    def uniform_location(program: int, name: str) -> int:
        return raw(program, _char_array(pgl, name))

    return uniform_location


def _adapt_get_string(pgl: Any, raw: GLFunction) -> GLFunction:
    def get_string(name: int) -> str:
        pointer = raw(name)
        if not pointer:
            return ""
        chars = itertools.takewhile(bool, (pointer[i] for i in itertools.count()))
        return bytes(chars).decode("utf-8", errors="replace")

    return get_string


def _adapt_debug_callback(pgl: Any, raw: GLFunction) -> GLFunction:
    callback_type = raw.argtypes[0]
    alive: List[Any] = []

    def set_callback(callback: Callable[[int, int, int, int, str], None]) -> None:
        def trampoline(source, kind, ident, severity, length, message, _user):
            text = message[:length].decode("utf-8", errors="replace") if message else ""
            callback(source, kind, ident, severity, text)

        native = callback_type(trampoline)
        alive[:] = [native]
        raw(native, None)

    return set_callback


def _adapt_debug_control(pgl: Any, raw: GLFunction) -> GLFunction:
    def control(source: int, kind: int, severity: int, enabled: int) -> None:
        raw(source, kind, severity, 0, None, enabled)

    return control


_PYGLET_ADAPTERS: Dict[str, Callable[[Any, GLFunction], GLFunction]] = {
    "glGetShaderiv": _adapt_get_iv,
    "glGetProgramiv": _adapt_get_iv,
    "glGetShaderInfoLog": _adapt_info_log,
    "glGetProgramInfoLog": _adapt_info_log,
    "glShaderSource": _adapt_shader_source,
    "glGenBuffers": _adapt_gen,
    "glGenVertexArrays": _adapt_gen,
    "glBufferData": _adapt_buffer_data,
    "glGetUniformLocation": _adapt_uniform_location,
    "glGetString": _adapt_get_string,
    "glDebugMessageCallback": _adapt_debug_callback,
    "glDebugMessageControl": _adapt_debug_control,
}