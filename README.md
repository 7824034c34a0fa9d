# zeroengine

A small OpenGL rendering engine built on pyglet. It opens a resizable
window with an OpenGL 3.3 core context, clears each frame to a teal
background (`0.2, 0.3, 0.3, 1.0`) and draws a single triangle with a
vertex and a fragment shader read from an `assets` directory. When the
window is resized, the viewport follows and the new size is logged.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
zeroengine --title "Zero Engine" --width 800 --height 600
```

| Option | Default | Meaning |
| --- | --- | --- |
| `-t`, `--title` | `Zero Engine` | Window title |
| `-w`, `--width` | `800` | Window width (non-negative integer) |
| `-q`, `--height` | `600` | Window height (non-negative integer) |
| `-s`, `--scene` | empty | Scene to load (accepted, but not used) |

Exit status:

- `0` when the window is closed normally (or after `--help`);
- `1` when the engine raises an error, for example a shader that fails
  to compile or link, or a missing shader file;
- `2` for invalid command-line options, and for any other failure such
  as an interrupt.

Log messages are written to standard output in the form
`[logger] [LEVEL] message`.

Setting the environment variable `ZEROENGINE_DEBUG` to anything other
than empty or `0` turns on OpenGL debug output; the driver's debug
messages are then written to the `zeroengine.renderer` log as lines such
as `[high] 7|message|Source: API|Type: Error`.

### Shader files

The triangle's shaders are read from

- `assets/shaders/triangle.vert.glsl`
- `assets/shaders/triangle.frag.glsl`

below the directory that holds the running program (the directory of
`sys.argv[0]`; the current directory if that is empty). Files are read
as UTF-8, and their text ends at the first NUL character, if any.

## Using it as a library

```python
from zeroengine.app import App
from zeroengine.params import AppParams

app = App()
app.init(AppParams(app_title="Demo", window_height=600, window_width=800))
try:
    app.run()
finally:
    app.quit()
```

`AppParams` is a frozen dataclass; a negative width or height raises
`ValueError`. `App.log(priority, message)` writes to the
`zeroengine.app` log at the level matching a `LogPriority`.

The lower-level pieces can be used on their own:

- `zeroengine.fs` — `read_file(file_path, base_dir=None)` reads a file
  below `<base_dir>/assets`; `base_path()` gives the default base
  directory.
- `zeroengine.gl` — a table of OpenGL functions. `load_gl_functions(provider=None)`
  resolves every known function by name through `provider` (by default
  the current pyglet context), `gl_function(name)` returns one,
  `loaded_function_names()` lists what is loaded and
  `unload_gl_functions()` forgets them. Using a function that is not
  loaded raises `GLFunctionsNotLoaded`.
- `zeroengine.shader.Shader(shader_type, source_code)` compiles a shader
  and raises `ShaderCompileError` with the driver's log on failure.
- `zeroengine.shader_program` — `ShaderProgramBuilder(base_dir=None)`
  collects `ShaderProps(shader_type, shader_file)` entries with
  `add_shader`, and `build()` reads, compiles and links them into a
  `ShaderProgram`, raising `ShaderLinkError` when linking fails. The
  program has `use`, `link`, `delete` and the uniform setters
  `set_bool`, `set_int`, `set_uint`, `set_float` and
  `set_vec2i` … `set_vec4f`.
- `zeroengine.triangle.Triangle.from_assets(base_dir=None)` builds the
  triangle; `render()` draws it.
- `zeroengine.window.Window(title, width, height)` opens the window,
  raising `WindowError` if it cannot.
- `zeroengine.renderer.Renderer(window, width, height)` sets up the
  context and offers `clear_screen`, `swap_buffers`,
  `clear_used_shader_program` and `close`; it raises `RendererError` on
  failure. `Renderer.gl_provider` may be set to another function
  resolver, and `Renderer.debug_output` switches debug output on or off.
  `format_debug_message(...)` turns the arguments of an OpenGL debug
  callback into a log line.

`Shader`, `ShaderProgram`, `Window` and `Renderer` are context managers
that release their resources on exit.

## What it does not do

- There is no scene support: `--scene` is parsed and ignored, and the
  only thing ever drawn is the one triangle.
- The shader files are not part of the package; they must be put in the
  `assets/shaders` directory described above before the engine is run.