[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zeroengine"
version = "0.1.0"
description = "A small OpenGL rendering engine that opens a window and draws a shaded triangle."
requires-python = ">=3.10"
keywords = ["opengl", "rendering", "engine", "shaders", "graphics", "pyglet"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
zeroengine = "zeroengine.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["zeroengine"]

[tool.pytest.ini_options]
addopts = "-ra"
