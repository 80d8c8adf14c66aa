[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "diomanim"
version = "0.1.0"
description = "Scene graph, shapes, LaTeX-style math layout, glyph atlas and playback state for programmatic animations"
requires-python = ">=3.10"
keywords = ["animation", "scene graph", "geometry", "math layout", "glyph atlas", "latex"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["diomanim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
