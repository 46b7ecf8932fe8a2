[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "friendlyjam"
version = "0.1.0"
description = "Window-free core of a two-player cooperative room puzzle game: layout, widgets, UI state, geometry and the lobby protocol"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "puzzle", "ui", "layout", "immediate-mode", "multiplayer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["friendlyjam"]

[tool.pytest.ini_options]
addopts = "-ra"
