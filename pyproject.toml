[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "purpengine"
version = "0.1.0"
description = "A small layered game engine with events, layers, script hooks and a pyglet-windowed main loop"
requires-python = ">=3.10"
keywords = ["game engine", "events", "layers", "scripting", "pyglet"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]
dependencies = ["pyglet"]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
untitled-game = "purpengine.testapp:main"

[tool.hatch.build.targets.wheel]
packages = ["purpengine"]

[tool.pytest.ini_options]
addopts = "-ra"
