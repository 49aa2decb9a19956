"""A small layered game engine: events, layers, script hooks, logging and a pyglet-windowed main loop."""

__version__ = "0.1.0"