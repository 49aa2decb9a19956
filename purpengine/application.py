"""The application: window, event queue, layers, scripts and the main loop."""

from __future__ import annotations

import time
from dataclasses import dataclass, field, replace
from typing import Callable, ClassVar, Optional, Tuple, TypeVar

from purpengine import logger
from purpengine.events import EventQueue
from purpengine.layers import Layer, LayerStack
from purpengine.scripting import Script, ScriptEngine
from purpengine.window import NativeFactory, Window, WindowSpecification

_START = time.perf_counter()

_MIN_TIMESTEP = 0.001
_MAX_TIMESTEP = 0.1

L = TypeVar("L", bound=Layer)


@dataclass
class ApplicationSpecification:
    """Name of the application and the window it opens."""

    name: str = "PurpEngine Application"
    window_spec: WindowSpecification = field(default_factory=WindowSpecification)


class Application:
    """Owns the window and layers and runs the frame loop.

    Only one application is current at a time; :meth:`get` returns it.
    """

    _instance: ClassVar[Optional["Application"]] = None

    def __init__(
        self,
        spec: Optional[ApplicationSpecification] = None,
        *,
        script: Optional[Script] = None,
        native_factory: Optional[NativeFactory] = None,
    ) -> None:
        spec = spec if spec is not None else ApplicationSpecification()
        window_spec = spec.window_spec
        title = window_spec.title if window_spec.title is not None else spec.name
        self.spec = replace(spec, window_spec=replace(window_spec, title=title))

        Application._instance = self
        self.layers = LayerStack()
        self.running = False
        self._events = EventQueue()
        self.window = Window(
            self.spec.window_spec, self._events.push, native_factory=native_factory
        )
        try:
            self.window.create()
            from purpengine import input as input_api

            self.script_engine = ScriptEngine(script, quit=self.stop, input_source=input_api)
            self.script_engine.init()
        except BaseException:
            self.window.destroy()
            Application._instance = None
            raise

    @staticmethod
    def get() -> "Application":
        """The current application."""
        if Application._instance is None:
            raise RuntimeError("there is no running application")
        return Application._instance

    @staticmethod
    def get_time() -> float:
        """Seconds since the engine was loaded."""
        return time.perf_counter() - _START

    def run(self) -> None:
        """Run frames until stopped or the window asks to close."""
        self.running = True
        last_time = self.get_time()

        while self.running:
            self.window.poll_events()
            self.process_events()

            if self.window.should_close():
                self.stop()
                break

            current_time = self.get_time()
            timestep = min(max(current_time - last_time, _MIN_TIMESTEP), _MAX_TIMESTEP)
            last_time = current_time

            self.script_engine.on_update(timestep)
            for layer in self.layers:
                layer.on_update(timestep)
            for layer in self.layers:
                layer.on_render()
            for layer in self.layers:
                layer.on_imgui_render()

            self.window.update()

    def stop(self) -> None:
        self.running = False

    def push_layer(self, layer: L) -> L:
        self.layers.push_layer(layer)
        return layer

    def push_overlay(self, overlay: L) -> L:
        self.layers.push_overlay(overlay)
        return overlay

    def replace_layer(self, old_layer: Layer, new_layer: Layer) -> None:
        self.layers.replace_layer(old_layer, new_layer)

    def process_events(self) -> None:
        """Hand queued events to scripts, then to layers from the top down."""
        while self._events:
            event = self._events.pop()
            self.script_engine.on_event(event)
            for layer in reversed(self.layers):
                layer.on_event(event)
                if event.handled:
                    break

    def framebuffer_size(self) -> Tuple[float, float]:
        return self.window.framebuffer_size()

    def close(self) -> None:
        """Shut down scripts, destroy the window and release the current slot."""
        self.script_engine.shutdown()
        self.window.destroy()
        if Application._instance is self:
            Application._instance = None

    def __enter__(self) -> "Application":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def run_application(factory: Callable[[], Application]) -> int:
    """Set up logging, build the application, run it and tear it down."""
    logger.init()
    logger.engine_logger().info("Engine logger initialized!")
    logger.client_logger().info("Client logger initialized!")
    logger.server_logger().info("Server logger initialized!")

    app = factory()
    try:
        app.run()
    finally:
        app.close()
    return 0