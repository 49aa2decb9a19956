"""A small sample game built on the engine."""

from __future__ import annotations

import argparse
from typing import Any, List, Optional, Tuple

from purpengine.application import Application, ApplicationSpecification, run_application
from purpengine.events import (
    Event,
    EventDispatcher,
    KeyPressedEvent,
    MouseButtonPressedEvent,
    MouseMovedEvent,
    WindowCloseEvent,
)
from purpengine.layers import Layer
from purpengine.window import WindowSpecification


class TestAppLayer(Layer):
    """Game layer that tracks time and the cursor and reacts to input."""

    __test__ = False

    def __init__(self) -> None:
        super().__init__("TestAppLayer")
        self.time = 0.0
        self.mouse_position: Tuple[float, float] = (0.0, 0.0)
        self.last_click: Optional[Tuple[float, float]] = None
        self.last_key: Optional[int] = None
        self.close_requested = False
        self._label: Any = None
        print("Created new TestAppLayer!")

    def on_event(self, event: Event) -> None:
        dispatcher = EventDispatcher(event)
        dispatcher.dispatch(KeyPressedEvent, self._on_key_pressed)
        dispatcher.dispatch(MouseButtonPressedEvent, self._on_mouse_button_pressed)
        dispatcher.dispatch(MouseMovedEvent, self._on_mouse_moved)
        dispatcher.dispatch(WindowCloseEvent, self._on_window_closed)

    def on_update(self, ts: float) -> None:
        self.time += ts

    def on_render(self) -> None:
        """The scene pass draws nothing of its own; only the frame is counted."""
        super().on_render()

    def on_imgui_render(self) -> None:
        """Draw the layer's greeting panel."""
        if self._label is None:
            import pyglet

            self._label = pyglet.text.Label(
                "Test App Layer: Hello there!", x=10, y=10, font_size=14
            )
        self._label.draw()

    def _on_key_pressed(self, event: KeyPressedEvent) -> bool:
        self.last_key = event.keycode
        return False

    def _on_mouse_button_pressed(self, event: MouseButtonPressedEvent) -> bool:
        fb_width, fb_height = Application.get().framebuffer_size()
        aspect_ratio = fb_width / fb_height
        mouse_x, mouse_y = self.mouse_position
        x = (mouse_x / fb_width) * 2.0 - 1.0
        y = (mouse_y / fb_height) * 2.0 - 1.0
        self.last_click = (x * aspect_ratio, -y + 0.7)
        return False

    def _on_mouse_moved(self, event: MouseMovedEvent) -> bool:
        self.mouse_position = (event.mouse_x, event.mouse_y)
        return False

    def _on_window_closed(self, event: WindowCloseEvent) -> bool:
        self.close_requested = True
        print("Window Closed!")
        return False


class TestApp(Application):
    """The sample game application."""

    __test__ = False

    def __init__(self, spec: ApplicationSpecification, **kwargs: Any) -> None:
        super().__init__(spec, **kwargs)
        self.game_layer = self.push_layer(TestAppLayer())
        print(f"Current layer debug name: {self.game_layer.name}")

    def close(self) -> None:
        super().close()
        print("Sandbox destroyed")


def create_application() -> TestApp:
    """Build the game with its window settings."""
    spec = ApplicationSpecification(
        name="Untitled Game",
        window_spec=WindowSpecification(width=1280, height=720),
    )
    return TestApp(spec)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="untitled-game", description="Run the sample game.")
    parser.parse_args(argv)
    return run_application(create_application)


if __name__ == "__main__":
    raise SystemExit(main())