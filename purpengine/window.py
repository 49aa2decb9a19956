"""Native window wrapper that turns windowing callbacks into engine events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Set, Tuple

from purpengine.codes import Key, MouseButton
from purpengine.events import (
    Event,
    KeyPressedEvent,
    KeyReleasedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowCloseEvent,
    WindowResizeEvent,
)

UNKNOWN_KEY = -1

_NATIVE_KEY_PAIRS = [
    (32, Key.SPACE),
    (39, Key.APOSTROPHE),
    (44, Key.COMMA),
    (45, Key.MINUS),
    (46, Key.PERIOD),
    (47, Key.SLASH),
    (0xFF1B, Key.ESCAPE),
    (0xFF0D, Key.ENTER),
    (0xFF09, Key.TAB),
    (0xFF08, Key.BACKSPACE),
    (0xFF51, Key.LEFT),
    (0xFF52, Key.UP),
    (0xFF53, Key.RIGHT),
    (0xFF54, Key.DOWN),
    (0xFFE1, Key.LEFT_SHIFT),
    (0xFFE3, Key.LEFT_CONTROL),
    (0xFFE9, Key.LEFT_ALT),
]

# Native (pyglet) key symbols mapped to engine key codes.
_NATIVE_KEYS: Dict[int, int] = {
    **{symbol: int(code) for symbol, code in _NATIVE_KEY_PAIRS},
    **{ord("0") + digit: int(Key.DIGIT_0) + digit for digit in range(10)},
    **{ord("a") + letter: int(Key.A) + letter for letter in range(26)},
}

# Native (pyglet) mouse button bits mapped to engine button codes.
_NATIVE_BUTTONS: Dict[int, int] = {
    1: int(MouseButton.LEFT),
    2: int(MouseButton.MIDDLE),
    4: int(MouseButton.RIGHT),
    8: int(MouseButton.BUTTON_4),
    16: int(MouseButton.BUTTON_5),
}


@dataclass
class WindowSpecification:
    """How a window should be created."""

    title: Optional[str] = None
    width: int = 1280
    height: int = 720
    vsync: bool = True
    resizable: bool = True


NativeFactory = Callable[[WindowSpecification], Any]
EventCallback = Callable[[Event], None]


def _create_pyglet_window(spec: WindowSpecification) -> Any:
    import pyglet

    config = pyglet.gl.Config(
        major_version=4,
        minor_version=6,
        forward_compatible=True,
        debug=True,
        double_buffer=True,
    )
    return pyglet.window.Window(
        width=spec.width,
        height=spec.height,
        caption=spec.title or "",
        resizable=spec.resizable,
        vsync=spec.vsync,
        config=config,
    )


class Window:
    """An OS window that reports input and window changes as engine events."""

    def __init__(
        self,
        spec: Optional[WindowSpecification] = None,
        event_callback: Optional[EventCallback] = None,
        *,
        native_factory: Optional[NativeFactory] = None,
    ) -> None:
        self.spec = spec if spec is not None else WindowSpecification()
        self.event_callback = event_callback
        self._native_factory = native_factory or _create_pyglet_window
        self._native: Any = None
        self._close_requested = False
        self._keys_down: Set[int] = set()
        self._buttons_down: Set[int] = set()
        self._mouse: Tuple[float, float] = (0.0, 0.0)

    @property
    def native(self) -> Any:
        """The underlying native window, or None when not created."""
        return self._native

    def _require_native(self) -> Any:
        if self._native is None:
            raise RuntimeError("window has not been created")
        return self._native

    def create(self) -> None:
        """Open the native window and start listening to its callbacks."""
        if self._native is not None:
            raise RuntimeError("window is already created")
        try:
            native = self._native_factory(self.spec)
        except Exception as error:
            raise RuntimeError("Failed to create window") from error
        native.push_handlers(
            on_close=self._on_close,
            on_resize=self._on_resize,
            on_key_press=self._on_key_press,
            on_key_release=self._on_key_release,
            on_mouse_motion=self._on_mouse_motion,
            on_mouse_drag=self._on_mouse_drag,
            on_mouse_scroll=self._on_mouse_scroll,
            on_mouse_press=self._on_mouse_press,
            on_mouse_release=self._on_mouse_release,
        )
        self._native = native
        self._close_requested = False

    def destroy(self) -> None:
        """Close the native window; safe to call more than once."""
        if self._native is not None:
            self._native.close()
        self._native = None

    def update(self) -> None:
        """Present the frame that was just drawn."""
        self._require_native().flip()

    def poll_events(self) -> None:
        """Process pending native events, which reach the event callback."""
        self._require_native().dispatch_events()

    def framebuffer_size(self) -> Tuple[float, float]:
        width, height = self._require_native().get_framebuffer_size()
        return float(width), float(height)

    def mouse_position(self) -> Tuple[float, float]:
        """Last cursor position, measured from the top-left corner."""
        return self._mouse

    def should_close(self) -> bool:
        return self._close_requested

    def is_key_down(self, keycode: int) -> bool:
        return int(keycode) in self._keys_down

    def is_mouse_button_down(self, button: int) -> bool:
        return int(button) in self._buttons_down

    def _emit(self, event: Event) -> None:
        if self.event_callback is not None:
            self.event_callback(event)

    def _top_down(self, x: float, y: float) -> Tuple[float, float]:
        return float(x), float(self._native.height - y)

    def _on_close(self) -> bool:
        self._close_requested = True
        self._emit(WindowCloseEvent())
        return True

    def _on_resize(self, width: int, height: int) -> None:
        self._emit(WindowResizeEvent(width, height))

    def _on_key_press(self, symbol: int, modifiers: int) -> bool:
        keycode = _NATIVE_KEYS.get(symbol, UNKNOWN_KEY)
        self._keys_down.add(keycode)
        self._emit(KeyPressedEvent(keycode, False))
        return True

    def _on_key_release(self, symbol: int, modifiers: int) -> bool:
        keycode = _NATIVE_KEYS.get(symbol, UNKNOWN_KEY)
        self._keys_down.discard(keycode)
        self._emit(KeyReleasedEvent(keycode))
        return True

    def _on_mouse_motion(self, x: float, y: float, dx: float, dy: float) -> bool:
        self._mouse = self._top_down(x, y)
        self._emit(MouseMovedEvent(*self._mouse))
        return True

    def _on_mouse_drag(
        self, x: float, y: float, dx: float, dy: float, buttons: int, modifiers: int
    ) -> bool:
        return self._on_mouse_motion(x, y, dx, dy)

    def _on_mouse_scroll(self, x: float, y: float, scroll_x: float, scroll_y: float) -> bool:
        self._emit(MouseScrolledEvent(float(scroll_x), float(scroll_y)))
        return True

    def _on_mouse_press(self, x: float, y: float, button: int, modifiers: int) -> bool:
        code = _NATIVE_BUTTONS.get(button)
        if code is not None:
            self._buttons_down.add(code)
            self._emit(MouseButtonPressedEvent(code))
        return True

    def _on_mouse_release(self, x: float, y: float, button: int, modifiers: int) -> bool:
        code = _NATIVE_BUTTONS.get(button)
        if code is not None:
            self._buttons_down.discard(code)
            self._emit(MouseButtonReleasedEvent(code))
        return True