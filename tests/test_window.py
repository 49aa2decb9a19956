import pytest

from purpengine.codes import Key, MouseButton
from purpengine.events import (
    KeyPressedEvent,
    KeyReleasedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowCloseEvent,
    WindowResizeEvent,
)
from purpengine.window import UNKNOWN_KEY, Window, WindowSpecification


class FakeNative:
    def __init__(self, spec):
        self.spec = spec
        self.width = spec.width
        self.height = spec.height
        self.handlers = {}
        self.pending = []
        self.flips = 0
        self.closed = False

    def push_handlers(self, **handlers):
        self.handlers.update(handlers)

    def fire(self, name, *args):
        return self.handlers[name](*args)

    def dispatch_events(self):
        for name, args in self.pending:
            self.fire(name, *args)
        self.pending.clear()

    def flip(self):
        self.flips += 1

    def close(self):
        self.closed = True

    def get_framebuffer_size(self):
        return self.width * 2, self.height * 2


@pytest.fixture
def window():
    received = []
    win = Window(
        WindowSpecification(title="demo", width=640, height=720),
        received.append,
        native_factory=FakeNative,
    )
    win.create()
    win.received = received
    return win


def test_default_specification_matches_source():
    spec = WindowSpecification()
    assert (spec.title, spec.width, spec.height, spec.vsync, spec.resizable) == (
        None,
        1280,
        720,
        True,
        True,
    )


def test_create_hands_spec_to_factory(window):
    assert window.native.spec.title == "demo"
    assert window.native.spec.width == 640


def test_key_press_and_release(window):
    window.native.fire("on_key_press", ord("a"), 0)
    assert window.is_key_down(Key.A)
    window.native.fire("on_key_release", ord("a"), 0)
    assert not window.is_key_down(Key.A)
    assert window.received == [KeyPressedEvent(Key.A, False), KeyReleasedEvent(Key.A)]


def test_unknown_key_reports_unknown_code(window):
    window.native.fire("on_key_press", 0x1234567, 0)
    assert window.received[0].keycode == UNKNOWN_KEY


def test_escape_is_consumed_and_mapped(window):
    assert window.native.fire("on_key_press", 0xFF1B, 0) is True
    assert window.received == [KeyPressedEvent(Key.ESCAPE, False)]
    assert not window.should_close()


def test_mouse_motion_is_measured_from_top(window):
    window.native.fire("on_mouse_motion", 30, 700, 0, 0)
    assert window.mouse_position() == (30.0, 20.0)
    assert window.received == [MouseMovedEvent(30.0, 20.0)]


def test_mouse_drag_moves_cursor(window):
    window.native.fire("on_mouse_drag", 5, 720, 1, 1, 1, 0)
    assert window.mouse_position() == (5.0, 0.0)


def test_mouse_buttons_are_mapped(window):
    window.native.fire("on_mouse_press", 0, 0, 4, 0)
    assert window.is_mouse_button_down(MouseButton.RIGHT)
    window.native.fire("on_mouse_release", 0, 0, 4, 0)
    assert not window.is_mouse_button_down(MouseButton.RIGHT)
    assert window.received == [
        MouseButtonPressedEvent(MouseButton.RIGHT),
        MouseButtonReleasedEvent(MouseButton.RIGHT),
    ]


def test_scroll_and_resize(window):
    window.native.fire("on_mouse_scroll", 0, 0, 1.5, -2.0)
    window.native.fire("on_resize", 800, 600)
    assert window.received == [MouseScrolledEvent(1.5, -2.0), WindowResizeEvent(800, 600)]


def test_close_request(window):
    assert not window.should_close()
    assert window.native.fire("on_close") is True
    assert window.should_close()
    assert window.received == [WindowCloseEvent()]


def test_poll_events_dispatches_pending(window):
    window.native.pending.append(("on_resize", (10, 20)))
    window.poll_events()
    assert window.received == [WindowResizeEvent(10, 20)]


def test_update_flips(window):
    window.update()
    window.update()
    assert window.native.flips == 2


def test_framebuffer_size_comes_from_native(window):
    width, height = window.native.get_framebuffer_size()
    assert window.framebuffer_size() == (float(width), float(height))


def test_destroy_closes_native_once(window):
    native = window.native
    window.destroy()
    window.destroy()
    assert native.closed
    assert window.native is None
    with pytest.raises(RuntimeError):
        window.update()


def test_uncreated_window_raises():
    win = Window(native_factory=FakeNative)
    with pytest.raises(RuntimeError):
        win.framebuffer_size()
    with pytest.raises(RuntimeError):
        win.poll_events()


def test_create_twice_raises(window):
    with pytest.raises(RuntimeError):
        window.create()


def test_failing_factory_raises_runtime_error():
    def broken(spec):
        raise OSError("no display")

    win = Window(native_factory=broken)
    with pytest.raises(RuntimeError, match="Failed to create window"):
        win.create()
    assert win.native is None