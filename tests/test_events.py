import pytest

from purpengine.events import (
    Event,
    EventDispatcher,
    EventQueue,
    EventType,
    KeyEvent,
    KeyPressedEvent,
    KeyReleasedEvent,
    MouseButtonEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    ScriptEvent,
    WindowCloseEvent,
    WindowResizeEvent,
)


def test_event_type_none_is_zero_and_values_consecutive():
    assert EventType(0) is EventType.NONE
    by_value = [EventType(value) for value in range(len(EventType))]
    assert by_value == list(EventType)
    with pytest.raises(ValueError):
        EventType(len(EventType))


@pytest.mark.parametrize(
    "event, label",
    [
        (WindowCloseEvent(), "WindowClose"),
        (WindowResizeEvent(800, 600), "WindowResize"),
        (KeyPressedEvent(65, False), "KeyPressed"),
        (KeyReleasedEvent(65), "KeyReleased"),
        (MouseButtonPressedEvent(0), "MouseButtonPressed"),
        (MouseButtonReleasedEvent(0), "MouseButtonReleased"),
        (MouseMovedEvent(1.0, 2.0), "MouseMoved"),
        (MouseScrolledEvent(0.0, 1.0), "MouseScrolled"),
    ],
)
def test_event_names(event, label):
    assert event.name == label
    assert event.handled is False


def test_none_label():
    assert EventType(0).label == "None"


@pytest.mark.parametrize("cls, args", [(Event, ()), (KeyEvent, (1,)), (MouseButtonEvent, (1,))])
def test_abstract_events_cannot_be_created(cls, args):
    with pytest.raises(TypeError):
        cls(*args)


def test_event_fields():
    event = KeyPressedEvent(87, True)
    assert event.keycode == 87
    assert event.is_repeat is True
    resize = WindowResizeEvent(1280, 720)
    assert (resize.width, resize.height) == (1280, 720)


def test_dispatch_matching_sets_handled_from_result():
    event = KeyPressedEvent(32, False)
    seen = []
    dispatcher = EventDispatcher(event)
    called = dispatcher.dispatch(KeyPressedEvent, lambda e: seen.append(e) or True)
    assert called is True
    assert seen == [event]
    assert event.handled is True


def test_dispatch_handler_returning_false_leaves_unhandled():
    event = MouseMovedEvent(3.0, 4.0)
    assert EventDispatcher(event).dispatch(MouseMovedEvent, lambda e: False) is True
    assert event.handled is False


def test_dispatch_mismatch_does_not_call():
    event = KeyReleasedEvent(32)
    seen = []
    assert EventDispatcher(event).dispatch(KeyPressedEvent, seen.append) is False
    assert seen == []


def test_dispatch_skips_handled_event():
    event = WindowCloseEvent(handled=True)
    seen = []
    assert EventDispatcher(event).dispatch(WindowCloseEvent, seen.append) is False
    assert seen == []


def test_dispatch_stops_after_first_handler_handles():
    event = KeyPressedEvent(1, False)
    dispatcher = EventDispatcher(event)
    assert dispatcher.dispatch(KeyPressedEvent, lambda e: True) is True
    assert dispatcher.dispatch(KeyPressedEvent, lambda e: True) is False


def test_dispatch_on_abstract_class_raises():
    with pytest.raises(TypeError):
        EventDispatcher(KeyPressedEvent(1, False)).dispatch(KeyEvent, lambda e: True)


def test_queue_is_fifo():
    queue = EventQueue()
    first, second = KeyReleasedEvent(1), WindowCloseEvent()
    queue.push(first)
    queue.push(second)
    assert len(queue) == 2
    assert queue.pop() is first
    assert queue.pop() is second
    assert not queue


def test_queue_bool_and_clear():
    queue = EventQueue()
    assert bool(queue) is False
    queue.push(WindowCloseEvent())
    assert bool(queue) is True
    queue.clear()
    assert len(queue) == 0


def test_queue_pop_empty_raises():
    with pytest.raises(IndexError):
        EventQueue().pop()


def test_script_event_defaults():
    event = ScriptEvent(type=EventType.KEY_PRESSED)
    assert event.keycode == -1
    assert event.mouse_button == -1
    assert event.handled is False
    assert event.repeat is False
    assert (event.mouse_x, event.scroll_y, event.width) == (0.0, 0.0, 0)