"""Engine events, a type-based dispatcher and a FIFO event queue."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, ClassVar, Deque, TypeVar


class EventType(IntEnum):
    """Kinds of event the engine produces."""

    NONE = 0
    WINDOW_CLOSE = 1
    WINDOW_RESIZE = 2
    KEY_PRESSED = 3
    KEY_RELEASED = 4
    MOUSE_BUTTON_PRESSED = 5
    MOUSE_BUTTON_RELEASED = 6
    MOUSE_MOVED = 7
    MOUSE_SCROLLED = 8

    @property
    def label(self) -> str:
        """The CamelCase name of the event type, e.g. ``KeyPressed``."""
        return "".join(part.capitalize() for part in self.name.split("_"))


@dataclass
class Event:
    """Base of every concrete event; only subclasses with a type can be built."""

    event_type: ClassVar[EventType]
    handled: bool = field(default=False, kw_only=True)

    def __post_init__(self) -> None:
        if not hasattr(type(self), "event_type"):
            raise TypeError(f"{type(self).__name__} is abstract and cannot be created")

    @property
    def name(self) -> str:
        return self.event_type.label


@dataclass
class KeyEvent(Event):
    """Base of keyboard events."""

    keycode: int


@dataclass
class KeyPressedEvent(KeyEvent):
    event_type = EventType.KEY_PRESSED

    is_repeat: bool


@dataclass
class KeyReleasedEvent(KeyEvent):
    event_type = EventType.KEY_RELEASED


@dataclass
class MouseMovedEvent(Event):
    event_type = EventType.MOUSE_MOVED

    mouse_x: float
    mouse_y: float


@dataclass
class MouseScrolledEvent(Event):
    event_type = EventType.MOUSE_SCROLLED

    x_offset: float
    y_offset: float


@dataclass
class MouseButtonEvent(Event):
    """Base of mouse button events."""

    button: int


@dataclass
class MouseButtonPressedEvent(MouseButtonEvent):
    event_type = EventType.MOUSE_BUTTON_PRESSED


@dataclass
class MouseButtonReleasedEvent(MouseButtonEvent):
    event_type = EventType.MOUSE_BUTTON_RELEASED


@dataclass
class WindowCloseEvent(Event):
    event_type = EventType.WINDOW_CLOSE


@dataclass
class WindowResizeEvent(Event):
    event_type = EventType.WINDOW_RESIZE

    width: int
    height: int


@dataclass
class ScriptEvent:
    """Flat view of an event as handed to scripts."""

    type: int
    handled: bool = False
    keycode: int = -1
    repeat: bool = False
    mouse_button: int = -1
    mouse_x: float = 0.0
    mouse_y: float = 0.0
    scroll_x: float = 0.0
    scroll_y: float = 0.0
    width: int = 0
    height: int = 0


E = TypeVar("E", bound=Event)


class EventDispatcher:
    """Routes one event to a handler chosen by the event's class."""

    def __init__(self, event: Event) -> None:
        self.event = event

    def dispatch(self, event_class: type[E], handler: Callable[[E], bool]) -> bool:
        """Call ``handler`` if the event is of ``event_class`` and not yet handled.

        The handler's result becomes the event's ``handled`` flag. Returns
        whether the handler was called.
        """
        try:
            wanted = event_class.event_type
        except AttributeError:
            raise TypeError(f"{event_class.__name__} has no event type to dispatch on") from None
        if self.event.event_type != wanted or self.event.handled:
            return False
        self.event.handled = bool(handler(self.event))  # type: ignore[arg-type]
        return True


class EventQueue:
    """First-in, first-out queue of pending events."""

    def __init__(self) -> None:
        self._queue: Deque[Event] = deque()

    def push(self, event: Event) -> None:
        self._queue.append(event)

    def pop(self) -> Event:
        if not self._queue:
            raise IndexError("pop from an empty event queue")
        return self._queue.popleft()

    def clear(self) -> None:
        self._queue.clear()

    def __len__(self) -> int:
        return len(self._queue)

    def __bool__(self) -> bool:
        return bool(self._queue)