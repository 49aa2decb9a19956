"""Script hosting: the ``purp`` table that scripts see, a VM and the engine facade.

Scripts are plain callables that receive the ``purp`` table (a dict). A
script registers its hooks by storing callables under ``start``, ``update``
and ``onevent``, and may use the helpers the engine places in the table:
``purp["event"]``, ``purp["input"]``, ``purp["key"]``, ``purp["mouse"]``,
``purp["clientlog"]``, ``purp["serverlog"]`` and ``purp["quit"]``.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from purpengine.codes import Key, MouseButton
from purpengine.events import (
    Event,
    EventType,
    KeyPressedEvent,
    KeyReleasedEvent,
    MouseButtonEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    ScriptEvent,
    WindowResizeEvent,
)
from purpengine.logger import (
    CLIENT_LOGGER_NAME,
    ENGINE_LOGGER_NAME,
    SERVER_LOGGER_NAME,
    TRACE,
)

ScriptTable = Dict[str, Any]
Script = Callable[[ScriptTable], Any]


def to_script_event(event: Event) -> ScriptEvent:
    """Flatten an engine event into the form handed to scripts."""
    script_event = ScriptEvent(type=int(event.event_type))
    if isinstance(event, KeyPressedEvent):
        script_event.keycode = event.keycode
        script_event.repeat = event.is_repeat
    elif isinstance(event, KeyReleasedEvent):
        script_event.keycode = event.keycode
    elif isinstance(event, MouseButtonEvent):
        script_event.mouse_button = event.button
    elif isinstance(event, MouseMovedEvent):
        script_event.mouse_x = event.mouse_x
        script_event.mouse_y = event.mouse_y
    elif isinstance(event, MouseScrolledEvent):
        script_event.scroll_x = event.x_offset
        script_event.scroll_y = event.y_offset
    elif isinstance(event, WindowResizeEvent):
        script_event.width = event.width
        script_event.height = event.height
    return script_event


def mark_handled(evt: ScriptTable) -> None:
    """Mark a script-side event table as handled."""
    evt["handled"] = True


def is_key_pressed(evt: ScriptTable, keycode: int) -> bool:
    """Whether the event table is a key press of ``keycode``."""
    return evt.get("type") == EventType.KEY_PRESSED and evt.get("keycode", -1) == keycode


def is_key_released(evt: ScriptTable, keycode: int) -> bool:
    """Whether the event table is a key release of ``keycode``."""
    return evt.get("type") == EventType.KEY_RELEASED and evt.get("keycode", -1) == keycode


def _log_table(logger_name: str) -> ScriptTable:
    log = logging.getLogger(logger_name)

    def at(level: int) -> Callable[[str], None]:
        return lambda message: log.log(level, message)

    return {
        "trace": at(TRACE),
        "info": at(logging.INFO),
        "warn": at(logging.WARNING),
        "error": at(logging.ERROR),
    }


def _register_log(purp: ScriptTable) -> None:
    purp["clientlog"] = _log_table(CLIENT_LOGGER_NAME)
    purp["serverlog"] = _log_table(SERVER_LOGGER_NAME)


def _register_events(purp: ScriptTable) -> None:
    table: ScriptTable = {event_type.label: int(event_type) for event_type in EventType}
    table["mark_handled"] = mark_handled
    table["is_key_pressed"] = is_key_pressed
    table["is_key_released"] = is_key_released
    purp["event"] = table


def _no_application() -> None:
    message = "there is no running application to quit"
    logging.getLogger(ENGINE_LOGGER_NAME).error(message)
    raise RuntimeError(message)


def _register_engine(purp: ScriptTable, quit: Optional[Callable[[], Any]]) -> None:
    purp["quit"] = quit if quit is not None else _no_application


def _register_input(purp: ScriptTable, input_source: Any) -> None:
    if input_source is not None:

        def get_mouse_position() -> ScriptTable:
            x, y = input_source.get_mouse_position()
            return {"x": x, "y": y}

        purp["input"] = {
            "is_key_pressed": lambda keycode: bool(input_source.is_key_pressed(keycode)),
            "is_mouse_button_pressed": lambda button: bool(
                input_source.is_mouse_button_pressed(button)
            ),
            "get_mouse_position": get_mouse_position,
            "get_mouse_x": lambda: input_source.get_mouse_x(),
            "get_mouse_y": lambda: input_source.get_mouse_y(),
        }

    purp["key"] = {
        name: int(Key[name])
        for name in ("TAB", "W", "A", "S", "D", "SPACE", "ESCAPE", "BACKSPACE")
    }
    purp["mouse"] = {
        name: int(MouseButton[name])
        for name in ("LEFT", "RIGHT", "MIDDLE", "BUTTON_1", "BUTTON_2")
    }


def register_all(
    purp: ScriptTable,
    quit: Optional[Callable[[], Any]],
    input_source: Any,
) -> ScriptTable:
    """Fill ``purp`` with every engine binding and return it.

    ``quit`` stops the running application; ``input_source`` provides
    ``is_key_pressed``, ``is_mouse_button_pressed``, ``get_mouse_position``,
    ``get_mouse_x`` and ``get_mouse_y``. Without an input source the polling
    functions are left out, while key and mouse constants are still set.
    """
    _register_log(purp)
    _register_events(purp)
    _register_engine(purp, quit)
    _register_input(purp, input_source)
    return purp


class ScriptVM:
    """Holds the ``purp`` table, runs the main script and calls its hooks."""

    def __init__(
        self,
        script: Optional[Script] = None,
        *,
        quit: Optional[Callable[[], Any]] = None,
        input_source: Any = None,
    ) -> None:
        self.purp: ScriptTable = register_all({}, quit, input_source)
        if script is not None:
            try:
                script(self.purp)
            except Exception as error:  # a broken script must not take the engine down
                logging.getLogger(ENGINE_LOGGER_NAME).error("Script error: %s", error)

    def call_start(self) -> None:
        """Call the script's ``start`` hook, if it has one."""
        hook = self.purp.get("start")
        if hook is not None:
            hook()

    def call_update(self, dt: float) -> None:
        """Call the script's ``update`` hook with the timestep, if it has one."""
        hook = self.purp.get("update")
        if hook is not None:
            hook(dt)

    def call_event(self, event: ScriptEvent) -> None:
        """Hand ``event`` to the script's ``onevent`` hook and copy back ``handled``."""
        hook = self.purp.get("onevent")
        if hook is None:
            return
        evt: ScriptTable = {
            "type": event.type,
            "handled": False,
            "keycode": event.keycode,
            "repeat": event.repeat,
            "mouse_button": event.mouse_button,
            "mouse_x": event.mouse_x,
            "mouse_y": event.mouse_y,
            "scroll_x": event.scroll_x,
            "scroll_y": event.scroll_y,
            "width": event.width,
            "height": event.height,
        }
        hook(evt)
        event.handled = evt.get("handled") is True


class ScriptEngine:
    """Owns the script VM and feeds it engine updates and events."""

    def __init__(
        self,
        script: Optional[Script] = None,
        *,
        quit: Optional[Callable[[], Any]] = None,
        input_source: Any = None,
    ) -> None:
        self._script = script
        self._quit = quit
        self._input_source = input_source
        self._vm: Optional[ScriptVM] = None

    @property
    def vm(self) -> ScriptVM:
        if self._vm is None:
            raise RuntimeError("script engine is not initialised; call init() first")
        return self._vm

    def init(self) -> None:
        """Create the VM, run the main script and call its ``start`` hook."""
        self._vm = ScriptVM(self._script, quit=self._quit, input_source=self._input_source)
        self._vm.call_start()

    def shutdown(self) -> None:
        """Drop the VM and everything the script registered."""
        self._vm = None

    def on_start(self) -> None:
        self.vm.call_start()

    def on_update(self, dt: float) -> None:
        self.vm.call_update(dt)

    def on_event(self, event: Event) -> None:
        """Pass ``event`` to the script; mark it handled if the script did."""
        script_event = to_script_event(event)
        self.vm.call_event(script_event)
        if script_event.handled:
            event.handled = True