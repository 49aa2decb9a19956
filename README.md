# purpengine

A small layered game engine. An application opens a pyglet window, turns
window, keyboard and mouse activity into engine events, hands those events to
script hooks and to a stack of layers, and drives layers every frame with a
clamped timestep.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Running the sample game

```
untitled-game
```

This opens a 1280×720 window titled "Untitled Game". Its `TestAppLayer`
accumulates elapsed time, tracks the cursor, remembers the last key pressed,
converts each mouse click into normalised, aspect-corrected coordinates, draws
a short greeting label and prints `Window Closed!` when the window is closed.

## Modules

- `purpengine.events` — `EventType`, the event dataclasses
  (`KeyPressedEvent`, `KeyReleasedEvent`, `MouseMovedEvent`,
  `MouseScrolledEvent`, `MouseButtonPressedEvent`, `MouseButtonReleasedEvent`,
  `WindowCloseEvent`, `WindowResizeEvent`), the flat `ScriptEvent` record,
  `EventDispatcher` and the FIFO `EventQueue`.
  `EventDispatcher(event).dispatch(EventClass, handler)` calls the handler only
  when the event is of that class and not yet handled; the handler's result
  becomes `event.handled`.
- `purpengine.codes` — `Key` and `MouseButton` integer enums (GLFW numbering).
- `purpengine.layers` — `Layer` with hooks `on_attach`, `on_detach`,
  `on_event`, `on_update`, `on_render`, `on_imgui_render`, and `LayerStack`.
  `push_layer` places a layer above the other layers but below every overlay;
  `push_overlay` places it on top; `pop_layer`, `pop_overlay` and
  `replace_layer` do nothing when the layer is not in the stack.
- `purpengine.scripting` — `ScriptEngine`, `ScriptVM`, `register_all` and the
  helpers `to_script_event`, `mark_handled`, `is_key_pressed`,
  `is_key_released`.
- `purpengine.window` — `WindowSpecification` and `Window`, a pyglet window
  that reports events through a callback. Mouse positions are measured from
  the top-left corner.
- `purpengine.application` — `ApplicationSpecification`, `Application` and
  `run_application`.
- `purpengine.input` — `is_key_pressed`, `is_mouse_button_pressed`,
  `get_mouse_position`, `get_mouse_x`, `get_mouse_y`, all read from the
  current application's window.
- `purpengine.glutils` — readable names for OpenGL debug-output sources, types
  and severities, and `format_debug_message`, which returns `None` for
  severities below medium.
- `purpengine.logger` — `init()` sets up the `PURP`, `CLIENT` and `SERVER`
  loggers at trace level, writing to standard output (coloured on a terminal);
  `engine_logger()`, `client_logger()` and `server_logger()` return them.

## Writing your own application

```python
from purpengine.application import Application, ApplicationSpecification, run_application
from purpengine.codes import Key
from purpengine.events import EventDispatcher, KeyPressedEvent
from purpengine.layers import Layer


class GameLayer(Layer):
    def __init__(self):
        super().__init__("GameLayer")
        self.time = 0.0

    def on_event(self, event):
        EventDispatcher(event).dispatch(KeyPressedEvent, self._on_key)

    def _on_key(self, event):
        if event.keycode == Key.ESCAPE:
            Application.get().stop()
            return True
        return False

    def on_update(self, ts):
        self.time += ts


def make_app():
    app = Application(ApplicationSpecification(name="My Game"))
    app.push_layer(GameLayer())
    return app


if __name__ == "__main__":
    run_application(make_app)
```

If the window specification has no title, the application name is used.
Each frame, `run` polls the window, processes queued events (scripts first,
then layers from the top of the stack down until one marks the event
handled), stops if the window asked to close, and otherwise calls
`on_update`, `on_render` and `on_imgui_render` on every layer before
presenting the frame. The timestep is clamped between 0.001 and 0.1 seconds.
`run_application` initialises the loggers, builds the application, runs it
and always calls `close()` afterwards. `Application` is also a context
manager that closes on exit.

## Scripts

A script is a Python callable that receives the `purp` table (a dict) and
stores its hooks in it under `start`, `update` and `onevent`:

```python
def script(purp):
    def onevent(evt):
        if purp["event"]["is_key_pressed"](evt, purp["key"]["ESCAPE"]):
            purp["clientlog"]["info"]("quitting")
            purp["quit"]()
            purp["event"]["mark_handled"](evt)

    purp["onevent"] = onevent


app = Application(ApplicationSpecification(name="My Game"), script=script)
```

The table also holds `event` (event type numbers by name, e.g.
`purp["event"]["KeyPressed"]`, plus the helpers above), `input` (polling
functions), `key` and `mouse` constants, `clientlog` and `serverlog`
(`trace`, `info`, `warn`, `error`) and `quit`. The `start` hook runs when the
script engine is initialised. An exception raised while the script itself
runs is logged rather than raised. Setting `handled` to `True` in the event
table marks the engine event as handled.

## What it does not do

The engine does no rendering of its own: there are no shaders, textures,
framebuffers or immediate-mode UI. `on_render` and `on_imgui_render` are
simply called every frame for layers to draw what they like, and scripts
are Python callables, not files loaded from disk.