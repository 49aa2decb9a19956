"""Polling of keyboard and mouse state through the current application."""

from __future__ import annotations

from typing import Tuple

from purpengine.application import Application


def is_key_pressed(keycode: int) -> bool:
    """Whether the key is held down."""
    return Application.get().window.is_key_down(keycode)


def is_mouse_button_pressed(button: int) -> bool:
    """Whether the mouse button is held down."""
    return Application.get().window.is_mouse_button_down(button)


def get_mouse_position() -> Tuple[float, float]:
    """Cursor position in window coordinates, top-left origin."""
    return Application.get().window.mouse_position()


def get_mouse_x() -> float:
    return get_mouse_position()[0]


def get_mouse_y() -> float:
    return get_mouse_position()[1]