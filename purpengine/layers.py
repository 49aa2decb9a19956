"""Layers and the ordered stack that holds them."""

from __future__ import annotations

from typing import Iterator, List, Optional

from purpengine.events import Event


class Layer:
    """A unit of per-frame behaviour; subclasses override the hooks they need."""

    def __init__(self, name: str = "Layer") -> None:
        self.name = name
        self.attached = False
        self.frames_rendered = 0

    def on_attach(self) -> None:
        """Called when the layer is added to a stack."""
        self.attached = True

    def on_detach(self) -> None:
        """Called when the layer is removed from a stack."""
        self.attached = False

    def on_event(self, event: Event) -> None:
        """Called when an event is dispatched to this layer."""

    def on_update(self, ts: float) -> None:
        """Called every frame with the timestep in seconds."""

    def on_render(self) -> None:
        """Called every frame for rendering; counts the frames rendered."""
        self.frames_rendered += 1

    def on_imgui_render(self) -> None:
        """Called every frame for immediate-mode UI rendering."""


class LayerStack:
    """Ordered layers: normal layers first, overlays after them."""

    def __init__(self) -> None:
        self._layers: List[Layer] = []
        self._insert_index = 0

    def _find(self, layer: Layer) -> Optional[int]:
        return next((i for i, held in enumerate(self._layers) if held is layer), None)

    def push_layer(self, layer: Layer) -> None:
        """Attach ``layer`` and place it after the other layers, before overlays."""
        layer.on_attach()
        self._layers.insert(self._insert_index, layer)
        self._insert_index += 1

    def push_overlay(self, overlay: Layer) -> None:
        """Attach ``overlay`` and place it on top of everything."""
        overlay.on_attach()
        self._layers.append(overlay)

    def pop_layer(self, layer: Layer) -> None:
        """Detach and remove ``layer``; does nothing if it is not held."""
        index = self._find(layer)
        if index is None:
            return
        layer.on_detach()
        del self._layers[index]
        self._insert_index = max(self._insert_index - 1, 0)

    def pop_overlay(self, overlay: Layer) -> None:
        """Detach and remove ``overlay``; does nothing if it is not held."""
        index = self._find(overlay)
        if index is None:
            return
        overlay.on_detach()
        del self._layers[index]

    def replace_layer(self, old_layer: Layer, new_layer: Layer) -> None:
        """Swap ``old_layer`` for ``new_layer`` in place; does nothing if absent."""
        index = self._find(old_layer)
        if index is None:
            return
        old_layer.on_detach()
        new_layer.on_attach()
        self._layers[index] = new_layer

    def __iter__(self) -> Iterator[Layer]:
        return iter(list(self._layers))

    def __reversed__(self) -> Iterator[Layer]:
        return reversed(list(self._layers))

    def __len__(self) -> int:
        return len(self._layers)