"""Ordered collection of layers with overlays kept above regular layers."""

from __future__ import annotations


class LayerStack:
    """Layers sit in front of the insertion point, overlays behind it."""

    def __init__(self):
        self._layers = []
        self._insert_index = 0

    def init(self):
        """Initialise every layer, bottom to top."""
        for layer in self._layers:
            layer.init()

    def shutdown(self):
        """Shut every layer down, bottom to top."""
        for layer in self._layers:
            layer.shutdown()

    def push_layer(self, layer):
        """Add a layer above the other layers but below every overlay."""
        self._layers.insert(self._insert_index, layer)
        self._insert_index += 1

    def push_overlay(self, overlay):
        """Add an overlay on top of everything."""
        self._layers.append(overlay)

    @staticmethod
    def _find(items, target):
        return next((i for i, item in enumerate(items) if item is target), None)

    def pop_layer(self, layer):
        """Shut down and remove ``layer`` if it is among the regular layers."""
        position = self._find(self._layers[: self._insert_index], layer)
        if position is None:
            return
        layer.shutdown()
        del self._layers[position]
        self._insert_index -= 1

    def pop_overlay(self, overlay):
        """Shut down and remove ``overlay`` if it is among the overlays."""
        position = self._find(self._layers[self._insert_index :], overlay)
        if position is None:
            return
        overlay.shutdown()
        del self._layers[self._insert_index + position]

    def __iter__(self):
        return iter(list(self._layers))

    def __reversed__(self):
        return reversed(list(self._layers))

    def __len__(self):
        return len(self._layers)