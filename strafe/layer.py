"""Base class for application layers driven once per frame."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Layer(ABC):
    """A unit of per-frame work that can be enabled, disabled and fed events."""

    def __init__(self, name):
        self.debug_name = name
        self.enabled = True
        self.last_dt = 0.0
        self.elapsed = 0.0
        self.last_event = None

    def __repr__(self):
        state = "enabled" if self.enabled else "disabled"
        return f"<{type(self).__name__} {self.debug_name!r} {state}>"

    @abstractmethod
    def init(self):
        """Prepare the layer before the first frame."""

    @abstractmethod
    def shutdown(self):
        """Release whatever the layer holds."""

    def pre_update(self, dt):
        """Hook run before ``update``; by default records the frame's time step."""
        self.last_dt = dt

    @abstractmethod
    def update(self, dt):
        """Advance the layer by ``dt`` seconds."""

    def post_update(self, dt):
        """Hook run after ``update``; by default adds ``dt`` to the elapsed time."""
        self.elapsed += dt

    def on_event(self, event):
        """Receive a window or input event; by default it is recorded and left unhandled."""
        self.last_event = event
        return False