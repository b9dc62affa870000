"""Loadable resources identified by a guid and tracking their dependencies."""

from __future__ import annotations


class Resource:
    """A resource whose payload is built from raw bytes by ``factory``."""

    def __init__(self, guid, factory):
        self.guid = guid
        self.dependencies = []
        self.factory = factory
        self.data = None

    def __repr__(self):
        state = "loaded" if self.loaded else "unloaded"
        return f"<Resource {self.guid!r} {state}>"

    @property
    def loaded(self):
        """True while a payload is held."""
        return self.data is not None

    def load(self, data):
        """Build the payload from ``data``, replacing any previous one."""
        self.data = self.factory(data)
        return True

    def unload(self):
        """Drop the payload."""
        self.data = None
        return True