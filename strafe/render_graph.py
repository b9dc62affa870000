"""Render passes and the dependency graph that orders them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import defaultdict

from strafe.render_state import RenderState


class RenderPass(ABC):
    """One step of the rendering pipeline."""

    def __init__(self, name):
        self.name = name
        self.render_state = RenderState()
        self.window = None
        self.resource_manager = None
        self.entity_manager = None

    def __repr__(self):
        return f"<{type(self).__name__} {self.name!r}>"

    def init(self, window, resource_manager, entity_manager):
        """Give the pass the window and managers it draws with."""
        self.window = window
        self.resource_manager = resource_manager
        self.entity_manager = entity_manager

    @abstractmethod
    def execute(self):
        """Record the pass's draw work."""


class RenderGraph:
    """Render passes run in an order that respects their dependencies."""

    def __init__(self):
        self.window = None
        self.resource_manager = None
        self.entity_manager = None
        self._passes = []
        self._sources = []
        self._dependencies = defaultdict(list)

    @property
    def render_passes(self):
        """The passes in the order ``execute`` runs them."""
        return tuple(self._passes)

    def init(self, window, resource_manager, entity_manager):
        """Initialise every pass and fix the execution order.

        Only passes reachable from a source pass are kept.
        """
        self.window = window
        self.resource_manager = resource_manager
        self.entity_manager = entity_manager
        for render_pass in self._passes:
            render_pass.init(window, resource_manager, entity_manager)
        self._passes = self.topological_sort()

    def execute(self):
        """Run every pass in order."""
        for render_pass in self._passes:
            render_pass.execute()

    def add_render_pass(self, render_pass, source=False):
        """Register ``render_pass``; a source pass starts the pipeline."""
        self._passes.append(render_pass)
        if source:
            self._sources.append(render_pass)
        return render_pass

    def create_dependency(self, before, after):
        """Require ``before`` to run ahead of ``after``."""
        self._dependencies[before].append(after)

    def topological_sort(self):
        """Return the passes reachable from the sources, dependencies first."""
        visited = set()
        finished = []

        def visit(render_pass):
            if render_pass in visited:
                return
            visited.add(render_pass)
            for dependent in self._dependencies.get(render_pass, ()):
                visit(dependent)
            finished.append(render_pass)

        for source in self._sources:
            visit(source)
        finished.reverse()
        return finished