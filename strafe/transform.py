"""Hierarchical transforms and the layer that computes their world matrices."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np

from strafe.layer import Layer

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Transform:
    """Local position, scale and rotation (quaternion w, x, y, z) of an entity.

    Entities form a tree through first-child / next-sibling links.
    """

    local_position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    local_scale: np.ndarray = field(default_factory=lambda: np.ones(3))
    local_rotation: np.ndarray = field(default_factory=lambda: np.array([1.0, 0.0, 0.0, 0.0]))
    model_to_world: np.ndarray = field(default_factory=lambda: np.eye(4))
    parent: object = None
    child: object = None
    sibling: object = None
    dirty: bool = True


def _rotation_matrix(quaternion):
    w, x, y, z = (float(c) for c in quaternion)
    return np.array(
        [
            [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
            [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
            [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
        ]
    )


def local_model_matrix(transform):
    """Return translation * rotation * scale as a 4x4 matrix."""
    translation = np.eye(4)
    translation[:3, 3] = transform.local_position
    rotation = np.eye(4)
    rotation[:3, :3] = _rotation_matrix(transform.local_rotation)
    scale = np.diag([*np.asarray(transform.local_scale, dtype=float), 1.0])
    return translation @ rotation @ scale


class TransformLayer(Layer):
    """Walks the transform tree each frame and refreshes dirty world matrices.

    ``transforms`` maps entity ids to their Transform.
    """

    def __init__(self, transforms):
        super().__init__("TransformLayer")
        self.transforms = transforms
        self.root_entity = None
        self.root_sibling = None
        self._model_stack: list[np.ndarray] = []
        self._dirty_onwards = False

    def init(self):
        """Start from an empty traversal state."""
        self._reset_traversal()

    def update(self, dt):
        """Recompute world matrices of dirty subtrees."""
        if self.root_entity is None:
            return
        self._traverse(self.root_entity)
        if self.root_sibling is not None:
            self._traverse(self.root_sibling)

    def shutdown(self):
        """Drop any leftover traversal state."""
        self._reset_traversal()

    def set_entity_as_root(self, entity_id):
        """Make ``entity_id`` the root of the traversal."""
        self.root_entity = entity_id

    def _reset_traversal(self):
        self._model_stack.clear()
        self._dirty_onwards = False

    def _traverse(self, guid):
        stack = self._model_stack
        while guid is not None:
            transform = self.transforms.get(guid)
            if transform is None:
                logger.error("Entity %s is a child despite not being a transform object", guid)
                return

            dirty_from_here = False
            if not self._dirty_onwards and transform.dirty:
                self._dirty_onwards = True
                dirty_from_here = True

            if self._dirty_onwards:
                local = local_model_matrix(transform)
                model = stack[-1] @ local if stack else local
                stack.append(model)
                transform.model_to_world = model
            else:
                stack.append(transform.model_to_world)

            if transform.child is not None:
                self._traverse(transform.child)

            stack.pop()
            if dirty_from_here:
                self._dirty_onwards = False
            transform.dirty = False

            guid = transform.sibling