"""Fixed-function pipeline state applied at the start of a render pass."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from strafe.gl_enums import GL


class GLCommand(NamedTuple):
    """One OpenGL call: the function name and its arguments."""

    function: str
    args: tuple


def _toggle(enabled, capability):
    return GLCommand("glEnable" if enabled else "glDisable", (capability,))


@dataclass
class RenderState:
    """Culling, depth, blending, scissor and polygon-mode settings."""

    cull_face_enabled: bool = False
    cull_face_mode: GL = GL.BACK
    front_face: GL = GL.CCW

    depth_test_enabled: bool = False
    depth_func: GL = GL.LESS

    blend_enabled: bool = False
    blend_src_factor: GL = GL.ONE
    blend_dst_factor: GL = GL.ZERO
    blend_equation: GL = GL.FUNC_ADD

    scissor_test_enabled: bool = False

    wireframe_enabled: bool = False

    def commands(self):
        """Return, in order, the OpenGL calls that put this state in effect."""
        polygon_mode = GL.LINE if self.wireframe_enabled else GL.FILL
        return [
            _toggle(self.depth_test_enabled, GL.DEPTH_TEST),
            _toggle(self.cull_face_enabled, GL.CULL_FACE),
            _toggle(self.blend_enabled, GL.BLEND),
            GLCommand("glPolygonMode", (GL.FRONT_AND_BACK, polygon_mode)),
            _toggle(self.scissor_test_enabled, GL.SCISSOR_TEST),
            GLCommand("glBlendFunc", (self.blend_src_factor, self.blend_dst_factor)),
            GLCommand("glCullFace", (self.cull_face_mode,)),
            GLCommand("glDepthFunc", (self.depth_func,)),
        ]