from strafe.gl_enums import GL
from strafe.render_state import GLCommand, RenderState


def test_default_state_disables_everything():
    commands = RenderState().commands()
    toggles = [c for c in commands if c.function in ("glEnable", "glDisable")]
    assert {c.function for c in toggles} == {"glDisable"}
    assert [c.args[0] for c in toggles] == [GL.DEPTH_TEST, GL.CULL_FACE, GL.BLEND, GL.SCISSOR_TEST]


def test_default_state_tail_commands():
    commands = RenderState().commands()
    assert commands[3] == GLCommand("glPolygonMode", (GL.FRONT_AND_BACK, GL.FILL))
    assert commands[-3:] == [
        GLCommand("glBlendFunc", (GL.ONE, GL.ZERO)),
        GLCommand("glCullFace", (GL.BACK,)),
        GLCommand("glDepthFunc", (GL.LESS,)),
    ]


def test_enabled_flags_emit_enable():
    state = RenderState(depth_test_enabled=True, cull_face_enabled=True, blend_enabled=True, scissor_test_enabled=True)
    toggles = [c for c in state.commands() if c.function in ("glEnable", "glDisable")]
    assert {c.function for c in toggles} == {"glEnable"}


def test_wireframe_uses_line_mode():
    commands = RenderState(wireframe_enabled=True).commands()
    assert GLCommand("glPolygonMode", (GL.FRONT_AND_BACK, GL.LINE)) in commands


def test_custom_functions_are_passed_through():
    state = RenderState(
        blend_src_factor=GL.SRC_ALPHA,
        blend_dst_factor=GL.ONE_MINUS_SRC_ALPHA,
        cull_face_mode=GL.FRONT,
        depth_func=GL.LEQUAL,
    )
    commands = state.commands()
    assert GLCommand("glBlendFunc", (GL.SRC_ALPHA, GL.ONE_MINUS_SRC_ALPHA)) in commands
    assert GLCommand("glCullFace", (GL.FRONT,)) in commands
    assert GLCommand("glDepthFunc", (GL.LEQUAL,)) in commands


def test_only_depth_test_toggled():
    commands = RenderState(depth_test_enabled=True).commands()
    assert commands[0] == GLCommand("glEnable", (GL.DEPTH_TEST,))
    assert commands[1] == GLCommand("glDisable", (GL.CULL_FACE,))