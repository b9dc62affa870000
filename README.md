# strafe

Building blocks for a small real-time 3D engine. None of them needs a graphics context or a window.

## What is in the package

- `strafe.gl_enums`
  - `GL`: an `IntEnum` of the OpenGL enumerant values that the engine uses.
  - `gl_enum_name(code)`: returns names such as `"GL_DEBUG_SOURCE_API"` for debug sources, types, severities and error codes. For any other value it returns `"Unknown OpenGL debug flag"`.
  - `handle_debug_message(source, message_type, message_id, severity, message, level)`: formats and logs an OpenGL debug message when its severity is within the verbosity `level`. Level 0 covers high severity, 1 adds medium, 2 adds low and 3 adds notifications. It returns the text, or `None` when the message is filtered out. High-severity messages and unknown severities raise `OpenGLDebugError`.
- `strafe.shader_types`
  - `ShaderType` and `ShaderDataType` enums.
  - `shader_type_name`, `shader_data_type_name` and `shader_data_type_size`.
  - `shader_data_type_to_gl`, `shader_type_to_gl` and `gl_to_shader_data_type`.
  - Invalid inputs raise `ValueError`. The exception is `gl_to_shader_data_type`, which returns `ShaderDataType.NONE` for unknown types.
- `strafe.input_enums`: `Key`, `MouseButton`, `GamepadButton` and `GamepadAxis`, with GLFW-compatible values.
- `strafe.input_handler`
  - Lookups between keys, characters and display names: `key_from_char`, `char_from_key`, `key_from_string`, `string_from_key`, `button_from_string` and `string_from_button`. They raise `KeyError` when there is no match.
  - `InputHandler` takes key, mouse-button, mouse-move and scroll events (`on_key_pressed`, `on_mouse_moved`, …). After `update(dt)` it reports per-frame state: pressed, down, released, repeated, tapped, multi-tapped and long-pressed, along with tap and repeat counts, mouse position and delta, and scroll delta. The thresholds are `LONG_PRESS_TIME` (0.5 s), `MULTI_TAP_TIME` (0.2 s) and `TAP_TIME` (0.3 s).
- `strafe.layer`: `Layer`, an abstract base with `init`, `shutdown`, `update` and the hooks `pre_update`, `post_update` and `on_event`.
- `strafe.layer_stack`: `LayerStack`, which keeps regular layers below overlays. It supports `push_layer`, `push_overlay`, `pop_layer` and `pop_overlay` (popping shuts the layer down), as well as iteration, `reversed()` and `len()`.
- `strafe.buffer_layout`: `BufferElement` and `BufferLayout`. The layout computes attribute offsets and the stride of tightly packed vertex data.
- `strafe.render_state`: `RenderState`, the settings for culling, depth, blending, scissor and wireframe. `commands()` lists the OpenGL calls those settings stand for, as `GLCommand(function, args)` tuples.
- `strafe.render_graph`
  - `RenderPass`, an abstract pass with `execute()`.
  - `RenderGraph`, which registers passes and dependencies. `init(...)` keeps the passes that can be reached from source passes and puts them in topological order. `execute()` then runs them in that order.
- `strafe.memory`
  - `MemoryPool`: fixed-size blocks on a free list, addressed by integer offsets.
  - `MemoryManager`: allocates runs of contiguous blocks. `MemoryManager.instance()` returns a shared default manager.
  - `PoolAllocator`: sizes each request as an item count times the item size.
- `strafe.resource`: `Resource`, which holds a guid and a list of dependencies, and builds its payload from bytes through a factory on `load`.
- `strafe.transform`
  - `Transform`: a node in a first-child / next-sibling tree.
  - `local_model_matrix`: returns translation · rotation · scale as a 4×4 numpy array.
  - `TransformLayer`: recomputes world matrices only in subtrees that are marked dirty.

## Installing

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Examples

Input state:

```python
from strafe.input_enums import Key
from strafe.input_handler import InputHandler, key_from_char

handler = InputHandler()
handler.on_key_pressed(key_from_char("W"), 0)
handler.update(1 / 60)
assert handler.is_key_down(Key.W)
```

Buffer layouts:

```python
from strafe.buffer_layout import BufferElement, BufferLayout
from strafe.shader_types import ShaderDataType

layout = BufferLayout([
    BufferElement(ShaderDataType.FLOAT3, "aPos"),
    BufferElement(ShaderDataType.FLOAT3, "aColor"),
])
print(layout.stride)                     # 24
print([e.offset for e in layout])        # [0, 12]
```

Render graph ordering:

```python
from strafe.render_graph import RenderGraph, RenderPass

class Pass(RenderPass):
    def execute(self):
        print("running", self.name)

graph = RenderGraph()
geometry = graph.add_render_pass(Pass("geometry"), source=True)
lighting = graph.add_render_pass(Pass("lighting"))
graph.create_dependency(geometry, lighting)
graph.init(None, None, None)
graph.execute()                          # geometry, then lighting
```

Block allocation:

```python
from strafe.memory import MemoryManager

manager = MemoryManager(block_size=64, block_count=16)
address = manager.allocate(100)          # spans two blocks
manager.deallocate(address)
```

Transform hierarchy:

```python
import numpy as np
from strafe.transform import Transform, TransformLayer

transforms = {
    1: Transform(local_position=np.array([1.0, 0.0, 0.0]), child=2),
    2: Transform(local_position=np.array([0.0, 2.0, 0.0])),
}
layer = TransformLayer(transforms)
layer.set_entity_as_root(1)
layer.update(0.0)
print(transforms[2].model_to_world[:3, 3])   # [1. 2. 0.]
```

## What the package does not do

- It opens no window and creates no OpenGL context.
- It issues no draw calls. `RenderState.commands()` describes calls without making them.
- There are no concrete render passes. The window, resource manager and entity manager that are handed to `RenderGraph.init` and `RenderPass.init` are stored as they are given.
- `MemoryPool` and `MemoryManager` keep track of block addresses as integers. They do not hand out real memory.
- There is no asset loading from disk and no entity system. `TransformLayer` reads its transforms from a plain mapping of entity ids.

## Running the tests

```
pytest
```