import pytest

from strafe.buffer_layout import BufferElement, BufferLayout
from strafe.shader_types import ShaderDataType, shader_data_type_size


def test_element_size_comes_from_data_type():
    element = BufferElement(ShaderDataType.FLOAT3, "aPos")
    assert element.size == 12
    assert element.normalized is False
    assert element.offset == 0


def test_component_counts():
    assert BufferElement(ShaderDataType.FLOAT3, "p").component_count() == 3
    assert BufferElement(ShaderDataType.MAT4, "m").component_count() == 16
    assert BufferElement(ShaderDataType.MAT3, "m").component_count() == 9


def test_component_count_is_zero_for_opaque_types():
    assert BufferElement(ShaderDataType.SAMPLER_2D, "tex").component_count() == 0


def test_invalid_element_type_raises():
    with pytest.raises(ValueError):
        BufferElement(ShaderDataType.FLOAT_ARR, "values")


def test_cube_layout_offsets_and_stride():
    layout = BufferLayout(
        [BufferElement(ShaderDataType.FLOAT3, "aPos"), BufferElement(ShaderDataType.FLOAT3, "aColor")]
    )
    offsets = [element.offset for element in layout]
    assert offsets == [0, shader_data_type_size(ShaderDataType.FLOAT3)]
    assert layout.stride == sum(element.size for element in layout)


def test_offsets_are_cumulative_for_mixed_types():
    types = [ShaderDataType.FLOAT2, ShaderDataType.BOOL, ShaderDataType.MAT4, ShaderDataType.INT]
    layout = BufferLayout([BufferElement(t, t.name) for t in types])
    running = 0
    for element in layout:
        assert element.offset == running
        running += element.size
    assert layout.stride == running
    assert len(layout) == len(types)


def test_empty_layout():
    layout = BufferLayout()
    assert len(layout) == 0
    assert layout.stride == 0


def test_layout_does_not_modify_given_elements():
    first = BufferElement(ShaderDataType.FLOAT4, "a")
    second = BufferElement(ShaderDataType.FLOAT2, "b", normalized=True)
    layout = BufferLayout([first, second])
    assert second.offset == 0
    assert layout.elements[1].offset == first.size
    assert layout.elements[1].normalized is True