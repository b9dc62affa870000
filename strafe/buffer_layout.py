"""Vertex buffer layouts: named attributes with their offsets and the stride."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

from strafe.shader_types import ShaderDataType, shader_data_type_size

_D = ShaderDataType

_COMPONENT_COUNTS = {
    _D.FLOAT: 1,
    _D.FLOAT2: 2,
    _D.FLOAT3: 3,
    _D.FLOAT4: 4,
    _D.MAT2: 4,
    _D.MAT3: 9,
    _D.MAT4: 16,
    _D.INT: 1,
    _D.INT2: 2,
    _D.INT3: 3,
    _D.INT4: 4,
    _D.BOOL: 1,
    _D.UINT: 1,
    _D.UINT2: 2,
    _D.UINT3: 3,
    _D.UINT4: 4,
}


@dataclass
class BufferElement:
    """One vertex attribute; its size follows from its data type."""

    data_type: ShaderDataType
    name: str
    normalized: bool = False
    offset: int = field(default=0, init=False)
    size: int = field(default=0, init=False)

    def __post_init__(self):
        self.size = shader_data_type_size(self.data_type)

    def component_count(self):
        """Number of scalar components; 0 for types that are not vertex attributes."""
        return _COMPONENT_COUNTS.get(self.data_type, 0)


class BufferLayout:
    """Ordered attributes packed one after another without padding."""

    def __init__(self, elements=()):
        self.elements = [dataclasses.replace(element) for element in elements]
        self.stride = 0
        self._calculate_offsets_and_stride()

    def _calculate_offsets_and_stride(self):
        offset = 0
        for element in self.elements:
            element.offset = offset
            offset += element.size
        self.stride = offset

    def __iter__(self):
        return iter(self.elements)

    def __len__(self):
        return len(self.elements)

    def __repr__(self):
        return f"BufferLayout({self.elements!r}, stride={self.stride})"