"""Shader stage and shader data type enumerations with their OpenGL mappings."""

from __future__ import annotations

import enum

from strafe.gl_enums import GL


class ShaderType(enum.IntEnum):
    """Shader pipeline stages."""

    NONE = 0
    VERTEX = enum.auto()
    FRAGMENT = enum.auto()
    GEOMETRY = enum.auto()
    TESSELLATION_CONTROL = enum.auto()
    TESSELLATION_EVALUATION = enum.auto()
    COMPUTE = enum.auto()
    SHADER_COUNT = enum.auto()


class ShaderDataType(enum.IntEnum):
    """Data types that can appear as shader attributes or uniforms."""

    NONE = 0
    FLOAT = enum.auto()
    FLOAT2 = enum.auto()
    FLOAT3 = enum.auto()
    FLOAT4 = enum.auto()
    INT = enum.auto()
    INT2 = enum.auto()
    INT3 = enum.auto()
    INT4 = enum.auto()
    UINT = enum.auto()
    UINT2 = enum.auto()
    UINT3 = enum.auto()
    UINT4 = enum.auto()
    BOOL = enum.auto()
    MAT2 = enum.auto()
    MAT3 = enum.auto()
    MAT4 = enum.auto()
    FLOAT_ARR = enum.auto()
    INT_ARR = enum.auto()
    UINT_ARR = enum.auto()
    BOOL_ARR = enum.auto()
    SAMPLER_1D = enum.auto()
    SAMPLER_2D = enum.auto()
    SAMPLER_3D = enum.auto()
    SAMPLER_CUBE = enum.auto()
    SAMPLER_2D_ARRAY = enum.auto()
    SAMPLER_1D_SHADOW = enum.auto()
    SAMPLER_2D_SHADOW = enum.auto()
    IMAGE_1D = enum.auto()
    IMAGE_2D = enum.auto()
    IMAGE_3D = enum.auto()
    IMAGE_CUBE = enum.auto()
    IMAGE_2D_ARRAY = enum.auto()
    ATOMIC_UINT = enum.auto()
    DATA_TYPE_COUNT = enum.auto()


_S = ShaderType
_D = ShaderDataType

_SHADER_TYPE_NAMES = {
    _S.NONE: "None",
    _S.VERTEX: "Vertex",
    _S.FRAGMENT: "Fragment",
    _S.GEOMETRY: "Geometry",
    _S.TESSELLATION_CONTROL: "Tessellation Control",
    _S.TESSELLATION_EVALUATION: "Tessellation Evaluation",
    _S.COMPUTE: "Compute",
}

_DATA_TYPE_NAMES = {
    _D.NONE: "None",
    _D.FLOAT: "Float",
    _D.FLOAT2: "Float2",
    _D.FLOAT3: "Float3",
    _D.FLOAT4: "Float4",
    _D.INT: "Int",
    _D.INT2: "Int2",
    _D.INT3: "Int3",
    _D.INT4: "Int4",
    _D.UINT: "UInt",
    _D.UINT2: "UInt2",
    _D.UINT3: "UInt3",
    _D.UINT4: "UInt4",
    _D.BOOL: "Bool",
    _D.MAT2: "Mat2",
    _D.MAT3: "Mat3",
    _D.MAT4: "Mat4",
    _D.FLOAT_ARR: "FloatArr",
    _D.INT_ARR: "IntArr",
    _D.UINT_ARR: "UIntArr",
    _D.BOOL_ARR: "BoolArr",
    _D.SAMPLER_1D: "Sampler1D",
    _D.SAMPLER_2D: "Sampler2D",
    _D.SAMPLER_3D: "Sampler3D",
    _D.SAMPLER_CUBE: "SamplerCube",
    _D.SAMPLER_2D_ARRAY: "Sampler2DArray",
    _D.SAMPLER_1D_SHADOW: "Sampler1DShadow",
    _D.SAMPLER_2D_SHADOW: "Sampler2DShadow",
    _D.IMAGE_1D: "Image1D",
    _D.IMAGE_2D: "Image2D",
    _D.IMAGE_3D: "Image3D",
    _D.IMAGE_CUBE: "ImageCube",
    _D.IMAGE_2D_ARRAY: "Image2DArray",
    _D.ATOMIC_UINT: "AtomicUInt",
    _D.DATA_TYPE_COUNT: "DataTypeCount",
}

_OPAQUE_SIZE = 4  # samplers, images and atomic counters are bound through an int

_DATA_TYPE_SIZES = {
    _D.FLOAT: 4,
    _D.FLOAT2: 8,
    _D.FLOAT3: 12,
    _D.FLOAT4: 16,
    _D.MAT2: 16,
    _D.MAT3: 36,
    _D.MAT4: 64,
    _D.INT: 4,
    _D.INT2: 8,
    _D.INT3: 12,
    _D.INT4: 16,
    _D.UINT: 4,
    _D.UINT2: 8,
    _D.UINT3: 12,
    _D.UINT4: 16,
    _D.BOOL: 1,
    **dict.fromkeys(
        (
            _D.SAMPLER_1D,
            _D.SAMPLER_2D,
            _D.SAMPLER_3D,
            _D.SAMPLER_CUBE,
            _D.SAMPLER_1D_SHADOW,
            _D.SAMPLER_2D_SHADOW,
            _D.IMAGE_1D,
            _D.IMAGE_2D,
            _D.IMAGE_3D,
            _D.IMAGE_CUBE,
            _D.ATOMIC_UINT,
        ),
        _OPAQUE_SIZE,
    ),
}

_DATA_TYPE_TO_GL = {
    **dict.fromkeys(
        (_D.FLOAT, _D.FLOAT2, _D.FLOAT3, _D.FLOAT4, _D.MAT2, _D.MAT3, _D.MAT4, _D.FLOAT_ARR),
        GL.FLOAT,
    ),
    **dict.fromkeys((_D.INT, _D.INT2, _D.INT3, _D.INT4, _D.INT_ARR), GL.INT),
    **dict.fromkeys(
        (_D.UINT, _D.UINT2, _D.UINT3, _D.UINT4, _D.UINT_ARR, _D.ATOMIC_UINT),
        GL.UNSIGNED_INT,
    ),
    **dict.fromkeys((_D.BOOL, _D.BOOL_ARR), GL.BOOL),
    **dict.fromkeys(
        (
            _D.SAMPLER_1D,
            _D.SAMPLER_2D,
            _D.SAMPLER_3D,
            _D.SAMPLER_CUBE,
            _D.SAMPLER_2D_ARRAY,
            _D.SAMPLER_1D_SHADOW,
            _D.SAMPLER_2D_SHADOW,
            _D.IMAGE_1D,
            _D.IMAGE_2D,
            _D.IMAGE_3D,
            _D.IMAGE_CUBE,
            _D.IMAGE_2D_ARRAY,
        ),
        GL.SAMPLER_2D,
    ),
}

_SHADER_TYPE_TO_GL = {
    _S.VERTEX: GL.VERTEX_SHADER,
    _S.FRAGMENT: GL.FRAGMENT_SHADER,
    _S.GEOMETRY: GL.GEOMETRY_SHADER,
    _S.TESSELLATION_CONTROL: GL.TESS_CONTROL_SHADER,
    _S.TESSELLATION_EVALUATION: GL.TESS_EVALUATION_SHADER,
    _S.COMPUTE: GL.COMPUTE_SHADER,
}

_GL_TO_DATA_TYPE = {
    GL.FLOAT: _D.FLOAT,
    GL.FLOAT_VEC2: _D.FLOAT2,
    GL.FLOAT_VEC3: _D.FLOAT3,
    GL.FLOAT_VEC4: _D.FLOAT4,
    GL.FLOAT_MAT2: _D.MAT2,
    GL.FLOAT_MAT3: _D.MAT3,
    GL.FLOAT_MAT4: _D.MAT4,
    GL.INT: _D.INT,
    GL.INT_VEC2: _D.INT2,
    GL.INT_VEC3: _D.INT3,
    GL.INT_VEC4: _D.INT4,
    GL.UNSIGNED_INT: _D.UINT,
    GL.UNSIGNED_INT_VEC2: _D.UINT2,
    GL.UNSIGNED_INT_VEC3: _D.UINT3,
    GL.UNSIGNED_INT_VEC4: _D.UINT4,
    GL.BOOL: _D.BOOL,
    GL.SAMPLER_1D: _D.SAMPLER_1D,
    GL.SAMPLER_2D: _D.SAMPLER_2D,
    GL.SAMPLER_3D: _D.SAMPLER_3D,
    GL.SAMPLER_CUBE: _D.SAMPLER_CUBE,
    GL.SAMPLER_2D_ARRAY: _D.SAMPLER_2D_ARRAY,
    GL.SAMPLER_1D_SHADOW: _D.SAMPLER_1D_SHADOW,
    GL.SAMPLER_2D_SHADOW: _D.SAMPLER_2D_SHADOW,
    GL.IMAGE_1D: _D.IMAGE_1D,
    GL.IMAGE_2D: _D.IMAGE_2D,
    GL.IMAGE_3D: _D.IMAGE_3D,
    GL.IMAGE_CUBE: _D.IMAGE_CUBE,
    GL.IMAGE_2D_ARRAY: _D.IMAGE_2D_ARRAY,
    GL.UNSIGNED_INT_ATOMIC_COUNTER: _D.ATOMIC_UINT,
    GL.UNSIGNED_INT_IMAGE_1D: _D.IMAGE_1D,
    GL.UNSIGNED_INT_IMAGE_2D: _D.IMAGE_2D,
    GL.UNSIGNED_INT_IMAGE_3D: _D.IMAGE_3D,
    GL.UNSIGNED_INT_IMAGE_CUBE: _D.IMAGE_CUBE,
    GL.UNSIGNED_INT_IMAGE_2D_ARRAY: _D.IMAGE_2D_ARRAY,
}


def _lookup(table, key, error):
    try:
        return table[key]
    except (KeyError, TypeError):
        raise ValueError(f"{error}: {key!r}") from None


def shader_type_name(shader_type):
    """Return the display name of a shader stage."""
    return _lookup(_SHADER_TYPE_NAMES, shader_type, "Invalid shader type chosen")


def shader_data_type_name(data_type):
    """Return the display name of a shader data type."""
    return _lookup(_DATA_TYPE_NAMES, data_type, "Unknown shader data type chosen")


def shader_data_type_size(data_type):
    """Return the size in bytes of one value of ``data_type``."""
    return _lookup(_DATA_TYPE_SIZES, data_type, "Invalid ShaderDataType")


def shader_data_type_to_gl(data_type):
    """Return the OpenGL component type used for ``data_type``."""
    return _lookup(_DATA_TYPE_TO_GL, data_type, "Invalid ShaderDataType")


def shader_type_to_gl(shader_type):
    """Return the OpenGL shader object type for a shader stage."""
    if shader_type == ShaderType.NONE:
        raise ValueError("ShaderType::None is not supported.")
    return _lookup(_SHADER_TYPE_TO_GL, shader_type, "Invalid shader type chosen")


def gl_to_shader_data_type(gl_type):
    """Map an OpenGL uniform/attribute type to a ShaderDataType, NONE if unknown."""
    try:
        return _GL_TO_DATA_TYPE.get(gl_type, ShaderDataType.NONE)
    except TypeError:
        return ShaderDataType.NONE