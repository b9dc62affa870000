"""OpenGL enumerant values and helpers for the debug-output callback."""

from __future__ import annotations

import enum
import logging

logger = logging.getLogger(__name__)

UNKNOWN_FLAG = "Unknown OpenGL debug flag"


class GL(enum.IntEnum):
    """OpenGL enumerants used by the engine."""

    # Errors (NO_ERROR first so that the value 0 keeps this name)
    NO_ERROR = 0
    INVALID_ENUM = 0x0500
    INVALID_VALUE = 0x0501
    INVALID_OPERATION = 0x0502
    STACK_OVERFLOW = 0x0503
    STACK_UNDERFLOW = 0x0504
    OUT_OF_MEMORY = 0x0505
    INVALID_FRAMEBUFFER_OPERATION = 0x0506
    CONTEXT_LOST = 0x0507

    # Generic values
    NONE = 0
    ZERO = 0
    ONE = 1
    TRIANGLES = 0x0004

    # Debug sources
    DEBUG_SOURCE_API = 0x8246
    DEBUG_SOURCE_WINDOW_SYSTEM = 0x8247
    DEBUG_SOURCE_SHADER_COMPILER = 0x8248
    DEBUG_SOURCE_THIRD_PARTY = 0x8249
    DEBUG_SOURCE_APPLICATION = 0x824A
    DEBUG_SOURCE_OTHER = 0x824B

    # Debug types
    DEBUG_TYPE_ERROR = 0x824C
    DEBUG_TYPE_DEPRECATED_BEHAVIOR = 0x824D
    DEBUG_TYPE_UNDEFINED_BEHAVIOR = 0x824E
    DEBUG_TYPE_PORTABILITY = 0x824F
    DEBUG_TYPE_PERFORMANCE = 0x8250
    DEBUG_TYPE_OTHER = 0x8251
    DEBUG_TYPE_MARKER = 0x8268
    DEBUG_TYPE_PUSH_GROUP = 0x8269
    DEBUG_TYPE_POP_GROUP = 0x826A

    # Debug severities
    DEBUG_SEVERITY_HIGH = 0x9146
    DEBUG_SEVERITY_MEDIUM = 0x9147
    DEBUG_SEVERITY_LOW = 0x9148
    DEBUG_SEVERITY_NOTIFICATION = 0x826B

    # Render state
    LESS = 0x0201
    EQUAL = 0x0202
    LEQUAL = 0x0203
    ALWAYS = 0x0207
    SRC_ALPHA = 0x0302
    ONE_MINUS_SRC_ALPHA = 0x0303
    FRONT = 0x0404
    BACK = 0x0405
    FRONT_AND_BACK = 0x0408
    CW = 0x0900
    CCW = 0x0901
    CULL_FACE = 0x0B44
    DEPTH_TEST = 0x0B71
    BLEND = 0x0BE2
    SCISSOR_TEST = 0x0C11
    LINE = 0x1B01
    FILL = 0x1B02
    FUNC_ADD = 0x8006

    # Shader stages
    FRAGMENT_SHADER = 0x8B30
    VERTEX_SHADER = 0x8B31
    GEOMETRY_SHADER = 0x8DD9
    TESS_EVALUATION_SHADER = 0x8E87
    TESS_CONTROL_SHADER = 0x8E88
    COMPUTE_SHADER = 0x91B9

    # Data types
    INT = 0x1404
    UNSIGNED_INT = 0x1405
    FLOAT = 0x1406
    DOUBLE = 0x140A
    FLOAT_VEC2 = 0x8B50
    FLOAT_VEC3 = 0x8B51
    FLOAT_VEC4 = 0x8B52
    INT_VEC2 = 0x8B53
    INT_VEC3 = 0x8B54
    INT_VEC4 = 0x8B55
    BOOL = 0x8B56
    FLOAT_MAT2 = 0x8B5A
    FLOAT_MAT3 = 0x8B5B
    FLOAT_MAT4 = 0x8B5C
    SAMPLER_1D = 0x8B5D
    SAMPLER_2D = 0x8B5E
    SAMPLER_3D = 0x8B5F
    SAMPLER_CUBE = 0x8B60
    SAMPLER_1D_SHADOW = 0x8B61
    SAMPLER_2D_SHADOW = 0x8B62
    SAMPLER_2D_ARRAY = 0x8DC1
    UNSIGNED_INT_VEC2 = 0x8DC6
    UNSIGNED_INT_VEC3 = 0x8DC7
    UNSIGNED_INT_VEC4 = 0x8DC8
    IMAGE_1D = 0x904C
    IMAGE_2D = 0x904D
    IMAGE_3D = 0x904E
    IMAGE_CUBE = 0x9050
    IMAGE_2D_ARRAY = 0x9053
    UNSIGNED_INT_IMAGE_1D = 0x9062
    UNSIGNED_INT_IMAGE_2D = 0x9063
    UNSIGNED_INT_IMAGE_3D = 0x9064
    UNSIGNED_INT_IMAGE_CUBE = 0x9066
    UNSIGNED_INT_IMAGE_2D_ARRAY = 0x9069
    UNSIGNED_INT_ATOMIC_COUNTER = 0x92DB


_DEBUG_FLAG_NAMES = (
    "DEBUG_SOURCE_API",
    "DEBUG_SOURCE_WINDOW_SYSTEM",
    "DEBUG_SOURCE_SHADER_COMPILER",
    "DEBUG_SOURCE_THIRD_PARTY",
    "DEBUG_SOURCE_APPLICATION",
    "DEBUG_SOURCE_OTHER",
    "DEBUG_TYPE_ERROR",
    "DEBUG_TYPE_DEPRECATED_BEHAVIOR",
    "DEBUG_TYPE_UNDEFINED_BEHAVIOR",
    "DEBUG_TYPE_PORTABILITY",
    "DEBUG_TYPE_PERFORMANCE",
    "DEBUG_TYPE_MARKER",
    "DEBUG_TYPE_PUSH_GROUP",
    "DEBUG_TYPE_POP_GROUP",
    "DEBUG_TYPE_OTHER",
    "DEBUG_SEVERITY_HIGH",
    "DEBUG_SEVERITY_MEDIUM",
    "DEBUG_SEVERITY_LOW",
    "DEBUG_SEVERITY_NOTIFICATION",
    "NO_ERROR",
    "INVALID_ENUM",
    "INVALID_VALUE",
    "INVALID_OPERATION",
    "STACK_OVERFLOW",
    "STACK_UNDERFLOW",
    "OUT_OF_MEMORY",
    "INVALID_FRAMEBUFFER_OPERATION",
    "CONTEXT_LOST",
)

_DEBUG_NAMES: dict[int, str] = {int(GL[name]): f"GL_{name}" for name in _DEBUG_FLAG_NAMES}

# severity -> (minimum debug level, label, logging level)
_SEVERITIES = {
    GL.DEBUG_SEVERITY_HIGH: (0, "Error", logging.ERROR),
    GL.DEBUG_SEVERITY_MEDIUM: (1, "Warning", logging.WARNING),
    GL.DEBUG_SEVERITY_LOW: (2, "Info", logging.INFO),
    GL.DEBUG_SEVERITY_NOTIFICATION: (3, "Log", logging.DEBUG),
}


class OpenGLDebugError(RuntimeError):
    """Raised for high-severity or unrecognised OpenGL debug messages."""


def gl_enum_name(code):
    """Return the symbolic name of a debug source, type, severity or error code."""
    try:
        return _DEBUG_NAMES.get(int(code), UNKNOWN_FLAG)
    except (TypeError, ValueError):
        return UNKNOWN_FLAG


def handle_debug_message(source, message_type, message_id, severity, message, level):
    """Log an OpenGL debug message according to the verbosity ``level``.

    Returns the logged text, or None when the message is below the level.
    High-severity and unknown-severity messages raise OpenGLDebugError.
    """
    try:
        threshold, label, log_level = _SEVERITIES[severity]
    except (KeyError, TypeError):
        text = "OpenGL debug callback occured but severity unknown."
        logger.error(text)
        raise OpenGLDebugError(text) from None

    if level < threshold:
        return None

    text = (
        f"[OpenGL {label}] src: {gl_enum_name(source)} | "
        f"type: {gl_enum_name(message_type)} | id: {message_id}\nmessage: {message}"
    )
    logger.log(log_level, text)
    if severity == GL.DEBUG_SEVERITY_HIGH:
        raise OpenGLDebugError(text)
    return text