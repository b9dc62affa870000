"""Keyboard, mouse and gamepad identifiers (GLFW-compatible values)."""

from __future__ import annotations

import enum


class Key(enum.IntEnum):
    """Keyboard keys."""

    NULL = 0
    UNKNOWN = -1
    SPACE = 32
    APOSTROPHE = 39
    COMMA = 44
    MINUS = 45
    PERIOD = 46
    SLASH = 47
    NUM0 = 48
    NUM1 = 49
    NUM2 = 50
    NUM3 = 51
    NUM4 = 52
    NUM5 = 53
    NUM6 = 54
    NUM7 = 55
    NUM8 = 56
    NUM9 = 57
    SEMICOLON = 59
    EQUAL = 61
    A = 65
    B = 66
    C = 67
    D = 68
    E = 69
    F = 70
    G = 71
    H = 72
    I = 73  # noqa: E741
    J = 74
    K = 75
    L = 76
    M = 77
    N = 78
    O = 79  # noqa: E741
    P = 80
    Q = 81
    R = 82
    S = 83
    T = 84
    U = 85
    V = 86
    W = 87
    X = 88
    Y = 89
    Z = 90
    LEFT_BRACKET = 91
    BACKSLASH = 92
    RIGHT_BRACKET = 93
    GRAVE_ACCENT = 96
    WORLD1 = 161
    WORLD2 = 162
    ESCAPE = 256
    ENTER = 257
    TAB = 258
    BACKSPACE = 259
    INSERT = 260
    DELETE = 261
    ARROW_RIGHT = 262
    ARROW_LEFT = 263
    ARROW_DOWN = 264
    ARROW_UP = 265
    PAGE_UP = 266
    PAGE_DOWN = 267
    HOME = 268
    END = 269
    CAPS_LOCK = 280
    SCROLL_LOCK = 281
    NUM_LOCK = 282
    PRINT_SCREEN = 283
    PAUSE = 284
    F1 = 290
    F2 = 291
    F3 = 292
    F4 = 293
    F5 = 294
    F6 = 295
    F7 = 296
    F8 = 297
    F9 = 298
    F10 = 299
    F11 = 300
    F12 = 301
    F13 = 302
    F14 = 303
    F15 = 304
    F16 = 305
    F17 = 306
    F18 = 307
    F19 = 308
    F20 = 309
    F21 = 310
    F22 = 311
    F23 = 312
    F24 = 313
    F25 = 314
    NUMPAD0 = 320
    NUMPAD1 = 321
    NUMPAD2 = 322
    NUMPAD3 = 323
    NUMPAD4 = 324
    NUMPAD5 = 325
    NUMPAD6 = 326
    NUMPAD7 = 327
    NUMPAD8 = 328
    NUMPAD9 = 329
    NUMPAD_DECIMAL = 330
    NUMPAD_DIVIDE = 331
    NUMPAD_MULTIPLY = 332
    NUMPAD_SUBTRACT = 333
    NUMPAD_ADD = 334
    NUMPAD_ENTER = 335
    NUMPAD_EQUAL = 336
    LEFT_SHIFT = 340
    LEFT_CONTROL = 341
    LEFT_ALT = 342
    LEFT_SUPER = 343
    RIGHT_SHIFT = 344
    RIGHT_CONTROL = 345
    RIGHT_ALT = 346
    RIGHT_SUPER = 347
    MENU = 348
    MAX_KEY = MENU


class MouseButton(enum.IntEnum):
    """Mouse buttons; the named buttons are aliases of the numbered ones."""

    NULL = -2
    UNKNOWN = -1
    BUTTON1 = 0
    BUTTON2 = 1
    BUTTON3 = 2
    BUTTON4 = 3
    BUTTON5 = 4
    BUTTON6 = 5
    BUTTON7 = 6
    BUTTON8 = 7
    LEFT = BUTTON1
    RIGHT = BUTTON2
    MIDDLE = BUTTON3
    SIDE_BACK = BUTTON4
    SIDE_FRONT = BUTTON5
    MAX_BUTTON = BUTTON8


class GamepadButton(enum.IntEnum):
    """Gamepad buttons; PlayStation-style names alias the face buttons."""

    A = 0
    B = 1
    X = 2
    Y = 3
    CROSS = A
    CIRCLE = B
    SQUARE = X
    TRIANGLE = Y
    LEFT_BUMPER = 4
    RIGHT_BUMPER = 5
    BACK = 6
    START = 7
    GUIDE = 8
    LEFT_STICK = 9
    RIGHT_STICK = 10
    DPAD_UP = 11
    DPAD_RIGHT = 11
    DPAD_DOWN = 13
    DPAD_LEFT = 14
    MAX_BUTTON = DPAD_LEFT


class GamepadAxis(enum.IntEnum):
    """Gamepad analogue axes."""

    LEFT_X = 0
    LEFT_Y = 1
    RIGHT_X = 2
    RIGHT_Y = 3
    LEFT_TRIGGER = 4
    RIGHT_TRIGGER = 5
    MAX_AXIS = RIGHT_TRIGGER