"""Per-frame keyboard and mouse state tracking with tap, multi-tap and long-press detection."""

from __future__ import annotations

from dataclasses import dataclass

from strafe.input_enums import Key, MouseButton

LONG_PRESS_TIME = 0.5
MULTI_TAP_TIME = 0.2
TAP_TIME = 0.3

_PRINTABLE_KEYS = (
    (" ", Key.SPACE),
    ("'", Key.APOSTROPHE),
    (",", Key.COMMA),
    ("-", Key.MINUS),
    (".", Key.PERIOD),
    ("/", Key.SLASH),
    *((str(digit), Key(Key.NUM0 + digit)) for digit in range(10)),
    (";", Key.SEMICOLON),
    ("=", Key.EQUAL),
    *((chr(code), Key(code)) for code in range(ord("A"), ord("Z") + 1)),
    ("[", Key.LEFT_BRACKET),
    ("\\", Key.BACKSLASH),
    ("]", Key.RIGHT_BRACKET),
    ("`", Key.GRAVE_ACCENT),
    ("!", Key.WORLD1),
    ('"', Key.WORLD2),
)

_CHAR_TO_KEY: dict[str, Key] = dict(_PRINTABLE_KEYS)
_KEY_TO_CHAR: dict[Key, str] = {key: char for char, key in _PRINTABLE_KEYS}

_KEY_NAMES = (
    ("null", Key.NULL),
    ("Unknown", Key.UNKNOWN),
    ("Space", Key.SPACE),
    ("Apostrophe", Key.APOSTROPHE),
    ("Comma", Key.COMMA),
    ("Minus", Key.MINUS),
    ("Period", Key.PERIOD),
    ("Slash", Key.SLASH),
    *((f"Num{digit}", Key(Key.NUM0 + digit)) for digit in range(10)),
    ("Semicolon", Key.SEMICOLON),
    ("Equal", Key.EQUAL),
    *((chr(code), Key(code)) for code in range(ord("A"), ord("Z") + 1)),
    ("LeftBracket", Key.LEFT_BRACKET),
    ("Backslash", Key.BACKSLASH),
    ("RightBracket", Key.RIGHT_BRACKET),
    ("GraveAccent", Key.GRAVE_ACCENT),
    ("World1", Key.WORLD1),
    ("World2", Key.WORLD2),
    ("Escape", Key.ESCAPE),
    ("Enter", Key.ENTER),
    ("Tab", Key.TAB),
    ("Backspace", Key.BACKSPACE),
    ("Insert", Key.INSERT),
    ("Delete", Key.DELETE),
    ("ArrowRight", Key.ARROW_RIGHT),
    ("ArrowLeft", Key.ARROW_LEFT),
    ("ArrowDown", Key.ARROW_DOWN),
    ("ArrowUp", Key.ARROW_UP),
    ("PageUp", Key.PAGE_UP),
    ("PageDown", Key.PAGE_DOWN),
    ("Home", Key.HOME),
    ("End", Key.END),
    ("CapsLock", Key.CAPS_LOCK),
    ("ScrollLock", Key.SCROLL_LOCK),
    ("NumLock", Key.NUM_LOCK),
    ("PrintScreen", Key.PRINT_SCREEN),
    ("Pause", Key.PAUSE),
    *((f"F{n}", Key(Key.F1 + n - 1)) for n in range(1, 26)),
    *((f"Numpad{digit}", Key(Key.NUMPAD0 + digit)) for digit in range(10)),
    ("NumpadDecimal", Key.NUMPAD_DECIMAL),
    ("NumpadDivide", Key.NUMPAD_DIVIDE),
    ("NumpadMultiply", Key.NUMPAD_MULTIPLY),
    ("NumpadSubtract", Key.NUMPAD_SUBTRACT),
    ("NumpadAdd", Key.NUMPAD_ADD),
    ("NumpadEnter", Key.NUMPAD_ENTER),
    ("NumpadEqual", Key.NUMPAD_EQUAL),
    ("LeftShift", Key.LEFT_SHIFT),
    ("LeftControl", Key.LEFT_CONTROL),
    ("LeftAlt", Key.LEFT_ALT),
    ("LeftSuper", Key.LEFT_SUPER),
    ("RightShift", Key.RIGHT_SHIFT),
    ("RightControl", Key.RIGHT_CONTROL),
    ("RightAlt", Key.RIGHT_ALT),
    ("RightSuper", Key.RIGHT_SUPER),
    ("Menu", Key.MENU),
    ("MaxKey", Key.MAX_KEY),
)

_BUTTON_NAMES = (
    ("null", MouseButton.NULL),
    ("Unknown", MouseButton.UNKNOWN),
    *((f"Button{n}", MouseButton(n - 1)) for n in range(1, 9)),
    ("Left", MouseButton.LEFT),
    ("Right", MouseButton.RIGHT),
    ("Middle", MouseButton.MIDDLE),
    ("SideBack", MouseButton.SIDE_BACK),
    ("SideFront", MouseButton.SIDE_FRONT),
    ("MaxButton", MouseButton.MAX_BUTTON),
)


def _reverse_first_wins(pairs):
    """Map value -> name, keeping the first name listed for aliased values."""
    table = {}
    for name, value in pairs:
        table.setdefault(value, name)
    return table


_STR_TO_KEY: dict[str, Key] = dict(_KEY_NAMES)
_KEY_TO_STR: dict[Key, str] = _reverse_first_wins(_KEY_NAMES)
_STR_TO_BUTTON: dict[str, MouseButton] = dict(_BUTTON_NAMES)
_BUTTON_TO_STR: dict[MouseButton, str] = _reverse_first_wins(_BUTTON_NAMES)


def key_from_char(char):
    """Return the key that types ``char``; raises KeyError if there is none."""
    return _CHAR_TO_KEY[char]


def char_from_key(key):
    """Return the character a printable key types; raises KeyError otherwise."""
    return _KEY_TO_CHAR[key]


def key_from_string(name):
    """Return the key with the given display name; raises KeyError if unknown."""
    return _STR_TO_KEY[name]


def string_from_key(key):
    """Return the display name of a key; raises KeyError if unknown."""
    return _KEY_TO_STR[key]


def button_from_string(name):
    """Return the mouse button with the given display name; raises KeyError if unknown."""
    return _STR_TO_BUTTON[name]


def string_from_button(button):
    """Return the display name of a mouse button; raises KeyError if unknown."""
    return _BUTTON_TO_STR[button]


@dataclass(slots=True)
class InputData:
    """State flags, counters and timers of one key or mouse button."""

    press: bool = False
    release: bool = False
    hold: bool = False
    repeat: bool = False
    long_press: bool = False
    tap: bool = False
    multi_tap: bool = False
    long_press_triggered: bool = False
    increment_multi_tap_timer: bool = False
    tap_count: int = 0
    held_timer: float = 0.0
    multi_tap_timer: float = 0.0
    repeat_count: int = 0

    def on_press(self):
        if not self.hold:
            self.press = True
        self.release = False
        self.hold = True
        self.multi_tap_timer = 0.0

    def on_release(self):
        self.press = False
        self.release = True
        self.hold = False
        self.repeat = False
        self.increment_multi_tap_timer = True
        self.long_press_triggered = False
        if self.held_timer < TAP_TIME:
            self.tap = True
        self.held_timer = 0.0

    def advance(self, dt):
        """Clear the one-frame flags and advance the timers by ``dt`` seconds."""
        self.repeat = self.long_press = self.multi_tap = self.tap = False

        if self.increment_multi_tap_timer:
            self.multi_tap_timer += dt
            if self.multi_tap_timer > MULTI_TAP_TIME:
                self.multi_tap_timer = 0.0
                self.increment_multi_tap_timer = False
                self.tap_count = 0

        if self.press and self.increment_multi_tap_timer:
            if self.multi_tap_timer < MULTI_TAP_TIME:
                self.multi_tap = True
                self.tap_count += 1
                self.multi_tap_timer = 0.0
            self.increment_multi_tap_timer = False

        if self.hold:
            self.press = False
            self.held_timer += dt
            if self.held_timer > LONG_PRESS_TIME and not self.long_press_triggered:
                self.long_press_triggered = True
                self.long_press = True
                self.held_timer = 0.0


_IDLE = InputData()


class InputHandler:
    """Collects window input events and derives per-frame input states."""

    def __init__(self):
        self._keys: dict[int, InputData] = {}
        self._buttons: dict[int, InputData] = {}
        self._mouse_pos = (0, 0)
        self._last_mouse_pos = (0, 0)
        self._mouse_delta = (0, 0)
        self._scroll_delta = (0, 0)
        self._scrolled = False
        self._last_typed_codepoint = None

    def _key(self, key):
        return self._keys.setdefault(int(key), InputData())

    def _button(self, button):
        return self._buttons.setdefault(int(button), InputData())

    def _key_state(self, key):
        return self._keys.get(int(key), _IDLE)

    def _button_state(self, button):
        return self._buttons.get(int(button), _IDLE)

    def update(self, dt):
        """Advance all states by ``dt`` seconds; call once per frame after events."""
        self._scrolled = False
        for data in self._keys.values():
            data.advance(dt)
        for data in self._buttons.values():
            data.advance(dt)

    def on_key_pressed(self, key, repeat_count):
        data = self._key(key)
        data.on_press()
        data.repeat = bool(repeat_count)
        data.repeat_count += int(data.repeat)

    def on_key_released(self, key):
        data = self._key(key)
        data.on_release()
        data.repeat_count = 0

    def on_key_typed(self, codepoint):
        """Remember the last typed character; key states are left untouched."""
        self._last_typed_codepoint = int(codepoint)

    def on_mouse_moved(self, x, y):
        pos = (int(x), int(y))
        self._mouse_delta = (pos[0] - self._last_mouse_pos[0], pos[1] - self._last_mouse_pos[1])
        self._mouse_pos = pos
        self._last_mouse_pos = pos

    def on_mouse_button_pressed(self, button):
        self._button(button).on_press()

    def on_mouse_button_released(self, button):
        self._button(button).on_release()

    def on_mouse_scrolled(self, x_offset, y_offset):
        self._scrolled = True
        self._scroll_delta = (int(x_offset), int(y_offset))

    def is_key_pressed(self, key):
        return self._key_state(key).press

    def is_key_down(self, key):
        return self._key_state(key).hold

    def is_key_released(self, key):
        return self._key_state(key).release

    def is_key_repeated(self, key):
        return self._key_state(key).repeat

    def key_repeat_count(self, key):
        return self._key_state(key).repeat_count

    def is_key_long_pressed(self, key):
        return self._key_state(key).long_press

    def is_key_tapped(self, key):
        return self._key_state(key).tap

    def is_key_multi_tap(self, key):
        return self._key_state(key).multi_tap

    def key_tap_count(self, key):
        return self._key_state(key).tap_count

    def is_mouse_button_pressed(self, button):
        return self._button_state(button).press

    def is_mouse_button_down(self, button):
        return self._button_state(button).hold

    def is_mouse_button_released(self, button):
        return self._button_state(button).release

    def is_mouse_button_long_pressed(self, button):
        return self._button_state(button).long_press

    def is_mouse_button_tapped(self, button):
        return self._button_state(button).tap

    def is_mouse_button_multi_tap(self, button):
        return self._button_state(button).multi_tap

    def mouse_button_tap_count(self, button):
        return self._button_state(button).tap_count

    def mouse_position(self):
        return self._mouse_pos

    def mouse_delta(self):
        return self._mouse_delta

    def scroll_delta(self):
        return self._scroll_delta

    def scrolled_this_frame(self):
        return self._scrolled