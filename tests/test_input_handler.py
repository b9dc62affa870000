import pytest

from strafe.input_enums import Key, MouseButton
from strafe.input_handler import (
    InputHandler,
    button_from_string,
    char_from_key,
    key_from_char,
    key_from_string,
    string_from_button,
    string_from_key,
)


@pytest.fixture
def handler():
    return InputHandler()


def test_char_lookups():
    assert key_from_char("A") == Key.A
    assert key_from_char("!") == Key.WORLD1
    assert char_from_key(Key.WORLD2) == '"'
    with pytest.raises(KeyError):
        key_from_char("a")
    with pytest.raises(KeyError):
        char_from_key(Key.ESCAPE)


@pytest.mark.parametrize("char", list(" ',-./0123456789;=ABCDEFGHIJKLMNOPQRSTUVWXYZ[\\]`!\""))
def test_char_round_trip(char):
    assert char_from_key(key_from_char(char)) == char


def test_string_lookups():
    assert string_from_key(Key.NULL) == "null"
    assert string_from_key(Key.MAX_KEY) == "Menu"
    assert key_from_string("MaxKey") == Key.MENU
    assert key_from_string("NumpadEnter") == Key.NUMPAD_ENTER
    with pytest.raises(KeyError):
        key_from_string("Bogus")


@pytest.mark.parametrize("key", [k for k in Key])
def test_key_name_round_trip(key):
    assert key_from_string(string_from_key(key)) == key


def test_button_lookups():
    assert button_from_string("Left") == MouseButton.BUTTON1
    assert string_from_button(MouseButton.LEFT) == "Button1"
    assert string_from_button(MouseButton.NULL) == "null"
    with pytest.raises(KeyError):
        button_from_string("Bogus")


def test_press_then_update_clears_press(handler):
    handler.on_key_pressed(Key.A, 0)
    assert handler.is_key_pressed(Key.A)
    assert handler.is_key_down(Key.A)
    handler.update(0.016)
    assert not handler.is_key_pressed(Key.A)
    assert handler.is_key_down(Key.A)


def test_short_press_is_tap(handler):
    handler.on_key_pressed(Key.A, 0)
    handler.update(0.016)
    handler.on_key_released(Key.A)
    assert handler.is_key_released(Key.A)
    assert handler.is_key_tapped(Key.A)
    assert not handler.is_key_down(Key.A)
    handler.update(0.016)
    assert not handler.is_key_tapped(Key.A)
    assert handler.is_key_released(Key.A)


def test_long_press_fires_once(handler):
    handler.on_key_pressed(Key.SPACE, 0)
    handler.update(0.6)
    assert handler.is_key_long_pressed(Key.SPACE)
    handler.update(0.6)
    assert not handler.is_key_long_pressed(Key.SPACE)
    handler.on_key_released(Key.SPACE)
    assert handler.is_key_tapped(Key.SPACE)


def test_held_past_tap_time_is_not_tap(handler):
    handler.on_key_pressed(Key.B, 0)
    handler.update(0.4)
    handler.on_key_released(Key.B)
    assert not handler.is_key_tapped(Key.B)


def test_multi_tap(handler):
    handler.on_key_pressed(Key.A, 0)
    handler.update(0.01)
    handler.on_key_released(Key.A)
    handler.update(0.05)
    handler.on_key_pressed(Key.A, 0)
    handler.update(0.05)
    assert handler.is_key_multi_tap(Key.A)
    assert handler.key_tap_count(Key.A) == 1
    handler.update(0.01)
    assert not handler.is_key_multi_tap(Key.A)


def test_multi_tap_window_expires(handler):
    handler.on_key_pressed(Key.A, 0)
    handler.update(0.01)
    handler.on_key_released(Key.A)
    handler.update(0.3)
    handler.on_key_pressed(Key.A, 0)
    handler.update(0.01)
    assert not handler.is_key_multi_tap(Key.A)
    assert handler.key_tap_count(Key.A) == 0


def test_repeat_counting(handler):
    handler.on_key_pressed(Key.W, 0)
    assert not handler.is_key_repeated(Key.W)
    handler.on_key_pressed(Key.W, 1)
    handler.on_key_pressed(Key.W, 1)
    assert handler.is_key_repeated(Key.W)
    assert handler.key_repeat_count(Key.W) == 2
    handler.update(0.016)
    assert not handler.is_key_repeated(Key.W)
    assert handler.key_repeat_count(Key.W) == 2
    handler.on_key_released(Key.W)
    assert handler.key_repeat_count(Key.W) == 0


def test_repeat_does_not_set_press_again(handler):
    handler.on_key_pressed(Key.W, 0)
    handler.update(0.016)
    handler.on_key_pressed(Key.W, 1)
    assert not handler.is_key_pressed(Key.W)


def test_untouched_key_is_idle(handler):
    handler.update(1.0)
    assert not handler.is_key_down(Key.MENU)
    assert handler.key_tap_count(Key.MENU) == 0


def test_key_typed_changes_nothing(handler):
    handler.on_key_typed(ord("x"))
    assert not handler.is_key_pressed(Key.X)


def test_mouse_button_tap_and_long_press(handler):
    handler.on_mouse_button_pressed(MouseButton.LEFT)
    assert handler.is_mouse_button_pressed(MouseButton.BUTTON1)
    handler.update(0.6)
    assert handler.is_mouse_button_long_pressed(MouseButton.LEFT)
    assert handler.is_mouse_button_down(MouseButton.LEFT)
    handler.on_mouse_button_released(MouseButton.LEFT)
    assert handler.is_mouse_button_released(MouseButton.LEFT)
    assert handler.is_mouse_button_tapped(MouseButton.LEFT)


def test_mouse_button_multi_tap(handler):
    handler.on_mouse_button_pressed(MouseButton.RIGHT)
    handler.update(0.01)
    handler.on_mouse_button_released(MouseButton.RIGHT)
    handler.update(0.05)
    handler.on_mouse_button_pressed(MouseButton.RIGHT)
    handler.update(0.05)
    assert handler.is_mouse_button_multi_tap(MouseButton.RIGHT)
    assert handler.mouse_button_tap_count(MouseButton.RIGHT) == 1


def test_mouse_movement_and_delta(handler):
    handler.on_mouse_moved(10.7, 20.2)
    assert handler.mouse_position() == (10, 20)
    assert handler.mouse_delta() == (10, 20)
    handler.on_mouse_moved(15.0, 18.0)
    assert handler.mouse_position() == (15, 18)
    assert handler.mouse_delta() == (5, -2)


def test_scroll_flag_reset_each_frame(handler):
    assert not handler.scrolled_this_frame()
    handler.on_mouse_scrolled(0.0, -1.0)
    assert handler.scrolled_this_frame()
    assert handler.scroll_delta() == (0, -1)
    handler.update(0.016)
    assert not handler.scrolled_this_frame()
    assert handler.scroll_delta() == (0, -1)