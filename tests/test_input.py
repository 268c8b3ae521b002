import pytest

from quadkit.geometry import Vec2
from quadkit.input import ClipboardObject, Input, InputCharacter, KeyCode, KeyRepeat


@pytest.mark.parametrize(
    "grabbed,active,expected",
    [(False, True, True), (True, True, False), (False, False, False)],
)
def test_mouse_queries_respect_grab_and_activity(grabbed, active, expected):
    inp = Input(
        raw_mouse_down=True,
        raw_click_down=True,
        raw_click_up=True,
        cursor_grabbed=grabbed,
        window_active=active,
    )
    assert inp.is_mouse_down() is expected
    assert inp.click_down() is expected
    assert inp.click_up() is expected


def test_mouse_queries_false_without_raw_state():
    inp = Input(window_active=True)
    assert not inp.is_mouse_down()
    assert not inp.click_down()
    assert not inp.click_up()


def test_reset_clears_frame_events():
    pos = Vec2(3.0, 4.0)
    inp = Input(
        mouse_position=pos,
        raw_mouse_down=True,
        raw_click_down=True,
        raw_click_up=True,
        mouse_wheel=Vec2(1.0, 2.0),
        input_buffer=[InputCharacter("a")],
        modifier_ctrl=True,
        escape=True,
        enter=True,
        window_active=True,
    )
    inp.reset()
    assert inp.input_buffer == []
    assert inp.mouse_wheel == Vec2(0.0, 0.0)
    assert not (inp.raw_click_down or inp.raw_click_up)
    assert not (inp.escape or inp.enter or inp.modifier_ctrl or inp.window_active)
    assert inp.raw_mouse_down is True
    assert inp.mouse_position == pos


def test_input_character_defaults():
    ch = InputCharacter(KeyCode.ENTER)
    assert ch.key is KeyCode.ENTER
    assert ch.modifier_shift is False and ch.modifier_ctrl is False


def test_clipboard_round_trip():
    clip = ClipboardObject()
    assert clip.get() is None
    clip.set("hello")
    assert clip.get() == "hello"


def test_first_press_fires():
    kr = KeyRepeat()
    assert kr.add_repeat_gap(KeyCode.LEFT, 0.0) is True


def test_held_key_waits_then_repeats():
    kr = KeyRepeat()
    assert kr.add_repeat_gap(KeyCode.LEFT, 0.0)
    kr.new_frame(0.0)
    assert kr.add_repeat_gap(KeyCode.LEFT, 0.1) is False
    kr.new_frame(0.1)
    assert kr.add_repeat_gap(KeyCode.LEFT, 0.2) is False
    kr.new_frame(0.6)
    assert kr.repeating_character is KeyCode.LEFT
    assert kr.add_repeat_gap(KeyCode.LEFT, 0.7) is True


def test_release_resets_state():
    kr = KeyRepeat()
    kr.add_repeat_gap(KeyCode.LEFT, 0.0)
    kr.new_frame(0.0)
    kr.new_frame(0.1)
    assert kr.active_character is None
    assert kr.repeating_character is None
    assert kr.add_repeat_gap(KeyCode.LEFT, 0.2) is True


def test_different_key_fires_immediately():
    kr = KeyRepeat()
    kr.add_repeat_gap(KeyCode.LEFT, 0.0)
    kr.new_frame(0.0)
    assert kr.add_repeat_gap(KeyCode.RIGHT, 0.1) is True
    kr.new_frame(0.1)
    assert kr.active_character is KeyCode.RIGHT
    assert kr.pressed_time == 0.1