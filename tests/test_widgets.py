from types import SimpleNamespace

import pytest

from spacenerds.widgets import Button, Color, Slider


def _button(**kwargs):
    return Button(10, 20, 100, 30, "ENGAGE", Color.WHITE, 0, **kwargs)


def test_button_press_inside_calls_callback():
    calls = []
    b = _button(callback=lambda: calls.append(1))
    assert b.press(50, 30) is True
    assert calls == [1]


@pytest.mark.parametrize("x,y", [(9, 30), (111, 30), (50, 19), (50, 51)])
def test_button_press_outside(x, y):
    calls = []
    b = _button(callback=lambda: calls.append(1))
    assert b.press(x, y) is False
    assert calls == []
    assert b.feedback == 0


def test_button_edges_are_inside():
    b = _button()
    assert b.press(10, 20) is True
    assert b.press(110, 50) is True


def test_button_checkbox_toggles():
    holder = SimpleNamespace(value=False)
    b = _button()
    b.make_checkbox(holder)
    b.press(50, 30)
    assert holder.value is True
    b.press(50, 30)
    assert holder.value is False


def test_button_feedback_lasts_five_ticks():
    b = _button()
    b.press(50, 30)
    shown = [b.tick() for _ in range(7)]
    assert shown == [True] * 5 + [False] * 2


def test_button_label_truncated():
    b = _button()
    b.set_label("X" * 40)
    assert b.label == "X" * 19


def _slider(level, **kwargs):
    return Slider(100.0, 200.0, 50.0, 10.0, Color.AMBER, "POWER", "MIN", "MAX",
                  0.0, 255.0, lambda: level[0], **kwargs)


def test_slider_initial_value_and_sample():
    level = [0.0]
    s = _slider(level)
    assert s.value == 0.0
    level[0] = 255.0
    assert s.sample() == 255.0
    assert s.value == pytest.approx(1.0)
    assert s.timer == 1


def test_slider_empty_range_rejected():
    with pytest.raises(ValueError):
        Slider(0, 0, 10, 10, Color.RED, "A", "B", "C", 5.0, 5.0, lambda: 5.0)


def test_slider_horizontal_press():
    hits = []
    sounds = []
    s = _slider([0.0], clicked=hits.append, sound=lambda: sounds.append(1))
    assert s.press(125.0, 205.0) is True
    assert s.input == pytest.approx(0.5)
    assert hits == [s]
    assert sounds == [1]
    assert s.press(152.0, 205.0) is True
    assert s.input == 1.0
    assert s.press(97.0, 205.0) is True
    assert s.input == 0.0
    assert s.press(160.0, 205.0) is False


def test_slider_vertical_press():
    s = _slider([0.0], vertical=True)
    assert s.press(105.0, 225.0) is True
    assert s.input == pytest.approx(0.5)
    assert s.press(105.0, 197.0) is True
    assert s.input == 1.0
    assert s.press(105.0, 253.0) is True
    assert s.input == 0.0
    assert s.press(115.0, 225.0) is False


def test_slider_press_without_clicked_makes_no_sound():
    sounds = []
    s = _slider([0.0], sound=lambda: sounds.append(1))
    assert s.press(125.0, 205.0) is True
    assert sounds == []


def test_poke_input_sound_optional():
    hits = []
    sounds = []
    s = _slider([0.0], clicked=hits.append, sound=lambda: sounds.append(1))
    s.poke_input(0.25, False)
    assert s.input == 0.25
    assert hits == [s]
    assert sounds == []
    s.poke_input(0.75, True)
    assert sounds == [1]


def test_bar_color_normal_scheme():
    s = _slider([0.0])
    assert s.bar_color(5.0) == Color.BLACK
    assert s.bar_color(20.0) == Color.AMBER
    assert s.bar_color(50.0) == Color.DARKGREEN
    for _ in range(4):
        s.sample()
    assert s.bar_color(5.0) == Color.RED


def test_bar_color_reversed_scheme():
    s = _slider([0.0], colors_reversed=True)
    assert s.bar_color(50.0) == Color.DARKGREEN
    assert s.bar_color(80.0) == Color.AMBER
    assert s.bar_color(95.0) == Color.BLACK


def test_bar_color_clickable_is_dark_green():
    s = _slider([0.0], clicked=lambda _s: None)
    assert s.bar_color(5.0) == Color.DARKGREEN


def test_set_fuzz_masks_to_byte():
    s = _slider([0.0])
    s.set_fuzz(0x1FF)
    assert s.fuzz == 0xFF