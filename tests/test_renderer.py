"""Tests for the OpenCV renderer (drawing onto an in-memory canvas)."""

import pytest

cv2 = pytest.importorskip("cv2")
np = pytest.importorskip("numpy")

from config.settings import CalculatorConfig  # noqa: E402
from core.calculator import CalculatorState  # noqa: E402
from ui.renderer import UIRenderer, fit_text  # noqa: E402


@pytest.fixture
def renderer():
    return UIRenderer(900, 600)


def test_render_returns_canvas_of_window_size(renderer):
    img = renderer.render(CalculatorState())
    assert img.shape == (600, 900, 3)
    assert img.dtype == np.uint8


def test_resize_respects_minimum_size(renderer):
    renderer.resize(100, 100)
    assert (renderer.width, renderer.height) == (600, 500)
    assert renderer.render(CalculatorState()).shape == (500, 600, 3)


def test_button_at_center_of_area(renderer):
    x, y, w, h = renderer.layout.rects["equals"]
    button = renderer.button_at(x + w // 2, y + h // 2)
    assert button is not None
    assert button.label == "="


def test_button_at_display_is_none(renderer):
    x, y, w, h = renderer.layout.rects["display"]
    assert renderer.button_at(x + 5, y + 5) is None


def test_error_is_drawn_in_error_color():
    config = CalculatorConfig()
    renderer = UIRenderer(900, 600, config)
    img = renderer.render(CalculatorState(buffer="", error="Result is Infinite"))

    x, y, w, h = renderer.layout.rects["display"]
    display = img[y:y + h, x:x + w].reshape(-1, 3).astype(int)
    # BGR: strong red channel, weak green channel
    assert ((display[:, 2] > 180) & (display[:, 1] < 150)).any()


def test_buffer_is_drawn_in_display(renderer):
    blank = renderer.render(CalculatorState(buffer=""))
    drawn = renderer.render(CalculatorState(buffer="12345"))
    x, y, w, h = renderer.layout.rects["display"]
    assert not np.array_equal(blank[y:y + h, x:x + w], drawn[y:y + h, x:x + w])


def test_history_entries_change_panel(renderer):
    empty = renderer.render(CalculatorState())
    filled = renderer.render(CalculatorState(history=("5+5 = 10",)))
    x, y, w, h = renderer.layout.rects["history"]
    assert not np.array_equal(empty[y:y + h, x:x + w], filled[y:y + h, x:x + w])


def test_pressed_highlight_expires(renderer):
    renderer.show_pressed(renderer.buttons[0], duration=2)
    renderer.render(CalculatorState())
    assert renderer.pressed_area == renderer.buttons[0].area_name
    renderer.render(CalculatorState())
    assert renderer.pressed_area is None


def test_fit_text_shrinks_long_text():
    _, short_scale, _ = fit_text("1", 300, 100, 3.0)
    lines, long_scale, _ = fit_text("1234567890" * 4, 300, 100, 3.0)
    assert long_scale < short_scale
    assert len(lines) <= 2


def test_fit_text_never_below_minimum():
    lines, scale, _ = fit_text("9" * 500, 100, 40, 3.0, min_scale=0.5)
    assert scale == pytest.approx(0.5)
    assert len(lines) <= 2


def test_fit_text_marks_truncation_with_ellipsis():
    lines, _, _ = fit_text("12345678 = " + "9" * 200, 150, 40, 0.6, min_scale=0.35, max_lines=1)
    assert len(lines) == 1
    assert lines[0].endswith("...")
    assert lines[0].startswith("123")


def test_fit_text_short_text_has_no_ellipsis():
    lines, _, _ = fit_text("5+5 = 10", 300, 40, 0.6, min_scale=0.35, max_lines=1)
    assert lines == ["5+5 = 10"]
