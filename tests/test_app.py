"""Tests for the application coordinator, without opening a window."""

import pytest

cv2 = pytest.importorskip("cv2")

from app.calculator_app import CalculatorApp  # noqa: E402
from config.settings import CalculatorConfig  # noqa: E402
from core.calculator import Mode  # noqa: E402


class RecordingVoice:
    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        if not name.startswith("speak"):
            raise AttributeError(name)
        return lambda *args: self.calls.append((name,) + args)


@pytest.fixture
def voice():
    return RecordingVoice()


@pytest.fixture
def app(voice):
    return CalculatorApp(config=CalculatorConfig(), voice=voice)


def click(app, area):
    x, y, w, h = app.ui.layout.rects[area]
    app.on_mouse(cv2.EVENT_LBUTTONDOWN, x + w // 2, y + h // 2, 0, None)


def test_clicks_drive_the_engine(app):
    for area in ("five", "plus", "five", "equals"):
        click(app, area)

    assert app.engine.state.buffer == "10"
    assert app.engine.state.history == ("5+5 = 10",)


def test_operator_click_continues_previous_result(app):
    for area in ("two", "equals", "multiply", "three", "equals"):
        click(app, area)

    assert app.engine.state.history == ("2*3 = 6", "2 = 2")


def test_mouse_move_is_ignored(app):
    x, y, w, h = app.ui.layout.rects["five"]
    app.on_mouse(cv2.EVENT_MOUSEMOVE, x + 1, y + 11, 0, None)
    assert app.engine.state.buffer == "0"


def test_click_outside_buttons_is_ignored(app):
    x, y, _, _ = app.ui.layout.rects["history"]
    app.on_mouse(cv2.EVENT_LBUTTONDOWN, x + 10, y + 10, 0, None)
    assert app.engine.state.buffer == "0"


def test_keyboard_input(app):
    for key in (ord("1"), ord("2"), 8, ord("+"), ord("3"), 13):
        assert app.handle_key(key) is True

    assert app.engine.state.buffer == "4"
    assert app.engine.state.mode == Mode.RESULT


def test_quit_keys(app):
    assert app.handle_key(27) is False
    assert app.handle_key(ord("q")) is False


def test_toggle_voice_key(app):
    assert app.config.voice_enabled is False
    app.handle_key(ord("v"))
    assert app.config.voice_enabled is True


def test_state_change_marks_dirty_and_speaks_result(app, voice):
    app.draw()
    assert app.dirty is False

    app.handle_key(ord("7"))
    app.handle_key(13)

    assert app.dirty is True
    assert ("speak_token", "7") in voice.calls
    assert ("speak_result", "7") in voice.calls


def test_error_is_spoken(app, voice):
    for key in (ord("1"), ord("/"), ord("0"), 13):
        app.handle_key(key)

    assert ("speak_error", "Result is Infinite") in voice.calls
    assert app.engine.state.buffer == ""


def test_draw_returns_frame_of_window_size(app):
    frame = app.draw()
    assert frame.shape == (app.ui.height, app.ui.width, 3)
    assert app.draw() is frame
