from types import SimpleNamespace

import pytest

from friendlyjam.ui_state import ROOT, UiState, WidgetId


class _Widget:
    def __init__(self, name):
        self.name = name
        self.state = SimpleNamespace(id=None)


def test_same_widget_returned_across_frames():
    ui = UiState()
    first = ui.get_root_or("button", lambda: _Widget("a"))
    ui.frame_start()
    again = ui.get_root_or("button", lambda: _Widget("b"))
    assert again is first
    assert again.name == "a"


def test_repeated_key_in_one_frame_gives_distinct_widgets():
    ui = UiState()
    a = ui.get_root_or("item", lambda: _Widget("a"))
    b = ui.get_root_or("item", lambda: _Widget("b"))
    assert a is not b
    assert a.state.id == WidgetId("item", 0)
    assert b.state.id == WidgetId("item", 1)


def test_default_called_once_per_slot():
    ui = UiState()
    calls = []

    def make():
        calls.append(1)
        return _Widget(f"w{len(calls)}")

    frames = []
    for _ in range(3):
        ui.frame_start()
        first = ui.get_root_or("w", make)
        second = ui.get_root_or("w", make)
        frames.append((first, second))
    assert len(calls) == 2
    assert [(a.name, b.name) for a, b in frames] == [("w1", "w2")] * 3
    assert all(a is frames[0][0] and b is frames[0][1] for a, b in frames)


def test_iter_widgets_pre_and_post_order():
    ui = UiState()
    a = ui.get_root_or("a", lambda: _Widget("a"))
    ui.get_or(a.state.id, "b", lambda: _Widget("b"))
    ui.get_root_or("c", lambda: _Widget("c"))

    log = []
    ui.iter_widgets(
        lambda w: log.append(("pre", w.name)),
        lambda w: log.append(("post", w.name)),
    )
    assert log == [
        ("pre", "a"),
        ("pre", "b"),
        ("post", "b"),
        ("post", "a"),
        ("pre", "c"),
        ("post", "c"),
    ]


def test_frame_start_clears_tree():
    ui = UiState()
    ui.get_root_or("a", lambda: _Widget("a"))
    ui.frame_start()
    seen = []
    ui.iter_widgets(seen.append, seen.append)
    assert seen == []


def test_only_requested_widgets_iterated():
    ui = UiState()
    ui.get_root_or("x", lambda: _Widget("x0"))
    ui.get_root_or("x", lambda: _Widget("x1"))
    ui.frame_start()
    ui.get_root_or("x", lambda: _Widget("new"))
    names = []
    ui.iter_widgets(lambda w: names.append(w.name), lambda w: None)
    assert names == ["x0"]


def test_none_key_rejected():
    ui = UiState()
    with pytest.raises(ValueError):
        ui.get_root_or(None, lambda: _Widget("a"))


def test_root_id_uses_no_key():
    assert ROOT == WidgetId(None, 0)
    ui = UiState()
    widget = ui.get_or(ROOT, "k", lambda: _Widget("k"))
    assert widget.state.id.key == "k"