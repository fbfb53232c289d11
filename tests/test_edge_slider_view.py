from __future__ import annotations

import pytest

from button_insets.core.insets import InsetEdge


@pytest.fixture
def make_slider(qapp, scheduler, recorder):
    from button_insets.ui.views.insets.edge_slider import EdgeSliderView

    def _make(edge: InsetEdge = InsetEdge.TOP):
        return EdgeSliderView(edge, on_change=recorder, scheduler=scheduler)

    return _make


def test_manual_drag_reports_value_and_updates_readout(make_slider, recorder) -> None:
    view = make_slider()

    view._slider.setValue(7)

    assert recorder.values == [7]
    assert view.value_text() == "7"


def test_set_value_clamps_and_rounds(make_slider, recorder) -> None:
    view = make_slider()

    view.set_value(40)
    view.set_value(-3.6)

    assert recorder.values == [25, -4]
    assert view.value() == -4
    assert view.value_text() == "-4"


def test_reset_fires_callback_exactly_once_with_zero(make_slider, recorder) -> None:
    view = make_slider()
    view.set_value(12)
    recorder.calls.clear()

    view.reset()

    assert recorder.values == [0]
    assert view.value() == 0
    assert view.value_text() == "0"


def test_reset_when_already_zero_still_reports(make_slider, recorder) -> None:
    view = make_slider()

    view.reset()

    assert recorder.values == [0]


def test_tick_turns_around_at_upper_bound(make_slider, recorder) -> None:
    view = make_slider()
    view.set_value(25)
    recorder.calls.clear()
    assert view.ticking_up is True

    for _ in range(4):
        view.tick()

    assert recorder.values == [24, 23, 22, 21]
    assert view.ticking_up is False
    assert view.value_text() == "21"


def test_tick_turns_around_at_lower_bound(make_slider, recorder) -> None:
    view = make_slider()
    view.set_value(25)
    view.tick()
    view.set_value(-25)
    recorder.calls.clear()

    view.tick()
    view.tick()

    assert recorder.values == [-24, -23]
    assert view.ticking_up is True


def test_tick_from_zero_counts_up(make_slider, recorder) -> None:
    view = make_slider()

    view.tick()
    view.tick()

    assert recorder.values == [1, 2]
    assert view.value() == 2


def test_label_double_click_schedules_tick(make_slider, scheduler) -> None:
    view = make_slider(InsetEdge.LEFT)

    view._label.double_clicked.emit()
    view._label.double_clicked.emit()

    assert scheduler.active_count == 2


def test_set_value_nan_reports_zero(make_slider, recorder) -> None:
    view = make_slider()
    view.set_value(9)
    recorder.calls.clear()

    view.set_value(float("nan"))

    assert recorder.values == [0]
    assert view.value() == 0
