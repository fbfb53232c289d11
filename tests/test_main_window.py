from __future__ import annotations

import pytest

from button_insets.core.insets import EdgeInsets, InsetCategory, InsetEdge


@pytest.fixture
def window(qapp, scheduler, tmp_path):
    from PySide6.QtCore import QSettings

    from button_insets.ui.infrastructure.di import Container
    from button_insets.ui.infrastructure.settings import AppSettings
    from button_insets.ui.shell.main_window import MainWindow

    qsettings = QSettings(str(tmp_path / "settings.ini"), QSettings.Format.IniFormat)
    win = MainWindow(AppSettings(qsettings), container=Container(tick_scheduler=scheduler))
    yield win
    win.close()


def test_slider_change_reaches_every_sample_button(window) -> None:
    window.all_insets_view.view(InsetCategory.IMAGE).slider(InsetEdge.TOP).set_value(10)

    for button in window.buttons_view.buttons():
        assert button.insets(InsetCategory.IMAGE) == EdgeInsets(10, 0, 0, 0)


def test_reset_zeroes_buttons_and_stops_animations(window) -> None:
    content = window.all_insets_view.view(InsetCategory.CONTENT)
    content.slider(InsetEdge.LEFT).set_value(-7)
    content.slider(InsetEdge.TOP).start_auto_tick()
    window.animate_all()
    assert window.tick_scheduler.active_count == 2

    window.reset_button.click()

    assert window.tick_scheduler.active_count == 0
    for button in window.buttons_view.buttons():
        for category in InsetCategory:
            assert button.insets(category) == EdgeInsets.zero()


def test_status_bar_shows_running_animations(window) -> None:
    window.animate_all()
    assert window._ticks_label.text() == "Animations: 1"

    window.reset()
    assert window._ticks_label.text() == "Animations: 0"


def test_close_cancels_ticks_and_saves_geometry(window) -> None:
    window.show()
    window.animate_all()

    window.close()

    assert window.tick_scheduler.active_count == 0
    assert window._settings.get_main_window_geometry() is not None
