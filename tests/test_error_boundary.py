from __future__ import annotations

import logging
import sys
import threading


class _Notifications:
    def __init__(self) -> None:
        self.errors: list[str] = []

    def error(self, message: str) -> None:
        self.errors.append(message)


def test_unhandled_exception_is_logged_and_reported(monkeypatch, caplog) -> None:
    from button_insets.ui.infrastructure.error_boundary import install_error_boundary

    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    monkeypatch.setattr(threading, "excepthook", threading.excepthook)
    monkeypatch.setattr(sys, "__excepthook__", lambda *args: None)
    notifications = _Notifications()

    install_error_boundary(notifications)
    try:
        raise RuntimeError("slot failed")
    except RuntimeError:
        with caplog.at_level(logging.ERROR):
            sys.excepthook(*sys.exc_info())

    assert any("slot failed" in r.getMessage() for r in caplog.records)
    assert len(notifications.errors) == 1
    assert "slot failed" in notifications.errors[0]


def test_container_shutdown_cancels_ticks(qapp) -> None:
    from button_insets.ui.infrastructure.di import Container

    container = Container()
    container.tick_scheduler.schedule(lambda: None)

    container.shutdown()

    assert container.tick_scheduler.active_count == 0
