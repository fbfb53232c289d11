from __future__ import annotations

import ctypes.util
import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """Single QApplication for the session; skip when the Qt runtime is unavailable."""
    pytest.importorskip("PySide6")
    if ctypes.util.find_library("GL") is None:
        pytest.skip("PySide6 runtime is not fully available in this environment: libGL is missing")
    try:
        from PySide6.QtWidgets import QApplication
    except ImportError as exc:
        pytest.skip(f"PySide6 QtWidgets unavailable in this environment: {exc}")

    app = QApplication.instance() or QApplication([])
    yield app


class Recorder:
    """Collects callback arguments in call order."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def __call__(self, *args) -> None:
        self.calls.append(args)

    @property
    def values(self) -> list:
        return [c[0] if len(c) == 1 else c for c in self.calls]


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def scheduler(qapp):
    from button_insets.ui.infrastructure.tick_scheduler import TickScheduler

    sched = TickScheduler(interval_ms=10)
    yield sched
    sched.cancel_all()
