"""Infrastructure: application bootstrap, DI, settings, tick scheduler.

Lazy exports keep ``import button_insets.ui.infrastructure`` free of Qt GUI
initialization (headless CI may have PySide6 but no libGL).
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "create_application",
    "Container",
    "NotificationCenter",
    "install_error_boundary",
    "AppSettings",
    "TickScheduler",
]

_EXPORTS = {
    "create_application": "button_insets.ui.infrastructure.application",
    "Container": "button_insets.ui.infrastructure.di",
    "NotificationCenter": "button_insets.ui.infrastructure.notifications",
    "install_error_boundary": "button_insets.ui.infrastructure.error_boundary",
    "AppSettings": "button_insets.ui.infrastructure.settings",
    "TickScheduler": "button_insets.ui.infrastructure.tick_scheduler",
}


def __getattr__(name: str) -> Any:
    module = _EXPORTS.get(name)
    if module is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    return getattr(import_module(module), name)
