"""UI composition container.

Single owner of the tick scheduler; views receive it by reference.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from button_insets.ui.infrastructure.tick_scheduler import TickScheduler

if TYPE_CHECKING:
    from button_insets.ui.infrastructure.notifications import NotificationCenter
    from button_insets.ui.theme.manager import ThemeManager


class Container:
    def __init__(self, tick_scheduler: TickScheduler | None = None) -> None:
        self.tick_scheduler = tick_scheduler if tick_scheduler is not None else TickScheduler()
        self.theme_manager: ThemeManager | None = None
        self.notifications: NotificationCenter | None = None

    def shutdown(self) -> None:
        self.tick_scheduler.cancel_all()


__all__ = ["Container"]
