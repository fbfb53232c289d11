from __future__ import annotations

import logging
import sys
import threading
import traceback
from types import TracebackType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from button_insets.ui.infrastructure.notifications import NotificationCenter


def install_error_boundary(notifications: NotificationCenter | None) -> None:
    """Install global exception hooks.

    Exceptions raised inside Qt slots (slider moves, timer ticks) would otherwise
    only reach stderr; log them and tell the user, then keep default behavior.
    """

    log = logging.getLogger(__name__)

    def _handle(
        exc_type: type[BaseException],
        exc: BaseException,
        tb: TracebackType | None,
    ) -> None:
        try:
            msg = "".join(traceback.format_exception(exc_type, exc, tb))
            log.error("Unhandled exception\n%s", msg)
            if notifications is not None:
                notifications.error(f"Unexpected error: {exc}. See logs for details.")
        finally:
            sys.__excepthook__(exc_type, exc, tb)

    sys.excepthook = _handle

    def _thread_hook(args: threading.ExceptHookArgs) -> None:
        if args.exc_value is None:
            return
        _handle(args.exc_type, args.exc_value, args.exc_traceback)

    threading.excepthook = _thread_hook
