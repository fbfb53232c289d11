"""Version shown in the window title and QApplication metadata."""

from __future__ import annotations

import os
from importlib.metadata import PackageNotFoundError, version

DIST_NAME = "button-insets-lab"


def get_version() -> str:
    """Installed distribution version; ``0.0.0-dev`` when running from a plain checkout."""
    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        return "0.0.0-dev"


def get_version_string() -> str:
    # INSETS_GIT_SHA is set by release builds only
    sha = os.getenv("INSETS_GIT_SHA", "").strip()
    return f"v{get_version()} ({sha})" if sha else f"v{get_version()}"
