from __future__ import annotations

import json
import logging


def test_logging_setup_writes_text_file(tmp_path) -> None:
    from button_insets.core.observability.logging_config import setup_logging

    setup_logging(level="DEBUG", json_logs=False, log_to_file=True, state_dir=tmp_path)
    logging.getLogger("button_insets.test").info("smoke")
    for handler in logging.getLogger().handlers:
        handler.flush()

    text = (tmp_path / "logs" / "app.log").read_text(encoding="utf-8")
    assert "smoke" in text
    assert logging.getLogger().level == logging.DEBUG


def test_json_formatter_includes_extras() -> None:
    from button_insets.core.observability.logging_config import _JsonFormatter

    record = logging.LogRecord("x", logging.INFO, __file__, 1, "tick %s", ("top",), None)
    record.edge = "top"

    payload = json.loads(_JsonFormatter().format(record))

    assert payload["msg"] == "tick top"
    assert payload["edge"] == "top"
    assert payload["level"] == "INFO"


def test_version_string_appends_release_sha(monkeypatch) -> None:
    from button_insets.core import version as version_mod

    monkeypatch.setattr(version_mod, "version", lambda _name: "1.2.0")
    monkeypatch.setenv("INSETS_GIT_SHA", "abc123")

    assert version_mod.get_version_string() == "v1.2.0 (abc123)"


def test_default_state_dir_uses_xdg_data_home(monkeypatch, tmp_path) -> None:
    from button_insets.core.observability import logging_config

    monkeypatch.setattr(logging_config.sys, "platform", "linux")
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))

    assert logging_config.default_state_dir() == tmp_path / "button_insets"


def test_version_falls_back_outside_an_install(monkeypatch) -> None:
    from importlib.metadata import PackageNotFoundError

    from button_insets.core import version as version_mod

    def _missing(_name: str) -> str:
        raise PackageNotFoundError(_name)

    monkeypatch.setattr(version_mod, "version", _missing)
    monkeypatch.delenv("INSETS_GIT_SHA", raising=False)

    assert version_mod.get_version() == "0.0.0-dev"
    assert version_mod.get_version_string() == "v0.0.0-dev"


def test_theme_persisted_in_settings(qapp, tmp_path) -> None:
    from PySide6.QtCore import QSettings

    from button_insets.ui.infrastructure.settings import AppSettings
    from button_insets.ui.theme.manager import THEME_DARK, THEME_LIGHT, ThemeManager
    from button_insets.ui.theme.tokens import DARK, Tokens

    settings = AppSettings(QSettings(str(tmp_path / "s.ini"), QSettings.Format.IniFormat))
    manager = ThemeManager(settings)

    manager.set_theme(THEME_LIGHT)
    manager.toggle()

    assert manager.get_theme() == THEME_DARK
    assert settings.get_theme() == THEME_DARK
    assert Tokens.surface == DARK.surface
    manager.set_theme(THEME_LIGHT)
