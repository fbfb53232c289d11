"""App shell: main window."""

from button_insets.ui.shell.main_window import MainWindow

__all__ = ["MainWindow"]
