"""Application constants: inset slider range, auto-tick period and the names
QSettings uses to locate its storage.
"""

# QSettings / QApplication identity
ORGANIZATION_NAME = "ButtonInsetsLab"
APPLICATION_NAME = "Button Insets Lab"

# Inset sliders
INSET_MIN = -25
INSET_MAX = 25

# Auto-tick period for animated sliders
TICK_INTERVAL_MS = 100
