"""
Entry point for Button Insets Lab.

Run: python main.py
Requires: pip install -e .
"""
from __future__ import annotations

import sys

from button_insets.__main__ import main

if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(0)
