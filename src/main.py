#!/usr/bin/env python3
"""colorz: main entry point.

Opens a single window with a square swatch and two buttons. Tapping
"blue" or "red" (or pressing b / r) sends the matching event to the
color bloc, and the window redraws with the state it emits.
"""

import sys
import os
import logging
import tkinter as tk

# Add src/ to path so imports work when running directly
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config import load_config
from core.logging_config import setup_logging
from app import ColorzApp
from ui.window import ColorWindow

log = logging.getLogger("colorz.main")


def main() -> None:
    setup_logging()
    log.info("=== colorz ===")

    config = load_config()
    app = ColorzApp(config)

    try:
        window = ColorWindow(app)
    except tk.TclError:
        log.exception("Could not open a window. Is a display available?")
        sys.exit(1)

    try:
        window.run()
    except KeyboardInterrupt:
        log.info("Interrupted, stopping...")


if __name__ == "__main__":
    main()
