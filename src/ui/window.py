"""Tk window that shows the colorz screen.

Clicks and key presses go to the app; the frame is redrawn whenever the
bloc publishes a new state.
"""

from __future__ import annotations
import logging
import tkinter as tk
from typing import TYPE_CHECKING

from PIL import ImageTk

from core.event_bus import STATE_CHANGED

if TYPE_CHECKING:
    from app import ColorzApp

log = logging.getLogger("colorz.ui.window")


class ColorWindow:
    """Hosts the rendered frame in a Tk label."""

    def __init__(self, app: ColorzApp):
        self.app = app
        window = app.config["window"]

        self.root = tk.Tk()
        self.root.title(window["title"])
        self.root.geometry(f"{window['width']}x{window['height']}")
        self.root.resizable(False, False)

        self._photo: ImageTk.PhotoImage | None = None
        self._label = tk.Label(self.root, borderwidth=0, highlightthickness=0)
        self._label.pack()

        self._label.bind("<Button-1>", self._on_click)
        self.root.bind("<Key>", self._on_key)
        self.root.protocol("WM_DELETE_WINDOW", self.close)

        self.app.event_bus.subscribe(STATE_CHANGED, self._on_state_changed)
        self.redraw()

    def redraw(self) -> None:
        # Keep a reference: Tk does not hold on to the PhotoImage
        self._photo = ImageTk.PhotoImage(self.app.render())
        self._label.configure(image=self._photo)

    def _on_click(self, event: tk.Event) -> None:
        self.app.tap(event.x, event.y)

    def _on_key(self, event: tk.Event) -> None:
        if event.keysym == "Escape":
            self.close()
            return
        self.app.key(event.keysym)

    def _on_state_changed(self, data: dict) -> None:
        self.redraw()

    def run(self) -> None:
        self.app.start()
        log.info("Ready! Click a button or press %s",
                 "/".join(self.app.config["keys"].values()))
        try:
            self.root.mainloop()
        finally:
            self.app.event_bus.unsubscribe(STATE_CHANGED, self._on_state_changed)
            self.app.shutdown()

    def close(self) -> None:
        log.info("Window closed")
        self.root.destroy()
