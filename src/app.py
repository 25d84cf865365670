"""colorz application wiring.

Owns the event bus, the color bloc and the screen for as long as the
screen is shown. Input (taps, keys) is published on the bus as
``button_pressed`` and turned into bloc events here.
"""

import logging

from PIL import Image

from bloc.color_bloc import ColorBloc
from bloc.events import ColorEvent
from bloc.state import ColorState
from core.event_bus import EventBus, BUTTON_PRESSED, STATE_CHANGED
from ui.color_screen import ColorScreen

log = logging.getLogger("colorz.app")

BUTTON_EVENTS = {
    "blue": ColorEvent.SET_BLUE,
    "red": ColorEvent.SET_RED,
}


class ColorzApp:
    """Single-screen app: a swatch toggled between blue and red."""

    def __init__(self, config: dict, event_bus: EventBus | None = None,
                 bloc: ColorBloc | None = None):
        self.config = config
        if bloc is not None and event_bus is not None and bloc.event_bus is not event_bus:
            raise ValueError("bloc must publish on the same event bus as the app")
        # App, bloc and window share one bus
        self.event_bus = event_bus or (bloc.event_bus if bloc else EventBus())
        self.bloc = bloc or ColorBloc(event_bus=self.event_bus)
        self.screen = ColorScreen(config)
        self._keys = {
            keysym: name for name, keysym in config.get("keys", {}).items()
        }

        self.event_bus.subscribe(BUTTON_PRESSED, self._on_button)

    @property
    def state(self) -> ColorState:
        return self.bloc.state

    def start(self) -> ColorState:
        """Resolve the initial color before the first frame is shown."""
        log.info("Starting %s", self.config["window"]["title"])
        return self.bloc.add(ColorEvent.INITIALIZE)

    # --- Input ---

    def tap(self, x: int, y: int) -> bool:
        """Handle a pointer tap. Returns True if it hit a button."""
        name = self.screen.button_at(x, y)
        if name is None:
            log.debug("Tap at (%d, %d) missed the buttons", x, y)
            return False
        return self.press(name)

    def key(self, keysym: str) -> bool:
        """Handle a key press. Returns True if the key is bound to a button."""
        name = self._keys.get(keysym)
        if name is None:
            return False
        return self.press(name)

    def press(self, name: str) -> bool:
        if name not in BUTTON_EVENTS:
            log.debug("Unknown button: %s", name)
            return False
        self.event_bus.publish(BUTTON_PRESSED, {"button": name})
        return True

    def _on_button(self, data: dict) -> None:
        event = BUTTON_EVENTS.get(data["button"])
        if event is None:
            return
        state = self.bloc.add(event)
        log.info("→ %s: %s", data["button"], state)

    # --- Output ---

    def render(self) -> Image.Image:
        return self.screen.render(self.bloc.state)

    def shutdown(self) -> None:
        self.event_bus.unsubscribe(BUTTON_PRESSED, self._on_button)
        log.info("Shutdown complete (%d state listeners still attached)",
                 self.event_bus.subscriber_count(STATE_CHANGED))
