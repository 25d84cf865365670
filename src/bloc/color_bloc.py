"""Color bloc: the blue/red state machine behind the colorz screen.

Events go in through ``add``; every processed event emits exactly one
new state, published on the event bus as ``state_changed``.
"""

import logging
from typing import Callable

from bloc.events import ColorEvent
from bloc.state import ColorState, Resolved, UNINITIALIZED
from core.event_bus import EventBus, STATE_CHANGED

log = logging.getLogger("colorz.bloc.color_bloc")


class ColorBloc:
    """Holds the color flag and turns events into states."""

    def __init__(self, event_bus: EventBus | None = None):
        self.event_bus = event_bus or EventBus()
        self._is_blue = True  # survives INITIALIZE
        self._state: ColorState = UNINITIALIZED

    @property
    def state(self) -> ColorState:
        return self._state

    @property
    def is_blue(self) -> bool:
        return self._is_blue

    def add(self, event: ColorEvent) -> ColorState:
        """Process one event and notify listeners with the new state."""
        if not isinstance(event, ColorEvent):
            raise TypeError(f"Expected ColorEvent, got {type(event).__name__}")

        if event is ColorEvent.SET_BLUE:
            self._is_blue = True
        elif event is ColorEvent.SET_RED:
            self._is_blue = False
        # INITIALIZE re-emits the current flag

        self._state = Resolved(is_blue=self._is_blue)
        log.debug("%s → %s", event.name, self._state)

        self.event_bus.publish(STATE_CHANGED, {"state": self._state, "event": event})
        return self._state

    def listen(self, callback: Callable[[ColorState], None]) -> Callable[[], None]:
        """Call ``callback(state)`` after every event. Returns an unsubscribe function."""

        def on_state_changed(data: dict) -> None:
            callback(data["state"])

        self.event_bus.subscribe(STATE_CHANGED, on_state_changed)

        def unsubscribe() -> None:
            self.event_bus.unsubscribe(STATE_CHANGED, on_state_changed)

        return unsubscribe
