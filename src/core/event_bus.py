import logging
import threading
from typing import Any, Callable

log = logging.getLogger("colorz.event_bus")

# Topics shared by the app, the bloc and the window
BUTTON_PRESSED = "button_pressed"
STATE_CHANGED = "state_changed"


class EventBus:
    """Synchronous publish/subscribe event system.

    Decouples user input (taps, keys) from the color bloc and the bloc's
    state updates from rendering.
    """

    def __init__(self):
        self._subscribers: dict[str, list[Callable]] = {}
        self._lock = threading.Lock()

    def subscribe(self, topic: str, callback: Callable) -> None:
        with self._lock:
            self._subscribers.setdefault(topic, []).append(callback)
        log.debug("Subscribed to '%s': %s", topic, _name(callback))

    def unsubscribe(self, topic: str, callback: Callable) -> None:
        with self._lock:
            if topic in self._subscribers:
                self._subscribers[topic] = [
                    cb for cb in self._subscribers[topic] if cb != callback
                ]

    def subscriber_count(self, topic: str) -> int:
        with self._lock:
            return len(self._subscribers.get(topic, []))

    def publish(self, topic: str, data: Any = None) -> None:
        with self._lock:
            callbacks = list(self._subscribers.get(topic, []))

        for callback in callbacks:
            try:
                callback(data)
            except Exception:
                log.exception(
                    "Error in handler for '%s': %s", topic, _name(callback)
                )


def _name(callback: Callable) -> str:
    return getattr(callback, "__qualname__", None) or repr(callback)
