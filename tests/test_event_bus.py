import logging

from core.event_bus import EventBus


def test_publish_reaches_subscribers_in_order():
    bus = EventBus()
    calls = []
    bus.subscribe("tick", lambda data: calls.append(("a", data)))
    bus.subscribe("tick", lambda data: calls.append(("b", data)))

    bus.publish("tick", 1)

    assert calls == [("a", 1), ("b", 1)]


def test_publish_without_subscribers_is_noop():
    EventBus().publish("nobody", {"x": 1})


def test_unsubscribe_bound_method():
    class Handler:
        def __init__(self):
            self.calls = 0

        def on_tick(self, data):
            self.calls += 1

    bus = EventBus()
    handler = Handler()
    bus.subscribe("tick", handler.on_tick)
    bus.publish("tick")
    bus.unsubscribe("tick", handler.on_tick)
    bus.publish("tick")

    assert handler.calls == 1
    assert bus.subscriber_count("tick") == 0


def test_failing_handler_is_logged_and_others_still_run(caplog, monkeypatch):
    bus = EventBus()
    calls = []

    def broken(data):
        raise RuntimeError("boom")

    bus.subscribe("tick", broken)
    bus.subscribe("tick", calls.append)

    # setup_logging turns propagation off for the colorz namespace
    monkeypatch.setattr(logging.getLogger("colorz"), "propagate", True)
    with caplog.at_level(logging.ERROR, logger="colorz.event_bus"):
        bus.publish("tick", "data")

    assert calls == ["data"]
    assert "Error in handler for 'tick'" in caplog.text
