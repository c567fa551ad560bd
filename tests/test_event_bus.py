import logging

import pytest

from delve.events import EventBus


def test_subscribers_called_in_order():
    bus = EventBus()
    calls = []
    bus.subscribe("x", lambda e: calls.append(("first", e.payload["n"])))
    bus.subscribe("x", lambda e: calls.append(("second", e.payload["n"])))
    bus.publish("x", {"n": 1})
    assert calls == [("first", 1), ("second", 1)]


def test_unsubscribe():
    bus = EventBus()
    calls = []

    def cb(event):
        calls.append(event.name)

    bus.subscribe("x", cb)
    bus.unsubscribe("x", cb)
    bus.publish("x", {})
    assert calls == []


def test_failing_subscriber_does_not_block_others(caplog):
    bus = EventBus()
    calls = []

    def boom(event):
        raise RuntimeError("boom")

    bus.subscribe("x", boom)
    bus.subscribe("x", lambda e: calls.append(e.name))
    with caplog.at_level(logging.ERROR, logger="delve.events.event_bus"):
        bus.publish("x", {})
    assert calls == ["x"]
    assert any("Unhandled exception" in r.getMessage() for r in caplog.records)


def test_non_callable_rejected():
    with pytest.raises(TypeError):
        EventBus().subscribe("x", "not callable")
