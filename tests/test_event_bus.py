from themes_report.gui.services.event_bus import EventBus, TableEvent


def test_subscribe_publish_basic():
    bus = EventBus()
    received = []
    bus.subscribe(TableEvent.SORT_CHANGED, lambda evt: received.append((evt.name, evt.payload)))
    bus.publish(TableEvent.SORT_CHANGED, {"key": "m1"})
    assert received == [(TableEvent.SORT_CHANGED.value, {"key": "m1"})]


def test_once_subscription():
    bus = EventBus()
    count = 0

    def incr(_):
        nonlocal count
        count += 1

    bus.subscribe(TableEvent.HOVER_CHANGED, incr, once=True)
    bus.publish(TableEvent.HOVER_CHANGED)
    bus.publish(TableEvent.HOVER_CHANGED)
    assert count == 1
    assert bus.subscriber_count(TableEvent.HOVER_CHANGED) == 0


def test_error_isolation():
    bus = EventBus()
    order = []

    def bad(_):
        order.append("bad")
        raise RuntimeError("boom")

    def good(_):
        order.append("good")

    bus.subscribe("custom", bad)
    bus.subscribe("custom", good)
    bus.publish("custom", 123)
    assert order == ["bad", "good"]
    assert len(bus.errors) == 1


def test_unsubscribe():
    bus = EventBus()
    received = []
    sub = bus.subscribe("x", received.append)
    bus.unsubscribe(sub)
    bus.publish("x", 1)
    assert received == []
    assert not sub.active
