"""Tests for the publish/subscribe channel."""
import logging

import pytest

from formstate import EventChannel, SubmitEvent


def test_delivery_in_subscription_order():
    channel = EventChannel()
    received = []
    channel.on("change", lambda: received.append("first"))
    channel.on("change", lambda: received.append("second"))
    channel.emit("change")
    assert received == ["first", "second"]


def test_events_are_isolated_by_name():
    channel = EventChannel()
    received = []
    channel.on("value", lambda: received.append("value"))
    channel.emit("change")
    assert received == []


def test_emit_passes_arguments():
    channel = EventChannel()
    received = []
    channel.on("submit", lambda *args: received.append(args))
    channel.emit("submit", 1, "two")
    assert received == [(1, "two")]


def test_duplicate_subscription_is_ignored():
    channel = EventChannel()
    received = []

    def listener():
        received.append(1)

    channel.on("change", listener)
    channel.on("change", listener)
    channel.emit("change")
    assert received == [1]


def test_off_unsubscribes():
    channel = EventChannel()
    received = []

    def listener():
        received.append(1)

    channel.on("change", listener)
    channel.off("change", listener)
    channel.off("change", listener)
    channel.off("never-subscribed", listener)
    channel.emit("change")
    assert received == []
    assert channel.listeners("change") == []


def test_listener_may_unsubscribe_during_emit():
    channel = EventChannel()
    received = []

    def once():
        received.append("once")
        channel.off("change", once)

    channel.on("change", once)
    channel.on("change", lambda: received.append("always"))
    channel.emit("change")
    channel.emit("change")
    assert received == ["once", "always", "always"]


@pytest.mark.parametrize("name", ["", "   ", None])
def test_blank_event_name_rejected(name):
    with pytest.raises(ValueError):
        EventChannel().on(name, lambda: None)


def test_listener_errors_are_logged_and_skipped(caplog):
    channel = EventChannel()
    received = []

    def broken():
        raise RuntimeError("boom")

    channel.on("change", broken)
    channel.on("change", lambda: received.append("after"))
    with caplog.at_level(logging.WARNING, logger="formstate.events"):
        channel.emit("change")

    assert received == ["after"]
    assert "boom" in caplog.text


def test_listener_errors_propagate_when_configured():
    channel = EventChannel(raise_errors=True)

    def broken():
        raise RuntimeError("boom")

    channel.on("change", broken)
    with pytest.raises(RuntimeError, match="boom"):
        channel.emit("change")


def test_submit_event_records_prevent_default():
    event = SubmitEvent()
    assert event.default_prevented is False
    event.prevent_default()
    assert event.default_prevented is True
