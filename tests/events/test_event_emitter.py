"""
Tests for the event emitter.

These cover subscription, priority ordering, one-shot listeners and the
handling of listeners that raise.
"""

import logging
from unittest.mock import MagicMock

from twentyone.events import EventEmitter, EventPriority, ShoeEventType


def test_on_with_string_event_type():
    emitter = EventEmitter()
    callback = MagicMock()

    unsubscribe = emitter.on("test_event", callback)
    emitter.emit("test_event", {"value": "test"})
    callback.assert_called_once_with({"value": "test"})

    unsubscribe()
    emitter.emit("test_event", {"value": "test2"})
    callback.assert_called_once()


def test_on_with_enum_event_type():
    emitter = EventEmitter()
    callback = MagicMock()
    emitter.on(ShoeEventType.RESHUFFLE_OCCURRED, callback)

    emitter.emit(ShoeEventType.RESHUFFLE_OCCURRED, "data")
    emitter.emit(ShoeEventType.RESHUFFLE_REQUIRED, "other")

    callback.assert_called_once_with("data")


def test_enum_and_name_are_the_same_event():
    emitter = EventEmitter()
    callback = MagicMock()
    emitter.on(ShoeEventType.RESHUFFLE_OCCURRED, callback)
    emitter.emit("RESHUFFLE_OCCURRED", 1)
    callback.assert_called_once_with(1)


def test_priority_order():
    emitter = EventEmitter()
    calls = []
    emitter.on("evt", lambda _: calls.append("low"), EventPriority.LOW)
    emitter.on("evt", lambda _: calls.append("critical"), EventPriority.CRITICAL)
    emitter.on("evt", lambda _: calls.append("normal"))
    emitter.on("evt", lambda _: calls.append("high"), EventPriority.HIGH)

    emitter.emit("evt", None)

    assert calls == ["critical", "high", "normal", "low"]


def test_once():
    emitter = EventEmitter()
    callback = MagicMock()
    emitter.once("evt", callback)
    emitter.emit("evt", 1)
    emitter.emit("evt", 2)
    callback.assert_called_once_with(1)
    assert emitter.listener_count("evt") == 0


def test_on_any_receives_event_type():
    emitter = EventEmitter()
    callback = MagicMock()
    unsubscribe = emitter.on_any(callback)

    emitter.emit(ShoeEventType.RESHUFFLE_REQUIRED, "x")
    callback.assert_called_once_with(("RESHUFFLE_REQUIRED", "x"))

    unsubscribe()
    emitter.emit("evt", "y")
    callback.assert_called_once()


def test_failing_handler_is_logged_and_others_still_run(caplog):
    emitter = EventEmitter()
    after = MagicMock()

    def broken(_):
        raise ValueError("boom")

    emitter.on("evt", broken, EventPriority.HIGH)
    emitter.on("evt", after)

    with caplog.at_level(logging.ERROR, logger="twentyone.events"):
        emitter.emit("evt", 1)

    after.assert_called_once_with(1)
    assert "Error in event handler for evt" in caplog.text


def test_remove_all_listeners():
    emitter = EventEmitter()
    emitter.on("a", MagicMock())
    emitter.on("b", MagicMock())
    emitter.on_any(MagicMock())
    assert emitter.listener_count() == 3

    emitter.remove_all_listeners("a")
    assert emitter.listener_count("a") == 0
    assert emitter.listener_count("b") == 1

    emitter.remove_all_listeners()
    assert emitter.listener_count() == 0
