"""Tests for Observable."""

import logging

import pytest

from newsfeed.observable import Observable


def test_value_and_set() -> None:
    obs = Observable(1)
    assert obs.value == 1
    obs.set(2)
    assert obs.value == 2


def test_subscribe_emits_current_value() -> None:
    obs = Observable("a")
    seen: list[str] = []
    obs.subscribe(seen.append)
    assert seen == ["a"]


def test_subscribe_without_current_value() -> None:
    obs = Observable("a")
    seen: list[str] = []
    obs.subscribe(seen.append, emit_current=False)
    obs.set("b")
    assert seen == ["b"]


def test_equal_values_are_not_reemitted() -> None:
    obs = Observable((1, 2))
    seen: list[tuple[int, ...]] = []
    obs.subscribe(seen.append, emit_current=False)
    obs.set((1, 2))
    obs.set((1, 2, 3))
    assert seen == [(1, 2, 3)]


def test_subscribers_notified_in_order() -> None:
    obs = Observable(0)
    calls: list[str] = []
    obs.subscribe(lambda v: calls.append(f"first:{v}"), emit_current=False)
    obs.subscribe(lambda v: calls.append(f"second:{v}"), emit_current=False)
    obs.set(1)
    assert calls == ["first:1", "second:1"]


def test_unsubscribe_stops_delivery() -> None:
    obs = Observable(0)
    seen: list[int] = []
    unsubscribe = obs.subscribe(seen.append, emit_current=False)
    obs.set(1)
    unsubscribe()
    unsubscribe()  # second call is harmless
    obs.set(2)
    assert seen == [1]


def test_clear_drops_all_subscribers() -> None:
    obs = Observable(0)
    seen: list[int] = []
    obs.subscribe(seen.append, emit_current=False)
    obs.clear()
    obs.set(1)
    assert seen == []
    assert obs.value == 1


def test_failing_subscriber_does_not_block_others(caplog: pytest.LogCaptureFixture) -> None:
    obs = Observable(0)
    seen: list[int] = []

    def broken(_: int) -> None:
        raise RuntimeError("render failed")

    obs.subscribe(broken, emit_current=False)
    obs.subscribe(seen.append, emit_current=False)

    with caplog.at_level(logging.ERROR, logger="newsfeed.observable"):
        obs.set(5)

    assert seen == [5]
    assert obs.value == 5
    assert "subscriber" in caplog.text
