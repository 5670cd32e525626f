"""Tests for EventBus delivery order and listener isolation."""

from __future__ import annotations

from zomboidscripts.events import (
    AllCleared,
    DataReady,
    EventBus,
    FileAdded,
    LoadCompleted,
)


class TestEventBus:
    def test_typed_subscription(self) -> None:
        bus = EventBus()
        seen: list = []
        bus.subscribe(FileAdded, seen.append)
        bus.publish(FileAdded("/a.txt"))
        bus.publish(AllCleared())
        assert seen == [FileAdded("/a.txt")]

    def test_wildcard_subscription(self) -> None:
        bus = EventBus()
        seen: list = []
        bus.subscribe_all(seen.append)
        bus.publish(FileAdded("/a.txt"))
        bus.publish(AllCleared())
        assert seen == [FileAdded("/a.txt"), AllCleared()]

    def test_unsubscribe(self) -> None:
        bus = EventBus()
        seen: list = []
        bus.subscribe(AllCleared, seen.append)
        bus.subscribe_all(seen.append)
        bus.unsubscribe(seen.append)
        bus.publish(AllCleared())
        assert seen == []

    def test_failing_listener_does_not_block_others(self, caplog) -> None:
        bus = EventBus()
        seen: list = []

        def broken(event: object) -> None:
            raise RuntimeError("boom")

        bus.subscribe(AllCleared, broken)
        bus.subscribe(AllCleared, seen.append)
        bus.publish(AllCleared())
        assert seen == [AllCleared()]
        assert "failed on AllCleared" in caplog.text

    def test_nested_publish_is_delivered_after_current_event(self) -> None:
        bus = EventBus()
        seen: list = []
        bus.subscribe(LoadCompleted, lambda e: bus.publish(DataReady(e.count)))
        bus.subscribe_all(seen.append)
        bus.publish(LoadCompleted(3))
        assert seen == [LoadCompleted(3), DataReady(3)]
