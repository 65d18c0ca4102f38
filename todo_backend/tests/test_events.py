import logging

from tracker.events import EventType, InMemoryEventBus, TodoEvent, log_event
from tracker.uow import UnitOfWork
from tracker.values import TodoId


class TestEventBus:
    def test_publishes_to_subscribers(self, bus):
        received = []
        bus.subscribe(received.append)
        event = TodoEvent.created(TodoId.generate())
        bus.publish(event)
        assert received == [event]

    def test_multiple_subscribers(self, bus):
        first, second = [], []
        bus.subscribe(first.append)
        bus.subscribe(second.append)
        event = TodoEvent.completed(TodoId.generate())
        bus.publish(event)
        assert first == [event]
        assert second == [event]

    def test_unsubscribe_removes_handler(self, bus):
        received = []
        unsubscribe = bus.subscribe(received.append)
        unsubscribe()
        bus.publish(TodoEvent.created(TodoId.generate()))
        assert received == []

    def test_event_factories(self):
        todo_id = TodoId.generate()
        assert [e.type for e in (
            TodoEvent.created(todo_id),
            TodoEvent.completed(todo_id),
            TodoEvent.reopened(todo_id),
            TodoEvent.archived(todo_id),
        )] == [EventType.CREATED, EventType.COMPLETED, EventType.REOPENED, EventType.ARCHIVED]

    def test_log_event_subscriber(self, caplog):
        caplog.set_level(logging.INFO, logger="tracker.events")
        bus = InMemoryEventBus()
        bus.subscribe(log_event)
        todo_id = TodoId.generate()
        bus.publish(TodoEvent.archived(todo_id))
        assert f"[Event] Archived: {todo_id.unwrap()}" in caplog.text


class TestUnitOfWork:
    def test_starts_empty(self, uow):
        assert uow.events == ()

    def test_commit_publishes_in_order_once(self, uow, published):
        todo_id = TodoId.generate()
        created = TodoEvent.created(todo_id)
        completed = TodoEvent.completed(todo_id)
        uow.add(created)
        uow.add(completed)
        assert published == []

        uow.commit()
        assert published == [created, completed]
        assert uow.events == ()

    def test_multiple_commits_are_independent(self, uow, published):
        uow.add(TodoEvent.created(TodoId.generate()))
        uow.commit()
        uow.add(TodoEvent.completed(TodoId.generate()))
        uow.commit()
        assert [e.type for e in published] == [EventType.CREATED, EventType.COMPLETED]

    def test_commit_with_nothing_pending(self, uow, published):
        uow.commit()
        assert published == []

    def test_separate_units_do_not_share_events(self, bus, published):
        first, second = UnitOfWork(bus), UnitOfWork(bus)
        first.add(TodoEvent.created(TodoId.generate()))
        second.commit()
        assert published == []
        assert len(first.events) == 1
