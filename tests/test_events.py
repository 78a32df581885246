"""
Unit Tests for domain events and the EventBus
"""

from nexus_player.domain.shared.events import (
    DomainEvent,
    EventBus,
    PlayerCreated,
    PlayerDestroyed,
    PlayerError,
)


class TestDomainEvent:
    def test_domain_event_has_unique_ids(self):
        assert DomainEvent().event_id != DomainEvent().event_id

    def test_domain_event_timestamp_is_utc(self):
        event = DomainEvent()

        assert event.occurred_at.tzinfo is not None

    def test_player_destroyed_excludes_player_from_dump(self):
        event = PlayerDestroyed(guild_id="g1", player=object())

        assert "player" not in event.model_dump()


class TestEventBus:
    async def test_publish_with_no_handlers(self):
        """Should not raise when nobody listens."""
        await EventBus().publish(PlayerCreated(guild_id="g1"))

    async def test_handlers_receive_matching_events_only(self):
        bus = EventBus()
        created = []
        errors = []

        async def on_created(event):
            created.append(event)

        async def on_error(event):
            errors.append(event)

        bus.subscribe(PlayerCreated, on_created)
        bus.subscribe(PlayerError, on_error)

        await bus.publish(PlayerCreated(guild_id="g1"))

        assert len(created) == 1
        assert errors == []

    async def test_publish_with_handler_exception(self):
        """Should keep calling other handlers when one fails."""
        bus = EventBus()
        called = []

        async def failing_handler(event):
            raise RuntimeError("Handler error")

        async def working_handler(event):
            called.append(event)

        bus.subscribe(PlayerError, failing_handler)
        bus.subscribe(PlayerError, working_handler)

        await bus.publish(PlayerError(guild_id="g1", status=500))

        assert len(called) == 1

    async def test_unsubscribe_handler(self):
        bus = EventBus()
        called = []

        async def handler(event):
            called.append(event)

        bus.subscribe(PlayerCreated, handler)
        bus.unsubscribe(PlayerCreated, handler)
        bus.unsubscribe(PlayerCreated, handler)

        await bus.publish(PlayerCreated(guild_id="g1"))

        assert called == []

    async def test_clear_removes_all_handlers(self):
        bus = EventBus()
        called = []

        async def handler(event):
            called.append(event)

        bus.subscribe(PlayerCreated, handler)
        bus.clear()

        await bus.publish(PlayerCreated(guild_id="g1"))

        assert called == []
