"""Dependency Injection Container

Builds the playback node, event bus and player manager from settings.
Components are created on first access and cached for reuse.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..domain.shared.messages import LogTemplates
from ..utils.logging import setup_logging

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ..application.interfaces.playback_node import PlaybackNode
    from ..application.interfaces.track_resolver import TrackResolver
    from ..application.services.player_manager import PlayerManager
    from ..domain.shared.events import EventBus
    from .settings import Settings


@dataclass
class Container:
    """Dependency injection container.

    Components are lazily initialized when first accessed.
    """

    settings: Settings

    _node: PlaybackNode | None = None
    _event_bus: EventBus | None = None
    _track_resolver: TrackResolver | None = None
    _player_manager: PlayerManager | None = None

    @property
    def node(self) -> PlaybackNode:
        """Get the playback node client."""
        if self._node is None:
            from ..infrastructure.node.http_node import HttpPlaybackNode

            self._node = HttpPlaybackNode(self.settings.node)
        return self._node

    @property
    def event_bus(self) -> EventBus:
        if self._event_bus is None:
            from ..domain.shared.events import EventBus

            self._event_bus = EventBus()
        return self._event_bus

    @property
    def track_resolver(self) -> TrackResolver | None:
        return self._track_resolver

    def set_track_resolver(self, resolver: TrackResolver) -> None:
        """Plug in the search collaborator used by Player.search()."""
        self._track_resolver = resolver
        if self._player_manager is not None:
            self._player_manager.resolver = resolver

    @property
    def player_manager(self) -> PlayerManager:
        """Get the player registry/factory."""
        if self._player_manager is None:
            from ..application.services.player_manager import PlayerManager

            self._player_manager = PlayerManager(
                self.node,
                settings=self.settings.player,
                events=self.event_bus,
                resolver=self._track_resolver,
            )
        return self._player_manager

    # === Lifecycle ===

    async def shutdown(self) -> None:
        """Destroy every player and close the node client."""
        logger.info(LogTemplates.CONTAINER_SHUTDOWN)
        try:
            if self._player_manager is not None:
                await self._player_manager.destroy_all()
        finally:
            if self._node is not None:
                await self._node.aclose()
            if self._event_bus is not None:
                self._event_bus.clear()


def create_container(settings: Settings, *, configure_logging: bool = True) -> Container:
    """Create a new dependency injection container.

    Console logging is set up from ``settings.log_level`` unless the host
    application configures logging itself.
    """
    if configure_logging:
        setup_logging(settings.log_level)
    return Container(settings)
