"""Player registry and factory context.

One manager owns the guild -> player mapping, the node players send their
commands to and the event bus they publish lifecycle events on. It is
passed explicitly to everything that builds players.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from ...config.settings import PlayerSettings
from ...domain.player.value_objects import PlayerOptions, PlayerState
from ...domain.shared.events import EventBus
from ...domain.shared.exceptions import ConfigurationError, DomainError
from ...domain.shared.messages import ErrorMessages, LogTemplates
from .player import Player

if TYPE_CHECKING:
    from ..interfaces.playback_node import PlaybackNode
    from ..interfaces.track_resolver import SearchResult, TrackResolver

logger = logging.getLogger(__name__)


class PlayerManager:
    """Holds at most one :class:`Player` per guild."""

    def __init__(
        self,
        node: PlaybackNode | None = None,
        *,
        settings: PlayerSettings | None = None,
        events: EventBus | None = None,
        resolver: TrackResolver | None = None,
    ) -> None:
        self.node = node
        self.settings = settings or PlayerSettings()
        self.events = events or EventBus()
        self.resolver = resolver

        self._players: dict[str, Player] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._players)

    def __contains__(self, guild_id: object) -> bool:
        with self._lock:
            return guild_id in self._players

    @property
    def players(self) -> dict[str, Player]:
        """Snapshot of the registered players."""
        with self._lock:
            return dict(self._players)

    # === Registry ===

    def get(self, guild_id: str) -> Player | None:
        with self._lock:
            return self._players.get(guild_id)

    def set(self, guild_id: str, player: Player) -> None:
        with self._lock:
            self._players[guild_id] = player

    def register(self, player: Player) -> Player:
        """Register ``player`` unless its guild already has one; return the winner."""
        with self._lock:
            return self._players.setdefault(player.guild_id, player)

    def delete(self, guild_id: str, player: Player | None = None) -> bool:
        """Remove the guild's player.

        When ``player`` is given, only that instance is removed, so a late
        teardown cannot evict a newer player for the same guild.
        """
        with self._lock:
            current = self._players.get(guild_id)
            if current is None or (player is not None and current is not player):
                return False
            del self._players[guild_id]
            return True

    # === Factory ===

    async def create_player(self, options: PlayerOptions) -> Player:
        return await Player.create(self, options)

    # === Collaborators ===

    async def search(self, query: str, requester: str | None = None) -> SearchResult:
        if self.resolver is None:
            raise ConfigurationError(ErrorMessages.NO_RESOLVER)
        return await self.resolver.search(query, requester)

    async def dispatch_state_update(self, guild_id: str, state: PlayerState | str) -> bool:
        """Route a subscription state reported by the node to its player."""
        player = self.get(guild_id)
        if player is None:
            logger.debug(LogTemplates.MANAGER_UNKNOWN_GUILD, guild_id)
            return False
        await player.handle_state_update(state)
        return True

    async def destroy_all(self) -> None:
        players = list(self.players.values())
        logger.info(LogTemplates.MANAGER_SHUTDOWN, len(players))
        for player in players:
            try:
                await player.destroy()
            except DomainError:
                logger.exception(LogTemplates.MANAGER_DESTROY_FAILED, player.guild_id)
