"""Player - controls one guild's playback session on a remote node.

The player keeps track of the session state and sends ordered control
commands to the node. It never decodes or streams audio itself.

Known limitation: there is no compensating transaction. If a node command
fails half way through :meth:`Player.stop` or :meth:`Player.destroy`, the
steps that already ran stay applied (for example an emptied queue with the
subscription still open) and the error propagates to the caller.

Overlapping teardowns share one task: later callers wait for the running
teardown and see its outcome, including its exception.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from ...domain.player.queue import Queue
from ...domain.player.value_objects import AudioFilter, PlayerOptions, PlayerState
from ...domain.shared.events import PlayerCreated, PlayerDestroyed, PlayerError, PlayerStateChanged
from ...domain.shared.exceptions import (
    ConfigurationError,
    ConnectTimeoutError,
    EmptyQueueError,
    NodeCommandError,
)
from ...domain.shared.messages import ErrorMessages, LogTemplates
from ..interfaces.playback_node import HttpMethod, NodeCommand, NodeResponse

if TYPE_CHECKING:
    from ..interfaces.playback_node import PlaybackNode
    from ..interfaces.track_resolver import SearchResult
    from .player_manager import PlayerManager

logger = logging.getLogger(__name__)


class Player:
    """Session controller for a single guild.

    Build players with :meth:`create` (or ``PlayerManager.create_player``) so
    that at most one player exists per guild.
    """

    def __init__(self, manager: PlayerManager, node: PlaybackNode, options: PlayerOptions) -> None:
        self.manager = manager
        self.node = node
        self.guild_id = options.guild_id
        self.voice_channel_id: str | None = options.voice_channel_id
        self.text_channel_id: str | None = options.text_channel_id

        self.queue = Queue()
        self.state = PlayerState.CONNECTING
        self.playing = False
        self.track_repeat = False
        self.queue_repeat = False
        self.volume: int = (
            options.volume if options.volume is not None else manager.settings.default_volume
        )

        self._teardown_task: asyncio.Task[None] | None = None
        self._teardown_stops_track = False
        self._destroyed = False

    def __repr__(self) -> str:
        return (
            f"<Player guild={self.guild_id} state={self.state} "
            f"playing={self.playing} queued={self.queue.size}>"
        )

    @classmethod
    async def create(cls, manager: PlayerManager | None, options: PlayerOptions) -> Player:
        """Return the guild's player, creating and connecting one if needed.

        Registration happens before the first await, so concurrent calls for
        the same guild always end up with the same instance.
        """
        if manager is None:
            raise ConfigurationError(ErrorMessages.MANAGER_NOT_INITIALIZED)

        existing = manager.get(options.guild_id)
        if existing is not None:
            logger.debug(LogTemplates.PLAYER_REUSED, options.guild_id)
            return existing

        if manager.node is None:
            raise ConfigurationError(ErrorMessages.NO_AVAILABLE_NODES)

        player = cls(manager, manager.node, options)
        registered = manager.register(player)
        if registered is not player:
            logger.debug(LogTemplates.PLAYER_REUSED, options.guild_id)
            return registered

        logger.info(
            LogTemplates.PLAYER_CREATED,
            player.guild_id,
            player.voice_channel_id,
            player.text_channel_id,
        )
        await manager.events.publish(PlayerCreated(guild_id=player.guild_id))

        await player.set_volume(player.volume)
        # Without a voice channel the caller connects later via set_voice_channel().
        if player.voice_channel_id is not None:
            await player.connect()
        return player

    # === State ===

    @property
    def connected(self) -> bool:
        return self.state is PlayerState.CONNECTED

    @property
    def paused(self) -> bool:
        return self.connected and not self.playing

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    async def handle_state_update(self, state: PlayerState | str) -> None:
        """Apply a subscription state reported by the node.

        This is the only path that moves a player to ``connected``.
        """
        new_state = PlayerState(state)
        await self._transition(new_state)
        if new_state is PlayerState.DISCONNECTED:
            self.playing = False

    async def _transition(self, new_state: PlayerState) -> None:
        old_state = self.state
        self.state = new_state
        if old_state is new_state:
            return

        logger.debug(LogTemplates.PLAYER_STATE_CHANGED, self.guild_id, old_state, new_state)
        await self.manager.events.publish(
            PlayerStateChanged(
                guild_id=self.guild_id,
                old_state=old_state.value,
                new_state=new_state.value,
            )
        )

    # === Channels and flags ===

    def set_voice_channel(self, channel_id: str | None) -> None:
        self.voice_channel_id = channel_id

    def set_text_channel(self, channel_id: str | None) -> None:
        self.text_channel_id = channel_id

    def set_track_repeat(self, repeat: bool) -> None:
        self.track_repeat = repeat

    def set_queue_repeat(self, repeat: bool) -> None:
        self.queue_repeat = repeat

    # === Commands ===

    async def search(self, query: str, requester: str | None = None) -> SearchResult:
        return await self.manager.search(query, requester)

    async def connect(self) -> None:
        """Request a voice subscription on the node.

        The node confirms asynchronously through :meth:`handle_state_update`.
        """
        if not self.voice_channel_id:
            raise ConfigurationError(ErrorMessages.NO_VOICE_CHANNEL)

        await self._send("POST", self._subscription_path(self.voice_channel_id))
        logger.info(LogTemplates.SUBSCRIPTION_REQUESTED, self.guild_id, self.voice_channel_id)
        await self._transition(PlayerState.CONNECTING)

    async def disconnect(self) -> None:
        """Tear down the voice subscription.

        A playing player is stopped first, which also destroys it.
        """
        if self.voice_channel_id is None:
            return
        if self.playing:
            await self.stop()
            return
        await self._close_subscription()

    async def play(self) -> None:
        """Start the current track once the subscription is connected.

        The connection is checked exactly once, one poll interval after the
        call. If the player is not connected at that moment the attempt fails
        with :class:`ConnectTimeoutError`; callers wanting a longer wait must
        retry themselves.
        """
        track = self.queue.current
        if track is None:
            raise EmptyQueueError(ErrorMessages.QUEUE_EMPTY)

        if self.state is PlayerState.DISCONNECTED:
            await self.connect()

        interval = self.manager.settings.connect_poll_interval_s
        logger.debug(LogTemplates.PLAYBACK_WAITING, interval, self.guild_id)
        await asyncio.sleep(interval)

        if not self.connected:
            logger.warning(LogTemplates.PLAYBACK_CONNECT_TIMEOUT, self.guild_id, self.state)
            raise ConnectTimeoutError(self.state.value)

        await self._send("POST", self._player_path, {"track": {"url": track.url}})
        self.playing = True
        logger.info(LogTemplates.PLAYBACK_STARTED, track.title, self.guild_id)

    async def pause(self) -> None:
        if not self.playing:
            return
        self.playing = False
        await self._send("PATCH", self._player_path, {"data": {"paused": True}})
        logger.info(LogTemplates.PLAYBACK_PAUSED, self.guild_id)

    async def resume(self) -> None:
        if self.playing:
            return
        self.playing = True
        await self._send("PATCH", self._player_path, {"data": {"paused": False}})
        logger.info(LogTemplates.PLAYBACK_RESUMED, self.guild_id)

    async def set_volume(self, volume: int) -> None:
        """Store ``volume`` and push it to the node. Bounds are the caller's concern."""
        self.volume = volume
        await self._send("PATCH", self._player_path, {"data": {"volume": volume}})
        logger.debug(LogTemplates.VOLUME_SET, volume, self.guild_id)

    async def apply_filter(self, audio_filter: AudioFilter | str) -> bool:
        """Ask the node encoder to apply an audio filter.

        Failures never reach the caller; they are published as
        :class:`PlayerError` events. Returns whether the node accepted it.
        """
        expression = audio_filter.value if isinstance(audio_filter, AudioFilter) else audio_filter
        try:
            await self._send(
                "PATCH", self._player_path, {"data": {"encoder_args": ["-af", expression]}}
            )
        except NodeCommandError as e:
            logger.warning(LogTemplates.FILTER_FAILED, expression, self.guild_id, e.message)
            await self.manager.events.publish(
                PlayerError(
                    guild_id=self.guild_id,
                    method=e.method,
                    path=e.path,
                    status=e.status,
                    detail=e.detail,
                )
            )
            return False

        logger.info(LogTemplates.FILTER_APPLIED, expression, self.guild_id)
        return True

    async def skip(self) -> None:
        """Stop the current track on the node. The queue is left alone."""
        await self._send("DELETE", self._player_path)
        logger.debug(LogTemplates.PLAYBACK_SKIPPED, self.guild_id)

    async def stop(self) -> None:
        """Clear the queue, stop the track and destroy the player."""
        await self._teardown(stop_track=True)

    async def destroy(self) -> None:
        await self._teardown(stop_track=self.playing)

    async def _teardown(self, *, stop_track: bool) -> None:
        # Order: clear queue, stop track, drop subscription, announce, deregister.
        if stop_track:
            self.queue.reset()
            self.playing = False

        if self._destroyed:
            logger.debug(LogTemplates.PLAYER_TEARDOWN_SKIPPED, self.guild_id)
            return

        running = self._teardown_task
        if running is not None:
            logger.debug(LogTemplates.PLAYER_TEARDOWN_JOINED, self.guild_id)
            if stop_track and not self._teardown_stops_track:
                self._teardown_stops_track = True
                await self.skip()
            # Shielded so a cancelled joiner does not abort the shared teardown.
            await asyncio.shield(running)
            return

        self._teardown_stops_track = stop_track
        self._teardown_task = asyncio.create_task(self._run_teardown(stop_track))
        await self._teardown_task

    async def _run_teardown(self, stop_track: bool) -> None:
        try:
            if stop_track:
                await self.skip()
            await self._close_subscription()
            await self.manager.events.publish(PlayerDestroyed(guild_id=self.guild_id, player=self))
            self.manager.delete(self.guild_id, self)
        except BaseException:
            # Released so the next stop() or destroy() retries from the failed step.
            self._teardown_task = None
            raise

        self._destroyed = True
        logger.info(LogTemplates.PLAYER_DESTROYED, self.guild_id)

    async def _close_subscription(self) -> None:
        channel_id = self.voice_channel_id
        if channel_id is None:
            return
        await self._send("DELETE", self._subscription_path(channel_id))
        self.voice_channel_id = None
        logger.info(LogTemplates.SUBSCRIPTION_DELETED, self.guild_id, channel_id)
        await self._transition(PlayerState.DISCONNECTED)

    # === Transport ===

    @property
    def _player_path(self) -> str:
        return f"api/player/{self.guild_id}"

    def _subscription_path(self, channel_id: str) -> str:
        return f"api/subscription/{self.guild_id}/{channel_id}"

    async def _send(
        self, method: HttpMethod, path: str, body: dict[str, Any] | None = None
    ) -> NodeResponse:
        response = await self.node.send(NodeCommand(method=method, path=path, body=body))
        if not response.ok:
            raise NodeCommandError(method, path, status=response.status, detail=response.data)
        return response
