"""
Player Bounded Context

Tracks, the per-guild queue and the value objects describing a player.
"""

from nexus_player.domain.player.queue import Queue
from nexus_player.domain.player.track import Track
from nexus_player.domain.player.value_objects import AudioFilter, PlayerOptions, PlayerState

__all__ = [
    "Track",
    "Queue",
    "PlayerState",
    "PlayerOptions",
    "AudioFilter",
]
