"""
Application Interfaces (Ports)

Abstract interfaces that define contracts between the player core and
infrastructure adapters.
"""

from nexus_player.application.interfaces.playback_node import (
    NodeCommand,
    NodeResponse,
    PlaybackNode,
)
from nexus_player.application.interfaces.track_resolver import SearchResult, TrackResolver

__all__ = [
    "NodeCommand",
    "NodeResponse",
    "PlaybackNode",
    "SearchResult",
    "TrackResolver",
]
