"""Infrastructure layer - external systems integration.

This layer contains implementations for:
- Node (HTTP transport to the playback node)
"""

from nexus_player.infrastructure.node.http_node import HttpPlaybackNode

__all__ = [
    "HttpPlaybackNode",
]
