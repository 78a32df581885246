from nexus_player.infrastructure.node.http_node import HttpPlaybackNode

__all__ = ["HttpPlaybackNode"]
