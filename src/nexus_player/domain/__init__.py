"""
Domain Layer

Contains the pure data model of the player:
- shared/: exceptions, events and constrained types
- player/: tracks, the queue and player value objects
"""

from nexus_player.domain.shared.exceptions import DomainError

__all__ = [
    "DomainError",
]
