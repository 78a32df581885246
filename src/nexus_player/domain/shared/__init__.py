"""
Shared Domain Kernel

Contains exceptions, events and constrained types shared across the domain.
"""

from nexus_player.domain.shared.exceptions import (
    ConfigurationError,
    ConnectTimeoutError,
    DomainError,
    EmptyQueueError,
    NodeCommandError,
)

__all__ = [
    "DomainError",
    "ConfigurationError",
    "EmptyQueueError",
    "ConnectTimeoutError",
    "NodeCommandError",
]
