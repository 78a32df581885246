"""Base exception classes for domain-level errors."""

from __future__ import annotations

from typing import Any


class DomainError(Exception):
    """Base exception for all domain-level errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ConfigurationError(DomainError):
    """Raised when a player cannot be built or driven with the current setup.

    Covers a missing manager, no available node and no voice channel.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message, code="CONFIGURATION_ERROR")


class EmptyQueueError(DomainError):
    """Raised when playback is requested with nothing queued."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="EMPTY_QUEUE")


class ConnectTimeoutError(DomainError):
    """Raised when play() observes a session that is not connected."""

    def __init__(self, state: str, message: str | None = None) -> None:
        msg = message or (
            f"Timed out to play the player because the player's state is still {state}"
        )
        super().__init__(msg, code="CONNECT_TIMEOUT")
        self.state = state


class NodeCommandError(DomainError):
    """Raised when a command to the playback node fails or is rejected."""

    def __init__(
        self,
        method: str,
        path: str,
        status: int | None = None,
        detail: Any = None,
        message: str | None = None,
    ) -> None:
        if message is None:
            reason = f"status {status}" if status is not None else "transport failure"
            message = f"Node command {method} {path} failed ({reason})"
        super().__init__(message, code="NODE_COMMAND_FAILED")
        self.method = method
        self.path = path
        self.status = status
        self.detail = detail
