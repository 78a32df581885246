"""Port interface for the remote playback node."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

HttpMethod = Literal["GET", "POST", "PATCH", "PUT", "DELETE"]


class NodeCommand(BaseModel):
    """A single control request sent to a node."""

    model_config = ConfigDict(frozen=True)

    method: HttpMethod
    path: str
    body: dict[str, Any] | None = None

    def __str__(self) -> str:
        return f"{self.method} {self.path}"


class NodeResponse(BaseModel):
    """Outcome of a node command."""

    model_config = ConfigDict(frozen=True)

    ok: bool
    status: int
    data: Any = None


class PlaybackNode(ABC):
    """Sends control commands to a node that streams audio.

    A node may be shared by many players. Implementations raise
    ``NodeCommandError`` when the command cannot be delivered at all and
    return a non-ok ``NodeResponse`` when the node rejects it.
    """

    @abstractmethod
    async def send(self, command: NodeCommand) -> NodeResponse:
        ...

    async def aclose(self) -> None:
        """Release transport resources."""
        return None
