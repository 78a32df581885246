"""Port interface for turning user queries into playable tracks."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, Field

from nexus_player.domain.player.track import Track
from nexus_player.domain.shared.types import NonEmptyStr


class SearchResult(BaseModel):
    """Tracks found for a query, with the playlist name when one matched."""

    model_config = ConfigDict(frozen=True)

    tracks: list[Track] = Field(default_factory=list)
    playlist_name: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.tracks


class TrackResolver(ABC):
    """Interface for resolving search queries and URLs to tracks."""

    @abstractmethod
    async def search(self, query: NonEmptyStr, requester: NonEmptyStr | None = None) -> SearchResult:
        """Search for tracks matching a query, tagging them with the requester."""
        ...
