"""Track value object handed to the queue and the play command."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from nexus_player.domain.shared.types import (
    DurationSeconds,
    HttpUrlStr,
    NonEmptyStr,
    TrackTitleStr,
)


class Track(BaseModel):
    """Immutable descriptor of a playable item."""

    model_config = ConfigDict(frozen=True, strict=True)

    id: NonEmptyStr
    title: TrackTitleStr
    url: HttpUrlStr
    duration_seconds: DurationSeconds | None = None
    thumbnail_url: HttpUrlStr | None = None
    author: NonEmptyStr | None = None

    # Set when queued
    requested_by: NonEmptyStr | None = None

    @property
    def duration_formatted(self) -> str:
        """Format duration as MM:SS or HH:MM:SS."""
        if self.duration_seconds is None:
            return "Unknown"

        hours, remainder = divmod(self.duration_seconds, 3600)
        minutes, seconds = divmod(remainder, 60)

        if hours > 0:
            return f"{hours}:{minutes:02d}:{seconds:02d}"
        return f"{minutes}:{seconds:02d}"

    @property
    def display_title(self) -> str:
        if self.duration_seconds:
            return f"{self.title} [{self.duration_formatted}]"
        return self.title

    def with_requester(self, user_id: NonEmptyStr) -> Track:
        """Return a copy of this track with the requester populated."""
        return self.model_copy(update={"requested_by": user_id})
