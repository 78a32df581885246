"""Reusable Pydantic Annotated types for domain-wide validation.

Constrained types are defined here once so models can annotate fields::

    from nexus_player.domain.shared.types import GuildIdField, VolumeInt

    class MyModel(BaseModel):
        guild_id: GuildIdField
        volume: VolumeInt
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated

from pydantic import BeforeValidator, Field

# ── Numeric constraints ─────────────────────────────────────────────

VolumeInt = Annotated[int, Field(ge=0, le=1000)]
"""Node volume in percent: 0 … 1000."""

DurationSeconds = Annotated[int, Field(ge=0, le=86_400)]
"""Track duration in seconds: 0 … 86 400 (24 hours)."""


# ── String constraints ──────────────────────────────────────────────

NonEmptyStr = Annotated[str, Field(min_length=1)]
"""String with at least one character."""

TrackTitleStr = Annotated[str, Field(min_length=1, max_length=500)]
"""Track title: 1-500 characters."""

HttpUrlStr = Annotated[str, Field(pattern=r"^https?://")]
"""String that starts with http:// or https://."""


# ── Identifiers ─────────────────────────────────────────────────────
# Snowflakes travel as strings on the node API, so ids are plain strings.

GuildIdField = NonEmptyStr
"""Group (guild) identifier."""

ChannelIdField = NonEmptyStr
"""Voice or text channel identifier."""


# ── Datetime constraints ────────────────────────────────────────────

def _ensure_utc(v: datetime) -> datetime:
    """Validate that a datetime is timezone-aware and normalise to UTC."""
    if v.tzinfo is None:
        raise ValueError("datetime must be timezone-aware (UTC)")
    return v.astimezone(UTC)


UtcDatetimeField = Annotated[datetime, BeforeValidator(_ensure_utc)]
"""Timezone-aware datetime, normalised to UTC on input."""


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)
