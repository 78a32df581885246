"""Track queue owned by a single player."""

from __future__ import annotations

import random
from collections.abc import Iterable

from pydantic import BaseModel, Field

from nexus_player.domain.player.track import Track


class Queue(BaseModel):
    """Pending tracks plus the current and previous pointers.

    ``current`` is never kept in ``items``. Advancing ``current`` is driven
    by the player or its caller through :meth:`set_current`.
    """

    current: Track | None = None
    previous: Track | None = None
    items: list[Track] = Field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.items)

    @property
    def is_empty(self) -> bool:
        return self.current is None and not self.items

    @property
    def total_duration(self) -> int:
        """Known duration of current plus pending tracks, in seconds."""
        tracks = [self.current, *self.items] if self.current else self.items
        return sum(t.duration_seconds or 0 for t in tracks)

    def enqueue(self, track: Track) -> int:
        """Append a track and return its zero-based position."""
        self.items.append(track)
        return len(self.items) - 1

    def enqueue_many(self, tracks: Iterable[Track]) -> int:
        """Append tracks in order and return how many were added."""
        before = len(self.items)
        self.items.extend(tracks)
        return len(self.items) - before

    def peek(self) -> Track | None:
        return self.items[0] if self.items else None

    def remove_at(self, position: int) -> Track | None:
        if 0 <= position < len(self.items):
            return self.items.pop(position)
        return None

    def set_current(self, track: Track | None) -> None:
        """Make ``track`` current, shifting the old current to ``previous``."""
        if self.current is not None:
            self.previous = self.current
        if track is not None and track in self.items:
            self.items.remove(track)
        self.current = track

    def shuffle(self) -> None:
        random.shuffle(self.items)

    def clear(self) -> int:
        """Empty the pending items; current and previous are untouched."""
        count = len(self.items)
        self.items.clear()
        return count

    def reset(self) -> None:
        """Drop current, previous and every pending item."""
        self.current = None
        self.previous = None
        self.items.clear()
