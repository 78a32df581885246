import asyncio

import pytest
import pytest_asyncio

from nexus_player.application.interfaces.playback_node import (
    NodeCommand,
    NodeResponse,
    PlaybackNode,
)
from nexus_player.domain.shared.exceptions import NodeCommandError

# ============================================================================
# Fake Node
# ============================================================================


class RecordingNode(PlaybackNode):
    """In-memory node that records every command it receives."""

    def __init__(self) -> None:
        self.commands: list[NodeCommand] = []
        self.rejections: dict[tuple[str, str], int] = {}
        self.unreachable: set[tuple[str, str]] = set()
        self.closed = False

    def reject(self, method: str, path: str, status: int = 500) -> None:
        self.rejections[(method, path)] = status

    def make_unreachable(self, method: str, path: str) -> None:
        self.unreachable.add((method, path))

    def recover(self) -> None:
        self.rejections.clear()
        self.unreachable.clear()

    def calls(self, method: str | None = None, path: str | None = None) -> list[NodeCommand]:
        return [
            c
            for c in self.commands
            if (method is None or c.method == method) and (path is None or c.path == path)
        ]

    async def send(self, command: NodeCommand) -> NodeResponse:
        # Yield like a real network call would.
        await asyncio.sleep(0)
        self.commands.append(command)

        key = (command.method, command.path)
        if key in self.unreachable:
            raise NodeCommandError(command.method, command.path, detail="connection refused")
        if key in self.rejections:
            return NodeResponse(ok=False, status=self.rejections[key], data={"error": "rejected"})
        return NodeResponse(ok=True, status=204)

    async def aclose(self) -> None:
        self.closed = True


# ============================================================================
# Player Fixtures
# ============================================================================


@pytest.fixture
def node():
    return RecordingNode()


@pytest.fixture
def player_settings():
    from nexus_player.config.settings import PlayerSettings

    return PlayerSettings(connect_poll_interval_s=0.01)


@pytest.fixture
def manager(node, player_settings):
    from nexus_player.application.services.player_manager import PlayerManager

    return PlayerManager(node, settings=player_settings)


@pytest.fixture
def recorded_events(manager):
    """Collect every player event published on the manager's bus."""
    from nexus_player.domain.shared.events import (
        PlayerCreated,
        PlayerDestroyed,
        PlayerError,
        PlayerStateChanged,
    )

    events = []

    async def record(event):
        events.append(event)

    for event_type in (PlayerCreated, PlayerDestroyed, PlayerError, PlayerStateChanged):
        manager.events.subscribe(event_type, record)
    return events


@pytest.fixture
def options():
    from nexus_player.domain.player.value_objects import PlayerOptions

    return PlayerOptions(guild_id="g1", voice_channel_id="v1", text_channel_id="t1")


@pytest_asyncio.fixture
async def player(manager, node, options):
    """A freshly created player with the creation commands discarded."""
    created = await manager.create_player(options)
    node.commands.clear()
    return created


# ============================================================================
# Track Fixtures
# ============================================================================


@pytest.fixture
def sample_track():
    """Create a sample track for testing."""
    from nexus_player.domain.player.track import Track

    return Track(
        id="track-a",
        title="Test Track",
        url="https://cdn.example.com/audio/track-a.mp3",
        duration_seconds=180,
        thumbnail_url="https://cdn.example.com/thumbs/track-a.jpg",
        author="Test Artist",
    )


@pytest.fixture
def other_track():
    from nexus_player.domain.player.track import Track

    return Track(
        id="track-b",
        title="Another Track",
        url="https://cdn.example.com/audio/track-b.mp3",
        duration_seconds=3725,
    )


# ============================================================================
# Logging Fixtures
# ============================================================================


@pytest.fixture
def restore_logging():
    """Undo root and quiet-logger changes made by setup_logging."""
    import logging

    from nexus_player.utils.logging import QUIET_LOGGERS

    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    quiet_levels = {name: logging.getLogger(name).level for name in QUIET_LOGGERS}
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, quiet_level in quiet_levels.items():
        logging.getLogger(name).setLevel(quiet_level)
