"""Centralized message constants for error messages and log output."""

from __future__ import annotations


class ErrorMessages:
    """Error messages for exceptions and validation failures."""

    # Player construction
    MANAGER_NOT_INITIALIZED = "Manager has not been initiated."
    NO_AVAILABLE_NODES = "No available nodes."
    NO_VOICE_CHANNEL = "No voice channel has been set."
    NO_RESOLVER = "No track resolver has been configured."

    # Playback
    QUEUE_EMPTY = "Queue is empty!"

    # Settings validation
    INVALID_LOG_LEVEL = "Invalid log level: {level}. Must be one of {valid_levels}"


class LogTemplates:
    """Log message templates.

    Pass values as parameters to logger calls so formatting stays lazy.
    """

    # Player lifecycle
    PLAYER_CREATED = "Created player for guild %s (voice=%s, text=%s)"
    PLAYER_REUSED = "Reusing existing player for guild %s"
    PLAYER_DESTROYED = "Destroyed player for guild %s"
    PLAYER_TEARDOWN_SKIPPED = "Player for guild %s is already destroyed"
    PLAYER_TEARDOWN_JOINED = "Joining teardown already in progress for guild %s"
    PLAYER_STATE_CHANGED = "Player state for guild %s: %s -> %s"

    # Subscription
    SUBSCRIPTION_REQUESTED = "Requested subscription for guild %s in channel %s"
    SUBSCRIPTION_DELETED = "Deleted subscription for guild %s in channel %s"

    # Playback
    PLAYBACK_WAITING = "Waiting %.2fs for guild %s to connect"
    PLAYBACK_STARTED = "Started playing '%s' in guild %s"
    PLAYBACK_CONNECT_TIMEOUT = "Guild %s not connected after wait (state=%s)"
    PLAYBACK_PAUSED = "Paused playback in guild %s"
    PLAYBACK_RESUMED = "Resumed playback in guild %s"
    PLAYBACK_SKIPPED = "Stopped current track in guild %s"
    VOLUME_SET = "Set volume to %s in guild %s"
    FILTER_APPLIED = "Applied filter %s in guild %s"
    FILTER_FAILED = "Filter %s rejected by node in guild %s: %s"

    # Manager
    MANAGER_UNKNOWN_GUILD = "Ignoring state update for unknown guild %s"
    MANAGER_SHUTDOWN = "Destroying %d player(s)"
    MANAGER_DESTROY_FAILED = "Failed to destroy player for guild %s"

    # Node transport
    NODE_REQUEST = "Node request %s %s"
    NODE_RESPONSE = "Node response %s %s -> %s"
    NODE_TRANSPORT_ERROR = "Node transport error on %s %s: %r"
    NODE_CLOSED = "Closed node client for %s"

    # Container
    CONTAINER_SHUTDOWN = "Shutting down container"
