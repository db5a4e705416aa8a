"""Live update signalling to connected clients."""

from core.realtime.registry import (
    LiveUpdateBroadcaster,
    LiveUpdateSession,
    SessionRegistry,
    live_update_broadcaster,
    session_registry,
)

__all__ = [
    "LiveUpdateBroadcaster",
    "LiveUpdateSession",
    "SessionRegistry",
    "live_update_broadcaster",
    "session_registry",
]
