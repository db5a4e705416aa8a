"""Registry of live update sessions and the ideas_updated broadcaster.

Clients keep a WebSocket open and reload their idea lists whenever they
receive an ``ideas_updated`` signal. Signals carry no payload and are
delivered at most once: there is no acknowledgement, retry or replay.
"""

import asyncio
import threading
import uuid

import structlog

from core.constants import IDEAS_UPDATED_EVENT

logger = structlog.get_logger(__name__)


class LiveUpdateSession:
    """A connected client able to receive signals.

    Delivery hands the event to the session's event loop, so ``deliver`` may
    be called from any thread, including synchronous request threads.
    """

    def __init__(
        self,
        loop: asyncio.AbstractEventLoop,
        queue: asyncio.Queue | None = None,
    ) -> None:
        self.session_id = str(uuid.uuid4())
        self.loop = loop
        self.queue = queue if queue is not None else asyncio.Queue()

    def deliver(self, event_name: str) -> None:
        """Schedule an event for this session's connection.

        Raises:
            RuntimeError: If the session's event loop is closed.
        """
        self.loop.call_soon_threadsafe(self.queue.put_nowait, event_name)

    def __repr__(self) -> str:
        return f"<LiveUpdateSession(id={self.session_id})>"


class SessionRegistry:
    """Thread-safe set of connected live update sessions."""

    def __init__(self) -> None:
        self._sessions: dict[str, LiveUpdateSession] = {}
        self._lock = threading.Lock()

    def register(self, session: LiveUpdateSession) -> None:
        with self._lock:
            self._sessions[session.session_id] = session
        logger.info(
            "live_session_registered",
            session_id=session.session_id,
        )

    def unregister(self, session: LiveUpdateSession) -> None:
        with self._lock:
            removed = self._sessions.pop(session.session_id, None)
        if removed is not None:
            logger.info("live_session_unregistered", session_id=session.session_id)

    def count(self) -> int:
        with self._lock:
            return len(self._sessions)

    def broadcast_all(self, event_name: str) -> int:
        """Deliver an event to every registered session.

        A session that fails to accept the event is dropped without
        affecting delivery to the others.

        Args:
            event_name: Name of the event to send.

        Returns:
            Number of sessions the event was handed to.
        """
        with self._lock:
            sessions = list(self._sessions.values())

        delivered = 0
        for session in sessions:
            try:
                session.deliver(event_name)
                delivered += 1
            except Exception as e:
                logger.warning(
                    "live_session_delivery_failed",
                    session_id=session.session_id,
                    event_name=event_name,
                    error=str(e),
                )
                self.unregister(session)

        logger.debug(
            "live_update_broadcast",
            event_name=event_name,
            delivered=delivered,
            session_count=len(sessions),
        )
        return delivered


class LiveUpdateBroadcaster:
    """Sends payload-free change signals to every connected client."""

    def __init__(self, registry: SessionRegistry) -> None:
        self.registry = registry

    def broadcast_ideas_changed(self) -> int:
        """Tell every connected client to reload idea data.

        Returns:
            Number of sessions signalled.
        """
        return self.registry.broadcast_all(IDEAS_UPDATED_EVENT)


session_registry = SessionRegistry()
live_update_broadcaster = LiveUpdateBroadcaster(session_registry)
