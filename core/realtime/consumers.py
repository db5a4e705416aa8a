"""ASGI WebSocket endpoint streaming live update signals.

Each accepted connection becomes a LiveUpdateSession bound to the
connection's event loop. Signals are forwarded as text frames of the form
``{"event": "ideas_updated"}``. Messages sent by the client are ignored.
"""

import asyncio
import json
from collections.abc import Awaitable, Callable
from typing import Any

import structlog

from core.realtime.registry import (
    LiveUpdateSession,
    SessionRegistry,
    session_registry,
)

logger = structlog.get_logger(__name__)

Scope = dict[str, Any]
Receive = Callable[[], Awaitable[dict[str, Any]]]
Send = Callable[[dict[str, Any]], Awaitable[None]]


class IdeasWebSocketApp:
    """ASGI application for the ``/ws/ideas/`` endpoint."""

    def __init__(self, registry: SessionRegistry = session_registry) -> None:
        self.registry = registry

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "websocket":
            raise ValueError(f"Unsupported scope type: {scope['type']}")

        message = await receive()
        if message["type"] != "websocket.connect":
            return
        await send({"type": "websocket.accept"})

        session = LiveUpdateSession(loop=asyncio.get_running_loop())
        self.registry.register(session)

        reader = asyncio.ensure_future(self._wait_for_disconnect(receive))
        writer = asyncio.ensure_future(self._forward_events(session, send))
        try:
            await asyncio.wait([reader, writer], return_when=asyncio.FIRST_COMPLETED)
        finally:
            for task in (reader, writer):
                task.cancel()
            self.registry.unregister(session)

        if writer.done() and not writer.cancelled() and writer.exception():
            logger.warning(
                "live_session_send_failed",
                session_id=session.session_id,
                error=str(writer.exception()),
            )

    @staticmethod
    async def _wait_for_disconnect(receive: Receive) -> None:
        while True:
            message = await receive()
            if message["type"] == "websocket.disconnect":
                return

    @staticmethod
    async def _forward_events(session: LiveUpdateSession, send: Send) -> None:
        while True:
            event_name = await session.queue.get()
            frame = json.dumps({"event": event_name})
            await send({"type": "websocket.send", "text": frame})


ideas_websocket = IdeasWebSocketApp()
