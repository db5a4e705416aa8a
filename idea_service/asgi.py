"""ASGI config for the idea service project.

HTTP requests go to Django. WebSocket connections to ``/ws/ideas/`` receive
live update signals; any other WebSocket path is closed immediately.
"""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "idea_service.settings")

django_application = get_asgi_application()

from core.realtime.consumers import ideas_websocket  # noqa: E402

WEBSOCKET_ROUTES = {
    "/ws/ideas/": ideas_websocket,
    "/ws/ideas": ideas_websocket,
}


async def application(scope, receive, send):
    """Dispatch ASGI connections by protocol and path."""
    if scope["type"] == "websocket":
        websocket_app = WEBSOCKET_ROUTES.get(scope["path"])
        if websocket_app is None:
            await receive()
            await send({"type": "websocket.close", "code": 4404})
            return
        await websocket_app(scope, receive, send)
        return
    await django_application(scope, receive, send)
