"""WSGI config for the idea service project.

The WSGI entry point serves the HTTP API only. Live updates over WebSocket
need the ASGI application in ``idea_service.asgi``.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "idea_service.settings")

application = get_wsgi_application()
