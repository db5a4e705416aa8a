"""Production server startup script for the idea service.

This module provides the entry point for starting the Django application
with Gunicorn in production environments (Docker containers, Kubernetes).
"""

import os
import sys

from gunicorn.app.wsgiapp import run


def main():
    """Start the idea service using Gunicorn with Uvicorn workers.

    The ASGI application serves both the HTTP API and the live update
    WebSocket. Live update sessions are registered per process, so a
    broadcast only reaches clients connected to the worker that handled
    the mutation; the worker count therefore defaults to 1.
    """
    sys.argv = [
        "gunicorn",
        "idea_service.asgi:application",
        "--worker-class",
        "uvicorn.workers.UvicornWorker",
        "--bind",
        os.getenv("BIND_ADDRESS", "0.0.0.0:8000"),
        "--workers",
        os.getenv("WEB_CONCURRENCY", "1"),
        "--timeout",
        "60",
        "--access-logfile",
        "-",
        "--error-logfile",
        "-",
    ]
    run()


if __name__ == "__main__":
    main()
