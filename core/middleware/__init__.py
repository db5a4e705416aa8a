"""Middleware components for the idea service."""

from core.middleware.process_time import ProcessTimeMiddleware
from core.middleware.request_id import RequestIDMiddleware
from core.middleware.security_context import SecurityContextMiddleware

__all__ = [
    "ProcessTimeMiddleware",
    "RequestIDMiddleware",
    "SecurityContextMiddleware",
]
