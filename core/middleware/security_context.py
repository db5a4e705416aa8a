"""Security context middleware for authenticated user access."""

from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from core.auth.context import clear_current_user


class SecurityContextMiddleware:
    """Middleware that scopes the thread-local security context to a request.

    DRF authenticates lazily inside the view, so the authenticated employee
    is stored by ``SecurityContextMixin.initial`` once authentication has
    run. This middleware guarantees the context is cleared afterwards so it
    never bleeds into the next request served by the same thread.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        """Initialize the middleware.

        Args:
            get_response: The next middleware or view in the chain.
        """
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """Process the request and clear the security context afterwards."""
        clear_current_user()
        try:
            return self.get_response(request)
        finally:
            clear_current_user()
