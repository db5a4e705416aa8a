"""Bearer token authentication for Django REST Framework.

Tokens are HS256/384/512 JWTs signed with the shared ``JWT_SECRET``. The
``sub`` claim (or ``user_id`` for older tokens) identifies the employee.
"""

from typing import Any

from django.conf import settings
from django.core.exceptions import ValidationError as DjangoValidationError

import jwt
import structlog
from rest_framework import authentication, exceptions

from core.models import User

logger = structlog.get_logger(__name__)


class JWTAuthentication(authentication.BaseAuthentication):
    """JWT Bearer token authentication resolving to an active employee."""

    def authenticate(self, request):
        """Authenticate the request using a Bearer token.

        Args:
            request: Django request object

        Returns:
            Tuple of (user, token) or None if authentication not attempted

        Raises:
            AuthenticationFailed: If the token is invalid or the user is
                unknown or deactivated
        """
        if not settings.JWT_AUTH_ENABLED:
            return None

        auth_header = request.headers.get("authorization")
        if not auth_header:
            return None

        parts = auth_header.split()
        if len(parts) != 2 or parts[0].lower() != "bearer":
            raise exceptions.AuthenticationFailed("Invalid authorization header format")

        token = parts[1]
        payload = self._decode(token)

        user_id = payload.get("sub") or payload.get("user_id")
        if not user_id:
            raise exceptions.AuthenticationFailed("Token has no subject")

        try:
            user = User.objects.get(user_id=user_id, is_active=True)
        except (User.DoesNotExist, DjangoValidationError, ValueError) as e:
            logger.warning("Token subject is not an active user", user_id=user_id)
            raise exceptions.AuthenticationFailed("User not found or inactive") from e

        return (user, token)

    def _decode(self, token: str) -> dict[str, Any]:
        """Verify the JWT signature and registered claims.

        Args:
            token: JWT access token to validate

        Returns:
            Token claims

        Raises:
            AuthenticationFailed: If the token is invalid or expired
        """
        if not settings.JWT_SECRET:
            logger.error("JWT_SECRET not configured but authentication is enabled")
            raise exceptions.AuthenticationFailed("JWT validation not configured")

        try:
            return jwt.decode(
                token,
                settings.JWT_SECRET,
                algorithms=["HS256", "HS384", "HS512"],
                options={
                    "verify_signature": True,
                    "verify_exp": True,
                    "verify_iat": True,
                    "verify_nbf": True,
                },
            )
        except jwt.ExpiredSignatureError as e:
            logger.info("JWT token has expired")
            raise exceptions.AuthenticationFailed("Token has expired") from e
        except jwt.InvalidTokenError as e:
            logger.warning("Invalid JWT token", error=str(e))
            raise exceptions.AuthenticationFailed("Invalid token") from e

    def authenticate_header(self, _request):
        """Return WWW-Authenticate header value for 401 responses."""
        return "Bearer"
