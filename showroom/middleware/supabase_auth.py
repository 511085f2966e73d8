"""
Supabase JWT Authentication Middleware.

Guards the admin JSON API. Everything else on the site is public.

How it works:
1. Extract JWT from Authorization header (Bearer token)
2. Decode and validate the JWT using Supabase's JWT secret
3. Attach the verified claims to request.admin_claims

Protected paths:
- /api/admin/ - admin console API (projects CRUD, leads, stats)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import jwt
from django.conf import settings
from django.http import JsonResponse

if TYPE_CHECKING:
    from django.http import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


# Paths that require authentication
AUTH_PROTECTED_PATHS = [
    "/api/admin/",
]


class SupabaseAuthMiddleware:
    """
    Middleware to authenticate admin API requests using Supabase JWT tokens.

    Returns 401 for unauthenticated requests to protected endpoints.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request.admin_claims = None

        if not self._is_protected_path(request.path):
            return self.get_response(request)

        # Skip auth if AUTH_DISABLED is true (dev mode)
        if getattr(settings, "AUTH_DISABLED", False):
            return self.get_response(request)

        auth_header = request.headers.get("Authorization", "")
        if not auth_header.startswith("Bearer "):
            return self._unauthorized_response("Missing or invalid Authorization header")

        token = auth_header[7:]  # Remove "Bearer " prefix

        try:
            request.admin_claims = self._authenticate_token(token)
        except AuthenticationError as e:
            logger.warning("Authentication failed: %s", str(e))
            return self._unauthorized_response(str(e))

        return self.get_response(request)

    def _is_protected_path(self, path: str) -> bool:
        return any(path.startswith(protected) for protected in AUTH_PROTECTED_PATHS)

    def _authenticate_token(self, token: str) -> dict:
        """
        Validate the JWT and return its claims.

        Raises AuthenticationError if validation fails.
        """
        jwt_secret = getattr(settings, "SUPABASE_JWT_SECRET", "")
        if not jwt_secret:
            raise AuthenticationError("SUPABASE_JWT_SECRET not configured")

        try:
            # Supabase uses HS256 by default
            payload = jwt.decode(
                token,
                jwt_secret,
                algorithms=["HS256"],
                audience="authenticated",
            )
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("Token has expired")
        except jwt.InvalidTokenError as e:
            raise AuthenticationError(f"Invalid token: {e}")

        if not payload.get("sub"):
            raise AuthenticationError("Token missing 'sub' claim")

        return payload

    def _unauthorized_response(self, message: str) -> JsonResponse:
        """Return a 401 Unauthorized response."""
        return JsonResponse(
            {"error": "unauthorized", "message": message},
            status=401,
        )


class AuthenticationError(Exception):
    """Raised when authentication fails."""

    pass

