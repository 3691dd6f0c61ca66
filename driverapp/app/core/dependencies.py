"""
Authentication dependencies for FastAPI.

This module provides dependencies for protecting routes with JWT authentication.
"""

from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from driverapp.app.core.exceptions import AuthenticationError, ForbiddenError
from driverapp.app.core.jwt import decode_access_token

# HTTP Bearer security scheme. auto_error is off so a missing header
# is reported as 401 rather than FastAPI's default.
security = HTTPBearer(auto_error=False)


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> dict:
    """
    FastAPI dependency for JWT authentication.

    1. Missing Authorization header, or one not starting with the exact
       prefix "Bearer " -> 401
    2. Token that fails signature/expiry verification -> 403
    3. Token without the expected claims -> 403

    Tokens are trusted until they expire; there is no revocation list
    and no database lookup.

    Returns:
        Decoded token payload containing ``userId`` and ``role``
    """
    authorization = request.headers.get("Authorization", "")
    if (
        credentials is None
        or not credentials.credentials
        or not authorization.startswith("Bearer ")
    ):
        raise AuthenticationError("Unauthorized")

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise ForbiddenError("Invalid token")

    if payload.get("userId") is None or payload.get("role") is None:
        raise ForbiddenError("Invalid token payload")

    return payload
