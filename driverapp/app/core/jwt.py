"""
JWT token utilities for authentication.

This module provides functions for encoding and decoding JWT tokens.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
from jose import JWTError, jwt
from driverapp.app.core.config import settings


def create_access_token(data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a JWT access token.

    Args:
        data: Data payload to encode in the token (should include: userId, role)
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT token string

    Example payload:
        {
            "userId": 123,
            "role": "driver",
            "exp": 1234567890
        }

    No ``exp`` claim is written when neither ``expires_delta`` nor
    ``settings.access_token_expire_minutes`` is set.
    """
    to_encode = data.copy()

    if expires_delta is None and settings.access_token_expire_minutes > 0:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)

    if expires_delta is not None:
        to_encode.update({"exp": datetime.now(timezone.utc) + expires_delta})

    encoded_jwt = jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)

    return encoded_jwt


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """
    Decode and validate a JWT access token.

    Args:
        token: JWT token string to decode

    Returns:
        Decoded token payload if valid (includes: userId, role), None otherwise
    """
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
        return payload
    except JWTError:
        return None
