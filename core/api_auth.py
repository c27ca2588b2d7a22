"""
Service authentication using Bearer token.

Callers are trusted backends; the end user's identity, when there is one,
arrives already verified in the X-User-ID header.
"""

import secrets
from typing import Optional

from fastapi import Header, HTTPException, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.settings import settings

security = HTTPBearer()


def verify_api_token(
    credentials: HTTPAuthorizationCredentials = Security(security),
) -> str:
    """
    Verify the bearer token matches our service secret.

    Raises:
        HTTPException: If token is missing or invalid
    """
    expected = settings.api_token.get_secret_value()
    if not expected:
        raise HTTPException(
            status_code=500,
            detail="Server misconfigured: API_TOKEN not set",
        )

    if not secrets.compare_digest(credentials.credentials, expected):
        raise HTTPException(
            status_code=401,
            detail="Invalid authentication token",
        )

    return credentials.credentials


def get_user_id(x_user_id: Optional[str] = Header(None)) -> Optional[str]:
    """The calling user's id, or None for anonymous requests."""
    return x_user_id or None
