"""JWT token creation and verification.

Access tokens are short-lived (60 min by default) and carry the user id
(as "sub") and the user's role. There is no refresh token and no
revocation list: rotating the signing key invalidates every token.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from undangan.config import settings


class TokenError(Exception):
    """Raised when token verification fails."""


def create_access_token(
    user_id: int,
    role: str,
    *,
    secret: Optional[str] = None,
    expires_minutes: Optional[int] = None,
) -> str:
    """Create a signed JWT access token for a user."""
    now = datetime.now(timezone.utc)
    minutes = (
        expires_minutes
        if expires_minutes is not None
        else settings.access_token_expire_minutes
    )
    payload = {
        "sub": str(user_id),
        "role": role,
        "type": "access",
        "exp": now + timedelta(minutes=minutes),
        "iat": now,
    }
    return jwt.encode(
        payload, secret or settings.jwt_secret, algorithm=settings.jwt_algorithm
    )


def verify_token(token: str, *, secret: Optional[str] = None) -> dict:
    """Verify and decode a JWT token.

    Returns the payload dict on success.
    Raises TokenError on failure (bad signature, malformed, expired).
    """
    try:
        return jwt.decode(
            token,
            secret or settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError:
        raise TokenError("Token has expired")
    except jwt.InvalidTokenError as e:
        raise TokenError(f"Invalid token: {e}")
