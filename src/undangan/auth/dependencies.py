"""FastAPI auth dependencies.

Used as Depends() in route handlers to extract and validate the
current identity from the Authorization header.

Failure modes are deliberately asymmetric:
- no usable "Bearer <token>" header → 401 Access denied
- a token that fails verification   → 400 Invalid token
"""

from typing import Optional

import structlog
from fastapi import Depends, Header, HTTPException

from undangan.auth.jwt import TokenError, verify_token

logger = structlog.get_logger()


class CurrentIdentity:
    """The authenticated user making the request.

    Role is carried along for callers that want it but no route
    restricts access by role.
    """

    def __init__(self, user_id: int, role: str = "user"):
        self.user_id = user_id
        self.role = role

    def __repr__(self) -> str:
        return f"CurrentIdentity(user_id={self.user_id!r}, role={self.role!r})"


def _extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    parts = (authorization or "").strip().split(None, 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1].strip() or None


async def get_bearer_token(
    authorization: Optional[str] = Header(None),
) -> str:
    """Return the raw bearer token (401 if there is none)."""
    token = _extract_bearer_token(authorization)
    if not token:
        raise HTTPException(
            status_code=401,
            detail="Access denied",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return token


async def get_current_user(
    token: str = Depends(get_bearer_token),
) -> CurrentIdentity:
    """Resolve the bearer token to an identity (400 if it does not verify)."""
    try:
        payload = verify_token(token)
        user_id = int(payload["sub"])
    except (TokenError, KeyError, ValueError) as e:
        logger.info("auth.token_rejected", reason=str(e))
        raise HTTPException(status_code=400, detail="Invalid token")

    return CurrentIdentity(user_id=user_id, role=payload.get("role", "user"))
