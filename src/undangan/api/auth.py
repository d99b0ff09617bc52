"""Auth API — registration, login, current user.

- POST /auth/register → create a new user account
- POST /auth/login → email/password → JWT access token
- GET /auth/me → current user info
"""

from datetime import datetime

import structlog
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from undangan.auth.dependencies import CurrentIdentity, get_current_user
from undangan.auth.jwt import create_access_token
from undangan.auth.password import hash_password, verify_password
from undangan.db.engine import get_db
from undangan.db.models import User

logger = structlog.get_logger()

router = APIRouter(prefix="/auth")


# ─── Schemas ─────────────────────────────────────────────


class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1)
    role: str = Field(default="user", min_length=1, max_length=20)


class LoginRequest(BaseModel):
    email: str
    password: str


class TokenResponse(BaseModel):
    token: str
    token_type: str = "bearer"


class UserRead(BaseModel):
    """Public user representation. The password hash is never included."""
    id_user: int
    name: str
    email: str
    role: str
    created_at: datetime

    model_config = {"from_attributes": True}


# ─── Register ────────────────────────────────────────────


@router.post("/register", response_model=UserRead, status_code=201)
async def register(body: RegisterRequest, db: AsyncSession = Depends(get_db)):
    """Create a new user account.

    Email uniqueness is enforced by the users.email constraint, so two
    concurrent registrations cannot both succeed.
    """
    user = User(
        name=body.name,
        email=body.email,
        password=hash_password(body.password),
        role=body.role,
    )
    db.add(user)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise HTTPException(status_code=409, detail="Email already registered")

    logger.info("auth.user_registered", user_id=user.id_user, role=user.role)
    return user


# ─── Login ───────────────────────────────────────────────


@router.post("/login", response_model=TokenResponse)
async def login(body: LoginRequest, db: AsyncSession = Depends(get_db)):
    """Login with email and password → JWT access token.

    Unknown email and wrong password get the same answer so the
    endpoint does not reveal which emails have accounts.
    """
    result = await db.execute(select(User).where(User.email == body.email))
    user = result.scalars().first()

    if not user or not verify_password(body.password, user.password):
        logger.info("auth.login_failed")
        raise HTTPException(status_code=400, detail="Invalid credentials")

    return TokenResponse(token=create_access_token(user.id_user, user.role))


# ─── Current user ───────────────────────────────────────


@router.get("/me", response_model=UserRead)
async def get_me(
    identity: CurrentIdentity = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Get the current authenticated user's info."""
    user = await db.get(User, identity.user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user
