"""Auth tests — registration, login, and the bearer-token gate.

Covers:
1. Registration never echoes the password hash
2. Duplicate emails are rejected by the storage constraint
3. Login errors do not reveal whether an email exists
4. The gate's 401 (no token) vs 400 (bad token) split
"""

import uuid

import pytest

from undangan.auth.jwt import create_access_token


def _email(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:8]}@example.com"


# ═══════════════════════════════════════════════════════════
# Registration
# ═══════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_register_user(client):
    email = _email("reg")
    r = await client.post(
        "/api/auth/register",
        json={"name": "A", "email": email, "password": "p", "role": "user"},
    )
    assert r.status_code == 201
    user = r.json()
    assert user["email"] == email
    assert user["name"] == "A"
    assert user["role"] == "user"
    assert isinstance(user["id_user"], int)
    assert "password" not in user


@pytest.mark.asyncio
async def test_register_defaults_role(client):
    r = await client.post(
        "/api/auth/register",
        json={"name": "B", "email": _email("role"), "password": "secret"},
    )
    assert r.status_code == 201
    assert r.json()["role"] == "user"


@pytest.mark.asyncio
async def test_register_duplicate_email(client):
    """Can't register with the same email twice."""
    body = {"name": "User 1", "email": _email("dup"), "password": "password_123"}

    r1 = await client.post("/api/auth/register", json=body)
    assert r1.status_code == 201

    r2 = await client.post("/api/auth/register", json=body)
    assert r2.status_code == 409
    assert r2.json() == {"error": "Email already registered"}


@pytest.mark.asyncio
async def test_register_missing_field(client):
    """Validation failures come back as 400 with the error envelope."""
    r = await client.post(
        "/api/auth/register", json={"name": "NoPass", "email": _email("nopass")}
    )
    assert r.status_code == 400
    assert "password" in r.json()["error"]


# ═══════════════════════════════════════════════════════════
# Login
# ═══════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_login_success(client):
    email = _email("login")
    await client.post(
        "/api/auth/register",
        json={"name": "Login User", "email": email, "password": "my_password"},
    )

    r = await client.post(
        "/api/auth/login", json={"email": email, "password": "my_password"}
    )
    assert r.status_code == 200
    body = r.json()
    assert body["token"]
    assert body["token_type"] == "bearer"


@pytest.mark.asyncio
async def test_login_failures_are_indistinguishable(client):
    """Wrong password and unknown email give the same status and body."""
    email = _email("wrong")
    await client.post(
        "/api/auth/register",
        json={"name": "User", "email": email, "password": "correct_password"},
    )

    wrong_password = await client.post(
        "/api/auth/login", json={"email": email, "password": "wrong_password"}
    )
    unknown_email = await client.post(
        "/api/auth/login",
        json={"email": _email("nobody"), "password": "correct_password"},
    )

    assert wrong_password.status_code == 400
    assert unknown_email.status_code == 400
    assert wrong_password.json() == unknown_email.json() == {"error": "Invalid credentials"}


# ═══════════════════════════════════════════════════════════
# Authentication gate
# ═══════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_me_with_token(client, make_user):
    user = await make_user(name="Me User")
    r = await client.get("/api/auth/me", headers=user["headers"])
    assert r.status_code == 200
    assert r.json()["email"] == user["email"]
    assert r.json()["id_user"] == user["id_user"]
    assert "password" not in r.json()


@pytest.mark.asyncio
async def test_missing_token_is_401(client):
    r = await client.get("/api/wedding")
    assert r.status_code == 401
    assert r.json() == {"error": "Access denied"}


@pytest.mark.asyncio
@pytest.mark.parametrize("header", ["Bearer", "Token abc.def.ghi", "abc"])
async def test_malformed_header_is_401(client, header):
    r = await client.get("/api/wedding", headers={"Authorization": header})
    assert r.status_code == 401


@pytest.mark.asyncio
async def test_invalid_token_is_400(client):
    r = await client.get(
        "/api/wedding", headers={"Authorization": "Bearer invalid_token_here"}
    )
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid token"}


@pytest.mark.asyncio
async def test_expired_token_is_400(client, make_user):
    user = await make_user()
    expired = create_access_token(user["id_user"], "user", expires_minutes=-1)
    r = await client.get("/api/wedding", headers={"Authorization": f"Bearer {expired}"})
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid token"}


@pytest.mark.asyncio
async def test_token_signed_with_other_key_is_400(client, make_user):
    user = await make_user()
    forged = create_access_token(user["id_user"], "admin", secret="someone-elses-key")
    r = await client.get("/api/wedding", headers={"Authorization": f"Bearer {forged}"})
    assert r.status_code == 400
