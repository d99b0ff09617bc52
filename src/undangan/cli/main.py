"""Undangan CLI — run the server, manage the database, poke the API.

Usage:
    undangan serve                                  # Run the API with uvicorn
    undangan init-db                                # Create all tables
    undangan check-db                               # Test the database connection
    undangan register "Ayu" ayu@example.com         # Create an account (prompts for password)
    undangan login ayu@example.com                  # Print a bearer token
    undangan weddings                               # List your weddings (needs UNDANGAN_TOKEN)
    undangan invitation ayu-and-bima                # Public slug lookup
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import json
import os
import sys
from typing import Optional

import click
import httpx

from undangan import __version__

# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

DEFAULT_API_URL = "http://localhost:3000"


def _api_url() -> str:
    return os.environ.get("UNDANGAN_API_URL", DEFAULT_API_URL).rstrip("/")


def _client(token: Optional[str] = None) -> httpx.AsyncClient:
    """Build an async HTTP client pointed at the Undangan backend."""
    headers = {"Authorization": f"Bearer {token}"} if token else {}
    return httpx.AsyncClient(base_url=_api_url(), timeout=30.0, headers=headers)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _run(coro):
    """Run an async coroutine from synchronous Click handler.

    Offloads to a thread when already inside an event loop (e.g. tests).
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)
    else:
        with concurrent.futures.ThreadPoolExecutor(max_workers=1) as pool:
            return pool.submit(asyncio.run, coro).result()


def _pretty_json(data: dict | list) -> str:
    return json.dumps(data, indent=2, default=str)


def _fail(resp: httpx.Response) -> None:
    """Print the API's {"error": ...} envelope and exit non-zero."""
    try:
        message = resp.json().get("error", resp.text)
    except ValueError:
        message = resp.text
    click.secho(f"Error ({resp.status_code}): {message}", fg="red", err=True)
    sys.exit(1)


def _require_token(token: Optional[str]) -> str:
    tok = token or os.environ.get("UNDANGAN_TOKEN")
    if not tok:
        click.secho(
            "Error: --token required (or set UNDANGAN_TOKEN env var)",
            fg="red",
            err=True,
        )
        sys.exit(1)
    return tok


def _database():
    from undangan.config import settings
    from undangan.db.engine import Database

    return Database(settings.database_url)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(version=__version__, prog_name="undangan")
def main():
    """Undangan — wedding invitation management backend."""


# ---------------------------------------------------------------------------
# Server and database
# ---------------------------------------------------------------------------


@main.command()
@click.option("--host", default=None, help="Bind address (default: UNDANGAN_HOST)")
@click.option("--port", type=int, default=None, help="Port (default: UNDANGAN_PORT)")
@click.option("--reload", is_flag=True, help="Reload on code changes")
def serve(host: Optional[str], port: Optional[int], reload: bool):
    """Run the API server."""
    import uvicorn

    from undangan.config import settings

    uvicorn.run(
        "undangan.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
    )


@main.command("init-db")
def init_db():
    """Create every table on the configured database."""

    async def _impl():
        db = _database()
        try:
            await db.create_all()
        finally:
            await db.dispose()

    _run(_impl())
    click.secho("Tables created.", fg="green")


@main.command("check-db")
def check_db():
    """Open a connection to the configured database and report."""

    async def _impl():
        db = _database()
        try:
            await db.ping()
        finally:
            await db.dispose()

    try:
        _run(_impl())
    except Exception as e:
        click.secho(f"Database connection failed: {e}", fg="red", err=True)
        sys.exit(1)
    click.secho("Database connection successful", fg="green")


# ---------------------------------------------------------------------------
# API commands
# ---------------------------------------------------------------------------


@main.command()
@click.argument("name")
@click.argument("email")
@click.password_option()
@click.option("--role", default="user", show_default=True)
def register(name: str, email: str, password: str, role: str):
    """Create an account."""

    async def _impl():
        async with _client() as c:
            return await c.post("/api/auth/register", json={
                "name": name,
                "email": email,
                "password": password,
                "role": role,
            })

    r = _run(_impl())
    if r.status_code != 201:
        _fail(r)
    user = r.json()
    click.secho(f"Registered {user['email']} (id {user['id_user']})", fg="green")


@main.command()
@click.argument("email")
@click.option("--password", prompt=True, hide_input=True)
def login(email: str, password: str):
    """Log in and print a bearer token."""

    async def _impl():
        async with _client() as c:
            return await c.post(
                "/api/auth/login", json={"email": email, "password": password}
            )

    r = _run(_impl())
    if r.status_code != 200:
        _fail(r)
    click.echo(r.json()["token"])


@main.command()
@click.option("--token", help="Bearer token (or set UNDANGAN_TOKEN)")
def weddings(token: Optional[str]):
    """List your weddings."""
    tok = _require_token(token)

    async def _impl():
        async with _client(tok) as c:
            return await c.get("/api/wedding")

    r = _run(_impl())
    if r.status_code != 200:
        _fail(r)

    rows = r.json()
    if not rows:
        click.echo("No weddings yet.")
        return
    click.secho(f"Weddings ({len(rows)}):", bold=True)
    for w in rows:
        click.echo(
            f"  #{w['id_wedding']:<5} {w['groom_name']} & {w['bride_name']}"
            f"  {w.get('wedding_date') or '—'}  {w.get('location') or ''}"
        )


@main.command()
@click.argument("slug")
def invitation(slug: str):
    """Look up a public invitation by its slug."""

    async def _impl():
        async with _client() as c:
            return await c.get(f"/api/invitation/{slug}")

    r = _run(_impl())
    if r.status_code != 200:
        _fail(r)
    click.echo(_pretty_json(r.json()))


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    main()
