"""API route aggregation.

All routers registered here get mounted in main.py under /api.

Auth is declared per route rather than per router: RSVP, wishes and
the invitation slug lookup mix public and protected routes on the same
path, and the protected handlers need the identity anyway to scope
their queries.
"""

from fastapi import APIRouter

from undangan.api.auth import router as auth_router
from undangan.api.guestbook import router as guestbook_router
from undangan.api.health import router as health_router
from undangan.api.invitations import router as invitations_router
from undangan.api.weddings import router as weddings_router

api_router = APIRouter(prefix="/api")

api_router.include_router(health_router, tags=["health"])
api_router.include_router(auth_router, tags=["auth"])
api_router.include_router(weddings_router, tags=["weddings", "gallery", "love-story", "gift"])
api_router.include_router(invitations_router, tags=["invitations", "guests"])
api_router.include_router(guestbook_router, tags=["rsvp", "wishes"])
