"""
Top‑level JSON API router.

Aggregates the per‑collection routers.  The application mounts it
under ``/api``.
"""

from fastapi import APIRouter

from .endpoints import comments, destinations, users

router = APIRouter()

router.include_router(destinations.router, tags=["destinations"])
router.include_router(users.router, tags=["users"])
router.include_router(comments.router, tags=["comments"])
