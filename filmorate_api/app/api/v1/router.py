"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.
"""

from fastapi import APIRouter

from .endpoints import films, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(films.router, prefix="/films", tags=["films"])
