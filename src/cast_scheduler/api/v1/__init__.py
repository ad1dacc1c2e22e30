# src/cast_scheduler/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import scheduled_posts_router, signers_router

__all__ = [
    "scheduled_posts_router",
    "signers_router",
]
