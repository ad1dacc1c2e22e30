# src/cast_scheduler/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .scheduled_posts import router as scheduled_posts_router
from .signers import router as signers_router

__all__ = [
    "scheduled_posts_router",
    "signers_router",
]
