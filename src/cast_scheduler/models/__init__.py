# src/cast_scheduler/models/__init__.py
"""SQLAlchemy models for the Cast Scheduler service."""

from .scheduled_post import PostAction, PostStatus, ScheduledPost
from .signer import SignerStatus, UserSigner

__all__ = [
    "PostAction", "PostStatus", "ScheduledPost",
    "SignerStatus", "UserSigner",
]
