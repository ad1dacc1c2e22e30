"""Pydantic schemas for request/response validation."""

from .scheduled_post import (
    MarkFailedRequest,
    MarkPostedRequest,
    ScheduledPostCreate,
    ScheduledPostResponse,
    ScheduledPostUpdate,
)
from .signer import SignerResponse, SignerUpsert

__all__ = [
    "MarkFailedRequest",
    "MarkPostedRequest",
    "ScheduledPostCreate",
    "ScheduledPostResponse",
    "ScheduledPostUpdate",
    "SignerResponse",
    "SignerUpsert",
]
