"""Scheduled-post Pydantic schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from cast_scheduler.models.scheduled_post import PostStatus
from cast_scheduler.models.types import U64_MAX
from cast_scheduler.services.updates import UNCHANGED, Set, from_optional

_CHANNEL_FIELDS = ("channel_id", "channel_name", "channel_image")


class ScheduledPostCreate(BaseModel):
    """Schema for queueing a new cast."""

    id: str = Field(..., description="Client-chosen post identifier")
    user_id: int = Field(..., ge=0, le=U64_MAX, description="Owning user fid")
    signer_id: str = Field(..., description="Approved signer used to publish")
    text: str = Field(..., description="Cast text")
    scheduled_time: int = Field(..., ge=0, le=U64_MAX, description="Unix seconds")
    channel_id: str | None = Field(None, description="Optional channel identifier")
    channel_name: str | None = Field(None, description="Optional channel display name")
    channel_image: str | None = Field(None, description="Optional channel image URL")


class ScheduledPostUpdate(BaseModel):
    """Partial update for a scheduled post.

    Omitted keys are left untouched. For the channel fields an explicit
    ``null`` clears the stored value; for the other fields ``null`` is treated
    like an omitted key.
    """

    text: str | None = None
    scheduled_time: int | None = Field(None, ge=0, le=U64_MAX)
    channel_id: str | None = None
    channel_name: str | None = None
    channel_image: str | None = None
    status: str | None = Field(None, description="pending or skipped")

    def to_updates(self) -> dict[str, Any]:
        """Return keyword arguments for ``update_scheduled_post``."""
        updates: dict[str, Any] = {}
        for name in ("text", "scheduled_time", "status"):
            value = getattr(self, name)
            updates[name] = UNCHANGED if value is None else Set(value)
        for name in _CHANNEL_FIELDS:
            if name in self.model_fields_set:
                updates[name] = from_optional(getattr(self, name))
            else:
                updates[name] = UNCHANGED
        return updates


class MarkPostedRequest(BaseModel):
    """Schema for recording a published cast."""

    cast_hash: str = Field(..., description="Hash of the published cast")
    posted_at: int | None = Field(
        None,
        ge=0,
        le=U64_MAX,
        description="Unix seconds; defaults to the server time",
    )


class MarkFailedRequest(BaseModel):
    """Schema for recording a failed publication attempt."""

    error: str = Field(..., description="Failure reason")


class ScheduledPostResponse(BaseModel):
    """Schema for scheduled-post information returned by the API."""

    id: str
    user_id: int
    signer_id: str
    text: str
    scheduled_time: int
    channel_id: str | None
    channel_name: str | None
    channel_image: str | None
    status: PostStatus
    cast_hash: str | None
    error: str | None
    posted_at: int | None

    model_config = ConfigDict(from_attributes=True)
