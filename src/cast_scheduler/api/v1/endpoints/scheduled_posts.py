"""Scheduled-post endpoints for the Cast Scheduler API."""

from fastapi import APIRouter, HTTPException, Query, Response, status

from cast_scheduler.api.v1.dependencies import SessionDep
from cast_scheduler.core.settings import settings
from cast_scheduler.db.time import now_unix_seconds
from cast_scheduler.models import ScheduledPost
from cast_scheduler.models.types import U64_MAX
from cast_scheduler.repositories import ScheduledPostRepository
from cast_scheduler.schemas.scheduled_post import (
    MarkFailedRequest,
    MarkPostedRequest,
    ScheduledPostCreate,
    ScheduledPostResponse,
    ScheduledPostUpdate,
)
from cast_scheduler.services.post_service import (
    POST_NOT_FOUND,
    create_scheduled_post,
    delete_scheduled_post,
    mark_post_as_failed,
    mark_post_as_posted,
    update_scheduled_post,
)
from cast_scheduler.services.validation import parse_post_status

router = APIRouter(prefix="/scheduled-posts", tags=["scheduled-posts"])


@router.post("/", response_model=ScheduledPostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(payload: ScheduledPostCreate, db: SessionDep) -> ScheduledPost:
    """Queue a new cast for a user.

    The referenced signer must exist and be approved.
    """
    return create_scheduled_post(db, **payload.model_dump())


@router.get("/", response_model=list[ScheduledPostResponse])
async def list_posts(
    db: SessionDep,
    user_id: int = Query(..., ge=0, le=U64_MAX, description="Owning user fid"),
    status: str | None = Query(None, description="Filter by post status"),
    limit: int | None = Query(None, ge=1, le=500, description="Maximum number of posts"),
) -> list[ScheduledPost]:
    """List a user's scheduled posts in scheduled-time order."""
    post_status = parse_post_status(status) if status is not None else None
    return ScheduledPostRepository(db).for_user(user_id, post_status, limit)


@router.get("/due", response_model=list[ScheduledPostResponse])
async def list_due_posts(
    db: SessionDep,
    now: int | None = Query(None, ge=0, le=U64_MAX, description="Unix seconds; defaults to server time"),
    limit: int | None = Query(None, ge=1, le=500, description="Maximum number of posts"),
) -> list[ScheduledPost]:
    """List pending posts whose scheduled time has passed."""
    cutoff = now if now is not None else now_unix_seconds()
    return ScheduledPostRepository(db).due(cutoff, limit or settings.dispatch_batch_size)


@router.get("/{post_id}", response_model=ScheduledPostResponse)
async def get_post(post_id: str, db: SessionDep) -> ScheduledPost:
    """Return a single scheduled post."""
    post = ScheduledPostRepository(db).get(post_id.strip())
    if post is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=POST_NOT_FOUND)
    return post


@router.patch("/{post_id}", response_model=ScheduledPostResponse)
async def update_post(post_id: str, payload: ScheduledPostUpdate, db: SessionDep) -> ScheduledPost:
    """Apply a partial update.

    Omitted keys are untouched; an explicit ``null`` clears a channel field.
    """
    return update_scheduled_post(db, post_id, **payload.to_updates())


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(post_id: str, db: SessionDep) -> Response:
    """Delete a scheduled post."""
    delete_scheduled_post(db, post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{post_id}/posted", response_model=ScheduledPostResponse)
async def mark_posted(post_id: str, payload: MarkPostedRequest, db: SessionDep) -> ScheduledPost:
    """Record that the cast was published."""
    return mark_post_as_posted(db, post_id, payload.cast_hash, payload.posted_at)


@router.post("/{post_id}/failed", response_model=ScheduledPostResponse)
async def mark_failed(post_id: str, payload: MarkFailedRequest, db: SessionDep) -> ScheduledPost:
    """Record that publishing the cast failed."""
    return mark_post_as_failed(db, post_id, payload.error)
