"""Scheduled-post lifecycle: creation, partial updates, deletion and terminal marking.

Every public function runs as a single transaction against the session it is
given. Input is validated before anything is written, so a failure never
leaves a partially updated row behind.
"""
from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from cast_scheduler.db.session import atomic
from cast_scheduler.db.time import now_unix_seconds
from cast_scheduler.models.scheduled_post import (
    CLEARED_STATUSES,
    PostAction,
    PostStatus,
    ScheduledPost,
    can_transition,
)
from cast_scheduler.repositories.post_repo import ScheduledPostRepository
from cast_scheduler.repositories.signer_repo import SignerRepository
from cast_scheduler.services.errors import ConflictError, NotFoundError, ValidationError
from cast_scheduler.services.updates import UNCHANGED, Clear, FieldUpdate, Set, apply_update
from cast_scheduler.services.validation import (
    parse_post_status,
    require_non_empty,
    require_u64,
)

__all__ = [
    "create_scheduled_post",
    "delete_scheduled_post",
    "mark_post_as_failed",
    "mark_post_as_posted",
    "update_scheduled_post",
]

logger = logging.getLogger(__name__)

POST_NOT_FOUND = "scheduled post not found"


def _require_scheduled_time(value: int) -> int:
    require_u64(value, "scheduled_time")
    if value == 0:
        raise ValidationError("scheduled_time must be a valid unix timestamp (seconds)")
    return value


def _load_for_update(repo: ScheduledPostRepository, post_id: str) -> ScheduledPost:
    post = repo.get(post_id, for_update=True)
    if post is None:
        raise NotFoundError(POST_NOT_FOUND)
    return post


def create_scheduled_post(
    db: Session,
    *,
    id: str,  # noqa: A002 - mirrors the record key
    user_id: int,
    signer_id: str,
    text: str,
    scheduled_time: int,
    channel_id: str | None = None,
    channel_name: str | None = None,
    channel_image: str | None = None,
) -> ScheduledPost:
    """Queue a new cast for publication.

    Checks run in order and the first failure wins: identifier, signer
    identifier, text, scheduled time, duplicate identifier, then the signer
    must exist and be approved.

    Raises:
        ValidationError: Blank fields, zero scheduled time or unapproved signer.
        ConflictError: A post with this identifier already exists.
        NotFoundError: The signer does not exist.
    """
    post_id = require_non_empty(id, "id")
    signer_id = require_non_empty(signer_id, "signer_id")
    require_non_empty(text, "text")
    _require_scheduled_time(scheduled_time)
    require_u64(user_id, "user_id")

    posts = ScheduledPostRepository(db)
    signers = SignerRepository(db)
    try:
        with atomic(db):
            if posts.exists(post_id):
                raise ConflictError("scheduled post with this id already exists")

            signer = signers.get(signer_id)
            if signer is None:
                raise NotFoundError("signer not found")
            if not signer.is_approved:
                raise ValidationError("signer is not approved")

            post = posts.add(
                ScheduledPost(
                    id=post_id,
                    user_id=user_id,
                    signer_id=signer_id,
                    text=text,
                    scheduled_time=scheduled_time,
                    channel_id=channel_id,
                    channel_name=channel_name,
                    channel_image=channel_image,
                    status=PostStatus.PENDING,
                    cast_hash=None,
                    error=None,
                    posted_at=None,
                )
            )
    except IntegrityError as err:
        raise ConflictError(f"Failed to create scheduled post: {err.orig}") from err

    logger.info(
        "Created scheduled post id=%s user_id=%d scheduled_time=%d status=%s",
        post.id,
        post.user_id,
        post.scheduled_time,
        post.status.value,
    )
    return post


def update_scheduled_post(
    db: Session,
    id: str,  # noqa: A002 - mirrors the record key
    *,
    text: FieldUpdate[str] = UNCHANGED,
    scheduled_time: FieldUpdate[int] = UNCHANGED,
    channel_id: FieldUpdate[str] = UNCHANGED,
    channel_name: FieldUpdate[str] = UNCHANGED,
    channel_image: FieldUpdate[str] = UNCHANGED,
    status: FieldUpdate[str | PostStatus] = UNCHANGED,
) -> ScheduledPost:
    """Apply a partial update to a scheduled post.

    ``text``, ``scheduled_time`` and ``status`` can only be left unchanged or
    set; the channel fields may also be cleared. Only ``pending`` and
    ``skipped`` can be set here, and a posted cast cannot change status at
    all. Whenever the resulting status is ``pending`` or ``skipped`` any
    previous publication results are cleared.

    Raises:
        ValidationError: Invalid field values or a disallowed status change.
        NotFoundError: No post with this identifier exists.
    """
    post_id = require_non_empty(id, "id")

    posts = ScheduledPostRepository(db)
    with atomic(db):
        post = _load_for_update(posts, post_id)

        for name, update in (
            ("text", text),
            ("scheduled_time", scheduled_time),
            ("status", status),
        ):
            if isinstance(update, Clear):
                raise ValidationError(f"{name} cannot be cleared")
        if isinstance(text, Set):
            require_non_empty(text.value, "text", context="when updating")
        if isinstance(scheduled_time, Set):
            _require_scheduled_time(scheduled_time.value)
        new_status: PostStatus | None = None
        if isinstance(status, Set):
            new_status = parse_post_status(status.value)
            if new_status in (PostStatus.POSTED, PostStatus.FAILED):
                raise ValidationError(
                    "use mark_post_as_posted or mark_post_as_failed to set terminal statuses"
                )
            if not can_transition(post.status, new_status, PostAction.UPDATE):
                raise ValidationError(
                    f"cannot change status of a scheduled post from '{post.status.value}'"
                )

        post.text = apply_update(post.text, text)
        post.scheduled_time = apply_update(post.scheduled_time, scheduled_time)
        post.channel_id = apply_update(post.channel_id, channel_id)
        post.channel_name = apply_update(post.channel_name, channel_name)
        post.channel_image = apply_update(post.channel_image, channel_image)
        if new_status is not None:
            post.status = new_status

        if post.status in CLEARED_STATUSES:
            post.clear_results()

    logger.info(
        "Updated scheduled post id=%s status=%s scheduled_time=%d",
        post.id,
        post.status.value,
        post.scheduled_time,
    )
    return post


def delete_scheduled_post(db: Session, id: str) -> None:  # noqa: A002
    """Delete a scheduled post.

    Raises:
        NotFoundError: No post with this identifier exists.
    """
    post_id = require_non_empty(id, "id")
    posts = ScheduledPostRepository(db)
    with atomic(db):
        posts.delete(_load_for_update(posts, post_id))
    logger.info("Deleted scheduled post id=%s", post_id)


def mark_post_as_posted(
    db: Session,
    id: str,  # noqa: A002
    cast_hash: str,
    posted_at: int | None = None,
    *,
    now: datetime | None = None,
) -> ScheduledPost:
    """Record a successful publication.

    Only ``pending`` and ``skipped`` posts can be marked as posted.

    Args:
        db: Session the operation runs in.
        id: Post identifier.
        cast_hash: Hash of the published cast.
        posted_at: Publication time in unix seconds; defaults to ``now``.
        now: Timestamp captured for this operation; defaults to the wall clock.

    Raises:
        ValidationError: Blank fields or the post is not pending/skipped.
        NotFoundError: No post with this identifier exists.
    """
    post_id = require_non_empty(id, "id")
    require_non_empty(cast_hash, "cast_hash")
    if posted_at is not None:
        require_u64(posted_at, "posted_at")

    posts = ScheduledPostRepository(db)
    with atomic(db):
        post = _load_for_update(posts, post_id)
        if not can_transition(post.status, PostStatus.POSTED, PostAction.MARK_POSTED):
            raise ValidationError(
                f"cannot mark post as posted from status '{post.status.value}'"
            )
        post.status = PostStatus.POSTED
        post.cast_hash = cast_hash
        post.error = None
        post.posted_at = posted_at if posted_at is not None else now_unix_seconds(now)

    logger.info("Marked post id=%s as posted at=%d", post.id, post.posted_at or 0)
    return post


def mark_post_as_failed(db: Session, id: str, error: str) -> ScheduledPost:  # noqa: A002
    """Record a failed publication attempt.

    Any status except ``posted`` is accepted, including ``failed`` itself.
    ``cast_hash`` is left as it is.

    Raises:
        ValidationError: Blank fields or the post was already published.
        NotFoundError: No post with this identifier exists.
    """
    post_id = require_non_empty(id, "id")
    require_non_empty(error, "error message")

    posts = ScheduledPostRepository(db)
    with atomic(db):
        post = _load_for_update(posts, post_id)
        if not can_transition(post.status, PostStatus.FAILED, PostAction.MARK_FAILED):
            raise ValidationError("cannot mark a posted cast as failed")
        post.status = PostStatus.FAILED
        post.error = error
        post.posted_at = None

    logger.info("Marked post id=%s as failed", post.id)
    return post
