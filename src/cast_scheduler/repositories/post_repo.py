"""Data access helpers for working with scheduled posts."""
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from cast_scheduler.models.scheduled_post import PostStatus, ScheduledPost

__all__ = ["ScheduledPostRepository"]


class ScheduledPostRepository:
    """Thin wrapper around database access for scheduled posts."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get(self, post_id: str, *, for_update: bool = False) -> ScheduledPost | None:
        """Return a scheduled post by identifier, optionally locking the row."""
        stmt = select(ScheduledPost).where(ScheduledPost.id == post_id)
        if for_update:
            stmt = stmt.with_for_update()
        return self.session.execute(stmt).scalars().first()

    def exists(self, post_id: str) -> bool:
        """Return True if a post with this identifier is stored."""
        stmt = select(ScheduledPost.id).where(ScheduledPost.id == post_id)
        return self.session.execute(stmt).first() is not None

    def for_user(
        self,
        user_id: int,
        status: PostStatus | None = None,
        limit: int | None = None,
    ) -> list[ScheduledPost]:
        """Return a user's posts ordered by scheduled time."""
        stmt = select(ScheduledPost).where(ScheduledPost.user_id == user_id)
        if status is not None:
            stmt = stmt.where(ScheduledPost.status == status)
        stmt = stmt.order_by(ScheduledPost.scheduled_time, ScheduledPost.id)
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.session.execute(stmt).scalars())

    def due(self, now: int, limit: int | None = None) -> list[ScheduledPost]:
        """Return pending posts whose scheduled time is at or before ``now``.

        Args:
            now: Unix seconds to compare ``scheduled_time`` against.
            limit: Optional cap on the number of rows returned.
        """
        stmt = (
            select(ScheduledPost)
            .where(
                ScheduledPost.status == PostStatus.PENDING,
                ScheduledPost.scheduled_time <= now,
            )
            .order_by(ScheduledPost.scheduled_time, ScheduledPost.id)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.session.execute(stmt).scalars())

    def add(self, post: ScheduledPost) -> ScheduledPost:
        """Stage a new post and flush so key conflicts surface immediately."""
        self.session.add(post)
        self.session.flush()
        return post

    def delete(self, post: ScheduledPost) -> None:
        """Remove a post and flush the deletion."""
        self.session.delete(post)
        self.session.flush()
