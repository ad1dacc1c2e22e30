"""Publication of scheduled posts whose time has come.

The dispatcher reads due posts, hands each one to a publisher and records the
outcome through the regular lifecycle operations, so every state change obeys
the same transition rules as the API.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol

from sqlalchemy.orm import Session

from cast_scheduler.core.settings import settings
from cast_scheduler.db.session import SessionLocal
from cast_scheduler.db.time import now_unix_seconds, utcnow
from cast_scheduler.models.scheduled_post import PostStatus, ScheduledPost
from cast_scheduler.repositories.post_repo import ScheduledPostRepository
from cast_scheduler.services.errors import SchedulerError
from cast_scheduler.services.post_service import mark_post_as_failed, mark_post_as_posted

logger = logging.getLogger(__name__)


class PublishError(RuntimeError):
    """Raised by a publisher when a cast could not be published."""


class Publisher(Protocol):
    """Anything able to publish a scheduled post and return its cast hash."""

    def publish(self, post: ScheduledPost) -> str:
        """Publish ``post`` and return the resulting cast hash."""
        ...


@dataclass
class DispatchReport:
    """Outcome of one dispatch pass."""

    posted: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.posted) + len(self.failed) + len(self.skipped)


class DuePostDispatcher:
    """Publishes pending posts whose scheduled time is at or before now."""

    def __init__(
        self,
        publisher: Publisher,
        session_factory: Callable[[], Session] = SessionLocal,
        batch_size: int | None = None,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            publisher: Publishes a post and returns its cast hash.
            session_factory: Creates the session used for one dispatch pass.
            batch_size: Maximum posts per pass; defaults to ``DISPATCH_BATCH_SIZE``.
        """
        self.publisher = publisher
        self.session_factory = session_factory
        self.batch_size = batch_size or settings.dispatch_batch_size

    def run_once(self, now: datetime | None = None) -> DispatchReport:
        """Publish every due post once and report what happened."""
        now = now or utcnow()
        report = DispatchReport()
        with self.session_factory() as db:
            due = ScheduledPostRepository(db).due(now_unix_seconds(now), limit=self.batch_size)
            # Detach identifiers first; each post is handled in its own transaction.
            due_ids = [post.id for post in due]
            logger.debug("Found %d due scheduled posts", len(due_ids))
            for post_id in due_ids:
                self._dispatch(db, post_id, now, report)
        return report

    def _dispatch(self, db: Session, post_id: str, now: datetime, report: DispatchReport) -> None:
        post = ScheduledPostRepository(db).get(post_id)
        if post is None or post.status is not PostStatus.PENDING:
            logger.warning("Scheduled post %s is no longer pending; not dispatching", post_id)
            report.skipped.append(post_id)
            return

        try:
            cast_hash = self.publisher.publish(post)
            if not cast_hash or not cast_hash.strip():
                raise PublishError("publisher returned an empty cast hash")
        except PublishError as e:
            logger.error("Publishing scheduled post %s failed: %s", post_id, e)
            try:
                mark_post_as_failed(db, post_id, str(e) or "publish failed")
            except SchedulerError as record_err:
                logger.warning("Could not mark scheduled post %s as failed: %s", post_id, record_err)
                report.skipped.append(post_id)
            else:
                report.failed.append(post_id)
            return

        try:
            mark_post_as_posted(db, post_id, cast_hash, now=now)
        except SchedulerError as record_err:
            # The post changed state while it was being published.
            logger.warning("Could not mark scheduled post %s as posted: %s", post_id, record_err)
            report.skipped.append(post_id)
        else:
            report.posted.append(post_id)
