# src/cast_scheduler/models/scheduled_post.py
"""SQLAlchemy models for casts queued for future publication."""

from __future__ import annotations

from enum import Enum
from typing import Final

from sqlalchemy import Enum as SAEnum
from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from cast_scheduler.db.session import Base
from cast_scheduler.models.types import UnsignedBigInteger


class PostStatus(str, Enum):
    """Publication state of a scheduled post."""

    PENDING = "pending"
    POSTED = "posted"
    FAILED = "failed"
    SKIPPED = "skipped"


class PostAction(str, Enum):
    """Operations able to move a scheduled post between states."""

    UPDATE = "update"
    MARK_POSTED = "mark_posted"
    MARK_FAILED = "mark_failed"


_NONE: Final[frozenset[PostStatus]] = frozenset()
_REOPEN: Final[frozenset[PostStatus]] = frozenset({PostStatus.PENDING, PostStatus.SKIPPED})

# Source status -> action -> reachable target statuses.
POST_TRANSITIONS: Final[dict[PostStatus, dict[PostAction, frozenset[PostStatus]]]] = {
    PostStatus.PENDING: {
        PostAction.UPDATE: _REOPEN,
        PostAction.MARK_POSTED: frozenset({PostStatus.POSTED}),
        PostAction.MARK_FAILED: frozenset({PostStatus.FAILED}),
    },
    PostStatus.SKIPPED: {
        PostAction.UPDATE: _REOPEN,
        PostAction.MARK_POSTED: frozenset({PostStatus.POSTED}),
        PostAction.MARK_FAILED: frozenset({PostStatus.FAILED}),
    },
    PostStatus.FAILED: {
        PostAction.UPDATE: _REOPEN,
        PostAction.MARK_POSTED: _NONE,
        PostAction.MARK_FAILED: frozenset({PostStatus.FAILED}),
    },
    # Terminal.
    PostStatus.POSTED: {
        PostAction.UPDATE: _NONE,
        PostAction.MARK_POSTED: _NONE,
        PostAction.MARK_FAILED: _NONE,
    },
}

# Statuses that never carry publication results after a generic update.
CLEARED_STATUSES: Final[frozenset[PostStatus]] = _REOPEN


def can_transition(source: PostStatus, target: PostStatus, action: PostAction) -> bool:
    """Return True when ``action`` may move a post from ``source`` to ``target``."""
    return target in POST_TRANSITIONS[source][action]


class ScheduledPost(Base):
    """A cast queued for publication at ``scheduled_time``.

    ``cast_hash`` and ``posted_at`` are only populated once the cast is
    published; ``error`` only once publishing failed.
    """

    __tablename__ = "scheduled_post"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    user_id: Mapped[int] = mapped_column(UnsignedBigInteger, nullable=False, index=True)
    # Soft reference to user_signer.signer_id, checked only at creation.
    signer_id: Mapped[str] = mapped_column(String(255), nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    scheduled_time: Mapped[int] = mapped_column(UnsignedBigInteger, nullable=False, index=True)

    channel_id: Mapped[str | None] = mapped_column(Text, nullable=True)
    channel_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    channel_image: Mapped[str | None] = mapped_column(Text, nullable=True)

    status: Mapped[PostStatus] = mapped_column(
        SAEnum(
            PostStatus,
            name="post_status",
            native_enum=False,
            length=16,
            values_callable=lambda members: [member.value for member in members],
        ),
        nullable=False,
        default=PostStatus.PENDING,
        index=True,
    )
    cast_hash: Mapped[str | None] = mapped_column(Text, nullable=True)
    error: Mapped[str | None] = mapped_column(Text, nullable=True)
    posted_at: Mapped[int | None] = mapped_column(UnsignedBigInteger, nullable=True)

    def clear_results(self) -> None:
        """Drop publication results left over from an earlier attempt."""
        self.cast_hash = None
        self.error = None
        self.posted_at = None
