# src/cast_scheduler/services/__init__.py
"""Business logic services for the Cast Scheduler."""

from .dispatcher import DispatchReport, DuePostDispatcher, PublishError, Publisher
from .errors import ConflictError, NotFoundError, SchedulerError, ValidationError
from .post_service import (
    create_scheduled_post,
    delete_scheduled_post,
    mark_post_as_failed,
    mark_post_as_posted,
    update_scheduled_post,
)
from .signer_service import create_or_update_signer

__all__ = [
    "ConflictError",
    "DispatchReport",
    "DuePostDispatcher",
    "NotFoundError",
    "PublishError",
    "Publisher",
    "SchedulerError",
    "ValidationError",
    "create_or_update_signer",
    "create_scheduled_post",
    "delete_scheduled_post",
    "mark_post_as_failed",
    "mark_post_as_posted",
    "update_scheduled_post",
]
