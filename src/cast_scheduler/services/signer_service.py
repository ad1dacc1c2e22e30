"""Signer authorization lifecycle.

Signers are created the first time an identifier is seen and updated in place
afterwards. ``created_at`` only ever moves forward.
"""
from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from cast_scheduler.db.session import atomic
from cast_scheduler.db.time import now_unix_seconds
from cast_scheduler.models.signer import SignerStatus, UserSigner
from cast_scheduler.repositories.signer_repo import SignerRepository
from cast_scheduler.services.errors import ConflictError
from cast_scheduler.services.validation import (
    parse_signer_status,
    require_non_empty,
    require_u64,
)

__all__ = ["create_or_update_signer", "merge_created_at"]

logger = logging.getLogger(__name__)


def merge_created_at(stored: int, supplied: int) -> int:
    """Return the creation time to keep when ``supplied`` arrives for a stored signer.

    Zero means "not supplied"; an earlier value never replaces a later one.
    """
    if supplied > 0 and supplied >= stored:
        return supplied
    return stored


def create_or_update_signer(
    db: Session,
    *,
    user_id: int,
    signer_id: str,
    public_key: str,
    status: str | SignerStatus,
    created_at: int = 0,
    now: datetime | None = None,
) -> UserSigner:
    """Insert a signer or update the existing one with the same identifier.

    Args:
        db: Session the operation runs in; committed on success.
        user_id: Owning user (fid).
        signer_id: Signer identifier; stored trimmed.
        public_key: Signer public key; must not be blank.
        status: One of ``pending_approval``, ``approved``, ``revoked`` in any casing.
        created_at: Unix seconds, or 0 to let the service pick the current time.
        now: Timestamp captured for this operation; defaults to the wall clock.

    Returns:
        The persisted signer.

    Raises:
        ValidationError: If a field is blank, out of range or the status is unknown.
        ConflictError: If a concurrent insert claimed the identifier first.
    """
    require_u64(user_id, "user_id")
    require_u64(created_at, "created_at")
    signer_id = require_non_empty(signer_id, "signer_id")
    require_non_empty(public_key, "public_key")
    signer_status = parse_signer_status(status)

    repo = SignerRepository(db)
    try:
        with atomic(db):
            signer = repo.get(signer_id, for_update=True)
            if signer is not None:
                signer.user_id = user_id
                signer.public_key = public_key
                signer.status = signer_status
                signer.created_at = merge_created_at(signer.created_at, created_at)
                action = "Updated"
            else:
                signer = repo.add(
                    UserSigner(
                        signer_id=signer_id,
                        user_id=user_id,
                        public_key=public_key,
                        status=signer_status,
                        created_at=created_at if created_at > 0 else now_unix_seconds(now),
                    )
                )
                action = "Created"
    except IntegrityError as err:
        raise ConflictError(f"Failed to insert signer: {err.orig}") from err

    logger.info(
        "%s signer %s for user_id=%d with status=%s",
        action,
        signer.signer_id,
        signer.user_id,
        signer.status.value,
    )
    return signer
