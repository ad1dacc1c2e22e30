"""Data access helpers for working with signers."""
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from cast_scheduler.models.signer import SignerStatus, UserSigner

__all__ = ["SignerRepository"]


class SignerRepository:
    """Thin wrapper around database access for signer records."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get(self, signer_id: str, *, for_update: bool = False) -> UserSigner | None:
        """Return a signer by identifier, optionally locking the row."""
        stmt = select(UserSigner).where(UserSigner.signer_id == signer_id)
        if for_update:
            stmt = stmt.with_for_update()
        return self.session.execute(stmt).scalars().first()

    def for_user(self, user_id: int, status: SignerStatus | None = None) -> list[UserSigner]:
        """Return a user's signers, oldest first."""
        stmt = select(UserSigner).where(UserSigner.user_id == user_id)
        if status is not None:
            stmt = stmt.where(UserSigner.status == status)
        stmt = stmt.order_by(UserSigner.created_at, UserSigner.signer_id)
        return list(self.session.execute(stmt).scalars())

    def approved_for_user(self, user_id: int) -> list[UserSigner]:
        """Return the signers a user may publish with."""
        return self.for_user(user_id, SignerStatus.APPROVED)

    def add(self, signer: UserSigner) -> UserSigner:
        """Stage a new signer and flush so key conflicts surface immediately."""
        self.session.add(signer)
        self.session.flush()
        return signer
