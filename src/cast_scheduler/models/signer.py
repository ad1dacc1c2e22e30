# src/cast_scheduler/models/signer.py
"""SQLAlchemy models for per-user signing credentials."""

from __future__ import annotations

from enum import Enum

from sqlalchemy import Enum as SAEnum
from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from cast_scheduler.db.session import Base
from cast_scheduler.models.types import UnsignedBigInteger


class SignerStatus(str, Enum):
    """Authorization state of a signer."""

    PENDING_APPROVAL = "pending_approval"
    APPROVED = "approved"
    REVOKED = "revoked"


class UserSigner(Base):
    """Signing credential authorizing casts on behalf of a user.

    Rows are keyed by the signer identifier and only ever upserted; there is
    no delete path.
    """

    __tablename__ = "user_signer"

    signer_id: Mapped[str] = mapped_column(String(255), primary_key=True)
    user_id: Mapped[int] = mapped_column(UnsignedBigInteger, nullable=False, index=True)
    public_key: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[SignerStatus] = mapped_column(
        SAEnum(
            SignerStatus,
            name="signer_status",
            native_enum=False,
            length=32,
            values_callable=lambda members: [member.value for member in members],
        ),
        nullable=False,
        default=SignerStatus.PENDING_APPROVAL,
    )
    # Unix seconds; never moves backwards once set.
    created_at: Mapped[int] = mapped_column(UnsignedBigInteger, nullable=False)

    @property
    def is_approved(self) -> bool:
        """Return True when the signer may be used to publish casts."""
        return self.status == SignerStatus.APPROVED
