"""signers and scheduled posts

Revision ID: 3b1f6c2a9d40
Revises:
Create Date: 2026-10-18 09:12:44.518203

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "3b1f6c2a9d40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _u64() -> sa.types.TypeEngine:
    """Unsigned 64-bit column; other dialects store the value shifted by -2**63."""
    return sa.BigInteger().with_variant(sa.Numeric(20, 0), "postgresql")


def upgrade() -> None:
    """Create the signer and scheduled-post tables."""
    op.create_table(
        "user_signer",
        sa.Column("signer_id", sa.String(length=255), nullable=False),
        sa.Column("user_id", _u64(), nullable=False),
        sa.Column("public_key", sa.Text(), nullable=False),
        sa.Column("status", sa.String(length=32), nullable=False),
        sa.Column("created_at", _u64(), nullable=False),
        sa.PrimaryKeyConstraint("signer_id"),
    )
    op.create_index("ix_user_signer_user_id", "user_signer", ["user_id"])

    op.create_table(
        "scheduled_post",
        sa.Column("id", sa.String(length=255), nullable=False),
        sa.Column("user_id", _u64(), nullable=False),
        sa.Column("signer_id", sa.String(length=255), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("scheduled_time", _u64(), nullable=False),
        sa.Column("channel_id", sa.Text(), nullable=True),
        sa.Column("channel_name", sa.Text(), nullable=True),
        sa.Column("channel_image", sa.Text(), nullable=True),
        sa.Column("status", sa.String(length=16), nullable=False),
        sa.Column("cast_hash", sa.Text(), nullable=True),
        sa.Column("error", sa.Text(), nullable=True),
        sa.Column("posted_at", _u64(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_scheduled_post_user_id", "scheduled_post", ["user_id"])
    op.create_index("ix_scheduled_post_scheduled_time", "scheduled_post", ["scheduled_time"])
    op.create_index("ix_scheduled_post_status", "scheduled_post", ["status"])


def downgrade() -> None:
    """Drop the signer and scheduled-post tables."""
    op.drop_index("ix_scheduled_post_status", table_name="scheduled_post")
    op.drop_index("ix_scheduled_post_scheduled_time", table_name="scheduled_post")
    op.drop_index("ix_scheduled_post_user_id", table_name="scheduled_post")
    op.drop_table("scheduled_post")
    op.drop_index("ix_user_signer_user_id", table_name="user_signer")
    op.drop_table("user_signer")
