"""Tests for the ORM models and the scheduled-post transition table."""

import pytest
from sqlalchemy.dialects import postgresql, sqlite

from cast_scheduler.models import PostAction, PostStatus, ScheduledPost, SignerStatus, UserSigner
from cast_scheduler.models.scheduled_post import CLEARED_STATUSES, POST_TRANSITIONS, can_transition
from cast_scheduler.models.types import U64_MAX, UnsignedBigInteger


def test_table_names() -> None:
    assert UserSigner.__tablename__ == "user_signer"
    assert ScheduledPost.__tablename__ == "scheduled_post"


def test_indexed_columns() -> None:
    signer_indexed = {col.name for col in UserSigner.__table__.columns if col.index}
    post_indexed = {col.name for col in ScheduledPost.__table__.columns if col.index}

    assert signer_indexed == {"user_id"}
    assert post_indexed == {"user_id", "scheduled_time", "status"}


def test_status_values_are_lowercase() -> None:
    assert [s.value for s in SignerStatus] == ["pending_approval", "approved", "revoked"]
    assert [s.value for s in PostStatus] == ["pending", "posted", "failed", "skipped"]


def test_transition_table_is_exhaustive() -> None:
    assert set(POST_TRANSITIONS) == set(PostStatus)
    for actions in POST_TRANSITIONS.values():
        assert set(actions) == set(PostAction)


@pytest.mark.parametrize(
    ("source", "target", "action"),
    [
        (PostStatus.PENDING, PostStatus.SKIPPED, PostAction.UPDATE),
        (PostStatus.PENDING, PostStatus.FAILED, PostAction.MARK_FAILED),
        (PostStatus.PENDING, PostStatus.POSTED, PostAction.MARK_POSTED),
        (PostStatus.SKIPPED, PostStatus.PENDING, PostAction.UPDATE),
        (PostStatus.SKIPPED, PostStatus.POSTED, PostAction.MARK_POSTED),
        (PostStatus.SKIPPED, PostStatus.FAILED, PostAction.MARK_FAILED),
        (PostStatus.FAILED, PostStatus.PENDING, PostAction.UPDATE),
        (PostStatus.FAILED, PostStatus.SKIPPED, PostAction.UPDATE),
        (PostStatus.FAILED, PostStatus.FAILED, PostAction.MARK_FAILED),
    ],
)
def test_allowed_transitions(source, target, action) -> None:
    assert can_transition(source, target, action)


@pytest.mark.parametrize(
    ("source", "target", "action"),
    [
        (PostStatus.FAILED, PostStatus.POSTED, PostAction.MARK_POSTED),
        (PostStatus.POSTED, PostStatus.FAILED, PostAction.MARK_FAILED),
        (PostStatus.POSTED, PostStatus.POSTED, PostAction.MARK_POSTED),
        (PostStatus.POSTED, PostStatus.PENDING, PostAction.UPDATE),
        (PostStatus.PENDING, PostStatus.POSTED, PostAction.UPDATE),
        (PostStatus.PENDING, PostStatus.FAILED, PostAction.UPDATE),
    ],
)
def test_forbidden_transitions(source, target, action) -> None:
    assert not can_transition(source, target, action)


def test_posted_is_the_only_terminal_status() -> None:
    terminal = {
        status
        for status, actions in POST_TRANSITIONS.items()
        if not any(targets - {status} for targets in actions.values())
    }
    assert terminal == {PostStatus.POSTED}


def test_cleared_statuses() -> None:
    assert CLEARED_STATUSES == {PostStatus.PENDING, PostStatus.SKIPPED}


def test_unsigned_type_dialect_impls() -> None:
    column_type = UnsignedBigInteger()

    pg_impl = column_type.dialect_impl(postgresql.dialect())
    lite_impl = column_type.dialect_impl(sqlite.dialect())

    assert "NUMERIC(20, 0)" in str(pg_impl.impl.compile(dialect=postgresql.dialect()))
    assert "BIGINT" in str(lite_impl.impl.compile(dialect=sqlite.dialect()))


def test_unsigned_type_encoding_per_dialect() -> None:
    column_type = UnsignedBigInteger()
    lite = sqlite.dialect()
    pg = postgresql.dialect()

    assert column_type.process_bind_param(0, lite) == -(2**63)
    assert column_type.process_bind_param(U64_MAX, lite) == 2**63 - 1
    assert column_type.process_result_value(2**63 - 1, lite) == U64_MAX
    assert column_type.process_bind_param(U64_MAX, pg) == U64_MAX
    assert column_type.process_result_value(U64_MAX, pg) == U64_MAX


def test_unsigned_type_rejects_out_of_range() -> None:
    column_type = UnsignedBigInteger()

    with pytest.raises(ValueError):
        column_type.process_bind_param(U64_MAX + 1, sqlite.dialect())
    with pytest.raises(ValueError):
        column_type.process_bind_param(-1, sqlite.dialect())
    assert column_type.process_result_value(None, sqlite.dialect()) is None
