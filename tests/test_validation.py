"""Tests for the pure input validators."""

import pytest

from cast_scheduler.models import PostStatus, SignerStatus
from cast_scheduler.models.types import U64_MAX
from cast_scheduler.services.errors import ValidationError
from cast_scheduler.services.validation import (
    normalize_status,
    parse_post_status,
    parse_signer_status,
    require_non_empty,
    require_u64,
)


def test_normalize_status() -> None:
    assert normalize_status("  APPROVED\n") == "approved"
    assert normalize_status("Pending_Approval") == "pending_approval"


def test_require_non_empty_returns_trimmed_value() -> None:
    assert require_non_empty("  abc ", "id") == "abc"


def test_require_non_empty_messages() -> None:
    with pytest.raises(ValidationError, match="^id must not be empty$"):
        require_non_empty("   ", "id")
    with pytest.raises(ValidationError, match="^text must not be empty when updating$"):
        require_non_empty("", "text", context="when updating")


@pytest.mark.parametrize("value", [0, 1, U64_MAX])
def test_require_u64_accepts_range(value: int) -> None:
    assert require_u64(value, "user_id") == value


@pytest.mark.parametrize("value", [-1, U64_MAX + 1, True])
def test_require_u64_rejects_out_of_range(value: int) -> None:
    with pytest.raises(ValidationError, match="user_id must be an unsigned 64-bit integer"):
        require_u64(value, "user_id")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("approved", SignerStatus.APPROVED),
        (" Revoked ", SignerStatus.REVOKED),
        ("PENDING_APPROVAL", SignerStatus.PENDING_APPROVAL),
        (SignerStatus.APPROVED, SignerStatus.APPROVED),
    ],
)
def test_parse_signer_status(raw, expected) -> None:
    assert parse_signer_status(raw) is expected


@pytest.mark.parametrize("raw", ["", "pending", "approved!", "revoke"])
def test_parse_signer_status_rejects_unknown(raw: str) -> None:
    with pytest.raises(ValidationError, match="allowed: pending_approval, approved, revoked"):
        parse_signer_status(raw)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("pending", PostStatus.PENDING),
        ("POSTED", PostStatus.POSTED),
        (" failed\t", PostStatus.FAILED),
        ("Skipped", PostStatus.SKIPPED),
    ],
)
def test_parse_post_status(raw: str, expected: PostStatus) -> None:
    assert parse_post_status(raw) is expected


def test_parse_post_status_rejects_unknown() -> None:
    with pytest.raises(ValidationError, match="allowed: pending, posted, failed, skipped"):
        parse_post_status("queued")
