"""Pure input validators shared by the signer and scheduled-post services."""

from __future__ import annotations

from cast_scheduler.models.scheduled_post import PostStatus
from cast_scheduler.models.signer import SignerStatus
from cast_scheduler.models.types import U64_MAX
from cast_scheduler.services.errors import ValidationError

__all__ = [
    "normalize_status",
    "parse_post_status",
    "parse_signer_status",
    "require_non_empty",
    "require_u64",
]


def normalize_status(value: str) -> str:
    """Return the canonical (trimmed, lowercase) spelling of a status string."""
    return value.strip().lower()


def require_non_empty(value: str, field: str, *, context: str = "") -> str:
    """Return ``value`` trimmed, raising if nothing is left.

    Args:
        value: Raw caller input.
        field: Field name used in the error message.
        context: Optional suffix such as ``"when updating"``.

    Raises:
        ValidationError: If ``value`` is blank after trimming.
    """
    trimmed = value.strip()
    if not trimmed:
        suffix = f" {context}" if context else ""
        raise ValidationError(f"{field} must not be empty{suffix}")
    return trimmed


def require_u64(value: int, field: str) -> int:
    """Ensure ``value`` fits in an unsigned 64-bit integer."""
    if isinstance(value, bool) or value < 0 or value > U64_MAX:
        raise ValidationError(f"{field} must be an unsigned 64-bit integer")
    return value


def parse_signer_status(value: str | SignerStatus) -> SignerStatus:
    """Parse a signer status, accepting any casing and surrounding whitespace."""
    if isinstance(value, SignerStatus):
        return value
    try:
        return SignerStatus(normalize_status(value))
    except ValueError as err:
        raise ValidationError(
            "invalid signer status; allowed: pending_approval, approved, revoked"
        ) from err


def parse_post_status(value: str | PostStatus) -> PostStatus:
    """Parse a scheduled-post status, accepting any casing and surrounding whitespace."""
    if isinstance(value, PostStatus):
        return value
    try:
        return PostStatus(normalize_status(value))
    except ValueError as err:
        raise ValidationError(
            "invalid status; allowed: pending, posted, failed, skipped"
        ) from err
