"""Query access to the signer and scheduled-post collections."""

from .post_repo import ScheduledPostRepository
from .signer_repo import SignerRepository

__all__ = ["ScheduledPostRepository", "SignerRepository"]
