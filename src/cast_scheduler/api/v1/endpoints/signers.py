"""Signer endpoints for the Cast Scheduler API."""

from fastapi import APIRouter, Query

from cast_scheduler.api.v1.dependencies import SessionDep
from cast_scheduler.models import UserSigner
from cast_scheduler.models.types import U64_MAX
from cast_scheduler.repositories import SignerRepository
from cast_scheduler.schemas.signer import SignerResponse, SignerUpsert
from cast_scheduler.services.signer_service import create_or_update_signer
from cast_scheduler.services.validation import parse_signer_status

router = APIRouter(prefix="/signers", tags=["signers"])


@router.put("/{signer_id}", response_model=SignerResponse)
async def upsert_signer(signer_id: str, payload: SignerUpsert, db: SessionDep) -> UserSigner:
    """Create a signer, or update the existing signer with this identifier.

    Args:
        signer_id: Signer identifier (path parameter)
        payload: Owner, public key, status and optional creation time
        db: Database session

    Returns:
        The persisted signer
    """
    return create_or_update_signer(
        db,
        user_id=payload.user_id,
        signer_id=signer_id,
        public_key=payload.public_key,
        status=payload.status,
        created_at=payload.created_at,
    )


@router.get("/", response_model=list[SignerResponse])
async def list_signers(
    db: SessionDep,
    user_id: int = Query(..., ge=0, le=U64_MAX, description="Owning user fid"),
    status: str | None = Query(None, description="Filter by signer status"),
) -> list[UserSigner]:
    """List a user's signers, optionally filtered by status (e.g. ``approved``)."""
    signer_status = parse_signer_status(status) if status is not None else None
    return SignerRepository(db).for_user(user_id, signer_status)
