"""Signer-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field

from cast_scheduler.models.signer import SignerStatus
from cast_scheduler.models.types import U64_MAX


class SignerUpsert(BaseModel):
    """Schema for creating or updating a signer."""

    user_id: int = Field(..., ge=0, le=U64_MAX, description="Owning user fid")
    public_key: str = Field(..., description="Signer public key")
    status: str = Field(
        ...,
        description="One of pending_approval, approved, revoked (case-insensitive)",
    )
    created_at: int = Field(
        0,
        ge=0,
        le=U64_MAX,
        description="Unix seconds; 0 lets the server pick the current time",
    )


class SignerResponse(BaseModel):
    """Schema for signer information returned by the API."""

    signer_id: str
    user_id: int
    public_key: str
    status: SignerStatus
    created_at: int

    model_config = ConfigDict(from_attributes=True)
