"""Tests for signer endpoints."""

from fastapi import status

from tests.conftest import TEST_FID


def _put(client, signer_id="signer-uuid", **overrides):
    payload = {"user_id": TEST_FID, "public_key": "0xpub", "status": "approved", "created_at": 0}
    payload.update(overrides)
    return client.put(f"/api/v1/signers/{signer_id}", json=payload)


def test_upsert_creates_signer(client) -> None:
    response = _put(client, status=" Approved ", created_at=1_700_000_000)

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "signer_id": "signer-uuid",
        "user_id": TEST_FID,
        "public_key": "0xpub",
        "status": "approved",
        "created_at": 1_700_000_000,
    }


def test_upsert_keeps_earliest_created_at(client) -> None:
    _put(client, created_at=100)

    response = _put(client, created_at=50, status="revoked")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["created_at"] == 100
    assert response.json()["status"] == "revoked"


def test_upsert_rejects_invalid_status(client) -> None:
    response = _put(client, status="enabled")

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert "invalid signer status" in response.json()["detail"]


def test_upsert_rejects_blank_public_key(client) -> None:
    response = _put(client, public_key="  ")

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "public_key must not be empty"


def test_upsert_rejects_negative_user_id(client) -> None:
    response = _put(client, user_id=-5)

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_list_approved_signers(client) -> None:
    _put(client, signer_id="one", status="approved")
    _put(client, signer_id="two", status="pending_approval")
    _put(client, signer_id="three", status="approved", user_id=TEST_FID + 1)

    response = client.get("/api/v1/signers/", params={"user_id": TEST_FID, "status": "approved"})

    assert response.status_code == status.HTTP_200_OK
    assert [s["signer_id"] for s in response.json()] == ["one"]


def test_list_signers_rejects_unknown_status(client) -> None:
    response = client.get("/api/v1/signers/", params={"user_id": TEST_FID, "status": "nope"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_upsert_accepts_full_unsigned_range(client) -> None:
    response = _put(client, signer_id="wide", user_id=2**63, created_at=2**64 - 1)

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["user_id"] == 2**63
    assert response.json()["created_at"] == 2**64 - 1

    listed = client.get("/api/v1/signers/", params={"user_id": 2**63})
    assert [s["signer_id"] for s in listed.json()] == ["wide"]
