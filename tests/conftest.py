# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator
from itertools import count
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite://")

from cast_scheduler.db.session import Base
from cast_scheduler.db.session import get_db as app_get_session
from cast_scheduler.main import app as fastapi_app
from cast_scheduler.models import ScheduledPost, SignerStatus, UserSigner
from cast_scheduler.services.post_service import create_scheduled_post
from cast_scheduler.services.signer_service import create_or_update_signer

TEST_DB_URL = "sqlite://"
TEST_FID = 4242
SCHEDULED_AT = 1_700_000_000

_POST_COUNTER = count(1)
_SIGNER_COUNTER = count(1)


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture()
def db_session(session_factory: sessionmaker[Session]) -> Iterator[Session]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def make_signer(db_session: Session) -> Callable[..., UserSigner]:
    """Return a factory persisting signers through the service layer."""

    def _make(
        status: str = SignerStatus.APPROVED.value,
        signer_id: str | None = None,
        user_id: int = TEST_FID,
        **overrides: Any,
    ) -> UserSigner:
        return create_or_update_signer(
            db_session,
            user_id=user_id,
            signer_id=signer_id or f"signer-{next(_SIGNER_COUNTER)}",
            public_key=overrides.pop("public_key", "0x" + "ab" * 32),
            status=status,
            created_at=overrides.pop("created_at", 0),
            **overrides,
        )

    return _make


@pytest.fixture()
def approved_signer(make_signer: Callable[..., UserSigner]) -> UserSigner:
    """Create an approved signer for the default test user."""
    return make_signer()


@pytest.fixture()
def make_post(
    db_session: Session, approved_signer: UserSigner
) -> Callable[..., ScheduledPost]:
    """Return a factory persisting pending scheduled posts."""

    def _make(**overrides: Any) -> ScheduledPost:
        fields: dict[str, Any] = {
            "id": f"post-{next(_POST_COUNTER)}",
            "user_id": TEST_FID,
            "signer_id": approved_signer.signer_id,
            "text": "gm farcaster",
            "scheduled_time": SCHEDULED_AT,
        }
        fields.update(overrides)
        return create_scheduled_post(db_session, **fields)

    return _make


@pytest.fixture()
def pending_post(make_post: Callable[..., ScheduledPost]) -> ScheduledPost:
    """Create a baseline pending post."""
    return make_post()
