from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import Engine, StaticPool
from sqlmodel import Session, create_engine

from src.catalog.api.http.app import create_app
from src.catalog.core.services import DbManageService, DbSessionService

__all__ = ["engine", "session", "database_service", "client"]


@pytest.fixture
def engine() -> Generator[Engine]:
    """Create a fresh in-memory database per test."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Registers the table models and creates them on this engine
    DbManageService(engine).create_all()

    yield engine
    engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Generator[Session]:
    """Create a database session bound to the test engine."""
    with Session(engine, expire_on_commit=False) as session:
        try:
            yield session
        finally:
            # Explicit cleanup
            session.rollback()
            session.close()


@pytest.fixture
def database_service(engine: Engine) -> DbSessionService:
    return DbSessionService(engine)


@pytest.fixture
def client(database_service: DbSessionService) -> TestClient:
    """Create a test client whose request sessions use the test engine."""
    return TestClient(create_app(database_service))
