"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.session import Base, get_db
from app.repositories.property import InMemoryPropertyRepository, SqlAlchemyPropertyRepository
from app.services.property import PropertyService
from main import app


@pytest.fixture
def engine():
    """Fresh in-memory SQLite database shared by every connection of the test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    yield db
    db.close()


@pytest.fixture(params=["memory", "sqlalchemy"])
def repository(request, session_factory):
    """Runs the test once per store implementation."""
    if request.param == "memory":
        yield InMemoryPropertyRepository()
    else:
        db = session_factory()
        yield SqlAlchemyPropertyRepository(db)
        db.close()


@pytest.fixture
def service() -> PropertyService:
    return PropertyService(InMemoryPropertyRepository())


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def minimal_payload() -> dict:
    return {"address": "Calle 10 #20-30, Bogotá", "price": 150000000, "size": 80}


@pytest.fixture
def full_payload() -> dict:
    return {
        "address": "Carrera 7 #45-12, Bogotá",
        "price": 420000000,
        "size": 120,
        "description": "Casa con terraza y parqueadero.",
        "ownerName": "Carlos Pérez",
        "ownerPhone": "+57 (601) 555-0199",
        "ownerEmail": "carlos.perez@example.com",
        "ownerDocument": "CC 1.020.304-5",
    }
