"""
Shared fixtures: in-memory SQLite schema per test, services and an API client.
"""
import os

# Must be set before app.config.settings is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "testing"
os.environ.setdefault("LOG_JSON", "false")

import pytest
from fastapi.testclient import TestClient

from app.core.db import Base, SessionLocal, engine
import app.models  # noqa: F401


@pytest.fixture(autouse=True)
def _schema():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def category_service(db_session):
    from app.services.category_service import CategoryService
    return CategoryService(db_session)


@pytest.fixture
def phrase_service(db_session):
    from app.services.phrase_service import PhraseService
    return PhraseService(db_session)


@pytest.fixture
def client():
    from app.main import app
    return TestClient(app)


@pytest.fixture
def simile_category(category_service):
    return category_service.create_category("Simile", "≈")
