"""
Pytest configuration and fixtures for test suite.
"""

import os
import pytest

# Set test environment variables before importing the app
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["APP_ENV"] = "development"
os.environ["LOG_FORMAT"] = "console"

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from todo_api.api.dependencies import get_db
from todo_api.main import app
from todo_api.models.database import create_tables


@pytest.fixture
def engine():
    """Fresh in-memory SQLite database shared by every connection of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """SQLAlchemy session bound to the test database."""
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(engine):
    """FastAPI test client whose requests use the test database."""
    testing_session = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    async def override_get_db():
        db = testing_session()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.pop(get_db, None)
