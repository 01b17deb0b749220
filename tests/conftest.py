"""
Shared fixtures: a scratch SQLite database recreated for every test, and
a TestClient whose requests run against it.
"""

import os

# Must happen before pitico_app.config builds its settings
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ.setdefault("LOG_LEVEL", "DEBUG")

import pytest
from fastapi.testclient import TestClient
from main import app
from pitico_app.database.connection import Base, SessionLocal, engine, get_db


@pytest.fixture(scope="function")
def db_session():
    """Session on an empty urls table; the table is dropped afterwards"""
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """TestClient whose routes share the test's db_session"""
    app.dependency_overrides[get_db] = lambda: db_session
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.pop(get_db, None)
