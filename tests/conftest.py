"""Pytest configuration and fixtures."""

import functools
import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from study_planner.database import Base, get_db
from study_planner.main import app
from study_planner.schemas.auth import UserUpsert
from study_planner.services.auth import create_access_token
from study_planner.services.storage import DatabaseStorage


class AuthHeaders(dict):
    """Dict subclass that also stores user_id."""

    def __init__(self, *args, user_id: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id


# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace(
        "/study_planner", "/study_planner_test"
    )
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

if "sqlite" in SQLALCHEMY_DATABASE_URL:

    @event.listens_for(engine, "connect")
    def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        """SQLite only enforces owner references with this pragma on."""
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    from study_planner import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def storage(db):
    """Store bound to the test session."""
    return DatabaseStorage(db)


@pytest.fixture
def user(storage):
    """A user who has logged in once."""
    return storage.upsert_user(UserUpsert(id="u1", email="u1@example.com", first_name="Ada"))


@pytest.fixture
def other_user(storage):
    """A second, unrelated user."""
    return storage.upsert_user(UserUpsert(id="u2", email="u2@example.com", first_name="Grace"))


def login(client, user_id: str, email: str, **claims) -> AuthHeaders:
    """Sign in through the API and return bearer headers for the user."""
    token = create_access_token(user_id, email=email, **claims)
    headers = AuthHeaders({"Authorization": f"Bearer {token}"}, user_id=user_id)
    response = client.post("/api/auth/login", headers=headers)
    assert response.status_code == 200
    return headers


@pytest.fixture
def login_as(client):
    """Log in arbitrary users: login_as(user_id, email, **claims)."""
    return functools.partial(login, client)


@pytest.fixture
def auth_headers(client):
    """Log in a user and return auth headers with user info."""
    return login(client, "test-user", "test@example.com", first_name="Test", last_name="User")


@pytest.fixture
def other_auth_headers(client):
    """Log in a second user."""
    return login(client, "other-user", "other@example.com", first_name="Other")
