"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from src.database import Base, engine_options, get_db
from src.main import app
from src.services.accounts import create_admin
from src.services.registration import NewAccount

TEST_PASSWORD = "testpass123"


class AuthHeaders(dict):
    """Dict subclass that also stores the account behind the token."""

    def __init__(
        self,
        *args,
        user_id: int | None = None,
        email: str | None = None,
        token: str | None = None,
        **kwargs,
    ):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email
        self.token = token


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace(
        "/agri_accounts", "/agri_accounts_test"
    )
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(SQLALCHEMY_DATABASE_URL, **engine_options(SQLALCHEMY_DATABASE_URL))
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    from src import models  # noqa: F401

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
def auth_headers(client):
    """Register a farmer and return auth headers with account info."""
    response = client.post(
        "/api/v1/auth/register",
        json={
            "name": "Test Farmer",
            "email": "farmer@example.com",
            "password": TEST_PASSWORD,
            "phone": "555-0101",
            "role": "farmer",
        },
    )
    assert response.status_code == 201
    data = response.json()["data"]

    return AuthHeaders(
        bearer(data["token"]),
        user_id=data["user"]["id"],
        email=data["user"]["email"],
        token=data["token"],
    )


@pytest.fixture
def investor_headers(client):
    """Register an investor and return auth headers with account info."""
    response = client.post(
        "/api/v1/auth/register",
        json={
            "name": "Test Investor",
            "email": "investor@example.com",
            "password": TEST_PASSWORD,
            "phone": "555-0102",
            "role": "investor",
        },
    )
    assert response.status_code == 201
    data = response.json()["data"]

    return AuthHeaders(
        bearer(data["token"]),
        user_id=data["user"]["id"],
        email=data["user"]["email"],
        token=data["token"],
    )


@pytest.fixture
def admin_headers(client, db):
    """Create an admin directly and log in through the API."""
    admin = create_admin(
        db,
        NewAccount(
            name="Test Admin",
            email="admin@example.com",
            password=TEST_PASSWORD,
            phone="555-0100",
        ),
    )
    response = client.post(
        "/api/v1/auth/login",
        json={"email": "admin@example.com", "password": TEST_PASSWORD},
    )
    assert response.status_code == 200
    token = response.json()["data"]["token"]

    return AuthHeaders(bearer(token), user_id=admin.id, email=admin.email, token=token)
