# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Set test environment before importing app
os.environ["SECRET_KEY"] = "test-secret-key-for-testing-only-32chars!"  # nosec - test-only secret  # noqa: S105
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["INIT_DB_ON_STARTUP"] = "false"

from bizadmin.database import enable_sqlite_foreign_keys, get_db
from bizadmin.main import app
from bizadmin.models import Base, User
from bizadmin.models.enums import UserRoleTier
from bizadmin.schemas.user import UserCreate
from bizadmin.services import user_service
from bizadmin.services.rbac_seed_service import seed_rbac_data

# Test database setup
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
enable_sqlite_foreign_keys(engine)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def seeded_db(db_session):
    """Database with the default permissions and tier roles."""
    seed_rbac_data(db_session)
    return db_session


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def user_factory(seeded_db):
    """Return a helper that persists a user with a tier role."""

    def _create(
        email: str,
        password: str | None = None,
        role: UserRoleTier = UserRoleTier.USER,
        **fields,
    ) -> User:
        return user_service.create_user(
            seeded_db,
            UserCreate(email=email, password=password, role=role, **fields),
        )

    return _create


@pytest.fixture
def test_user(user_factory) -> User:
    """Create a regular test user."""
    return user_factory(
        "test@example.com",
        password="testpassword123",
        first_name="Test",
        last_name="User",
    )


@pytest.fixture
def manager_user(user_factory) -> User:
    """Create a test user with the manager tier."""
    return user_factory(
        "manager@example.com",
        password="managerpassword123",
        role=UserRoleTier.MANAGER,
        first_name="Mona",
        last_name="Manager",
    )


@pytest.fixture
def admin_user(user_factory) -> User:
    """Create an admin test user."""
    return user_factory(
        "admin@example.com",
        password="adminpassword123",
        role=UserRoleTier.ADMIN,
        first_name="Ada",
        last_name="Admin",
    )


@pytest.fixture
def authenticated_client(client, test_user):
    """Create an authenticated test client."""
    response = client.post(
        "/api/auth/login",
        json={"email": "test@example.com", "password": "testpassword123"},
    )
    assert response.status_code == 200
    return client


@pytest.fixture
def manager_client(client, manager_user):
    """Create an authenticated manager test client."""
    response = client.post(
        "/api/auth/login",
        json={"email": "manager@example.com", "password": "managerpassword123"},
    )
    assert response.status_code == 200
    return client


@pytest.fixture
def admin_client(client, admin_user):
    """Create an authenticated admin test client."""
    response = client.post(
        "/api/auth/login",
        json={"email": "admin@example.com", "password": "adminpassword123"},
    )
    assert response.status_code == 200
    return client
