"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Seeded companies, jobs and users with tokens
"""

import os

# Must be set before the app modules read settings
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.core.security import create_access_token, get_password_hash
from app.models.company import Company
from app.models.job import Job
from app.models.user import User
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """
    Create a fresh database for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
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
def companies(db_session):
    """Three companies: c1, c2, c3"""
    rows = [
        Company(handle="c1", name="C1", num_employees=1, description="Desc1", logo_url="http://c1.img"),
        Company(handle="c2", name="C2", num_employees=2, description="Desc2", logo_url="http://c2.img"),
        Company(handle="c3", name="C3", num_employees=3, description="Desc3", logo_url=None),
    ]
    db_session.add_all(rows)
    db_session.commit()
    return rows


@pytest.fixture
def jobs(db_session, companies):
    """
    Four jobs:
    - J1: salary 1, equity 0.1 (c1)
    - J2: salary 2, equity 0.2 (c1)
    - J3: salary 3, no equity (c1)
    - J4: no salary, no equity (c2)
    """
    rows = [
        Job(title="J1", salary=1, equity=Decimal("0.1"), company_handle="c1"),
        Job(title="J2", salary=2, equity=Decimal("0.2"), company_handle="c1"),
        Job(title="J3", salary=3, equity=None, company_handle="c1"),
        Job(title="J4", salary=None, equity=None, company_handle="c2"),
    ]
    db_session.add_all(rows)
    db_session.commit()
    return rows


@pytest.fixture
def job_ids(jobs):
    return [job.id for job in jobs]


def _make_user(db_session, username: str, is_admin: bool) -> User:
    user = User(
        username=username,
        hashed_password=get_password_hash("password1"),
        first_name=username.upper(),
        last_name="Last",
        email=f"{username}@example.com",
        is_admin=is_admin,
    )
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def admin_user(db_session):
    return _make_user(db_session, "admin", is_admin=True)


@pytest.fixture
def regular_user(db_session):
    return _make_user(db_session, "u1", is_admin=False)


@pytest.fixture
def admin_headers(admin_user):
    token = create_access_token("admin", is_admin=True)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers(regular_user):
    token = create_access_token("u1", is_admin=False)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def sample_job_data():
    """Valid creation payload for a job at c1"""
    return {
        "title": "New Job",
        "salary": 100000,
        "equity": "0.05",
        "companyHandle": "c1",
    }
