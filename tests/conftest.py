"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown with seeded companies and jobs
- FastAPI test client
- Regular-user and admin bearer tokens
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.pool import StaticPool

from app.core.database import Base, Database, get_db
from app.core.security import create_access_token
from app.models import Company, Job  # noqa: F401  registers tables on Base.metadata
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


@event.listens_for(engine, "connect")
def _enable_foreign_keys(dbapi_connection, connection_record):
    """SQLite leaves foreign key enforcement off unless asked per connection"""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


SEED_COMPANIES = [
    ("c1", "C1", 1, "Desc1", "http://c1.img"),
    ("c2", "C2", 2, "Desc2", "http://c2.img"),
    ("c3", "C3", 3, "Desc3", "http://c3.img"),
]

SEED_JOBS = [
    ("j1", 10000, "0.1", "c1"),
    ("j2", 20000, "0.2", "c2"),
    ("j3", 30000, "0", "c1"),
]


@pytest.fixture
def db():
    """
    Fresh schema with seed data for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    database = Database(engine)

    for company in SEED_COMPANIES:
        database.query(
            """INSERT INTO companies (handle, name, num_employees, description, logo_url)
               VALUES ($1, $2, $3, $4, $5)""",
            list(company)
        )

    try:
        yield database
    finally:
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def job_ids(db):
    """Insert j1..j3 and return their generated ids in insertion order"""
    ids = []
    for job in SEED_JOBS:
        result = db.query(
            """INSERT INTO jobs (title, salary, equity, company_handle)
               VALUES ($1, $2, $3, $4)
               RETURNING id""",
            list(job)
        )
        ids.append(result.rows[0]["id"])
    return ids


@pytest.fixture
def client(db, job_ids):
    """
    FastAPI test client with overridden database dependency.
    """
    app.dependency_overrides[get_db] = lambda: db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def user_headers():
    """Bearer header for a regular (non-admin) user"""
    token = create_access_token({"sub": "u1", "is_admin": False})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers():
    """Bearer header for an admin user"""
    token = create_access_token({"sub": "admin", "is_admin": True})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def sample_job_data():
    """Valid job creation body"""
    return {
        "title": "newJob",
        "salary": 10000,
        "equity": "0.1",
        "companyHandle": "c1"
    }
