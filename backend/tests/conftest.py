"""
Pytest fixtures.

- In-memory SQLite (StaticPool so every connection sees the same database),
  with foreign keys enforced as on PostgreSQL
- Three companies and three jobs seeded per test
- TestClient with the get_db dependency pointed at the test session
- Admin / non-admin bearer tokens
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("ADMIN_USERNAME", "admin")
os.environ.setdefault("ADMIN_PASSWORD", "admin-password")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jobly.api.deps import get_db
from jobly.auth.jwt import create_access_token
from jobly.db.client import fetch_one
from jobly.db.init_db import init_db
from jobly.db.session import enable_sqlite_foreign_keys
from jobly.main import app
from jobly.models import Base
from jobly.repos.company.write import CompanyWriteRepo
from jobly.repos.job.write import JobWriteRepo

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
enable_sqlite_foreign_keys(engine)
TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def _seed(db):
    companies = CompanyWriteRepo(db)
    for n in (1, 2, 3):
        companies.insert(
            handle=f"c{n}",
            name=f"C{n}",
            description=f"Desc{n}",
            num_employees=n,
            logo_url=f"http://c{n}.img",
        )

    jobs = JobWriteRepo(db)
    jobs.insert(title="J1", salary=100000, equity="0.0001", company_handle="c1")
    jobs.insert(title="J2", salary=200000, equity="0.0002", company_handle="c2")
    jobs.insert(title="J3", salary=300000, equity="0", company_handle="c2")


@pytest.fixture
def db_session():
    init_db(engine)
    db = TestingSessionLocal()
    _seed(db)
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def j1_id(db_session):
    return fetch_one(db_session, "SELECT id FROM jobs WHERE title = $1", ["J1"])["id"]


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    token = create_access_token(subject="admin", is_admin=True)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers():
    token = create_access_token(subject="u1", is_admin=False)
    return {"Authorization": f"Bearer {token}"}
