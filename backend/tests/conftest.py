"""Pytest fixtures — SQLite database for fast, isolated tests."""
import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from atlas.config import settings
from atlas.database import Base, get_db
from atlas.main import app

# Import all models so they register with Base.metadata
from atlas.models.contribution import Contribution                      # noqa: F401
from atlas.models.region import Region
from atlas.models.country import Country
from atlas.models.ethnic_group import EthnicGroup, EthnicGroupPresence  # noqa: F401

SQLITE_URL = "sqlite:///./test.db"

ADMIN_USERNAME = "moderator"
ADMIN_PASSWORD = "s3cret-pass"


@pytest.fixture(scope="function")
def db_engine():
    """Create a fresh SQLite engine for each test."""
    engine = create_engine(SQLITE_URL, connect_args={"check_same_thread": False})

    # Enable WAL mode for better concurrency
    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db(db_engine):
    """Yield a database session, closed after the test."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(db_engine):
    """FastAPI TestClient with the database dependency overridden to use SQLite."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

    def _override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def admin_credentials(monkeypatch):
    """Configure known admin credentials for the duration of a test."""
    monkeypatch.setattr(settings, "ADMIN_USERNAME", ADMIN_USERNAME)
    monkeypatch.setattr(settings, "ADMIN_PASSWORD", ADMIN_PASSWORD)
    monkeypatch.setattr(settings, "ADMIN_SESSION_SECRET", "test-session-secret")
    return ADMIN_USERNAME, ADMIN_PASSWORD


@pytest.fixture(scope="function")
def admin_client(client, admin_credentials):
    """TestClient carrying a valid admin session cookie."""
    username, password = admin_credentials
    resp = client.post("/api/admin/login", json={"username": username, "password": password})
    assert resp.status_code == 200, resp.text
    return client


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def submit_contribution(client: TestClient, contribution_type: str, payload: dict, **extra) -> dict:
    """Helper — POST /api/contributions and return response JSON."""
    resp = client.post("/api/contributions", json={
        "type": contribution_type,
        "proposed_payload": payload,
        **extra,
    })
    assert resp.status_code == 201, resp.text
    return resp.json()


def seed_region(db, code: str = "afrique_du_nord", name_fr: str = "Afrique du Nord", **fields) -> Region:
    """Helper — insert a region row directly."""
    region = Region(code=code, name_fr=name_fr, **fields)
    db.add(region)
    db.commit()
    db.refresh(region)
    return region


def seed_country(db, slug: str, region_id: str, name_fr: str = "Pays", **fields) -> Country:
    """Helper — insert a country row directly."""
    country = Country(slug=slug, name_fr=name_fr, region_id=region_id, **fields)
    db.add(country)
    db.commit()
    db.refresh(country)
    return country


def seed_ethnicity(db, slug: str, name_fr: str = "Ethnie", **fields) -> EthnicGroup:
    """Helper — insert an ethnic group row directly."""
    group = EthnicGroup(slug=slug, name_fr=name_fr, **fields)
    db.add(group)
    db.commit()
    db.refresh(group)
    return group
