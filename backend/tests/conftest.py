"""Pytest fixtures - per-test SQLite database for fast, isolated tests."""
import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from churchbook.database import Base, get_db
from churchbook.main import app
from churchbook.models.collections import Collection
from churchbook.services.document_store import DocumentStore

# Import all models so they register with Base.metadata
from churchbook.models.document import Document

SQLITE_URL = "sqlite:///./test.db"

# Every API test starts with one staff account; helpers act as it when adding users.
CHURCH_ADMIN = {"id": "church-admin", "name": "Church Admin", "email": "admin@example.org", "role": "admin"}


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
def session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture(scope="function")
def db(session_factory):
    """Yield a database session, closed after the test."""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def store(db):
    """A DocumentStore on the test session (call db.expire_all() to see API writes)."""
    return DocumentStore(db)


@pytest.fixture(scope="function")
def client(session_factory):
    """FastAPI TestClient with the database dependency overridden to use SQLite."""

    def _override_get_db():
        session = session_factory()
        try:
            yield session
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    seed = session_factory()
    seed.add(Document(
        collection=Collection.users.value,
        doc_id=CHURCH_ADMIN["id"],
        data={k: v for k, v in CHURCH_ADMIN.items() if k != "id"},
    ))
    seed.commit()
    seed.close()

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Helpers: create documents via the API, return the response JSON
# ---------------------------------------------------------------------------
def as_user(user: dict) -> dict:
    """Request headers identifying `user` as the actor."""
    return {"X-User-Id": user["id"]}


def create_test_user(client: TestClient, name: str = "Test User", role: str = "member") -> dict:
    """Helper - POST /api/users as the seeded admin and return response JSON."""
    resp = client.post("/api/users/", headers=as_user(CHURCH_ADMIN), json={
        "name": name,
        "email": f"{name.lower().replace(' ', '.')}@example.org",
        "phone": "09171234567",
        "address": "Purok 3, Poblacion",
        "role": role,
    })
    assert resp.status_code == 201, resp.text
    return resp.json()


def create_test_schedule(client: TestClient, actor: dict, title: str = "Sunday Fellowship", **fields) -> dict:
    """Helper - POST /api/schedules as `actor` and return response JSON."""
    body = {
        "title": title,
        "description": "Weekly fellowship",
        "location": "Main Hall",
        "start_time": "2026-11-01T01:00:00+00:00",
        "end_time": "2026-11-01T03:00:00+00:00",
    }
    body.update(fields)
    resp = client.post("/api/schedules/", json=body, headers=as_user(actor))
    assert resp.status_code == 201, resp.text
    return resp.json()


def booking_payload(schedule_id: str, **overrides) -> dict:
    body = {
        "schedule_id": schedule_id,
        "member_name": "Maria Santos",
        "member_email": "maria@example.org",
        "member_contact": "09171234567",
        "member_address": "Rizal St.",
        "member_purok": "Purok 5",
        "church_name": "Grace Community Church",
        "number_of_members": 12,
    }
    body.update(overrides)
    return body
