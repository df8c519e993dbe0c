import os

# settings are read at import time
os.environ["ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_DEMO"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from sitetrack.core.deps import get_db
from sitetrack.db.base import Base
from sitetrack.main import app
import sitetrack.db.models  # noqa: F401


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def client(session_factory):
    def _get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_db
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_project(client):
    def _make(**fields):
        body = {"name": "Site A", **fields}
        r = client.post("/api/projects", json=body)
        assert r.status_code == 201, r.text
        return r.json()
    return _make


@pytest.fixture
def make_work_item(client):
    def _make(project_id, **fields):
        body = {"name": "Excavation", "unit": "m3", "designQuantity": 100, "unitPrice": 50, **fields}
        r = client.post(f"/api/projects/{project_id}/work-items", json=body)
        assert r.status_code == 201, r.text
        return r.json()
    return _make
