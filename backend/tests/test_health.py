from unittest.mock import MagicMock

from sqlalchemy import inspect
from sqlalchemy.exc import OperationalError

from sitetrack.core.deps import get_db
from sitetrack.main import app


def test_health_ok(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "OK"
    assert body["database"] == "Connected"
    assert body["timestamp"].endswith("Z")


def test_health_reports_database_failure(client):
    session = MagicMock()
    session.execute.side_effect = OperationalError("SELECT 1", {}, Exception("unable to open database file"))

    def _failing_db():
        yield session

    app.dependency_overrides[get_db] = _failing_db
    r = client.get("/api/health")
    assert r.status_code == 500
    body = r.json()
    assert body["status"] == "ERROR"
    assert body["error"] == "Database connection failed"


def test_schema_has_all_tables(engine):
    tables = set(inspect(engine).get_table_names())
    assert {"projects", "work_items", "materials", "equipment", "workers"} <= tables
