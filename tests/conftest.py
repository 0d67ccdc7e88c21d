"""Shared fixtures: an isolated SQLite database and a fixed evaluation date."""

from __future__ import annotations

from datetime import date

import pytest

from vhsa.config.settings import get_settings

# Program year 2025; the age cutoff is 2025-09-01
AS_OF = date(2025, 10, 15)


@pytest.fixture
def as_of() -> date:
    return AS_OF


@pytest.fixture
def client(tmp_path, monkeypatch):
    """TestClient bound to a fresh database file under tmp_path."""
    from fastapi.testclient import TestClient

    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'vhsa.db'}")
    monkeypatch.delenv("EXTERNAL_DATABASE_URL", raising=False)
    monkeypatch.setenv("APP_ENV", "test")
    get_settings.cache_clear()

    from vhsa.api.dependencies import get_as_of
    from vhsa.main import app

    app.dependency_overrides[get_as_of] = lambda: AS_OF
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    get_settings.cache_clear()


@pytest.fixture
def add_student(client):
    """Create a student through the quick-add endpoint and return its JSON."""
    def _add(**overrides):
        payload = {
            "firstName": "Ada",
            "lastName": "Lovelace",
            "grade": "Kindergarten",
            "gender": "female",
            "school": "Lincoln Elementary (ln01)",
            "teacher": "Ms. Byron",
            "dob": "2019-05-10",
            "status": "new",
        }
        payload.update(overrides)
        r = client.post("/api/students/quick-add", json=payload)
        assert r.status_code == 201, r.text
        return r.json()["student"]
    return _add
