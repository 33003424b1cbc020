from __future__ import annotations

from datetime import datetime

import pytest

from payroll_system.main import create_app


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 1, 31, 9, 0, 0)


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "employees.json"


@pytest.fixture
def app(monkeypatch, data_file):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app({"TESTING": True, "DATA_FILE": str(data_file)})
    yield app


@pytest.fixture
def client(app):
    return app.test_client()
