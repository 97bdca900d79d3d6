# tests/api/conftest.py
"""
Shared fixtures for API tests.
Uses FastAPI's TestClient with a dependency override so every request hits a
DecisionService scanning the fake process table.
"""

import pytest
from fastapi.testclient import TestClient

from decisionmaker.api.app import create_app
from decisionmaker.api.dependencies import get_decision_service
from decisionmaker.core.service import DecisionService


@pytest.fixture
def service(proc_tree):
    return DecisionService(proc_root=proc_tree.path, machine_id="test-machine")


@pytest.fixture
def client(service):
    app = create_app()
    app.dependency_overrides[get_decision_service] = lambda: service
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def broken_client(tmp_path):
    """Client whose service points at a process table that does not exist."""
    app = create_app()
    broken = DecisionService(proc_root=str(tmp_path / "missing"), machine_id="test-machine")
    app.dependency_overrides[get_decision_service] = lambda: broken
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
