"""
Shared fixtures for the users API tests.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.config import load_settings
from app.main import create_app


@pytest.fixture
def settings():
    return load_settings(environ={}, log_level="DEBUG", log_format="json")


@pytest.fixture
def client(settings) -> TestClient:
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def john() -> dict:
    return {"id": 1, "name": "John Doe", "email": "john@example.com"}
