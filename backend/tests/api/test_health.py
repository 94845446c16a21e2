"""Tests for health check endpoints."""

import os
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from api import create_app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_health_check(self, client):
        """Health endpoint should return 200 with status."""
        response = client.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"

    def test_readiness_reports_seeded_users(self, client):
        """Readiness should count the five demo users by default."""
        response = client.get("/api/ready")
        assert response.status_code == 200
        assert response.json() == {"status": "ready", "users": 5}

    def test_readiness_with_empty_store(self):
        """With seeding disabled the store starts empty."""
        with patch.dict(os.environ, {"SEED_DEMO_USERS": "false"}):
            client = TestClient(create_app())
            response = client.get("/api/ready")
        assert response.json()["users"] == 0

    def test_health_response_structure(self, client):
        """Health response should have correct structure."""
        data = client.get("/api/health").json()
        assert set(data.keys()) == {"status", "version"}
