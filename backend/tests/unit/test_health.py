from __future__ import annotations

from hr_dashboard.core.config import settings
from hr_dashboard.services.employee_service import employee_service


def test_health_returns_status_and_services(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] in ("healthy", "degraded")
    assert "version" in data
    assert "services" in data
    assert "employee_source" in data["services"]
    assert "auth" in data["services"]


def test_health_with_loaded_employees_is_healthy(client):
    response = client.get("/api/v1/health")
    data = response.json()
    assert data["status"] == "healthy"
    assert data["services"]["employee_source"] == "ok"
    assert data["services"]["auth"] == "ok"
    assert data["employees_loaded"] == 6


def test_health_before_first_fetch_is_healthy(client):
    employee_service.store.clear()
    response = client.get("/api/v1/health")
    data = response.json()
    assert data["status"] == "healthy"
    assert data["services"]["employee_source"] == "not_loaded"


def test_health_without_auth_secret_is_degraded(client):
    settings.AUTH_SECRET_KEY = ""
    response = client.get("/api/v1/health")
    data = response.json()
    assert data["status"] == "degraded"
    assert data["services"]["auth"] == "not_configured"


def test_readiness_probe(client):
    response = client.get("/api/v1/health/ready")
    assert response.status_code == 200
    data = response.json()
    assert data["ready"] is True


def test_health_protected_requires_auth(client):
    response = client.get("/api/v1/health/protected")
    assert response.status_code == 401


def test_health_protected_with_auth(authenticated_client):
    response = authenticated_client.get("/api/v1/health/protected")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert "user" in data
