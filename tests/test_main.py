from fastapi.testclient import TestClient

from land_api.api import deps
from land_api.core.config import settings
from land_api.core.errors import ConfigurationError
from land_api.main import app

from .conftest import CONTRACT_ADDRESS


def test_test_endpoint(client):
    response = client.get("/test")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_health_before_and_after_initialization(client, accessor):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "degraded", "contract": "not initialized"}

    accessor.initialize()
    response = client.get("/health")
    assert response.json() == {
        "status": "healthy",
        "contract": "connected",
        "contractAddress": CONTRACT_ADDRESS,
    }


def test_startup_survives_initialization_failure(monkeypatch, caplog):
    def broken_factory(config):
        raise ConfigurationError("CONTRACT_ADDRESS is not set")

    monkeypatch.setattr(settings, "EAGER_INIT", True)
    monkeypatch.setattr(deps.contract_accessor, "factory", broken_factory)

    with TestClient(app) as c:
        assert c.get("/test").status_code == 200

    assert not deps.contract_accessor.is_initialized
    assert "Contract not initialized at startup: CONTRACT_ADDRESS is not set" in caplog.text


def test_startup_initializes_contract_when_configured(monkeypatch, fake_contract):
    monkeypatch.setattr(settings, "EAGER_INIT", True)
    monkeypatch.setattr(deps.contract_accessor, "factory", lambda config: fake_contract)

    with TestClient(app) as c:
        assert deps.contract_accessor.get() is fake_contract
        assert c.get("/health").json()["status"] == "healthy"

    # Shutdown drops the handle
    assert not deps.contract_accessor.is_initialized
