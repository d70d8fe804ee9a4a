"""
Tests for the HOOKFORGE REST API
"""

import pytest
from fastapi.testclient import TestClient

from hookforge import print_hook
from hookforge.server.app import app


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_defaults(client):
    options = client.get("/api/defaults").json()["options"]
    assert options["name"] == "MyHook"
    assert options["bumping_fee_hook"] is False
    assert options["info"]["license"] == "MIT"


def test_generate_matches_library_output(client):
    payload = {"name": "GatedFeeHook", "bumping_fee_hook": True, "whitelist_hook": True}
    data = client.post("/api/generate", json=payload).json()

    assert data["success"] is True
    assert data["error"] is None
    assert data["contract"] == "GatedFeeHook"
    assert data["parents"] == ["BaseHook", "BumpingFee", "Whitelist"]
    assert data["source"] == print_hook(payload)
    assert data["functions"][0] == "getHookPermissions"


def test_generate_defaults(client):
    data = client.post("/api/generate", json={}).json()
    assert data["success"] is True
    assert data["parents"] == ["BaseHook"]
    assert not any(data["permissions"].values())


def test_generate_failure_has_no_source(client):
    data = client.post("/api/generate", json={"votes": True, "permit": False}).json()
    assert data["success"] is False
    assert data["source"] is None
    assert "ERC20Permit" in data["error"]


def test_permissions(client):
    data = client.post("/api/permissions", json={"whitelist_hook": True}).json()
    assert data["success"] is True
    enabled = [name for name, value in data["permissions"].items() if value]
    assert enabled == ["beforeInitialize", "beforeSwap"]


def test_generate_accepts_form_camel_case(client):
    payload = {
        "name": "FormHook",
        "whitelistHook": True,
        "bumpingFeeHook": True,
        "info": {"securityContact": "security@example.com"},
    }
    data = client.post("/api/generate", json=payload).json()

    assert data["success"] is True
    assert data["parents"] == ["BaseHook", "BumpingFee", "Whitelist"]
    assert "/// @custom:security-contact security@example.com" in data["source"]
    assert data["source"] == print_hook(payload)


def test_generate_rejects_unknown_option(client):
    data = client.post("/api/generate", json={"whitelistHok": True}).json()
    assert data["success"] is False
    assert data["source"] is None
    assert "whitelistHok" in data["error"]


def test_generate_rejects_unknown_info_option(client):
    data = client.post("/api/generate", json={"info": {"licence": "MIT"}}).json()
    assert data["success"] is False
    assert "licence" in data["error"]


def test_permissions_accepts_form_camel_case(client):
    data = client.post("/api/permissions", json={"bumpingFeeHook": True}).json()
    assert data["success"] is True
    enabled = [name for name, value in data["permissions"].items() if value]
    assert enabled == ["afterInitialize", "beforeSwap", "afterSwap"]
