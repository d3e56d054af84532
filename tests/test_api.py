import pytest
from fastapi.testclient import TestClient

import config
import commands
from app import app
from config import Config, get_settings
from limiter import limiter


@pytest.fixture
def client():
    """
    Test client wrapped in a context manager so the lifespan (config validation
    and state seeding) runs for every test.
    """
    limiter.reset()
    with TestClient(app) as test_client:
        yield test_client


def test_health_check(client: TestClient):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "ID Obfuscator"
    assert data["profile"] == "general"
    assert data["prefix_enabled"] is True


def test_encrypt_decrypt_roundtrip(client: TestClient):
    response = client.post("/api/v1/encrypt", json={"value": "42"})
    assert response.status_code == 200
    token = response.json()["result"]
    assert len(token) >= 12

    response = client.post("/api/v1/decrypt", json={"value": token})
    assert response.status_code == 200
    assert response.json() == {"result": "42", "profile": "general"}


def test_encrypt_empty(client: TestClient):
    response = client.post("/api/v1/encrypt", json={"value": ""})
    assert response.status_code == 400
    assert response.json()["error"] == "EmptyInput"


def test_encrypt_non_numeric(client: TestClient):
    response = client.post("/api/v1/encrypt", json={"value": "12ab"})
    assert response.status_code == 400
    assert response.json()["error"] == "InvalidNumericInput"


def test_decrypt_bare_number(client: TestClient):
    response = client.post("/api/v1/decrypt", json={"value": "12345"})
    assert response.status_code == 400
    assert response.json()["error"] == "InvalidCiphertext"


def test_malformed_body(client: TestClient):
    response = client.post("/api/v1/encrypt", json={"number": "42"})
    assert response.status_code == 422


def test_profile_switch(client: TestClient):
    response = client.get("/api/v1/profile")
    assert response.status_code == 200
    assert response.json() == {"name": "general", "available": ["general", "huawei"]}

    response = client.put("/api/v1/profile", json={"name": "huawei"})
    assert response.status_code == 200
    assert response.json()["name"] == "huawei"

    token = client.post("/api/v1/encrypt", json={"value": "42"}).json()["result"]
    assert token.startswith("haot")


def test_profile_switch_unknown(client: TestClient):
    response = client.put("/api/v1/profile", json={"name": "apple"})
    assert response.status_code == 404
    assert response.json()["error"] == "ConfigurationError"
    assert commands.get_profile() == "general"


def test_prefix_toggle(client: TestClient):
    client.put("/api/v1/profile", json={"name": "huawei"})
    response = client.put("/api/v1/prefix", json={"enabled": False})
    assert response.status_code == 200
    assert response.json() == {"enabled": False}
    assert client.get("/api/v1/prefix").json() == {"enabled": False}

    token = client.post("/api/v1/encrypt", json={"value": "42"}).json()["result"]
    assert not token.startswith("haot")

    response = client.post("/api/v1/decrypt", json={"value": "abcdefghij"})
    assert response.status_code == 400
    assert response.json()["error"] == "LengthTooShort"


def test_batch_roundtrip(client: TestClient):
    response = client.post("/api/v1/batch/encrypt", json={"value": "1\n2\n3"})
    assert response.status_code == 200
    encrypted = response.json()["result"]
    assert encrypted.count("\n") == 2

    response = client.post("/api/v1/batch/decrypt", json={"value": encrypted})
    assert response.status_code == 200
    assert response.json()["result"] == "1\n2\n3"


def test_batch_error_is_first_item_error(client: TestClient):
    response = client.post("/api/v1/batch/encrypt", json={"value": "1,x,"})
    assert response.status_code == 400
    assert response.json()["error"] == "InvalidNumericInput"
    assert "'x'" in response.json()["detail"]


def test_text_operations(client: TestClient):
    response = client.post("/api/v1/text/add-quotes", json={"value": "1,2"})
    assert response.status_code == 200
    assert response.json()["result"] == "'1','2'"

    response = client.post("/api/v1/text/convert", json={"value": "1,2"})
    assert response.json()["result"] == "1\n2"

    response = client.post("/api/v1/text/shout", json={"value": "1,2"})
    assert response.status_code == 404


def test_encrypt_very_long_numeral(client: TestClient):
    numeral = "9" * 5000
    response = client.post("/api/v1/encrypt", json={"value": numeral})
    assert response.status_code == 200
    token = response.json()["result"]
    assert token == "x" + numeral

    response = client.post("/api/v1/decrypt", json={"value": token})
    assert response.json()["result"] == numeral


def test_health_uses_settings_dependency(client: TestClient):
    class StagingConfig(Config):
        APP_TITLE = "ID Obfuscator (staging)"

    app.dependency_overrides[get_settings] = StagingConfig
    try:
        response = client.get("/health")
    finally:
        app.dependency_overrides.clear()
    assert response.json()["service"] == "ID Obfuscator (staging)"


def test_get_settings_returns_process_config():
    assert get_settings() is config.config
