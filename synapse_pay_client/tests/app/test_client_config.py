# Unit tests for settings and the Client facade
import pytest
from unittest.mock import MagicMock

from synapse_pay_client.app.client import Client
from synapse_pay_client.app.config import AppSettings
from synapse_pay_client.app.service.exceptions import ValidationError
from synapse_pay_client.infrastructure.api.users import Users
from synapse_pay_client.infrastructure.http_client import HttpClient


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("SYNAPSE_CLIENT_ID", "env_client_id")
    monkeypatch.setenv("SYNAPSE_TIMEOUT", "12.5")

    settings = AppSettings(_env_file=None)

    assert settings.SYNAPSE_CLIENT_ID == "env_client_id"
    assert settings.SYNAPSE_TIMEOUT == 12.5
    assert settings.SYNAPSE_BASE_URL.startswith("https://")

def test_from_settings_builds_configured_client():
    settings = AppSettings(
        _env_file=None,
        SYNAPSE_CLIENT_ID="cid",
        SYNAPSE_CLIENT_SECRET="secret",
        SYNAPSE_FINGERPRINT="fp",
        SYNAPSE_IP_ADDRESS="10.0.0.2",
        SYNAPSE_BASE_URL="https://api.example.test/v3.1",
    )

    client = Client.from_settings(settings)

    assert isinstance(client.http_client, HttpClient)
    assert isinstance(client.users, Users)
    assert client.users.client is client.http_client
    assert client.http_client.get_headers()["X-SP-GATEWAY"] == "cid|secret"
    assert client.http_client.base_url == "https://api.example.test/v3.1"
    client.close()

def test_from_settings_with_missing_credentials_raises():
    settings = AppSettings(_env_file=None, SYNAPSE_CLIENT_ID=None, SYNAPSE_CLIENT_SECRET="secret", SYNAPSE_FINGERPRINT=None)

    with pytest.raises(ValidationError) as exc_info:
        Client.from_settings(settings)

    assert "SYNAPSE_CLIENT_ID" in str(exc_info.value)
    assert "SYNAPSE_FINGERPRINT" in str(exc_info.value)

def test_client_uses_injected_http_client():
    http_client = MagicMock(spec=HttpClient)
    http_client.base_url = "https://api.example.test"

    client = Client("cid", "secret", "fp", "127.0.0.1", http_client=http_client)

    assert client.http_client is http_client
    assert client.users.client is http_client
