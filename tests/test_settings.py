"""Unit tests for the settings module."""

from unittest.mock import patch

import pytest

from asana_client import AsanaClient, AsanaSettings, create_client


class TestAsanaSettings:
    def test_reads_environment(self) -> None:
        settings = AsanaSettings()
        assert settings.api_url == "https://asana.test/api/1.0"
        assert settings.api_key == "test-api-key"
        assert settings.timeout is None

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("ASANA_API_URL")
        monkeypatch.delenv("ASANA_API_KEY")

        settings = AsanaSettings()

        assert settings.api_url == "https://app.asana.com/api/1.0"
        assert settings.api_key == ""

    def test_timeout_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ASANA_TIMEOUT", "12.5")
        assert AsanaSettings().timeout == 12.5


class TestCreateClient:
    def test_from_explicit_settings(self) -> None:
        settings = AsanaSettings(api_url="https://example.com/api", api_key="abc123", timeout=3)

        client = create_client(settings)

        assert isinstance(client, AsanaClient)
        assert client.api_url == "https://example.com/api"
        assert client.base64_key == "YWJjMTIzOg=="
        assert client.timeout == 3

    def test_from_environment(self) -> None:
        client = create_client()
        assert client.api_url == "https://asana.test/api/1.0"

    def test_warns_without_api_key(self, caplog: pytest.LogCaptureFixture) -> None:
        with patch("asana_client.settings.AsanaClient") as client_cls:
            client = create_client(AsanaSettings(api_key=""))

        assert client is client_cls.return_value
        assert "No Asana API key configured" in caplog.text
