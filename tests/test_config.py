"""
Tests for settings and the facade's use of them.
"""

import json
import logging

from createsend.config import Settings, settings
from createsend.connectors.client import CreatesendClient
from createsend.core.logging import JSONFormatter


class TestSettings:
    def test_default_values(self) -> None:
        # Environment variables may override runtime values; check declared defaults.
        fields = Settings.model_fields
        assert fields["createsend_base_url"].default == "https://api.createsend.com/api/v3.1/"
        assert fields["http_timeout_seconds"].default == 30.0
        assert fields["createsend_access_token"].default is None

    def test_env_overrides(self, monkeypatch) -> None:
        monkeypatch.setenv("CREATESEND_API_KEY", "from-env")
        monkeypatch.setenv("CREATESEND_BASE_URL", "https://eu.example.test/api/v3.3")

        config = Settings()

        assert config.createsend_api_key == "from-env"
        assert config.effective_base_url == "https://eu.example.test/api/v3.3/"

    def test_explicit_arguments_win(self) -> None:
        client = CreatesendClient(api_key="explicit", base_url="https://x.test/api", timeout=5)

        assert client.api_key == "explicit"
        assert client.base_url == "https://x.test/api/"
        assert client.timeout == 5

    def test_explicit_api_key_beats_settings_token(self, monkeypatch) -> None:
        monkeypatch.setattr(settings, "createsend_access_token", "env-token")

        explicit = CreatesendClient(api_key="explicit", base_url="https://x.test/api")
        from_settings = CreatesendClient(base_url="https://x.test/api")

        assert explicit.access_token is None
        assert from_settings.access_token == "env-token"


class TestJSONFormatter:
    def test_request_fields_are_included(self) -> None:
        record = logging.LogRecord(
            "createsend.client", logging.DEBUG, __file__, 1, "GET clients.json -> 200", None, None
        )
        record.method = "GET"
        record.status_code = 200

        entry = json.loads(JSONFormatter().format(record))

        assert entry["level"] == "DEBUG"
        assert entry["logger"] == "createsend.client"
        assert entry["message"] == "GET clients.json -> 200"
        assert entry["method"] == "GET"
        assert entry["status_code"] == 200
        assert "path" not in entry
