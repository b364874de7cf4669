import logging

import pytest
from pydantic import ValidationError

from syno_filestation.client import SynologyClient
from syno_filestation.config import SDKConfig, get_logger, resolve_level
from syno_filestation.core.config import Settings, get_settings
from syno_filestation.exceptions import ConfigurationError


class TestSettings:
    def test_default_values(self):
        """Test default configuration values"""
        settings = Settings(_env_file=None)

        assert settings.base_url == "http://localhost:5000"
        assert settings.api_path == "/webapi"
        assert settings.sid is None
        assert settings.timeout_seconds == 30
        assert settings.verify_ssl is True
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.api_base_url == "http://localhost:5000/webapi"

    def test_custom_values(self):
        """Test settings with custom values"""
        settings = Settings(
            _env_file=None,
            base_url="https://nas.local:5001/",
            api_path="webapi/",
            sid="abc",
            timeout_seconds=5,
            verify_ssl=False,
        )

        assert settings.base_url == "https://nas.local:5001"
        assert settings.api_path == "/webapi"
        assert settings.api_base_url == "https://nas.local:5001/webapi"
        assert settings.sid == "abc"
        assert settings.timeout_seconds == 5
        assert settings.verify_ssl is False

    def test_environment_variables(self, monkeypatch):
        """Test SYNOLOGY_ prefixed environment variables"""
        monkeypatch.setenv("SYNOLOGY_BASE_URL", "https://diskstation:5001")
        monkeypatch.setenv("SYNOLOGY_SID", "env-sid")
        monkeypatch.setenv("SYNOLOGY_TIMEOUT_SECONDS", "12.5")
        monkeypatch.setenv("SYNOLOGY_VERIFY_SSL", "false")
        monkeypatch.setenv("SYNOLOGY_DEBUG", "true")

        settings = get_settings()

        assert settings.base_url == "https://diskstation:5001"
        assert settings.sid == "env-sid"
        assert settings.timeout_seconds == 12.5
        assert settings.verify_ssl is False
        assert settings.debug is True

    def test_invalid_base_url(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, base_url="ftp://nas")

    def test_empty_api_path(self):
        settings = Settings(_env_file=None, api_path="")

        assert settings.api_base_url == "http://localhost:5000"


class TestSDKConfig:
    def test_defaults(self):
        config = SDKConfig()

        assert config.debug is False
        assert config.log_level == "INFO"

    def test_setup_logging_sets_level(self):
        SDKConfig(log_level="warning").setup_logging()

        assert logging.getLogger("syno_filestation").level == logging.WARNING

    def test_debug_overrides_level(self):
        SDKConfig(debug=True, log_level="ERROR").setup_logging()

        assert logging.getLogger("syno_filestation").level == logging.DEBUG

    def test_single_handler(self):
        SDKConfig().setup_logging()
        SDKConfig().setup_logging()

        assert len(logging.getLogger("syno_filestation").handlers) == 1

    def test_numeric_level(self):
        logger = SDKConfig(log_level=logging.ERROR).setup_logging()

        assert logger.name == "syno_filestation"
        assert logger.level == logging.ERROR

    @pytest.mark.parametrize(
        "log_level,expected",
        [("debug", logging.DEBUG), (" Warning ", logging.WARNING), (15, 15)],
    )
    def test_resolve_level(self, log_level, expected):
        assert resolve_level(log_level) == expected

    @pytest.mark.parametrize("log_level", ["LOUD", "", True])
    def test_unknown_level_rejected(self, log_level):
        with pytest.raises(ConfigurationError):
            SDKConfig(log_level=log_level).setup_logging()

    def test_client_rejects_unknown_level(self, session, mock_transport):
        with pytest.raises(ConfigurationError):
            SynologyClient(session, mock_transport, log_level="LOUD")

    def test_level_change_logged_once(self, caplog):
        SDKConfig(log_level="INFO").setup_logging()
        caplog.clear()

        SDKConfig(debug=True).setup_logging()
        SDKConfig(debug=True).setup_logging()

        messages = [r.getMessage() for r in caplog.records]
        assert messages.count("Logging level set to DEBUG") == 1

    def test_get_logger_namespace(self):
        assert get_logger("client").name == "syno_filestation.client"
