"""Tests for els_interpreter/config.py — environment-based configuration loading."""

import importlib
from unittest.mock import patch

import pytest
from pydantic import ValidationError

import els_interpreter.config as config_module


def _reload_config():
    """Reload the config module with dotenv patched out so only os.environ counts."""
    with patch("dotenv.load_dotenv", return_value=None):
        return importlib.reload(config_module)


@pytest.fixture(autouse=True)
def _restore_config():
    yield
    _reload_config()


@pytest.fixture
def clean_env(monkeypatch):
    for name in ["ELASTICSEARCH_HOST", "ELASTICSEARCH_PORT",
                 "ELASTICSEARCH_CLUSTER_NAME", "ELASTICSEARCH_TIMEOUT", "ELS_LOG_DIR"]:
        monkeypatch.delenv(name, raising=False)


class TestDefaults:

    def test_defaults(self, clean_env):
        config = _reload_config()
        assert config.ELASTICSEARCH_HOST == "localhost"
        assert config.ELASTICSEARCH_PORT == 9200
        assert config.ELASTICSEARCH_CLUSTER_NAME == "elasticsearch"
        assert config.ELASTICSEARCH_TIMEOUT == 30.0

    def test_default_settings(self, clean_env):
        settings = _reload_config().load_settings()
        assert settings.base_url == "http://localhost:9200"
        assert settings.cluster_name == "elasticsearch"


class TestEnvironment:

    def test_env_values(self, mock_env_vars):
        config = _reload_config()
        settings = config.load_settings()
        assert settings.host == "es.test.local"
        assert settings.port == 9201
        assert settings.cluster_name == "test-cluster"
        assert settings.timeout == 5.0

    def test_invalid_port_fails_at_import(self, monkeypatch):
        monkeypatch.setenv("ELASTICSEARCH_PORT", "not-a-port")
        with pytest.raises(ValueError):
            _reload_config()
        monkeypatch.delenv("ELASTICSEARCH_PORT")


class TestLoadSettings:

    def test_overrides_win(self, clean_env):
        settings = _reload_config().load_settings(host="es1", port=9300, cluster_name="prod")
        assert settings.base_url == "http://es1:9300"
        assert settings.cluster_name == "prod"

    def test_none_overrides_ignored(self, clean_env):
        settings = _reload_config().load_settings(host=None, port=None, timeout=None)
        assert settings.host == "localhost"
        assert settings.port == 9200

    @pytest.mark.parametrize("field, value", [("port", 0), ("port", 70000), ("timeout", 0)])
    def test_out_of_range_rejected(self, clean_env, field, value):
        with pytest.raises(ValidationError):
            _reload_config().load_settings(**{field: value})
