"""Tests for configuration system."""

from pathlib import Path

import pytest

import apicli.config as config_pkg
from apicli.config import AppConfig, DEFAULT_ALIASES, default_config, load_config
from apicli.contracts.errors import ConfigError


class TestAppConfig:
    def test_default_config(self):
        config = AppConfig()
        assert config.config_dir == Path.home() / ".apicli"
        assert config.jq_executable == "jq"
        assert config.jq_max_buffer == 50 * 1024 * 1024
        assert config.request_timeout is None
        assert config.aliases == DEFAULT_ALIASES

    def test_aliases_are_symmetric(self):
        group = {"OPENAI_API_KEY", "OPENROUTER_API_KEY", "CEREBRAS_API_KEY"}
        assert set(DEFAULT_ALIASES["API_KEY"]) == group
        for name in group:
            assert DEFAULT_ALIASES[name] == ["API_KEY"]

    def test_default_aliases_copied(self):
        config = AppConfig()
        config.aliases["API_KEY"].append("X")
        assert "X" not in DEFAULT_ALIASES["API_KEY"]

    def test_jq_max_buffer_validation(self):
        with pytest.raises(ValueError, match="jq_max_buffer must be positive"):
            AppConfig(jq_max_buffer=0)

    def test_timeout_validation(self):
        with pytest.raises(ValueError, match="request_timeout must be positive"):
            AppConfig(request_timeout=-1)

    def test_config_dir_expanded(self):
        assert AppConfig(config_dir="~/x").config_dir == Path.home() / "x"


class TestConfigLoading:
    def test_load_default_config(self):
        config = default_config()
        assert isinstance(config, AppConfig)

    def test_load_without_file(self, temp_dir):
        config = load_config(environ={"APICLI_CONFIG_DIR": str(temp_dir)})
        assert config.config_dir == temp_dir

    def test_load_from_toml_file(self, temp_dir):
        path = temp_dir / "settings.toml"
        path.write_text('[settings]\njq_executable = "gojq"\nrequest_timeout = 10\n')
        config = load_config(path, environ={})
        assert config.jq_executable == "gojq"
        assert config.request_timeout == 10.0

    def test_settings_file_in_config_dir(self, temp_dir):
        (temp_dir / "settings.toml").write_text("[settings]\njq_max_buffer = 1024\n")
        config = load_config(environ={"APICLI_CONFIG_DIR": str(temp_dir)})
        assert config.jq_max_buffer == 1024

    def test_settings_env_var(self, temp_dir):
        path = temp_dir / "custom.toml"
        path.write_text('[settings]\njq_executable = "jaq"\n')
        config = load_config(environ={"APICLI_SETTINGS": str(path)})
        assert config.jq_executable == "jaq"

    def test_custom_aliases(self, temp_dir):
        path = temp_dir / "settings.toml"
        path.write_text('[settings.aliases]\nTOKEN = ["GH_TOKEN"]\n')
        config = load_config(path, environ={})
        assert config.aliases == {"TOKEN": ["GH_TOKEN"]}

    def test_env_overrides(self, temp_dir):
        environ = {
            "APICLI_JQ_EXECUTABLE": "gojq",
            "APICLI_REQUEST_TIMEOUT": "2.5",
            "APICLI_UNKNOWN": "ignored",
            "OTHER": "ignored",
        }
        config = load_config(environ=environ)
        assert config.jq_executable == "gojq"
        assert config.request_timeout == 2.5

    def test_invalid_env_override(self):
        with pytest.raises(ConfigError, match="Invalid environment override"):
            load_config(environ={"APICLI_JQ_MAX_BUFFER": "lots"})

    def test_load_nonexistent_file(self):
        with pytest.raises(ConfigError, match="Configuration file not found"):
            load_config("nonexistent.toml", environ={})

    def test_load_invalid_toml(self, temp_dir):
        bad_config = temp_dir / "bad.toml"
        bad_config.write_text("invalid toml content [[[")
        with pytest.raises(ConfigError, match="Failed to load config"):
            load_config(bad_config, environ={})


class TestPackageExports:
    def test_exports_are_bound_at_import(self):
        assert all(name in vars(config_pkg) for name in config_pkg.__all__)

    def test_constants_module_exposed(self):
        assert config_pkg.constants.DEFAULT_ALIASES is DEFAULT_ALIASES
