"""
tests/test_config.py

Tests for text_analyzer/config.py: singleton behaviour, YAML loading,
`${ENV_VAR}` substitution, defaults and Pydantic validation.
"""

from unittest.mock import patch

import pytest
import yaml
from pydantic import ValidationError

from text_analyzer.config import DEFAULT_PROMPTS_FILE, Config, ConfigModel, expand_env_vars


@pytest.fixture
def fresh_config(tmp_path):
    """
    Yields a callable that loads a Config from the given YAML text.

    The singleton is cleared before and after so other tests keep the
    module-level config untouched.
    """
    saved_instance = Config._instance

    def load(yaml_text=None):
        Config._instance = None
        config_file = tmp_path / "config.yaml"
        if yaml_text is not None:
            config_file.write_text(yaml_text, encoding="utf-8")
        with patch.object(Config, "config_path", return_value=config_file):
            return Config()

    yield load
    Config._instance = saved_instance


def test_singleton_returns_same_instance(fresh_config):
    first = fresh_config("openai:\n  model_name: gpt-4o-mini\n")
    assert Config() is first


def test_missing_file_yields_defaults(fresh_config):
    loaded = fresh_config().config

    assert loaded["openai"]["model_name"] == "gpt-3.5-turbo"
    assert loaded["openai"]["max_tokens"] == 1000
    assert loaded["openai"]["temperature"] == 0.3
    assert loaded["llm"]["provider"] == "openai"
    assert loaded["api"]["environment"] == ""
    assert loaded["paths"]["prompts_file"] == DEFAULT_PROMPTS_FILE


def test_env_placeholders_are_expanded(fresh_config, monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test-123")
    monkeypatch.setenv("APP_ENV", "development")

    loaded = fresh_config(
        "openai:\n  api_key: ${OPENAI_API_KEY}\napi:\n  environment: ${APP_ENV}\n"
    ).config

    assert loaded["openai"]["api_key"] == "sk-test-123"
    assert loaded["api"]["environment"] == "development"


def test_unset_env_placeholder_becomes_empty(fresh_config, monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)

    loaded = fresh_config("openai:\n  api_key: ${OPENAI_API_KEY}\n").config

    assert loaded["openai"]["api_key"] == ""


def test_empty_section_uses_defaults(fresh_config):
    loaded = fresh_config("logging:\npaths:\n").config
    assert loaded["logging"]["level"] == "DEBUG"
    assert loaded["paths"]["logs_dir"] == "./logs"


def test_invalid_yaml_raises(fresh_config):
    with pytest.raises(yaml.YAMLError):
        fresh_config("openai: [unclosed\n")


def test_invalid_values_fail_validation(fresh_config):
    with pytest.raises(ValidationError):
        fresh_config("openai:\n  max_tokens: -5\n")


def test_expand_env_vars_walks_nested_structures(monkeypatch):
    monkeypatch.setenv("TA_TEST_VALUE", "x")
    data = {"a": ["${TA_TEST_VALUE}", 1], "b": {"c": "pre-${TA_TEST_VALUE}"}}

    assert expand_env_vars(data) == {"a": ["x", 1], "b": {"c": "pre-x"}}


def test_config_model_dump_contains_all_sections():
    assert set(ConfigModel().model_dump()) == {"openai", "llm", "api", "paths", "logging"}
