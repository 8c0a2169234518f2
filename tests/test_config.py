"""Tests for readmegen.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from readmegen.config import (
    DEFAULT_BASE_URI,
    DEFAULT_CHAT_ENDPOINT,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
    GenerationConfig,
    load_config,
)
from readmegen.errors import ConfigError


def test_load_config_uses_defaults_with_env_key(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    config = load_config(env={"READMEGEN_API_KEY": "env-key"})

    assert config == GenerationConfig(api_key="env-key")
    assert config.base_uri == DEFAULT_BASE_URI
    assert config.chat_endpoint == DEFAULT_CHAT_ENDPOINT
    assert config.model == DEFAULT_MODEL
    assert config.max_tokens == DEFAULT_MAX_TOKENS
    assert config.endpoint_url == "https://api.groq.com/openai/v1/chat/completions"


def test_load_config_requires_api_key(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    with pytest.raises(ConfigError, match="API key"):
        load_config(env={})


def test_load_config_reads_file_and_env_overrides(tmp_path: Path) -> None:
    config_file = tmp_path / "settings.yml"
    config_file.write_text(
        """
llm:
  api_key: "file-key"
  base_uri: "http://localhost:8080"
  chat_endpoint: "/v1/chat/completions"
  model: "file-model"
  max_tokens: 900
  request_timeout: 30
""",
        encoding="utf-8",
    )

    config = load_config(config_file, env={"READMEGEN_MODEL": "env-model"})

    assert config.api_key == "file-key"
    assert config.model == "env-model"
    assert config.max_tokens == 900
    assert config.request_timeout == 30.0
    assert config.endpoint_url == "http://localhost:8080/v1/chat/completions"


def test_load_config_picks_up_working_directory_file(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / ".readmegen.yml").write_text("llm:\n  api_key: cwd-key\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    config = load_config(env={"GROQ_API_KEY": ""})

    assert config.api_key == "cwd-key"


def test_load_config_prefers_readmegen_key_over_groq_key(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    config = load_config(env={"READMEGEN_API_KEY": "primary", "GROQ_API_KEY": "secondary"})

    assert config.api_key == "primary"


def test_load_config_rejects_missing_explicit_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "absent.yml", env={"READMEGEN_API_KEY": "k"})


def test_load_config_rejects_malformed_yaml(tmp_path: Path) -> None:
    config_file = tmp_path / "bad.yml"
    config_file.write_text("llm: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Failed to parse"):
        load_config(config_file, env={"READMEGEN_API_KEY": "k"})


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    config_file = tmp_path / "list.yml"
    config_file.write_text("- one\n- two\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="mapping"):
        load_config(config_file, env={"READMEGEN_API_KEY": "k"})


def test_load_config_rejects_invalid_token_budget(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    with pytest.raises(ConfigError):
        load_config(env={"READMEGEN_API_KEY": "k", "READMEGEN_MAX_TOKENS": "lots"})
    with pytest.raises(ConfigError):
        load_config(env={"READMEGEN_API_KEY": "k", "READMEGEN_MAX_TOKENS": "0"})
