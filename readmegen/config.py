"""Generation backend settings loaded from .readmegen.yml and the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .errors import ConfigError

CONFIG_FILENAME = ".readmegen.yml"

DEFAULT_BASE_URI = "https://api.groq.com/"
DEFAULT_CHAT_ENDPOINT = "openai/v1/chat/completions"
DEFAULT_MODEL = "llama3-8b-8192"
DEFAULT_MAX_TOKENS = 500
DEFAULT_REQUEST_TIMEOUT = 60.0

ENV_API_KEY_KEYS = ("READMEGEN_API_KEY", "GROQ_API_KEY")
ENV_BASE_URI_KEY = "READMEGEN_BASE_URI"
ENV_CHAT_ENDPOINT_KEY = "READMEGEN_CHAT_ENDPOINT"
ENV_MODEL_KEY = "READMEGEN_MODEL"
ENV_MAX_TOKENS_KEY = "READMEGEN_MAX_TOKENS"
ENV_REQUEST_TIMEOUT_KEY = "READMEGEN_REQUEST_TIMEOUT"


@dataclass(frozen=True)
class GenerationConfig:
    """Settings bundle handed to the generation client."""

    api_key: str
    base_uri: str = DEFAULT_BASE_URI
    chat_endpoint: str = DEFAULT_CHAT_ENDPOINT
    model: str = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    @property
    def endpoint_url(self) -> str:
        return f"{self.base_uri.rstrip('/')}/{self.chat_endpoint.lstrip('/')}"


def load_config(
    config_path: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> GenerationConfig:
    """Merge the optional config file with environment overrides.

    When ``config_path`` is omitted, ``.readmegen.yml`` in the working directory
    is used if present. An explicitly requested file must exist.
    """
    environ = os.environ if env is None else env

    if config_path is None:
        candidate = Path.cwd() / CONFIG_FILENAME
        file_data = _read_config(candidate) if candidate.is_file() else {}
    else:
        resolved = config_path.expanduser()
        if not resolved.is_file():
            raise ConfigError(f"Config file not found: {config_path}")
        file_data = _read_config(resolved)

    llm_data = _as_dict(file_data.get("llm"))

    api_key = _first_env_value(environ, ENV_API_KEY_KEYS) or _as_str(llm_data.get("api_key"))
    if not api_key:
        raise ConfigError(
            "No API key configured. Set READMEGEN_API_KEY or llm.api_key in .readmegen.yml."
        )

    base_uri = environ.get(ENV_BASE_URI_KEY) or _as_str(llm_data.get("base_uri")) or DEFAULT_BASE_URI
    chat_endpoint = (
        environ.get(ENV_CHAT_ENDPOINT_KEY)
        or _as_str(llm_data.get("chat_endpoint"))
        or DEFAULT_CHAT_ENDPOINT
    )
    model = environ.get(ENV_MODEL_KEY) or _as_str(llm_data.get("model")) or DEFAULT_MODEL

    max_tokens = _as_int(environ.get(ENV_MAX_TOKENS_KEY))
    if max_tokens is None:
        max_tokens = _as_int(llm_data.get("max_tokens"))
    request_timeout = _as_float(environ.get(ENV_REQUEST_TIMEOUT_KEY))
    if request_timeout is None:
        request_timeout = _as_float(llm_data.get("request_timeout"))

    if max_tokens is not None and max_tokens <= 0:
        raise ConfigError("max_tokens must be a positive integer")
    if request_timeout is not None and request_timeout <= 0:
        raise ConfigError("request_timeout must be positive")

    return GenerationConfig(
        api_key=api_key,
        base_uri=base_uri,
        chat_endpoint=chat_endpoint,
        model=model,
        max_tokens=max_tokens if max_tokens is not None else DEFAULT_MAX_TOKENS,
        request_timeout=request_timeout if request_timeout is not None else DEFAULT_REQUEST_TIMEOUT,
    )


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to read {path}: {exc}") from exc
    if not text.strip():
        return {}

    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"{path.name} must contain a mapping at the root")
    return loaded


def _first_env_value(environ: Mapping[str, str], keys: tuple[str, ...]) -> Optional[str]:
    for key in keys:
        value = environ.get(key)
        if value:
            return value
    return None


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise ConfigError(f"Expected an integer, got {value!r}") from None
    return None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            raise ConfigError(f"Expected a number, got {value!r}") from None
    return None


__all__ = ["CONFIG_FILENAME", "GenerationConfig", "load_config"]
