"""Hub settings loaded from the environment.

Defaults target a local Ollama server through its OpenAI-compatible API.

Examples:
    # OpenAI
    HUB_LLM_BASE_URL=https://api.openai.com/v1 HUB_LLM_MODEL=gpt-4o-mini HUB_LLM_API_KEY=sk-xxx

    # Gemini (OpenAI-compatible endpoint)
    HUB_LLM_BASE_URL=https://generativelanguage.googleapis.com/v1beta/openai
    HUB_LLM_MODEL=gemini-2.0-flash
    HUB_LLM_API_KEY=<google api key>
"""

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_LLM_BASE_URL = "http://localhost:11434/v1"
DEFAULT_LLM_MODEL = "llama3.2"
DEFAULT_LLM_API_KEY = "ollama"

DEFAULT_TEMPERATURE = 0.4
DEFAULT_MAX_TOKENS = 2048

# Transport timeout in seconds; no timeout is layered on top of it
DEFAULT_TIMEOUT = 120.0

# One attempt per user message
DEFAULT_MAX_RETRIES = 1

# Unmentioned input goes here; empty string disables the fallback
DEFAULT_AGENT_TAG = "@director"

DEFAULT_SERVER_PORT = 8001

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _get_bool(env: Mapping[str, str], key: str, default: bool) -> bool:
    value = env.get(key)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in _TRUE_VALUES


def _get_float(env: Mapping[str, str], key: str, default: float) -> float:
    value = env.get(key)
    if value is None or value.strip() == "":
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{key} must be a number, got {value!r}") from None


def _get_int(env: Mapping[str, str], key: str, default: int) -> int:
    value = env.get(key)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {value!r}") from None


@dataclass(frozen=True)
class HubSettings:
    """Runtime configuration for the hub and its LLM endpoint."""

    llm_base_url: str = DEFAULT_LLM_BASE_URL
    llm_model: str = DEFAULT_LLM_MODEL
    llm_api_key: str = DEFAULT_LLM_API_KEY
    llm_temperature: float = DEFAULT_TEMPERATURE
    llm_max_tokens: int = DEFAULT_MAX_TOKENS
    llm_timeout: float = DEFAULT_TIMEOUT
    llm_max_retries: int = DEFAULT_MAX_RETRIES
    llm_json_mode: bool = True
    default_agent: Optional[str] = DEFAULT_AGENT_TAG
    log_level: str = "INFO"
    log_json: bool = False
    server_port: int = DEFAULT_SERVER_PORT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "HubSettings":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)

        Raises:
            ValueError: If a numeric variable cannot be parsed
        """
        env = os.environ if environ is None else environ

        default_agent = env.get("HUB_DEFAULT_AGENT", DEFAULT_AGENT_TAG).strip()

        return cls(
            llm_base_url=env.get("HUB_LLM_BASE_URL", DEFAULT_LLM_BASE_URL),
            llm_model=env.get("HUB_LLM_MODEL", DEFAULT_LLM_MODEL),
            llm_api_key=env.get("HUB_LLM_API_KEY", DEFAULT_LLM_API_KEY),
            llm_temperature=_get_float(env, "HUB_LLM_TEMPERATURE", DEFAULT_TEMPERATURE),
            llm_max_tokens=_get_int(env, "HUB_LLM_MAX_TOKENS", DEFAULT_MAX_TOKENS),
            llm_timeout=_get_float(env, "HUB_LLM_TIMEOUT", DEFAULT_TIMEOUT),
            llm_max_retries=max(1, _get_int(env, "HUB_LLM_MAX_RETRIES", DEFAULT_MAX_RETRIES)),
            llm_json_mode=_get_bool(env, "HUB_LLM_JSON_MODE", True),
            default_agent=default_agent or None,
            log_level=env.get("HUB_LOG_LEVEL", "INFO"),
            log_json=_get_bool(env, "HUB_LOG_JSON", False),
            server_port=_get_int(env, "GRADIO_SERVER_PORT", DEFAULT_SERVER_PORT),
        )

    def with_llm(self, *, base_url: str, model: str, api_key: str) -> "HubSettings":
        """Return a copy pointing at a different LLM endpoint."""
        return replace(
            self,
            llm_base_url=base_url or self.llm_base_url,
            llm_model=model or self.llm_model,
            llm_api_key=api_key or self.llm_api_key,
        )


__all__ = [
    "HubSettings",
    "DEFAULT_LLM_BASE_URL",
    "DEFAULT_LLM_MODEL",
    "DEFAULT_AGENT_TAG",
]
