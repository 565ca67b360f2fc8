from .settings import (
    HubSettings,
    DEFAULT_LLM_BASE_URL,
    DEFAULT_LLM_MODEL,
    DEFAULT_AGENT_TAG,
)

__all__ = [
    "HubSettings",
    "DEFAULT_LLM_BASE_URL",
    "DEFAULT_LLM_MODEL",
    "DEFAULT_AGENT_TAG",
]
