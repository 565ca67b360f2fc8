"""Tests for HubSettings."""

import pytest

from agents_hub.config import DEFAULT_AGENT_TAG, DEFAULT_LLM_BASE_URL, HubSettings


class TestFromEnv:
    def test_defaults(self):
        settings = HubSettings.from_env({})

        assert settings.llm_base_url == DEFAULT_LLM_BASE_URL
        assert settings.llm_model == "llama3.2"
        assert settings.default_agent == DEFAULT_AGENT_TAG == "@director"
        assert settings.llm_max_retries == 1
        assert settings.llm_json_mode is True
        assert settings.server_port == 8001

    def test_overrides(self):
        settings = HubSettings.from_env({
            "HUB_LLM_BASE_URL": "https://api.openai.com/v1",
            "HUB_LLM_MODEL": "gpt-4o-mini",
            "HUB_LLM_API_KEY": "sk-test",
            "HUB_LLM_TEMPERATURE": "0.0",
            "HUB_LLM_MAX_TOKENS": "512",
            "HUB_LLM_TIMEOUT": "30",
            "HUB_LLM_JSON_MODE": "off",
            "HUB_LOG_JSON": "true",
            "GRADIO_SERVER_PORT": "7860",
        })

        assert settings.llm_base_url == "https://api.openai.com/v1"
        assert settings.llm_model == "gpt-4o-mini"
        assert settings.llm_api_key == "sk-test"
        assert settings.llm_temperature == 0.0
        assert settings.llm_max_tokens == 512
        assert settings.llm_timeout == 30.0
        assert settings.llm_json_mode is False
        assert settings.log_json is True
        assert settings.server_port == 7860

    @pytest.mark.parametrize("value", ["", "   "])
    def test_empty_default_agent_disables_fallback(self, value):
        assert HubSettings.from_env({"HUB_DEFAULT_AGENT": value}).default_agent is None

    def test_custom_default_agent(self):
        assert HubSettings.from_env({"HUB_DEFAULT_AGENT": " @assistant "}).default_agent == "@assistant"

    def test_retries_at_least_one(self):
        assert HubSettings.from_env({"HUB_LLM_MAX_RETRIES": "0"}).llm_max_retries == 1

    def test_bad_number(self):
        with pytest.raises(ValueError, match="HUB_LLM_MAX_TOKENS"):
            HubSettings.from_env({"HUB_LLM_MAX_TOKENS": "lots"})

    @pytest.mark.parametrize("value,expected", [
        ("1", True),
        (" YES ", True),
        ("on", True),
        ("0", False),
        ("nope", False),
        ("  ", True),
    ])
    def test_bool_values(self, value, expected):
        assert HubSettings.from_env({"HUB_LLM_JSON_MODE": value}).llm_json_mode is expected


class TestWithLlm:
    def test_replaces_endpoint(self, hub_settings):
        updated = hub_settings.with_llm(base_url="http://gpu:8000/v1", model="qwen2.5", api_key="k")

        assert updated.llm_base_url == "http://gpu:8000/v1"
        assert updated.llm_model == "qwen2.5"
        assert updated.llm_api_key == "k"
        assert hub_settings.llm_model == "test-model"

    def test_blank_values_keep_current(self, hub_settings):
        updated = hub_settings.with_llm(base_url="", model="", api_key="")

        assert updated == hub_settings
