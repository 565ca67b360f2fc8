"""Smoke tests for the public package surface."""

import agents_hub


def test_version():
    assert agents_hub.__version__ == "0.1.0"


def test_public_names():
    for name in agents_hub.__all__:
        assert hasattr(agents_hub, name), name


def test_prompts_registered_on_import():
    from agents_hub.prompts import PromptRegistry

    names = PromptRegistry.get_instance().list_prompts()
    assert "agents.recon" in names
    assert "agents.director" in names


def test_logging_helpers():
    from agents_hub import _logging

    assert not hasattr(_logging, "get_logger")
    bound = _logging.get_component_logger("Hub", logger=_logging.structlog.get_logger())
    assert bound is not None
