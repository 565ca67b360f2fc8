"""Tests for AgentRegistry and AgentDescriptor."""

import pytest

from agents_hub.orchestration import AgentDescriptor, AgentRegistry
from conftest import StubHandler


def _descriptor(agent_id, tag=None, **kwargs):
    return AgentDescriptor(
        agent_id=agent_id,
        name=kwargs.pop("name", agent_id.title()),
        mention_tag=tag or f"@{agent_id}",
        description=kwargs.pop("description", f"{agent_id} agent"),
        handler=StubHandler(agent_id),
        **kwargs,
    )


class TestAgentDescriptor:
    @pytest.mark.parametrize("tag", ["recon", "@", ""])
    def test_tag_must_start_with_at(self, tag):
        with pytest.raises(ValueError):
            _descriptor("recon", tag=tag)


class TestAgentRegistry:
    def test_lookup_is_exact(self, mock_logger):
        registry = AgentRegistry([_descriptor("recon"), _descriptor("vuln")], logger=mock_logger)

        assert registry.lookup("@recon").agent_id == "recon"
        assert registry.lookup("@Recon") is None
        assert registry.lookup("recon") is None
        assert registry.get("vuln").mention_tag == "@vuln"
        assert "@vuln" in registry
        assert len(registry) == 2

    def test_preserves_order(self, mock_logger):
        registry = AgentRegistry(
            [_descriptor("vuln"), _descriptor("recon"), _descriptor("flag")],
            logger=mock_logger,
        )

        assert registry.tags == ["@vuln", "@recon", "@flag"]
        assert [d.agent_id for d in registry.list_agents()] == ["vuln", "recon", "flag"]

    def test_duplicate_tag_rejected(self, mock_logger):
        with pytest.raises(ValueError, match="Duplicate mention tag"):
            AgentRegistry([_descriptor("a", tag="@x"), _descriptor("b", tag="@x")], logger=mock_logger)

    def test_duplicate_id_rejected(self, mock_logger):
        with pytest.raises(ValueError, match="Duplicate agent id"):
            AgentRegistry([_descriptor("a", tag="@x"), _descriptor("a", tag="@y")], logger=mock_logger)

    def test_default_agent(self, mock_logger):
        registry = AgentRegistry(
            [_descriptor("director"), _descriptor("recon")],
            default_tag="@director",
            logger=mock_logger,
        )

        assert registry.default_agent.agent_id == "director"

    def test_no_default(self, mock_logger):
        registry = AgentRegistry([_descriptor("recon")], logger=mock_logger)

        assert registry.default_agent is None

    def test_unknown_default_rejected(self, mock_logger):
        with pytest.raises(ValueError):
            AgentRegistry([_descriptor("recon")], default_tag="@director", logger=mock_logger)

    def test_list_is_a_copy(self, mock_logger):
        registry = AgentRegistry([_descriptor("recon")], logger=mock_logger)

        registry.list_agents().clear()

        assert len(registry) == 1

    def test_logs_build(self, mock_logger):
        AgentRegistry([_descriptor("recon")], logger=mock_logger)

        mock_logger.info.assert_called_with("agent_registry_built", agent_count=1, default_agent=None)
