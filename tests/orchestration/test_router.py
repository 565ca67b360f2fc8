"""Tests for mention parsing and routing."""

import pytest

from agents_hub.orchestration import (
    AgentDescriptor,
    AgentRegistry,
    MessageRouter,
    RouteKind,
    parse_mention,
)
from conftest import StubHandler


def _registry(mock_logger, default_tag=None):
    descriptors = [
        AgentDescriptor(
            agent_id=agent_id,
            name=agent_id.title(),
            mention_tag=f"@{agent_id}",
            description="",
            handler=StubHandler(agent_id),
        )
        for agent_id in ("director", "recon", "critic")
    ]
    return AgentRegistry(descriptors, default_tag=default_tag, logger=mock_logger)


class TestParseMention:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("@recon 22/tcp open", ("@recon", "22/tcp open")),
            ("  @recon   22/tcp open  ", ("@recon", "22/tcp open")),
            ("@recon", ("@recon", "")),
            ("@recon\nline one\nline two", ("@recon", "line one\nline two")),
            ("@flag_check flag{x}", ("@flag_check", "flag{x}")),
        ],
    )
    def test_mentions(self, raw, expected):
        assert parse_mention(raw) == expected

    @pytest.mark.parametrize("raw", ["hello @recon", "@", "@recon-x data", "email me@site.com", ""])
    def test_not_a_mention(self, raw):
        assert parse_mention(raw) is None


class TestMessageRouter:
    def test_routes_to_tagged_agent(self, mock_logger):
        decision = MessageRouter(_registry(mock_logger)).route("@recon 80/tcp open http")

        assert decision.kind == RouteKind.ROUTED
        assert decision.target.agent_id == "recon"
        assert decision.task == "80/tcp open http"
        assert decision.via_default is False

    def test_mention_without_task(self, mock_logger):
        decision = MessageRouter(_registry(mock_logger)).route("@critic")

        assert decision.kind == RouteKind.ROUTED
        assert decision.task == ""

    def test_unknown_tag(self, mock_logger):
        decision = MessageRouter(_registry(mock_logger, "@director")).route("@nobody hi")

        assert decision.kind == RouteKind.NOT_FOUND
        assert decision.tag == "@nobody"
        assert decision.target is None

    def test_tags_are_case_sensitive(self, mock_logger):
        decision = MessageRouter(_registry(mock_logger)).route("@Recon data")

        assert decision.kind == RouteKind.NOT_FOUND

    def test_malformed_leading_mention_not_sent_to_default(self, mock_logger):
        decision = MessageRouter(_registry(mock_logger, "@director")).route("@recon-x data")

        assert decision.kind == RouteKind.NOT_FOUND
        assert decision.tag == "@recon-x"

    def test_plain_text_goes_to_default(self, mock_logger):
        decision = MessageRouter(_registry(mock_logger, "@director")).route("  plan a CTF  ")

        assert decision.kind == RouteKind.ROUTED
        assert decision.target.agent_id == "director"
        assert decision.task == "plan a CTF"
        assert decision.via_default is True

    def test_mid_text_mention_goes_to_default_whole(self, mock_logger):
        decision = MessageRouter(_registry(mock_logger, "@director")).route("ask @recon about it")

        assert decision.target.agent_id == "director"
        assert decision.task == "ask @recon about it"

    def test_no_default(self, mock_logger):
        decision = MessageRouter(_registry(mock_logger)).route("plan a CTF")

        assert decision.kind == RouteKind.NO_MENTION
        assert decision.target is None
