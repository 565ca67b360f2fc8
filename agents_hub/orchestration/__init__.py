"""Mention routing, agent registry and the per-session hub controller."""

from .registry import AgentDescriptor, AgentRegistry
from .router import MENTION_RE, MessageRouter, RouteDecision, RouteKind, parse_mention
from .transcript import ChatMessage, MessageRole, Transcript
from .hub import (
    IDLE,
    AgentsHub,
    Awaiting,
    HubEvent,
    HubEventType,
    HubState,
    Idle,
    Notification,
    build_welcome_text,
)

__all__ = [
    "AgentDescriptor",
    "AgentRegistry",
    "MENTION_RE",
    "MessageRouter",
    "RouteDecision",
    "RouteKind",
    "parse_mention",
    "ChatMessage",
    "MessageRole",
    "Transcript",
    "IDLE",
    "AgentsHub",
    "Awaiting",
    "HubEvent",
    "HubEventType",
    "HubState",
    "Idle",
    "Notification",
    "build_welcome_text",
]
