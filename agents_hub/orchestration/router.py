"""
Mention router.

    "@recon 22/tcp open ssh"  -> routed to @recon, task "22/tcp open ssh"
    "@nobody hi"              -> not_found
    "how do I start?"         -> default agent with the whole input,
                                 or no_mention when no default is set
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from agents_hub.orchestration.registry import AgentDescriptor, AgentRegistry

# Anchored at the start; the task may span several lines
MENTION_RE = re.compile(r"^(@\w+)(?:\s+(.*))?$", re.ASCII | re.DOTALL)
# Leading "@token" that is not a well-formed tag, e.g. "@recon-x"
_MALFORMED_MENTION_RE = re.compile(r"^(@\S*)")


class RouteKind(str, Enum):
    ROUTED = "routed"
    NOT_FOUND = "not_found"
    NO_MENTION = "no_mention"


@dataclass(frozen=True)
class RouteDecision:
    kind: RouteKind
    task: str = ""
    target: Optional[AgentDescriptor] = None
    tag: Optional[str] = None
    via_default: bool = False


def parse_mention(raw_input: str):
    """Return (tag, remainder) or None when the input does not start with a mention."""
    match = MENTION_RE.match(raw_input.strip())
    if match is None:
        return None
    return match.group(1), (match.group(2) or "").strip()


class MessageRouter:
    def __init__(self, registry: AgentRegistry):
        self.registry = registry

    def route(self, raw_input: str) -> RouteDecision:
        mention = parse_mention(raw_input)

        if mention is not None:
            tag, task = mention
            descriptor = self.registry.lookup(tag)
            if descriptor is None:
                return RouteDecision(kind=RouteKind.NOT_FOUND, tag=tag)
            return RouteDecision(kind=RouteKind.ROUTED, task=task, target=descriptor, tag=tag)

        malformed = _MALFORMED_MENTION_RE.match(raw_input.strip())
        if malformed is not None:
            return RouteDecision(kind=RouteKind.NOT_FOUND, tag=malformed.group(1))

        default = self.registry.default_agent
        if default is None:
            return RouteDecision(kind=RouteKind.NO_MENTION)
        return RouteDecision(
            kind=RouteKind.ROUTED,
            task=raw_input.strip(),
            target=default,
            tag=default.mention_tag,
            via_default=True,
        )


__all__ = ["MENTION_RE", "RouteKind", "RouteDecision", "MessageRouter", "parse_mention"]
