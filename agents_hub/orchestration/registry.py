"""
Agent registry.

A static table of agent descriptors built once at startup. Lookups are
exact, case-sensitive matches on the mention tag. Nothing can be added or
removed after construction.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, List, Optional

from agents_hub._logging import get_component_logger
from agents_hub.agents.base import AgentHandler


@dataclass(frozen=True)
class AgentDescriptor:
    agent_id: str
    name: str
    mention_tag: str
    description: str
    handler: AgentHandler
    input_hint: Optional[str] = None

    def __post_init__(self):
        if not self.mention_tag.startswith("@") or len(self.mention_tag) < 2:
            raise ValueError(f"Mention tag must start with '@': {self.mention_tag!r}")


class AgentRegistry:
    """Immutable tag -> descriptor table.

    Args:
        descriptors: Agents in display order
        default_tag: Agent that receives input without a mention (None disables)

    Raises:
        ValueError: Duplicate ids or tags, or an unknown default tag
    """

    def __init__(
        self,
        descriptors: Iterable[AgentDescriptor],
        default_tag: Optional[str] = None,
        logger=None,
    ):
        self._logger = get_component_logger("AgentRegistry", logger)
        ordered: List[AgentDescriptor] = []
        by_tag: Dict[str, AgentDescriptor] = {}
        by_id: Dict[str, AgentDescriptor] = {}

        for descriptor in descriptors:
            if descriptor.mention_tag in by_tag:
                raise ValueError(f"Duplicate mention tag: {descriptor.mention_tag}")
            if descriptor.agent_id in by_id:
                raise ValueError(f"Duplicate agent id: {descriptor.agent_id}")
            by_tag[descriptor.mention_tag] = descriptor
            by_id[descriptor.agent_id] = descriptor
            ordered.append(descriptor)

        if default_tag is not None and default_tag not in by_tag:
            raise ValueError(f"Default agent {default_tag} is not registered")

        self._ordered = tuple(ordered)
        self._by_tag = MappingProxyType(by_tag)
        self._by_id = MappingProxyType(by_id)
        self._default_tag = default_tag

        self._logger.info(
            "agent_registry_built",
            agent_count=len(self._ordered),
            default_agent=default_tag,
        )

    def lookup(self, tag: str) -> Optional[AgentDescriptor]:
        return self._by_tag.get(tag)

    def get(self, agent_id: str) -> Optional[AgentDescriptor]:
        return self._by_id.get(agent_id)

    @property
    def default_agent(self) -> Optional[AgentDescriptor]:
        if self._default_tag is None:
            return None
        return self._by_tag[self._default_tag]

    def list_agents(self) -> List[AgentDescriptor]:
        return list(self._ordered)

    @property
    def tags(self) -> List[str]:
        return [d.mention_tag for d in self._ordered]

    def __len__(self) -> int:
        return len(self._ordered)

    def __contains__(self, tag: str) -> bool:
        return tag in self._by_tag


__all__ = ["AgentDescriptor", "AgentRegistry"]
