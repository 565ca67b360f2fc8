"""Hub wiring.

Builds the shared LLM client, tool catalog and agent registry from
``HubSettings``, and per-session hubs on top of them.

Usage:
    from agents_hub.config import HubSettings
    from agents_hub.wiring import create_llm_client, create_agent_registry, create_hub

    settings = HubSettings.from_env()
    registry = create_agent_registry(settings, create_llm_client(settings))
    hub = create_hub(registry)
    await hub.submit("@recon 22/tcp open ssh")
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type

from agents_hub._logging import get_component_logger
from agents_hub.agents import (
    ArchitectAgent,
    AssistantAgent,
    CommsAgent,
    CriticAgent,
    DirectorAgent,
    EducationAgent,
    FlagAgent,
    GameMasterAgent,
    HardwareEngineerAgent,
    LearnAgent,
    NetworkEngineerAgent,
    ProgrammerAgent,
    PromptAgent,
    QAEngineerAgent,
    ReconAgent,
    VulnAgent,
)
from agents_hub.config import HubSettings
from agents_hub.llm import EndpointSpec, LLMClient
from agents_hub.llm.adapters import OpenAIChatAdapter
from agents_hub.llm.endpoints import BackendKind
from agents_hub.orchestration import AgentDescriptor, AgentRegistry, AgentsHub
from agents_hub.tools import CapabilityToolCatalog, register_all_tools


# =============================================================================
# AGENT DEFINITIONS
# =============================================================================

@dataclass(frozen=True)
class AgentDefinition:
    handler_cls: Type[PromptAgent]
    mention_tag: str
    description: str
    input_hint: Optional[str] = None


AGENT_DEFINITIONS: List[AgentDefinition] = [
    AgentDefinition(
        DirectorAgent, "@director",
        "Breaks down objectives, gives strategic advice and delegates to other agents.",
        "<objective or question>",
    ),
    AgentDefinition(
        AssistantAgent, "@assistant",
        "Answers general questions about cybersecurity, CTFs and this toolkit.",
        "<question>",
    ),
    AgentDefinition(
        ReconAgent, "@recon",
        "Summarises Nmap scans and other reconnaissance output.",
        "<Nmap scan output>",
    ),
    AgentDefinition(
        VulnAgent, "@vuln",
        "Identifies and prioritises vulnerabilities.",
        "<Vulnerability list/data>",
    ),
    AgentDefinition(
        FlagAgent, "@flag",
        "Recognises and validates CTF flags.",
        "<Potential flag string>",
    ),
    AgentDefinition(
        LearnAgent, "@learn",
        "Recommends techniques from past CTF challenges.",
        "<vulnerability_type> <challenge_logs (optional)>",
    ),
    AgentDefinition(
        ProgrammerAgent, "@programmer",
        "Writes, debugs and optimises code.",
        "<coding task>",
    ),
    AgentDefinition(
        QAEngineerAgent, "@qa",
        "Designs test cases and testing strategies.",
        "<testing task>",
    ),
    AgentDefinition(
        NetworkEngineerAgent, "@network",
        "Designs secure network topologies and hardens services.",
        "<network task>",
    ),
    AgentDefinition(
        HardwareEngineerAgent, "@hardware",
        "Discusses FPGA, SDR and low-level systems concepts.",
        "<hardware task>",
    ),
    AgentDefinition(
        ArchitectAgent, "@architect",
        "Designs modular architectures and interface contracts.",
        "<architecture task>",
    ),
    AgentDefinition(
        CriticAgent, "@critic",
        "Reviews code, logic and agent outputs for flaws.",
        "<item to review> [Focus: <review focus>]",
    ),
    AgentDefinition(
        GameMasterAgent, "@gamemaster",
        "Designs CTF challenges and simulation scenarios.",
        "<challenge or scenario request>",
    ),
    AgentDefinition(
        EducationAgent, "@education",
        "Improves content for learning and skill progression.",
        "<content> Learning Goal: <goal> [Audience: <audience>]",
    ),
    AgentDefinition(
        CommsAgent, "@comms",
        "Drafts briefings, status reports and announcements.",
        "<message to draft>",
    ),
]


# =============================================================================
# FACTORIES
# =============================================================================

def create_endpoint(settings: HubSettings) -> EndpointSpec:
    return EndpointSpec(
        name="primary",
        base_url=settings.llm_base_url,
        backend_kind=BackendKind.OPENAI_CHAT,
        model=settings.llm_model,
        metadata={"api_key": settings.llm_api_key} if settings.llm_api_key else {},
    )


def create_llm_client(settings: HubSettings, logger=None) -> LLMClient:
    adapter = OpenAIChatAdapter(
        timeout=settings.llm_timeout,
        max_retries=settings.llm_max_retries,
    )
    return LLMClient(
        create_endpoint(settings),
        adapter_overrides={BackendKind.OPENAI_CHAT: adapter},
        logger=logger,
    )


def create_tool_catalog(logger=None) -> CapabilityToolCatalog:
    catalog = CapabilityToolCatalog()
    register_all_tools(catalog, logger=logger)
    return catalog


def _roster(definitions: List[AgentDefinition], exclude: str) -> str:
    return "\n".join(
        f"- {d.mention_tag} ({d.handler_cls.display_name}): {d.description}"
        for d in definitions
        if d.mention_tag != exclude
    )


def create_agent_registry(
    settings: HubSettings,
    llm,
    *,
    tools: Optional[CapabilityToolCatalog] = None,
    definitions: Optional[List[AgentDefinition]] = None,
    logger=None,
) -> AgentRegistry:
    """Instantiate every agent handler and build the registry.

    Args:
        settings: Model parameters and default agent
        llm: Anything with ``async complete(InferenceRequest)``
        tools: Tool catalog for tool-using agents (created if None)
        definitions: Agent table (defaults to AGENT_DEFINITIONS)
        logger: Optional injected logger
    """
    definitions = definitions if definitions is not None else AGENT_DEFINITIONS
    if tools is None:
        tools = create_tool_catalog(logger=logger)

    common: Dict[str, Any] = {
        "model": settings.llm_model,
        "temperature": settings.llm_temperature,
        "max_tokens": settings.llm_max_tokens,
        "json_mode": settings.llm_json_mode,
        "logger": logger,
    }

    descriptors = []
    for definition in definitions:
        cls = definition.handler_cls
        extra: Dict[str, Any] = {}
        if cls is DirectorAgent:
            extra["roster"] = _roster(definitions, exclude=definition.mention_tag)
        elif cls is ProgrammerAgent:
            extra["tools"] = tools
        handler = cls(llm, **common, **extra)
        descriptors.append(
            AgentDescriptor(
                agent_id=cls.agent_id,
                name=cls.display_name,
                mention_tag=definition.mention_tag,
                description=definition.description,
                handler=handler,
                input_hint=definition.input_hint,
            )
        )

    default_tag = settings.default_agent
    tags = {d.mention_tag for d in descriptors}
    if default_tag is not None and default_tag not in tags:
        get_component_logger("wiring", logger).warning(
            "default_agent_not_registered",
            default_agent=default_tag,
        )
        default_tag = None

    return AgentRegistry(descriptors, default_tag=default_tag, logger=logger)


def create_hub(registry: AgentRegistry, logger=None) -> AgentsHub:
    return AgentsHub(registry, logger=logger)


__all__ = [
    "AgentDefinition",
    "AGENT_DEFINITIONS",
    "create_endpoint",
    "create_llm_client",
    "create_tool_catalog",
    "create_agent_registry",
    "create_hub",
]
