"""AI Agents Hub.

Mention-routed chat over a team of LLM-backed agents:

    @recon <Nmap output>     -> Reconnaissance Agent
    @critic <code> Focus: x  -> Critic Agent
    anything else            -> default agent (Technical Director)
"""

__version__ = "0.1.0"

from agents_hub.config import HubSettings
from agents_hub.errors import AgentBackendError, HubBusyError, HubError, TaskValidationError
from agents_hub.orchestration import AgentRegistry, AgentsHub, ChatMessage
from agents_hub.wiring import create_agent_registry, create_hub, create_llm_client

__all__ = [
    "__version__",
    "HubSettings",
    "HubError",
    "TaskValidationError",
    "AgentBackendError",
    "HubBusyError",
    "AgentRegistry",
    "AgentsHub",
    "ChatMessage",
    "create_agent_registry",
    "create_hub",
    "create_llm_client",
]
