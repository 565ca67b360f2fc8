"""
Root conftest to ensure proper import paths and share test doubles.

This file exists at the project root so the project directory is on
sys.path before pytest starts collecting tests.
"""

import sys
from pathlib import Path
from typing import List, Union
from unittest.mock import MagicMock

import pytest

# Ensure project root is in Python path
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from agents_hub.agents.base import AgentHandler, AgentReply  # noqa: E402
from agents_hub.config import HubSettings  # noqa: E402
from agents_hub.llm.types import InferenceRequest, InferenceResult  # noqa: E402
from agents_hub.tools import CapabilityToolCatalog, register_all_tools  # noqa: E402


# ============================================================================
# Test Doubles
# ============================================================================

class FakeLLMClient:
    """Stands in for LLMClient.

    Each queued item is either the raw model text to return or an
    exception to raise. The last item repeats once the queue runs dry.
    """

    def __init__(self, *responses: Union[str, BaseException]):
        self.responses: List[Union[str, BaseException]] = list(responses) or ["{}"]
        self.requests: List[InferenceRequest] = []

    @property
    def calls(self) -> int:
        return len(self.requests)

    @property
    def last_prompt(self) -> str:
        return self.requests[-1].messages[-1].content

    async def complete(self, request: InferenceRequest) -> InferenceResult:
        self.requests.append(request)
        item = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(item, BaseException):
            raise item
        return InferenceResult(message=item, finish_reason="stop")


class StubHandler(AgentHandler):
    """Handler with a scripted outcome, for hub and router tests."""

    def __init__(self, agent_id: str, outcome: Union[str, BaseException] = "done"):
        self.agent_id = agent_id
        self.outcome = outcome
        self.tasks: List[str] = []

    async def invoke(self, task: str) -> AgentReply:
        self.tasks.append(task)
        if isinstance(self.outcome, BaseException):
            raise self.outcome
        return AgentReply(agent_id=self.agent_id, status="Completed", body=self.outcome)


# ============================================================================
# Shared Test Fixtures
# ============================================================================

@pytest.fixture
def anyio_backend():
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def mock_logger():
    """Create a mock structlog-style logger.

    The logger supports:
    - bind(**kwargs) -> logger (returns itself with context)
    - debug/info/warning/error/exception methods
    """
    logger = MagicMock()
    logger.bind.return_value = logger
    return logger


@pytest.fixture
def hub_settings():
    return HubSettings(llm_model="test-model", llm_api_key="test-key")


@pytest.fixture
def fake_llm():
    return FakeLLMClient()


@pytest.fixture
def tool_catalog(mock_logger):
    catalog = CapabilityToolCatalog()
    register_all_tools(catalog, logger=mock_logger)
    return catalog
