"""
Tool catalog for hub agents.

Typed tool identifiers, categories and risk levels plus a small registry
that agents call tools through. Tools are registered at wiring time by
``register_all_tools``, not at import time.
"""

import inspect
from enum import Enum
from typing import Any, Callable, Dict, FrozenSet, Optional


class ToolId(str, Enum):
    """Typed tool identifiers."""

    LOG_AGENT_ACTIVITY = "log_agent_activity"
    SAVE_AGENT_FILE = "save_agent_file"


class ToolCategory(str, Enum):
    """Tool categories for routing and access control."""

    AUDIT = "audit"  # Activity records
    WORKSPACE = "workspace"  # Agent file storage


class RiskLevel(str, Enum):
    """Risk levels for tool access control."""

    READ_ONLY = "read_only"  # Safe, no side effects
    WRITE = "write"  # Modifies state


# Tools agents may call through the catalog
EXPOSED_TOOL_IDS: FrozenSet[str] = frozenset([
    ToolId.LOG_AGENT_ACTIVITY.value,
    ToolId.SAVE_AGENT_FILE.value,
])


class ToolNotFoundError(LookupError):
    """Raised when invoking a tool that is not registered or not exposed."""


class CapabilityToolCatalog:
    """
    Registry of agent tools with metadata.

    Example:
        catalog = CapabilityToolCatalog()
        catalog.register(
            tool_id=ToolId.LOG_AGENT_ACTIVITY.value,
            func=log_agent_activity,
            description="Record an agent activity",
            category=ToolCategory.AUDIT.value,
            risk_level=RiskLevel.WRITE.value,
        )
        result = await catalog.invoke(ToolId.LOG_AGENT_ACTIVITY, agent_id="programmer", ...)
    """

    def __init__(
        self,
        capability_id: str = "agents_hub",
        description: str = "Agents hub workspace tools",
    ):
        self.capability_id = capability_id
        self.description = description
        self._tools: Dict[str, Dict[str, Any]] = {}

    def register(
        self,
        *,
        tool_id: str,
        func: Callable,
        description: str,
        category: str,
        risk_level: str,
        parameters: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Register a tool with the catalog.

        Args:
            tool_id: Unique tool identifier
            func: Tool function reference (sync or async)
            description: Human-readable description
            category: Tool category (from ToolCategory)
            risk_level: Risk level (from RiskLevel)
            parameters: Optional parameters schema
        """
        self._tools[tool_id] = {
            "id": tool_id,
            "func": func,
            "description": description,
            "category": category,
            "risk_level": risk_level,
            "parameters": parameters or {},
            "is_async": inspect.iscoroutinefunction(func),
        }

    def get_tool(self, tool_id: str) -> Optional[Dict[str, Any]]:
        return self._tools.get(tool_id)

    def has_tool(self, tool_id: str) -> bool:
        return tool_id in self._tools

    def get_all_tools(self) -> Dict[str, Dict[str, Any]]:
        return self._tools.copy()

    def get_exposed_tools(self) -> Dict[str, Dict[str, Any]]:
        """Get only exposed tools (available to agents)."""
        return {
            tid: info
            for tid, info in self._tools.items()
            if tid in EXPOSED_TOOL_IDS
        }

    async def invoke(self, tool_id: str, **kwargs: Any) -> Dict[str, Any]:
        """Call an exposed tool by id, awaiting it when it is async.

        Raises:
            ToolNotFoundError: Tool is not registered or not exposed
        """
        key = tool_id.value if isinstance(tool_id, ToolId) else tool_id
        info = self._tools.get(key)
        if info is None or key not in EXPOSED_TOOL_IDS:
            raise ToolNotFoundError(f"Tool '{key}' is not available")
        result = info["func"](**kwargs)
        if info["is_async"]:
            result = await result
        return result

    @property
    def tool_count(self) -> int:
        return len(self._tools)


__all__ = [
    "ToolId",
    "ToolCategory",
    "RiskLevel",
    "EXPOSED_TOOL_IDS",
    "ToolNotFoundError",
    "CapabilityToolCatalog",
]
