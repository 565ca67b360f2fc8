"""
Workspace tools for hub agents.

Usage:
    from agents_hub.tools import CapabilityToolCatalog, register_all_tools

    catalog = CapabilityToolCatalog()
    register_all_tools(catalog)
"""

from .catalog import (
    ToolId,
    ToolCategory,
    RiskLevel,
    EXPOSED_TOOL_IDS,
    ToolNotFoundError,
    CapabilityToolCatalog,
)
from .registration import register_all_tools
from .workspace_tools import log_agent_activity, save_agent_file

__all__ = [
    "register_all_tools",
    "ToolId",
    "ToolCategory",
    "RiskLevel",
    "EXPOSED_TOOL_IDS",
    "ToolNotFoundError",
    "CapabilityToolCatalog",
    "log_agent_activity",
    "save_agent_file",
]
