"""
Tool registration.

Single entry point for registering all tools with a catalog. Called at
wiring time, not at import time.
"""

from typing import Any, Dict, Optional
import structlog

from agents_hub.tools.catalog import (
    CapabilityToolCatalog,
    ToolId,
    ToolCategory,
    RiskLevel,
)


def register_all_tools(
    catalog: CapabilityToolCatalog,
    logger: Optional[Any] = None,
) -> Dict[str, Any]:
    """
    Register all workspace tools.

    Args:
        catalog: Catalog to register into
        logger: Optional logger instance

    Returns:
        Dict with registration results:
        - count: Number of tools registered
        - registered: List of registered tool IDs
    """
    if logger is None:
        logger = structlog.get_logger("tools.registration")

    from agents_hub.tools.workspace_tools import (
        log_agent_activity,
        save_agent_file,
    )

    catalog.register(
        tool_id=ToolId.LOG_AGENT_ACTIVITY.value,
        func=log_agent_activity,
        description="Record a summary of an agent's task and intended approach",
        category=ToolCategory.AUDIT.value,
        risk_level=RiskLevel.WRITE.value,
        parameters={
            "agent_id": {"type": "string", "required": True},
            "activity_type": {"type": "string", "required": True},
            "summary": {"type": "string", "required": True},
            "details": {"type": "string", "required": False},
        },
    )

    catalog.register(
        tool_id=ToolId.SAVE_AGENT_FILE.value,
        func=save_agent_file,
        description="Save a generated file to the agent's storage area",
        category=ToolCategory.WORKSPACE.value,
        risk_level=RiskLevel.WRITE.value,
        parameters={
            "agent_id": {"type": "string", "required": True},
            "filename": {"type": "string", "required": True},
            "content": {"type": "string", "required": True},
            "language": {"type": "string", "required": False},
        },
    )

    registered_ids = [
        ToolId.LOG_AGENT_ACTIVITY.value,
        ToolId.SAVE_AGENT_FILE.value,
    ]

    logger.info(
        "hub_tools_registered",
        count=len(registered_ids),
        tools=registered_ids,
    )

    return {
        "count": len(registered_ids),
        "registered": registered_ids,
    }


__all__ = ["register_all_tools"]
