"""
Mock workspace tools used by the engineering agents.

Nothing is persisted: each tool logs what it would have done and returns a
fabricated identifier so the agent can mention it in its reply.
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import structlog

STORAGE_ROOT = "agent_storage"

logger = structlog.get_logger("tools.workspace")


def log_agent_activity(
    agent_id: str,
    activity_type: str,
    summary: str,
    details: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Record an agent activity (mock).

    Returns:
        {
            "status": "success",
            "log_id": str,     # e.g. "programmer_log_1a2b3c4d"
            "logged_at": str   # ISO-8601 UTC
        }
    """
    log_id = f"{agent_id}_log_{uuid.uuid4().hex[:8]}"
    logger.info(
        "agent_activity_logged",
        agent_id=agent_id,
        activity_type=activity_type,
        summary=summary,
        details_length=len(details) if details else 0,
        log_id=log_id,
    )
    return {
        "status": "success",
        "log_id": log_id,
        "logged_at": datetime.now(timezone.utc).isoformat(),
    }


def save_agent_file(
    agent_id: str,
    filename: str,
    content: str,
    language: Optional[str] = None,
) -> Dict[str, Any]:
    """
    "Save" a generated file to the agent's storage area (mock).

    The filename is reduced to its last path component so a reply cannot
    point outside the agent's directory.
    """
    safe_name = filename.replace("\\", "/").rsplit("/", 1)[-1].strip() or "untitled.txt"
    path = f"{STORAGE_ROOT}/{agent_id}/{safe_name}"
    logger.info(
        "agent_file_saved",
        agent_id=agent_id,
        path=path,
        language=language,
        size=len(content),
    )
    return {
        "status": "success",
        "file_path": path,
        "bytes": len(content.encode("utf-8")),
    }


__all__ = ["log_agent_activity", "save_agent_file", "STORAGE_ROOT"]
