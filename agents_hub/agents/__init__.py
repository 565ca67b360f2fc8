"""Agent handlers.

Importing this package also registers every agent prompt.
"""

import agents_hub.prompts  # noqa: F401  (registers prompts)

from .base import AgentHandler, AgentReply, PromptAgent, extract_json_object
from .parsing import StructuredTask, parse_structured_task, split_first_token
from .review import CriticAgent, EducationAgent
from .security import FlagAgent, LearnAgent, ReconAgent, VulnAgent
from .strategy import AssistantAgent, DirectorAgent
from .team import (
    ArchitectAgent,
    CommsAgent,
    GameMasterAgent,
    HardwareEngineerAgent,
    NetworkEngineerAgent,
    ProgrammerAgent,
    QAEngineerAgent,
    TaskAgent,
    extract_code_blocks,
)

__all__ = [
    "AgentHandler",
    "AgentReply",
    "PromptAgent",
    "TaskAgent",
    "extract_json_object",
    "extract_code_blocks",
    "StructuredTask",
    "parse_structured_task",
    "split_first_token",
    "DirectorAgent",
    "AssistantAgent",
    "ReconAgent",
    "VulnAgent",
    "FlagAgent",
    "LearnAgent",
    "ProgrammerAgent",
    "QAEngineerAgent",
    "NetworkEngineerAgent",
    "HardwareEngineerAgent",
    "ArchitectAgent",
    "GameMasterAgent",
    "CommsAgent",
    "CriticAgent",
    "EducationAgent",
]
