"""
Engineering team agents.

All of them take the whole task as ``task_description`` and return
``response`` + ``status``. When the model output is unusable they
acknowledge the task instead of failing.
"""

import re
from typing import Any, Dict, List, Optional, Tuple

from agents_hub.agents.base import AgentReply, PromptAgent
from agents_hub.agents.schemas import TaskInput, TaskOutput
from agents_hub.tools.catalog import CapabilityToolCatalog, ToolId

_CODE_BLOCK_RE = re.compile(r"```([\w+#.-]*)[^\n]*\n(.*?)```", re.DOTALL)
_FILENAME_COMMENT_RE = re.compile(r"^\s*(?:#|//|--|/\*|<!--)\s*([\w./-]+\.\w+)")

_LANGUAGE_EXTENSIONS = {
    "python": "py",
    "py": "py",
    "javascript": "js",
    "js": "js",
    "typescript": "ts",
    "ts": "ts",
    "tsx": "tsx",
    "bash": "sh",
    "sh": "sh",
    "go": "go",
    "rust": "rs",
    "c": "c",
    "cpp": "cpp",
    "c++": "cpp",
    "java": "java",
    "html": "html",
    "css": "css",
    "sql": "sql",
    "json": "json",
    "yaml": "yaml",
}


class TaskAgent(PromptAgent):
    input_model = TaskInput
    output_model = TaskOutput
    has_fallback = True
    task_kind = "general"

    def fallback_output(self, data: TaskInput) -> TaskOutput:
        return TaskOutput(
            response=(
                f'Received {self.task_kind} task: "{data.task_description}". '
                f"The {self.display_name} is analysing this."
            ),
            status=self.fallback_status,
        )

    def render(self, output: TaskOutput) -> Tuple[str, str]:
        return output.status, output.response


def extract_code_blocks(text: str) -> List[Dict[str, Optional[str]]]:
    """Find fenced code blocks and guess a filename for each."""
    blocks = []
    for index, match in enumerate(_CODE_BLOCK_RE.finditer(text), start=1):
        language = match.group(1).lower() or None
        content = match.group(2)
        if not content.strip():
            continue
        first_line = content.splitlines()[0] if content else ""
        named = _FILENAME_COMMENT_RE.match(first_line)
        if named:
            filename = named.group(1)
        else:
            extension = _LANGUAGE_EXTENSIONS.get(language or "", "txt")
            filename = f"snippet_{index}.{extension}"
        blocks.append({"filename": filename, "language": language, "content": content})
    return blocks


class ProgrammerAgent(TaskAgent):
    """Writes, debugs and optimises code.

    Logs the task through the activity tool before the model call and
    "saves" every fenced code block in the answer. Tool results are
    appended to the reply.
    """

    agent_id = "programmer"
    display_name = "Programmer Agent"
    prompt_name = "agents.programmer"
    task_kind = "programming"

    def __init__(self, llm, *, tools: CapabilityToolCatalog, **kwargs):
        super().__init__(llm, **kwargs)
        self.tools = tools

    async def before_completion(self, data: TaskInput) -> Dict[str, Any]:
        summary = data.task_description.splitlines()[0][:120]
        result = await self.tools.invoke(
            ToolId.LOG_AGENT_ACTIVITY,
            agent_id=self.agent_id,
            activity_type="task_received",
            summary=summary,
            details=data.task_description,
        )
        return {"activity_id": result.get("log_id") or "unlogged"}

    async def after_completion(
        self, data: TaskInput, reply: AgentReply, context: Dict[str, Any]
    ) -> AgentReply:
        saved = []
        for block in extract_code_blocks(reply.body):
            result = await self.tools.invoke(
                ToolId.SAVE_AGENT_FILE,
                agent_id=self.agent_id,
                filename=block["filename"],
                content=block["content"],
                language=block["language"],
            )
            saved.append(result["file_path"])

        notes = []
        if saved:
            notes.append("Saved files: " + ", ".join(f"`{path}`" for path in saved))
        if context.get("activity_id") not in (None, "unlogged"):
            notes.append(f"Activity logged: `{context['activity_id']}`")
        if not notes:
            return reply

        body = reply.body.rstrip() + "\n\n" + "\n\n".join(f"_{note}_" for note in notes)
        return AgentReply(
            agent_id=reply.agent_id,
            status=reply.status,
            body=body,
            output=reply.output,
            acknowledged=reply.acknowledged,
        )


class QAEngineerAgent(TaskAgent):
    agent_id = "qa"
    display_name = "QA Engineer Agent"
    prompt_name = "agents.qa"
    task_kind = "QA"


class NetworkEngineerAgent(TaskAgent):
    agent_id = "network"
    display_name = "Network Engineer Agent"
    prompt_name = "agents.network"
    task_kind = "network engineering"


class HardwareEngineerAgent(TaskAgent):
    agent_id = "hardware"
    display_name = "Hardware Engineer Agent"
    prompt_name = "agents.hardware"
    task_kind = "hardware"
    fallback_status = "Task acknowledged - conceptual discussion"


class ArchitectAgent(TaskAgent):
    agent_id = "architect"
    display_name = "Architect Agent"
    prompt_name = "agents.architect"
    task_kind = "architecture"


class GameMasterAgent(TaskAgent):
    agent_id = "gamemaster"
    display_name = "Game-master Agent"
    prompt_name = "agents.gamemaster"
    task_kind = "game-master"
    fallback_status = "Task acknowledged - design in progress"


class CommsAgent(TaskAgent):
    agent_id = "comms"
    display_name = "Communications Agent"
    prompt_name = "agents.comms"
    task_kind = "communications"


__all__ = [
    "TaskAgent",
    "ProgrammerAgent",
    "QAEngineerAgent",
    "NetworkEngineerAgent",
    "HardwareEngineerAgent",
    "ArchitectAgent",
    "GameMasterAgent",
    "CommsAgent",
    "extract_code_blocks",
]
