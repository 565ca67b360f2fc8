"""
Prompt-backed agent handlers.

Every agent follows the same pipeline:

    task text -> input model -> prompt -> one chat completion (JSON mode)
              -> JSON object -> output model -> AgentReply

Subclasses declare their models and prompt name, and override
``parse_task`` / ``prompt_context`` / ``render`` where their input or
output needs more than the defaults.
"""

from __future__ import annotations

import json
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional, Tuple, Type

from pydantic import BaseModel, ValidationError

from agents_hub._logging import get_component_logger
from agents_hub.agents.schemas import AgentInput, AgentOutput
from agents_hub.errors import AgentBackendError, TaskValidationError
from agents_hub.llm.types import ErrorCategory, InferenceRequest, LLMError, Message
from agents_hub.prompts.registry import PromptRegistry

JSON_SYSTEM_MESSAGE = (
    "You are one agent in a team of AI agents. "
    "Respond ONLY with a single valid JSON object matching the requested output format. "
    "Do not add any text before or after the JSON."
)

_FENCE_RE = re.compile(r"```(?:json|JSON)?\s*\n?(.*?)```", re.DOTALL)


@dataclass(frozen=True)
class AgentReply:
    """Renderable result of one agent invocation."""
    agent_id: str
    status: str
    body: str
    output: Optional[BaseModel] = None
    acknowledged: bool = False


class AgentHandler(ABC):
    """Anything the hub can hand a task string to."""

    agent_id: ClassVar[str]

    @abstractmethod
    async def invoke(self, task: str) -> AgentReply:
        """Run the agent on a task.

        Raises:
            TaskValidationError: The task is missing required input
            AgentBackendError: The LLM call failed or returned nothing usable
        """
        ...


def extract_json_object(text: str) -> Dict[str, Any]:
    """Pull the first JSON object out of a model reply.

    Accepts bare JSON, ```json fenced blocks and JSON surrounded by prose.

    Raises:
        ValueError: No JSON object found
    """
    candidates = [m.group(1) for m in _FENCE_RE.finditer(text)]
    candidates.append(text)

    for candidate in candidates:
        candidate = candidate.strip()
        start = candidate.find("{")
        end = candidate.rfind("}")
        if start == -1 or end <= start:
            continue
        try:
            parsed = json.loads(candidate[start:end + 1])
        except json.JSONDecodeError:
            continue
        if isinstance(parsed, dict):
            return parsed

    raise ValueError("no JSON object in model output")


class PromptAgent(AgentHandler):
    """Base class for agents backed by a single registered prompt."""

    prompt_name: ClassVar[str]
    input_model: ClassVar[Type[AgentInput]]
    output_model: ClassVar[Type[AgentOutput]]
    display_name: ClassVar[str] = "Agent"

    # Agents with a fallback acknowledge the task instead of failing when
    # the model output is unusable
    has_fallback: ClassVar[bool] = False
    fallback_status: ClassVar[str] = "Task acknowledged"

    def __init__(
        self,
        llm,
        *,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        json_mode: bool = True,
        prompt_registry: Optional[PromptRegistry] = None,
        logger=None,
    ):
        self.llm = llm
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.json_mode = json_mode
        self.prompts = prompt_registry or PromptRegistry.get_instance()
        self._logger = get_component_logger(type(self).__name__, logger).bind(
            agent_id=self.agent_id
        )

    # ─── Input ────────────────────────────────────────────────

    def parse_task(self, task: str) -> Dict[str, Any]:
        """Map task text onto input fields. Default: the whole task fills the first field."""
        first_field = next(iter(self.input_model.model_fields))
        return {first_field: task}

    def build_input(self, task: str) -> AgentInput:
        fields = self.parse_task(task)
        try:
            return self.input_model(**fields)
        except ValidationError as exc:
            error = exc.errors()[0]
            field_name = str(error["loc"][0]) if error.get("loc") else None
            label = (field_name or "input").replace("_", " ")
            if error.get("type") in ("string_too_short", "missing"):
                message = f"Missing {label}."
            else:
                message = f"Invalid {label}: {error.get('msg')}."
            raise TaskValidationError(message, field=field_name) from exc

    # ─── Prompt ───────────────────────────────────────────────

    def prompt_context(self, data: AgentInput) -> Dict[str, Any]:
        return {k: ("" if v is None else v) for k, v in data.model_dump().items()}

    def build_request(self, prompt: str) -> InferenceRequest:
        return InferenceRequest(
            messages=[
                Message(role="system", content=JSON_SYSTEM_MESSAGE),
                Message(role="user", content=prompt),
            ],
            model=self.model,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            json_mode=self.json_mode,
            stream=False,
        )

    # ─── Output ───────────────────────────────────────────────

    @abstractmethod
    def render(self, output: AgentOutput) -> Tuple[str, str]:
        """Return (status, markdown body) for a validated output."""
        ...

    def fallback_output(self, data: AgentInput) -> AgentOutput:
        raise NotImplementedError

    def acknowledge(self, data: AgentInput) -> AgentReply:
        output = self.fallback_output(data)
        status, body = self.render(output)
        return AgentReply(
            agent_id=self.agent_id,
            status=status,
            body=body,
            output=output,
            acknowledged=True,
        )

    def parse_output(self, text: str) -> AgentOutput:
        """
        Raises:
            LLMError: PARSE category when the text is not a valid output
        """
        try:
            payload = extract_json_object(text or "")
            return self.output_model.model_validate(payload)
        except (ValueError, ValidationError) as exc:
            raise LLMError(ErrorCategory.PARSE, str(exc), raw_backend=text) from exc

    # ─── Pipeline ─────────────────────────────────────────────

    async def before_completion(self, data: AgentInput) -> Dict[str, Any]:
        """Hook run after input validation; returns extra prompt context."""
        return {}

    async def after_completion(
        self, data: AgentInput, reply: AgentReply, context: Dict[str, Any]
    ) -> AgentReply:
        return reply

    async def invoke(self, task: str) -> AgentReply:
        data = self.build_input(task)
        self._logger.info("agent_invoked", task_length=len(task))

        context = self.prompt_context(data)
        context.update(await self.before_completion(data))
        prompt = self.prompts.get(self.prompt_name, context=context)

        try:
            result = await self.llm.complete(self.build_request(prompt))
            output = self.parse_output(result.message)
        except LLMError as exc:
            if exc.category == ErrorCategory.PARSE and self.has_fallback:
                self._logger.warning("agent_output_unusable", error=exc.message)
                return self.acknowledge(data)
            self._logger.warning(
                "agent_backend_failed",
                category=exc.category.value,
                error=exc.message,
            )
            raise AgentBackendError(
                f"{self.display_name} could not complete the task ({exc.category.value}).",
                cause=exc,
            ) from exc

        status, body = self.render(output)
        reply = AgentReply(agent_id=self.agent_id, status=status, body=body, output=output)
        reply = await self.after_completion(data, reply, context)
        self._logger.info("agent_completed", status=reply.status)
        return reply


__all__ = [
    "AgentReply",
    "AgentHandler",
    "PromptAgent",
    "extract_json_object",
    "JSON_SYSTEM_MESSAGE",
]
