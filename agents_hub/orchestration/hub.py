"""
Hub controller.

Owns one transcript and the ``Idle`` / ``Awaiting(tag)`` state for a chat
session. Each submission is routed, handed to at most one agent handler,
and every outcome becomes transcript entries plus UI events:

    submit("@recon 22/tcp open ssh")
      -> MESSAGE   user entry
      -> MESSAGE   "Understood! Working on task for Reconnaissance Agent..." (in progress)
      -> SETTLED   working entry no longer in progress
      -> MESSAGE   agent reply, or an error entry
      -> NOTIFICATION (errors only)
      -> DONE

Only one handler call may be pending per hub; front-ends disable input
while ``is_busy`` and a second submission raises ``HubBusyError``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import AsyncIterator, List, Optional, Union

from agents_hub._logging import get_component_logger
from agents_hub.errors import AgentBackendError, HubBusyError, TaskValidationError
from agents_hub.orchestration.registry import AgentDescriptor, AgentRegistry
from agents_hub.orchestration.router import MessageRouter, RouteKind
from agents_hub.orchestration.transcript import (
    SYSTEM_SENDER,
    USER_SENDER,
    ChatMessage,
    MessageRole,
    Transcript,
)

NO_MENTION_HINT = "To task an agent, start your message with their @mention tag (e.g., @recon)."
UNKNOWN_ERROR = "An unknown error occurred during AI processing."


# ═══════════════════════════════════════════════════════════════
# State
# ═══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Awaiting:
    agent_id: str
    tag: str


HubState = Union[Idle, Awaiting]

IDLE = Idle()


# ═══════════════════════════════════════════════════════════════
# Events
# ═══════════════════════════════════════════════════════════════

class HubEventType(str, Enum):
    MESSAGE = "message"
    SETTLED = "settled"
    NOTIFICATION = "notification"
    DONE = "done"


@dataclass(frozen=True)
class Notification:
    title: str
    description: str
    level: str = "error"


@dataclass(frozen=True)
class HubEvent:
    type: HubEventType
    message: Optional[ChatMessage] = None
    notification: Optional[Notification] = None


def build_welcome_text(registry: AgentRegistry) -> str:
    lines = [
        "Welcome to the AI Agents Hub! Task agents using their @mention tag "
        "and providing the required input.",
        "",
        "**Available Agents:**",
        "",
    ]
    for agent in registry.list_agents():
        lines.append(f"- **{agent.mention_tag}** {agent.name}: {agent.description}")
        if agent.input_hint:
            lines.append(f"  Hint: `{agent.mention_tag} {agent.input_hint}`")
    default = registry.default_agent
    if default is not None:
        lines.extend(["", f"Messages without a mention go to {default.mention_tag}."])
    return "\n".join(lines)


class AgentsHub:
    """Per-session controller over a shared, immutable agent registry."""

    def __init__(
        self,
        registry: AgentRegistry,
        *,
        transcript: Optional[Transcript] = None,
        welcome: bool = True,
        logger=None,
    ):
        self.registry = registry
        self.router = MessageRouter(registry)
        self.transcript = transcript if transcript is not None else Transcript()
        self._state: HubState = IDLE
        self._logger = get_component_logger("AgentsHub", logger)

        if welcome:
            self.transcript.append(SYSTEM_SENDER, MessageRole.SYSTEM, build_welcome_text(registry))

    @property
    def state(self) -> HubState:
        return self._state

    @property
    def is_busy(self) -> bool:
        return isinstance(self._state, Awaiting)

    @property
    def messages(self):
        return self.transcript.messages

    def _system(self, text: str) -> ChatMessage:
        return self.transcript.append(SYSTEM_SENDER, MessageRole.SYSTEM, text)

    def _agent_error(self, agent: AgentDescriptor, text: str) -> ChatMessage:
        return self.transcript.append(
            agent.agent_id,
            MessageRole.AGENT,
            text,
            agent_name=agent.name,
            is_error=True,
        )

    async def submit_stream(self, raw_input: str) -> AsyncIterator[HubEvent]:
        """Process one user submission, yielding events as entries are appended.

        Raises:
            HubBusyError: A handler call is already pending
        """
        if not raw_input or not raw_input.strip():
            return
        if isinstance(self._state, Awaiting):
            raise HubBusyError(self._state.tag)

        decision = self.router.route(raw_input)
        user_message = self.transcript.append(USER_SENDER, MessageRole.USER, raw_input.strip())

        # Routing misses append all their entries before the first yield
        if decision.kind == RouteKind.NOT_FOUND:
            self._logger.info("agent_not_found", tag=decision.tag)
            notice = self._system(f'Agent with mention tag "{decision.tag}" not found.')
            yield HubEvent(HubEventType.MESSAGE, message=user_message)
            yield HubEvent(HubEventType.MESSAGE, message=notice)
            yield HubEvent(HubEventType.DONE)
            return

        if decision.kind == RouteKind.NO_MENTION:
            notice = self._system(NO_MENTION_HINT)
            yield HubEvent(HubEventType.MESSAGE, message=user_message)
            yield HubEvent(HubEventType.MESSAGE, message=notice)
            yield HubEvent(HubEventType.DONE)
            return

        # Claim the hub in the same step as the busy check: no yield between them
        agent = decision.target
        working = self.transcript.append(
            agent.agent_id,
            MessageRole.AGENT,
            f"Understood! Working on task for {agent.name}...",
            agent_name=agent.name,
            in_progress=True,
        )
        self._state = Awaiting(agent_id=agent.agent_id, tag=agent.mention_tag)
        self._logger.info(
            "agent_task_dispatched",
            agent_id=agent.agent_id,
            via_default=decision.via_default,
            task_length=len(decision.task),
        )

        reply = None
        failure: Optional[Exception] = None
        try:
            yield HubEvent(HubEventType.MESSAGE, message=user_message)
            yield HubEvent(HubEventType.MESSAGE, message=working)
            reply = await agent.handler.invoke(decision.task)
        except TaskValidationError as exc:
            failure = exc
            self._logger.info("agent_task_rejected", agent_id=agent.agent_id, error=exc.message)
        except AgentBackendError as exc:
            failure = exc
            self._logger.warning(
                "agent_task_failed",
                agent_id=agent.agent_id,
                category=exc.category,
                error=exc.message,
            )
        except Exception as exc:
            failure = exc
            self._logger.exception("agent_task_crashed", agent_id=agent.agent_id)
        finally:
            settled = self.transcript.settle(working.message_id)
            self._state = IDLE

        notification = None
        if failure is None:
            result = self.transcript.append(
                agent.agent_id,
                MessageRole.AGENT,
                reply,
                agent_name=agent.name,
            )
        else:
            if isinstance(failure, TaskValidationError):
                detail = failure.message
                text = f"**Error:** {detail}"
                if agent.input_hint:
                    text += f"\n\nPlease check the input format: `{agent.mention_tag} {agent.input_hint}`"
            elif isinstance(failure, AgentBackendError):
                detail = failure.message
                text = f"**Error:** {detail}"
            else:
                detail = UNKNOWN_ERROR
                text = f"**Error:** {detail}"
            result = self._agent_error(agent, text)
            notification = Notification(title=f"Error with {agent.name}", description=detail)

        if settled is not None:
            yield HubEvent(HubEventType.SETTLED, message=settled)
        yield HubEvent(HubEventType.MESSAGE, message=result)
        if notification is not None:
            yield HubEvent(HubEventType.NOTIFICATION, notification=notification)
        yield HubEvent(HubEventType.DONE)

    async def submit(self, raw_input: str) -> List[ChatMessage]:
        """Process a submission to completion and return the entries it appended."""
        appended: List[ChatMessage] = []
        async for event in self.submit_stream(raw_input):
            if event.type == HubEventType.MESSAGE and event.message is not None:
                appended.append(event.message)
        return appended


__all__ = [
    "Idle",
    "Awaiting",
    "HubState",
    "IDLE",
    "HubEventType",
    "HubEvent",
    "Notification",
    "AgentsHub",
    "build_welcome_text",
    "NO_MENTION_HINT",
    "UNKNOWN_ERROR",
]
