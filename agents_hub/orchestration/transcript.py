"""
Append-only chat transcript.

Messages are immutable; the one permitted change is settling the
``in_progress`` flag of an agent's working message, which swaps in a copy.
Timestamps never go backwards even if the wall clock does.
"""

import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Iterator, List, Optional, Tuple, Union

from agents_hub.agents.base import AgentReply

USER_SENDER = "user"
SYSTEM_SENDER = "system"


class MessageRole(str, Enum):
    USER = "user"
    AGENT = "agent"
    SYSTEM = "system"


@dataclass(frozen=True)
class ChatMessage:
    message_id: str
    sender: str
    role: MessageRole
    content: Union[str, AgentReply]
    timestamp: datetime
    agent_name: Optional[str] = None
    in_progress: bool = False
    is_error: bool = False

    @property
    def text(self) -> str:
        """Plain markdown for the content."""
        if isinstance(self.content, AgentReply):
            return f"**{self.content.status}**\n\n{self.content.body}"
        return self.content


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_message_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


class Transcript:
    def __init__(self, clock: Callable[[], datetime] = _utcnow):
        self._clock = clock
        self._messages: List[ChatMessage] = []

    def _next_timestamp(self) -> datetime:
        now = self._clock()
        if self._messages and now < self._messages[-1].timestamp:
            return self._messages[-1].timestamp
        return now

    def append(
        self,
        sender: str,
        role: MessageRole,
        content: Union[str, AgentReply],
        *,
        agent_name: Optional[str] = None,
        in_progress: bool = False,
        is_error: bool = False,
    ) -> ChatMessage:
        message = ChatMessage(
            message_id=new_message_id(role.value),
            sender=sender,
            role=role,
            content=content,
            timestamp=self._next_timestamp(),
            agent_name=agent_name,
            in_progress=in_progress,
            is_error=is_error,
        )
        self._messages.append(message)
        return message

    def settle(self, message_id: str) -> Optional[ChatMessage]:
        """Clear ``in_progress`` on a message. Returns the settled copy, or None if already settled."""
        for index, message in enumerate(self._messages):
            if message.message_id != message_id:
                continue
            if not message.in_progress:
                return None
            settled = replace(message, in_progress=False)
            self._messages[index] = settled
            return settled
        raise KeyError(message_id)

    @property
    def messages(self) -> Tuple[ChatMessage, ...]:
        return tuple(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[ChatMessage]:
        return iter(tuple(self._messages))


__all__ = [
    "USER_SENDER",
    "SYSTEM_SENDER",
    "MessageRole",
    "ChatMessage",
    "Transcript",
    "new_message_id",
]
