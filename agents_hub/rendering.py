"""Transcript -> chat UI message conversion shared by the front-ends."""

from typing import Dict, Iterable, List

from agents_hub.orchestration.transcript import ChatMessage, MessageRole

WORKING_SUFFIX = "_(working...)_"


def message_header(message: ChatMessage) -> str:
    time_label = message.timestamp.strftime("%H:%M")
    if message.role == MessageRole.SYSTEM:
        return f"**System** · {time_label}"
    if message.role == MessageRole.AGENT:
        return f"**{message.agent_name or message.sender}** · {time_label}"
    return ""


def message_markdown(message: ChatMessage) -> str:
    """Render one transcript entry as markdown."""
    if message.role == MessageRole.USER:
        return message.text

    parts = [message_header(message), message.text]
    if message.in_progress:
        parts.append(WORKING_SUFFIX)
    return "\n\n".join(parts)


def to_chat_messages(messages: Iterable[ChatMessage]) -> List[Dict[str, str]]:
    """Convert transcript entries to ``{"role", "content"}`` dicts (user / assistant)."""
    return [
        {
            "role": "user" if m.role == MessageRole.USER else "assistant",
            "content": message_markdown(m),
        }
        for m in messages
    ]


__all__ = ["message_header", "message_markdown", "to_chat_messages", "WORKING_SUFFIX"]
