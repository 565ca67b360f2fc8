"""
AI Agents Hub - Chainlit Application

Same hub as gradio_app.py behind a Chainlit UI. Each chat session owns
its own transcript; the agent registry and LLM client are shared.

Usage:
    chainlit run chainlit_app.py

Open browser: http://localhost:8000
"""
from typing import Dict, Optional

import chainlit as cl
import structlog
from dotenv import load_dotenv

load_dotenv()

from agents_hub._logging import configure_logging
from agents_hub.config import HubSettings
from agents_hub.errors import HubBusyError
from agents_hub.orchestration import AgentRegistry, AgentsHub, HubEventType, MessageRole
from agents_hub.rendering import message_markdown
from agents_hub.wiring import create_agent_registry, create_hub, create_llm_client

_settings = HubSettings.from_env()
configure_logging(_settings.log_level, _settings.log_json)

logger = structlog.get_logger()

# Global registry (shared across sessions)
_registry: Optional[AgentRegistry] = None


def _get_or_create_registry() -> AgentRegistry:
    global _registry

    if _registry is None:
        logger.info("initializing_agent_registry", model=_settings.llm_model)
        _registry = create_agent_registry(_settings, create_llm_client(_settings))
        logger.info("agent_registry_ready", agents=len(_registry))

    return _registry


def _author(message) -> str:
    if message.role == MessageRole.SYSTEM:
        return "System"
    return message.agent_name or message.sender


@cl.on_chat_start
async def on_chat_start():
    """Create the session hub and show its welcome message."""
    hub = create_hub(_get_or_create_registry())
    cl.user_session.set("hub", hub)

    for entry in hub.messages:
        await cl.Message(content=entry.text, author=_author(entry)).send()

    logger.info("chat_started", session_id=cl.user_session.get("id"))


@cl.on_message
async def on_message(message: cl.Message):
    """Route the message and mirror hub events into Chainlit messages."""
    hub: AgentsHub = cl.user_session.get("hub")
    session_id = cl.user_session.get("id")

    logger.info("message_received", session_id=session_id, length=len(message.content))

    # Working messages, keyed by transcript message id
    pending: Dict[str, cl.Message] = {}

    try:
        async for event in hub.submit_stream(message.content):
            if event.type == HubEventType.MESSAGE:
                entry = event.message
                if entry.role == MessageRole.USER:
                    continue
                ui_message = cl.Message(content=message_markdown(entry), author=_author(entry))
                await ui_message.send()
                if entry.in_progress:
                    pending[entry.message_id] = ui_message

            elif event.type == HubEventType.SETTLED:
                ui_message = pending.pop(event.message.message_id, None)
                if ui_message is not None:
                    ui_message.content = message_markdown(event.message)
                    await ui_message.update()

            elif event.type == HubEventType.NOTIFICATION:
                await cl.ErrorMessage(
                    content=f"{event.notification.title}: {event.notification.description}",
                    author="System",
                ).send()

    except HubBusyError as e:
        await cl.Message(content=f"⏳ {e}", author="System").send()


@cl.on_stop
async def on_stop():
    """Chainlit cancels the on_message task; the hub settles and returns to idle."""
    await cl.Message(
        content="⏸️ Processing stopped.",
        author="System",
    ).send()


@cl.on_chat_end
async def on_chat_end():
    logger.info("chat_ended", session_id=cl.user_session.get("id"))
